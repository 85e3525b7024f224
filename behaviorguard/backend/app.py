from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from behaviorguard.backend.errors import EvaluationError, InvalidTelemetryError
from behaviorguard.backend.logging import get_logger
from behaviorguard.backend.schemas import FAIL_OPEN_RESPONSE
from behaviorguard.backend.scorer import AssessmentSink, evaluate, log_assessment
from behaviorguard.backend.settings import Settings, get_settings

log = get_logger("behaviorguard.backend.app")


def create_app(settings: Settings | None = None, sink: AssessmentSink | None = log_assessment) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Behavior Guard", version="1.0.0")
    app.state.sink = sink

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def method_not_allowed(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 405:
            return JSONResponse({"error": "Method not allowed"}, status_code=405, headers=exc.headers)
        return await http_exception_handler(request, exc)

    @app.get("/")
    def root():
        return {"status": "backend alive"}

    @app.post(settings.check_path)
    async def check(request: Request):

        # ---------------------------
        # PARSE + SCORE
        # ---------------------------
        try:
            payload = await request.json()
        except ValueError as exc:
            outcome = InvalidTelemetryError(f"Body is not valid JSON: {exc}")
        else:
            outcome = evaluate(payload, sink=app.state.sink)

        # ---------------------------
        # FAIL OPEN
        # ---------------------------
        # A broken scorer must never lock out a real user.
        if isinstance(outcome, EvaluationError):
            log.error("behavior_analysis_failed", error=outcome.message, exc_info=outcome)
            return FAIL_OPEN_RESPONSE

        return outcome.to_response()

    log.info("app_created", check_path=settings.check_path, mode=settings.app_mode)
    return app


app = create_app()
