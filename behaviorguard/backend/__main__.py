import uvicorn

from behaviorguard.backend.settings import get_settings

if __name__ == "__main__":
    settings = get_settings()
    uvicorn.run("behaviorguard.backend.app:app", host=settings.host, port=settings.port)
