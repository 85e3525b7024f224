"""Heuristic bot scoring for CAPTCHA interaction telemetry.

Six independent threshold checks each add a fixed weight to the risk
score. A record scoring below ``HUMAN_SCORE_LIMIT`` is treated as human.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any

from pydantic import ValidationError

from behaviorguard.backend.errors import EvaluationError, InvalidTelemetryError, MissingFieldError
from behaviorguard.backend.logging import get_logger
from behaviorguard.backend.schemas import BehaviorTelemetry, RiskAssessment

log = get_logger("behaviorguard.backend.scorer")

AssessmentSink = Callable[[BehaviorTelemetry, RiskAssessment], None]

# Fixed thresholds, not calibrated from data.
FAST_SOLVE_SECONDS = 1.5
SLOW_SOLVE_SECONDS = 60
MIN_KEYSTROKE_RATIO = 0.9
SHORT_INPUT_LENGTH = 3
MIN_CLICKS = 1
MAX_TYPING_SPEED = 15  # chars/sec


@dataclass(frozen=True)
class Check:
    label: str
    weight: int
    triggered: Callable[[BehaviorTelemetry, int], bool]


def _lt(value: float | None, limit: float) -> bool:
    # An absent value never trips a threshold; NaN fails every comparison.
    return value is not None and value < limit


def _gt(value: float | None, limit: float) -> bool:
    return value is not None and value > limit


def _too_few_keystrokes(t: BehaviorTelemetry, length: int) -> bool:
    return _lt(t.keystrokes, length * MIN_KEYSTROKE_RATIO) and length > SHORT_INPUT_LENGTH


def _no_corrections(t: BehaviorTelemetry, length: int) -> bool:
    return t.keystrokes is not None and t.keystrokes == length and length > SHORT_INPUT_LENGTH


CHECKS: tuple[Check, ...] = (
    Check("unusually_fast_solution", 30, lambda t, _: _lt(t.time, FAST_SOLVE_SECONDS)),
    Check("unusually_slow_solution", 15, lambda t, _: _gt(t.time, SLOW_SOLVE_SECONDS)),
    Check("too_few_keystrokes", 20, _too_few_keystrokes),
    Check("no_input_interaction", 15, lambda t, _: _lt(t.clicks, MIN_CLICKS)),
    Check("superhuman_typing_speed", 25, lambda t, _: _gt(t.typing_speed, MAX_TYPING_SPEED)),
    Check("no_corrections_made", 10, _no_corrections),
)


def assess(telemetry: BehaviorTelemetry) -> RiskAssessment:
    """Run every check over ``telemetry`` and sum the weights that fire.

    Raises:
        MissingFieldError: ``input`` is absent, so keystroke checks cannot run.
    """
    if telemetry.input is None:
        raise MissingFieldError("input")

    length = len(telemetry.input)
    score = 0
    factors: list[str] = []
    for check in CHECKS:
        if check.triggered(telemetry, length):
            score += check.weight
            factors.append(check.label)

    return RiskAssessment(risk_score=score, risk_factors=tuple(factors))


def log_assessment(telemetry: BehaviorTelemetry, assessment: RiskAssessment) -> None:
    """Default sink: one structured log event per evaluation."""
    log.info(
        "behavior_assessed",
        input_length=telemetry.input_length,
        time=telemetry.time,
        keystrokes=telemetry.keystrokes,
        clicks=telemetry.clicks,
        typing_speed=telemetry.typing_speed,
        risk_score=assessment.risk_score,
        risk_factors=list(assessment.risk_factors),
        valid=assessment.is_human_like,
    )


def parse_telemetry(payload: Any) -> BehaviorTelemetry:
    """Validate a decoded JSON body into a telemetry record.

    Raises:
        InvalidTelemetryError: The body is not an object or ``input`` is not text.
    """
    if not isinstance(payload, Mapping):
        raise InvalidTelemetryError(f"Expected a JSON object, got {type(payload).__name__}")
    try:
        return BehaviorTelemetry.model_validate(dict(payload))
    except ValidationError as exc:
        raise InvalidTelemetryError(str(exc)) from exc


def evaluate(
    payload: Any,
    sink: AssessmentSink | None = log_assessment,
) -> RiskAssessment | EvaluationError:
    """Score a raw request body without raising.

    Returns the assessment on success. Anything that goes wrong while
    parsing, scoring or reporting comes back as an ``EvaluationError``
    instead, so the caller can fail open.
    """
    try:
        telemetry = parse_telemetry(payload)
        assessment = assess(telemetry)
        if sink is not None:
            sink(telemetry, assessment)
    except EvaluationError as exc:
        return exc
    except Exception as exc:  # noqa: BLE001
        error = EvaluationError(f"Unexpected {type(exc).__name__}: {exc}")
        error.__cause__ = exc
        return error
    return assessment
