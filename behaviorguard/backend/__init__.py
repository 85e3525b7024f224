"""HTTP service that scores CAPTCHA interaction telemetry for bot risk."""

from behaviorguard.backend.errors import EvaluationError, InvalidTelemetryError, MissingFieldError
from behaviorguard.backend.schemas import BehaviorTelemetry, RiskAssessment
from behaviorguard.backend.scorer import assess, evaluate

__all__ = [
    "BehaviorTelemetry",
    "EvaluationError",
    "InvalidTelemetryError",
    "MissingFieldError",
    "RiskAssessment",
    "assess",
    "evaluate",
]
