"""Request and response models for the behavior check endpoint."""

from __future__ import annotations

import math
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict

HUMAN_SCORE_LIMIT = 40


def _as_number(value: Any) -> float:
    """Read a telemetry number the way a browser client means it.

    ``null`` and blank strings count as 0. Anything that is not a number
    becomes NaN, which fails every comparison, so only the checks that read
    the field are switched off.
    """
    if value is None or isinstance(value, bool):
        return float(value or 0)
    if isinstance(value, int):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, float):
        return value
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            return float(text)
        except ValueError:
            return math.nan
    return math.nan


# Absent fields keep the default None and never trip a threshold.
Number = Annotated[float | None, BeforeValidator(_as_number)]


class BehaviorTelemetry(BaseModel):
    """Interaction telemetry captured while a user solved a CAPTCHA.

    Everything is optional: the record comes straight from the browser and
    the scorer decides what a missing value means.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    time: Number = None
    input: str | None = None
    keystrokes: Number = None
    clicks: Number = None
    typing_speed: Number = None
    captcha: Any = None
    method: Any = None

    @property
    def input_length(self) -> int:
        return len(self.input) if self.input is not None else 0


class RiskAssessment(BaseModel):
    """Outcome of running the heuristic checks over one telemetry record."""

    model_config = ConfigDict(frozen=True)

    risk_score: int = 0
    risk_factors: tuple[str, ...] = ()

    @property
    def is_human_like(self) -> bool:
        return self.risk_score < HUMAN_SCORE_LIMIT

    def to_response(self) -> dict[str, Any]:
        return {
            "valid": self.is_human_like,
            "risk_score": self.risk_score,
            "risk_factors": list(self.risk_factors),
        }


FAIL_OPEN_RESPONSE: dict[str, Any] = {"valid": True, "error": "Analysis failed"}
