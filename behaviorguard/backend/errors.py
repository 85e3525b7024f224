"""Errors raised while evaluating behavior telemetry."""

from __future__ import annotations


class EvaluationError(Exception):
    """Base error for a telemetry record that could not be scored."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MissingFieldError(EvaluationError):
    """A field the scorer needs is absent from the record."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidTelemetryError(EvaluationError):
    """The request body is not a telemetry object or a field has the wrong type."""
