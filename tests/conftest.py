"""Pytest fixtures and configuration."""

from __future__ import annotations

import os

# Settings are cached on first use, so the environment must be in place
# before the application module is imported.
os.environ.setdefault("APP_MODE", "development")
os.environ.setdefault("LOG_LEVEL", "silent")

from typing import Any

import pytest
from fastapi.testclient import TestClient

from behaviorguard.backend.app import create_app
from behaviorguard.backend.schemas import BehaviorTelemetry, RiskAssessment


@pytest.fixture
def human_payload() -> dict[str, Any]:
    """Telemetry that trips no check."""
    return {
        "time": 10,
        "input": "hello world",
        "captcha": "hello world",
        "keystrokes": 15,
        "clicks": 2,
        "typing_speed": 4,
        "method": "text",
    }


@pytest.fixture
def human_telemetry(human_payload: dict[str, Any]) -> BehaviorTelemetry:
    return BehaviorTelemetry.model_validate(human_payload)


@pytest.fixture
def recorded() -> list[tuple[BehaviorTelemetry, RiskAssessment]]:
    return []


@pytest.fixture
def client(recorded: list[tuple[BehaviorTelemetry, RiskAssessment]]) -> TestClient:
    """Test client whose evaluation sink records every assessment."""
    app = create_app(sink=lambda t, a: recorded.append((t, a)))
    return TestClient(app)
