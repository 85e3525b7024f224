"""Offline tooling for exercising the heuristic scorer on synthetic telemetry."""
