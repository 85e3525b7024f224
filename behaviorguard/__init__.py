"""Bot-risk scoring for CAPTCHA interaction telemetry."""
