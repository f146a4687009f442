"""Startup-time helpers for safe config logging."""

from paygate.common.config import GatewaySettings
from paygate.common.logging import logger

SECRET_MARKERS = ("key", "secret", "password", "token")


def _redacted(field: str, value):
    """Hide values of secret-looking fields; keep `None` visible as unset."""

    if value is None:
        return "<unset>"
    if any(marker in field.lower() for marker in SECRET_MARKERS):
        return "<redacted>"
    return value


def log_startup_config(settings: GatewaySettings, fields: list[str]) -> None:
    """Log selected resolved settings for quick troubleshooting."""

    config = {"service": settings.service_name}
    for field in fields:
        config[field] = _redacted(field, getattr(settings, field))
    logger.info("startup_config=%s", config)
