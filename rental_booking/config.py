"""
Centralized configuration with environment variable overrides.

Validation messages and field rules are fixed by the booking API contract
and are not configurable. Only logging and email parsing knobs live here.
"""

import logging
import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from rental_booking.logging_context import FormSessionFilter

load_dotenv()

logger = logging.getLogger(__name__)

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

LOG_FORMAT = "%(asctime)s [%(name)s] [%(form_session_id)s] %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _safe_int(env_var: str, default: str) -> int:
    """Parse an integer from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    try:
        return int(raw)
    except (ValueError, TypeError):
        raise ValueError(
            f"Invalid integer for {env_var}: {raw!r}"
        ) from None


def _safe_bool(env_var: str, default: str) -> bool:
    """Parse a boolean flag from an env var with a clear error on bad values."""
    raw = os.getenv(env_var, default)
    normalized = raw.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {env_var}: {raw!r}")


@dataclass(frozen=True)
class ValidationConfig:
    """Knobs for the validators and their failure logging."""

    email_allow_smtputf8: bool = _safe_bool("EMAIL_ALLOW_SMTPUTF8", "true")
    log_failures: bool = _safe_bool("LOG_VALIDATION_FAILURES", "true")
    max_logged_errors: int = _safe_int("MAX_LOGGED_ERRORS", "5")


@dataclass(frozen=True)
class AppConfig:
    """Root configuration aggregating all sub-configs."""

    validation: ValidationConfig = field(default_factory=ValidationConfig)
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    app_name: str = os.getenv("APP_NAME", "rental-booking-forms")


def _validate_config(config: AppConfig) -> None:
    """Validate configuration values are within acceptable ranges."""
    if config.validation.max_logged_errors < 1:
        raise ValueError(
            f"MAX_LOGGED_ERRORS must be >= 1, got {config.validation.max_logged_errors}"
        )
    if not isinstance(logging.getLevelName(config.log_level.upper()), int):
        raise ValueError(f"LOG_LEVEL is not a known level: {config.log_level!r}")
    if not config.app_name.strip():
        raise ValueError("APP_NAME must not be empty")


def _build_log_handler() -> logging.Handler:
    """Stream handler whose records always carry ``form_session_id``."""
    handler = logging.StreamHandler()
    handler.addFilter(FormSessionFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    return handler


def load_config() -> AppConfig:
    """Load and validate application configuration."""
    config = AppConfig()
    _validate_config(config)
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        handlers=[_build_log_handler()],
    )
    logger.info("Configuration loaded for '%s'", config.app_name)
    return config


# Singleton instance
settings = load_config()
