"""Form session logging context for tracing one user's booking attempts.

Provides a form_session_id-aware logger that attaches the ID of the
booking form session to every log record, so the repeated step and
submission validations of a single user can be followed in the logs.

Usage:
    from rental_booking.logging_context import get_form_logger, set_form_session_id

    set_form_session_id("FORM-abc123")
    logger = get_form_logger(__name__)
    logger.debug("Validating schedule")  # record.form_session_id == "FORM-abc123"
"""

import logging
from contextvars import ContextVar

_form_session_id: ContextVar[str] = ContextVar("form_session_id", default="NO_FORM_SESSION")


def set_form_session_id(session_id: str) -> None:
    """Set the form session ID for the current context."""
    _form_session_id.set(session_id)


def get_form_session_id() -> str:
    """Retrieve the current form session ID."""
    return _form_session_id.get()


class FormSessionFilter(logging.Filter):
    """Injects form_session_id into every log record."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.form_session_id = _form_session_id.get()  # type: ignore[attr-defined]
        return True


def get_form_logger(name: str) -> logging.Logger:
    """Return a logger with the FormSessionFilter attached.

    The filter adds ``form_session_id`` to each record so formatters can
    include ``%(form_session_id)s`` in their format string.
    """
    logger = logging.getLogger(name)
    if not any(isinstance(f, FormSessionFilter) for f in logger.filters):
        logger.addFilter(FormSessionFilter())
    return logger
