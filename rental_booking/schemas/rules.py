"""
Reusable field rules for the booking form schemas.

Each factory returns a pydantic ``AfterValidator`` (or ``PlainValidator``)
that raises a ``PydanticCustomError`` carrying the exact message the form
UI shows. Stack several rules in one ``Annotated`` type; the first failing
rule is the one reported for that field.

Usage:
    FirstName = Annotated[
        StrictStr,
        min_length(1, "First name is required"),
        min_length(2, "First name must be at least 2 characters"),
    ]
"""

import re
from datetime import datetime
from typing import Any, Optional

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError, validate_email
from pydantic import AfterValidator, Field, PlainValidator
from pydantic_core import PydanticCustomError

from rental_booking.config import settings

REQUIRED_MESSAGE_KEY = "required_message"

# YYYY-MM-DDTHH:MM:SS with optional fraction, UTC designator only
_ISO_DATETIME_RE = re.compile(
    r"(?P<base>[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2})(?:\.[0-9]+)?Z"
)


def min_length(length: int, message: str) -> AfterValidator:
    """Reject strings shorter than ``length`` characters."""

    def check(value: str) -> str:
        if len(value) < length:
            raise PydanticCustomError("string_too_short", message)
        return value

    return AfterValidator(check)


def matches(pattern: str, message: str) -> AfterValidator:
    """Require the whole string to match ``pattern``."""
    compiled = re.compile(pattern)

    def check(value: str) -> str:
        if compiled.fullmatch(value) is None:
            raise PydanticCustomError("string_pattern_mismatch", message)
        return value

    return AfterValidator(check)


def _without_special_use_suffix(value: str) -> str:
    """Swap a special-use TLD (``.local``, ``.test``...) for ``example``.

    email-validator rejects those names even with deliverability checks
    off. The form only needs the syntax check, so the address is checked
    with a neutral domain of the same shape.
    """
    local, at, domain = value.rpartition("@")
    if not at:
        return value
    lowered = domain.lower()
    for name in SPECIAL_USE_DOMAIN_NAMES:
        if lowered == name or lowered.endswith("." + name):
            return f"{local}@{domain[: len(domain) - len(name)]}example"
    return value


def email_address(message: str) -> AfterValidator:
    """Require a syntactically valid email address.

    Only the syntax is checked: no DNS lookups and no requirement that
    the domain be publicly deliverable. The value is returned exactly as
    entered.
    """

    def check(value: str) -> str:
        try:
            validate_email(
                _without_special_use_suffix(value),
                check_deliverability=False,
                globally_deliverable=False,
                allow_smtputf8=settings.validation.email_allow_smtputf8,
            )
        except EmailNotValidError:
            raise PydanticCustomError("value_error.email", message) from None
        return value

    return AfterValidator(check)


def iso_datetime(message: str) -> AfterValidator:
    """Require an ISO-8601 UTC datetime string such as ``1990-05-01T00:00:00.000Z``.

    Date-only strings and offsets other than ``Z`` are rejected, as are
    well-formed strings naming impossible dates like February 30th.
    """

    def check(value: str) -> str:
        match = _ISO_DATETIME_RE.fullmatch(value)
        if match is None:
            raise PydanticCustomError("datetime_parsing", message)
        try:
            datetime.strptime(match.group("base"), "%Y-%m-%dT%H:%M:%S")
        except ValueError:
            raise PydanticCustomError("datetime_parsing", message) from None
        return value

    return AfterValidator(check)


def must_be_true(message: str) -> PlainValidator:
    """Accept only the boolean ``True``; everything else fails with ``message``."""

    def check(value: Any) -> bool:
        if value is not True:
            raise PydanticCustomError("literal_error", message)
        return value

    return PlainValidator(check)


def required(message: str, *, description: Optional[str] = None) -> Any:
    """Field marker recording the message used when the field is absent."""
    return Field(description=description, json_schema_extra={REQUIRED_MESSAGE_KEY: message})
