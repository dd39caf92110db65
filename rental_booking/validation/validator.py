"""
Validation entry points used by the booking form controller.

Every function returns a ``ValidationResult`` instead of raising, so the
UI can render all field errors at once. Composite validation collects the
errors of every section; it never stops at the first failing one.

Usage:
    result = validate_rental_booking(form_state)
    if result.success:
        api.post("/rentals", json=result.data.to_payload())
    else:
        show_errors(result.first_errors())
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Generic, Optional, TypeVar, Union

from pydantic import BaseModel, ValidationError

from rental_booking.config import settings
from rental_booking.logging_context import get_form_logger
from rental_booking.schemas.booking_schema import (
    Agreements,
    PaymentMethod,
    PersonalDetails,
    RentalBooking,
    Schedule,
)
from rental_booking.schemas.partial import make_partial
from rental_booking.schemas.step_schema import STEP_SCHEMAS, STEP_SECTIONS, BookingStep
from rental_booking.validation.errors import (
    BookingValidationError,
    FieldValidationError,
    format_validation_errors,
    missing_field_error,
)

logger = get_form_logger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


@dataclass(frozen=True)
class ValidationResult(Generic[SchemaT]):
    """Outcome of validating one candidate object."""
    success: bool
    data: Optional[SchemaT] = None
    errors: list[FieldValidationError] = field(default_factory=list)

    def error_map(self) -> dict[str, list[str]]:
        """All messages grouped by dotted field path."""
        grouped: dict[str, list[str]] = {}
        for error in self.errors:
            grouped.setdefault(error.field, []).append(error.message)
        return grouped

    def first_errors(self) -> dict[str, str]:
        """First message per dotted field path, as displayed next to the inputs."""
        return {path: messages[0] for path, messages in self.error_map().items()}

    def unwrap(self) -> SchemaT:
        """Return the validated value or raise ``BookingValidationError``."""
        if not self.success or self.data is None:
            raise BookingValidationError(self.errors)
        return self.data


def validate(schema: type[SchemaT], data: Any) -> ValidationResult[SchemaT]:
    """Validate ``data`` against ``schema`` without raising on bad input."""
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        errors = format_validation_errors(schema, exc)
        if settings.validation.log_failures:
            shown = [e.field or "<root>" for e in errors[: settings.validation.max_logged_errors]]
            logger.debug(
                "%s validation failed with %d error(s): %s",
                schema.__name__, len(errors), ", ".join(shown),
            )
        return ValidationResult(success=False, errors=errors)
    return ValidationResult(success=True, data=value)


def _schema_for(schema: type[BaseModel], partial: bool) -> type[BaseModel]:
    return make_partial(schema) if partial else schema


def validate_rental_booking(data: Any) -> ValidationResult:
    """Validate a complete booking before submission."""
    return validate(RentalBooking, data)


def validate_partial_rental_booking(data: Any) -> ValidationResult:
    """Validate whatever part of the booking has been filled in so far."""
    return validate(make_partial(RentalBooking), data)


def validate_schedule(data: Any, *, partial: bool = False) -> ValidationResult:
    return validate(_schema_for(Schedule, partial), data)


def validate_personal_details(data: Any, *, partial: bool = False) -> ValidationResult:
    return validate(_schema_for(PersonalDetails, partial), data)


def validate_payment_method(data: Any, *, partial: bool = False) -> ValidationResult:
    return validate(_schema_for(PaymentMethod, partial), data)


def validate_agreements(data: Any, *, partial: bool = False) -> ValidationResult:
    return validate(_schema_for(Agreements, partial), data)


def validate_step(
    step: Union[BookingStep, str], form_data: Any, *, partial: bool = False
) -> ValidationResult:
    """
    Validate the form section edited on ``step``.

    ``form_data`` is the whole form state shaped like a RentalBooking.
    Error paths are prefixed with the section name so they match the
    paths, messages and codes produced by composite validation. With
    ``partial`` a section key that is absent passes; an explicit null
    section is rejected either way.

    Raises:
        ValueError: If ``step`` is not a booking step.
    """
    step = BookingStep(step)
    schema = _schema_for(STEP_SCHEMAS[step], partial)
    if not isinstance(form_data, Mapping):
        return validate(schema, form_data)

    section = STEP_SECTIONS[step]
    if section not in form_data:
        if partial:
            return validate(schema, {})
        error = missing_field_error(RentalBooking, (section,))
        logger.debug("%s step is missing its %s section", step.value, section)
        return ValidationResult(success=False, errors=[error])

    result = validate(schema, form_data[section])
    if result.success:
        return result
    return ValidationResult(
        success=False,
        errors=[error.prefixed(section) for error in result.errors],
    )
