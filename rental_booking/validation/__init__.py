from rental_booking.validation.errors import (
    BookingValidationError,
    FieldValidationError,
    format_validation_errors,
)
from rental_booking.validation.validator import (
    ValidationResult,
    validate,
    validate_agreements,
    validate_partial_rental_booking,
    validate_payment_method,
    validate_personal_details,
    validate_rental_booking,
    validate_schedule,
    validate_step,
)

__all__ = [
    "FieldValidationError",
    "BookingValidationError",
    "format_validation_errors",
    "ValidationResult",
    "validate",
    "validate_rental_booking",
    "validate_partial_rental_booking",
    "validate_schedule",
    "validate_personal_details",
    "validate_payment_method",
    "validate_agreements",
    "validate_step",
]
