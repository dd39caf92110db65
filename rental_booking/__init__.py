"""Validation schemas and type contracts for the costume rental booking form."""

from rental_booking.schemas import (
    Agreements,
    BookingStep,
    BookingStepConfig,
    CostumeRentalInfo,
    PartialRentalBooking,
    PaymentMethod,
    PersonalDetails,
    RentalBooking,
    RentalCalculation,
    Schedule,
    make_partial,
)
from rental_booking.validation import (
    BookingValidationError,
    FieldValidationError,
    ValidationResult,
    validate,
    validate_partial_rental_booking,
    validate_rental_booking,
    validate_step,
)

__version__ = "1.0.0"

__all__ = [
    "Schedule",
    "PersonalDetails",
    "PaymentMethod",
    "Agreements",
    "RentalBooking",
    "PartialRentalBooking",
    "make_partial",
    "CostumeRentalInfo",
    "RentalCalculation",
    "BookingStep",
    "BookingStepConfig",
    "FieldValidationError",
    "BookingValidationError",
    "ValidationResult",
    "validate",
    "validate_rental_booking",
    "validate_partial_rental_booking",
    "validate_step",
]
