from rental_booking.schemas.booking_schema import (
    Agreements,
    PaymentMethod,
    PersonalDetails,
    RentalBooking,
    Schedule,
)
from rental_booking.schemas.costume_schema import CostumeRentalInfo, RentalCalculation
from rental_booking.schemas.partial import (
    PartialAgreements,
    PartialPaymentMethod,
    PartialPersonalDetails,
    PartialRentalBooking,
    PartialSchedule,
    make_partial,
)
from rental_booking.schemas.step_schema import (
    STEP_ORDER,
    STEP_SCHEMAS,
    STEP_SECTIONS,
    BookingStep,
    BookingStepConfig,
    next_step,
    previous_step,
)

__all__ = [
    "Schedule",
    "PersonalDetails",
    "PaymentMethod",
    "Agreements",
    "RentalBooking",
    "PartialSchedule",
    "PartialPersonalDetails",
    "PartialPaymentMethod",
    "PartialAgreements",
    "PartialRentalBooking",
    "make_partial",
    "CostumeRentalInfo",
    "RentalCalculation",
    "BookingStep",
    "BookingStepConfig",
    "STEP_ORDER",
    "STEP_SECTIONS",
    "STEP_SCHEMAS",
    "next_step",
    "previous_step",
]
