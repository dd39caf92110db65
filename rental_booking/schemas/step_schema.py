"""
Booking form stepper: step identifiers, step order and step-to-section mapping.

The stepper is linear: schedule -> personal -> payment -> summary.
Which step is active or completed is tracked by the form controller;
this module only describes the steps and what each one edits.
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, StrictBool, StrictStr
from pydantic.alias_generators import to_camel

from rental_booking.schemas.booking_schema import (
    Agreements,
    PaymentMethod,
    PersonalDetails,
    Schedule,
)


class BookingStep(str, Enum):
    """Steps of the rental booking form, in display order."""
    SCHEDULE = "schedule"
    PERSONAL = "personal"
    PAYMENT = "payment"
    SUMMARY = "summary"


STEP_ORDER: list[BookingStep] = list(BookingStep)

# RentalBooking field edited on each step
STEP_SECTIONS: dict[BookingStep, str] = {
    BookingStep.SCHEDULE: "schedule",
    BookingStep.PERSONAL: "personal_details",
    BookingStep.PAYMENT: "payment_method",
    BookingStep.SUMMARY: "agreements",
}

STEP_SCHEMAS: dict[BookingStep, type[BaseModel]] = {
    BookingStep.SCHEDULE: Schedule,
    BookingStep.PERSONAL: PersonalDetails,
    BookingStep.PAYMENT: PaymentMethod,
    BookingStep.SUMMARY: Agreements,
}


class BookingStepConfig(BaseModel):
    """Display configuration for one step of the stepper."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
    )

    id: BookingStep
    title: StrictStr
    description: StrictStr
    is_completed: StrictBool
    is_active: StrictBool

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


def next_step(step: BookingStep) -> Optional[BookingStep]:
    """Step after ``step``, or None on the last step."""
    index = STEP_ORDER.index(BookingStep(step))
    if index + 1 < len(STEP_ORDER):
        return STEP_ORDER[index + 1]
    return None


def previous_step(step: BookingStep) -> Optional[BookingStep]:
    """Step before ``step``, or None on the first step."""
    index = STEP_ORDER.index(BookingStep(step))
    if index > 0:
        return STEP_ORDER[index - 1]
    return None
