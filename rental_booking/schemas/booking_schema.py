"""Rental booking form schemas, one per form section plus the composite request."""

from typing import Annotated, Literal

from pydantic import StrictStr

from rental_booking.schemas.base import BookingFormModel
from rental_booking.schemas.rules import (
    email_address,
    iso_datetime,
    matches,
    min_length,
    must_be_true,
    required,
)

GCASH_NUMBER_PATTERN = r"\+63[0-9]{10}"

DeliveryMethod = Literal["delivery", "pickup"]
PaymentType = Literal["gcash"]


class Schedule(BookingFormModel):
    """Rental period and how the costume gets to the renter."""

    start_date: Annotated[
        StrictStr, min_length(1, "Start date is required")
    ] = required("Start date is required")
    end_date: Annotated[
        StrictStr, min_length(1, "End date is required")
    ] = required("End date is required")
    delivery_method: DeliveryMethod = "delivery"
    delivery_address: Annotated[
        StrictStr, min_length(1, "Delivery address is required")
    ] = required("Delivery address is required")


class PersonalDetails(BookingFormModel):
    """Renter identity and contact details."""

    user_id: Annotated[
        StrictStr, min_length(1, "User ID is required")
    ] = required("User ID is required")
    first_name: Annotated[
        StrictStr,
        min_length(1, "First name is required"),
        min_length(2, "First name must be at least 2 characters"),
    ] = required("First name is required")
    last_name: Annotated[
        StrictStr,
        min_length(1, "Last name is required"),
        min_length(2, "Last name must be at least 2 characters"),
    ] = required("Last name is required")
    email: Annotated[
        StrictStr,
        min_length(1, "Email is required"),
        email_address("Please enter a valid email address"),
    ] = required("Email is required")
    phone_number: Annotated[
        StrictStr, min_length(3, "Phone number is required")
    ] = required("Phone number is required")
    date_of_birth: Annotated[
        StrictStr, iso_datetime("Date of birth must be a valid ISO date")
    ] = required("Date of birth must be a valid ISO date")


class PaymentMethod(BookingFormModel):
    """GCash is the only payment channel the backend accepts."""

    type: PaymentType = "gcash"
    gcash_number: Annotated[
        StrictStr,
        min_length(1, "GCash number is required"),
        matches(GCASH_NUMBER_PATTERN, "Please enter a valid Philippine GCash number"),
    ] = required("GCash number is required")


class Agreements(BookingFormModel):
    """Policy acknowledgements; each one must be explicitly accepted."""

    terms_accepted: Annotated[
        bool, must_be_true("You must accept the terms and conditions")
    ] = required("You must accept the terms and conditions")
    damage_policy: Annotated[
        bool, must_be_true("You must accept the damage policy")
    ] = required("You must accept the damage policy")
    cancellation_policy: Annotated[
        bool, must_be_true("You must accept the cancellation policy")
    ] = required("You must accept the cancellation policy")


class RentalBooking(BookingFormModel):
    """
    Complete rental booking request, as submitted to the booking API.

    All sections are validated together so every problem in the form is
    reported at once. ``special_instructions`` lives at the root, not in
    the schedule section.
    """

    costume_id: Annotated[
        StrictStr, min_length(1, "Costume ID is required")
    ] = required("Costume ID is required")
    schedule: Schedule
    personal_details: PersonalDetails
    payment_method: PaymentMethod
    agreements: Agreements
    special_instructions: StrictStr = ""
