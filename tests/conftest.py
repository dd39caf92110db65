"""Shared test fixtures and helpers."""

import copy
from typing import Any, Optional

import pytest

from rental_booking.logging_context import set_form_session_id

VALID_SCHEDULE: dict[str, Any] = {
    "start_date": "2024-01-01",
    "end_date": "2024-01-03",
    "delivery_method": "pickup",
    "delivery_address": "12 Mabini St, Quezon City",
}

VALID_PERSONAL_DETAILS: dict[str, Any] = {
    "user_id": "user-42",
    "first_name": "Maria",
    "last_name": "Santos",
    "email": "maria.santos@example.com",
    "phone_number": "+639171234567",
    "date_of_birth": "1990-05-01T00:00:00.000Z",
}

VALID_PAYMENT_METHOD: dict[str, Any] = {
    "type": "gcash",
    "gcash_number": "+639171234567",
}

VALID_AGREEMENTS: dict[str, Any] = {
    "terms_accepted": True,
    "damage_policy": True,
    "cancellation_policy": True,
}


def make_booking(
    costume_id: str = "costume-7",
    schedule: Optional[dict[str, Any]] = None,
    personal_details: Optional[dict[str, Any]] = None,
    payment_method: Optional[dict[str, Any]] = None,
    agreements: Optional[dict[str, Any]] = None,
    **extra: Any,
) -> dict[str, Any]:
    """Helper to build a booking form document; every section is valid by default."""
    booking = {
        "costume_id": costume_id,
        "schedule": {**VALID_SCHEDULE, **(schedule or {})},
        "personal_details": {**VALID_PERSONAL_DETAILS, **(personal_details or {})},
        "payment_method": {**VALID_PAYMENT_METHOD, **(payment_method or {})},
        "agreements": {**VALID_AGREEMENTS, **(agreements or {})},
    }
    booking.update(extra)
    return booking


def without(data: dict[str, Any], *path: str) -> dict[str, Any]:
    """Deep copy of ``data`` with the key at ``path`` removed."""
    result = copy.deepcopy(data)
    target = result
    for key in path[:-1]:
        target = target[key]
    del target[path[-1]]
    return result


@pytest.fixture
def booking_data():
    return make_booking()


@pytest.fixture(autouse=True)
def form_session():
    set_form_session_id("TEST-SESSION")
    return "TEST-SESSION"
