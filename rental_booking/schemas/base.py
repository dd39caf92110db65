"""Common base for the booking form schemas."""

from typing import Any, ClassVar

from pydantic import BaseModel, ConfigDict


class BookingFormModel(BaseModel):
    """Immutable schema model that drops unknown keys from its input."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    is_partial: ClassVar[bool] = False

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict for the booking API.

        Partial models only emit the keys that were actually supplied.
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=self.is_partial)


class PartialFormModel(BookingFormModel):
    """Base for the all-optional variants built by ``make_partial``."""

    is_partial: ClassVar[bool] = True
