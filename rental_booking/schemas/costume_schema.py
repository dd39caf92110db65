"""Costume listing and rental price breakdown models shown next to the form."""

from typing import Any, Optional

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)
from pydantic.alias_generators import to_camel


class CostumeRentalInfo(BaseModel):
    """
    Costume being rented, as returned by the marketplace listing API.

    Listings carry more attributes than the form needs. Those are kept in
    ``extras`` instead of being dropped, while the known fields stay typed.
    """

    model_config = ConfigDict(frozen=True)

    id: StrictStr
    name: StrictStr
    price: StrictFloat
    image: Optional[StrictStr] = None
    description: Optional[StrictStr] = None
    category: Optional[StrictStr] = None
    size: Optional[StrictStr] = None
    extras: dict[str, Any] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def _collect_extras(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        known = set(cls.model_fields) - {"extras"}
        extras: dict[str, Any] = {}
        if isinstance(data.get("extras"), dict):
            extras.update(data["extras"])
        elif "extras" in data:
            # a listing attribute that happens to be called "extras"
            extras["extras"] = data["extras"]
        extras.update(
            {key: value for key, value in data.items() if key not in known and key != "extras"}
        )
        collected = {key: value for key, value in data.items() if key in known}
        collected["extras"] = extras
        return collected

    def get(self, key: str, default: Any = None) -> Any:
        """Look up a known field or an extra attribute by name."""
        if key in type(self).model_fields and key != "extras":
            return getattr(self, key)
        return self.extras.get(key, default)

    def to_payload(self) -> dict[str, Any]:
        """Flatten back to the listing shape; known fields win over extras."""
        known = self.model_dump(mode="json", exclude={"extras"}, exclude_none=True)
        return {**self.extras, **known}


class RentalCalculation(BaseModel):
    """Price breakdown for a rental period. Computed by the backend."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
    )

    daily_rate: StrictFloat
    number_of_days: StrictInt
    subtotal: StrictFloat
    security_deposit: StrictFloat
    tax: StrictFloat
    total: StrictFloat

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)
