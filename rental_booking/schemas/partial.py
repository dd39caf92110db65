"""
All-optional schema variants for validating an in-progress form.

``make_partial`` turns a schema into one where every field, at every
nesting level, may be left out. A field that is present still goes
through the same rules; a field that is absent is neither checked nor
filled with its default, so the normalized value only holds what the
user has entered so far.

Only rules attached through ``Annotated`` metadata carry over. The
booking schemas define all of their rules that way.
"""

import logging
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, create_model
from pydantic.fields import FieldInfo

from rental_booking.schemas.base import PartialFormModel
from rental_booking.schemas.booking_schema import (
    Agreements,
    PaymentMethod,
    PersonalDetails,
    RentalBooking,
    Schedule,
)

logger = logging.getLogger(__name__)

_partials: dict[type[BaseModel], type[PartialFormModel]] = {}


def _is_schema(annotation: Any) -> bool:
    return isinstance(annotation, type) and issubclass(annotation, BaseModel)


def _optional_field(info: FieldInfo) -> tuple[Any, Any]:
    annotation = info.annotation
    if _is_schema(annotation):
        annotation = make_partial(annotation)
    elif info.metadata:
        annotation = Annotated[(annotation, *info.metadata)]
    # The None default is never validated, so an explicit null is still rejected.
    return annotation, Field(
        default=None,
        description=info.description,
        json_schema_extra=info.json_schema_extra,
    )


def make_partial(schema: type[BaseModel], name: Optional[str] = None) -> type[PartialFormModel]:
    """Return the all-optional variant of ``schema``.

    Results are cached per schema, so nested sections of a partial
    composite are the same classes as the standalone partial sections.
    """
    if schema in _partials:
        return _partials[schema]

    fields = {
        field_name: _optional_field(info)
        for field_name, info in schema.model_fields.items()
    }
    partial = create_model(
        name or f"Partial{schema.__name__}",
        __base__=PartialFormModel,
        __doc__=f"All-optional variant of {schema.__name__}.",
        __module__=schema.__module__,
        **fields,
    )
    _partials[schema] = partial
    logger.debug("Built partial schema %s (%d fields)", partial.__name__, len(fields))
    return partial


PartialSchedule = make_partial(Schedule)
PartialPersonalDetails = make_partial(PersonalDetails)
PartialPaymentMethod = make_partial(PaymentMethod)
PartialAgreements = make_partial(Agreements)
PartialRentalBooking = make_partial(RentalBooking)
