"""Field-level validation errors and their conversion from pydantic errors."""

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, ValidationError

from rental_booking.schemas.rules import REQUIRED_MESSAGE_KEY

PathPart = Union[str, int]

# pydantic's message for the "missing" error type
MISSING_MESSAGE = "Field required"


@dataclass(frozen=True)
class FieldValidationError:
    """One problem with one (possibly nested) field of the form."""
    path: tuple[PathPart, ...]
    message: str
    code: str = "value_error"

    @property
    def field(self) -> str:
        """Dotted path, e.g. ``personal_details.email``. Empty for the root."""
        return ".".join(str(part) for part in self.path)

    def prefixed(self, *parts: PathPart) -> "FieldValidationError":
        """Same error, located under ``parts``."""
        return FieldValidationError(path=(*parts, *self.path), message=self.message, code=self.code)


class BookingValidationError(Exception):
    """Raised by ``ValidationResult.unwrap`` when validation failed."""

    def __init__(self, errors: list[FieldValidationError]) -> None:
        self.errors = list(errors)
        summary = "; ".join(f"{e.field or '<root>'}: {e.message}" for e in self.errors)
        super().__init__(f"{len(self.errors)} validation error(s): {summary}")


def _schema_of(annotation: object) -> Optional[type[BaseModel]]:
    if isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    return None


def required_message(schema: type[BaseModel], path: tuple[PathPart, ...]) -> Optional[str]:
    """Message a schema declares for ``path`` being absent, if any."""
    model: Optional[type[BaseModel]] = schema
    extra = None
    for part in path:
        if model is None or not isinstance(part, str):
            return None
        info = model.model_fields.get(part)
        if info is None:
            return None
        extra = info.json_schema_extra
        model = _schema_of(info.annotation)
    if isinstance(extra, dict):
        message = extra.get(REQUIRED_MESSAGE_KEY)
        if isinstance(message, str):
            return message
    return None


def format_validation_errors(
    schema: type[BaseModel], exc: ValidationError
) -> list[FieldValidationError]:
    """Convert a pydantic ``ValidationError`` into field errors, in schema order."""
    errors = []
    for detail in exc.errors(include_url=False):
        path = tuple(detail["loc"])
        message = detail["msg"]
        if detail["type"] == "missing":
            message = required_message(schema, path) or message
        errors.append(FieldValidationError(path=path, message=message, code=detail["type"]))
    return errors


def missing_field_error(
    schema: type[BaseModel], path: tuple[PathPart, ...]
) -> FieldValidationError:
    """The error ``schema`` validation reports when the field at ``path`` is absent."""
    return FieldValidationError(
        path=path,
        message=required_message(schema, path) or MISSING_MESSAGE,
        code="missing",
    )
