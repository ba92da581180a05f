"""Request validation independent of the HTTP layer."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from app.schemas.error import FieldError

T = TypeVar("T", bound=BaseModel)

# Leading loc entries FastAPI adds to say where the value came from
_REQUEST_LOCATIONS = {"body", "query", "path", "header", "cookie"}


@dataclass(frozen=True)
class ValidationOutcome(Generic[T]):
    value: T | None = None
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


def field_errors(errors: Sequence[dict[str, Any]]) -> list[FieldError]:
    """Convert pydantic/FastAPI error dicts into FieldError entries."""
    result = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        path = ".".join(str(part) for part in loc) or "__root__"
        result.append(FieldError(field=path, message=error.get("msg", "Invalid value")))
    return result


def validate_payload(schema: type[T], data: Any) -> ValidationOutcome[T]:
    """
    Validate raw request data against a request schema.

    Returns an outcome that is either ok (with the parsed value) or carries
    the list of field errors. Never raises for invalid input.
    """
    try:
        value = schema.model_validate(data)
    except ValidationError as exc:
        return ValidationOutcome(errors=field_errors(exc.errors()))
    return ValidationOutcome(value=value)
