# This project was developed with assistance from AI tools.
"""Validation error inputs and their conversion to a field -> messages map.

Every supported source converges on the same ``errors`` shape used by
:class:`~problem_details.schemas.problem.ValidationProblemDocument`:

- a mapping of field name to one or more messages
- a :class:`ValidationResult`, or an iterable of them
- ``(field, message)`` pairs
- a :class:`FieldValidationError` (a single failed field check)
- a pydantic ``ValidationError`` or FastAPI ``RequestValidationError``

Field names are compared exactly (case-sensitive). Messages for the same
field are appended in the order they are seen, and fields without any
message never appear in the result.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from ..core.constants import DEFAULT_FIELD_ERROR

# Leading loc segments FastAPI adds to say where a request value came from.
_REQUEST_LOCATIONS = frozenset({"body", "query", "path", "header", "cookie"})


class ValidationResult(BaseModel):
    """A failed validation check and the fields it applies to."""

    model_config = ConfigDict(frozen=True)

    message: str | None = None
    member_names: tuple[str, ...] = Field(default_factory=tuple)


class FieldValidationError(ValueError):
    """Raised by application code when a single validation check fails."""

    def __init__(self, message: str | None, *member_names: str) -> None:
        super().__init__(message or DEFAULT_FIELD_ERROR)
        self.result = ValidationResult(message=message, member_names=member_names)


def _result_pairs(result: ValidationResult) -> Iterable[tuple[str, str | None]]:
    for name in result.member_names:
        yield name, result.message


def _pydantic_pairs(
    errors: Iterable[Mapping[str, Any]], *, strip_location: bool
) -> Iterable[tuple[str, str | None]]:
    for error in errors:
        loc = list(error.get("loc", ()))
        if strip_location and loc and loc[0] in _REQUEST_LOCATIONS:
            loc = loc[1:]
        yield ".".join(str(part) for part in loc), error.get("msg")


def _is_pair(value: Any) -> bool:
    return (
        isinstance(value, tuple)
        and len(value) == 2
        and isinstance(value[0], str)
        and (value[1] is None or isinstance(value[1], str))
    )


def _iter_pairs(source: Any) -> Iterable[tuple[str, str | None]]:
    if isinstance(source, FieldValidationError):
        yield from _result_pairs(source.result)
    elif isinstance(source, ValidationResult):
        yield from _result_pairs(source)
    elif isinstance(source, RequestValidationError):
        yield from _pydantic_pairs(source.errors(), strip_location=True)
    elif isinstance(source, PydanticValidationError):
        yield from _pydantic_pairs(source.errors(), strip_location=False)
    elif isinstance(source, Mapping):
        for field, messages in source.items():
            if messages is None:
                continue
            if isinstance(messages, str):
                messages = [messages]
            for message in messages:
                yield field, message
    elif _is_pair(source):
        yield source
    elif isinstance(source, Iterable) and not isinstance(source, (str, bytes)):
        for item in source:
            yield from _iter_pairs(item)
    else:
        raise TypeError(f"Unsupported validation error source: {type(source).__name__}")


def collect_errors(source: Any) -> dict[str, list[str]]:
    """Merge *source* into an ordered ``{field: [message, ...]}`` mapping.

    Raises:
        TypeError: *source* is None or of an unsupported type.
    """
    if source is None:
        raise TypeError("A validation error source is required")

    errors: dict[str, list[str]] = {}
    for field, message in _iter_pairs(source):
        errors.setdefault(field, []).append(message or DEFAULT_FIELD_ERROR)
    return errors
