# This project was developed with assistance from AI tools.
"""RFC 7807 problem documents.

See https://datatracker.ietf.org/doc/html/rfc7807

The three document shapes share one base field set and carry a ``kind``
discriminant, so encoding and defaulting can branch on ``kind`` instead of
on the concrete class.
"""

import enum
import json
import traceback
from typing import Any, Literal

from pydantic import BaseModel, Field

from ..core.constants import SERVER_ERROR_TITLE, VALIDATION_DETAIL
from .validation import collect_errors

_STANDARD_MEMBERS = ("type", "title", "status", "detail", "instance")


class ProblemKind(str, enum.Enum):
    PROBLEM = "problem"
    VALIDATION = "validation"
    SERVER_ERROR = "server_error"


class ProblemDocument(BaseModel):
    """Generic problem document for any error-range response."""

    kind: Literal[ProblemKind.PROBLEM] = ProblemKind.PROBLEM

    status: int | None = Field(default=None, description="HTTP status code.")
    title: str | None = Field(
        default=None,
        description="Short human-readable summary; stable across occurrences.",
    )
    type: str | None = Field(
        default=None,
        description="URI reference identifying the problem type.",
    )
    detail: str | None = Field(
        default=None,
        description="Human-readable explanation specific to this occurrence.",
    )
    instance: str | None = Field(
        default=None,
        description="URI reference identifying the specific occurrence.",
    )
    extensions: dict[str, Any] = Field(
        default_factory=dict,
        description="Problem-specific members, emitted at the top level.",
    )


class ValidationProblemDocument(ProblemDocument):
    """Problem document listing the error messages for each invalid field."""

    kind: Literal[ProblemKind.VALIDATION] = ProblemKind.VALIDATION

    detail: str | None = VALIDATION_DETAIL
    errors: dict[str, list[str]] = Field(default_factory=dict)

    @classmethod
    def from_source(cls, source: Any, **fields: Any) -> "ValidationProblemDocument":
        """Build a document from any source accepted by :func:`collect_errors`."""
        return cls(errors=collect_errors(source), **fields)


class ServerErrorProblemDocument(ProblemDocument):
    """Problem document for an unhandled exception."""

    kind: Literal[ProblemKind.SERVER_ERROR] = ProblemKind.SERVER_ERROR

    title: str | None = SERVER_ERROR_TITLE
    trace: str | None = Field(
        default=None,
        description="Formatted traceback; only set when error detail is allowed.",
    )

    @classmethod
    def from_exception(cls, error: BaseException | None, **fields: Any) -> "ServerErrorProblemDocument":
        """Populate ``detail`` and ``trace`` from *error*.

        An explicit ``detail`` in *fields* wins over the exception message.
        """
        document = cls(**fields)
        if error is not None:
            if document.detail is None:
                document.detail = str(error) or type(error).__name__
            document.trace = "".join(traceback.format_exception(error))
        return document


def to_wire(document: ProblemDocument) -> dict[str, Any]:
    """Return the JSON-ready body for *document*.

    Standard members are always present (null when unset). Extensions are
    flattened into the top level but never replace a standard member.

    Raises:
        pydantic_core.PydanticSerializationError: an extension value cannot
            be represented as JSON.
    """
    dumped = document.model_dump(mode="json", exclude={"kind"})
    payload: dict[str, Any] = {name: dumped[name] for name in _STANDARD_MEMBERS}

    if document.kind == ProblemKind.VALIDATION:
        payload["errors"] = dumped["errors"]
    elif document.kind == ProblemKind.SERVER_ERROR and dumped["trace"] is not None:
        payload["trace"] = dumped["trace"]

    for key, value in dumped["extensions"].items():
        payload.setdefault(key, value)
    return payload


def serialize_problem(document: ProblemDocument) -> bytes:
    """Encode *document* as UTF-8 JSON for the ``application/problem+json`` body."""
    return json.dumps(to_wire(document), ensure_ascii=False, separators=(",", ":")).encode("utf-8")
