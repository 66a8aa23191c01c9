# This project was developed with assistance from AI tools.
"""Problem document schemas and validation error inputs."""

from .problem import (
    ProblemDocument,
    ProblemKind,
    ServerErrorProblemDocument,
    ValidationProblemDocument,
    serialize_problem,
    to_wire,
)
from .validation import FieldValidationError, ValidationResult, collect_errors

__all__ = [
    "FieldValidationError",
    "ProblemDocument",
    "ProblemKind",
    "ServerErrorProblemDocument",
    "ValidationProblemDocument",
    "ValidationResult",
    "collect_errors",
    "serialize_problem",
    "to_wire",
]
