# This project was developed with assistance from AI tools.
"""RFC 7807 problem details for FastAPI / Starlette applications."""

__version__ = "0.1.0"

from .app import add_problem_details, log_problem_details_status
from .core.constants import PROBLEM_MEDIA_TYPE, is_problem_media_type
from .core.defaults import ClientErrorData, defaults_for
from .handlers import (
    ProblemResponse,
    problem_response,
    server_error_response,
    validation_problem_response,
)
from .middleware.problem_details import ProblemDetailsMiddleware, ProblemDetailsOptions
from .schemas import (
    FieldValidationError,
    ProblemDocument,
    ProblemKind,
    ServerErrorProblemDocument,
    ValidationProblemDocument,
    ValidationResult,
    collect_errors,
    serialize_problem,
)
from .services.factory import (
    ProblemDocumentFactory,
    ProblemFactory,
    apply_defaults,
    build_default_factory,
)
from .services.policy import ROOT_PATH, RoutePolicy

__all__ = [
    "PROBLEM_MEDIA_TYPE",
    "ROOT_PATH",
    "ClientErrorData",
    "FieldValidationError",
    "ProblemDetailsMiddleware",
    "ProblemDetailsOptions",
    "ProblemDocument",
    "ProblemDocumentFactory",
    "ProblemFactory",
    "ProblemKind",
    "ProblemResponse",
    "RoutePolicy",
    "ServerErrorProblemDocument",
    "ValidationProblemDocument",
    "ValidationResult",
    "add_problem_details",
    "apply_defaults",
    "build_default_factory",
    "collect_errors",
    "defaults_for",
    "is_problem_media_type",
    "log_problem_details_status",
    "problem_response",
    "serialize_problem",
    "server_error_response",
    "validation_problem_response",
]
