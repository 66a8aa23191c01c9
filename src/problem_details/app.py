# This project was developed with assistance from AI tools.
"""Wiring problem details into a FastAPI application."""

import logging

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .handlers import (
    field_validation_error_handler,
    http_exception_handler,
    validation_exception_handler,
)
from .middleware.problem_details import ProblemDetailsMiddleware, ProblemDetailsOptions
from .schemas.validation import FieldValidationError

logger = logging.getLogger(__name__)


def add_problem_details(
    app: FastAPI, options: ProblemDetailsOptions | None = None
) -> ProblemDetailsOptions:
    """Register the exception handlers and the middleware on *app*.

    The options are built once here (from settings when not given) and shared
    read-only by every request through ``app.state.problem_details``.
    """
    options = options or ProblemDetailsOptions.from_settings()
    app.state.problem_details = options

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(FieldValidationError, field_validation_error_handler)
    app.add_middleware(ProblemDetailsMiddleware, options=options)
    return options


def log_problem_details_status(options: ProblemDetailsOptions) -> None:
    """Log the active problem details configuration. Call at startup."""
    policy = options.policy
    if not policy.include_paths:
        logger.warning("Problem details: DISABLED (no include paths configured)")
        return

    logger.info(
        "Problem details: ACTIVE (include=%s, exclude=%s)",
        ", ".join(policy.include_paths),
        ", ".join(policy.exclude_paths) or "-",
    )
    if options.include_error_detail:
        logger.warning("Problem details: exception messages and tracebacks are sent to clients")
