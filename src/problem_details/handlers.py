# This project was developed with assistance from AI tools.
"""Problem details responses and FastAPI exception handlers.

The helpers let route code return a problem document directly; the
exception handlers convert framework errors raised inside the application
(``HTTPException``, request validation) before the middleware ever sees a
bare error response.
"""

import functools
import http
import logging
from typing import Any

from fastapi.exception_handlers import (
    http_exception_handler as default_http_exception_handler,
)
from fastapi.exception_handlers import (
    request_validation_exception_handler as default_validation_exception_handler,
)
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import Response

from .core.constants import PROBLEM_MEDIA_TYPE
from .middleware.problem_details import ProblemDetailsOptions
from .schemas.problem import ProblemDocument, serialize_problem
from .schemas.validation import FieldValidationError, collect_errors
from .services.factory import ProblemDocumentFactory

logger = logging.getLogger(__name__)


class ProblemResponse(JSONResponse):
    """JSON response carrying a problem document."""

    media_type = PROBLEM_MEDIA_TYPE

    def __init__(self, content: ProblemDocument, status_code: int | None = None, **kwargs: Any) -> None:
        super().__init__(content, status_code=status_code or content.status or 500, **kwargs)

    def render(self, content: Any) -> bytes:
        if isinstance(content, ProblemDocument):
            return serialize_problem(content)
        return super().render(content)


@functools.lru_cache(maxsize=1)
def _settings_options() -> ProblemDetailsOptions:
    return ProblemDetailsOptions.from_settings()


def _options_for(request: Request) -> ProblemDetailsOptions:
    """Options registered by ``add_problem_details``, else one shared set from settings."""
    app = request.scope.get("app")
    options = getattr(getattr(app, "state", None), "problem_details", None)
    return options or _settings_options()


def _reason_phrase(status_code: int) -> str | None:
    try:
        return http.HTTPStatus(status_code).phrase
    except ValueError:
        return None


def _factory_for(request: Request, factory: ProblemDocumentFactory | None) -> ProblemDocumentFactory:
    return factory or _options_for(request).factory


# ---------------------------------------------------------------------------
# Response helpers
# ---------------------------------------------------------------------------


def problem_response(
    request: Request,
    status_code: int = 500,
    *,
    title: str | None = None,
    type: str | None = None,
    detail: str | None = None,
    factory: ProblemDocumentFactory | None = None,
    headers: dict[str, str] | None = None,
) -> ProblemResponse:
    document = _factory_for(request, factory).create_problem(
        request, status_code, title=title, type=type, detail=detail
    )
    return ProblemResponse(document, status_code=status_code, headers=headers)


def server_error_response(
    request: Request,
    error: BaseException,
    include_error_detail: bool | None = None,
    *,
    factory: ProblemDocumentFactory | None = None,
) -> ProblemResponse:
    """500 response for *error*; message and trace only when detail is allowed.

    ``include_error_detail=None`` defers to the configured options.
    """
    if error is None:
        raise TypeError("error is required")
    if include_error_detail is None:
        include_error_detail = _options_for(request).include_error_detail

    document = _factory_for(request, factory).create_server_error(
        request, error if include_error_detail else None
    )
    return ProblemResponse(document, status_code=500)


def validation_problem_response(
    request: Request,
    source: Any,
    *,
    factory: ProblemDocumentFactory | None = None,
) -> ProblemResponse:
    document = _factory_for(request, factory).create_validation_problem(request, source, 400)
    return ProblemResponse(document, status_code=400)


# ---------------------------------------------------------------------------
# Exception handlers
# ---------------------------------------------------------------------------


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> Response:
    """Convert an error-range HTTPException to RFC 7807 Problem Details."""
    admitted = _options_for(request).policy.can_intercept(request.scope["path"])
    if not admitted or not 400 <= exc.status_code <= 599:
        return await default_http_exception_handler(request, exc)

    detail = exc.detail
    # Starlette fills in the reason phrase when no detail was given.
    if not isinstance(detail, str) or detail == _reason_phrase(exc.status_code):
        detail = None
    return problem_response(
        request,
        exc.status_code,
        detail=detail,
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> Response:
    """Convert request validation errors to a validation problem document."""
    if not _options_for(request).policy.can_intercept(request.scope["path"]):
        return await default_validation_exception_handler(request, exc)

    logger.debug("Request validation failed for %s: %d error(s)", request.url.path, len(exc.errors()))
    return validation_problem_response(request, exc)


async def field_validation_error_handler(request: Request, exc: FieldValidationError) -> Response:
    """Convert a FieldValidationError raised by route code."""
    if not _options_for(request).policy.can_intercept(request.scope["path"]):
        return JSONResponse(status_code=400, content={"detail": collect_errors(exc)})
    return validation_problem_response(request, exc)
