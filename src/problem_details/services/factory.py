# This project was developed with assistance from AI tools.
"""Problem document factory.

A factory is a strategy object handed to the interception middleware and to
the response helpers. :class:`ProblemFactory` is the stock implementation;
anything satisfying :class:`ProblemDocumentFactory` can replace it.

Every creation goes through :meth:`ProblemFactory._finish`, which fills the
missing fields and then calls the ``on_created`` hook exactly once, so values
added by the hook are never overwritten by defaults.
"""

import logging
from collections.abc import Callable
from typing import Any, Protocol, TypeVar, runtime_checkable

from starlette.requests import Request

from ..core.defaults import ClientErrorData, defaults_for
from ..schemas.problem import (
    ProblemDocument,
    ServerErrorProblemDocument,
    ValidationProblemDocument,
)

logger = logging.getLogger(__name__)

DefaultsLookup = Callable[[int], ClientErrorData | None]
ProblemCreatedHook = Callable[[Request, ProblemDocument], None]
_DocumentT = TypeVar("_DocumentT", bound=ProblemDocument)


@runtime_checkable
class ProblemDocumentFactory(Protocol):
    """Interface for creating fully defaulted problem documents."""

    def create_problem(
        self,
        request: Request,
        status_code: int | None = None,
        *,
        title: str | None = None,
        type: str | None = None,
        detail: str | None = None,
        instance: str | None = None,
    ) -> ProblemDocument: ...

    def create_server_error(
        self,
        request: Request,
        error: BaseException | None = None,
        status_code: int | None = None,
        *,
        title: str | None = None,
        type: str | None = None,
        detail: str | None = None,
        instance: str | None = None,
    ) -> ServerErrorProblemDocument: ...

    def create_validation_problem(
        self,
        request: Request,
        source: Any,
        status_code: int | None = None,
        *,
        title: str | None = None,
        type: str | None = None,
        detail: str | None = None,
        instance: str | None = None,
    ) -> ValidationProblemDocument: ...


class ProblemFactory:
    """Builds problem documents and applies status-code defaults.

    Args:
        defaults: Lookup returning the default title/link for a status code.
        on_created: Optional hook ``(request, document)`` run once after every
            document is created, e.g. to add a correlation id.
    """

    def __init__(
        self,
        *,
        defaults: DefaultsLookup = defaults_for,
        on_created: ProblemCreatedHook | None = None,
    ) -> None:
        self._defaults = defaults
        self._on_created = on_created

    def create_problem(
        self,
        request: Request,
        status_code: int | None = None,
        *,
        title: str | None = None,
        type: str | None = None,
        detail: str | None = None,
        instance: str | None = None,
    ) -> ProblemDocument:
        if status_code is None:
            status_code = 500

        document = ProblemDocument(
            status=status_code,
            title=title,
            type=type,
            detail=detail,
            instance=instance,
        )
        return self._finish(request, document, status_code)

    def create_server_error(
        self,
        request: Request,
        error: BaseException | None = None,
        status_code: int | None = None,
        *,
        title: str | None = None,
        type: str | None = None,
        detail: str | None = None,
        instance: str | None = None,
    ) -> ServerErrorProblemDocument:
        """Create a server error document; *error* supplies detail and trace.

        Pass ``error=None`` when diagnostics must not reach the client.
        """
        if status_code is None:
            status_code = 500

        document = ServerErrorProblemDocument.from_exception(
            error,
            status=status_code,
            type=type,
            detail=detail,
            instance=instance,
        )
        if title is not None:
            document.title = title
        return self._finish(request, document, status_code)

    def create_validation_problem(
        self,
        request: Request,
        source: Any,
        status_code: int | None = None,
        *,
        title: str | None = None,
        type: str | None = None,
        detail: str | None = None,
        instance: str | None = None,
    ) -> ValidationProblemDocument:
        """Create a validation document from field errors (see ``collect_errors``)."""
        if source is None:
            raise TypeError("A validation error source is required")
        if status_code is None:
            status_code = 400

        document = ValidationProblemDocument.from_source(
            source,
            status=status_code,
            title=title,
            type=type,
            instance=instance,
        )
        if detail is not None:
            document.detail = detail
        return self._finish(request, document, status_code)

    def _finish(self, request: Request, document: _DocumentT, status_code: int) -> _DocumentT:
        apply_defaults(request, document, status_code, self._defaults)
        if self._on_created is not None:
            self._on_created(request, document)
        return document


def apply_defaults(
    request: Request,
    document: ProblemDocument,
    status_code: int,
    defaults: DefaultsLookup = defaults_for,
) -> None:
    """Fill missing ``status``/``title``/``type``/``instance`` on *document*.

    Values already present are left untouched.
    """
    if document.status is None:
        document.status = status_code

    client_error = defaults(status_code)
    if client_error is not None:
        if document.title is None:
            document.title = client_error.title
        if document.type is None:
            document.type = client_error.link

    if document.instance is None:
        document.instance = request.url.path


def build_default_factory() -> ProblemFactory:
    """Return a factory with the stock defaults table and no hook."""
    logger.debug("Building default problem document factory")
    return ProblemFactory()
