# This project was developed with assistance from AI tools.
"""Problem details middleware.

Rewrites error-range responses as RFC 7807 problem documents, whatever
produced them: a handler returning a bare status code, a filter-generated
client error, or an exception escaping the application.

Whether a response needs rewriting is only known once it is complete, so for
admitted paths every outgoing message is captured in a request-scoped buffer
until the final body message arrives or the inner application finishes.
Then exactly one of two things reaches the real ``send``: the captured
messages, unchanged and in order, or a freshly serialized problem document.
Never both, never a mix. An exception raised after the response completed,
for example by a background task, propagates as it would on a path the
middleware does not admit.

Serializing the replacement document happens after the captured output has
been discarded. If it fails the error propagates to the server unrendered;
there is nothing left to fall back to.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from starlette.datastructures import Headers, MutableHeaders
from starlette.requests import Request
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from ..core.config import Settings, settings
from ..core.constants import PROBLEM_MEDIA_TYPE, is_problem_media_type
from ..schemas.problem import ProblemDocument, serialize_problem
from ..services.factory import ProblemDocumentFactory, build_default_factory
from ..services.policy import RoutePolicy

logger = logging.getLogger(__name__)

ExceptionHandler = Callable[
    [Request, Exception, ProblemDocumentFactory],
    ProblemDocument | None | Awaitable[ProblemDocument | None],
]

# Invalid once the body is replaced.
_STALE_HEADERS = ("content-length", "content-encoding", "transfer-encoding")


@dataclass(frozen=True)
class ProblemDetailsOptions:
    """Configuration for :class:`ProblemDetailsMiddleware`.

    Attributes:
        policy: Paths whose responses may be rewritten.
        factory: Creates the replacement documents.
        exception_handler: Optional ``(request, exc, factory)`` callable that
            turns an unhandled exception into a document. Returning None
            re-raises the exception unrendered.
        include_error_detail: Put exception message and traceback into the
            default server error document.
    """

    policy: RoutePolicy = field(default_factory=RoutePolicy)
    factory: ProblemDocumentFactory = field(default_factory=build_default_factory)
    exception_handler: ExceptionHandler | None = None
    include_error_detail: bool = False

    @classmethod
    def from_settings(cls, config: Settings | None = None, **overrides) -> "ProblemDetailsOptions":
        config = config or settings
        values = {
            "policy": RoutePolicy(
                include_paths=config.PROBLEM_DETAILS_INCLUDE_PATHS,
                exclude_paths=config.PROBLEM_DETAILS_EXCLUDE_PATHS,
            ),
            "include_error_detail": config.INCLUDE_ERROR_DETAIL,
        }
        values.update(overrides)
        return cls(**values)


class _CapturedResponse:
    """Stands in for ``send`` while the inner application runs.

    The final body message (``more_body`` false) completes the response:
    *on_complete* is awaited with the capture closed, so the outcome reaches
    the client without waiting for work the application does afterwards,
    such as background tasks.
    """

    def __init__(self, on_complete: Callable[["_CapturedResponse"], Awaitable[None]]) -> None:
        self.messages: list[Message] = []
        self.start: Message | None = None
        self.closed = False
        self.completed = False
        self._on_complete = on_complete

    async def __call__(self, message: Message) -> None:
        if self.closed:
            raise RuntimeError("Response capture is closed; no further writes are permitted.")
        if message["type"] == "http.response.start":
            self.start = message
        self.messages.append(message)
        if message["type"] == "http.response.body" and not message.get("more_body", False):
            self.completed = True
            self.close()
            await self._on_complete(self)

    @property
    def status_code(self) -> int | None:
        return self.start["status"] if self.start is not None else None

    @property
    def headers(self) -> Headers:
        return Headers(raw=list(self.start.get("headers", ())) if self.start else [])

    def close(self) -> None:
        self.closed = True


@contextmanager
def _capture_response(
    on_complete: Callable[[_CapturedResponse], Awaitable[None]],
) -> Iterator[_CapturedResponse]:
    captured = _CapturedResponse(on_complete)
    try:
        yield captured
    finally:
        captured.close()


class ProblemDetailsMiddleware:
    """ASGI middleware converting error responses into problem documents.

    Without *options* the configuration comes from :data:`settings`.
    """

    def __init__(self, app: ASGIApp, options: ProblemDetailsOptions | None = None) -> None:
        self.app = app
        self.options = options or ProblemDetailsOptions.from_settings()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or not self.options.policy.can_intercept(scope["path"]):
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)

        async def flush_completed(captured: _CapturedResponse) -> None:
            problem = self._problem_for_response(request, captured)
            await self._flush(send, captured, problem, from_exception=False)

        with _capture_response(flush_completed) as captured:
            try:
                await self.app(scope, receive, captured)
            except Exception as exc:
                # Already on the wire; fail like an unintercepted path would.
                if captured.completed:
                    raise
                problem = await self._problem_for_exception(request, exc)
                if problem is None:
                    raise
                await self._flush(send, captured, problem, from_exception=True)
            else:
                if not captured.completed:
                    problem = self._problem_for_response(request, captured)
                    await self._flush(send, captured, problem, from_exception=False)

    async def _flush(
        self,
        send: Send,
        captured: _CapturedResponse,
        problem: ProblemDocument | None,
        from_exception: bool,
    ) -> None:
        if problem is None:
            for message in captured.messages:
                await send(message)
            return

        if not from_exception:
            status_code = captured.status_code
            headers = MutableHeaders(raw=list(captured.start.get("headers", ())))
        else:
            status_code = problem.status or 500
            headers = MutableHeaders()
        if problem.status is None:
            problem.status = status_code

        body = serialize_problem(problem)
        for name in _STALE_HEADERS:
            del headers[name]
        headers["content-type"] = PROBLEM_MEDIA_TYPE
        headers["content-length"] = str(len(body))

        await send({"type": "http.response.start", "status": status_code, "headers": headers.raw})
        await send({"type": "http.response.body", "body": body, "more_body": False})

    def _problem_for_response(
        self, request: Request, captured: _CapturedResponse
    ) -> ProblemDocument | None:
        status_code = captured.status_code
        if status_code is None or not 400 <= status_code <= 599:
            return None
        if is_problem_media_type(captured.headers.get("content-type")):
            return None

        logger.debug(
            "Replacing %s response for %s with problem details", status_code, request.url.path
        )
        return self.options.factory.create_problem(request, status_code)

    async def _problem_for_exception(
        self, request: Request, exc: Exception
    ) -> ProblemDocument | None:
        handler = self.options.exception_handler
        if handler is None:
            logger.exception(
                "Unhandled exception while processing %s", request.url.path, exc_info=exc
            )
            error = exc if self.options.include_error_detail else None
            return self.options.factory.create_server_error(request, error)

        problem = handler(request, exc, self.options.factory)
        if inspect.isawaitable(problem):
            problem = await problem
        if problem is None:
            logger.warning(
                "Exception handler declined %s for %s; re-raising",
                type(exc).__name__,
                request.url.path,
            )
        return problem
