# This project was developed with assistance from AI tools.
"""Shared builders for requests, apps and raw ASGI calls."""

from starlette.requests import Request
from starlette.types import Message


def make_request(path: str = "/api/items", headers: dict[str, str] | None = None) -> Request:
    scope = {
        "type": "http",
        "http_version": "1.1",
        "method": "GET",
        "scheme": "http",
        "path": path,
        "raw_path": path.encode(),
        "root_path": "",
        "query_string": b"",
        "headers": [(k.lower().encode(), v.encode()) for k, v in (headers or {}).items()],
        "server": ("testserver", 80),
        "client": ("testclient", 50000),
    }
    return Request(scope)


def http_scope(path: str = "/api/items") -> dict:
    return make_request(path).scope


async def empty_receive() -> Message:
    return {"type": "http.request", "body": b"", "more_body": False}


class RecordingSend:
    """Collects every message the middleware writes to the real sink."""

    def __init__(self) -> None:
        self.messages: list[Message] = []

    async def __call__(self, message: Message) -> None:
        self.messages.append(message)

    @property
    def start(self) -> Message:
        return next(m for m in self.messages if m["type"] == "http.response.start")

    @property
    def headers(self) -> dict[str, str]:
        return {k.decode(): v.decode() for k, v in self.start["headers"]}

    @property
    def body(self) -> bytes:
        return b"".join(m.get("body", b"") for m in self.messages if m["type"] == "http.response.body")
