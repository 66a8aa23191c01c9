# This project was developed with assistance from AI tools.
"""Default title and type link for well-known HTTP status codes.

The table is fixed at import time and only ever read, so lookups are safe
from any number of concurrent requests.
"""

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict


class ClientErrorData(BaseModel):
    """Title and documentation link describing one status code."""

    model_config = ConfigDict(frozen=True)

    title: str
    link: str


_CLIENT_ERROR_DEFAULTS = MappingProxyType(
    {
        400: ClientErrorData(
            title="Bad Request",
            link="https://tools.ietf.org/html/rfc7231#section-6.5.1",
        ),
        401: ClientErrorData(
            title="Unauthorized",
            link="https://tools.ietf.org/html/rfc7235#section-3.1",
        ),
        403: ClientErrorData(
            title="Forbidden",
            link="https://tools.ietf.org/html/rfc7231#section-6.5.3",
        ),
        404: ClientErrorData(
            title="Not Found",
            link="https://tools.ietf.org/html/rfc7231#section-6.5.4",
        ),
        406: ClientErrorData(
            title="Not Acceptable",
            link="https://tools.ietf.org/html/rfc7231#section-6.5.6",
        ),
        409: ClientErrorData(
            title="Conflict",
            link="https://tools.ietf.org/html/rfc7231#section-6.5.8",
        ),
        415: ClientErrorData(
            title="Unsupported Media Type",
            link="https://tools.ietf.org/html/rfc7231#section-6.5.13",
        ),
        422: ClientErrorData(
            title="Unprocessable Entity",
            link="https://tools.ietf.org/html/rfc4918#section-11.2",
        ),
        500: ClientErrorData(
            title="An error occurred while processing your request.",
            link="https://tools.ietf.org/html/rfc7231#section-6.6.1",
        ),
    }
)


def defaults_for(status_code: int) -> ClientErrorData | None:
    """Return the default title/link for *status_code*, or None if unknown."""
    return _CLIENT_ERROR_DEFAULTS.get(status_code)
