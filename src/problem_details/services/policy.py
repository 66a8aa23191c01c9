# This project was developed with assistance from AI tools.
"""Route admission policy: which request paths may have errors rewritten."""

from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, field_validator

ROOT_PATH = "/"


def _normalise_prefix(prefix: str) -> str:
    if not prefix.startswith("/"):
        raise ValueError(f"Path prefix must start with '/': {prefix!r}")
    return prefix.rstrip("/") or ROOT_PATH


def _matches(path: str, prefix: str) -> bool:
    """Segment-aware, case-insensitive ``startswith``: ``/ab`` never matches ``/abc``."""
    if prefix == ROOT_PATH:
        return True
    path = path.lower()
    prefix = prefix.lower()
    return path == prefix or path.startswith(prefix + "/")


class RoutePolicy(BaseModel):
    """Include/exclude path prefixes deciding whether a response may be rewritten.

    A path is admitted when it matches an include prefix and no exclude
    prefix. ``/`` matches every path. With no include prefixes nothing is
    admitted.
    """

    model_config = ConfigDict(frozen=True)

    include_paths: tuple[str, ...] = ()
    exclude_paths: tuple[str, ...] = ()

    @field_validator("include_paths", "exclude_paths", mode="before")
    @classmethod
    def _normalise(cls, value: str | Iterable[str] | None) -> tuple[str, ...]:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        return tuple(_normalise_prefix(prefix) for prefix in value)

    def can_intercept(self, path: str) -> bool:
        if not any(_matches(path, prefix) for prefix in self.include_paths):
            return False
        return not any(_matches(path, prefix) for prefix in self.exclude_paths)
