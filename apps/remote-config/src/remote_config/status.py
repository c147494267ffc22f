"""Transport status classification for HTTP responses."""

from __future__ import annotations

from enum import Enum
from typing import Callable


class Status(str, Enum):
    UNKNOWN = "unknown"
    SUCCESS = "success"
    RATE_LIMIT = "rate_limit"
    PAYLOAD_TOO_LARGE = "payload_too_large"
    INVALID = "invalid"
    FAILED = "failed"
    TIMEOUT = "timeout"


StatusClassifier = Callable[[int], Status]


def build_status(code: int) -> Status:
    """Map an HTTP status code onto a transport status.

    Only SUCCESS and FAILED drive the fetch engine; every other value is
    treated as an unexpected network error.
    """
    if 200 <= code < 300:
        return Status.SUCCESS
    if code == 429:
        return Status.RATE_LIMIT
    if code == 413:
        return Status.PAYLOAD_TOO_LARGE
    if code == 408:
        return Status.TIMEOUT
    if 400 <= code < 500:
        return Status.INVALID
    if code >= 500:
        return Status.FAILED
    return Status.UNKNOWN


__all__ = ["Status", "StatusClassifier", "build_status"]
