"""Errors raised by the remote config client."""

MAX_RETRIES_EXCEEDED_MESSAGE = "Remote config fetch rejected due to exceeded retry count"
TIMEOUT_MESSAGE = "Remote config fetch rejected due to timeout after 5 seconds"
UNEXPECTED_NETWORK_ERROR_MESSAGE = "Network error occurred, remote config fetch failed"
UNEXPECTED_ERROR_MESSAGE = "Unexpected error occurred"


class RemoteConfigError(Exception):
    """Base remote config error."""


class RetryExhaustedError(RemoteConfigError):
    """Attempt budget for the current session is spent."""

    def __init__(self, message: str = MAX_RETRIES_EXCEEDED_MESSAGE) -> None:
        super().__init__(message)


class RemoteConfigTimeoutError(RemoteConfigError):
    """Fetch deadline elapsed."""

    def __init__(self, message: str = TIMEOUT_MESSAGE) -> None:
        super().__init__(message)


class NetworkUnexpectedError(RemoteConfigError):
    """Non-retryable status or transport failure."""

    def __init__(self, message: str = UNEXPECTED_NETWORK_ERROR_MESSAGE) -> None:
        super().__init__(message)


__all__ = [
    "MAX_RETRIES_EXCEEDED_MESSAGE",
    "TIMEOUT_MESSAGE",
    "UNEXPECTED_ERROR_MESSAGE",
    "UNEXPECTED_NETWORK_ERROR_MESSAGE",
    "NetworkUnexpectedError",
    "RemoteConfigError",
    "RemoteConfigTimeoutError",
    "RetryExhaustedError",
]
