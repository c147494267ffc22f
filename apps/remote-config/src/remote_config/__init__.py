"""Remote config fetch client."""

from .client import RemoteConfigFetch, create_remote_config_fetch
from .config import RemoteConfigLocalConfig, ServerZone
from .errors import NetworkUnexpectedError, RemoteConfigError, RemoteConfigTimeoutError, RetryExhaustedError
from .models import RemoteConfigAPIResponse, RemoteConfigMetric
from .status import Status, build_status

__all__ = [
    "NetworkUnexpectedError",
    "RemoteConfigAPIResponse",
    "RemoteConfigError",
    "RemoteConfigFetch",
    "RemoteConfigLocalConfig",
    "RemoteConfigMetric",
    "RemoteConfigTimeoutError",
    "RetryExhaustedError",
    "ServerZone",
    "Status",
    "build_status",
    "create_remote_config_fetch",
]
