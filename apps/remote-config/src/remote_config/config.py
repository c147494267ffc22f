"""Configuration objects for the remote config client."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ServerZone(str, Enum):
    US = "US"
    EU = "EU"
    STAGING = "STAGING"


@dataclass(frozen=True)
class RemoteConfigLocalConfig:
    api_key: str
    server_zone: ServerZone = ServerZone.US
    config_server_url: Optional[str] = None
    flush_max_retries: int = 12
    logger: Optional[logging.Logger] = None

    @property
    def logging_sink(self) -> logging.Logger:
        return self.logger or logging.getLogger("remote_config.fetch")

    @classmethod
    def from_env(cls) -> "RemoteConfigLocalConfig":
        api_key = os.environ.get("REMOTE_CONFIG_API_KEY")
        if not api_key:
            raise ValueError("REMOTE_CONFIG_API_KEY must be configured")

        zone = os.environ.get("REMOTE_CONFIG_SERVER_ZONE", ServerZone.US.value).strip().upper()
        server_url = os.environ.get("REMOTE_CONFIG_SERVER_URL") or None
        max_retries = int(os.environ.get("REMOTE_CONFIG_FLUSH_MAX_RETRIES", "12"))

        return cls(
            api_key=api_key,
            server_zone=ServerZone(zone),
            config_server_url=server_url,
            flush_max_retries=max_retries,
        )


__all__ = ["RemoteConfigLocalConfig", "ServerZone"]
