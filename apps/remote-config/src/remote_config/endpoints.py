"""Base URL resolution for the remote config service."""

from __future__ import annotations

from .config import RemoteConfigLocalConfig, ServerZone

REMOTE_CONFIG_SERVER_URL = "https://sr-client-cfg.amplitude.com/config"
REMOTE_CONFIG_SERVER_URL_STAGING = "https://sr-client-cfg.stag2.amplitude.com/config"
REMOTE_CONFIG_SERVER_URL_EU = "https://sr-client-cfg.eu.amplitude.com/config"


def get_server_url(local_config: RemoteConfigLocalConfig) -> str:
    if local_config.config_server_url:
        return local_config.config_server_url

    if local_config.server_zone == ServerZone.STAGING:
        return REMOTE_CONFIG_SERVER_URL_STAGING

    if local_config.server_zone == ServerZone.EU:
        return REMOTE_CONFIG_SERVER_URL_EU

    return REMOTE_CONFIG_SERVER_URL


__all__ = [
    "REMOTE_CONFIG_SERVER_URL",
    "REMOTE_CONFIG_SERVER_URL_EU",
    "REMOTE_CONFIG_SERVER_URL_STAGING",
    "get_server_url",
]
