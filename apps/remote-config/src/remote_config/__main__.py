"""Command line lookup against the remote config service."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
from typing import Any, List, Optional, Sequence

import httpx

from .client import RemoteConfigFetch
from .config import RemoteConfigLocalConfig, ServerZone
from .errors import RemoteConfigError

logger = logging.getLogger("remote_config.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Fetch a namespace (or one key) from the remote config service")
    parser.add_argument("namespace", help="Config namespace to read")
    parser.add_argument("key", nargs="?", help="Single key inside the namespace")
    parser.add_argument(
        "--config-key",
        dest="config_keys",
        action="append",
        default=None,
        help="Namespace to request; repeatable, defaults to the namespace argument",
    )
    parser.add_argument("--session-id", dest="session_id", default=None)
    parser.add_argument("--api-key", dest="api_key", default=None, help="Falls back to REMOTE_CONFIG_API_KEY")
    parser.add_argument("--server-zone", dest="server_zone", choices=[zone.value for zone in ServerZone])
    parser.add_argument("--server-url", dest="server_url", default=None)
    parser.add_argument("--max-retries", dest="max_retries", type=int, default=None)
    return parser


def _local_config(args: argparse.Namespace) -> RemoteConfigLocalConfig:
    if args.api_key:
        base = RemoteConfigLocalConfig(api_key=args.api_key)
    else:
        base = RemoteConfigLocalConfig.from_env()
    return RemoteConfigLocalConfig(
        api_key=base.api_key,
        server_zone=ServerZone(args.server_zone) if args.server_zone else base.server_zone,
        config_server_url=args.server_url or base.config_server_url,
        flush_max_retries=args.max_retries if args.max_retries is not None else base.flush_max_retries,
    )


async def _lookup(args: argparse.Namespace, transport: Optional[httpx.AsyncBaseTransport]) -> Any:
    config_keys: List[str] = args.config_keys or [args.namespace]
    async with RemoteConfigFetch(_local_config(args), config_keys, transport=transport) as fetcher:
        if args.key:
            return await fetcher.get_remote_config(args.namespace, args.key, args.session_id)
        return await fetcher.get_remote_namespace_config(args.namespace, args.session_id)


def main(argv: Optional[Sequence[str]] = None, *, transport: Optional[httpx.AsyncBaseTransport] = None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = build_parser().parse_args(argv)
    try:
        value = asyncio.run(_lookup(args, transport))
    except (ValueError, RemoteConfigError) as exc:
        logger.error("Remote config lookup failed: %s", exc)
        return 1
    print(json.dumps(value))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
