"""Async client for the namespaced remote config service."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

import httpx
from pydantic import TypeAdapter

from .abort import AbortSignal, arm_deadline
from .config import RemoteConfigLocalConfig
from .endpoints import get_server_url
from .errors import (
    UNEXPECTED_ERROR_MESSAGE,
    NetworkUnexpectedError,
    RemoteConfigError,
    RemoteConfigTimeoutError,
    RetryExhaustedError,
)
from .metrics import observe_latency, record_attempt
from .models import RemoteConfigAPIResponse, RemoteConfigMetric
from .status import Status, StatusClassifier, build_status

logger = logging.getLogger("remote_config.client")

_DOCUMENT = TypeAdapter(Any)

SUCCESS_REMOTE_CONFIG = "Remote config successfully fetched"

SessionId = Union[int, str]


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


class RemoteConfigFetch:
    """Fetches namespaced config with bounded, session-scoped retries.

    Attempt accounting lives on the instance, so fetch sequences are
    serialized per instance. Each sequence runs under a single deadline of
    ``fetch_timeout`` seconds regardless of how many attempts it spans.
    """

    def __init__(
        self,
        local_config: RemoteConfigLocalConfig,
        config_keys: Iterable[str],
        *,
        retry_base_delay: float = 1.0,
        fetch_timeout: float = 5.0,
        classify: StatusClassifier = build_status,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.local_config = local_config
        self.config_keys: Tuple[str, ...] = tuple(config_keys)
        self.retry_base_delay = retry_base_delay
        self.fetch_timeout = fetch_timeout
        self.attempts = 0
        self.last_fetched_session_id: Optional[SessionId] = None
        self.metrics = RemoteConfigMetric()
        self._classify = classify
        self._lock = asyncio.Lock()
        self._client = httpx.AsyncClient(timeout=fetch_timeout, transport=transport)

    async def __aenter__(self) -> "RemoteConfigFetch":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    @property
    def server_url(self) -> str:
        return get_server_url(self.local_config)

    async def get_remote_namespace_config(
        self,
        namespace: str,
        session_id: Optional[SessionId] = None,
    ) -> Optional[Dict[str, Any]]:
        fetch_start = time.monotonic()
        response = await self.fetch_with_timeout(session_id)
        remote_config = response.namespace(namespace) if response is not None else None
        elapsed = _elapsed_ms(fetch_start)
        if remote_config:
            self.metrics.fetch_time_api_success = elapsed
            observe_latency("success", elapsed)
            return remote_config
        self.metrics.fetch_time_api_fail = elapsed
        observe_latency("fail", elapsed)
        return None

    async def get_remote_config(
        self,
        namespace: str,
        key: str,
        session_id: Optional[SessionId] = None,
    ) -> Any:
        namespace_config = await self.get_remote_namespace_config(namespace, session_id)
        if namespace_config is None:
            return None
        return namespace_config.get(key)

    async def fetch_with_timeout(
        self,
        session_id: Optional[SessionId] = None,
    ) -> Optional[RemoteConfigAPIResponse]:
        async with self._lock:
            signal = AbortSignal()
            deadline = arm_deadline(signal, self.fetch_timeout)
            try:
                return await self.fetch_remote_config(signal, session_id)
            finally:
                deadline.cancel()

    async def fetch_remote_config(
        self,
        signal: AbortSignal,
        session_id: Optional[SessionId] = None,
    ) -> Optional[RemoteConfigAPIResponse]:
        while True:
            if (
                session_id == self.last_fetched_session_id
                and self.attempts >= self.local_config.flush_max_retries
            ):
                raise self._failure(RetryExhaustedError())
            elif signal.aborted:
                raise self._failure(RemoteConfigTimeoutError())
            elif session_id != self.last_fetched_session_id:
                self.last_fetched_session_id = session_id
                self.attempts = 0

            params = self._build_params(session_id)
            self.attempts += 1
            logger.debug("Remote config fetch attempt=%s session_id=%s", self.attempts, session_id)
            try:
                response = await signal.run(
                    self._client.get(self.server_url, params=params, headers={"Accept": "*/*"})
                )
            except asyncio.CancelledError:
                if not signal.aborted:
                    raise
                record_attempt("error")
                raise self._failure(RemoteConfigTimeoutError()) from None
            except Exception as exc:
                record_attempt("error")
                if signal.aborted:
                    raise self._failure(RemoteConfigTimeoutError()) from exc
                raise self._failure(NetworkUnexpectedError(str(exc) or UNEXPECTED_ERROR_MESSAGE)) from exc

            status = self._classify(response.status_code)
            record_attempt(status.value)
            if status == Status.SUCCESS:
                self.attempts = 0
                return await self.parse_and_store_config(response)
            if status == Status.FAILED:
                await self.retry_fetch()
                continue
            raise self._failure(NetworkUnexpectedError())

    async def retry_fetch(self) -> None:
        # attempts already counts the failed request, so the nth retry waits n * base
        delay = self.attempts * self.retry_base_delay
        logger.debug("Remote config retry in %.3fs attempts=%s", delay, self.attempts)
        await asyncio.sleep(delay)

    async def parse_and_store_config(self, response: httpx.Response) -> Optional[RemoteConfigAPIResponse]:
        body = await response.aread()
        document = _DOCUMENT.validate_json(body)
        # valid JSON that is not an object carries no namespaces
        remote_config = RemoteConfigAPIResponse.model_validate(document) if isinstance(document, dict) else None
        self.local_config.logging_sink.info(SUCCESS_REMOTE_CONFIG)
        return remote_config

    def _build_params(self, session_id: Optional[SessionId]) -> List[Tuple[str, str]]:
        params = [("api_key", self.local_config.api_key)]
        params.extend(("config_keys", config_key) for config_key in self.config_keys)
        if session_id:
            params.append(("session_id", str(session_id)))
        return params

    def _failure(self, error: RemoteConfigError) -> RemoteConfigError:
        logger.warning("Remote config fetch failed attempts=%s error=%s", self.attempts, error)
        return error

    async def aclose(self) -> None:
        await self._client.aclose()


async def create_remote_config_fetch(
    local_config: RemoteConfigLocalConfig,
    config_keys: Iterable[str],
    **kwargs: Any,
) -> RemoteConfigFetch:
    return RemoteConfigFetch(local_config, config_keys, **kwargs)


__all__ = ["RemoteConfigFetch", "SUCCESS_REMOTE_CONFIG", "SessionId", "create_remote_config_fetch"]
