"""Prometheus instruments for remote config fetches."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

FETCH_LATENCY = Histogram(
    "remote_config_fetch_latency_seconds",
    "Remote config lookup latency",
    ["outcome"],
)
FETCH_ATTEMPTS = Counter(
    "remote_config_fetch_attempts_total",
    "Remote config network attempts by classified status",
    ["status"],
)


def observe_latency(outcome: str, elapsed_ms: int) -> None:
    FETCH_LATENCY.labels(outcome=outcome).observe(elapsed_ms / 1000.0)


def record_attempt(status: str) -> None:
    FETCH_ATTEMPTS.labels(status=status).inc()


__all__ = ["FETCH_ATTEMPTS", "FETCH_LATENCY", "observe_latency", "record_attempt"]
