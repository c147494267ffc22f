"""Cooperative cancellation for fetch sequences."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Set, TypeVar

T = TypeVar("T")


class AbortSignal:
    """Cancellation token shared by every attempt of one fetch sequence.

    Aborting marks the signal and cancels any request currently running
    through :meth:`run`. Code paths between requests check :attr:`aborted`.
    """

    def __init__(self) -> None:
        self._aborted = False
        self._inflight: Set["asyncio.Future[Any]"] = set()

    @property
    def aborted(self) -> bool:
        return self._aborted

    def abort(self) -> None:
        self._aborted = True
        for task in list(self._inflight):
            task.cancel()

    async def run(self, awaitable: Awaitable[T]) -> T:
        task = asyncio.ensure_future(awaitable)
        if self._aborted:
            task.cancel()
        self._inflight.add(task)
        try:
            return await task
        finally:
            self._inflight.discard(task)


def arm_deadline(signal: AbortSignal, timeout: float) -> asyncio.TimerHandle:
    """Abort ``signal`` once ``timeout`` seconds elapse; cancel the handle to disarm."""
    loop = asyncio.get_running_loop()
    return loop.call_later(timeout, signal.abort)


__all__ = ["AbortSignal", "arm_deadline"]
