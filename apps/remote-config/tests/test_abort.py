from __future__ import annotations

import asyncio

import pytest

from remote_config.abort import AbortSignal, arm_deadline


@pytest.mark.asyncio
async def test_run_on_aborted_signal_never_starts_work() -> None:
    started = {"value": False}

    async def work() -> str:
        started["value"] = True
        return "done"

    signal = AbortSignal()
    signal.abort()

    with pytest.raises(asyncio.CancelledError):
        await signal.run(work())
    assert started["value"] is False


@pytest.mark.asyncio
async def test_abort_cancels_inflight_work() -> None:
    signal = AbortSignal()

    async def work() -> None:
        await asyncio.sleep(10)

    asyncio.get_running_loop().call_later(0.01, signal.abort)
    with pytest.raises(asyncio.CancelledError):
        await signal.run(work())
    assert signal.aborted


@pytest.mark.asyncio
async def test_disarmed_deadline_leaves_signal_untouched() -> None:
    signal = AbortSignal()
    handle = arm_deadline(signal, 0.01)
    handle.cancel()

    await asyncio.sleep(0.03)
    assert not signal.aborted
    assert await signal.run(asyncio.sleep(0, result="ok")) == "ok"
