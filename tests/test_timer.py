import asyncio

from tests.conftest import ManualSleep, wait_until
from weather_widget.controller import RefreshTimer


async def test_timer_fires_after_each_interval():
    sleep = ManualSleep()
    timer = RefreshTimer(600.0, sleep=sleep)
    calls = []

    async def callback():
        calls.append(len(calls))

    timer.start(callback)
    await wait_until(lambda: sleep.delays == [600.0])
    assert calls == []

    sleep.release(2)
    await wait_until(lambda: len(sleep.delays) == 3)

    assert calls == [0, 1]
    assert timer.tick_count == 2
    await timer.stop()
    assert not timer.is_active


async def test_failing_callback_does_not_cancel_timer():
    sleep = ManualSleep()
    timer = RefreshTimer(60.0, sleep=sleep)

    async def callback():
        raise RuntimeError("boom")

    timer.start(callback)
    sleep.release()
    await wait_until(lambda: len(sleep.delays) == 2)

    assert timer.is_active
    assert sleep.delays == [60.0, 60.0]
    await timer.stop()


async def test_start_twice_keeps_single_task():
    sleep = ManualSleep()
    timer = RefreshTimer(60.0, sleep=sleep)

    async def callback():
        pass

    timer.start(callback)
    timer.start(callback)
    await wait_until(lambda: sleep.delays)
    for _ in range(5):
        await asyncio.sleep(0)

    assert sleep.delays == [60.0]
    await timer.stop()


async def test_stop_is_idempotent():
    timer = RefreshTimer(60.0, sleep=ManualSleep())

    await timer.stop()
    await timer.stop()

    assert not timer.is_active


async def test_tick_before_start_is_ignored():
    timer = RefreshTimer(60.0)

    await timer.tick()

    assert timer.tick_count == 0
