import asyncio
import logging
import threading
import time

import pytest

from dynamic_draft.editor.scheduling import (
    AsyncioScheduler,
    Debouncer,
    ManualScheduler,
    ThreadingScheduler,
    default_scheduler,
)


def test_manual_scheduler_fires_in_due_order():
    scheduler = ManualScheduler()
    fired = []
    scheduler.call_later(2.0, lambda: fired.append("late"))
    scheduler.call_later(1.0, lambda: fired.append("early"))

    scheduler.advance(1.5)
    assert fired == ["early"]
    assert scheduler.now() == 1.5

    scheduler.advance(0.5)
    assert fired == ["early", "late"]
    assert scheduler.pending == 0


def test_cancelled_task_never_fires():
    scheduler = ManualScheduler()
    fired = []
    task = scheduler.call_later(1.0, lambda: fired.append(1))
    task.cancel()
    scheduler.advance(5)
    assert fired == []


def test_debouncer_keeps_only_latest_call_per_key():
    scheduler = ManualScheduler()
    debouncer = Debouncer(scheduler, 0.3)
    seen = []

    debouncer.schedule("a", lambda: seen.append("first"))
    scheduler.advance(0.2)
    debouncer.schedule("a", lambda: seen.append("second"))
    debouncer.schedule("b", lambda: seen.append("other"))
    scheduler.advance(0.2)
    assert seen == []
    assert debouncer.is_pending("a")

    scheduler.advance(0.15)
    assert sorted(seen) == ["other", "second"]
    assert not debouncer.is_pending("a")


def test_debouncer_flush_and_cancel_all():
    scheduler = ManualScheduler()
    debouncer = Debouncer(scheduler, 1.0)
    seen = []

    debouncer.schedule("a", lambda: seen.append("a"))
    debouncer.flush()
    assert seen == ["a"]
    scheduler.advance(2)
    assert seen == ["a"]

    debouncer.schedule("b", lambda: seen.append("b"))
    debouncer.cancel_all()
    scheduler.advance(2)
    assert seen == ["a"]


@pytest.mark.asyncio
async def test_asyncio_scheduler_runs_callbacks_and_coroutines():
    scheduler = AsyncioScheduler()
    seen = []

    async def record():
        seen.append("coroutine")

    scheduler.call_later(0.01, lambda: seen.append("plain"))
    scheduler.call_later(0.01, record)
    await asyncio.sleep(0.05)

    assert sorted(seen) == ["coroutine", "plain"]
    assert scheduler.now() > 0


def test_default_scheduler_without_event_loop_uses_timer_threads():
    assert isinstance(default_scheduler(), ThreadingScheduler)


@pytest.mark.asyncio
async def test_default_scheduler_inside_event_loop_uses_it():
    scheduler = default_scheduler()
    assert isinstance(scheduler, AsyncioScheduler)
    assert scheduler.loop is asyncio.get_running_loop()


def test_threading_scheduler_runs_callbacks_and_honours_cancel():
    scheduler = ThreadingScheduler()
    fired = threading.Event()
    awaited = threading.Event()
    skipped = []

    async def mark():
        awaited.set()

    scheduler.call_later(0.01, fired.set)
    scheduler.call_later(0.01, mark)
    scheduler.call_later(0.01, lambda: skipped.append(1)).cancel()

    assert fired.wait(1)
    assert awaited.wait(1)
    time.sleep(0.05)
    assert skipped == []


def test_threading_scheduler_close_cancels_pending_timers():
    scheduler = ThreadingScheduler()
    fired = threading.Event()
    scheduler.call_later(0.05, fired.set)
    scheduler.close()
    assert not fired.wait(0.2)


@pytest.mark.asyncio
async def test_failed_coroutine_callback_is_logged_and_released(caplog):
    scheduler = ManualScheduler()

    async def failing_poll():
        raise ValueError("poll failed")

    scheduler.call_later(1, failing_poll)
    with caplog.at_level(logging.ERROR, logger="dynamic_draft.editor.scheduling"):
        scheduler.advance(1)
        assert scheduler.running_tasks == 1
        for _ in range(3):
            await asyncio.sleep(0)

    assert scheduler.running_tasks == 0
    assert "poll failed" in caplog.text


@pytest.mark.asyncio
async def test_aclose_cancels_running_coroutines():
    scheduler = AsyncioScheduler()
    started = asyncio.Event()

    async def long_running():
        started.set()
        await asyncio.sleep(60)

    scheduler.call_later(0, long_running)
    await asyncio.wait_for(started.wait(), 1)
    assert scheduler.running_tasks == 1

    await scheduler.aclose()
    assert scheduler.running_tasks == 0
