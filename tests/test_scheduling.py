import asyncio

from log_explorer.scheduling import AsyncioScheduler, PollingScheduler
from log_explorer.selection import SelectionController, SelectionPhase


def test_polling_runs_in_deadline_order(clock):
    scheduler = PollingScheduler(clock=clock)
    calls = []
    scheduler.call_later(2.0, lambda: calls.append("late"))
    scheduler.call_later(1.0, lambda: calls.append("early"))

    clock.advance(1.5)
    assert scheduler.run_due() == 1
    clock.advance(1.0)
    assert scheduler.run_due() == 1
    assert calls == ["early", "late"]


def test_cancelled_task_never_runs(clock):
    scheduler = PollingScheduler(clock=clock)
    calls = []
    task = scheduler.call_later(1.0, lambda: calls.append(1))
    task.cancel()
    assert task.cancelled
    clock.advance(5)
    assert scheduler.run_due() == 0
    assert calls == []
    assert not task.done


def test_asyncio_scheduler_settles_selection(entries):
    async def scenario():
        with SelectionController(AsyncioScheduler(), debounce_seconds=0.01) as controller:
            controller.on_selecting([0], entries)
            assert controller.phase is SelectionPhase.SELECTING
            await asyncio.sleep(0.1)
            return controller.phase

    assert asyncio.run(scenario()) is SelectionPhase.SETTLED


def test_asyncio_task_cancel():
    async def scenario():
        calls = []
        task = AsyncioScheduler().call_later(0.01, lambda: calls.append(1))
        task.cancel()
        await asyncio.sleep(0.05)
        return calls, task.cancelled

    calls, cancelled = asyncio.run(scenario())
    assert calls == []
    assert cancelled
