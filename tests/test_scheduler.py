import asyncio

import pytest

from config import PlaybackConfig
from engine import AsyncioScheduler, ManualScheduler, PlaybackController, generate
from graph import Edge, Graph, Node


def test_manual_scheduler_fires_in_due_order(scheduler: ManualScheduler) -> None:
    fired = []
    scheduler.call_later(30, lambda: fired.append("late"))
    scheduler.call_later(10, lambda: fired.append("early"))
    scheduler.call_later(10, lambda: fired.append("early-2"))

    assert scheduler.advance(20) == 2
    assert fired == ["early", "early-2"]
    assert scheduler.now_ms == 20
    assert scheduler.pending == 1


def test_manual_scheduler_cancel(scheduler: ManualScheduler) -> None:
    fired = []
    handle = scheduler.call_later(5, lambda: fired.append(1))
    handle.cancel()

    assert handle.cancelled
    assert scheduler.advance(100) == 0
    assert fired == []
    assert scheduler.pending == 0


def test_manual_scheduler_runs_callbacks_scheduled_by_callbacks(scheduler: ManualScheduler) -> None:
    fired = []

    def chain():
        fired.append(scheduler.now_ms)
        if len(fired) < 3:
            scheduler.call_later(10, chain)

    scheduler.call_later(10, chain)
    assert scheduler.run_until_idle() == 3
    assert fired == [10, 20, 30]


def test_asyncio_scheduler_requires_a_loop() -> None:
    with pytest.raises(RuntimeError):
        AsyncioScheduler().call_later(10, lambda: None)


def test_asyncio_scheduler_fires_and_cancels() -> None:
    async def scenario():
        fired = []
        sched = AsyncioScheduler()
        sched.call_later(10, lambda: fired.append("kept"))
        dropped = sched.call_later(10, lambda: fired.append("dropped"))
        dropped.cancel()
        await asyncio.sleep(0.05)
        return fired, dropped.cancelled

    fired, cancelled = asyncio.run(scenario())
    assert fired == ["kept"]
    assert cancelled


def test_playback_on_an_asyncio_loop() -> None:
    # start – end: init, visit start, discover end, visit end
    graph = Graph([Node(0, "start"), Node(1, "end")], [Edge(0, 1)], name="pair")
    trace = generate(graph, "bfs")

    async def scenario():
        loop = asyncio.get_running_loop()
        done = loop.create_future()
        seen = []

        def on_step(step):
            seen.append(step.step_number)
            if step.step_number == len(trace) - 1:
                done.set_result(None)

        ctrl = PlaybackController(
            AsyncioScheduler(loop), PlaybackConfig(interval_ms=200), trace=trace, on_step=on_step
        )
        ctrl.play()
        await asyncio.wait_for(done, timeout=5)
        return seen, ctrl.is_finished, ctrl.has_pending_timer

    seen, finished, pending = asyncio.run(scenario())
    assert seen == [0, 1, 2, 3]
    assert finished
    assert not pending
