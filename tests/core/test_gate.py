import asyncio

import pytest

from preloader.core.gate import PreloadGate
from preloader.types import ItemId


@pytest.mark.asyncio
async def test_gate_tracks_progress_until_done(runner, make_loader, callbacks):
    gate = PreloadGate(
        runner,
        ["a", "b"],
        make_loader(),
        on_progress=callbacks.on_progress,
        on_complete=callbacks.on_complete,
    )

    assert gate.is_loading
    assert gate.status_text() == "Loading assets... 0/2"
    assert gate.fraction == 0.0

    report = await gate.start()

    assert not gate.is_loading
    assert gate.current == 2
    assert gate.fraction == 1.0
    assert callbacks.progress == [(1, 2), (2, 2)]
    assert callbacks.completed == 1
    assert report.succeeded == 2


@pytest.mark.asyncio
async def test_gate_skips_batch_when_everything_preloaded(runner, registry, make_loader, callbacks):
    registry.add(ItemId("a"))
    loader = make_loader()
    gate = PreloadGate(runner, ["a"], loader, on_complete=callbacks.on_complete)

    report = await gate.start(parallel=True)

    assert report is None
    assert loader.calls == []
    assert not gate.is_loading
    assert gate.current == gate.total == 1
    assert callbacks.completed == 1


@pytest.mark.asyncio
async def test_gate_sequential_error_message(runner, make_loader):
    messages = []
    gate = PreloadGate(
        runner, ["a", "b"], make_loader(fail={"b"}), on_error=messages.append
    )

    await gate.start()

    assert messages == ["Error loading b: cannot decode b"]
    assert gate.error_messages == messages
    # Sequential progress stops short when the last item fails
    assert gate.current == 1
    assert not gate.is_loading


@pytest.mark.asyncio
async def test_gate_parallel_error_message(runner, make_loader):
    messages = []
    gate = PreloadGate(
        runner, ["a", "b", "c"], make_loader(fail={"a", "c"}), on_error=messages.append
    )

    await gate.start(parallel=True)

    assert messages == ["Failed to load: a, c"]
    assert gate.current == 3


@pytest.mark.asyncio
async def test_gate_reports_unexpected_errors(runner):
    messages = []
    gate = PreloadGate(runner, ["a"], on_error=messages.append)  # no load op anywhere

    report = await gate.start()

    assert report is None
    assert not gate.is_loading
    assert len(messages) == 1
    assert "No load operation" in messages[0]


@pytest.mark.asyncio
async def test_gate_dropped_keeps_loading(runner, make_loader):
    hold = asyncio.Event()
    blocker = asyncio.create_task(runner.run_sequential(["x"], make_loader(gate=hold)))
    while not runner.registry.is_busy:
        await asyncio.sleep(0)

    gate = PreloadGate(runner, ["a"], make_loader())
    report = await gate.start()

    assert report.dropped
    assert gate.is_loading

    hold.set()
    await blocker


def test_gate_empty_list_fraction(runner):
    gate = PreloadGate(runner, [])

    assert gate.total == 0
    assert gate.fraction == 1.0
