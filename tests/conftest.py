import asyncio
from typing import Dict, Iterable, List, Optional, Tuple

import pytest
from PIL import Image

from preloader.assets.server import AssetServer
from preloader.core.registry import PreloadRegistry
from preloader.core.runner import BatchRunner
from preloader.types import ItemId


class RecordingLoader:
    """
    Fake load operation. Records every call, tracks how many loads overlap
    and fails for the ids it was told to fail.
    """

    def __init__(
        self,
        fail: Iterable[str] = (),
        delays: Optional[Dict[str, float]] = None,
        gate: Optional[asyncio.Event] = None,
    ) -> None:
        self.fail = set(fail)
        self.delays = delays or {}
        self.gate = gate
        self.calls: List[ItemId] = []
        self.events: List[Tuple[str, ItemId]] = []
        self.active = 0
        self.max_active = 0

    async def __call__(self, item_id: ItemId) -> str:
        self.calls.append(item_id)
        self.events.append(("start", item_id))
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.gate is not None:
                await self.gate.wait()
            await asyncio.sleep(self.delays.get(item_id, 0))
            if item_id in self.fail:
                raise RuntimeError(f"cannot decode {item_id}")
            return f"data:{item_id}"
        finally:
            self.active -= 1
            self.events.append(("end", item_id))


class CallbackLog:
    """Collects callback invocations in the order they happen."""

    def __init__(self) -> None:
        self.progress: List[Tuple[int, int]] = []
        self.errors: List[tuple] = []
        self.completed = 0

    def on_progress(self, current: int, total: int) -> None:
        self.progress.append((current, total))

    def on_complete(self) -> None:
        self.completed += 1

    def on_error(self, *args) -> None:
        self.errors.append(args)


@pytest.fixture
def registry():
    """Returns a fresh PreloadRegistry for each test."""
    return PreloadRegistry()


@pytest.fixture
def runner(registry):
    return BatchRunner(registry)


@pytest.fixture
def make_loader():
    return RecordingLoader


@pytest.fixture
def callbacks():
    return CallbackLog()


@pytest.fixture
def asset_dir(tmp_path):
    """A small asset tree: two images, one shader, one unsupported file."""
    Image.new("RGB", (2, 2), color="red").save(tmp_path / "red.png")
    (tmp_path / "ui").mkdir()
    Image.new("RGBA", (3, 1), color=(0, 0, 255, 128)).save(tmp_path / "ui" / "blue.png")
    (tmp_path / "basic.frag").write_text("void main() {}")
    (tmp_path / "notes.md").write_text("# not an asset")
    return tmp_path


@pytest.fixture
def server(asset_dir):
    server = AssetServer(asset_root=asset_dir)
    yield server
    server.shutdown()
