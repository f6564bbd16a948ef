# preloader/core/registry.py
import logging
import threading
from enum import Enum
from typing import Iterable, List, Optional, Set

from preloader.types import ItemId

logger = logging.getLogger(__name__)


class RunnerState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"


class PreloadRegistry:
    """
    Tracks which items have been preloaded, plus the single-flight guard
    shared by every batch run against this registry.

    Membership only grows through successful loads and only shrinks through
    clear()/discard(). The guard is registry-wide, not per item.
    """

    def __init__(self) -> None:
        self._seen: Set[ItemId] = set()
        self._state = RunnerState.IDLE
        self._lock = threading.Lock()

    def has(self, item_id: ItemId) -> bool:
        with self._lock:
            return item_id in self._seen

    def has_all(self, item_ids: Iterable[ItemId]) -> bool:
        with self._lock:
            return all(item_id in self._seen for item_id in item_ids)

    def __contains__(self, item_id: ItemId) -> bool:
        return self.has(item_id)

    def __len__(self) -> int:
        return self.count

    @property
    def count(self) -> int:
        with self._lock:
            return len(self._seen)

    @property
    def state(self) -> RunnerState:
        with self._lock:
            return self._state

    @property
    def is_busy(self) -> bool:
        return self.state is RunnerState.RUNNING

    def snapshot(self) -> List[ItemId]:
        """Current members, sorted so repeated calls enumerate the same way."""
        with self._lock:
            return sorted(self._seen)

    def add(self, item_id: ItemId) -> None:
        """Mark an item as preloaded."""
        with self._lock:
            self._seen.add(item_id)

    def discard(self, item_id: ItemId) -> None:
        with self._lock:
            self._seen.discard(item_id)

    def clear(self) -> None:
        """
        Forget every preloaded item. Does not touch the busy state, so an
        in-flight batch keeps running and may re-register its items.
        """
        with self._lock:
            self._seen.clear()
        logger.debug("Preload registry cleared")

    def try_begin(self) -> bool:
        """Atomically move IDLE -> RUNNING. False if a batch is already running."""
        with self._lock:
            if self._state is RunnerState.RUNNING:
                return False
            self._state = RunnerState.RUNNING
            return True

    def finish(self) -> None:
        """Return to IDLE. Called on every exit path of a batch."""
        with self._lock:
            self._state = RunnerState.IDLE


_default: Optional[PreloadRegistry] = None
_default_lock = threading.Lock()


def default_registry() -> PreloadRegistry:
    """Lazily created registry shared by callers that want one per process."""
    global _default
    with _default_lock:
        if _default is None:
            _default = PreloadRegistry()
        return _default
