# preloader/core/gate.py
import logging
from typing import Callable, List, Optional, Sequence

from preloader.core.report import BatchReport
from preloader.core.runner import BatchRunner
from preloader.types import CompleteCallback, ItemId, LoadOp, ProgressCallback

logger = logging.getLogger(__name__)

MessageCallback = Callable[[str], None]


class PreloadGate:
    """
    Loading-screen state for a fixed set of items.

    Holds the values a splash or loading scene needs to draw
    ("Loading... current/total") and flips is_loading off once the batch
    finishes. Error details are flattened to human readable messages.
    """

    def __init__(
        self,
        runner: BatchRunner,
        item_ids: Sequence[ItemId],
        load_op: Optional[LoadOp] = None,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        on_error: Optional[MessageCallback] = None,
    ) -> None:
        self.runner = runner
        self.item_ids = list(item_ids)
        self.load_op = load_op
        self.on_progress = on_progress
        self.on_complete = on_complete
        self.on_error = on_error

        self.is_loading = True
        self.current = 0
        self.total = len(self.item_ids)
        self.error_messages: List[str] = []
        self.report: Optional[BatchReport] = None

    @property
    def fraction(self) -> float:
        if self.total == 0:
            return 1.0
        return self.current / self.total

    def status_text(self) -> str:
        return f"Loading assets... {self.current}/{self.total}"

    async def start(self, parallel: bool = False) -> Optional[BatchReport]:
        """
        Preload the gate's items. Returns the batch report, or None when
        everything was already preloaded and no batch was needed.
        """
        if self.runner.registry.has_all(self.item_ids):
            self.current = self.total
            self.is_loading = False
            if self.on_complete is not None:
                self.on_complete()
            return None

        try:
            self.report = await self.runner.run(
                self.item_ids,
                self.load_op,
                parallel=parallel,
                on_progress=self._handle_progress,
                on_complete=self._handle_complete,
                on_item_error=self._handle_item_error,
                on_batch_error=self._handle_batch_error,
            )
        except Exception as e:
            logger.exception("Preload gate failed")
            self._report_error(str(e))
            self.is_loading = False
            return None

        if self.report.dropped:
            logger.info("Preload gate could not start, another batch is running")
        return self.report

    def _handle_progress(self, current: int, total: int) -> None:
        self.current = current
        if self.on_progress is not None:
            self.on_progress(current, total)

    def _handle_complete(self) -> None:
        self.is_loading = False
        if self.on_complete is not None:
            self.on_complete()

    def _handle_item_error(self, item_id: ItemId, cause: BaseException) -> None:
        self._report_error(f"Error loading {item_id}: {cause}")

    def _handle_batch_error(self, failed: List[ItemId]) -> None:
        self._report_error(f"Failed to load: {', '.join(failed)}")

    def _report_error(self, message: str) -> None:
        self.error_messages.append(message)
        if self.on_error is not None:
            self.on_error(message)
