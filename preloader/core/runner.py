# preloader/core/runner.py
import asyncio
import logging
import threading
from typing import Iterable, List, Optional

from preloader.core.registry import PreloadRegistry
from preloader.core.report import BatchReport, ItemOutcome, ItemStatus, PreloadMode
from preloader.core.timing import Stopwatch
from preloader.errors import ItemLoadError
from preloader.types import (
    BatchErrorCallback,
    CompleteCallback,
    ItemErrorCallback,
    ItemId,
    LoadOp,
    ProgressCallback,
)

logger = logging.getLogger(__name__)


class BatchRunner:
    """
    Runs batches of item ids through an injected async load operation,
    skipping items the registry already holds.

    Only one batch may run per registry at a time. A call made while another
    batch is in flight does nothing and returns a report with dropped=True.
    Load failures never raise out of a run; they are logged, passed to
    on_error and recorded on the report.
    """

    def __init__(
        self, registry: PreloadRegistry, load_op: Optional[LoadOp] = None
    ) -> None:
        self.registry = registry
        self.load_op = load_op

    def _resolve(self, load_op: Optional[LoadOp]) -> LoadOp:
        op = load_op or self.load_op
        if op is None:
            raise ValueError("No load operation given and no default configured")
        return op

    async def run(
        self,
        item_ids: Iterable[ItemId],
        load_op: Optional[LoadOp] = None,
        *,
        parallel: bool = False,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        on_item_error: Optional[ItemErrorCallback] = None,
        on_batch_error: Optional[BatchErrorCallback] = None,
    ) -> BatchReport:
        """Dispatch to run_parallel or run_sequential."""
        if parallel:
            return await self.run_parallel(
                item_ids,
                load_op,
                on_progress=on_progress,
                on_complete=on_complete,
                on_error=on_batch_error,
            )
        return await self.run_sequential(
            item_ids,
            load_op,
            on_progress=on_progress,
            on_complete=on_complete,
            on_error=on_item_error,
        )

    async def run_sequential(
        self,
        item_ids: Iterable[ItemId],
        load_op: Optional[LoadOp] = None,
        *,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        on_error: Optional[ItemErrorCallback] = None,
    ) -> BatchReport:
        """
        Load items one at a time, in order.

        on_progress(i + 1, total) fires for loaded and skipped items only.
        A failed item calls on_error(item_id, cause) instead, so progress
        does not necessarily reach total when something fails.
        """
        load = self._resolve(load_op)
        ids = list(item_ids)
        total = len(ids)

        if not self.registry.try_begin():
            logger.info("Already preloading, dropping batch of %d items", total)
            return BatchReport.rejected(PreloadMode.SEQUENTIAL, total)

        report = BatchReport(mode=PreloadMode.SEQUENTIAL, total=total)
        stopwatch = Stopwatch()
        stopwatch.start()
        logger.info("Preloading %d items", total)

        try:
            for index, item_id in enumerate(ids):
                if self.registry.has(item_id):
                    report.outcomes.append(ItemOutcome(item_id, ItemStatus.SKIPPED))
                    if on_progress is not None:
                        on_progress(index + 1, total)
                    continue

                outcome = await self._load_one(load, item_id)
                report.outcomes.append(outcome)

                if outcome.error is None:
                    if on_progress is not None:
                        on_progress(index + 1, total)
                elif on_error is not None:
                    on_error(item_id, outcome.error.cause)

            report.elapsed_seconds = stopwatch.stop()
            logger.info(
                "Preloading finished in %dms (%d loaded, %d skipped, %d failed)",
                stopwatch.elapsed_ms,
                report.succeeded,
                report.skipped,
                report.failed,
            )
            if on_complete is not None:
                on_complete()
        finally:
            self.registry.finish()

        return report

    async def run_parallel(
        self,
        item_ids: Iterable[ItemId],
        load_op: Optional[LoadOp] = None,
        *,
        on_progress: Optional[ProgressCallback] = None,
        on_complete: Optional[CompleteCallback] = None,
        on_error: Optional[BatchErrorCallback] = None,
    ) -> BatchReport:
        """
        Start every load at once and wait for all of them.

        on_progress(completed, total) fires exactly once per item in
        completion order, so the last call is always (total, total).
        Failures are collected and passed to on_error(failed_ids) once,
        before on_complete.
        """
        load = self._resolve(load_op)
        ids = list(item_ids)
        total = len(ids)

        if not self.registry.try_begin():
            logger.info("Already preloading, dropping batch of %d items", total)
            return BatchReport.rejected(PreloadMode.PARALLEL, total)

        report = BatchReport(mode=PreloadMode.PARALLEL, total=total)
        stopwatch = Stopwatch()
        stopwatch.start()
        logger.info("Preloading %d items in parallel", total)

        outcomes: List[Optional[ItemOutcome]] = [None] * total
        completed = 0
        # Increment and progress call are one step; reported counts never go backwards.
        counter_lock = threading.Lock()

        async def preload_item(index: int, item_id: ItemId) -> None:
            nonlocal completed
            if self.registry.has(item_id):
                outcome = ItemOutcome(item_id, ItemStatus.SKIPPED)
            else:
                outcome = await self._load_one(load, item_id)
            outcomes[index] = outcome

            with counter_lock:
                completed += 1
                if on_progress is not None:
                    on_progress(completed, total)

        try:
            tasks = [
                asyncio.ensure_future(preload_item(index, item_id))
                for index, item_id in enumerate(ids)
            ]
            try:
                await asyncio.gather(*tasks)
            except BaseException:
                for task in tasks:
                    task.cancel()
                raise

            report.outcomes = [o for o in outcomes if o is not None]
            report.elapsed_seconds = stopwatch.stop()
            logger.info(
                "Parallel preloading finished in %dms (%d loaded, %d skipped, %d failed)",
                stopwatch.elapsed_ms,
                report.succeeded,
                report.skipped,
                report.failed,
            )

            failed = report.failed_ids
            if failed and on_error is not None:
                on_error(failed)
            if on_complete is not None:
                on_complete()
        finally:
            self.registry.finish()

        return report

    async def _load_one(self, load: LoadOp, item_id: ItemId) -> ItemOutcome:
        try:
            await load(item_id)
        except Exception as e:
            logger.warning("Failed to preload %s: %s", item_id, e)
            return ItemOutcome(item_id, ItemStatus.FAILED, ItemLoadError(item_id, e))

        self.registry.add(item_id)
        logger.debug("Preloaded %s", item_id)
        return ItemOutcome(item_id, ItemStatus.LOADED)
