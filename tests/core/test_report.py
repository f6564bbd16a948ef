import time

from preloader.core.report import BatchReport, ItemOutcome, ItemStatus, PreloadMode
from preloader.core.timing import Stopwatch
from preloader.errors import ItemLoadError
from preloader.types import ItemId


def test_report_counts():
    err = ItemLoadError(ItemId("c"), OSError("missing"))
    report = BatchReport(
        mode=PreloadMode.SEQUENTIAL,
        total=4,
        outcomes=[
            ItemOutcome(ItemId("a"), ItemStatus.LOADED),
            ItemOutcome(ItemId("b"), ItemStatus.SKIPPED),
            ItemOutcome(ItemId("c"), ItemStatus.FAILED, err),
            ItemOutcome(ItemId("d"), ItemStatus.LOADED),
        ],
    )

    assert report.succeeded == 2
    assert report.skipped == 1
    assert report.failed == 1
    assert report.attempted == 3
    assert report.failed_ids == ["c"]
    assert report.errors == [err]
    assert not report.ok


def test_rejected_report():
    report = BatchReport.rejected(PreloadMode.PARALLEL, total=5)

    assert report.dropped
    assert report.total == 5
    assert report.attempted == 0
    assert not report.ok


def test_item_load_error_message():
    cause = ValueError("bad header")
    err = ItemLoadError(ItemId("a.png"), cause)

    assert err.item_id == "a.png"
    assert err.cause is cause
    assert "a.png" in str(err)
    assert "bad header" in str(err)


def test_stopwatch_measures_and_freezes():
    watch = Stopwatch()
    watch.start()
    time.sleep(0.01)

    elapsed = watch.stop()

    assert elapsed >= 0.01
    assert watch.elapsed_ms >= 9
    # Frozen after stop()
    assert watch.elapsed == elapsed
