# preloader/core/report.py
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from preloader.errors import ItemLoadError
from preloader.types import ItemId


class ItemStatus(str, Enum):
    LOADED = "loaded"
    SKIPPED = "skipped"  # already in the registry, load_op not called
    FAILED = "failed"


class PreloadMode(str, Enum):
    SEQUENTIAL = "sequential"
    PARALLEL = "parallel"


@dataclass(frozen=True, slots=True)
class ItemOutcome:
    item_id: ItemId
    status: ItemStatus
    error: Optional[ItemLoadError] = None

    @property
    def ok(self) -> bool:
        return self.status is not ItemStatus.FAILED


@dataclass(slots=True)
class BatchReport:
    """
    Result of one batch run. Outcomes are in input order for both modes.
    A dropped report means the single-flight guard rejected the call and
    nothing was attempted.
    """

    mode: PreloadMode
    total: int
    outcomes: List[ItemOutcome] = field(default_factory=list)
    elapsed_seconds: float = 0.0
    dropped: bool = False

    @classmethod
    def rejected(cls, mode: PreloadMode, total: int) -> "BatchReport":
        return cls(mode=mode, total=total, dropped=True)

    def _count(self, status: ItemStatus) -> int:
        return sum(1 for o in self.outcomes if o.status is status)

    @property
    def skipped(self) -> int:
        return self._count(ItemStatus.SKIPPED)

    @property
    def succeeded(self) -> int:
        return self._count(ItemStatus.LOADED)

    @property
    def failed(self) -> int:
        return self._count(ItemStatus.FAILED)

    @property
    def attempted(self) -> int:
        """Items that actually went through load_op."""
        return self.succeeded + self.failed

    @property
    def failed_ids(self) -> List[ItemId]:
        return [o.item_id for o in self.outcomes if o.status is ItemStatus.FAILED]

    @property
    def errors(self) -> List[ItemLoadError]:
        return [o.error for o in self.outcomes if o.error is not None]

    @property
    def ok(self) -> bool:
        return not self.dropped and self.failed == 0
