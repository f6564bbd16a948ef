# preloader/assets/importers/base.py
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, ClassVar, FrozenSet


class AssetImporter(ABC):
    extensions: ClassVar[FrozenSet[str]] = frozenset()

    @abstractmethod
    def import_file(self, path: Path) -> Any:
        """
        Read file from disk and return a decoded, CPU-friendly data object.
        Runs on a worker thread, so it must be thread-safe.
        """
        pass
