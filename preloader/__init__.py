# preloader/__init__.py
from preloader.core import (
    BatchReport,
    BatchRunner,
    ItemOutcome,
    ItemStatus,
    PreloadGate,
    PreloadMode,
    PreloadRegistry,
    RunnerState,
    default_registry,
)
from preloader.errors import ItemLoadError, PreloaderError, UnsupportedAssetError
from preloader.settings import PreloadSettings
from preloader.types import ItemId, LoadOp

__all__ = [
    "BatchReport",
    "BatchRunner",
    "ItemId",
    "ItemLoadError",
    "ItemOutcome",
    "ItemStatus",
    "LoadOp",
    "PreloadGate",
    "PreloadMode",
    "PreloadRegistry",
    "PreloadSettings",
    "PreloaderError",
    "RunnerState",
    "UnsupportedAssetError",
    "default_registry",
]
