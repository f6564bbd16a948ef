# preloader/core/__init__.py
from preloader.core.gate import PreloadGate
from preloader.core.registry import PreloadRegistry, RunnerState, default_registry
from preloader.core.report import BatchReport, ItemOutcome, ItemStatus, PreloadMode
from preloader.core.runner import BatchRunner
from preloader.core.timing import Stopwatch

__all__ = [
    "BatchRunner",
    "BatchReport",
    "ItemOutcome",
    "ItemStatus",
    "PreloadGate",
    "PreloadMode",
    "PreloadRegistry",
    "RunnerState",
    "Stopwatch",
    "default_registry",
]
