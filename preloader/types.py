# preloader/types.py
from typing import Any, Awaitable, Callable, List, NewType

ItemId = NewType("ItemId", str)  # e.g. an asset path relative to the root

# The injected host operation: load/decode one identifier.
LoadOp = Callable[[ItemId], Awaitable[Any]]

ProgressCallback = Callable[[int, int], None]  # (completed, total)
CompleteCallback = Callable[[], None]
ItemErrorCallback = Callable[[ItemId, BaseException], None]
BatchErrorCallback = Callable[[List[ItemId]], None]
