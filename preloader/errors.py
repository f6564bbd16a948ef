# preloader/errors.py
from preloader.types import ItemId


class PreloaderError(Exception):
    """Base class for all preloader errors."""

    pass


class ItemLoadError(PreloaderError):
    """
    A single item failed to load.
    Never raised out of a batch; carried on the item's outcome instead.
    """

    def __init__(self, item_id: ItemId, cause: BaseException) -> None:
        super().__init__(f"Failed to load {item_id}: {cause}")
        self.item_id = item_id
        self.cause = cause


class UnsupportedAssetError(PreloaderError, ValueError):
    """The asset server has no way to load this path."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot load {path}: {reason}")
        self.path = path
        self.reason = reason
