# preloader/assets/registry.py
from typing import Any, Dict, Optional

from preloader.assets.handle import AssetId


class AssetRegistry:
    """
    Stores decoded asset data (CPU side) mapped by AssetId.
    Grows until clear() is called.
    """

    def __init__(self) -> None:
        self._storage: Dict[AssetId, Any] = {}

    def store(self, asset_id: AssetId, data: Any) -> None:
        """Register decoded data."""
        self._storage[asset_id] = data

    def get(self, asset_id: AssetId) -> Optional[Any]:
        """Retrieve decoded data if available."""
        return self._storage.get(asset_id)

    def __contains__(self, asset_id: AssetId) -> bool:
        return asset_id in self._storage

    def __len__(self) -> int:
        return len(self._storage)

    def total_bytes(self) -> int:
        return sum(getattr(data, "size_bytes", 0) for data in self._storage.values())

    def clear(self) -> None:
        """Drop all decoded data."""
        self._storage.clear()
