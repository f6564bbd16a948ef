# preloader/assets/handle.py
import hashlib
from dataclasses import dataclass
from typing import NewType

AssetId = NewType("AssetId", int)  # stable hash of the asset path


def asset_id_for(path: str) -> AssetId:
    return AssetId(int(hashlib.sha256(path.encode()).hexdigest(), 16) % (10**16))


@dataclass(frozen=True)
class AssetHandle:
    """
    Lightweight reference to an asset.
    Holding this does not guarantee that the decoded data is still cached.
    """

    id: AssetId
    path: str

    @classmethod
    def for_path(cls, path: str) -> "AssetHandle":
        return cls(asset_id_for(path), path)
