# preloader/assets/__init__.py
from preloader.assets.handle import AssetHandle, AssetId
from preloader.assets.registry import AssetRegistry
from preloader.assets.server import AssetServer
from preloader.assets.types import TextSource, TextureData

__all__ = [
    "AssetServer",
    "AssetHandle",
    "AssetId",
    "AssetRegistry",
    "TextureData",
    "TextSource",
]
