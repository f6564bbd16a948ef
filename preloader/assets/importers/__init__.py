# preloader/assets/importers/__init__.py
from preloader.assets.importers.base import AssetImporter
from preloader.assets.importers.text import TextSourceImporter
from preloader.assets.importers.texture import TextureImporter

__all__ = ["AssetImporter", "TextSourceImporter", "TextureImporter"]
