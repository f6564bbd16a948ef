# preloader/assets/importers/texture.py
from pathlib import Path

from PIL import Image

from preloader.assets.importers.base import AssetImporter
from preloader.assets.types import TextureData


class TextureImporter(AssetImporter):
    extensions = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp"})

    def import_file(self, path: Path) -> TextureData:
        with Image.open(path) as img:
            source_mode = img.mode
            # Forces a full decode, so corrupt files fail here and not on first draw.
            converted = img.convert("RGBA")

            width, height = converted.size
            data = converted.tobytes()

        return TextureData(
            data=data, width=width, height=height, components=4, mode=source_mode
        )
