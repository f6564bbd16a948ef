# preloader/assets/importers/text.py
from pathlib import Path

from preloader.assets.importers.base import AssetImporter
from preloader.assets.types import TextSource


class TextSourceImporter(AssetImporter):
    extensions = frozenset({".glsl", ".vert", ".frag", ".comp", ".txt", ".json"})

    def import_file(self, path: Path) -> TextSource:
        with open(path, "r", encoding="utf-8") as f:
            source = f.read()

        return TextSource(source=source, path=str(path))
