# preloader/assets/server.py
import asyncio
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Optional

from preloader.assets.handle import AssetHandle
from preloader.assets.importers.base import AssetImporter
from preloader.assets.importers.text import TextSourceImporter
from preloader.assets.importers.texture import TextureImporter
from preloader.assets.registry import AssetRegistry
from preloader.errors import UnsupportedAssetError
from preloader.types import ItemId

logger = logging.getLogger(__name__)

_NETWORK_PREFIXES = ("http://", "https://")


class AssetServer:
    """
    Decodes local asset files on a thread pool and keeps the results in
    memory. precache() is the load operation handed to a BatchRunner.
    """

    def __init__(self, asset_root: Path, max_workers: int = 2) -> None:
        self.root = Path(asset_root)
        self.registry = AssetRegistry()

        self._executor = ThreadPoolExecutor(
            max_workers=max_workers, thread_name_prefix="AssetWorker"
        )

        self._handles: Dict[str, AssetHandle] = {}  # Path -> Handle

        self._importers: Dict[str, AssetImporter] = {}
        for importer in (TextureImporter(), TextSourceImporter()):
            self.register_importer(importer)

    def register_importer(self, importer: AssetImporter) -> None:
        """Route every extension the importer declares to it."""
        for ext in importer.extensions:
            self._importers[ext.lower()] = importer

    def supports(self, path: str) -> bool:
        return Path(path).suffix.lower() in self._importers

    def handle(self, path: str) -> AssetHandle:
        """Return the handle for a path, creating it on first use."""
        if path not in self._handles:
            self._handles[path] = AssetHandle.for_path(path)
        return self._handles[path]

    def is_cached(self, path: str) -> bool:
        return self.handle(path).id in self.registry

    def get(self, path: str) -> Optional[Any]:
        """Decoded data for a path, or None if it was never precached."""
        return self.registry.get(self.handle(path).id)

    async def precache(self, path: ItemId) -> AssetHandle:
        """
        Decode one asset and keep it in memory.
        Already cached paths return immediately without decoding again.
        """
        if path.startswith(_NETWORK_PREFIXES):
            raise UnsupportedAssetError(path, "network assets are not supported")

        handle = self.handle(path)
        if handle.id in self.registry:
            return handle

        ext = Path(path).suffix.lower()
        importer = self._importers.get(ext)
        if not importer:
            raise UnsupportedAssetError(path, f"no importer for '{ext}'")

        full_path = self.root / path
        loop = asyncio.get_running_loop()
        data = await loop.run_in_executor(
            self._executor, importer.import_file, full_path
        )

        self.registry.store(handle.id, data)
        logger.debug("Decoded %s", full_path)
        return handle

    def discover(self) -> List[ItemId]:
        """Every supported file under the root, as sorted root-relative paths."""
        found = [
            ItemId(p.relative_to(self.root).as_posix())
            for p in self.root.rglob("*")
            if p.is_file() and p.suffix.lower() in self._importers
        ]
        return sorted(found)

    def clear(self) -> None:
        """Drop all decoded data. Handles stay valid."""
        self.registry.clear()
        logger.debug("Asset cache cleared")

    def shutdown(self, wait: bool = True) -> None:
        self._executor.shutdown(wait=wait)
