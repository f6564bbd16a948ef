# preloader/assets/types.py
from dataclasses import dataclass


@dataclass(frozen=True)
class TextureData:
    """Decoded image pixels and metadata."""

    data: bytes
    width: int
    height: int
    components: int  # always 4 (RGBA) after decoding
    mode: str  # Pillow mode of the source file, e.g. "RGB", "P"

    @property
    def size_bytes(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class TextSource:
    """Raw text asset (shader source, json, plain text)."""

    source: str
    path: str  # For debugging / error reporting.

    @property
    def size_bytes(self) -> int:
        return len(self.source.encode("utf-8"))
