# preloader/settings.py
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from preloader.core.report import PreloadMode

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class PreloadSettings:
    """
    Configuration for a preloading session.
    """

    asset_root: Path = Path("assets")
    mode: PreloadMode = PreloadMode.SEQUENTIAL
    max_workers: int = 2  # decode threads used by the AssetServer
    log_level: str = "INFO"
    log_file: Optional[Path] = None

    def __post_init__(self) -> None:
        self.asset_root = Path(self.asset_root)
        self.mode = PreloadMode(self.mode)
        self.log_level = self.log_level.upper()

        if self.max_workers < 1:
            raise ValueError(f"max_workers must be >= 1, got {self.max_workers}")
        if self.log_level not in _LOG_LEVELS:
            raise ValueError(f"Unknown log level {self.log_level!r}")

    @property
    def parallel(self) -> bool:
        return self.mode is PreloadMode.PARALLEL

    @classmethod
    def from_env(
        cls, environ: Optional[Mapping[str, str]] = None
    ) -> "PreloadSettings":
        """
        Build settings from PRELOADER_* variables, falling back to defaults.
        """
        env = os.environ if environ is None else environ
        defaults = cls()

        workers = env.get("PRELOADER_MAX_WORKERS")
        try:
            max_workers = int(workers) if workers else defaults.max_workers
        except ValueError as e:
            raise ValueError(
                f"PRELOADER_MAX_WORKERS must be an integer, got {workers!r}"
            ) from e

        log_file = env.get("PRELOADER_LOG_FILE")

        return cls(
            asset_root=Path(env.get("PRELOADER_ASSET_ROOT", defaults.asset_root)),
            mode=env.get("PRELOADER_MODE", defaults.mode.value).lower(),
            max_workers=max_workers,
            log_level=env.get("PRELOADER_LOG_LEVEL", defaults.log_level),
            log_file=Path(log_file) if log_file else None,
        )
