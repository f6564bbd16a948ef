"""
Preload every asset under a directory and report progress.

Usage:
    python main.py assets/                   # discover and preload everything
    python main.py assets/ ui/logo.png a.glsl --parallel

Exit codes: 0 all items loaded, 1 some items failed, 2 bad arguments.
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from preloader.assets.server import AssetServer
from preloader.core.registry import PreloadRegistry
from preloader.core.report import BatchReport, PreloadMode
from preloader.core.runner import BatchRunner
from preloader.log import setup_logging
from preloader.settings import PreloadSettings
from preloader.types import ItemId

logger = logging.getLogger("preloader.main")


def build_parser(defaults: PreloadSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Preload and decode asset files")
    parser.add_argument(
        "asset_root",
        nargs="?",
        type=Path,
        default=defaults.asset_root,
        help="Directory the asset paths are relative to",
    )
    parser.add_argument(
        "paths", nargs="*", help="Asset paths to preload (default: all supported)"
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        default=defaults.parallel,
        help="Start every load at once instead of one after another",
    )
    parser.add_argument("--workers", type=int, default=defaults.max_workers)
    parser.add_argument("--log-level", default=defaults.log_level)
    parser.add_argument("--log-file", type=Path, default=defaults.log_file)
    return parser


def print_progress(current: int, total: int) -> None:
    print(f"[preload] {current}/{total}")


def print_summary(report: BatchReport) -> None:
    if report.dropped:
        print("[preload] another batch is already running, nothing done")
        return

    print(
        f"[preload] {report.succeeded} loaded, {report.skipped} skipped, "
        f"{report.failed} failed in {report.elapsed_seconds * 1000:.0f}ms"
    )
    for error in report.errors:
        print(f"[preload]   {error.item_id}: {error.cause}")


async def preload(settings: PreloadSettings, paths: Sequence[str]) -> BatchReport:
    server = AssetServer(settings.asset_root, max_workers=settings.max_workers)
    runner = BatchRunner(PreloadRegistry(), server.precache)
    try:
        item_ids: List[ItemId] = [ItemId(p) for p in paths] or server.discover()
        return await runner.run(
            item_ids,
            parallel=settings.parallel,
            on_progress=print_progress,
        )
    finally:
        server.shutdown()


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        defaults = PreloadSettings.from_env()
        args = build_parser(defaults).parse_args(argv)
        settings = PreloadSettings(
            asset_root=args.asset_root,
            mode=PreloadMode.PARALLEL if args.parallel else PreloadMode.SEQUENTIAL,
            max_workers=args.workers,
            log_level=args.log_level,
            log_file=args.log_file,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    setup_logging(settings.log_level, settings.log_file)

    if not settings.asset_root.is_dir():
        logger.error("Asset root %s is not a directory", settings.asset_root)
        return 2

    report = asyncio.run(preload(settings, args.paths))
    print_summary(report)
    return 0 if report.ok else 1


def cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    cli()
