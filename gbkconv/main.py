from __future__ import annotations

import argparse
import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import List, Optional

from .config import settings
from .logger import configure_logging
from .services.traversal import convert_tree

logger = logging.getLogger(__name__)


def package_version() -> str:
    try:
        return version("gbkconv")
    except PackageNotFoundError:
        # Running from a source checkout.
        return "unknown"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gbk2utf8",
        description=(
            "Recursively convert GBK encoded .c/.h files to UTF-8 in place. "
            "Files that are already UTF-8, contain no Chinese characters, "
            "or cannot be decoded are left untouched."
        ),
    )
    parser.add_argument(
        "root",
        nargs="?",
        type=Path,
        default=Path.cwd(),
        help="Directory to scan recursively (default: current directory)",
    )
    parser.add_argument(
        "-i",
        "--show-info",
        action="store_true",
        help="Log the verdict, guessed encoding and confidence of every file",
    )
    parser.add_argument(
        "-s",
        "--scan-only",
        action="store_true",
        help="Only classify files, never rewrite them",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {package_version()}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging()
    logger.info("gbk2utf8 version %s", package_version())

    try:
        summary = convert_tree(
            args.root,
            scan_only=args.scan_only,
            show_info=args.show_info,
            cjk_range=settings.cjk_range,
        )
    except OSError as exc:
        raise SystemExit(f"Cannot scan directory {args.root}: {exc}")

    verb = "convertible" if summary.scan_only else "converted"
    logger.info(
        "Scanned %d files: %d %s, %d unchanged, %d failed",
        summary.scanned,
        len(summary.converted),
        verb,
        len(summary.unchanged),
        len(summary.failed),
    )
    if summary.failed:
        logger.warning("The following files were not converted:")
        for report in summary.failed:
            logger.warning("  %s: %s", report.path, report.reason)
    return 0


__all__ = ["main", "parse_args"]
