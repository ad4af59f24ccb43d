from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterable, Optional, Tuple

from tqdm import tqdm

from ..config import SOURCE_EXTENSIONS, settings
from ..models.outcome import Converted, Failed
from ..models.report import FileReport, RunSummary
from .classifier import classify
from .converter import decide
from .detector import guess_encoding
from .writer import write_atomic

logger = logging.getLogger(__name__)


def is_source_file(path: Path) -> bool:
    return path.name.endswith(SOURCE_EXTENSIONS)


def _log_walk_error(exc: OSError) -> None:
    logger.warning("%s: skipped directory: %s", exc.filename, exc)


def iter_source_files(root: Path) -> Iterable[Path]:
    # Symlinked directories are not entered; symlinked files are.
    for dirpath, dirnames, filenames in os.walk(root, onerror=_log_walk_error):
        dirnames.sort()
        for name in sorted(filenames):
            path = Path(dirpath) / name
            if is_source_file(path) and path.is_file():
                yield path


def convert_file(
        path: Path,
        *,
        scan_only: bool = False,
        show_info: bool = False,
        cjk_range: Optional[Tuple[int, int]] = None,
) -> FileReport:
    """Read one file, decide what to do with it and write back if converted.

    I/O errors are reported in the returned FileReport, never raised.
    """
    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.warning("%s: read failed: %s", path, exc)
        return FileReport(path=str(path), status="error", reason=str(exc))

    verdict = classify(data)
    outcome = decide(data, verdict, cjk_range or settings.cjk_range)
    report = FileReport(path=str(path), status="unchanged", verdict=verdict)

    if show_info:
        report.guessed_encoding, report.confidence = guess_encoding(data)

    if isinstance(outcome, Failed):
        report.status = "failed"
        report.reason = outcome.reason
        logger.warning("%s: %s", path, outcome.reason)
    elif isinstance(outcome, Converted):
        report.status = "converted"
        if not scan_only:
            try:
                write_atomic(path, outcome.data)
            except OSError as exc:
                logger.warning("%s: write failed: %s", path, exc)
                return report.model_copy(update={"status": "error", "reason": str(exc)})

    if show_info:
        action = report.status
        if report.status == "converted" and scan_only:
            action = "convertible"
        logger.info(
            "%s: verdict=%s, guess=%s (confidence %.2f), %s",
            path,
            verdict.value,
            report.guessed_encoding,
            report.confidence or 0.0,
            action,
        )
    return report


def convert_tree(
        root: Path,
        *,
        scan_only: bool = False,
        show_info: bool = False,
        show_progress: Optional[bool] = None,
        cjk_range: Optional[Tuple[int, int]] = None,
) -> RunSummary:
    root = Path(root)
    if not root.exists():
        raise FileNotFoundError(f"directory {root} does not exist")
    if not root.is_dir():
        raise NotADirectoryError(f"{root} is not a directory")
    # An unreadable root is fatal, unlike unreadable subdirectories.
    with os.scandir(root):
        pass

    if show_progress is None:
        show_progress = settings.show_progress

    summary = RunSummary(root=str(root), scan_only=scan_only)
    files = list(iter_source_files(root))
    logger.info("Found %d source files under %s", len(files), root)

    for path in tqdm(files, desc="Converting", unit="file", disable=not show_progress):
        summary.files.append(
            convert_file(path, scan_only=scan_only, show_info=show_info, cjk_range=cjk_range)
        )
    return summary


__all__ = ["convert_file", "convert_tree", "is_source_file", "iter_source_files"]
