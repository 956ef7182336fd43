"""Batch driver: find animation files, rewrite them, and tally the results.

Files are processed one at a time in name order. Per-file failures are caught
at :func:`process_file` and recorded on the returned :class:`FileResult`, so
a bad file never stops the batch. Only setup problems (missing input folder,
output folder that cannot be created) raise :class:`SetupError`.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Tuple

from .config import DEFAULT_EXTENSIONS
from .jma import rewrite

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = DEFAULT_EXTENSIONS


class SetupError(RuntimeError):
    """Fatal problem with the run's folders; nothing is processed."""


@dataclass(frozen=True)
class FileResult:
    name: str
    ok: bool
    renamed_count: int = 0
    output_path: Optional[Path] = None
    error: str = ""


@dataclass(frozen=True)
class BatchReport:
    files_found: int = 0
    processed: int = 0
    bones_renamed: int = 0
    failed: Tuple[str, ...] = ()
    results: Tuple[FileResult, ...] = field(default=(), repr=False)

    def add(self, result: FileResult) -> "BatchReport":
        if result.ok:
            return replace(
                self,
                processed=self.processed + 1,
                bones_renamed=self.bones_renamed + result.renamed_count,
                results=self.results + (result,),
            )
        return replace(
            self,
            failed=self.failed + (result.name,),
            results=self.results + (result,),
        )


def is_supported(path: Path, extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> bool:
    return path.suffix.upper() in {e.upper() for e in extensions}


def find_animation_files(folder: Path, extensions: Iterable[str] = SUPPORTED_EXTENSIONS) -> List[Path]:
    folder = Path(folder)
    if not folder.is_dir():
        return []
    exts = tuple(extensions)
    try:
        files = {p for p in folder.iterdir() if p.is_file() and is_supported(p, exts)}
    except OSError as exc:
        raise SetupError(f"Could not list '{folder}' folder: {exc}") from exc
    return sorted(files, key=lambda p: p.name)


def require_input_dir(folder: Path) -> None:
    folder = Path(folder)
    if not folder.exists():
        raise SetupError(f"'{folder}' folder not found")
    if not folder.is_dir():
        raise SetupError(f"'{folder}' is not a folder")


def ensure_output_dir(folder: Path) -> bool:
    """Create ``folder`` (single level). Return True if it was created."""
    folder = Path(folder)
    if folder.is_dir():
        return False
    if folder.exists():
        raise SetupError(f"Could not create '{folder}' folder: a file with that name exists")
    try:
        folder.mkdir()
    except OSError as exc:
        raise SetupError(f"Could not create '{folder}' folder: {exc}") from exc
    return True


def process_file(input_path: Path, output_dir: Path, prefix: str, *, encoding: str = "utf-8") -> FileResult:
    input_path = Path(input_path)
    name = input_path.name
    output_path = Path(output_dir) / name

    logger.debug("reading %s", input_path)
    try:
        with input_path.open("r", encoding=encoding, errors="surrogateescape", newline="") as fp:
            content = fp.read()
    except (OSError, UnicodeError, LookupError) as exc:
        logger.warning("%s: read failed: %s", name, exc)
        return FileResult(name, False, error=f"could not read file: {exc}")

    new_content, renamed = rewrite(content, prefix)

    logger.debug("writing %s", output_path)
    try:
        with output_path.open("w", encoding=encoding, errors="surrogateescape", newline="") as fp:
            fp.write(new_content)
    except (OSError, UnicodeError, LookupError) as exc:
        logger.warning("%s: write failed: %s", name, exc)
        return FileResult(name, False, error=f"could not write output file: {exc}")

    return FileResult(name, True, renamed_count=renamed, output_path=output_path)


def run_batch(
    files: Iterable[Path],
    output_dir: Path,
    prefix: str,
    *,
    encoding: str = "utf-8",
    on_start: Optional[Callable[[Path], None]] = None,
    on_result: Optional[Callable[[FileResult], None]] = None,
) -> BatchReport:
    files = list(files)
    report = BatchReport(files_found=len(files))
    for path in files:
        if on_start is not None:
            on_start(path)
        result = process_file(path, output_dir, prefix, encoding=encoding)
        report = report.add(result)
        if on_result is not None:
            on_result(result)
    return report


__all__ = [
    "BatchReport",
    "FileResult",
    "SUPPORTED_EXTENSIONS",
    "SetupError",
    "ensure_output_dir",
    "find_animation_files",
    "is_supported",
    "process_file",
    "require_input_dir",
    "run_batch",
]
