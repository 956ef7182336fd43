"""Command-line interface for the bone renamer.

Usage:
  bone-renamer <prefix>
  python -m bone_renamer bip01
  python -m bone_renamer bip01 --input-dir anims --output-dir out

Every animation file in the input folder is rewritten into the output folder
with ``<prefix> `` inserted before each bone name.

Exit codes: 0 OK (including "no files found"), 1 missing prefix or setup error.
"""
from __future__ import annotations

import argparse
import codecs
import logging
import sys
from pathlib import Path
from typing import List

from .batch import (
    BatchReport,
    FileResult,
    SetupError,
    ensure_output_dir,
    find_animation_files,
    require_input_dir,
    run_batch,
)
from .config import load_config, normalize_extensions

TITLE = "Bone Renamer for Animation Files"
RULE = "=" * 40

USAGE = f"""{TITLE}
Usage: bone-renamer <prefix>

Arguments:
  <prefix>  The prefix to add to all bone names (e.g., 'bip01')

Example:
  bone-renamer bip01

This will rename 'pelvis' to 'bip01 pelvis'"""


def print_usage() -> None:
    print(USAGE)


def print_banner(title: str) -> None:
    print(RULE)
    print(title)
    print(RULE)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="bone-renamer",
        description="Prefix bone names in JMA/JMM/JMO/JMR/JMT/JMW/JMZ animation files",
        allow_abbrev=False,
    )
    ap.add_argument("prefix", nargs="?", help="Prefix to add to every bone name (e.g. 'bip01')")
    ap.add_argument("--input-dir", default=None, help="Folder holding the animation files (default: animations)")
    ap.add_argument("--output-dir", default=None, help="Folder for the converted files (default: converted)")
    ap.add_argument("--config", default=None, help="Path to a YAML or JSON settings file (default: .bone_renamer.yml)")
    ap.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    return ap


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="  %(levelname)s: %(message)s",
        stream=sys.stdout,
    )


def _report_start(path: Path) -> None:
    print(f"Processing: {path.name}")


def _report_result(result: FileResult) -> None:
    if result.ok:
        print(f"  -> Renamed {result.renamed_count} bones")
        print(f"  -> Saved to: {result.output_path}")
    else:
        print(f"  Error: {result.error}")
    print("")


def print_summary(report: BatchReport) -> None:
    print(RULE)
    print("Summary")
    print(RULE)
    print(f"Files processed: {report.processed} / {report.files_found}")
    print(f"Total bones renamed: {report.bones_renamed}")
    if report.failed:
        print("")
        print("Failed files:")
        for name in report.failed:
            print(f"  - {name}")


def main(argv: List[str] | None = None) -> int:
    args = build_parser().parse_args(sys.argv[1:] if argv is None else argv)
    _configure_logging(args.verbose)

    print_banner(TITLE)
    print("")

    if args.prefix is None:
        print("Error: Missing required argument <prefix>")
        print("")
        print_usage()
        return 1

    cfg = load_config(args.config)
    input_dir = Path(args.input_dir or cfg["input_dir"])
    output_dir = Path(args.output_dir or cfg["output_dir"])
    extensions = normalize_extensions(cfg["extensions"])
    encoding = str(cfg.get("encoding") or "utf-8")

    prefix = args.prefix
    print(f"Prefix: '{prefix}'")
    print("")

    try:
        codecs.lookup(encoding)
    except LookupError:
        print(f"Error: Unknown file encoding '{encoding}' in settings")
        return 1

    try:
        require_input_dir(input_dir)
    except SetupError as exc:
        print(f"Error: {exc}")
        print(f"Please create an '{input_dir}' folder and place your animation files there.")
        return 1

    if not output_dir.is_dir():
        print(f"Creating directory: {output_dir}")
    try:
        created = ensure_output_dir(output_dir)
    except SetupError as exc:
        print(f"  -> Error: {exc}")
        print(f"Error: Could not create '{output_dir}' folder")
        return 1
    if created:
        print(f"  -> Successfully created: {output_dir}")
    else:
        print(f"Directory already exists: {output_dir}")
    print("")

    try:
        files = find_animation_files(input_dir, extensions)
    except SetupError as exc:
        print(f"Error: {exc}")
        return 1
    if not files:
        print(f"No animation files found in '{input_dir}' folder")
        print("Supported formats: " + ", ".join(extensions))
        return 0

    print(f"Found {len(files)} animation file(s)")
    print("")

    report = run_batch(
        files,
        output_dir,
        prefix,
        encoding=encoding,
        on_start=_report_start,
        on_result=_report_result,
    )

    print_summary(report)
    print("")
    print("Done!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
