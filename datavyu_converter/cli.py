"""Command-line interface for the Datavyu to Supercoder converter.

WHY: Coders run the converter from the folder holding their ``Input/``
and ``Output/`` directories, usually by double-clicking or with no
arguments at all. Occasionally a session was recorded at another frame
rate or lives elsewhere, so the defaults can be overridden per run.

HOW: argparse builds a ConverterConfig from the flags (falling back to
the environment/.env defaults), run_batch() converts every input file,
and a per-file status line plus a summary are printed to stderr.

RULES:
- No arguments: Input/ → Output/OUTPUT_<name> at 29.97 fps
- Status output goes to stderr (not stdout)
- Exit code is 0 even when files fail, unless --strict is given
- A missing input directory is an error (exit code 1)
- Invalid flag values are argparse errors (exit code 2)
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from datavyu_converter import __version__
from datavyu_converter.config import ConverterConfig, parse_frame_rate
from datavyu_converter.core.batch import BatchSummary, FileResult, FileStatus, run_batch

_STATUS_LABELS = {
    FileStatus.SUCCESS: "OK",
    FileStatus.PARSE_ERROR: "PARTIAL",
    FileStatus.IO_ERROR: "ERROR",
    FileStatus.FAILED: "FAILED",
}


def _status(msg: str) -> None:
    """Print a status message to stderr."""
    print(msg, file=sys.stderr, flush=True)


def _frame_rate_arg(text: str) -> float:
    try:
        return parse_frame_rate(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _describe(result: FileResult) -> str:
    """One status line for a file result."""
    label = _STATUS_LABELS[result.status]
    line = "  [{}] {}".format(label, result.source.name)
    if result.output_path is not None:
        line += " -> {} ({} records, {} trials)".format(
            result.output_path, result.records, result.trials,
        )
    if result.row_errors:
        line += ", {} row(s) skipped".format(len(result.row_errors))
    if result.error:
        line += ": {}".format(result.error)
    return line


def report(summary: BatchSummary) -> None:
    """Print per-file results and totals to stderr."""
    for result in summary.results:
        _status(_describe(result))
        for row_error in result.row_errors:
            _status("      {}".format(row_error))

    _status("")
    if summary.total == 0:
        _status("No input files found.")
        return
    _status("Converted {} of {} file(s).".format(summary.succeeded, summary.total))


def build_config(args: argparse.Namespace) -> ConverterConfig:
    """Build a ConverterConfig from parsed flags, keeping defaults for unset ones.

    Raises:
        pydantic.ValidationError: If a flag value is out of range.
    """
    overrides: Dict[str, Any] = {}
    for name in ("input_dir", "output_dir", "frame_rate", "start_code", "output_prefix"):
        value = getattr(args, name)
        if value is not None:
            overrides[name] = value
    return ConverterConfig(**overrides)


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI.

    WHY: Separating parser construction from main() makes the CLI
    testable — tests can inspect the parser without running a batch.
    """
    parser = argparse.ArgumentParser(
        prog="datavyu-convert",
        description="Convert Datavyu CSV exports into Supercoder frame-based CSVs. "
                    "Every file in the input directory is converted.",
    )

    parser.add_argument(
        "--input-dir",
        default=None,
        help="Directory of Datavyu exports (default: {}).".format(
            ConverterConfig().input_dir
        ),
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Existing directory for converted files (default: {}).".format(
            ConverterConfig().output_dir
        ),
    )

    parser.add_argument(
        "--frame-rate",
        type=_frame_rate_arg,
        default=None,
        help="Video frame rate as a number or preset (ntsc, pal, film). "
             "Default: {}.".format(ConverterConfig().frame_rate),
    )

    parser.add_argument(
        "--start-code",
        default=None,
        help="Code that marks a trial start (default: {}).".format(
            ConverterConfig().start_code
        ),
    )

    parser.add_argument(
        "--prefix",
        dest="output_prefix",
        default=None,
        help="Prefix for output file names (default: {}).".format(
            ConverterConfig().output_prefix
        ),
    )

    parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 1 if any file could not be fully converted.",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug details for every file.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version="%(prog)s {}".format(__version__),
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = build_config(args)
    except ValidationError as e:
        parser.error(str(e))

    if not config.input_dir.is_dir():
        print("Error: Input directory not found: {}".format(config.input_dir), file=sys.stderr)
        sys.exit(1)

    _status("Converting files in {} at {} fps...".format(config.input_dir, config.frame_rate))
    summary = run_batch(config)
    report(summary)

    if args.strict and not summary.ok:
        sys.exit(1)


if __name__ == "__main__":
    main()
