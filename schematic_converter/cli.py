"""Command-line interface for the schematic → BO2 converter.

WHY: Users convert whole folders of schematics at once, typically with a
shell glob. The CLI runs each file through the converter, reports what
happened to every one of them, and keeps going when one is broken.

HOW: argparse accepts one or more input paths, an optional output
directory and decode depth bound. Each file goes through convert_file();
SchematicError and OSError are caught per file and reported. Status
messages go to stderr; diagnostics go through logging, configured from
SCHEMATIC_LOG_LEVEL or --verbose.

RULES:
- Positional arguments: one or more input schematic paths
- Existing outputs are skipped ("Skipping: <file>"), never overwritten
- A failing file is reported ("Error: <file>: <reason>") and the batch
  continues with the next one
- Exit code 0 if every file was converted or skipped, 1 otherwise
- Status output goes to stderr (not stdout)
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from schematic_converter.config import (
    LOG_FORMAT,
    OUTPUT_EXTENSION,
    load_log_level,
    load_max_depth,
)
from schematic_converter.converter import (
    ConversionStatus,
    convert_file,
    derive_output_path,
)
from schematic_converter.nbt.errors import SchematicError


def _status(msg: str) -> None:
    """Print a status message to stderr.

    WHY: Status output must not pollute stdout so the CLI can be piped.
    """
    print(msg, file=sys.stderr, flush=True)


def _configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else load_log_level()
    logging.basicConfig(level=level, format=LOG_FORMAT)


def run(
    inputs: List[str],
    output_dir: Optional[Path] = None,
    max_depth: Optional[int] = None,
) -> int:
    """Convert every path in ``inputs`` and return the process exit code.

    Args:
        inputs: Input schematic paths, processed in order.
        output_dir: Directory for all outputs, or None for next to each input.
        max_depth: Decoder nesting bound; None reads it from the environment.

    Returns:
        0 when no file failed, 1 otherwise.
    """
    if max_depth is None:
        max_depth = load_max_depth()

    converted = skipped = failed = 0
    for name in inputs:
        if derive_output_path(name, output_dir).exists():
            _status("Skipping: {}".format(name))
            skipped += 1
            continue

        _status("Processing: {}".format(name))
        try:
            result = convert_file(name, output_dir=output_dir, max_depth=max_depth)
        except (SchematicError, OSError) as e:
            _status("Error: {}: {}".format(name, e))
            failed += 1
            continue

        if result.status is ConversionStatus.SKIPPED:
            # Output appeared after the check above
            _status("Skipping: {}".format(name))
            skipped += 1
        else:
            _status("  Saved: {} ({} voxels)".format(result.output_path, result.voxel_count))
            converted += 1

    _status("")
    _status("Done! {} converted, {} skipped, {} failed".format(converted, skipped, failed))
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the CLI."""
    parser = argparse.ArgumentParser(
        prog="schematic_converter",
        description="Convert uncompressed schematic files into BO2 custom objects "
                    "({} written next to each input).".format(OUTPUT_EXTENSION),
    )

    parser.add_argument(
        "inputs",
        nargs="+",
        help="Schematic files to convert.",
    )

    parser.add_argument(
        "--output-dir",
        default=None,
        help="Directory to save output files (default: same as each input file).",
    )

    parser.add_argument(
        "--max-depth",
        type=int,
        default=None,
        help="Maximum list/compound nesting depth "
             "(default: SCHEMATIC_MAX_DEPTH or 512).",
    )

    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging.",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the CLI.

    RULES:
    - argv=None means use sys.argv (normal CLI invocation)
    - Explicit argv is for testing
    - Always exits via sys.exit with run()'s exit code
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        _configure_logging(args.verbose)
        max_depth = args.max_depth if args.max_depth is not None else load_max_depth()
    except ValueError as e:
        # Config errors (bad SCHEMATIC_MAX_DEPTH, unknown log level)
        print("Error: {}".format(e), file=sys.stderr)
        sys.exit(1)

    if max_depth <= 0:
        parser.error("--max-depth must be positive")

    output_dir: Optional[Path] = None
    if args.output_dir:
        output_dir = Path(args.output_dir).resolve()
        if not output_dir.is_dir():
            print("Error: Output directory does not exist: {}".format(output_dir), file=sys.stderr)
            sys.exit(1)

    sys.exit(run(args.inputs, output_dir=output_dir, max_depth=max_depth))


if __name__ == "__main__":
    main()
