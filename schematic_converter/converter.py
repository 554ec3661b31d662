"""Per-file conversion: schematic in, BO2 object out.

WHY: The CLI converts many files in one run, and each must be handled
independently: skipped if already converted, written completely or not at
all, and never able to take the rest of the batch down with it. Keeping
that logic here leaves the CLI as thin argument parsing and reporting.

HOW: convert_file() derives the output path, skips if it exists, decodes
the input, validates and projects it, runs the formatter, and writes
each output with write_atomic(): content goes to a temporary file in the
target directory, which is renamed over the final path only once fully
written.

RULES:
- Output name: the input file name cut at its first ".", plus ".bo2"
- Only the file name is cut, never the directory part of the path
- Existing output → SKIPPED, input is not even read
- Any failure propagates; no output file exists afterwards
"""

from __future__ import annotations

import enum
import errno
import logging
import os
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from schematic_converter.config import DEFAULT_MAX_DEPTH, OUTPUT_EXTENSION
from schematic_converter.core.projector import extract_volume
from schematic_converter.formatters import DEFAULT_FORMAT, FORMATTERS
from schematic_converter.formatters.base import BaseFormatter
from schematic_converter.nbt.decoder import load_file

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class ConversionStatus(enum.Enum):
    CONVERTED = "converted"
    SKIPPED = "skipped"


@dataclass
class ConversionResult:
    """Outcome of converting one input file.

    Attributes:
        input_path: The schematic that was processed.
        output_path: The primary output path (written or already present).
        status: CONVERTED or SKIPPED.
        voxel_count: Number of non-air voxels written (0 when skipped).
        written: Every file written, in formatter order.
    """

    input_path: Path
    output_path: Path
    status: ConversionStatus
    voxel_count: int = 0
    written: List[Path] = field(default_factory=list)


def output_stem(filename: str) -> str:
    """Return ``filename`` up to (not including) its first dot."""
    return filename.split(".", 1)[0]


def derive_output_path(
    input_path: PathLike,
    output_dir: Optional[PathLike] = None,
    suffix: str = OUTPUT_EXTENSION,
) -> Path:
    """Derive the output path for ``input_path``.

    ``castle.schematic`` → ``castle.bo2``; ``a.b.c`` → ``a.bo2``;
    ``noext`` → ``noext.bo2``. The file is placed in ``output_dir`` when
    given, otherwise next to the input.
    """
    input_path = Path(input_path)
    directory = Path(output_dir) if output_dir is not None else input_path.parent
    return directory / "{}{}".format(output_stem(input_path.name), suffix)


def _default_file_mode() -> int:
    """Mode a plain open(path, "w") would create: 0o666 minus the umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def write_atomic(
    path: PathLike,
    content: Union[str, bytes],
    overwrite: bool = True,
) -> None:
    """Write ``content`` to ``path`` so that ``path`` is never left partial.

    Text is encoded as UTF-8. The file gets the usual umask-derived mode,
    not the owner-only mode of the temporary file. With ``overwrite``
    False, an existing ``path`` raises FileExistsError just before the
    rename. On any failure the temporary file is removed and the
    exception propagates.
    """
    path = Path(path)
    payload = content.encode("utf-8") if isinstance(content, str) else content

    fd, tmp_name = tempfile.mkstemp(
        prefix=".{}.".format(path.name),
        suffix=".tmp",
        dir=str(path.parent),
    )
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(payload)
        os.chmod(tmp_name, _default_file_mode())
        if not overwrite and path.exists():
            raise FileExistsError(errno.EEXIST, "Output already exists", str(path))
        os.replace(tmp_name, str(path))
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            logger.warning("Failed to remove temp file: %s", tmp_name)
        raise


def convert_file(
    input_path: PathLike,
    output_dir: Optional[PathLike] = None,
    formatter: Optional[BaseFormatter] = None,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> ConversionResult:
    """Convert one schematic file.

    Args:
        input_path: Path to the (uncompressed) schematic file.
        output_dir: Directory for the output; defaults to the input's directory.
        formatter: Output formatter; defaults to the BO2 formatter.
        max_depth: Nesting bound passed to the decoder.

    Returns:
        A ConversionResult describing what happened.

    Raises:
        SchematicError: The file is malformed or fails validation.
        OSError: The input cannot be read or the output cannot be written.
    """
    input_path = Path(input_path)
    if formatter is None:
        formatter = FORMATTERS[DEFAULT_FORMAT]()

    output_path = derive_output_path(input_path, output_dir)
    if output_path.exists():
        logger.info("Output %s already exists, skipping %s", output_path, input_path)
        return ConversionResult(input_path, output_path, ConversionStatus.SKIPPED)

    root = load_file(input_path, max_depth)
    volume = extract_volume(root)
    outputs = formatter.format(volume)

    written: List[Path] = []
    try:
        for output in outputs:
            path = derive_output_path(input_path, output_dir, output.suffix)
            write_atomic(path, output.content, overwrite=False)
            written.append(path)
            logger.debug("Wrote %s (%s)", path, output.media_type)
    except BaseException:
        # All outputs or none
        for path in written:
            try:
                path.unlink()
            except OSError:
                logger.warning("Failed to remove partial output: %s", path)
        raise

    voxel_count = len(volume.blocks) - volume.blocks.count(0)
    logger.info(
        "Converted %s: %dx%dx%d, %d voxel(s)",
        input_path, volume.width, volume.height, volume.length, voxel_count,
    )
    return ConversionResult(
        input_path=input_path,
        output_path=output_path,
        status=ConversionStatus.CONVERTED,
        voxel_count=voxel_count,
        written=written,
    )
