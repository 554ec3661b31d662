"""BO2 object formatter: a fixed [META] header plus one line per voxel.

WHY: BO2 is the custom-object format read by terrain-generation plugins.
It is plain text: a metadata section describing how the object spawns,
then a data section listing every solid block relative to the origin.

HOW: Writes the [META] section from fixed constants, then the [DATA]
header, then one ``x,z,y:block.meta`` line per voxel from iter_voxels().

RULES:
- [META] values are constants, never derived from the input
- One [DATA] line per non-air voxel, in projector order
- Every line, including the last, ends with "\\n"
- Output suffix: ".bo2"
- Media type: "text/plain"
"""

from __future__ import annotations

from typing import Iterable, List, Tuple

from schematic_converter.config import OUTPUT_EXTENSION
from schematic_converter.core.ir import SchematicVolume, Voxel
from schematic_converter.core.projector import iter_voxels
from schematic_converter.formatters.base import BaseFormatter, FormatterOutput

BO2_META: Tuple[Tuple[str, str], ...] = (
    ("version", "2.0"),
    ("spawnElevationMin", "0"),
    ("spawnElevationMax", "128"),
    ("rarity", "100"),
    ("collisionPercentage", "2"),
)


def format_voxel_line(voxel: Voxel) -> str:
    """Render one voxel as ``x,z,y:block.meta``."""
    return "{},{},{}:{}.{}".format(voxel.x, voxel.z, voxel.y, voxel.block, voxel.meta)


def render_bo2(voxels: Iterable[Voxel]) -> str:
    """Render the complete BO2 document for ``voxels``."""
    lines: List[str] = ["[META]"]
    lines.extend("{}={}".format(key, value) for key, value in BO2_META)
    lines.append("[DATA]")
    lines.extend(format_voxel_line(voxel) for voxel in voxels)
    return "\n".join(lines) + "\n"


class BO2Formatter(BaseFormatter):
    """Formatter that produces a BO2 custom-object file."""

    @property
    def name(self) -> str:
        return "BO2 Object"

    def format(self, volume: SchematicVolume) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix=OUTPUT_EXTENSION,
                content=render_bo2(iter_voxels(volume)),
                media_type="text/plain",
            )
        ]
