"""Intermediate representation of a validated schematic volume.

WHY: A decoded tag tree says nothing about whether the five tags the
converter needs are present and consistent. The IR is the validated
form: once a SchematicVolume exists, every formatter can index it
without re-checking dimensions or array lengths.

HOW: Two dataclasses:
  SchematicVolume: dimensions plus the parallel Blocks/Data byte arrays
  Voxel:           one non-air cell, in output axis order (x, z, y)

RULES:
- Cell (x, y, z) lives at index y*length*width + z*width + x
- len(blocks) == len(data) == width*height*length, all dimensions > 0
- Block id 0 is air and never becomes a Voxel
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Voxel:
    """One non-air cell of the volume.

    Field order follows the output line ``x,z,y:block.meta``, not the
    iteration order.
    """

    x: int
    z: int
    y: int
    block: int
    meta: int


@dataclass(frozen=True)
class SchematicVolume:
    """A validated block volume ready for projection.

    Attributes:
        width: Size along x.
        height: Size along y.
        length: Size along z.
        blocks: Block ids, one byte per cell.
        data: Block metadata, one byte per cell.
    """

    width: int
    height: int
    length: int
    blocks: bytes
    data: bytes

    @property
    def volume(self) -> int:
        return self.width * self.height * self.length

    def index(self, x: int, y: int, z: int) -> int:
        return y * self.length * self.width + z * self.width + x
