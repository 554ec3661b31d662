"""Sparse voxel projection of a decoded schematic tree.

WHY: The BO2 object format lists only the blocks that exist, one line per
cell, while a schematic stores a dense block array. This module is the
bridge: it validates the five tags the conversion depends on and then
walks the dense arrays in a fixed order, dropping air.

HOW: extract_volume() looks up Height, Length, Width, Blocks and Data
anywhere in the tree, coerces the dimensions, and checks kinds and array
lengths, producing a SchematicVolume. iter_voxels() walks y, then z,
then x, with a single linear index that advances by one per cell.

RULES:
- Checks run in order; the first violation aborts the conversion:
    1. all five tags present            → MissingTag(first missing)
    2. dimensions are positive int32    → InvalidDimensions
    3. Blocks and Data are byte arrays  → WrongTagType
    4. both lengths == h*l*w            → InconsistentArrayLength
- Iteration: y outer, z middle, x inner; output records are (x, z, y)
- block == 0 is air and produces no record
- Output order is exactly the iteration order
"""

from __future__ import annotations

from typing import Iterator, List

from schematic_converter.core.ir import SchematicVolume, Voxel
from schematic_converter.nbt.errors import (
    InconsistentArrayLength,
    InvalidDimensions,
    MissingTag,
    WrongTagType,
)
from schematic_converter.nbt.index import as_integer, find_tag
from schematic_converter.nbt.tags import NamedTag, TagKind

# Lookup order decides which name MissingTag reports.
REQUIRED_TAGS = ("Height", "Length", "Width", "Blocks", "Data")

# Dimensions must fit a signed 32-bit integer.
_MAX_DIMENSION = 2 ** 31 - 1


def extract_volume(root: NamedTag) -> SchematicVolume:
    """Validate the conversion tags of ``root`` and build a SchematicVolume.

    Args:
        root: Root named tag of a decoded schematic file.

    Returns:
        The validated volume.

    Raises:
        MissingTag, NotNumeric, InvalidDimensions, WrongTagType,
        InconsistentArrayLength.
    """
    found = {}
    for name in REQUIRED_TAGS:
        tag = find_tag(root, name)
        if tag is None:
            raise MissingTag(name)
        found[name] = tag

    height = as_integer(found["Height"])
    length = as_integer(found["Length"])
    width = as_integer(found["Width"])
    if not all(0 < dim <= _MAX_DIMENSION for dim in (height, length, width)):
        raise InvalidDimensions(width, height, length)

    blocks_tag = found["Blocks"]
    data_tag = found["Data"]
    for name, tag in (("Blocks", blocks_tag), ("Data", data_tag)):
        if tag.kind != TagKind.BYTE_ARRAY:
            raise WrongTagType(name, int(TagKind.BYTE_ARRAY), int(tag.kind))

    blocks: bytes = blocks_tag.value
    data: bytes = data_tag.value
    expected = height * length * width
    if len(blocks) != expected or len(data) != len(blocks):
        raise InconsistentArrayLength(expected, len(blocks), len(data))

    return SchematicVolume(
        width=width,
        height=height,
        length=length,
        blocks=blocks,
        data=data,
    )


def iter_voxels(volume: SchematicVolume) -> Iterator[Voxel]:
    """Yield every non-air cell of ``volume`` in output order."""
    blocks = volume.blocks
    data = volume.data
    index = 0
    for y in range(volume.height):
        for z in range(volume.length):
            for x in range(volume.width):
                block = blocks[index]
                if block != 0:
                    yield Voxel(x=x, z=z, y=y, block=block, meta=data[index])
                index += 1


def project_voxels(root: NamedTag) -> List[Voxel]:
    """Validate ``root`` and return its sparse voxel listing."""
    return list(iter_voxels(extract_volume(root)))
