"""Unit tests for the sparse voxel projector.

WHY: The projector decides which blocks end up in the object and where.
A swapped axis or off-by-one index produces a mangled build in-game, and
a missed validation writes an object from garbage dimensions.

HOW: Schematics are encoded with the NBTBuilder fixture and decoded, so
every test exercises the projector on a real decoded tree:
  - Validation order and error kinds (missing, numeric, dimensions,
    tag type, array length)
  - Iteration order (y, z, x) and output axis order (x, z, y)
  - Air skipping

RULES:
- Expected voxel positions are computed from y*l*w + z*w + x
"""

import pytest

from schematic_converter.core.ir import SchematicVolume, Voxel
from schematic_converter.core.projector import extract_volume, iter_voxels, project_voxels
from schematic_converter.nbt.decoder import decode_bytes
from schematic_converter.nbt.errors import (
    InconsistentArrayLength,
    InvalidDimensions,
    MissingTag,
    NotNumeric,
    WrongTagType,
)
from schematic_converter.nbt.tags import TagKind


def _root_with(nbt, *entries):
    return decode_bytes(nbt.named(TagKind.COMPOUND, "Schematic", nbt.compound(*entries)))


class TestExtractVolume:
    """Validation of the five conversion tags."""

    def test_valid_volume(self, sample_schematic_bytes):
        volume = extract_volume(decode_bytes(sample_schematic_bytes))
        assert volume == SchematicVolume(
            width=2, height=1, length=1, blocks=b"\x00\x05", data=b"\x00\x03",
        )
        assert volume.volume == 2

    @pytest.mark.parametrize("kind", [TagKind.BYTE, TagKind.SHORT, TagKind.INT, TagKind.LONG])
    def test_any_integer_kind_for_dimensions(self, nbt, kind):
        root = decode_bytes(nbt.schematic(1, 1, 1, [1], [0], dimension_kind=kind))
        volume = extract_volume(root)
        assert (volume.width, volume.height, volume.length) == (1, 1, 1)

    def test_all_missing_reports_height_first(self, nbt):
        with pytest.raises(MissingTag) as exc_info:
            extract_volume(_root_with(nbt))
        assert exc_info.value.name == "Height"

    @pytest.mark.parametrize("missing", ["Height", "Length", "Width", "Blocks", "Data"])
    def test_each_missing_tag(self, nbt, missing):
        entries = {
            "Height": nbt.named(TagKind.SHORT, "Height", nbt.short(1)),
            "Length": nbt.named(TagKind.SHORT, "Length", nbt.short(1)),
            "Width": nbt.named(TagKind.SHORT, "Width", nbt.short(1)),
            "Blocks": nbt.named(TagKind.BYTE_ARRAY, "Blocks", nbt.byte_array([1])),
            "Data": nbt.named(TagKind.BYTE_ARRAY, "Data", nbt.byte_array([0])),
        }
        del entries[missing]
        with pytest.raises(MissingTag) as exc_info:
            extract_volume(_root_with(nbt, *entries.values()))
        assert exc_info.value.name == missing

    def test_tags_found_in_nested_compound(self, nbt):
        inner = nbt.schematic(1, 1, 1, [7], [1])
        root = _root_with(nbt, nbt.named(TagKind.COMPOUND, "Wrapper", nbt.compound(inner)))
        assert extract_volume(root).blocks == b"\x07"

    def test_zero_height(self, nbt):
        root = decode_bytes(nbt.schematic(width=2, height=0, length=2, blocks=[], data=[]))
        with pytest.raises(InvalidDimensions) as exc_info:
            extract_volume(root)
        assert exc_info.value.height == 0

    def test_zero_height_regardless_of_arrays(self, nbt):
        root = decode_bytes(nbt.schematic(width=1, height=0, length=1, blocks=[1], data=[1]))
        with pytest.raises(InvalidDimensions):
            extract_volume(root)

    def test_dimension_beyond_int32(self, nbt):
        root = decode_bytes(nbt.schematic(
            width=2 ** 31, height=1, length=1, blocks=[1], data=[1],
            dimension_kind=TagKind.LONG,
        ))
        with pytest.raises(InvalidDimensions):
            extract_volume(root)

    def test_largest_int32_dimension_passes_range_check(self, nbt):
        root = decode_bytes(nbt.schematic(
            width=2 ** 31 - 1, height=1, length=1, blocks=[1], data=[1],
            dimension_kind=TagKind.INT,
        ))
        # In range, so the failure comes from the array length check
        with pytest.raises(InconsistentArrayLength):
            extract_volume(root)

    def test_non_numeric_dimension(self, nbt):
        root = _root_with(
            nbt,
            nbt.named(TagKind.STRING, "Height", nbt.string("1")),
            nbt.named(TagKind.SHORT, "Length", nbt.short(1)),
            nbt.named(TagKind.SHORT, "Width", nbt.short(1)),
            nbt.named(TagKind.BYTE_ARRAY, "Blocks", nbt.byte_array([1])),
            nbt.named(TagKind.BYTE_ARRAY, "Data", nbt.byte_array([0])),
        )
        with pytest.raises(NotNumeric) as exc_info:
            extract_volume(root)
        assert exc_info.value.name == "Height"

    def test_blocks_wrong_type(self, nbt):
        root = _root_with(
            nbt,
            nbt.named(TagKind.SHORT, "Height", nbt.short(1)),
            nbt.named(TagKind.SHORT, "Length", nbt.short(1)),
            nbt.named(TagKind.SHORT, "Width", nbt.short(1)),
            nbt.named(TagKind.LIST, "Blocks", nbt.list_(TagKind.BYTE, [b"\x01"])),
            nbt.named(TagKind.BYTE_ARRAY, "Data", nbt.byte_array([0])),
        )
        with pytest.raises(WrongTagType) as exc_info:
            extract_volume(root)
        assert exc_info.value.name == "Blocks"
        assert exc_info.value.actual == int(TagKind.LIST)

    def test_data_wrong_type(self, nbt):
        root = _root_with(
            nbt,
            nbt.named(TagKind.SHORT, "Height", nbt.short(1)),
            nbt.named(TagKind.SHORT, "Length", nbt.short(1)),
            nbt.named(TagKind.SHORT, "Width", nbt.short(1)),
            nbt.named(TagKind.BYTE_ARRAY, "Blocks", nbt.byte_array([1])),
            nbt.named(TagKind.STRING, "Data", nbt.string("x")),
        )
        with pytest.raises(WrongTagType) as exc_info:
            extract_volume(root)
        assert exc_info.value.name == "Data"

    def test_blocks_shorter_than_volume(self, nbt):
        root = decode_bytes(nbt.schematic(2, 2, 2, blocks=[1] * 4, data=[0] * 4))
        with pytest.raises(InconsistentArrayLength) as exc_info:
            extract_volume(root)
        assert exc_info.value.expected == 8
        assert exc_info.value.blocks == 4

    def test_data_length_differs_from_blocks(self, nbt):
        root = decode_bytes(nbt.schematic(2, 1, 1, blocks=[1, 1], data=[0]))
        with pytest.raises(InconsistentArrayLength) as exc_info:
            extract_volume(root)
        assert exc_info.value.data == 1

    def test_dimensions_checked_before_tag_types(self, nbt):
        root = _root_with(
            nbt,
            nbt.named(TagKind.SHORT, "Height", nbt.short(0)),
            nbt.named(TagKind.SHORT, "Length", nbt.short(1)),
            nbt.named(TagKind.SHORT, "Width", nbt.short(1)),
            nbt.named(TagKind.STRING, "Blocks", nbt.string("x")),
            nbt.named(TagKind.STRING, "Data", nbt.string("x")),
        )
        with pytest.raises(InvalidDimensions):
            extract_volume(root)


class TestIterVoxels:
    """Iteration order, axis order and air skipping."""

    def test_single_block(self, sample_schematic_bytes):
        voxels = project_voxels(decode_bytes(sample_schematic_bytes))
        assert voxels == [Voxel(x=1, z=0, y=0, block=5, meta=3)]

    def test_all_air_yields_nothing(self):
        volume = SchematicVolume(2, 2, 2, bytes(8), bytes(range(8)))
        assert list(iter_voxels(volume)) == []

    def test_order_is_y_then_z_then_x(self):
        width, height, length = 2, 2, 3
        count = width * height * length
        blocks = bytes(range(1, count + 1))
        volume = SchematicVolume(width, height, length, blocks, bytes(count))

        voxels = list(iter_voxels(volume))

        expected = [
            (x, z, y)
            for y in range(height)
            for z in range(length)
            for x in range(width)
        ]
        assert [(v.x, v.z, v.y) for v in voxels] == expected
        assert [v.block for v in voxels] == list(range(1, count + 1))

    def test_linear_index_matches_layout(self):
        width, height, length = 3, 2, 4
        count = width * height * length
        volume = SchematicVolume(width, height, length, bytes([1]) * count, bytes(range(count)))
        for voxel in iter_voxels(volume):
            assert voxel.meta == volume.index(voxel.x, voxel.y, voxel.z)

    def test_meta_only_read_for_solid_blocks(self):
        volume = SchematicVolume(3, 1, 1, b"\x00\x02\x00", b"\x09\x04\x09")
        assert list(iter_voxels(volume)) == [Voxel(x=1, z=0, y=0, block=2, meta=4)]

    def test_block_ids_are_unsigned(self):
        volume = SchematicVolume(1, 1, 1, b"\xff", b"\x0f")
        (voxel,) = iter_voxels(volume)
        assert voxel.block == 255
        assert voxel.meta == 15
