"""Shared test fixtures for the schematic_converter test suite.

WHY: Decoder, projector, converter and CLI tests all need hand-built
binary tag trees. Building them from a tiny encoder keeps every test's
input readable ("a compound holding Int X = 42") instead of opaque hex.

HOW: NBTBuilder encodes payloads and named tags with struct.pack, using
the same layout the decoder reads: big-endian integers, host-order
floats, 16-bit string and 32-bit array length prefixes. The
schematic_bytes fixture assembles a complete schematic root compound;
write_schematic writes one to tmp_path.

RULES:
- Builders return raw bytes; nothing here calls the code under test
- Float/double payloads use host byte order, matching the reader
"""

import struct
from pathlib import Path
from typing import Sequence

import pytest

END, BYTE, SHORT, INT, LONG, FLOAT, DOUBLE, BYTE_ARRAY, STRING, LIST, COMPOUND = range(11)


class NBTBuilder:
    """Encoder for hand-built test inputs."""

    # -- Payloads ----------------------------------------------------------

    @staticmethod
    def byte(value: int) -> bytes:
        return struct.pack(">B", value)

    @staticmethod
    def short(value: int) -> bytes:
        return struct.pack(">H", value)

    @staticmethod
    def int_(value: int) -> bytes:
        return struct.pack(">I", value)

    @staticmethod
    def long(value: int) -> bytes:
        return struct.pack(">Q", value)

    @staticmethod
    def float_(value: float) -> bytes:
        return struct.pack("=f", value)

    @staticmethod
    def double(value: float) -> bytes:
        return struct.pack("=d", value)

    @staticmethod
    def string(value) -> bytes:
        raw = value.encode("utf-8") if isinstance(value, str) else bytes(value)
        return struct.pack(">H", len(raw)) + raw

    @staticmethod
    def byte_array(values: Sequence[int]) -> bytes:
        raw = bytes(values)
        return struct.pack(">I", len(raw)) + raw

    @staticmethod
    def list_(element_kind: int, payloads: Sequence[bytes]) -> bytes:
        return struct.pack(">BI", element_kind, len(payloads)) + b"".join(payloads)

    @staticmethod
    def compound(*entries: bytes) -> bytes:
        return b"".join(entries) + bytes([END])

    # -- Named tags --------------------------------------------------------

    def named(self, kind: int, name, payload: bytes) -> bytes:
        return bytes([kind]) + self.string(name) + payload

    def schematic(
        self,
        width: int,
        height: int,
        length: int,
        blocks: Sequence[int],
        data: Sequence[int],
        dimension_kind: int = SHORT,
    ) -> bytes:
        """A root compound named "Schematic" with the five conversion tags."""
        encode = {BYTE: self.byte, SHORT: self.short, INT: self.int_, LONG: self.long}[dimension_kind]
        return self.named(COMPOUND, "Schematic", self.compound(
            self.named(dimension_kind, "Width", encode(width)),
            self.named(dimension_kind, "Height", encode(height)),
            self.named(dimension_kind, "Length", encode(length)),
            self.named(STRING, "Materials", self.string("Alpha")),
            self.named(BYTE_ARRAY, "Blocks", self.byte_array(blocks)),
            self.named(BYTE_ARRAY, "Data", self.byte_array(data)),
        ))


@pytest.fixture
def nbt():
    """An NBTBuilder for encoding test inputs."""
    return NBTBuilder()


@pytest.fixture
def sample_schematic_bytes(nbt):
    """2x1x1 schematic with one air cell and one block (id 5, meta 3)."""
    return nbt.schematic(width=2, height=1, length=1, blocks=[0, 5], data=[0, 3])


@pytest.fixture
def write_schematic(tmp_path):
    """Factory writing raw bytes to ``tmp_path/<name>`` and returning the path."""

    def _write(data: bytes, name: str = "house.schematic") -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write


SAMPLE_BO2 = (
    "[META]\n"
    "version=2.0\n"
    "spawnElevationMin=0\n"
    "spawnElevationMax=128\n"
    "rarity=100\n"
    "collisionPercentage=2\n"
    "[DATA]\n"
    "1,0,0:5.3\n"
)
"""Expected BO2 output for sample_schematic_bytes."""


@pytest.fixture
def sample_bo2_text():
    return SAMPLE_BO2
