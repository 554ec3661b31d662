"""Scalar and length-prefixed codecs over an in-memory byte source.

WHY: Every tag payload is built from a handful of primitive reads:
fixed-width integers, IEEE floats, and length-prefixed byte runs. Keeping
them in one cursor object means every bounds check lives in exactly one
place, so malformed input can never cause a silent short read.

HOW: ByteReader wraps a bytes-like buffer and an offset. read() checks the
remaining length before slicing and raises TruncatedInput otherwise.
Scalars go through precompiled struct formats. read_string() and
read_byte_array() read their length prefix and then exactly that many
bytes.

RULES:
- Integers are big-endian and unsigned (>B, >H, >I, >Q)
- Floats and doubles use HOST byte order (=f, =d), not big-endian,
  so existing files decode to the same values as before
- The length prefix is authoritative; no terminator byte is consulted
- A short read always raises TruncatedInput, never returns fewer bytes
"""

from __future__ import annotations

import struct

from schematic_converter.nbt.errors import TruncatedInput

_BYTE = struct.Struct(">B")
_SHORT = struct.Struct(">H")
_INT = struct.Struct(">I")
_LONG = struct.Struct(">Q")
# Host order: see module RULES.
_FLOAT = struct.Struct("=f")
_DOUBLE = struct.Struct("=d")


class ByteReader:
    """Forward-only cursor over a byte buffer."""

    def __init__(self, data: bytes | bytearray | memoryview, offset: int = 0) -> None:
        self._data = memoryview(bytes(data))
        self._offset = offset

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def remaining(self) -> int:
        return len(self._data) - self._offset

    def ensure(self, count: int) -> None:
        """Raise TruncatedInput unless ``count`` more bytes are available."""
        if count > self.remaining:
            raise TruncatedInput(self._offset, count, self.remaining)

    def read(self, count: int) -> bytes:
        """Read exactly ``count`` bytes."""
        self.ensure(count)
        start = self._offset
        self._offset += count
        return self._data[start:self._offset].tobytes()

    def _unpack(self, fmt: struct.Struct):
        self.ensure(fmt.size)
        (value,) = fmt.unpack_from(self._data, self._offset)
        self._offset += fmt.size
        return value

    # -- Scalars -----------------------------------------------------------

    def read_byte(self) -> int:
        return self._unpack(_BYTE)

    def read_short(self) -> int:
        return self._unpack(_SHORT)

    def read_int(self) -> int:
        return self._unpack(_INT)

    def read_long(self) -> int:
        return self._unpack(_LONG)

    def read_float(self) -> float:
        return self._unpack(_FLOAT)

    def read_double(self) -> float:
        return self._unpack(_DOUBLE)

    # -- Length-prefixed ---------------------------------------------------

    def read_string(self) -> bytes:
        """Read a 16-bit byte count followed by that many bytes."""
        length = self.read_short()
        return self.read(length)

    def read_byte_array(self) -> bytes:
        """Read a 32-bit byte count followed by that many bytes."""
        length = self.read_int()
        return self.read(length)

