"""Tag tree decoder for the binary tagged-tree format.

WHY: A schematic file is one named root tag whose payload nests lists and
compounds to arbitrary depth. The converter needs the whole tree, fully
validated, before it can look anything up: a half-decoded tree is never
useful, so decoding either succeeds completely or raises.

HOW: decode_named_tag() reads a discriminant, a name, and one payload.
Scalars, strings and byte arrays are leaves read straight from the
ByteReader. Lists and compounds are decoded with an explicit stack of
open containers instead of recursion: each loop step either reads one
leaf into the innermost open container, opens a nested container, or
closes the innermost one and attaches it to its parent. The stack height
is bounded by max_depth, so adversarial nesting fails with NestingTooDeep
instead of exhausting the interpreter stack.

RULES:
- Discriminant 0 (END) terminates a compound; it is consumed, not stored
- List elements are unnamed payloads of the declared element kind
- A list of element kind END is only valid with count 0
- Scalar list counts are checked against the remaining input up front
- Any discriminant outside 0..10 raises UnknownTagKind
- No partial trees: every failure propagates to the caller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union

from schematic_converter.config import DEFAULT_MAX_DEPTH
from schematic_converter.nbt.errors import (
    MalformedList,
    NestingTooDeep,
    UnknownTagKind,
)
from schematic_converter.nbt.reader import ByteReader
from schematic_converter.nbt.tags import (
    CONTAINER_KINDS,
    TERMINATOR,
    NamedTag,
    Tag,
    TagKind,
    TagList,
)

logger = logging.getLogger(__name__)

# Scalar kinds → (reader method, encoded width in bytes).
_SCALAR_READERS: Dict[TagKind, Tuple[Callable[[ByteReader], Union[int, float]], int]] = {
    TagKind.BYTE: (ByteReader.read_byte, 1),
    TagKind.SHORT: (ByteReader.read_short, 2),
    TagKind.INT: (ByteReader.read_int, 4),
    TagKind.LONG: (ByteReader.read_long, 8),
    TagKind.FLOAT: (ByteReader.read_float, 4),
    TagKind.DOUBLE: (ByteReader.read_double, 8),
}


@dataclass
class _OpenContainer:
    """A list or compound whose payload is still being read."""

    kind: TagKind
    name: Optional[bytes]
    element_kind: TagKind = TagKind.END
    remaining: int = 0
    items: list = field(default_factory=list)

    def attach(self, name: Optional[bytes], tag: Tag) -> None:
        if self.kind == TagKind.COMPOUND:
            self.items.append(NamedTag(tag.kind, name, tag))
        else:
            self.items.append(tag)

    def close(self) -> Tag:
        if self.kind == TagKind.LIST:
            return Tag(TagKind.LIST, TagList(self.element_kind, tuple(self.items)))
        return Tag(TagKind.COMPOUND, tuple(self.items))


def _read_kind(reader: ByteReader) -> TagKind:
    offset = reader.offset
    value = reader.read_byte()
    try:
        return TagKind(value)
    except ValueError:
        raise UnknownTagKind(value, offset) from None


def _decode_leaf(reader: ByteReader, kind: TagKind) -> Tag:
    scalar = _SCALAR_READERS.get(kind)
    if scalar is not None:
        read, _width = scalar
        return Tag(kind, read(reader))
    if kind == TagKind.BYTE_ARRAY:
        return Tag(kind, reader.read_byte_array())
    if kind == TagKind.STRING:
        return Tag(kind, reader.read_string())
    # END never carries a payload
    raise UnknownTagKind(int(kind), reader.offset)


def _open_container(
    reader: ByteReader,
    kind: TagKind,
    name: Optional[bytes],
) -> _OpenContainer:
    if kind == TagKind.COMPOUND:
        return _OpenContainer(kind, name)

    element_kind = _read_kind(reader)
    count = reader.read_int()
    if element_kind == TagKind.END and count:
        raise MalformedList(count)
    scalar = _SCALAR_READERS.get(element_kind)
    if scalar is not None:
        reader.ensure(count * scalar[1])
    return _OpenContainer(kind, name, element_kind, count)


def decode_payload(
    reader: ByteReader,
    kind: TagKind,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> Tag:
    """Decode one unnamed payload of ``kind`` from ``reader``.

    Args:
        reader: Byte cursor positioned at the start of the payload.
        kind: Tag kind of the payload (already read by the caller).
        max_depth: Maximum number of simultaneously open lists/compounds.

    Returns:
        The decoded Tag.

    Raises:
        TruncatedInput, UnknownTagKind, MalformedList, NestingTooDeep.
    """
    if kind not in CONTAINER_KINDS:
        return _decode_leaf(reader, kind)

    if max_depth < 1:
        raise NestingTooDeep(max_depth)
    stack: List[_OpenContainer] = [_open_container(reader, kind, None)]

    while True:
        container = stack[-1]

        if container.kind == TagKind.COMPOUND:
            child_kind = _read_kind(reader)
            finished = child_kind == TagKind.END
            child_name = None if finished else reader.read_string()
        else:
            finished = container.remaining == 0
            if not finished:
                container.remaining -= 1
            child_kind = container.element_kind
            child_name = None

        if finished:
            stack.pop()
            tag = container.close()
            if not stack:
                return tag
            stack[-1].attach(container.name, tag)
        elif child_kind in CONTAINER_KINDS:
            if len(stack) >= max_depth:
                raise NestingTooDeep(max_depth)
            stack.append(_open_container(reader, child_kind, child_name))
        else:
            container.attach(child_name, _decode_leaf(reader, child_kind))


def decode_named_tag(
    reader: ByteReader,
    max_depth: int = DEFAULT_MAX_DEPTH,
) -> NamedTag:
    """Decode one named tag: discriminant, name, payload.

    A discriminant of 0 returns the terminator NamedTag without reading a
    name or payload.
    """
    kind = _read_kind(reader)
    if kind == TagKind.END:
        return TERMINATOR
    name = reader.read_string()
    return NamedTag(kind, name, decode_payload(reader, kind, max_depth))


def decode_bytes(data: bytes, max_depth: int = DEFAULT_MAX_DEPTH) -> NamedTag:
    """Decode the root named tag of an in-memory buffer.

    Bytes after the root tag are ignored.
    """
    reader = ByteReader(data)
    root = decode_named_tag(reader, max_depth)
    if reader.remaining:
        logger.debug("Ignoring %d trailing byte(s) after root tag", reader.remaining)
    return root


def load_file(path: Union[str, Path], max_depth: int = DEFAULT_MAX_DEPTH) -> NamedTag:
    """Read ``path`` and decode its root named tag."""
    path = Path(path)
    data = path.read_bytes()
    logger.debug("Decoding %s (%d bytes)", path, len(data))
    return decode_bytes(data, max_depth)
