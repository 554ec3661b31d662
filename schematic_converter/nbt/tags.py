"""Tag tree data model for the decoded binary format.

WHY: Every consumer of a decoded file (lookup, numeric coercion, voxel
projection) needs the same typed view of the tree. A small, closed set of
immutable dataclasses is that contract.

HOW: TagKind enumerates the on-wire discriminants. A Tag is one payload:
its kind plus a plain Python value. Lists carry their declared element
kind alongside the element tags. A NamedTag is what a Compound stores:
kind, raw name bytes, and the Tag payload. The compound terminator is a
NamedTag of kind END with neither name nor payload.

RULES:
- One Tag dataclass for all ten kinds; the kind decides the value shape:
    BYTE/SHORT/INT/LONG -> int (unsigned)
    FLOAT/DOUBLE        -> float
    BYTE_ARRAY/STRING   -> bytes
    LIST                -> TagList
    COMPOUND            -> tuple of NamedTag
- Names and strings are kept as raw bytes; they need not be valid UTF-8
- Everything is frozen and built from tuples: a tree is never mutated
  after decoding
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Tuple, Union


class TagKind(enum.IntEnum):
    """On-wire discriminant byte for each tag kind."""

    END = 0
    BYTE = 1
    SHORT = 2
    INT = 3
    LONG = 4
    FLOAT = 5
    DOUBLE = 6
    BYTE_ARRAY = 7
    STRING = 8
    LIST = 9
    COMPOUND = 10


INTEGER_KINDS = frozenset({TagKind.BYTE, TagKind.SHORT, TagKind.INT, TagKind.LONG})
"""Kinds that coerce to an integer dimension."""

CONTAINER_KINDS = frozenset({TagKind.LIST, TagKind.COMPOUND})


@dataclass(frozen=True)
class TagList:
    """Payload of a LIST tag: a declared element kind and its elements."""

    element_kind: TagKind
    items: Tuple["Tag", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def values(self) -> list:
        """Plain values of the elements, in order."""
        return [item.value for item in self.items]


TagValue = Union[int, float, bytes, TagList, Tuple["NamedTag", ...]]


@dataclass(frozen=True)
class Tag:
    """A single decoded payload of any of the ten tag kinds."""

    kind: TagKind
    value: TagValue


@dataclass(frozen=True)
class NamedTag:
    """A Tag together with its name, as stored inside a Compound.

    The compound terminator is represented as ``NamedTag(TagKind.END)``:
    no name and no payload. It stops compound decoding and is never
    linked into a decoded tree.
    """

    kind: TagKind
    name: Optional[bytes] = None
    tag: Optional[Tag] = None

    @property
    def is_terminator(self) -> bool:
        return self.kind == TagKind.END

    @property
    def value(self) -> TagValue | None:
        return self.tag.value if self.tag is not None else None

    @property
    def display_name(self) -> str:
        """Name decoded for messages; undecodable bytes are replaced."""
        if self.name is None:
            return ""
        return self.name.decode("utf-8", errors="replace")

    @property
    def children(self) -> Tuple["NamedTag", ...]:
        """Entries of a COMPOUND payload; empty for every other kind."""
        if self.kind == TagKind.COMPOUND and self.tag is not None:
            return self.tag.value  # type: ignore[return-value]
        return ()


TERMINATOR = NamedTag(TagKind.END)
