"""Error taxonomy for tag decoding and schematic conversion.

WHY: A malformed schematic must fail one file's conversion cleanly, with a
message precise enough to tell the user which file is broken and why. A
single base class lets the driver catch every conversion failure in one
place while tests can still assert on the exact failure kind.

HOW: Every error derives from SchematicError, which is a ValueError so
callers that already treat bad input as ValueError keep working. Each
subclass stores the facts it was raised with as attributes and builds a
human-readable message from them.

RULES:
- Decode errors: TruncatedInput, UnknownTagKind, MalformedList, NestingTooDeep
- Conversion errors: MissingTag, NotNumeric, WrongTagType,
  InvalidDimensions, InconsistentArrayLength
- Never raised for "tag not found" during lookup (find_tag returns None)
"""

from __future__ import annotations


class SchematicError(ValueError):
    """Base class for every decode and conversion failure."""


# ---------------------------------------------------------------------------
# Decode errors
# ---------------------------------------------------------------------------


class TruncatedInput(SchematicError):
    """The byte source ran out in the middle of a read."""

    def __init__(self, offset: int, needed: int, available: int) -> None:
        self.offset = offset
        self.needed = needed
        self.available = available
        super().__init__(
            "Truncated input at offset {}: needed {} byte(s), {} available".format(
                offset, needed, available,
            )
        )


class UnknownTagKind(SchematicError):
    """A discriminant byte outside the ten known tag kinds (plus END)."""

    def __init__(self, value: int, offset: int | None = None) -> None:
        self.value = value
        self.offset = offset
        where = " at offset {}".format(offset) if offset is not None else ""
        super().__init__("Unknown tag kind {}{}".format(value, where))


class MalformedList(SchematicError):
    """A List declares END as its element kind but a non-zero count."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            "List with element kind END must be empty, got {} element(s)".format(count)
        )


class NestingTooDeep(SchematicError):
    """Lists/compounds are nested deeper than the configured bound."""

    def __init__(self, max_depth: int) -> None:
        self.max_depth = max_depth
        super().__init__("Tag nesting exceeds maximum depth of {}".format(max_depth))


# ---------------------------------------------------------------------------
# Conversion errors
# ---------------------------------------------------------------------------


class MissingTag(SchematicError):
    """A tag required by the conversion is not present anywhere in the tree."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Missing required tag '{}'".format(name))


class NotNumeric(SchematicError):
    """A tag used as a number is not one of the integer kinds."""

    def __init__(self, name: str, kind: int) -> None:
        self.name = name
        self.kind = kind
        super().__init__("'{}' is not a numeric type ({})".format(name, kind))


class WrongTagType(SchematicError):
    """A tag is present but has the wrong kind for its role."""

    def __init__(self, name: str, expected: int, actual: int) -> None:
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            "'{}' has tag kind {}, expected {}".format(name, actual, expected)
        )


class InvalidDimensions(SchematicError):
    """Width, height or length is not a strictly positive 32-bit integer."""

    def __init__(self, width: int, height: int, length: int) -> None:
        self.width = width
        self.height = height
        self.length = length
        super().__init__(
            "Invalid dimensions: width={} height={} length={}".format(width, height, length)
        )


class InconsistentArrayLength(SchematicError):
    """Blocks/Data lengths disagree with each other or with the volume."""

    def __init__(self, expected: int, blocks: int, data: int) -> None:
        self.expected = expected
        self.blocks = blocks
        self.data = data
        super().__init__(
            "Inconsistent data: volume is {} but Blocks has {} and Data has {} byte(s)".format(
                expected, blocks, data,
            )
        )
