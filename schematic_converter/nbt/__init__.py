"""Decoder for the binary tagged-tree (NBT-style) format.

WHY: Schematic files are stored as one self-describing tag tree. This
package turns raw bytes into an immutable, typed tree and offers the two
queries the converter needs: lookup by name and integer coercion.

HOW: reader.py holds the byte-level codecs, tags.py the data model,
decoder.py the tree decoder, index.py lookup and coercion, errors.py the
failure taxonomy.

RULES:
- Decoding is all-or-nothing; errors derive from SchematicError
- Decoded trees are never mutated
"""

from schematic_converter.nbt.decoder import (
    decode_bytes,
    decode_named_tag,
    decode_payload,
    load_file,
)
from schematic_converter.nbt.errors import (
    InconsistentArrayLength,
    InvalidDimensions,
    MalformedList,
    MissingTag,
    NestingTooDeep,
    NotNumeric,
    SchematicError,
    TruncatedInput,
    UnknownTagKind,
    WrongTagType,
)
from schematic_converter.nbt.index import as_integer, find_tag
from schematic_converter.nbt.reader import ByteReader
from schematic_converter.nbt.tags import NamedTag, Tag, TagKind, TagList

__all__ = [
    "ByteReader",
    "InconsistentArrayLength",
    "InvalidDimensions",
    "MalformedList",
    "MissingTag",
    "NamedTag",
    "NestingTooDeep",
    "NotNumeric",
    "SchematicError",
    "Tag",
    "TagKind",
    "TagList",
    "TruncatedInput",
    "UnknownTagKind",
    "WrongTagType",
    "as_integer",
    "decode_bytes",
    "decode_named_tag",
    "decode_payload",
    "find_tag",
    "load_file",
]
