"""Named-tag lookup and integer coercion over a decoded tree.

WHY: Schematic files keep the tags the converter needs (Width, Blocks, ...)
somewhere inside the root compound, and writers disagree on exactly where.
Looking them up by name anywhere in the tree, and coercing whichever
integer kind the writer chose, keeps the projector independent of those
layout differences.

HOW: find_tag() walks the tree depth-first, pre-order, left-to-right with
an explicit stack. as_integer() accepts the four integer kinds.

RULES:
- The first match in pre-order wins; later duplicates are shadowed
- Only compound children are searched; list elements are unnamed
- A missing name returns None, never raises
- as_integer() raises NotNumeric naming the offending tag
"""

from __future__ import annotations

from typing import List, Optional, Union

from schematic_converter.nbt.errors import NotNumeric
from schematic_converter.nbt.tags import INTEGER_KINDS, NamedTag


def _name_bytes(name: Union[str, bytes]) -> bytes:
    if isinstance(name, bytes):
        return name
    return name.encode("utf-8")


def find_tag(root: NamedTag, name: Union[str, bytes]) -> Optional[NamedTag]:
    """Find the first tag called ``name`` in pre-order.

    Args:
        root: Root of the decoded tree (usually the file's root compound).
        name: Tag name; a str is compared by its UTF-8 encoding.

    Returns:
        The matching NamedTag, or None if no tag has that name.
    """
    wanted = _name_bytes(name)
    stack: List[NamedTag] = [root]
    while stack:
        node = stack.pop()
        if node.name is not None and node.name == wanted:
            return node
        # Reversed so the leftmost child is visited first
        stack.extend(reversed(node.children))
    return None


def as_integer(named_tag: NamedTag) -> int:
    """Return the integer value of a BYTE, SHORT, INT or LONG tag."""
    if named_tag.kind not in INTEGER_KINDS or named_tag.tag is None:
        raise NotNumeric(named_tag.display_name, int(named_tag.kind))
    return int(named_tag.tag.value)
