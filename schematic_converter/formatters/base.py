"""Abstract base formatter and output container.

WHY: The projected volume is format-agnostic; the file written to disk is
not. This base class gives every output format the same interface so the
converter and CLI can drive any formatter generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list; single-file formatters return one item
- ``suffix`` includes the leading dot, e.g. ``".bo2"``
- The caller is responsible for prepending the source filename stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from schematic_converter.core.ir import SchematicVolume


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the source stem,
                e.g. ``".bo2"`` → ``"house.bo2"``.
        content: The complete file content.
        media_type: MIME type for the content, e.g. ``"text/plain"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all output formatters.

    To add a new output format:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'BO2 Object'."""

    @abstractmethod
    def format(self, volume: SchematicVolume) -> list[FormatterOutput]:
        """Convert a validated volume into one or more output files.

        Args:
            volume: The validated schematic volume.

        Returns:
            List of FormatterOutput objects, each containing a file suffix,
            content string/bytes, and MIME type.
        """
