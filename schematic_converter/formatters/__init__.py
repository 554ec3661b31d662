"""Output formatter registry.

WHY: The CLI and converter need a single lookup to find a formatter by
name. A central dict makes adding an output format a one-line change.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["bo2"]()``.

RULES:
- Keys are snake_case identifiers
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from schematic_converter.formatters.bo2 import BO2Formatter

if TYPE_CHECKING:
    from schematic_converter.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "bo2": BO2Formatter,
}

DEFAULT_FORMAT = "bo2"
