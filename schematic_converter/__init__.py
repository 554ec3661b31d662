"""Schematic → BO2 converter.

WHY: Schematic files store a dense block volume inside a binary tag tree;
terrain-generation plugins consume BO2 objects, a sparse text listing of
solid blocks. This package decodes the former and writes the latter.

HOW: Three-stage pipeline: decode (nbt package, bytes → tag tree),
project (core package, tag tree → validated volume → voxels), format
(pluggable formatters, volume → output file). Each stage is
independently testable.

RULES:
- The tag tree is the stable contract between decoding and projection
- The SchematicVolume IR is the contract between projection and formatting
- Adding an output format = one new formatter module, no core changes
"""

__version__ = "0.1.0"
