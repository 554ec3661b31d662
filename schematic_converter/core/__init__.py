"""Core projection and intermediate representation modules.

WHY: The core package is the stable heart of the converter: the validated
volume IR and the sparse voxel projection. Every output format consumes
what this package produces.

HOW: ir.py defines the data structures, projector.py builds them from a
decoded tag tree and walks them in output order.

RULES:
- IR dataclasses are the contract between projection and formatting
- Projection is format-agnostic; no BO2 text is produced here
"""
