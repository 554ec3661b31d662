"""Package entry point for ``python -m schematic_converter``.

WHY: Users run the converter as
``python -m schematic_converter house.schematic tower.schematic``.

HOW: Delegates to the CLI's main() function.
"""

from schematic_converter.cli import main

if __name__ == "__main__":
    main()
