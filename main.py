"""
Schematic

Entry point for the schematic code generator driver.
"""

from schematic import SchematicCLI


def main() -> None:
    """
    Entry point for the schematic script.

    Creates a SchematicCLI instance and runs it on the command line arguments.
    """
    SchematicCLI().run()


if __name__ == "__main__":
    main()
