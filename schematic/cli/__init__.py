"""Command line entry points."""

from schematic.cli.driver import SchematicCLI, main

__all__ = ["SchematicCLI", "main"]
