"""
Schematic

A command line tool that reads a JSON Hyper-Schema file and prints the source
code produced for it by a pluggable code generator.
"""

from schematic.cli.driver import SchematicCLI

__all__ = ["SchematicCLI"]
