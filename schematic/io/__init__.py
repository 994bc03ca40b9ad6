"""Schema file input."""

from schematic.io.schema_loader import SchemaLoader

__all__ = ["SchemaLoader"]
