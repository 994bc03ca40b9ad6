"""Code generator interface and lookup."""

from schematic.generation.interfaces import Generator
from schematic.generation.registry import CallableGenerator, resolve_generator

__all__ = ["Generator", "CallableGenerator", "resolve_generator"]
