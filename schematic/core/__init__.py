"""Core data models and shared types."""

from schematic.core.config import Config, ExitCodesConfig, get_config
from schematic.core.exceptions import (
    ConfigurationError,
    GenerationError,
    RuntimeFault,
    SchemaDecodeError,
    SchemaFileError,
    SchematicError,
    UsageError,
)
from schematic.core.schemas import Link, Schema

__all__ = [
    "Config",
    "ExitCodesConfig",
    "get_config",
    "Link",
    "Schema",
    "SchematicError",
    "UsageError",
    "SchemaFileError",
    "SchemaDecodeError",
    "GenerationError",
    "RuntimeFault",
    "ConfigurationError",
]
