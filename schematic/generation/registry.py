"""Lookup of the code generator that turns a schema into source text."""

from __future__ import annotations

import importlib
import inspect
from importlib.metadata import entry_points
from typing import Any, Callable

from schematic.core.config import ENV_PREFIX
from schematic.core.exceptions import ConfigurationError
from schematic.core.schemas import Schema
from schematic.generation.interfaces import Generator
from schematic.logger import logger

ENTRY_POINT_GROUP = "schematic.generators"
GENERATOR_VARIABLE = f"{ENV_PREFIX}GENERATOR"


class CallableGenerator:
    """Adapts a function, a generator object or a generator class to ``Generator``.

    Classes are instantiated with no arguments. Text results are encoded with ``encoding``; bytes pass through. Any other
    result type is a programming error in the generator and raises TypeError.
    """

    def __init__(self, target: Any, encoding: str = "utf-8") -> None:
        if inspect.isclass(target):
            target = target()
        if isinstance(target, Generator):
            self._func: Callable[[Schema], Any] = target.generate
        elif callable(target):
            self._func = target
        else:
            raise TypeError(f"{target!r} is not a code generator")
        self.target = target
        self.encoding = encoding

    def generate(self, schema: Schema) -> bytes:
        code = self._func(schema)
        if isinstance(code, (bytes, bytearray)):
            return bytes(code)
        if isinstance(code, str):
            return code.encode(self.encoding)
        raise TypeError(
            f"generator returned {type(code).__name__}, expected bytes or str"
        )


def resolve_generator(name: str | None, encoding: str = "utf-8") -> CallableGenerator:
    """Find the configured code generator.

    Args:
        name: Import path (``module:attr`` or ``module.attr``) or the name of
            an entry point in the ``schematic.generators`` group. When None,
            the single installed entry point is used.
        encoding: Encoding for generators that return text

    Returns:
        The generator wrapped as a ``CallableGenerator``

    Raises:
        ConfigurationError: If no generator can be found
    """
    installed = {ep.name: ep for ep in entry_points(group=ENTRY_POINT_GROUP)}

    if name is None:
        if len(installed) == 1:
            (entry_point,) = installed.values()
            logger.debug("Using generator entry point %s", entry_point.name)
            return _wrap(entry_point.load(), encoding)
        if not installed:
            raise ConfigurationError(variable_name=GENERATOR_VARIABLE)
        raise ConfigurationError(
            variable_name=GENERATOR_VARIABLE,
            detail=f"several generators installed, choose one of {', '.join(sorted(installed))}",
        )

    if name in installed:
        logger.debug("Using generator entry point %s", name)
        return _wrap(installed[name].load(), encoding)

    logger.debug("Importing generator %s", name)
    return _wrap(_import_object(name), encoding)


def _import_object(path: str) -> Any:
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        raise ConfigurationError(
            variable_name=GENERATOR_VARIABLE,
            detail=f"{path!r} is not an import path or installed generator",
        )

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise ConfigurationError(
            variable_name=GENERATOR_VARIABLE, detail=f"cannot import {module_name!r}: {e}"
        ) from e

    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError as e:
            raise ConfigurationError(
                variable_name=GENERATOR_VARIABLE,
                detail=f"{module_name!r} has no attribute {attr_path!r}",
            ) from e
    return obj


def _wrap(obj: Any, encoding: str) -> CallableGenerator:
    try:
        return CallableGenerator(obj, encoding)
    except TypeError as e:
        raise ConfigurationError(variable_name=GENERATOR_VARIABLE, detail=str(e)) from e
