from typing import Protocol, runtime_checkable

from schematic.core.schemas import Schema


@runtime_checkable
class Generator(Protocol):
    def generate(self, schema: Schema) -> bytes: ...
