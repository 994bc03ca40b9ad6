"""Reading and decoding of schema files."""

from __future__ import annotations

import json
from json.decoder import WHITESPACE
from pathlib import Path
from typing import IO, Any

from pydantic import ValidationError

from schematic.core.exceptions import SchemaDecodeError, SchemaFileError
from schematic.core.schemas import Schema
from schematic.logger import logger


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid character '{name[0]}' looking for beginning of value")


class SchemaLoader:
    """Opens a schema file and decodes it into a ``Schema`` model.

    Only the first JSON value in the file is decoded. Anything after it is
    ignored, the same way a streaming decoder stops after one value.
    ``NaN`` and ``Infinity`` are not JSON and are rejected.
    """

    def __init__(self, encoding: str = "utf-8") -> None:
        """Initialize the schema loader.

        Args:
            encoding: Text encoding of schema files
        """
        self.encoding = encoding
        self._decoder = json.JSONDecoder(parse_constant=_reject_constant)

    def load(self, path: str | Path) -> Schema:
        """Open ``path`` and decode the schema it contains.

        Raises:
            SchemaFileError: If the file cannot be opened or read
            SchemaDecodeError: If the content is not a valid schema document
        """
        try:
            with open(path, "r", encoding=self.encoding, errors="replace") as f:
                document = self.decode_stream(f)
        except OSError as e:
            raise SchemaFileError(str(path), e) from e

        logger.debug("Decoded schema document from %s", path)
        return self.build(document)

    def decode_stream(self, stream: IO[str]) -> Any:
        """Decode the first JSON value from a text stream."""
        text = stream.read()
        start = WHITESPACE.match(text).end()
        try:
            document, end = self._decoder.raw_decode(text, start)
        except ValueError as e:
            raise SchemaDecodeError(str(e), e) from e

        if text[end:].strip():
            logger.debug("Ignoring trailing data after character %d", end)
        return document

    def build(self, document: Any) -> Schema:
        """Turn a decoded JSON value into a ``Schema`` model.

        A top-level ``null`` leaves the schema empty.

        Raises:
            SchemaDecodeError: If the value does not fit the schema model
        """
        if document is None:
            return Schema()

        try:
            return Schema.model_validate(document)
        except ValidationError as e:
            raise SchemaDecodeError(_format_validation_error(e), e) from e


def _format_validation_error(error: ValidationError) -> str:
    problems = []
    for item in error.errors():
        location = ".".join(str(part) for part in item["loc"])
        if location:
            problems.append(f"{location}: {item['msg']}")
        else:
            problems.append(item["msg"])
    return "; ".join(problems)
