"""Pydantic models for type-safe data validation and parsing."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr


class Link(BaseModel):
    """A hyper-schema link description object."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    title: StrictStr | None = None
    description: StrictStr | None = None
    href: StrictStr | None = None
    rel: StrictStr | None = None
    method: StrictStr | None = None
    schema_: Schema | None = Field(None, alias="schema")
    target_schema: Schema | None = Field(None, alias="targetSchema")
    media_type: StrictStr | None = Field(None, alias="mediaType")
    enc_type: StrictStr | None = Field(None, alias="encType")


class Schema(BaseModel):
    """Decoded JSON Hyper-Schema document handed to code generators.

    Only the structure of the known keywords is checked here. Keys the model
    does not declare are kept as extra attributes so that generators can read
    whatever they need from the document.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    schema_uri: StrictStr | None = Field(None, alias="$schema")
    id: StrictStr | None = None
    ref: StrictStr | None = Field(None, alias="$ref")
    title: StrictStr | None = None
    description: StrictStr | None = None
    version: StrictStr | None = None

    default: Any = None
    read_only: StrictBool | None = Field(None, alias="readOnly")
    example: Any = None
    type: StrictStr | list[StrictStr] | None = None
    format: StrictStr | None = None
    pattern: StrictStr | None = None
    enum: list[Any] | None = None

    required: list[StrictStr] | None = None
    properties: dict[str, Schema] | None = None
    pattern_properties: dict[str, Schema] | None = Field(
        None, alias="patternProperties"
    )
    additional_properties: StrictBool | Schema | None = Field(
        None, alias="additionalProperties"
    )
    definitions: dict[str, Schema] | None = None
    items: Schema | list[Schema] | None = None

    any_of: list[Schema] | None = Field(None, alias="anyOf")
    one_of: list[Schema] | None = Field(None, alias="oneOf")
    all_of: list[Schema] | None = Field(None, alias="allOf")
    not_: Schema | None = Field(None, alias="not")

    min_length: StrictInt | None = Field(None, alias="minLength")
    max_length: StrictInt | None = Field(None, alias="maxLength")
    min_items: StrictInt | None = Field(None, alias="minItems")
    max_items: StrictInt | None = Field(None, alias="maxItems")
    minimum: float | None = None
    maximum: float | None = None

    links: list[Link] | None = None

    def types(self) -> list[str]:
        """Return the declared ``type`` keyword as a list."""
        if self.type is None:
            return []
        if isinstance(self.type, str):
            return [self.type]
        return list(self.type)


Link.model_rebuild()
Schema.model_rebuild()

