"""Shared fixtures for the schematic test suite."""

import json
import os
from pathlib import Path
from typing import Any

import pytest

from schematic.core.config import get_config


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Run every test without SCHEMATIC_* variables and with fresh settings."""
    for name in list(os.environ):
        if name.upper().startswith("SCHEMATIC_"):
            monkeypatch.delenv(name)
    get_config.cache_clear()
    yield
    get_config.cache_clear()


@pytest.fixture
def hyper_schema() -> dict[str, Any]:
    """A small but realistic JSON Hyper-Schema document."""
    return {
        "$schema": "http://json-schema.org/draft-04/hyper-schema",
        "id": "https://api.example.com/schema",
        "title": "Example API",
        "description": "An API for managing apps",
        "type": ["object"],
        "definitions": {
            "app": {
                "$schema": "http://json-schema.org/draft-04/hyper-schema",
                "title": "App",
                "description": "An app is a program to be deployed.",
                "stability": "production",
                "type": ["object"],
                "definitions": {
                    "id": {
                        "description": "unique identifier of app",
                        "readOnly": True,
                        "format": "uuid",
                        "type": ["string"],
                    },
                    "name": {
                        "description": "unique name of app",
                        "example": "example",
                        "pattern": "^[a-z][a-z0-9-]{3,50}$",
                        "type": ["string"],
                    },
                },
                "properties": {
                    "id": {"$ref": "#/definitions/app/definitions/id"},
                    "name": {"$ref": "#/definitions/app/definitions/name"},
                },
                "required": ["name"],
                "links": [
                    {
                        "title": "Create",
                        "description": "Create a new app.",
                        "href": "/apps",
                        "rel": "create",
                        "method": "POST",
                        "schema": {
                            "type": ["object"],
                            "properties": {
                                "name": {"$ref": "#/definitions/app/definitions/name"}
                            },
                        },
                    },
                    {
                        "title": "Info",
                        "href": "/apps/{(%23%2Fdefinitions%2Fapp%2Fdefinitions%2Fid)}",
                        "rel": "self",
                        "method": "GET",
                    },
                ],
            }
        },
        "properties": {"app": {"$ref": "#/definitions/app"}},
        "links": [{"href": "https://api.example.com", "rel": "self"}],
    }


@pytest.fixture
def write_schema(tmp_path):
    """Return a helper that writes a schema document (or raw text) to a file."""

    def _write(content: Any, name: str = "schema.json") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, indent=2), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def schema_file(write_schema, hyper_schema) -> Path:
    """The hyper_schema document written to a temporary file."""
    return write_schema(hyper_schema)
