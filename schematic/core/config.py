"""Configuration for the schematic command line tool."""

import logging
import re
from functools import lru_cache

from dotenv import find_dotenv, load_dotenv
from pydantic import (
    BaseModel,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)
from pydantic_settings import BaseSettings, SettingsError

from .exceptions import ConfigurationError

ENV_PREFIX = "SCHEMATIC_"


class ExitCodesConfig(BaseModel):
    """Configuration for exit codes."""

    success: int = 0
    error_usage: int = 1
    error_file_not_found: int = 2
    error_invalid_schema: int = 3
    error_generation_failed: int = 4
    error_configuration: int = 5
    error_runtime_fault: int = 6

    @model_validator(mode="after")
    def validate_failures_non_zero(self) -> "ExitCodesConfig":
        """Reject a zero status for any failure."""
        zero = [name for name, code in self if name.startswith("error_") and code == 0]
        if zero:
            raise ValueError(f"failure exit codes must be non-zero: {', '.join(zero)}")
        return self


class Config(BaseSettings):
    """Main configuration class, read from ``SCHEMATIC_*`` environment variables."""

    generator: str | None = Field(
        default=None,
        description="Import path (module:attr) or entry point name of the code generator",
    )
    log_level: str = Field(default="ERROR", description="Level of the schematic logger")
    encoding: str = Field(
        default="utf-8", description="Encoding of schema files and of text output"
    )

    exit_codes: ExitCodesConfig = Field(default_factory=ExitCodesConfig)

    model_config = {
        "env_prefix": ENV_PREFIX,
        "case_sensitive": False,
        "extra": "ignore",
    }

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize the level name and reject unknown ones."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown logging level {v!r}")
        return level

    def __init__(self, **data):
        """Initialize config, reporting invalid values as ConfigurationError."""
        try:
            super().__init__(**data)
        except ValidationError as e:
            error = e.errors()[0]
            field_name = error["loc"][0] if error["loc"] else "unknown"
            raise ConfigurationError(
                variable_name=f"{ENV_PREFIX}{field_name}".upper(),
                detail=error["msg"],
            ) from e
        except SettingsError as e:
            match = re.search(r'field "(\w+)"', str(e))
            field_name = match.group(1) if match else "unknown"
            raise ConfigurationError(
                variable_name=f"{ENV_PREFIX}{field_name}".upper(),
                detail=str(e),
            ) from e


@lru_cache(maxsize=1)
def get_config() -> Config:
    """Return the process configuration, loading ``.env`` on first use."""
    load_dotenv(find_dotenv(usecwd=True))
    return Config()
