"""
Configuration models and YAML I/O for ga-events.

This module defines the Pydantic models that map 1:1 to a conversion
config file, plus helpers for loading, saving and generating it.

Key models:
- ConvertConfig: Top-level config (source + output).
- SourceConfig: Input directory, table file suffix, encoding, separator,
  optional external header row and ordering.
- OutputConfig: Output document path and JSON indentation.

Key functions:
- load_config(path) -> ConvertConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.
- generate_default_config(...) -> ConvertConfig: Build a config from arguments.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from ga_events.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class SourceConfig(BaseModel):
    """Where the tables come from and how to split them."""

    input_dir: str = Field("ga", description="Directory with one table file per event group")
    extension: str = Field(".csv", description="Suffix of table files, including the dot")
    encoding: str = Field("utf-8-sig", description="Text encoding of the table files (BOM tolerant)")
    separator: str = Field(",", description="Cell delimiter")
    headers: list[str] | None = Field(
        None,
        description="External header row. If set, every record is a data row.",
    )
    sort_tables: bool = Field(
        False,
        description="If True, process tables in file name order instead of listing order",
    )

    @field_validator("separator")
    @classmethod
    def _check_separator(cls, value: str) -> str:
        if not value:
            raise ValueError("separator must be a non-empty string")
        return value

    @field_validator("extension")
    @classmethod
    def _check_extension(cls, value: str) -> str:
        if not value.startswith("."):
            raise ValueError(f"extension must start with '.', got '{value}'")
        return value

    @field_validator("headers")
    @classmethod
    def _check_headers(cls, value: list[str] | None) -> list[str] | None:
        if value is not None and not value:
            raise ValueError("headers must not be an empty list; omit it instead")
        return value


class OutputConfig(BaseModel):
    """Output settings."""

    output_path: str = Field("analytics.json", description="Path of the JSON document")
    indent: int | None = Field(
        None, ge=0, description="JSON indentation; None writes compact JSON"
    )


class ConvertConfig(BaseModel):
    """Top-level configuration for a conversion run."""

    source: SourceConfig = Field(default_factory=SourceConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)


def load_config(path: str | Path) -> ConvertConfig:
    """Load and validate a YAML config into a ConvertConfig model.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty or not a mapping.
        pydantic.ValidationError: If the YAML content fails schema validation.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f)
    if raw is None:
        raise ConfigValidationError(f"Config file is empty: {path}")
    if not isinstance(raw, dict):
        raise ConfigValidationError(
            f"Config root must be a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded config from %s", path)
    return ConvertConfig.model_validate(raw)


def save_config(config: ConvertConfig, path: str | Path) -> None:
    """Serialize a ConvertConfig to YAML with a header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# ga-events configuration\n")
        f.write("# Edit this file to change the input directory, separator, etc.\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved config to %s", path)


def generate_default_config(
    input_dir: str = "ga",
    output_path: str = "analytics.json",
    separator: str = ",",
    headers: list[str] | None = None,
    sort_tables: bool = False,
) -> ConvertConfig:
    """Build a ConvertConfig from keyword arguments."""
    return ConvertConfig(
        source=SourceConfig(
            input_dir=input_dir,
            separator=separator,
            headers=headers,
            sort_tables=sort_tables,
        ),
        output=OutputConfig(output_path=output_path),
    )
