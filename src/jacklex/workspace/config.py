# Copyright 2026 jacklex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Data model and YAML loader for the jacklex configuration file."""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".jacklex.yaml"


class JackConfigError(Exception):
    """Raised when a configuration file is invalid or cannot be loaded."""


class JackConfig(BaseModel):
    """Settings controlling which files are scanned and where dumps are written.

    Attributes:
        source_suffix: Single extension of the source files picked up from a
            directory. Must differ from ``output_suffix``.
        output_suffix: Appended to the source file's stem to name its dump.
        output_directory: Directory receiving the dumps, relative to the
            configuration file. When unset, each dump is written beside its source.
    """

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    source_suffix: str = Field(alias="source-suffix", default=".jack")
    output_suffix: str = Field(alias="output-suffix", default=".xml")
    output_directory: str | None = Field(alias="output-directory", default=None)

    @field_validator("source_suffix")
    @classmethod
    def _check_source_suffix(cls, value: str) -> str:
        # Matched against Path.suffix, which holds only the last extension.
        if not value.startswith(".") or len(value) < 2 or value.count(".") > 1:
            raise ValueError(f"source suffix must be a single extension such as '.jack', got {value!r}")
        return value

    @field_validator("output_suffix")
    @classmethod
    def _check_output_suffix(cls, value: str) -> str:
        # Appended to the source stem, e.g. 'T.xml' gives 'MainT.xml'.
        if not value or "/" in value or "\\" in value:
            raise ValueError(f"output suffix must be a non-empty file name part, got {value!r}")
        return value

    @model_validator(mode="after")
    def _check_suffixes_differ(self) -> "JackConfig":
        if self.output_suffix == self.source_suffix:
            raise ValueError(f"output suffix {self.output_suffix!r} would overwrite the source files")
        return self


def load_config(path: Path) -> JackConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the `.jacklex.yaml` file.

    Returns:
        A validated JackConfig instance.

    Raises:
        JackConfigError: If the file cannot be read, contains invalid YAML,
            or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise JackConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise JackConfigError(f"Cannot read config file '{path}': {exc}") from exc

    return _parse_config(raw, source_label=str(path))


def find_config(directory: Path) -> JackConfig:
    """Return the configuration stored in *directory*, or the defaults if it has none."""
    config_file = directory / CONFIG_FILE_NAME
    if not config_file.exists():
        return JackConfig()
    return load_config(config_file)


# ################
# Implementation
# ################


def _parse_config(text: str, source_label: str = "<string>") -> JackConfig:
    """Parse configuration YAML text into a JackConfig."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise JackConfigError(f"Invalid YAML in {source_label}: {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise JackConfigError(f"{source_label}: config must be a YAML mapping")

    try:
        return JackConfig.model_validate(data)
    except ValidationError as exc:
        raise JackConfigError(f"Invalid config '{source_label}': {exc}") from exc
