"""
Reader configuration and YAML I/O for ifx-files.

``ReaderConfig`` collects the knobs that describe an IFX "dialect": the
marker that ends the header, the key that declares the columns, the
comment prefix for data lines, and the policies for inputs that stop
short (no marker, no data rows).

The defaults match the format as it is written in the wild, so most
callers never build a config at all:

    df = ifx_files.read("run_042.ifx")

Key functions:
- load_config(path) -> ReaderConfig: Load and validate from YAML.
- save_config(config, path): Serialize to YAML.

Why Pydantic + YAML:
- Pydantic gives strict validation and clear error messages.
- YAML is human-editable, so a site-specific dialect can live next to
  the data it describes.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from ifx_files.exceptions import ConfigValidationError

logger = logging.getLogger(__name__)


class ReaderConfig(BaseModel):
    """Options controlling how an IFX stream is parsed."""

    data_marker: str = Field(
        "[Data]", description="Line prefix that ends the header section"
    )
    columns_key: str = Field(
        "Columns", description="Mandatory header key declaring the column names"
    )
    column_separator: str = Field(
        ",", description="Separator between names in the columns declaration"
    )
    comment: str = Field(
        "#", description="Data lines starting with this prefix are skipped"
    )
    encoding: str = Field(
        "utf-8", description="Text encoding for paths and binary streams"
    )
    require_data_marker: bool = Field(
        True,
        description=(
            "If True, input that ends before the data marker is an error. "
            "If False, end of input also ends the header (zero data rows)."
        ),
    )
    allow_empty_data: bool = Field(
        True,
        description=(
            "If True, an empty data section yields a zero-row table. "
            "If False, it raises EmptyDataSectionError."
        ),
    )

    @field_validator("data_marker", "columns_key", "column_separator")
    @classmethod
    def _check_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty or whitespace")
        return value

    @field_validator("comment")
    @classmethod
    def _check_comment_prefix(cls, value: str) -> str:
        # matched against stripped lines, so surrounding whitespace never matches
        if not value or value != value.strip():
            raise ValueError(
                f"must be a non-empty prefix without whitespace, got {value!r}"
            )
        return value


def load_config(path: str | Path) -> ReaderConfig:
    """Load and validate a reader config YAML file.

    Keys omitted from the file take their defaults.

    Raises:
        FileNotFoundError: If the config file does not exist.
        ConfigValidationError: If the file is empty.
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
            f"Config file must contain a mapping, got {type(raw).__name__}: {path}"
        )
    logger.info("Loaded reader config from %s", path)
    return ReaderConfig.model_validate(raw)


def save_config(config: ReaderConfig, path: str | Path) -> None:
    """Serialize a ReaderConfig to YAML with a short header comment."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = config.model_dump(mode="json")
    with open(path, "w", encoding="utf-8") as f:
        f.write("# ifx-files reader configuration\n\n")
        yaml.dump(
            data,
            f,
            allow_unicode=True,
            default_flow_style=False,
            sort_keys=False,
        )
    logger.info("Saved reader config to %s", path)
