"""Formatter configuration.

Pydantic models for formatter defaults and an optional custom unit table,
loadable from YAML.

Usage:
    from intl_units.config import load_config

    config = load_config(Path("intl_units.yaml"))
    formatter = await DurationFormat.create(
        resolver, ["en-US"], config.duration, table=config.unit_table
    )

File format (all keys optional, an ``intl_units`` root key is unwrapped)::

    duration:
      max_unit: minute
      min_unit: millisecond
    relative:
      style: short
    relative_date_max_diff_seconds: 604800
    units:
      duration: [...]
      groups: {...}
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Self

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from intl_units.core.exceptions import ConfigError, IntlUnitsError
from intl_units.formatting.options import DurationFormatOptions, RelativeTimeFormatOptions
from intl_units.formatting.relative import DEFAULT_MAX_DIFF_SECONDS
from intl_units.units.table import DEFAULT_UNIT_TABLE, UnitTable

logger = logging.getLogger(__name__)

CONFIG_ROOT_KEY = "intl_units"


class FormatterConfig(BaseModel):
    """Formatter defaults.

    Attributes:
        duration: Default duration formatter options.
        relative: Default relative-time formatter options.
        relative_date_max_diff_seconds: Age after which relative dates
            fall back to an absolute date.
        units: Raw custom unit table, default table when None.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    duration: DurationFormatOptions = Field(default_factory=DurationFormatOptions)
    relative: RelativeTimeFormatOptions = Field(default_factory=RelativeTimeFormatOptions)
    relative_date_max_diff_seconds: float = Field(default=DEFAULT_MAX_DIFF_SECONDS, gt=0)
    units: dict[str, Any] | None = None

    @model_validator(mode="after")
    def validate_units(self) -> Self:
        """Check the unit table and the duration defaults against it."""
        try:
            table = self.unit_table
            table.duration_range(self.duration.max_unit, self.duration.min_unit)
        except IntlUnitsError as e:
            raise ValueError(str(e)) from e
        return self

    @property
    def unit_table(self) -> UnitTable:
        """Unit table built from ``units``, or the default table."""
        if self.units is None:
            return DEFAULT_UNIT_TABLE
        return UnitTable.from_dict(self.units)


def load_config(path: Path) -> FormatterConfig:
    """Load formatter configuration from a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Validated FormatterConfig. An empty file yields the defaults.

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or does
            not describe a valid configuration.

    """
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML syntax: {e}", file_path=path) from e
    except OSError as e:
        raise ConfigError(f"Cannot read file: {e}", file_path=path) from e

    if data is None:
        logger.debug("Empty config file: %s", path)
        return FormatterConfig()

    if not isinstance(data, dict):
        raise ConfigError(
            f"YAML root must be a dictionary, got {type(data).__name__}", file_path=path
        )

    if CONFIG_ROOT_KEY in data:
        data = data[CONFIG_ROOT_KEY] or {}

    try:
        config = FormatterConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration: {e}", file_path=path) from e

    logger.debug("Loaded formatter config from %s", path)
    return config
