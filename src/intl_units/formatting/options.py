"""Option models for the formatting facades.

Frozen pydantic models hold the resolved options each formatter reports
through ``resolved_options()``. Unit names are plain strings here; they
are checked against the unit table by the facades so misuse raises the
package's own errors rather than a pydantic ValidationError.

Usage:
    options = DurationFormatOptions(max_unit="minute", min_unit="millisecond")
    options.model_copy(update={"locale": "en-US"})
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from intl_units.core.types import BEST_FIT


class DurationFormatOptions(BaseModel):
    """Duration formatter options.

    Attributes:
        locale: First requested locale, filled in by the formatter.
        max_unit: Largest unit shown.
        min_unit: Smallest unit shown; input is rounded to it.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    locale: str | None = None
    max_unit: str = Field(default="hour", description="hour | minute | second | millisecond")
    min_unit: str = Field(default="second", description="hour | minute | second | millisecond")


class RelativeTimeFormatOptions(BaseModel):
    """Relative-time formatter options.

    ``min_unit`` and ``max_unit`` are accepted and reported back but do not
    constrain best-fit selection.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    unit: str = Field(
        default=BEST_FIT,
        description="bestFit | second | minute | hour | day | week | month | quarter | year",
    )
    style: str = Field(default="long", description="long | short")
    min_unit: str = "millisecond"
    max_unit: str = "year"


class UnitFormatOptions(BaseModel):
    """Generic unit formatter options."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    unit: str
    style: str
