"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- A CSV row is an untyped mapping of strings; decoding it into a fixed shape
  with explicit validation is exactly what `model_validate` gives us.
- Field aliases keep the on-disk column names (`City`, `Population`, ...)
  out of the Python attribute names.

Note:
- These models describe *what* a record is, not *how* it is read.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict

UNKNOWN_POPULATION_LABEL = "Unknown Population"
# Populations are unsigned 64-bit counts.
MAX_POPULATION = 2**64 - 1


class PopulationRecord(BaseModel):
    """One decoded row of the population table.

    `population` is `None` when the cell is empty (unknown population).
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    city: str = Field(
        ...,
        alias="City",
        description="City name; exact-match key for searches.",
    )
    country: str = Field(
        ...,
        alias="Country",
        description="Country the city belongs to.",
    )
    region: str = Field(
        ...,
        alias="Region",
        description="Region (state, province, ...) within the country.",
    )
    population: int | None = Field(
        default=None,
        alias="Population",
        ge=0,
        le=MAX_POPULATION,
        description="Population count, or None when unknown (empty cell or no column).",
    )

    @field_validator("population", mode="before")
    @classmethod
    def _parse_population(cls, value: Any) -> Any:
        if value is None or isinstance(value, int):
            return value
        if not isinstance(value, str):
            raise ValueError("population must be text or an integer")
        if value == "":
            return None
        digits = value[1:] if value.startswith("+") else value
        if not digits or not (digits.isascii() and digits.isdigit()):
            raise ValueError(f"invalid digit found in {value!r}")
        return int(digits)

    def population_label(self) -> str:
        """Population as displayed to users."""

        if self.population is None:
            return UNKNOWN_POPULATION_LABEL
        return str(self.population)


class MatchRequest(BaseModel):
    """Parameters of a single search.

    `data_path=None` means the table is read from standard input.
    """

    data_path: Path | None = Field(
        default=None,
        description="CSV file to read; None reads standard input.",
    )
    city: str = Field(
        ...,
        description="City name to look for (exact, case-sensitive).",
    )
    include_unknown_population: bool = Field(
        default=False,
        description="Also report matching rows whose population is unknown.",
    )
