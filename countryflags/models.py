from dataclasses import dataclass

import polars as pl
from patito import Field, Model


@dataclass(frozen=True)
class CountryRecord:
    name: str
    code: str


@dataclass(frozen=True)
class EnrichedCountry(CountryRecord):
    """Country record with its emoji flag derived from the code."""

    flag: str


class CountryModel(Model):  # type: ignore [misc]
    name: str = Field(
        description="English display name of the country.",
        examples=["Åland Islands", "United States"],
        constraints=pl.col("name").str.len_chars() > 0,
    )
    code: str = Field(
        unique=True,
        description="ISO 3166-1 alpha-2 two-letter country code in upper case.",
        examples=["AX", "US"],
        constraints=pl.col("code").str.contains(r"^[A-Z]{2}$"),
    )
