import logging
from collections.abc import Mapping
from functools import cache
from typing import Any

import polars as pl

from countryflags.flags import build_flag_image_url, encode_flag_emoji
from countryflags.models import CountryModel, CountryRecord, EnrichedCountry
from countryflags.options import RenderOptions
from countryflags.render import render_country_select
from countryflags.utils import get_country_table_path


@cache
def load_country_table_pl() -> pl.DataFrame:
    """
    Load the static country table once per process.
    Rows are ordered by English country name.
    """
    path = get_country_table_path()
    table = pl.read_csv(
        path,
        separator="\t",
        schema={"name": pl.String, "code": pl.String},
    )
    logging.info(f"Loaded {len(table):,} countries from {path}")
    return table


@cache
def load_country_records() -> tuple[CountryRecord, ...]:
    return tuple(
        CountryRecord(**row) for row in load_country_table_pl().iter_rows(named=True)
    )


def list_countries() -> tuple[EnrichedCountry, ...]:
    """All countries with their emoji flags, in table order."""
    return tuple(
        EnrichedCountry(
            name=record.name,
            code=record.code,
            flag=encode_flag_emoji(record.code),
        )
        for record in load_country_records()
    )


def get_countries_pl(flag_width: int = 40) -> pl.DataFrame:
    """Country table with emoji flag and flag image URL columns."""
    return load_country_table_pl().with_columns(
        flag=pl.col("code").map_elements(encode_flag_emoji, return_dtype=pl.String),
        flag_url=pl.col("code").map_elements(
            lambda code: build_flag_image_url(code, flag_width),
            return_dtype=pl.String,
        ),
    )


def find_country(code: Any) -> EnrichedCountry | None:
    """Case-insensitive lookup of a country by its alpha-2 code."""
    if not isinstance(code, str):
        return None
    code = code.upper()
    for country in list_countries():
        if country.code == code:
            return country
    return None


def validate_country_table(table: pl.DataFrame | None = None) -> None:
    """
    Check the country table against CountryModel,
    including uniqueness of codes.
    Raises patito.exceptions.DataFrameValidationError on failure.
    """
    if table is None:
        table = load_country_table_pl()
    CountryModel.validate(table)


def get_country_select(
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """HTML select of every country in the table."""
    return render_country_select(list_countries(), options, **overrides)
