import polars as pl
import pytest
from patito.exceptions import DataFrameValidationError
from polars.testing import assert_frame_equal

from countryflags.countries import (
    find_country,
    get_countries_pl,
    get_country_select,
    list_countries,
    load_country_table_pl,
    validate_country_table,
)
from countryflags.models import EnrichedCountry
from countryflags.render import render_country_select


def test_list_countries() -> None:
    countries = list_countries()
    assert isinstance(countries, tuple)
    assert len(countries) == 249
    assert countries[0] == EnrichedCountry(name="Afghanistan", code="AF", flag="🇦🇫")
    assert countries[1] == EnrichedCountry(name="Åland Islands", code="AX", flag="🇦🇽")
    assert len({country.code for country in countries}) == len(countries)
    assert list_countries() == countries


def test_list_countries_flags() -> None:
    for country in list_countries():
        assert len(country.flag) == 2
        assert country.code.isupper()


def test_namibia_code_is_not_null() -> None:
    namibia = find_country("NA")
    assert namibia is not None
    assert namibia.name == "Namibia"


def test_find_country() -> None:
    assert find_country("us") == find_country("US")
    assert find_country("ZZ") is None
    assert find_country(None) is None


def test_get_countries_pl() -> None:
    countries_pl = get_countries_pl(flag_width=80)
    assert countries_pl.columns == ["name", "code", "flag", "flag_url"]
    expected_df = pl.DataFrame(
        [
            {
                "name": "Afghanistan",
                "code": "AF",
                "flag": "🇦🇫",
                "flag_url": "https://flagcdn.com/w80/af.png",
            },
            {
                "name": "Åland Islands",
                "code": "AX",
                "flag": "🇦🇽",
                "flag_url": "https://flagcdn.com/w80/ax.png",
            },
        ]
    )
    assert_frame_equal(countries_pl.head(2), expected_df)


def test_validate_country_table() -> None:
    validate_country_table()


@pytest.mark.parametrize(
    "rows",
    [
        pytest.param(
            [{"name": "France", "code": "FR"}, {"name": "Francia", "code": "FR"}],
            id="duplicate_code",
        ),
        pytest.param([{"name": "France", "code": "fr"}], id="lower_case_code"),
        pytest.param([{"name": "France", "code": "FRA"}], id="alpha_3_code"),
        pytest.param([{"name": "", "code": "FR"}], id="empty_name"),
    ],
)
def test_validate_country_table_failure(rows: list[dict[str, str]]) -> None:
    with pytest.raises(DataFrameValidationError):
        validate_country_table(pl.DataFrame(rows))


def test_load_country_table_is_cached() -> None:
    assert load_country_table_pl() is load_country_table_pl()


def test_get_country_select() -> None:
    html = get_country_select({"selectedCode": "US", "useImageFlags": False})
    assert html == render_country_select(
        list_countries(), selected_code="US", use_image_flags=False
    )
    assert html.count("<option ") == 249
    assert '<option value="US" selected>🇺🇸 United States</option>' in html
    assert html.count(" selected>") == 1
