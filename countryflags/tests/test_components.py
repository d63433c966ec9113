import pytest

from countryflags.components import angular_component, react_component, vanilla_page
from countryflags.exceptions import InvalidInput
from countryflags.render import render_vanilla_script


def test_react_component() -> None:
    source = react_component("CountryPicker")
    assert "const CountryPicker = ({" in source
    assert source.rstrip().endswith("export default CountryPicker;")
    assert "$" not in source


def test_react_component_invalid_name() -> None:
    with pytest.raises(InvalidInput):
        react_component("country-picker")


@pytest.mark.parametrize("use_image_flags", [True, False])
def test_angular_component(use_image_flags: bool) -> None:
    angular = angular_component(use_image_flags=use_image_flags)
    js_bool = "true" if use_image_flags else "false"
    assert f"@Input() useImageFlags = {js_bool};" in angular.component
    assert '(ngModelChange)="onCountryChange($event)"' in angular.component
    assert ("getFlagImageUrl(country.code)" in angular.component) is use_image_flags
    assert "export class CountrySelectModule" in angular.module
    assert f'[useImageFlags]="{js_bool}"' in angular.usage
    assert '(countryChange)="onCountrySelected($event)"' in angular.usage


def test_vanilla_page() -> None:
    countries = [{"code": "AF", "name": "Afghanistan", "flag": "🇦🇫"}]
    page = vanilla_page(countries, {"containerId": "countries", "selectedCode": "AF"})
    assert page.js == render_vanilla_script(
        countries, container_id="countries", selected_code="AF"
    )
    assert page.html.startswith("<!DOCTYPE html>\n<html")
    assert '<div id="countries"></div>' in page.html
    assert "<title>Country Select Example</title>" in page.html
    assert "countries.forEach(function(country) {" in page.html
    assert "selected: true" in page.html


def test_vanilla_page_invalid_countries() -> None:
    with pytest.raises(InvalidInput):
        vanilla_page(None)
