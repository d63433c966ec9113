from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from string import Template
from typing import Any

import htmltools

from countryflags.exceptions import InvalidInput
from countryflags.models import EnrichedCountry
from countryflags.options import RenderOptions, resolve_render_options
from countryflags.render import render_vanilla_script
from countryflags.utils import get_templates_directory

_PAGE_STYLE = """
select option {
  display: flex;
  align-items: center;
  padding: 3px;
}
"""


class Framework(StrEnum):
    react = "react"
    angular = "angular"


@dataclass
class AngularComponent:
    component: str
    module: str
    usage: str


@dataclass
class VanillaPage:
    html: str
    js: str


def _read_template(filename: str, **values: Any) -> str:
    """Read a template from the templates directory and substitute values."""
    text = get_templates_directory().joinpath(filename).read_text(encoding="utf-8")
    return Template(text).substitute(**values)


def _js_bool(value: bool) -> str:
    return "true" if value else "false"


def react_component(component_name: str = "CountrySelect") -> str:
    """
    Source of a standalone React dropdown component listing every country,
    exported as the default export named component_name.
    """
    if not component_name.isidentifier():
        raise InvalidInput(f"{component_name!r} is not a valid component name")
    return _read_template("react_component.jsx", component_name=component_name)


def angular_component(use_image_flags: bool = True) -> AngularComponent:
    """
    Angular component, module and usage snippet for a country select.
    The component template only includes the image branch when use_image_flags is set.
    """
    template_filename = (
        "angular_template_image.html"
        if use_image_flags
        else "angular_template_emoji.html"
    )
    template = _read_template(template_filename).rstrip("\n")
    return AngularComponent(
        component=_read_template(
            "angular_component.ts",
            template=template,
            use_image_flags=_js_bool(use_image_flags),
        ),
        module=_read_template("angular_module.ts"),
        usage=_read_template(
            "angular_usage.html", use_image_flags=_js_bool(use_image_flags)
        ),
    )


def vanilla_page(
    countries: Sequence[EnrichedCountry | Mapping[str, Any]],
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> VanillaPage:
    """
    Standalone HTML page whose inline script builds the country select
    inside the container element.
    """
    options = resolve_render_options(options, **overrides)
    js = render_vanilla_script(countries, options)
    page = htmltools.tags.html(
        htmltools.tags.head(
            htmltools.tags.meta(charset="UTF-8"),
            htmltools.tags.meta(
                name="viewport", content="width=device-width, initial-scale=1.0"
            ),
            htmltools.tags.title("Country Select Example"),
            htmltools.tags.style(htmltools.HTML(_PAGE_STYLE)),
        ),
        htmltools.tags.body(
            htmltools.div(id=options.container_id),
            htmltools.tags.script(htmltools.HTML(js)),
        ),
        lang="en",
    )
    return VanillaPage(html=f"<!DOCTYPE html>\n{page}", js=js)
