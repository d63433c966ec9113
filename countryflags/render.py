import html
import json
import re
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from string import Template
from typing import Any

from countryflags.exceptions import InvalidInput
from countryflags.flags import build_flag_image_url, encode_flag_emoji
from countryflags.models import CountryRecord, EnrichedCountry
from countryflags.options import RenderOptions, resolve_render_options


def _escape_html_text(value: str) -> str:
    return html.escape(value, quote=False)


def _escape_html_attribute(value: str) -> str:
    return html.escape(value, quote=True)


def _quote_js(value: str) -> str:
    # keep "</script>" from terminating an inline script
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


@dataclass(frozen=True)
class TargetSyntax:
    """
    How one target ecosystem spells a country select.
    Templates use string.Template placeholders.

    document: $attributes, $options, $change, $use_image_flags
        and the escaped RenderOptions fields in DOCUMENT_FIELDS.
    option: $code, $name, $flag (the rendered flag fragment), $selected.
    image_flag: $url, $code, $width.
    emoji_flag: $flag (the emoji itself).
    change: $on_change, emitted into $change only when a handler is set.
    """

    document: str
    option: str
    image_flag: str
    emoji_flag: str
    separator: str = "\n  "
    selected: str = " selected"
    unselected: str = ""
    class_attribute: str = "class"
    keep_empty_attributes: bool = True
    selection_attribute: str | None = None
    change_attribute: str | None = None
    expression_pattern: str | None = None
    change: str = ""
    escape_text: Callable[[str], str] = _escape_html_text
    escape_attribute: Callable[[str], str] = _escape_html_attribute


DOCUMENT_FIELDS = (
    "id",
    "name",
    "class_name",
    "selected_code",
    "ng_model",
    "container_id",
)
"""RenderOptions fields available to document templates, escaped as attribute values."""

HTML_SYNTAX = TargetSyntax(
    document='<select $attributes>\n  $options\n</select>',
    option='<option value="$code"$selected>$flag$name</option>',
    image_flag='<img src="$url" alt="$code" '
    'style="vertical-align: middle; margin-right: 5px; width: ${width}px;">',
    emoji_flag="$flag ",
)

REACT_SYNTAX = TargetSyntax(
    document="""\
// Don't forget to import getFlagImageUrl if using image flags
import { getFlagImageUrl } from 'country-flags-util';

<select $attributes style={{ padding: '8px' }}>
$options
</select>""",
    option='  <option key="$code" value="$code">$flag$name</option>',
    image_flag='<img src={getFlagImageUrl("$code", $width)} alt="$code" '
    "style={{ marginRight: '5px', width: '${width}px', verticalAlign: 'middle' }} />",
    emoji_flag="$flag ",
    separator="\n",
    selected="",
    class_attribute="className",
    keep_empty_attributes=False,
    selection_attribute="defaultValue",
    change_attribute="onChange",
    expression_pattern=r"on[A-Z]",
)

ANGULAR_SYNTAX = TargetSyntax(
    document='<select [(ngModel)]="$ng_model" $attributes>\n$options\n</select>',
    option="""  <option [value]="'$code'"$selected>$flag$name</option>""",
    image_flag="""<img [src]="'$url'" [alt]="'$code'" """
    'style="margin-right: 5px; width: ${width}px; vertical-align: middle;" /> ',
    emoji_flag="$flag ",
    separator="\n",
    keep_empty_attributes=False,
)

VANILLA_SYNTAX = TargetSyntax(
    document="""\
document.addEventListener('DOMContentLoaded', function() {
  const container = document.getElementById($container_id);

  const countrySelect = document.createElement('select');
  countrySelect.id = $id;
  countrySelect.name = $name;
  countrySelect.className = $class_name;

  const useImageFlags = $use_image_flags;
  const countries = [
    $options
  ];

  countries.forEach(function(country) {
    const option = document.createElement('option');
    option.value = country.code;
    if (useImageFlags) {
      const flagImg = document.createElement('img');
      flagImg.src = country.image;
      flagImg.alt = country.code;
      flagImg.style.width = country.width + 'px';
      flagImg.style.marginRight = '5px';
      flagImg.style.verticalAlign = 'middle';
      option.appendChild(flagImg);
      option.appendChild(document.createTextNode(country.name));
    } else {
      option.textContent = country.flag + ' ' + country.name;
    }
    if (country.selected) option.selected = true;
    countrySelect.appendChild(option);
  });

  container.appendChild(countrySelect);$change
});""",
    option="{ code: $code, name: $name, ${flag}selected: $selected }",
    image_flag="image: $url, width: $width, ",
    emoji_flag="flag: $flag, ",
    separator=",\n    ",
    selected="true",
    unselected="false",
    change="\n  countrySelect.addEventListener('change', $on_change);",
    escape_text=_quote_js,
    escape_attribute=_quote_js,
)


class Target(StrEnum):
    html = "html"
    react = "react"
    angular = "angular"
    vanilla = "vanilla"

    @property
    def syntax(self) -> TargetSyntax:
        return _TARGET_SYNTAXES[self]


_TARGET_SYNTAXES = {
    Target.html: HTML_SYNTAX,
    Target.react: REACT_SYNTAX,
    Target.angular: ANGULAR_SYNTAX,
    Target.vanilla: VANILLA_SYNTAX,
}


def _coerce_country(item: Any, index: int) -> EnrichedCountry:
    if isinstance(item, EnrichedCountry):
        return item
    if isinstance(item, CountryRecord):
        return EnrichedCountry(
            name=item.name, code=item.code, flag=encode_flag_emoji(item.code)
        )
    if not isinstance(item, Mapping):
        raise InvalidInput(
            f"countries[{index}] must be a country or a mapping, not {type(item).__name__}"
        )
    code, name = item.get("code"), item.get("name")
    if not isinstance(code, str) or not isinstance(name, str):
        raise InvalidInput(f"countries[{index}] requires string 'code' and 'name' keys")
    flag = item.get("flag")
    if not isinstance(flag, str):
        flag = encode_flag_emoji(code)
    return EnrichedCountry(name=name, code=code, flag=flag)


def coerce_countries(countries: Any) -> list[EnrichedCountry]:
    """
    Validate the countries argument of a renderer.
    Order is preserved and nothing is sorted or deduplicated.
    """
    if isinstance(countries, str | bytes) or not isinstance(countries, Sequence):
        raise InvalidInput(
            f"countries must be a sequence of countries, not {type(countries).__name__}"
        )
    return [_coerce_country(item, index) for index, item in enumerate(countries)]


def _render_attributes(syntax: TargetSyntax, options: RenderOptions) -> str:
    attributes = {
        "id": options.id,
        "name": options.name,
        syntax.class_attribute: options.class_name,
    }
    if syntax.selection_attribute:
        attributes[syntax.selection_attribute] = options.selected_code
    if syntax.change_attribute:
        attributes[syntax.change_attribute] = options.on_change
    attributes.update(options.attributes)
    rendered = []
    for key, value in attributes.items():
        if value == "" and not syntax.keep_empty_attributes:
            continue
        if syntax.expression_pattern and re.match(syntax.expression_pattern, key):
            rendered.append(f"{key}={{{value}}}")
        else:
            rendered.append(f'{key}="{syntax.escape_attribute(value)}"')
    return " ".join(rendered)


def _render_option(
    syntax: TargetSyntax, country: EnrichedCountry, options: RenderOptions
) -> str:
    if options.use_image_flags:
        flag = Template(syntax.image_flag).substitute(
            url=syntax.escape_attribute(
                build_flag_image_url(country.code, options.flag_width)
            ),
            code=syntax.escape_attribute(country.code),
            width=options.flag_width,
        )
    else:
        flag = Template(syntax.emoji_flag).substitute(
            flag=syntax.escape_text(country.flag)
        )
    selected = country.code == options.selected_code
    return Template(syntax.option).substitute(
        code=syntax.escape_attribute(country.code),
        name=syntax.escape_text(country.name),
        flag=flag,
        selected=syntax.selected if selected else syntax.unselected,
    )


def render_select(
    target: Target | str,
    countries: Sequence[EnrichedCountry | Mapping[str, Any]],
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """
    Render a country select for any target ecosystem.
    Every target shares option validation, ordering, the case-sensitive
    selection rule, and the choice between image and emoji flags.
    """
    try:
        syntax = Target(target).syntax
    except ValueError as exc:
        raise InvalidInput(f"Unknown render target {target!r}") from exc
    countries = coerce_countries(countries)
    options = resolve_render_options(options, **overrides)
    change = ""
    if syntax.change and options.on_change:
        change = Template(syntax.change).substitute(on_change=options.on_change)
    return Template(syntax.document).substitute(
        attributes=_render_attributes(syntax, options),
        options=syntax.separator.join(
            _render_option(syntax, country, options) for country in countries
        ),
        change=change,
        use_image_flags="true" if options.use_image_flags else "false",
        **{
            field: syntax.escape_attribute(getattr(options, field))
            for field in DOCUMENT_FIELDS
        },
    )


def render_country_select(
    countries: Sequence[EnrichedCountry | Mapping[str, Any]],
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """
    HTML <select> fragment with one <option> per country, in input order.
    Raises InvalidInput when countries is not a sequence.
    """
    return render_select(Target.html, countries, options, **overrides)


def render_react_select(
    countries: Sequence[EnrichedCountry | Mapping[str, Any]],
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """JSX for a country select. Selection is expressed through defaultValue."""
    return render_select(Target.react, countries, options, **overrides)


def render_angular_select(
    countries: Sequence[EnrichedCountry | Mapping[str, Any]],
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    return render_select(Target.angular, countries, options, **overrides)


def render_vanilla_script(
    countries: Sequence[EnrichedCountry | Mapping[str, Any]],
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> str:
    """
    Browser script that builds the select from an embedded country array
    and appends it to the container element.
    """
    return render_select(Target.vanilla, countries, options, **overrides)
