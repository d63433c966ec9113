from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel

from countryflags.exceptions import InvalidInput


class RenderOptions(BaseModel):
    """
    Configuration shared by every select renderer.
    Fields accept their Python names or their camelCase aliases,
    such as className or selectedCode. Unknown keys are ignored.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        validate_by_name=True,
        validate_by_alias=True,
        extra="ignore",
    )

    id: str = Field(
        default="country-select",
        description="Identifier of the select element, passed through verbatim.",
    )
    name: str = Field(default="country", description="Form field name.")
    class_name: str = Field(default="", description="CSS class list.")
    selected_code: str = Field(
        default="",
        description="Code of the option to pre-select. "
        "Compared case-sensitively and ignored when no country matches.",
    )
    use_image_flags: bool = Field(
        default=True,
        description="Render flagcdn.com images instead of emoji flags.",
    )
    flag_width: int = Field(
        default=40,
        description="Flag image width in pixels, interpolated without range checks.",
    )
    # options below are only read by the framework targets
    attributes: dict[str, str] = Field(
        default_factory=dict,
        description="Extra attributes appended to the select element.",
    )
    on_change: str = Field(
        default="",
        description="Change handler expression or function name.",
    )
    ng_model: str = Field(
        default="selectedCountry",
        description="Angular two-way binding target.",
    )
    container_id: str = Field(
        default="country-container",
        description="Identifier of the element the vanilla script appends to.",
    )


def resolve_render_options(
    options: RenderOptions | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> RenderOptions:
    """
    Coerce None, a mapping, or a RenderOptions into a RenderOptions,
    applying keyword overrides by Python field name.
    """
    if isinstance(options, RenderOptions) and not overrides:
        return options
    if options is not None and not isinstance(options, RenderOptions | Mapping):
        raise InvalidInput(
            f"options must be a RenderOptions or a mapping, not {type(options).__name__}"
        )
    try:
        base = RenderOptions.model_validate(options or {})
        if not overrides:
            return base
        # overrides use Python names, so merge them over the normalized fields
        return RenderOptions.model_validate({**base.model_dump(), **overrides})
    except ValidationError as exc:
        raise InvalidInput(f"Invalid render options: {exc}") from exc
