import logging
from pathlib import Path
from typing import Annotated

import polars as pl
import typer
from patito.exceptions import DataFrameValidationError

from countryflags.components import (
    Framework,
    angular_component,
    react_component,
    vanilla_page,
)
from countryflags.countries import (
    get_countries_pl,
    list_countries,
    validate_country_table,
)
from countryflags.flags import build_flag_image_url, encode_flag_emoji
from countryflags.render import Target, render_select

cli = typer.Typer(pretty_exceptions_show_locals=False)


def _write_text(path: Path, text: str) -> None:
    logging.info(f"Writing {path}")
    path.write_text(text, encoding="utf-8")


class Commands:
    @staticmethod
    @cli.command(name="list")  # type: ignore [misc]
    def list_table(
        flag_width: Annotated[int, typer.Option("--flag-width")] = 40,
        tsv: Annotated[bool, typer.Option("--tsv")] = False,
    ) -> None:
        """Print the country table with emoji flags and image URLs."""
        countries = get_countries_pl(flag_width=flag_width)
        if tsv:
            typer.echo(countries.write_csv(separator="\t"), nl=False)
            return
        with pl.Config(tbl_rows=-1, fmt_str_lengths=80):
            typer.echo(countries)

    @staticmethod
    @cli.command(name="flag")  # type: ignore [misc]
    def flag(
        code: str,
        width: Annotated[int, typer.Option("--width")] = 40,
    ) -> None:
        """Print the emoji flag and flag image URL for a country code."""
        emoji = encode_flag_emoji(code)
        if not emoji:
            logging.error(f"{code!r} is not a two-letter country code.")
            raise typer.Exit(code=1)
        typer.echo(f"{emoji}\t{build_flag_image_url(code, width)}")

    @staticmethod
    @cli.command(name="select")  # type: ignore [misc]
    def select(
        target: Annotated[Target, typer.Option("--target")] = Target.html,
        id_: Annotated[str, typer.Option("--id")] = "country-select",
        name: Annotated[str, typer.Option("--name")] = "country",
        class_name: Annotated[str, typer.Option("--class-name")] = "",
        selected: Annotated[str, typer.Option("--selected")] = "",
        emoji: Annotated[bool, typer.Option("--emoji")] = False,
        flag_width: Annotated[int, typer.Option("--flag-width")] = 40,
        on_change: Annotated[str, typer.Option("--on-change")] = "",
        output: Annotated[Path | None, typer.Option("--output")] = None,
    ) -> None:
        """Render a country select as HTML, JSX, Angular markup or vanilla JavaScript."""
        text = render_select(
            target,
            list_countries(),
            id=id_,
            name=name,
            class_name=class_name,
            selected_code=selected,
            use_image_flags=not emoji,
            flag_width=flag_width,
            on_change=on_change,
        )
        if output is None:
            typer.echo(text)
        else:
            _write_text(output, text)

    @staticmethod
    @cli.command(name="component")  # type: ignore [misc]
    def component(
        framework: Annotated[Framework, typer.Option("--framework")] = Framework.react,
        component_name: Annotated[str, typer.Option("--name")] = "CountrySelect",
        emoji: Annotated[bool, typer.Option("--emoji")] = False,
        output_dir: Annotated[Path, typer.Option("--output-dir")] = Path("."),
    ) -> None:
        """Write the source files of a standalone country select component."""
        output_dir.mkdir(parents=True, exist_ok=True)
        if framework == Framework.react:
            _write_text(
                output_dir.joinpath(f"{component_name}.jsx"),
                react_component(component_name),
            )
            return
        angular = angular_component(use_image_flags=not emoji)
        for filename, text in [
            ("country-select.component.ts", angular.component),
            ("country-select.module.ts", angular.module),
            ("usage.html", angular.usage),
        ]:
            _write_text(output_dir.joinpath(filename), text)

    @staticmethod
    @cli.command(name="page")  # type: ignore [misc]
    def page(
        output: Annotated[Path, typer.Option("--output")] = Path("country-select.html"),
        selected: Annotated[str, typer.Option("--selected")] = "",
        emoji: Annotated[bool, typer.Option("--emoji")] = False,
        flag_width: Annotated[int, typer.Option("--flag-width")] = 40,
    ) -> None:
        """Write a standalone HTML page demonstrating the vanilla JavaScript select."""
        page = vanilla_page(
            list_countries(),
            selected_code=selected,
            use_image_flags=not emoji,
            flag_width=flag_width,
        )
        _write_text(output, page.html)

    @staticmethod
    @cli.command(name="validate")  # type: ignore [misc]
    def validate() -> None:
        """Validate the country table."""
        try:
            validate_country_table()
        except DataFrameValidationError as exc:
            logging.error(f"CountryModel.validate failed with {exc}")
            raise typer.Exit(code=1) from exc
        logging.info("CountryModel.validate success.")

    @staticmethod
    def command() -> None:
        """
        Run like `poetry run countryflags`
        """
        logging.basicConfig()
        logging.getLogger().setLevel(logging.INFO)
        cli()
