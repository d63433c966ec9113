from pathlib import Path

from typer.testing import CliRunner

from countryflags.commands import cli

runner = CliRunner()


def test_flag_command() -> None:
    result = runner.invoke(cli, ["flag", "us", "--width", "80"])
    assert result.exit_code == 0
    assert result.stdout == "🇺🇸\thttps://flagcdn.com/w80/us.png\n"


def test_flag_command_invalid_code() -> None:
    result = runner.invoke(cli, ["flag", "USA"])
    assert result.exit_code == 1


def test_list_command_tsv() -> None:
    result = runner.invoke(cli, ["list", "--tsv"])
    assert result.exit_code == 0
    lines = result.stdout.splitlines()
    assert lines[0] == "name\tcode\tflag\tflag_url"
    assert lines[1] == "Afghanistan\tAF\t🇦🇫\thttps://flagcdn.com/w40/af.png"
    assert len(lines) == 250


def test_select_command() -> None:
    result = runner.invoke(
        cli, ["select", "--target", "react", "--selected", "US", "--emoji"]
    )
    assert result.exit_code == 0
    assert 'defaultValue="US"' in result.stdout
    assert '<option key="US" value="US">🇺🇸 United States</option>' in result.stdout


def test_select_command_output(tmp_path: Path) -> None:
    output = tmp_path.joinpath("select.html")
    result = runner.invoke(cli, ["select", "--output", str(output)])
    assert result.exit_code == 0
    html = output.read_text(encoding="utf-8")
    assert html.startswith('<select id="country-select" name="country" class="">')


def test_component_command(tmp_path: Path) -> None:
    result = runner.invoke(
        cli, ["component", "--framework", "angular", "--output-dir", str(tmp_path)]
    )
    assert result.exit_code == 0
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "country-select.component.ts",
        "country-select.module.ts",
        "usage.html",
    ]


def test_page_command(tmp_path: Path) -> None:
    output = tmp_path.joinpath("page.html")
    result = runner.invoke(cli, ["page", "--output", str(output), "--selected", "FR"])
    assert result.exit_code == 0
    assert "selected: true" in output.read_text(encoding="utf-8")


def test_validate_command() -> None:
    result = runner.invoke(cli, ["validate"])
    assert result.exit_code == 0
