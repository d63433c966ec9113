from pathlib import Path


def get_package_directory() -> Path:
    return Path(__file__).parent


def get_data_directory() -> Path:
    """Directory holding the versioned country table."""
    return get_package_directory().joinpath("data")


def get_templates_directory() -> Path:
    """Directory holding component source templates."""
    return get_package_directory().joinpath("templates")


def get_country_table_path() -> Path:
    return get_data_directory().joinpath("countries.tsv")
