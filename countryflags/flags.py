from typing import Any

REGIONAL_INDICATOR_OFFSET = 0x1F1E6 - ord("A")
"""Distance from an upper-case ASCII letter to its Regional Indicator Symbol (127397)."""

FLAG_CDN_URL = "https://flagcdn.com"

_REGIONAL_INDICATOR_A = 0x1F1E6
_REGIONAL_INDICATOR_Z = 0x1F1FF


def _is_code(code: Any) -> bool:
    return isinstance(code, str) and len(code) == 2


def encode_flag_emoji(code: Any) -> str:
    """
    Convert a two-letter ISO 3166-1 alpha-2 code to an emoji flag.
    Case-insensitive. Returns an empty string rather than raising
    when code is not a two-character string.
    Non-alphabetic characters go through the same arithmetic and yield
    code points without a defined flag glyph.
    """
    if not _is_code(code):
        return ""
    try:
        return "".join(
            chr(ord(char) + REGIONAL_INDICATOR_OFFSET) for char in code.upper()
        )
    except ValueError:
        # shifted beyond the last Unicode code point
        return ""


def decode_flag_emoji(flag: Any) -> str:
    """Convert an emoji flag back to its upper-case two-letter code."""
    if not _is_code(flag):
        return ""
    if not all(
        _REGIONAL_INDICATOR_A <= ord(char) <= _REGIONAL_INDICATOR_Z for char in flag
    ):
        return ""
    return "".join(chr(ord(char) - REGIONAL_INDICATOR_OFFSET) for char in flag)


def build_flag_image_url(code: Any, width: Any = 40) -> str:
    """
    URL of the flagcdn.com PNG for a country code.
    width is interpolated as given, without validation or rounding.
    """
    if not _is_code(code):
        return ""
    return f"{FLAG_CDN_URL}/w{width}/{code.lower()}.png"
