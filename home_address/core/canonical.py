from __future__ import annotations

import re
import unicodedata
from typing import Final


# Anything that is not A-Z, 0-9 or space is dropped from lookup keys.
_KEY_DISALLOWED: Final[re.Pattern[str]] = re.compile(r"[^A-Z0-9 ]+")

# Collapse multiple spaces.
_MULTI_SPACE: Final[re.Pattern[str]] = re.compile(r"\s+")


def _strip_diacritics(text: str) -> str:
    """
    Remove diacritics from unicode text.
    Example: 'Côte d'Ivoire' -> 'Cote d'Ivoire'
    """
    normalized = unicodedata.normalize("NFKD", text)
    return "".join(ch for ch in normalized if not unicodedata.combining(ch))


def clean_text(value: object) -> str:
    """
    Trimmed string form of a form value. None becomes "".
    """
    if value is None:
        return ""
    return str(value).strip()


def is_present(value: object) -> bool:
    """
    A field is present when it is non-empty after trimming whitespace.
    This is the only definition of "required fulfilled".
    """
    return clean_text(value) != ""


def matches_pattern(value: object, pattern: re.Pattern[str]) -> bool:
    """
    True when the trimmed value fully matches the pattern.
    """
    return pattern.fullmatch(clean_text(value)) is not None


def to_ascii_upper(text: object) -> str:
    """
    Convert input to ASCII-only uppercase.
    - Strips leading/trailing whitespace
    - Removes diacritics (NFKD)
    """
    s = clean_text(text)
    if not s:
        return ""
    return _strip_diacritics(s).upper()


def country_code_key(value: object) -> str:
    """Normalized form of a country code: trimmed and uppercased."""
    return clean_text(value).upper()


def lookup_key(text: object) -> str:
    """
    Loose key for matching display names (countries, states).

    Rules:
    - ASCII-only uppercase
    - Punctuation removed
    - Whitespace collapsed
    Example: "  Côte d'Ivoire " -> "COTE DIVOIRE"
    """
    s = to_ascii_upper(text)
    if not s:
        return ""

    s = _KEY_DISALLOWED.sub("", s)
    s = _MULTI_SPACE.sub(" ", s)
    return s.strip()
