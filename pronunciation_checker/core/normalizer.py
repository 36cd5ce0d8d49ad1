"""Text normalization applied to both phrases before they are compared."""

from __future__ import annotations

from typing import Dict

# Only the five lower-case acute vowels are folded; ñ, ü and upper-case
# accented letters pass through untouched.
ACCENTED_VOWELS: Dict[str, str] = {
    "á": "a",
    "é": "e",
    "í": "i",
    "ó": "o",
    "ú": "u",
}

_ACCENT_TABLE = str.maketrans(ACCENTED_VOWELS)


def _is_kept(char: str) -> bool:
    return char.isalpha() or char.isdecimal() or char.isspace()


def normalize(text: str) -> str:
    """Return ``text`` lower-cased, accent-folded and stripped of punctuation.

    Internal runs of whitespace are preserved; only the ends are trimmed.

    >>> normalize("¿Me traés un café con leche, por favor?")
    'me traes un cafe con leche por favor'
    """

    lowered = text.lower().translate(_ACCENT_TABLE)
    return "".join(char for char in lowered if _is_kept(char)).strip()


def split_words(normalized: str) -> list[str]:
    """Split a normalized phrase on single spaces.

    Consecutive spaces produce empty words, and an empty phrase yields a single
    empty word, so positional pairing sees the same slots the text has.
    """

    return normalized.split(" ")


__all__ = ["ACCENTED_VOWELS", "normalize", "split_words"]
