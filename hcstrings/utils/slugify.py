"""
Slugify
=======
Derive a lookup key from literal text.

Rules:
    - Transliterate to ASCII with unidecode ("Canción" → "Cancion").
    - Lowercase, then literal spaces → underscores.
    - Drop everything that is not an ASCII letter, digit or underscore.
    - Truncate to SLUG_MAX_LENGTH characters.
    - Total and deterministic: never raises, same input → same key.
"""
from unidecode import unidecode

from hcstrings.core.constants import SLUG_MAX_LENGTH


def _is_slug_char(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalnum())


def slugify(text: str) -> str:
    """
    Convert literal text into a translation key.

    Parameters
    ----------
    text : str
        Literal (or pattern) text taken from a finding's evidence.

    Returns
    -------
    str
        At most 64 characters from [a-z0-9_]. May be empty.
    """
    slug = unidecode(text).lower().replace(" ", "_")
    slug = "".join(ch for ch in slug if _is_slug_char(ch))
    return slug[:SLUG_MAX_LENGTH]
