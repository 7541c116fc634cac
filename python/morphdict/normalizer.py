"""Accent normalization for morphdict.

Strips combining marks from word forms so that unaccented spellings
("cancion") resolve to the same lemma as the accented ones ("canción").
Case and unmarked characters are preserved.
"""

import unicodedata
from typing import Optional


def is_mark(char: str) -> bool:
    """Check if a character is a nonspacing mark (category Mn)."""
    return unicodedata.category(char) == "Mn"


def remove_accents(text: str) -> str:
    """Remove accents from a string.

    Decomposes to NFD, drops every nonspacing mark and recomposes to NFC.

    Args:
        text: Word form, possibly accented.

    Returns:
        The same text without combining marks (ñ→n, ü→u, É→E).
    """
    decomposed = unicodedata.normalize("NFD", text)
    stripped = "".join(c for c in decomposed if not is_mark(c))
    return unicodedata.normalize("NFC", stripped)


def has_accents(text: str) -> bool:
    """Check if stripping accents would change the text."""
    return remove_accents(text) != text


def accent_variant(text: str) -> Optional[str]:
    """Return the unaccented variant of text, or None if it has no accents.

    Args:
        text: Word form.

    Returns:
        Stripped form, or None when it equals the input.
    """
    stripped = remove_accents(text)
    if stripped != text:
        return stripped
    return None
