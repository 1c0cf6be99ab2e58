"""Text normalization applied to free-text fields before encoding.

Kept apart from the encoder: ``encode_field`` never truncates, so any
shortening of names happens here, explicitly.
"""

from __future__ import annotations

import re
import unicodedata

_NON_PRINTABLE = re.compile(r"[^\x20-\x7e]")
_WHITESPACE = re.compile(r"\s+")
_SPACES = re.compile(r" {2,}")


def strip_accents(text: str) -> str:
    """Remove accents: 'São Paulo' -> 'Sao Paulo'."""
    nfkd = unicodedata.normalize("NFKD", text)
    return "".join(c for c in nfkd if not unicodedata.combining(c))


def to_printable_ascii(text: str) -> str:
    text = _WHITESPACE.sub(" ", strip_accents(text))
    text = _NON_PRINTABLE.sub("", text)
    return _SPACES.sub(" ", text).strip()


def normalize_text(text: str, max_length: int | None = None) -> str:
    """Restrict ``text`` to printable ASCII and cut it to ``max_length``."""
    text = to_printable_ascii(text)
    if max_length is not None:
        text = text[:max_length].rstrip()
    return text
