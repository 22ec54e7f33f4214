"""Locale-aware string ordering.

Approximates root-locale collation without external data. Strings are first
compared ignoring accents and case, with whitespace ordered before
punctuation and symbols, those before digits, and digits before letters.
Ties are broken by accents, then with lowercase ordered before uppercase, and
finally by code point so that distinct strings never compare equal.
"""

from __future__ import annotations

import unicodedata
from functools import lru_cache

# Root collation order of ASCII punctuation, symbols and currency signs.
_SYMBOL_ORDER = "_-,;:!?.'\"()[]{}@*/\\&#%`^+<=>|~$"
_SYMBOL_RANK = {ch: rank for rank, ch in enumerate(_SYMBOL_ORDER)}

_SPACE, _SYMBOL, _DIGIT, _LETTER = range(4)

PrimaryWeight = tuple[int, int, str]


def _primary_weight(ch: str) -> PrimaryWeight:
    if ch.isspace():
        return _SPACE, 0, ch
    if ch.isdigit():
        return _DIGIT, 0, ch
    if ch.isalpha():
        return _LETTER, 0, ch
    return _SYMBOL, _SYMBOL_RANK.get(ch, len(_SYMBOL_RANK)), ch


@lru_cache(maxsize=4096)
def collation_key(text: str) -> tuple[tuple[PrimaryWeight, ...], str, tuple[bool, ...], str]:
    """Return a sort key implementing the collation levels.

    Args:
        text: String to order.

    Returns:
        Tuple usable as a ``sorted`` key.
    """
    decomposed = unicodedata.normalize("NFD", text)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch)).casefold()
    primary = tuple(_primary_weight(ch) for ch in base)
    accents = decomposed.casefold()
    case = tuple(ch.isupper() for ch in decomposed)
    return primary, accents, case, text


def compare_text(left: str, right: str) -> int:
    """Compare two strings under the collation.

    Returns:
        -1, 0 or 1.
    """
    left_key = collation_key(left)
    right_key = collation_key(right)
    return (left_key > right_key) - (left_key < right_key)
