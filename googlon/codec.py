"""
Googlon Parser - Numeral Codec

In Googlon, words also represent numbers, where each letter is a digit
valued by its rank in the alphabet. Digits run from the least significant
to the most significant, the opposite of our system:

- the leftmost letter is the unit,
- the second letter is worth ``base`` (20),
- the third one is worth ``base ** 2`` (400),
- and so on.

So "xs" is 1 and "sx" is 20.
"""
from __future__ import annotations
from typing import Optional

from .errors import NumeralOverflowError
from .types import GooglonConfig, CANONICAL_CONFIG


def decode_numeral(
    word: str,
    config: Optional[GooglonConfig] = None,
    base: Optional[int] = None,
) -> int:
    """
    Read a word as a number, first letter least significant.

    Args:
        word: Googlon word
        config: Alphabet and numeral width (canonical if omitted)
        base: Place-value base (defaults to config.numeral_base)

    Returns:
        Non-negative integer value. The empty word is 0.

    Raises:
        UnknownSymbolError: word contains a letter outside the alphabet
        NumeralOverflowError: value exceeds config.max_numeral
    """
    config = config or CANONICAL_CONFIG
    base = config.numeral_base if base is None else base
    if base < 2:
        raise ValueError(f"Invalid base: {base} (must be >= 2)")

    value = 0
    weight = 1
    for rank in config.alphabet.ranks_of(word):
        value += rank * weight
        weight *= base

    limit = config.max_numeral
    if limit is not None and value > limit:
        raise NumeralOverflowError(word, value, limit)
    return value


def encode_numeral(
    value: int,
    config: Optional[GooglonConfig] = None,
    base: Optional[int] = None,
) -> str:
    """
    Write a number as the shortest Googlon word that decodes to it.

    Zero is the rank-0 letter. Longer words with trailing rank-0 letters
    decode to the same value.
    """
    config = config or CANONICAL_CONFIG
    base = config.numeral_base if base is None else base
    alphabet = config.alphabet
    if value < 0:
        raise ValueError(f"Invalid value: {value} (must be >= 0)")
    if not 2 <= base <= alphabet.size:
        raise ValueError(f"Invalid base: {base} (must be 2-{alphabet.size} for this alphabet)")

    letters = []
    while True:
        value, digit = divmod(value, base)
        letters.append(alphabet.symbol(digit))
        if value == 0:
            break
    return "".join(letters)
