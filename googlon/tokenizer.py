"""
Googlon Parser - Tokenizer

Texts are split on a single delimiter character, literally: no trimming,
and consecutive delimiters produce empty words.
"""
from __future__ import annotations
from typing import Iterable, List, Optional

from .constants import TOKEN_DELIMITER


def tokenize(text: str, delimiter: Optional[str] = None) -> List[str]:
    """
    Split text into words.

    Args:
        text: Googlon text
        delimiter: Word separator (a single space by default)

    Returns:
        List of words; "" yields [""]
    """
    delimiter = TOKEN_DELIMITER if delimiter is None else delimiter
    if not delimiter:
        raise ValueError("Empty delimiter")
    return text.split(delimiter)


def unique_words(words: Iterable[str]) -> List[str]:
    """Drop repeated words, keeping the first occurrence of each."""
    return list(dict.fromkeys(words))
