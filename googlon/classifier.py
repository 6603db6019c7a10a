"""
Googlon Parser - Word Classifier

Googlon letters are split into two groups: u, d, x, s, m, p, f are the
"foo letters" and the other letters are the "bar letters".

- Prepositions have exactly 6 letters, end in a foo letter and do not
  contain the letter u.
- Verbs have 6 letters or more and end in a bar letter.
- A verb that starts with a bar letter is in its subjunctive form.
- A number is pretty if it is >= 81827 and divisible by 3.
"""
from __future__ import annotations
from typing import Optional

from .codec import decode_numeral
from .types import GooglonConfig, CANONICAL_CONFIG


def is_preposition(word: str, config: Optional[GooglonConfig] = None) -> bool:
    """Check if word is a preposition."""
    config = config or CANONICAL_CONFIG
    if len(word) != config.preposition_length:
        return False
    if config.forbidden_letter in word:
        return False
    return config.partition.is_foo(word[-1])


def is_verb(word: str, config: Optional[GooglonConfig] = None) -> bool:
    """Check if word is a verb."""
    config = config or CANONICAL_CONFIG
    if len(word) < config.verb_min_length:
        return False
    return config.partition.is_bar(word[-1])


def is_subjunctive_verb(word: str, config: Optional[GooglonConfig] = None) -> bool:
    """Check if word is a verb inflected in its subjunctive form."""
    config = config or CANONICAL_CONFIG
    if not is_verb(word, config):
        return False
    return config.partition.is_bar(word[0])


def is_pretty_number(number: int, config: Optional[GooglonConfig] = None) -> bool:
    config = config or CANONICAL_CONFIG
    return number >= config.pretty_threshold and number % config.pretty_divisor == 0


def is_pretty_word(word: str, config: Optional[GooglonConfig] = None) -> bool:
    """Check if word, read as a numeral, is a pretty number."""
    config = config or CANONICAL_CONFIG
    return is_pretty_number(decode_numeral(word, config), config)
