"""
Googlon Parser - Text Analysis

Implements analyze_text: Googlon text -> TextReport

Analysis steps:
1. Tokenize on the delimiter
2. Classify each token (preposition, verb, subjunctive verb)
3. Read each token as a numeral and keep the distinct pretty numbers
4. De-duplicate the tokens and sort them into the vocabulary list
"""
from __future__ import annotations
import logging
from typing import List, Optional

from .classifier import (
    is_preposition,
    is_verb,
    is_subjunctive_verb,
    is_pretty_number,
)
from .codec import decode_numeral
from .radix import sort_lexicographic
from .tokenizer import tokenize, unique_words
from .types import GooglonConfig, TextReport, CANONICAL_CONFIG

logger = logging.getLogger(__name__)


def analyze_text(text: str, config: Optional[GooglonConfig] = None) -> TextReport:
    """
    Analyze a Googlon text.

    Args:
        text: Googlon text
        config: Parser configuration (canonical if omitted)

    Returns:
        TextReport with classified words, distinct pretty numbers
        and the sorted vocabulary

    Raises:
        UnknownSymbolError: a token has a letter outside the alphabet
        NumeralOverflowError: a token is too long to read as a numeral
    """
    config = config or CANONICAL_CONFIG
    tokens = tokenize(text, config.delimiter)

    report = TextReport(tokens=tokens)
    seen_pretty = set()
    for token in tokens:
        if is_preposition(token, config):
            report.prepositions.append(token)
        if is_verb(token, config):
            report.verbs.append(token)
        if is_subjunctive_verb(token, config):
            report.subjunctive_verbs.append(token)

        number = decode_numeral(token, config)
        if is_pretty_number(number, config) and number not in seen_pretty:
            seen_pretty.add(number)
            report.pretty_numbers.append(number)

    report.vocabulary = sort_lexicographic(unique_words(tokens), config)

    logger.debug(
        f"Analyzed {len(tokens)} tokens: {report.preposition_count} prepositions, "
        f"{report.verb_count} verbs, {report.subjunctive_verb_count} subjunctive, "
        f"{report.distinct_pretty_number_count} pretty numbers, "
        f"{len(report.vocabulary)} vocabulary words"
    )
    return report


class GooglonParser:
    """Googlon grammar operations bound to one configuration."""

    def __init__(self, config: Optional[GooglonConfig] = None):
        self.config = config or CANONICAL_CONFIG

    def tokenize(self, text: str) -> List[str]:
        return tokenize(text, self.config.delimiter)

    def is_preposition(self, word: str) -> bool:
        return is_preposition(word, self.config)

    def is_verb(self, word: str) -> bool:
        return is_verb(word, self.config)

    def is_subjunctive_verb(self, word: str) -> bool:
        return is_subjunctive_verb(word, self.config)

    def is_pretty_number(self, number: int) -> bool:
        return is_pretty_number(number, self.config)

    def word_to_number(self, word: str) -> int:
        return decode_numeral(word, self.config)

    def lexicographical_sort(self, words: List[str]) -> List[str]:
        return sort_lexicographic(words, self.config)

    def analyze(self, text: str) -> TextReport:
        return analyze_text(text, self.config)
