"""
Googlon Parser - Lexicographic Sorting

Googlon words are ordered lexicographically, but the letter order is the
Googlon alphabet (sxocqnmwpfyheljrdgui) rather than ours.

RadixSort buckets words one letter position at a time, from the last
position of the longest word back to the first. Shorter words are
right-padded with a pad letter while bucketing, so the pad letter decides
how a short word compares with a longer word sharing its prefix. Padding
with the rank-0 letter puts the short word first.
"""
from __future__ import annotations
import logging
from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from .types import Alphabet, GooglonConfig, CANONICAL_CONFIG

logger = logging.getLogger(__name__)


class SortAlgorithm(ABC):
    """Abstract base class for word sorting algorithms."""

    def __init__(self, items: Iterable[str], alphabet: Alphabet, pad_symbol: str):
        self.items = list(items)
        self.alphabet = alphabet
        self.pad_symbol = pad_symbol
        self.pad_rank = alphabet.rank(pad_symbol)

    @abstractmethod
    def sort(self) -> List[str]:
        """Return the items in alphabet order. Subclasses implement this."""
        pass

    def max_length(self) -> int:
        """Length of the longest item (0 when there are none)."""
        return max((len(item) for item in self.items), default=0)

    def frame(self, word: str, length: int) -> str:
        """Right-pad word with the pad symbol up to length."""
        return word.ljust(length, self.pad_symbol)


class RadixSort(SortAlgorithm):
    """
    Stable bucket radix sort over variable-length words.

    One pass per letter position of the longest word, last position
    first. Every pass drops each word into the bucket of its padded letter
    at that position, then concatenates the buckets in rank order.
    """

    def create_bucket(self) -> List[List[str]]:
        """Create an empty bucket table, one bucket per alphabet rank."""
        return [[] for _ in range(self.alphabet.size)]

    @staticmethod
    def flat_bucket(bucket: List[List[str]]) -> List[str]:
        """Concatenate buckets in rank order."""
        return [word for words in bucket for word in words]

    def sort(self) -> List[str]:
        words = list(self.items)
        max_length = self.max_length()
        if max_length == 0:
            return words

        # Checked up front so the error names the offending word
        for word in words:
            self.alphabet.check_word(word)

        for i in range(max_length - 1, -1, -1):
            bucket = self.create_bucket()
            for word in words:
                rank = self.alphabet.rank(word[i]) if i < len(word) else self.pad_rank
                bucket[rank].append(word)
            words = self.flat_bucket(bucket)

        logger.debug(f"Radix sorted {len(words)} words in {max_length} passes")
        return words


class KeySort(SortAlgorithm):
    """
    Comparison sort with the same padded ordering as RadixSort.

    Python's sort is stable, so ties (words equal up to trailing pad
    letters) keep their input order, as in RadixSort.
    """

    def sort(self) -> List[str]:
        max_length = self.max_length()
        for word in self.items:
            self.alphabet.check_word(word)
        return sorted(
            self.items,
            key=lambda word: self.alphabet.ranks_of(self.frame(word, max_length)),
        )


def radix_sort(words: Iterable[str], alphabet: Alphabet, pad_symbol: str) -> List[str]:
    """
    Sort words by alphabet rank with a radix sort.

    Args:
        words: Words to sort (duplicates are kept)
        alphabet: Letter order
        pad_symbol: Alphabet letter used to right-pad shorter words

    Returns:
        New list with the same words in order

    Raises:
        UnknownSymbolError: pad_symbol or a word letter is not in the alphabet
    """
    return RadixSort(words, alphabet, pad_symbol).sort()


def sort_lexicographic(
    words: Iterable[str],
    config: Optional[GooglonConfig] = None,
) -> List[str]:
    """Sort words in Googlon lexicographic order."""
    config = config or CANONICAL_CONFIG
    return radix_sort(words, config.alphabet, config.pad_symbol)
