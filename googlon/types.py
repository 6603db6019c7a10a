"""
Googlon Parser - Type Definitions

Dataclasses for the alphabet, its letter groups, parser configuration
and text analysis results.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Iterator, List, Optional, Tuple

from .constants import (
    ALPHABET,
    FOO_LETTERS,
    PAD_LETTER,
    FORBIDDEN_PREPOSITION_LETTER,
    PREPOSITION_LENGTH,
    VERB_MIN_LENGTH,
    PRETTY_THRESHOLD,
    PRETTY_DIVISOR,
    NUMERAL_BITS,
    TOKEN_DELIMITER,
)
from .errors import UnknownSymbolError


@dataclass(frozen=True)
class Alphabet:
    """
    An ordered set of single-character symbols.

    The position of a symbol is its rank. Rank is both the sort key of
    the symbol and its digit value when a word is read as a numeral.
    """
    symbols: Tuple[str, ...]
    _ranks: Dict[str, int] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate symbols and build the rank table."""
        symbols = tuple(self.symbols)
        if not symbols:
            raise ValueError("Empty alphabet")
        ranks: Dict[str, int] = {}
        for rank, symbol in enumerate(symbols):
            if not isinstance(symbol, str) or len(symbol) != 1:
                raise ValueError(f"Invalid symbol: {symbol!r} (must be a single character)")
            if symbol in ranks:
                raise ValueError(f"Duplicate symbol: {symbol!r}")
            ranks[symbol] = rank
        object.__setattr__(self, "symbols", symbols)
        object.__setattr__(self, "_ranks", ranks)

    @classmethod
    def from_string(cls, s: str) -> "Alphabet":
        """
        Build an alphabet from its symbols in rank order.

        Whitespace is ignored, so both "sxo" and "s x o" are accepted.
        """
        return cls(tuple("".join(s.split())))

    @property
    def size(self) -> int:
        """Number of symbols."""
        return len(self.symbols)

    def rank(self, symbol: str) -> int:
        """Return the rank of symbol, raising UnknownSymbolError if absent."""
        try:
            return self._ranks[symbol]
        except KeyError:
            raise UnknownSymbolError(symbol) from None

    def symbol(self, rank: int) -> str:
        """Return the symbol with the given rank."""
        if not 0 <= rank < self.size:
            raise ValueError(f"Invalid rank: {rank} (must be 0-{self.size - 1})")
        return self.symbols[rank]

    def ranks_of(self, word: str) -> List[int]:
        """Return the rank of every symbol in word."""
        ranks = self._ranks
        try:
            return [ranks[c] for c in word]
        except KeyError as e:
            raise UnknownSymbolError(e.args[0], word) from None

    def check_word(self, word: str) -> None:
        """Raise UnknownSymbolError for the first symbol of word not in the alphabet."""
        for c in word:
            if c not in self._ranks:
                raise UnknownSymbolError(c, word)

    def __contains__(self, symbol: object) -> bool:
        return symbol in self._ranks

    def __iter__(self) -> Iterator[str]:
        return iter(self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __str__(self) -> str:
        return "".join(self.symbols)


@dataclass(frozen=True)
class SymbolPartition:
    """
    Split of an alphabet into foo letters and bar letters.

    Anything that is not a foo letter counts as a bar letter.
    """
    alphabet: Alphabet
    foo_letters: FrozenSet[str]

    def __post_init__(self):
        foo = frozenset(self.foo_letters)
        for letter in sorted(foo):
            if letter not in self.alphabet:
                raise UnknownSymbolError(letter)
        object.__setattr__(self, "foo_letters", foo)

    @property
    def bar_letters(self) -> Tuple[str, ...]:
        """Bar letters in alphabet order."""
        return tuple(c for c in self.alphabet if c not in self.foo_letters)

    def is_foo(self, letter: str) -> bool:
        return letter in self.foo_letters

    def is_bar(self, letter: str) -> bool:
        return letter not in self.foo_letters


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _canonical_alphabet() -> Alphabet:
    return Alphabet.from_string(ALPHABET)


@dataclass(frozen=True)
class GooglonConfig:
    """Configuration for Googlon parsing."""

    # Letters
    alphabet: Alphabet = field(default_factory=_canonical_alphabet)
    foo_letters: FrozenSet[str] = FOO_LETTERS

    # Numerals
    base: Optional[int] = None  # None = alphabet size
    numeral_bits: Optional[int] = NUMERAL_BITS  # None = unbounded

    # Sorting
    pad_symbol: str = PAD_LETTER

    # Grammar
    forbidden_letter: str = FORBIDDEN_PREPOSITION_LETTER
    preposition_length: int = PREPOSITION_LENGTH
    verb_min_length: int = VERB_MIN_LENGTH
    pretty_threshold: int = PRETTY_THRESHOLD
    pretty_divisor: int = PRETTY_DIVISOR

    # Tokenizing
    delimiter: str = TOKEN_DELIMITER

    partition: SymbolPartition = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        """Validate configuration."""
        if not isinstance(self.alphabet, Alphabet):
            raise ValueError(f"Invalid alphabet: {self.alphabet!r}")
        for name in ("base", "numeral_bits"):
            value = getattr(self, name)
            if value is not None and not _is_int(value):
                raise ValueError(f"Invalid {name}: {value!r} (must be an integer or None)")
        for name in ("preposition_length", "verb_min_length", "pretty_threshold", "pretty_divisor"):
            if not _is_int(getattr(self, name)):
                raise ValueError(f"Invalid {name}: {getattr(self, name)!r} (must be an integer)")
        for name in ("pad_symbol", "forbidden_letter", "delimiter"):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"Invalid {name}: {getattr(self, name)!r} (must be a string)")

        if self.base is not None and self.base < 2:
            raise ValueError(f"Invalid base: {self.base} (must be >= 2)")
        if self.pad_symbol not in self.alphabet:
            raise UnknownSymbolError(self.pad_symbol)
        if self.forbidden_letter not in self.alphabet:
            raise UnknownSymbolError(self.forbidden_letter)
        if self.numeral_bits is not None and self.numeral_bits < 1:
            raise ValueError(f"Invalid numeral_bits: {self.numeral_bits} (must be >= 1)")
        for name in ("preposition_length", "verb_min_length", "pretty_divisor"):
            if getattr(self, name) < 1:
                raise ValueError(f"Invalid {name}: {getattr(self, name)} (must be >= 1)")
        if not self.delimiter:
            raise ValueError("Empty delimiter")
        object.__setattr__(
            self, "partition", SymbolPartition(self.alphabet, frozenset(self.foo_letters))
        )
        object.__setattr__(self, "foo_letters", self.partition.foo_letters)

    @property
    def numeral_base(self) -> int:
        """Place-value base: base if set, otherwise the alphabet size."""
        return self.alphabet.size if self.base is None else self.base

    @property
    def max_numeral(self) -> Optional[int]:
        """Largest decodable value, or None when unbounded."""
        if self.numeral_bits is None:
            return None
        return 2 ** self.numeral_bits - 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary. An unset base stays None."""
        return {
            "alphabet": str(self.alphabet),
            "foo_letters": "".join(c for c in self.alphabet if c in self.foo_letters),
            "base": self.base,
            "numeral_bits": self.numeral_bits,
            "pad_symbol": self.pad_symbol,
            "forbidden_letter": self.forbidden_letter,
            "preposition_length": self.preposition_length,
            "verb_min_length": self.verb_min_length,
            "pretty_threshold": self.pretty_threshold,
            "pretty_divisor": self.pretty_divisor,
            "delimiter": self.delimiter,
        }

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "GooglonConfig":
        """Create from dictionary. Missing keys take canonical values."""
        d = dict(d)
        unknown = sorted(set(d) - set(cls().to_dict()))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        if isinstance(d.get("alphabet"), (str, list, tuple)):
            alphabet = d["alphabet"]
            if isinstance(alphabet, str):
                d["alphabet"] = Alphabet.from_string(alphabet)
            else:
                d["alphabet"] = Alphabet(tuple(alphabet))
        if "foo_letters" in d:
            foo = d["foo_letters"]
            if isinstance(foo, str):
                foo = [foo]
            if not isinstance(foo, (list, tuple)) or not all(isinstance(c, str) for c in foo):
                raise ValueError(f"Invalid foo_letters: {d['foo_letters']!r}")
            d["foo_letters"] = frozenset("".join(foo).replace(" ", ""))
        return cls(**d)


CANONICAL_CONFIG = GooglonConfig()


@dataclass
class TextReport:
    """
    Result of analyzing a Googlon text.

    Word lists keep token order and duplicates; pretty numbers are
    distinct and in first-seen order.
    """
    tokens: List[str]
    prepositions: List[str] = field(default_factory=list)
    verbs: List[str] = field(default_factory=list)
    subjunctive_verbs: List[str] = field(default_factory=list)
    pretty_numbers: List[int] = field(default_factory=list)
    vocabulary: List[str] = field(default_factory=list)

    @property
    def preposition_count(self) -> int:
        return len(self.prepositions)

    @property
    def verb_count(self) -> int:
        return len(self.verbs)

    @property
    def subjunctive_verb_count(self) -> int:
        return len(self.subjunctive_verbs)

    @property
    def distinct_pretty_number_count(self) -> int:
        return len(self.pretty_numbers)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "token_count": len(self.tokens),
            "prepositions": self.preposition_count,
            "verbs": self.verb_count,
            "subjunctive_verbs": self.subjunctive_verb_count,
            "distinct_pretty_numbers": self.distinct_pretty_number_count,
            "pretty_numbers": list(self.pretty_numbers),
            "sorted": list(self.vocabulary),
        }

    def __str__(self) -> str:
        return " ".join(self.vocabulary)
