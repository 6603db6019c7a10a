"""
Googlon Parser - Errors

All errors derive from ValueError so callers that already guard
parsing with ``except ValueError`` keep working.
"""
from typing import Optional


class GooglonError(ValueError):
    """Base class for Googlon parser errors."""


class UnknownSymbolError(GooglonError):
    """A character outside the configured alphabet was found."""

    def __init__(self, symbol: str, word: Optional[str] = None):
        self.symbol = symbol
        self.word = word
        msg = f"Unknown symbol {symbol!r}"
        if word is not None:
            msg += f" in word {word!r}"
        super().__init__(f"{msg} (not in alphabet)")


class NumeralOverflowError(GooglonError):
    """A decoded numeral does not fit the configured integer width."""

    def __init__(self, word: str, value: int, limit: int):
        self.word = word
        self.value = value
        self.limit = limit
        super().__init__(
            f"Numeral overflow: word {word!r} decodes to {value}, "
            f"above the limit {limit}"
        )
