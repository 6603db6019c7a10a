"""
Googlon Parser - Canonical Constants

Canonical Googlon alphabet, letter groups and grammar thresholds.

The alphabet order defines both the lexicographic order of Googlon words
and the digit value of each letter when a word is read as a number:
the first letter is the digit 0, the second the digit 1, and the last
one the digit 19.
"""
from typing import FrozenSet, Optional

# =============================================================================
# ALPHABET (Canonical - order is rank)
# =============================================================================

ALPHABET: str = "sxocqnmwpfyheljrdgui"

# =============================================================================
# LETTER GROUPS
# =============================================================================

# u, d, x, s, m, p, f are "foo letters"; every other letter is a "bar letter"
FOO_LETTERS: FrozenSet[str] = frozenset("udxsmpf")

# =============================================================================
# NUMERALS
# =============================================================================

NUMBER_BASE: int = 20

# Signed 64-bit range
NUMERAL_BITS: Optional[int] = 63

# =============================================================================
# GRAMMAR
# =============================================================================

# Prepositions: exactly 6 letters, end in a foo letter, never contain 'u'
PREPOSITION_LENGTH: int = 6
FORBIDDEN_PREPOSITION_LETTER: str = "u"

# Verbs: 6 letters or more, end in a bar letter
VERB_MIN_LENGTH: int = 6

# Pretty numbers: >= 81827 and divisible by 3
PRETTY_THRESHOLD: int = 81827
PRETTY_DIVISOR: int = 3

# =============================================================================
# SORTING / TOKENIZING
# =============================================================================

# Rank-0 letter, so shorter words sort before longer words sharing a prefix
PAD_LETTER: str = "s"

TOKEN_DELIMITER: str = " "
