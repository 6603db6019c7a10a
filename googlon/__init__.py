# Googlon Parser
# Word classification, numeral reading and lexicographic sorting for Googlon

from .types import (
    Alphabet,
    SymbolPartition,
    GooglonConfig,
    TextReport,
    CANONICAL_CONFIG,
)

from .errors import (
    GooglonError,
    UnknownSymbolError,
    NumeralOverflowError,
)

from .codec import (
    decode_numeral,
    encode_numeral,
)

from .radix import (
    SortAlgorithm,
    RadixSort,
    KeySort,
    radix_sort,
    sort_lexicographic,
)

from .classifier import (
    is_preposition,
    is_verb,
    is_subjunctive_verb,
    is_pretty_number,
    is_pretty_word,
)

from .tokenizer import (
    tokenize,
    unique_words,
)

from .parser import (
    analyze_text,
    GooglonParser,
)

from .config import (
    load_config,
    save_config,
)

from .constants import (
    ALPHABET,
    FOO_LETTERS,
    NUMBER_BASE,
    PAD_LETTER,
)

__all__ = [
    # Types
    "Alphabet",
    "SymbolPartition",
    "GooglonConfig",
    "TextReport",
    "CANONICAL_CONFIG",
    # Errors
    "GooglonError",
    "UnknownSymbolError",
    "NumeralOverflowError",
    # Codec
    "decode_numeral",
    "encode_numeral",
    # Sorting
    "SortAlgorithm",
    "RadixSort",
    "KeySort",
    "radix_sort",
    "sort_lexicographic",
    # Classifier
    "is_preposition",
    "is_verb",
    "is_subjunctive_verb",
    "is_pretty_number",
    "is_pretty_word",
    # Tokenizer
    "tokenize",
    "unique_words",
    # Parser
    "analyze_text",
    "GooglonParser",
    # Config
    "load_config",
    "save_config",
    # Constants
    "ALPHABET",
    "FOO_LETTERS",
    "NUMBER_BASE",
    "PAD_LETTER",
]
