"""
Tests for the Googlon word classifier.

Foo letters: u, d, x, s, m, p, f. Every other letter is a bar letter.
"""
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from googlon import (
    Alphabet,
    GooglonConfig,
    UnknownSymbolError,
    is_preposition,
    is_verb,
    is_subjunctive_verb,
    is_pretty_number,
    is_pretty_word,
)


# =============================================================================
# PREPOSITIONS
# =============================================================================

class TestPreposition:

    def test_six_letters_ending_in_foo(self):
        assert is_preposition("sxocqp")
        assert is_preposition("qwerjd")

    def test_wrong_length(self):
        assert not is_preposition("sxocp")
        assert not is_preposition("sxocqnp")

    def test_ending_in_bar(self):
        assert not is_preposition("sxocqn")

    def test_letter_u_is_forbidden(self):
        assert not is_preposition("uxocqp")
        assert not is_preposition("sxocup")
        # Ends in the foo letter u
        assert not is_preposition("sxocqu")

    def test_studfo_is_not_preposition(self):
        """Contains u and ends in the bar letter o."""
        assert not is_preposition("studfo")

    def test_empty_word(self):
        assert not is_preposition("")

    def test_custom_forbidden_letter(self):
        config = GooglonConfig(forbidden_letter="s")
        assert not is_preposition("sxocqp", config)
        assert is_preposition("uxocqp", config)


# =============================================================================
# VERBS
# =============================================================================

class TestVerb:

    def test_six_letters_ending_in_bar(self):
        assert is_verb("lhejrn")

    def test_longer_words(self):
        assert is_verb("dlhejrn")
        assert is_verb("sssssssssssi")

    def test_ending_in_foo(self):
        assert not is_verb("lhejrm")

    def test_too_short(self):
        assert not is_verb("hejrn")

    def test_empty_word(self):
        assert not is_verb("")

    def test_custom_minimum_length(self):
        config = GooglonConfig(verb_min_length=2)
        assert is_verb("xo", config)
        assert not is_verb("o", config)


class TestSubjunctiveVerb:

    def test_verb_starting_with_bar(self):
        assert is_subjunctive_verb("lhejrn")

    def test_verb_starting_with_foo(self):
        assert is_verb("dlhejrn")
        assert not is_subjunctive_verb("dlhejrn")

    def test_not_a_verb(self):
        # Starts with a bar letter but ends in a foo letter
        assert not is_subjunctive_verb("lhejrm")
        assert not is_subjunctive_verb("lhe")

    def test_empty_word(self):
        assert not is_subjunctive_verb("")


# =============================================================================
# PRETTY NUMBERS
# =============================================================================

class TestPrettyNumber:

    def test_threshold_boundary(self):
        # 81827 % 3 == 2
        assert not is_pretty_number(81827)
        assert is_pretty_number(81828)

    def test_below_threshold(self):
        assert not is_pretty_number(81825)
        assert not is_pretty_number(0)

    def test_not_divisible(self):
        assert not is_pretty_number(81829)
        assert not is_pretty_number(81830)

    def test_large_numbers(self):
        assert is_pretty_number(3 * 10 ** 12)

    def test_custom_rules(self):
        config = GooglonConfig(pretty_threshold=10, pretty_divisor=5)
        assert is_pretty_number(10, config)
        assert not is_pretty_number(5, config)
        assert not is_pretty_number(12, config)

    def test_pretty_words(self):
        assert is_pretty_word("phqy")       # 81828
        assert not is_pretty_word("whqy")   # 81827
        assert is_pretty_word("jqcd")       # 129294
        assert not is_pretty_word("s")

    def test_pretty_word_unknown_letter(self):
        with pytest.raises(UnknownSymbolError):
            is_pretty_word("phqa")


# =============================================================================
# CUSTOM LETTER GROUPS
# =============================================================================

def test_custom_alphabet_groups():
    config = GooglonConfig(
        alphabet=Alphabet.from_string("abc"),
        foo_letters=frozenset("a"),
        pad_symbol="a",
        forbidden_letter="c",
        preposition_length=3,
        verb_min_length=3,
    )
    assert is_preposition("bba", config)
    assert not is_preposition("cba", config)
    assert is_verb("abb", config)
    assert not is_subjunctive_verb("abb", config)
    assert is_subjunctive_verb("bab", config)
