"""
Tests for Googlon text analysis (analyze_text / GooglonParser).

Runs the JSON fixture cases in tests/fixtures/googlon_cases.json.
"""
import json
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from googlon import (
    Alphabet,
    GooglonConfig,
    GooglonParser,
    TextReport,
    UnknownSymbolError,
    NumeralOverflowError,
    analyze_text,
)

CASES_PATH = Path(__file__).parent / "fixtures" / "googlon_cases.json"


def load_cases():
    with open(CASES_PATH, 'r', encoding='utf-8') as f:
        return json.load(f)


# =============================================================================
# FIXTURE CASES
# =============================================================================

@pytest.mark.parametrize("case", load_cases(), ids=lambda c: c["name"])
def test_fixture_case(case):
    report = analyze_text(case["text"])
    expected = case["expected"]
    assert report.preposition_count == expected["prepositions"]
    assert report.verb_count == expected["verbs"]
    assert report.subjunctive_verb_count == expected["subjunctive_verbs"]
    assert report.distinct_pretty_number_count == expected["distinct_pretty_numbers"]
    assert report.vocabulary == expected["sorted"]


# =============================================================================
# REPORT CONTENTS
# =============================================================================

class TestAnalyzeText:

    TEXT = "sxocqp lhejrn dlhejrn phqy phqy whqy mxuffp s"

    def test_word_lists(self):
        report = analyze_text(self.TEXT)
        assert report.tokens == self.TEXT.split(" ")
        assert report.prepositions == ["sxocqp"]
        assert report.verbs == ["lhejrn", "dlhejrn"]
        assert report.subjunctive_verbs == ["lhejrn"]

    def test_pretty_numbers_distinct_in_token_order(self):
        report = analyze_text(self.TEXT)
        # sxocqp, dlhejrn, phqy, mxuffp; the second phqy is skipped
        assert len(report.pretty_numbers) == 4
        assert report.pretty_numbers[0] == 26264820
        assert report.pretty_numbers[2] == 81828

    def test_repeated_words_are_counted(self):
        report = analyze_text("lhejrn lhejrn sxocqp sxocqp")
        assert report.verb_count == 2
        assert report.preposition_count == 2
        assert report.vocabulary == ["sxocqp", "lhejrn"]

    def test_words_with_equal_values_count_once(self):
        """Trailing rank-0 letters do not change a numeral."""
        report = analyze_text("phqy phqys")
        assert report.pretty_numbers == [81828]
        assert report.vocabulary == ["phqy", "phqys"]

    def test_empty_tokens_pass_through(self):
        report = analyze_text(" phqy  ")
        assert report.tokens == ["", "phqy", "", ""]
        assert report.pretty_numbers == [81828]
        assert report.vocabulary == ["", "phqy"]

    def test_empty_text(self):
        report = analyze_text("")
        assert report.tokens == [""]
        assert report.vocabulary == [""]
        assert report.distinct_pretty_number_count == 0

    def test_unknown_letter_raises(self):
        with pytest.raises(UnknownSymbolError):
            analyze_text("phqy hallo")

    def test_overflow_raises(self):
        with pytest.raises(NumeralOverflowError):
            analyze_text("phqy " + "i" * 16)

    def test_to_dict(self):
        d = analyze_text("jqcd fh jqcdi gu fh").to_dict()
        assert d == {
            "token_count": 5,
            "prepositions": 0,
            "verbs": 0,
            "subjunctive_verbs": 0,
            "distinct_pretty_numbers": 1,
            "pretty_numbers": [129294],
            "sorted": ["fh", "jqcd", "jqcdi", "gu"],
        }

    def test_str_is_vocabulary_line(self):
        assert str(analyze_text("jqcd fh")) == "fh jqcd"

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="googlon.parser"):
            analyze_text("jqcd fh")
        assert "Analyzed 2 tokens" in caplog.text


# =============================================================================
# PARSER OBJECT
# =============================================================================

class TestGooglonParser:

    def test_default_config(self):
        parser = GooglonParser()
        assert parser.tokenize("xs sx") == ["xs", "sx"]
        assert parser.is_preposition("sxocqp")
        assert parser.is_verb("lhejrn")
        assert parser.is_subjunctive_verb("lhejrn")
        assert parser.word_to_number("sx") == 20
        assert parser.is_pretty_number(81828)
        assert parser.lexicographical_sort(["x", "s"]) == ["s", "x"]

    def test_analyze(self):
        report = GooglonParser().analyze("jqcd fh")
        assert isinstance(report, TextReport)
        assert report.vocabulary == ["fh", "jqcd"]

    def test_custom_config(self):
        config = GooglonConfig(
            alphabet=Alphabet.from_string("abc"),
            foo_letters=frozenset("a"),
            pad_symbol="a",
            forbidden_letter="c",
            delimiter=",",
        )
        parser = GooglonParser(config)
        assert parser.tokenize("cb,abc") == ["cb", "abc"]
        assert parser.word_to_number("cb") == 5
        report = parser.analyze("cb,abc,c,a,b,bca,cab")
        assert report.vocabulary == ["a", "abc", "b", "bca", "c", "cab", "cb"]
