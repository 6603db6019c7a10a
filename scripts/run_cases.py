#!/usr/bin/env python3
"""
Googlon Case Runner

Checks analyze_text against a JSON fixture of texts with expected
results, printing PASS/FAIL for each check.

Usage:
  python scripts/run_cases.py
  python scripts/run_cases.py tests/fixtures/googlon_cases.json --config my_alphabet.json

Fixture format (JSON list):
  [{"name": "case-1",
    "text": "sxocqp lhejrn",
    "expected": {"prepositions": 1, "verbs": 1, "subjunctive_verbs": 1,
                 "distinct_pretty_numbers": 1, "sorted": ["sxocqp", "lhejrn"]}}]

Any expected key may be omitted to skip that check.
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from googlon import GooglonConfig, GooglonError, analyze_text, load_config

DEFAULT_CASES = Path(__file__).parent.parent / "tests" / "fixtures" / "googlon_cases.json"

# expected key -> (label, report attribute)
CHECKS: List[Tuple[str, str, str]] = [
    ("prepositions", "Prepositions", "preposition_count"),
    ("verbs", "Verbs", "verb_count"),
    ("subjunctive_verbs", "Subjunctive verbs", "subjunctive_verb_count"),
    ("distinct_pretty_numbers", "Distinct pretty numbers", "distinct_pretty_number_count"),
    ("sorted", "Vocabulary list", "vocabulary"),
]


def load_cases(path: Path) -> List[Dict[str, Any]]:
    """Load and sanity-check a case fixture."""
    with open(path, 'r', encoding='utf-8') as f:
        cases = json.load(f)
    if not isinstance(cases, list):
        raise ValueError(f"{path}: expected a JSON list of cases")
    for i, case in enumerate(cases):
        if not isinstance(case, dict) or not isinstance(case.get("text"), str):
            raise ValueError(f"{path}: case {i} has no 'text' string")
    return cases


def run_case(case: Dict[str, Any], config: GooglonConfig) -> List[Tuple[str, bool, str]]:
    """
    Run every expected check of one case.

    Returns:
        List of (label, passed, detail) tuples
    """
    try:
        report = analyze_text(case["text"], config)
    except GooglonError as e:
        return [("Analysis", False, str(e))]

    results = []
    expected = case.get("expected", {})
    for key, label, attr in CHECKS:
        if key not in expected:
            continue
        actual = getattr(report, attr)
        passed = actual == expected[key]
        detail = f"expected {expected[key]!r}, got {actual!r}"
        results.append((label, passed, detail))
    return results


def run_cases(cases: List[Dict[str, Any]], config: GooglonConfig) -> bool:
    """Run all cases, print a line per check, and return overall success."""
    all_pass = True
    for i, case in enumerate(cases):
        name = case.get("name", str(i))
        print(f"Case {name}")
        for label, passed, detail in run_case(case, config):
            if passed:
                print(f"  PASS: {label}")
            else:
                all_pass = False
                print(f"  FAIL: {label} -- {detail}")
        print()

    if all_pass:
        print("All cases PASSED.")
    else:
        print("Some cases FAILED.")
    return all_pass


def parse_args(argv: Optional[list] = None):
    p = argparse.ArgumentParser(description="Run Googlon analysis cases from a JSON fixture.")
    p.add_argument("cases", nargs="?", default=str(DEFAULT_CASES), help="Case fixture (JSON list)")
    p.add_argument("--config", help="JSON configuration file")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        config = load_config(args.config) if args.config else GooglonConfig()
        cases = load_cases(Path(args.cases))
    except (OSError, ValueError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    return 0 if run_cases(cases, config) else 1


if __name__ == "__main__":
    sys.exit(main())
