#!/usr/bin/env python3
"""
Googlon Text Analysis CLI

Usage:
  # Single text:
  python scripts/analyze_text.py --text "sxocqp lhejrn phqy"
  python scripts/analyze_text.py --file story.txt --format json
  python scripts/analyze_text.py --file story.txt --config my_alphabet.json

  # Bulk mode (JSONL input/output):
  python scripts/analyze_text.py --input-jsonl texts.jsonl --output-jsonl reports.jsonl

JSONL input format (one JSON object per line):
  {"text": "sxocqp lhejrn phqy"}
  {"id": "case-2", "text": "jqcd fh"}

JSONL output format (one JSON object per line):
  {"success": true, "id": "case-2", "result": {...}}
"""
import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from googlon import (
    GooglonConfig,
    GooglonError,
    TextReport,
    analyze_text,
    load_config,
)

logger = logging.getLogger(__name__)


# =============================================================================
# OUTPUT FORMATTING
# =============================================================================

def format_text_output(report: TextReport) -> str:
    """Format a report for terminal output."""
    lines = [
        f"Tokens:                  {len(report.tokens)}",
        f"Prepositions:            {report.preposition_count}",
        f"Verbs:                   {report.verb_count}",
        f"Subjunctive verbs:       {report.subjunctive_verb_count}",
        f"Distinct pretty numbers: {report.distinct_pretty_number_count}",
        f"Vocabulary list:         {report}",
    ]
    return "\n".join(lines)


def format_json_output(report: TextReport, compact: bool = False) -> str:
    """Format a report as JSON."""
    if compact:
        return json.dumps(report.to_dict(), ensure_ascii=False)
    return json.dumps(report.to_dict(), indent=2, ensure_ascii=False)


# =============================================================================
# BULK MODE
# =============================================================================

def read_jsonl(file_path: Path) -> Iterator[Dict[str, Any]]:
    """
    Read JSONL file and yield parsed items.

    Empty lines and lines starting with '#' are skipped. Lines that fail
    to parse are yielded as error markers.
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        for line_num, line in enumerate(f, start=1):
            line = line.rstrip('\n')
            if not line.strip() or line.lstrip().startswith('#'):
                continue
            try:
                yield json.loads(line)
            except json.JSONDecodeError as e:
                yield {
                    "_parse_error": True,
                    "_line_number": line_num,
                    "_error": f"JSON parse error: {str(e)}",
                    "_raw_line": line[:200],
                }


def write_jsonl(file_path: Path, items: Iterator[Dict[str, Any]]) -> int:
    """Write items to a JSONL file and return the number written."""
    count = 0
    with open(file_path, 'w', encoding='utf-8') as f:
        for item in items:
            f.write(json.dumps(item, ensure_ascii=False) + '\n')
            count += 1
    return count


def process_single_item(item: Dict[str, Any], config: GooglonConfig) -> Dict[str, Any]:
    """Analyze one JSONL item, capturing errors in the output record."""
    output: Dict[str, Any] = {"success": False}
    if "id" in item:
        output["id"] = item["id"]

    text = item.get("text")
    if not isinstance(text, str):
        output["error"] = "Missing 'text' field"
        return output

    try:
        output["result"] = analyze_text(text, config).to_dict()
        output["success"] = True
    except GooglonError as e:
        output["error"] = f"Analysis error: {str(e)}"
    return output


def run_bulk_analysis(
    input_path: Path,
    output_path: Path,
    config: GooglonConfig,
) -> Dict[str, int]:
    """
    Analyze every text of a JSONL file and write one report per line.

    Returns:
        Dict with statistics: total, success, error and parse error counts
    """
    stats = {"total": 0, "success": 0, "errors": 0, "parse_errors": 0}

    def process_items():
        for item in read_jsonl(input_path):
            stats["total"] += 1

            if item.get("_parse_error"):
                stats["parse_errors"] += 1
                yield {
                    "success": False,
                    "line_number": item.get("_line_number"),
                    "error": item.get("_error"),
                    "raw_input": item.get("_raw_line"),
                }
                continue

            result = process_single_item(item, config)
            if result["success"]:
                stats["success"] += 1
            else:
                stats["errors"] += 1
            yield result

    write_jsonl(output_path, process_items())
    logger.info(f"Analyzed {stats['total']} items from {input_path}")
    return stats


# =============================================================================
# CLI ARGUMENT PARSING
# =============================================================================

def parse_args(argv: Optional[list] = None):
    """Parse command-line arguments."""
    p = argparse.ArgumentParser(
        description="Googlon text analysis: classify, read numerals, sort vocabulary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    input_group = p.add_mutually_exclusive_group(required=True)
    input_group.add_argument("--text", help="Googlon text to analyze")
    input_group.add_argument("--file", help="File containing Googlon text")
    input_group.add_argument("--input-jsonl", dest="input_jsonl", help="JSONL file of {\"text\": ...} items")
    p.add_argument("--output-jsonl", dest="output_jsonl", help="Output JSONL file (bulk mode)")
    p.add_argument("--config", help="JSON configuration file (alphabet, letter groups, thresholds)")
    p.add_argument("--format", default="text", choices=["text", "json"], help="Output format")
    p.add_argument("--compact", action="store_true", help="Compact JSON output")
    p.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return p.parse_args(argv)


def main(argv: Optional[list] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config) if args.config else GooglonConfig()
    except (OSError, ValueError) as e:
        print(f"ERROR: Invalid config: {e}", file=sys.stderr)
        return 1

    if args.input_jsonl:
        if not args.output_jsonl:
            print("ERROR: --output-jsonl is required when using --input-jsonl", file=sys.stderr)
            return 1
        input_path = Path(args.input_jsonl)
        if not input_path.exists():
            print(f"ERROR: Input file not found: {input_path}", file=sys.stderr)
            return 1

        stats = run_bulk_analysis(input_path, Path(args.output_jsonl), config)
        print("Bulk analysis complete:", file=sys.stderr)
        print(f"  Total items:  {stats['total']}", file=sys.stderr)
        print(f"  Successful:   {stats['success']}", file=sys.stderr)
        print(f"  Errors:       {stats['errors']}", file=sys.stderr)
        print(f"  Parse errors: {stats['parse_errors']}", file=sys.stderr)
        return 0 if stats["errors"] == 0 and stats["parse_errors"] == 0 else 1

    if args.file:
        path = Path(args.file)
        if not path.exists():
            print(f"ERROR: Input file not found: {path}", file=sys.stderr)
            return 1
        # A trailing newline would otherwise glue onto the last word
        text = path.read_text(encoding="utf-8").rstrip("\r\n")
    else:
        text = args.text

    try:
        report = analyze_text(text, config)
    except GooglonError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(format_json_output(report, compact=args.compact))
    else:
        print(format_text_output(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
