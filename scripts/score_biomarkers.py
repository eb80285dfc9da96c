#!/usr/bin/env python3
"""
Healthscore Biomarker Scorer
============================
Runs one calculator over a JSON object of inputs and prints the result.

Usage:
    python scripts/score_biomarkers.py bio_age inputs.json
    echo '{"gender": "f", "waist_circumference": 92}' | python scripts/score_biomarkers.py body_composition

Missing fields take the form defaults. Exit code 1 on invalid input.
"""

import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from healthscore_engine import CALCULATORS, InvalidInputError, configure_logging

logger = logging.getLogger(__name__)


def load_inputs(path):
    """Read the input object from a file path, or stdin when path is None or '-'."""
    if path in (None, '-'):
        raw = sys.stdin.read()
    else:
        raw = Path(path).read_text()
    data = json.loads(raw) if raw.strip() else {}
    if not isinstance(data, dict):
        raise InvalidInputError(f"Expected a JSON object, got {type(data).__name__}")
    return data


def main():
    """CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(description='Score biomarkers with a healthscore calculator')
    parser.add_argument('calculator', choices=sorted(CALCULATORS), help='Calculator to run')
    parser.add_argument('input', nargs='?', help="JSON input file ('-' or omitted for stdin)")
    parser.add_argument('--log-level', default=None, help='Override HEALTHSCORE_LOG_LEVEL')
    parser.add_argument('--indent', type=int, default=2, help='JSON indent for the output')
    args = parser.parse_args()

    if args.log_level:
        configure_logging(args.log_level.upper())
    else:
        configure_logging()

    try:
        data = load_inputs(args.input)
        result = CALCULATORS[args.calculator](data)
    except json.JSONDecodeError as e:
        logger.error(f"Input is not valid JSON: {e}")
        sys.exit(1)
    except InvalidInputError as e:
        logger.error(f"Invalid input ({e.field}): {e.message}")
        sys.exit(1)

    print(json.dumps(result.to_dict(), indent=args.indent, ensure_ascii=False))


if __name__ == '__main__':
    main()
