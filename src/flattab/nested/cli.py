"""The ``unnest`` command: JSON on stdin, delimited table on stdout.

Usage:
  curl -s https://api.example.com/books | unnest -O ,
  unnest --lines --missing NA < events.jsonl
"""

import argparse
import json
import logging
import sys

from pydantic import ValidationError

from flattab.config import (
    UNNEST_ATTRIBUTE_SEPARATOR,
    UNNEST_LINE_DELIMITER,
    UNNEST_MISSING,
    UNNEST_OUTPUT_DELIMITER,
    configure_logging,
)
from flattab.errors import FlattabError
from flattab.nested import pipeline
from flattab.nested.reader import read_document, read_json_lines, top_level_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``unnest``."""
    parser = argparse.ArgumentParser(prog="unnest", description="Flatten nested JSON into a delimited table")
    parser.add_argument("-O", "--output-delimiter", default=UNNEST_OUTPUT_DELIMITER, help="between columns of output (default: single space)")
    parser.add_argument("--line-delimiter", default=UNNEST_LINE_DELIMITER, help="between lines of output (default: newline)")
    parser.add_argument(
        "--attribute-separator",
        default=UNNEST_ATTRIBUTE_SEPARATOR,
        help="in column names, between nested JSON object keys (default: .)",
    )
    parser.add_argument("--missing", default=UNNEST_MISSING, help="output representation of missing values (default: empty)")
    parser.add_argument("-l", "--lines", action="store_true", help="read JSON Lines: one top-level record per line")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more detail to stderr (repeatable)")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Read stdin, write the flattened table to stdout, and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = pipeline.UnnestOptions(
            output_delimiter=args.output_delimiter,
            line_delimiter=args.line_delimiter,
            attribute_separator=args.attribute_separator,
            missing=args.missing,
            json_lines=args.lines,
        )
    except ValidationError as exc:
        parser.error(str(exc))

    try:
        records = list(read_json_lines(sys.stdin)) if options.json_lines else top_level_records(read_document(sys.stdin))
        lines = pipeline.run(records, options)
    except json.JSONDecodeError as exc:
        print(f"unnest: invalid JSON: {exc}", file=sys.stderr)
        return 1
    except FlattabError as exc:
        logger.debug("Aborting: %r", exc)
        print(f"unnest: {exc}", file=sys.stderr)
        return 1

    options.emitter().write(lines, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
