"""The ``unjustify`` command: justified text table on stdin, delimited table on stdout.

Usage:
  ps aux | unjustify --header --whitespace double USER PID COMMAND
  unjustify --borders --header -U < report.txt
"""

import argparse
import logging
import sys

from pydantic import ValidationError

from flattab.config import TABLE_LINE_DELIMITER, TABLE_OUTPUT_DELIMITER, configure_logging
from flattab.emit import TableEmitter
from flattab.errors import FlattabError
from flattab.justified import pipeline
from flattab.justified.policy import DelimiterPolicy, TableOptions, WhitespaceMode

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for ``unjustify``."""
    parser = argparse.ArgumentParser(prog="unjustify", description="Convert a justified plain-text table into delimited lines")
    parser.add_argument("columns", nargs="*", help="output columns, by header name (--header) or zero-based index (default: all)")
    parser.add_argument("-i", "--ignore-case", action="store_true", help="match column names case-insensitively")
    parser.add_argument("-H", "--header", action="store_true", help="treat the first row as column names")
    parser.add_argument("--header-only", action="store_true", help="infer column positions from the header line alone")
    parser.add_argument("-d", "--delimiters", default="", help="additional column delimiter characters")
    parser.add_argument(
        "-w",
        "--whitespace",
        choices=[mode.value for mode in WhitespaceMode],
        default=WhitespaceMode.ANY.value,
        help="any: every whitespace separates; double: two or more; ignore: never (default: any)",
    )
    parser.add_argument("-b", "--borders", action="store_true", help="treat +, -, | and box-drawing glyphs as delimiters")
    parser.add_argument("-O", "--output-delimiter", default=TABLE_OUTPUT_DELIMITER, help="between columns of output (default: ,)")
    parser.add_argument("-U", "--unit-separator", action="store_true", help="separate output columns with ASCII unit separator")
    parser.add_argument("-L", "--line-delimiter", default=TABLE_LINE_DELIMITER, help="between lines of output (default: newline)")
    parser.add_argument("-R", "--record-separator", action="store_true", help="separate output lines with ASCII record separator")
    parser.add_argument("-0", "--null", action="store_true", help="separate output lines with NUL bytes")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more detail to stderr (repeatable)")
    return parser


def options_from_args(args: argparse.Namespace) -> TableOptions:
    """Build validated TableOptions from parsed arguments."""
    policy = DelimiterPolicy(
        whitespace=WhitespaceMode(args.whitespace),
        delimiters=args.delimiters,
        borders=args.borders,
        output_delimiter=args.output_delimiter,
        line_delimiter=args.line_delimiter,
        unit_separator=args.unit_separator,
        record_separator=args.record_separator,
        null_terminated=args.null,
    )
    return TableOptions(
        policy=policy,
        columns=args.columns,
        ignore_case=args.ignore_case,
        header=args.header,
        header_only=args.header_only,
    )


def main(argv: list[str] | None = None) -> int:
    """Read stdin, write the converted table to stdout, and return the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        options = options_from_args(args)
    except ValidationError as exc:
        parser.error(str(exc))

    try:
        lines = pipeline.run(sys.stdin, options)
    except FlattabError as exc:
        logger.debug("Aborting: %r", exc)
        print(f"unjustify: {exc}", file=sys.stderr)
        return 1

    TableEmitter.from_policy(options.policy).write(lines, sys.stdout)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
