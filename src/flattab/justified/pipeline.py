"""Main text-table pipeline: lines in, delimited lines out.

    read lines -> infer spans -> tokenise -> select columns -> emit

Span inference needs every line before any boundary is trusted, so the
input is buffered in full.  Requested column names are resolved before the
first output line is produced, so a bad name yields no output at all.
"""

import logging
from collections.abc import Iterable, Iterator

from flattab.emit import TableEmitter
from flattab.justified.policy import TableOptions
from flattab.justified.selection import ColumnSelector
from flattab.justified.spans import infer_spans
from flattab.justified.tokenizer import strip_line_ending, tokenize_lines

logger = logging.getLogger(__name__)


def _drop_leading_blank(rows: list[list[str]]) -> list[list[str]]:
    """Skip all-empty rows ahead of the header row."""
    first = 0
    while first < len(rows) and not any(rows[first]):
        first += 1
    return rows[first:]


def run(lines: Iterable[str], options: TableOptions) -> Iterator[str]:
    """Convert a justified text table into rendered output lines.

    Raises UnknownColumn before returning if a requested column cannot be
    resolved.  Zero inferred columns (including empty input) produce no
    output lines.
    """
    buffered = [strip_line_ending(line) for line in lines]
    logger.info("Read %d lines", len(buffered))

    policy = options.policy
    spans = infer_spans(buffered, policy, header_only=options.header_only)
    if not spans:
        return iter(())

    rows = list(tokenize_lines(buffered, spans, policy))

    header = None
    if options.header:
        rows = _drop_leading_blank(rows)
        if not rows:
            return iter(())
        header, rows = rows[0], rows[1:]

    selector = ColumnSelector.resolve(len(spans), options.columns, header=header, ignore_case=options.ignore_case)
    emitter = TableEmitter.from_policy(policy)
    logger.info("Emitting %d columns x %d rows", len(selector.columns), len(rows))
    return _render(emitter, selector, rows, with_header=header is not None)


def _render(emitter: TableEmitter, selector: ColumnSelector, rows: list[list[str]], with_header: bool) -> Iterator[str]:
    if with_header:
        yield emitter.render(selector.names)
    for row in rows:
        yield emitter.render(selector.select(row))
