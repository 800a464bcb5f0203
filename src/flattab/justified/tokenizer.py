"""Field extraction from single lines using the inferred column spans."""

import logging
from collections.abc import Iterable, Iterator, Sequence

from flattab.justified.patterns import LINE_ENDING_RE
from flattab.justified.policy import DelimiterPolicy
from flattab.justified.spans import ColumnSpan

logger = logging.getLogger(__name__)


def strip_line_ending(line: str) -> str:
    """Drop a trailing ``\\n`` / ``\\r\\n`` left by the line reader."""
    return LINE_ENDING_RE.sub("", line)


def tokenize(line: str, spans: Sequence[ColumnSpan]) -> list[str]:
    """Return one trimmed field per span; spans past the end of *line* give ``""``."""
    return [line[span.start : span.end].strip() for span in spans]


def tokenize_lines(lines: Iterable[str], spans: Sequence[ColumnSpan], policy: DelimiterPolicy) -> Iterator[list[str]]:
    """Tokenise every line, skipping border-mode rule lines."""
    skipped = 0
    for line in lines:
        if policy.is_rule_line(line):
            skipped += 1
            continue
        yield tokenize(line, spans)
    if skipped:
        logger.debug("Skipped %d rule lines", skipped)
