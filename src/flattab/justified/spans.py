"""Whole-input column-span inference for justified text tables.

Inference is two-pass: every line is first classified character by
character, and the per-line masks are AND-ed into one mask that marks a
character column as a boundary only when every line agrees (a line shorter
than the column does not veto it).  The maximal runs of content columns in
the combined mask become the column spans shared by all lines.

Border glyphs are merged separately: a position is a border boundary only
when every line has a glyph there, so a hyphen inside one value and a space
in the header never split a column.  That border mask is then OR-ed into the
whitespace and delimiter mask.

Blank lines take no part in inference; they are still tokenised later.
"""

import logging
from collections.abc import Sequence
from typing import NamedTuple

from flattab.justified.patterns import DOUBLE_WHITESPACE_RE
from flattab.justified.policy import DelimiterPolicy, WhitespaceMode

logger = logging.getLogger(__name__)


class ColumnSpan(NamedTuple):
    """Half-open character range ``[start, end)`` occupied by one column."""

    start: int
    end: int


# ─── Per-Line Classification ──────────────────────────────────────────────────


def classify_line(line: str, policy: DelimiterPolicy) -> list[bool]:
    """Return one flag per character of *line*: True where it may separate columns."""
    mask = [policy.is_delimiter_char(char) for char in line]

    if policy.whitespace is WhitespaceMode.ANY:
        for i, char in enumerate(line):
            if char.isspace():
                mask[i] = True
    elif policy.whitespace is WhitespaceMode.DOUBLE:
        # Single spaces between words are content; only wide gaps and edge padding separate
        for match in DOUBLE_WHITESPACE_RE.finditer(line):
            for i in range(match.start(), match.end()):
                mask[i] = True

    return mask


def border_mask(line: str, policy: DelimiterPolicy) -> list[bool]:
    """Return one flag per character of *line*: True where it holds a border glyph."""
    return [policy.is_border_char(char) for char in line]


def merge_masks(masks: Sequence[Sequence[bool]]) -> list[bool]:
    """AND per-line masks column by column; columns past a line's end are left to the other lines."""
    combined: list[bool] = []
    for mask in masks:
        for i, is_boundary in enumerate(mask):
            if i < len(combined):
                combined[i] = combined[i] and is_boundary
            else:
                combined.append(is_boundary)
    return combined


def content_runs(mask: Sequence[bool]) -> list[ColumnSpan]:
    """Return the maximal runs of non-boundary columns as spans, left to right."""
    spans: list[ColumnSpan] = []
    start: int | None = None
    for i, is_boundary in enumerate(mask):
        if start is None and not is_boundary:
            start = i
        elif start is not None and is_boundary:
            spans.append(ColumnSpan(start, i))
            start = None
    # A content run that reaches the longest line's end is still a column
    if start is not None:
        spans.append(ColumnSpan(start, len(mask)))
    return spans


# ─── Inference ────────────────────────────────────────────────────────────────


def widen_spans(spans: list[ColumnSpan], width: int) -> list[ColumnSpan]:
    """Stretch each span up to the start of the next one; the last reaches *width*."""
    widened: list[ColumnSpan] = []
    for i, span in enumerate(spans):
        end = spans[i + 1].start if i + 1 < len(spans) else max(width, span.end)
        widened.append(ColumnSpan(span.start, end))
    return widened


def infer_spans(lines: Sequence[str], policy: DelimiterPolicy, header_only: bool = False) -> list[ColumnSpan]:
    """Infer the column spans shared by every line of a justified table.

    With *header_only* the spans come from the first non-blank, non-rule line
    alone and are widened so that data wider than its header label still
    falls inside the header's column.
    """
    sample = [line for line in lines if line.strip() and not policy.is_rule_line(line)]
    if header_only:
        sample = sample[:1]

    if not sample:
        logger.info("No content lines; inferred 0 column spans")
        return []

    mask = merge_masks([classify_line(line, policy) for line in sample])
    if policy.borders:
        borders = merge_masks([border_mask(line, policy) for line in sample])
        mask = [is_boundary or is_border for is_boundary, is_border in zip(mask, borders)]
    spans = content_runs(mask)

    if header_only and spans:
        spans = widen_spans(spans, max(len(line) for line in lines))

    logger.info("Inferred %d column spans from %d lines", len(spans), len(sample))
    logger.debug("Column spans: %s", spans)
    return spans
