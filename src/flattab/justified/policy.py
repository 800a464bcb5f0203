"""Pydantic configuration models for justified-table parsing.

DelimiterPolicy describes how field boundaries are recognised on input and how
fields and lines are separated on output.  TableOptions adds the column
selection settings.  Both are built once from command-line input and passed
unchanged to every stage.
"""

import logging
from enum import Enum

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from flattab.config import TABLE_LINE_DELIMITER, TABLE_OUTPUT_DELIMITER
from flattab.justified.patterns import BORDER_CHARS, NUL, RECORD_SEPARATOR, UNIT_SEPARATOR

logger = logging.getLogger(__name__)


class WhitespaceMode(str, Enum):
    """How whitespace participates in column boundaries."""

    ANY = "any"  # every whitespace character is a boundary candidate
    DOUBLE = "double"  # only runs of two or more, so single spaces stay inside fields
    IGNORE = "ignore"  # whitespace never separates columns


class DelimiterPolicy(BaseModel):
    """Input boundary rules and output separators for one table-parsing run.

    Control-character overrides always win over explicit separators: the
    unit separator replaces ``output_delimiter``, and NUL (then the record
    separator) replaces ``line_delimiter``.
    """

    model_config = ConfigDict(frozen=True)

    whitespace: WhitespaceMode = WhitespaceMode.ANY
    delimiters: frozenset[str] = frozenset()
    borders: bool = False

    output_delimiter: str = TABLE_OUTPUT_DELIMITER
    line_delimiter: str = TABLE_LINE_DELIMITER
    unit_separator: bool = False
    record_separator: bool = False
    null_terminated: bool = False

    @field_validator("delimiters", mode="before")
    @classmethod
    def split_delimiter_string(cls, value):
        """Accept a plain string where every character is one delimiter."""
        if isinstance(value, str):
            return frozenset(value)
        return value

    @model_validator(mode="after")
    def validate_delimiters(self) -> "DelimiterPolicy":
        """Ensure every extra delimiter is exactly one character."""
        for delimiter in self.delimiters:
            if len(delimiter) != 1:
                raise ValueError(f"Delimiter {delimiter!r} must be a single character")
        if self.unit_separator and self.output_delimiter != TABLE_OUTPUT_DELIMITER:
            logger.debug("Unit separator overrides output delimiter %r", self.output_delimiter)
        if (self.record_separator or self.null_terminated) and self.line_delimiter != TABLE_LINE_DELIMITER:
            logger.debug("Control-character line separator overrides %r", self.line_delimiter)
        return self

    @property
    def field_separator(self) -> str:
        """Effective output field separator."""
        return UNIT_SEPARATOR if self.unit_separator else self.output_delimiter

    @property
    def line_separator(self) -> str:
        """Effective output line separator."""
        if self.null_terminated:
            return NUL
        if self.record_separator:
            return RECORD_SEPARATOR
        return self.line_delimiter

    def is_delimiter_char(self, char: str) -> bool:
        """Return True if *char* is an extra delimiter, a boundary on any line it appears on."""
        return char in self.delimiters

    def is_border_char(self, char: str) -> bool:
        """Return True if *char* is a border glyph in border mode.

        A border glyph only separates columns at positions where every line has one.
        """
        return self.borders and char in BORDER_CHARS

    def is_rule_line(self, line: str) -> bool:
        """Return True for a border-mode rule line such as ``+----+----+`` or ``├───┼───┤``.

        Inner whitespace makes it a data row, so ``| - | - |`` is kept.
        """
        body = line.strip()
        if not self.borders or not body:
            return False
        return all(char in BORDER_CHARS for char in body)


class TableOptions(BaseModel):
    """Everything the text-table pipeline needs besides the input lines."""

    model_config = ConfigDict(frozen=True)

    policy: DelimiterPolicy = DelimiterPolicy()
    columns: tuple[str, ...] = ()
    ignore_case: bool = False
    header: bool = False
    header_only: bool = False
