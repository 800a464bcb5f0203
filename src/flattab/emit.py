"""Delimited line rendering shared by the text-table and flatten converters.

Values are joined with the configured field separator and terminated with the
configured line separator.  Separator characters occurring inside values are
not escaped.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)


class _Absent:
    """Marker for a field that is explicitly null or has no value in a record."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "ABSENT"

    def __bool__(self) -> bool:
        return False


ABSENT = _Absent()


class TableEmitter:
    """Serialise ordered fields into delimited output lines."""

    def __init__(self, field_separator: str = ",", line_separator: str = "\n", missing: str = ""):
        self.field_separator = field_separator
        self.line_separator = line_separator
        self.missing = missing

    @classmethod
    def from_policy(cls, policy: Any, missing: str = "") -> "TableEmitter":
        """Build an emitter from any object exposing effective ``field_separator`` / ``line_separator``."""
        return cls(policy.field_separator, policy.line_separator, missing)

    def render_value(self, value: Any) -> str:
        """Render one scalar; absent values become the missing placeholder."""
        if value is None or value is ABSENT:
            return self.missing
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)

    def render(self, values: Iterable[Any]) -> str:
        """Join *values* into one terminated output line."""
        return self.field_separator.join(self.render_value(v) for v in values) + self.line_separator

    def render_record(self, columns: Iterable[Any], record: Mapping[Any, Any]) -> str:
        """Render *record* in *columns* order, filling fields it lacks with the placeholder."""
        return self.render(record.get(column, ABSENT) for column in columns)

    def write(self, lines: Iterable[str], stream) -> int:
        """Write pre-rendered *lines* to *stream* and return how many were written."""
        count = 0
        for line in lines:
            stream.write(line)
            count += 1
        logger.debug("Wrote %d lines", count)
        return count
