"""Main flatten pipeline: JSON records in, delimited lines out.

    records -> flatten (per record) -> unify schema (all rows) -> emit

Every row is held in memory between the schema pass and the emit pass.
"""

import logging
from collections.abc import Iterable, Iterator
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from flattab.config import UNNEST_ATTRIBUTE_SEPARATOR, UNNEST_LINE_DELIMITER, UNNEST_MISSING, UNNEST_OUTPUT_DELIMITER
from flattab.emit import TableEmitter
from flattab.nested.flatten import FlatRecord, flatten_records
from flattab.nested.schema import Schema, unify

logger = logging.getLogger(__name__)


class UnnestOptions(BaseModel):
    """Output settings for flatten mode."""

    model_config = ConfigDict(frozen=True)

    output_delimiter: str = UNNEST_OUTPUT_DELIMITER
    line_delimiter: str = UNNEST_LINE_DELIMITER
    attribute_separator: str = UNNEST_ATTRIBUTE_SEPARATOR
    missing: str = UNNEST_MISSING
    json_lines: bool = False

    @model_validator(mode="after")
    def validate_attribute_separator(self) -> "UnnestOptions":
        """An empty separator would glue nested keys together."""
        if not self.attribute_separator:
            raise ValueError("attribute_separator must not be empty")
        return self

    def emitter(self) -> TableEmitter:
        return TableEmitter(self.output_delimiter, self.line_delimiter, self.missing)


def run(records: Iterable[Any], options: UnnestOptions) -> Iterator[str]:
    """Flatten top-level *records* and return the rendered header and rows.

    Every record is flattened before this returns, so a MalformedTree is
    raised before any line is produced.  No columns means no output.
    """
    schema, rows = unify(flatten_records(list(records)), options.attribute_separator)
    if not len(schema):
        return iter(())
    return _render(options.emitter(), schema, rows)


def _render(emitter: TableEmitter, schema: Schema, rows: list[FlatRecord]) -> Iterator[str]:
    yield emitter.render(schema.names)
    for row in rows:
        yield emitter.render_record(schema.keys, row)
