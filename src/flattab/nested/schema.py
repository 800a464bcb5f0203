"""Column schema unioned across every flattened row of a run.

The schema is the set of all PathKeys seen, ordered by their joined name
(code-point order), so permuting the input records never changes the header.
Distinct keys that join to the same name keep separate columns, ordered by
their segment tuples.
"""

import logging
from collections.abc import Iterable

from pydantic import BaseModel, ConfigDict, model_validator

from flattab.config import UNNEST_ATTRIBUTE_SEPARATOR
from flattab.nested.flatten import FlatRecord, PathKey, join_path

logger = logging.getLogger(__name__)


class Schema(BaseModel):
    """Ordered, de-duplicated PathKeys fixed before any row is emitted."""

    model_config = ConfigDict(frozen=True)

    keys: tuple[PathKey, ...] = ()
    separator: str = UNNEST_ATTRIBUTE_SEPARATOR

    @model_validator(mode="before")
    @classmethod
    def sort_keys(cls, data):
        """De-duplicate and order keys by joined name, then by segments."""
        if isinstance(data, dict) and "keys" in data:
            separator = data.get("separator", UNNEST_ATTRIBUTE_SEPARATOR)
            unique = {tuple(key) for key in data["keys"]}
            data = {**data, "keys": tuple(sorted(unique, key=lambda key: (join_path(key, separator), key)))}
        return data

    @classmethod
    def from_records(cls, records: Iterable[FlatRecord], separator: str = UNNEST_ATTRIBUTE_SEPARATOR) -> "Schema":
        """Union the keys of every record."""
        seen: set[PathKey] = set()
        for record in records:
            seen.update(record)
        return cls(keys=seen, separator=separator)

    @property
    def names(self) -> list[str]:
        """Joined column names in schema order."""
        return [join_path(key, self.separator) for key in self.keys]

    def __len__(self) -> int:
        return len(self.keys)


def unify(records: Iterable[FlatRecord], separator: str = UNNEST_ATTRIBUTE_SEPARATOR) -> tuple[Schema, list[FlatRecord]]:
    """Materialise *records* and return them with their schema, ready for emission."""
    rows = list(records)
    schema = Schema.from_records(rows, separator)
    logger.info("Schema has %d columns across %d rows", len(schema), len(rows))
    return schema, rows
