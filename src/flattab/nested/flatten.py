"""Flatten one JSON-like tree into flat rows.

A row maps a PathKey (the tuple of object keys leading to a value) to a
scalar.  The structural rules are:

  - scalar at P         -> one row {P: value}
  - null at P           -> one row {P: ABSENT}
  - object at P         -> cross product of its children's rows, each child at P + (key,)
  - array at P          -> union of its elements' rows, every element at P itself

Objects multiply because sibling fields are independent dimensions; arrays
add because their elements are alternative values of one field.  Example:

    {"title": "T", "authors": ["X", "Y"]}
    -> {("title",): "T", ("authors",): "X"}
       {("title",): "T", ("authors",): "Y"}

flatten() is a pure generator function: calling it again on the same tree
restarts the sequence.
"""

import itertools
import logging
from collections.abc import Iterator
from typing import Any

from flattab.emit import ABSENT
from flattab.errors import MalformedTree

logger = logging.getLogger(__name__)

PathKey = tuple[str, ...]
FlatRecord = dict[PathKey, Any]

# JsonNumber from the reader is a str, so it is covered here too
SCALAR_TYPES = (str, bool, int, float)


def join_path(key: PathKey, separator: str = ".") -> str:
    """Join path segments into a flat column name."""
    return separator.join(key)


def flatten(node: Any, prefix: PathKey = ()) -> Iterator[FlatRecord]:
    """Yield every flat row of *node*, with each path rooted at *prefix*.

    Raises MalformedTree for a node that is not an object, array, scalar or null.
    """
    if isinstance(node, dict):
        yield from _flatten_object(node, prefix)
    elif isinstance(node, list):
        yield from _flatten_array(node, prefix)
    elif node is None:
        yield {prefix: ABSENT}
    elif isinstance(node, SCALAR_TYPES):
        yield {prefix: node}
    else:
        raise MalformedTree(join_path(prefix), node)


def _flatten_object(obj: dict, prefix: PathKey) -> Iterator[FlatRecord]:
    # Each child's alternatives are materialised once so the product can revisit them
    choices = [tuple(flatten(value, prefix + (str(key),))) for key, value in obj.items()]
    for combination in itertools.product(*choices):
        merged: FlatRecord = {}
        for part in combination:
            merged.update(part)
        yield merged


def _flatten_array(array: list, prefix: PathKey) -> Iterator[FlatRecord]:
    # An empty array still holds its place so sibling fields keep their rows
    if not array:
        yield {prefix: ABSENT}
        return
    for element in array:
        yield from flatten(element, prefix)


def flatten_records(records: list[Any]) -> list[FlatRecord]:
    """Flatten every top-level record and concatenate the resulting rows."""
    rows: list[FlatRecord] = []
    for record in records:
        rows.extend(flatten(record))
    logger.info("Flattened %d records into %d rows", len(records), len(rows))
    return rows
