"""Read JSON input into trees whose numbers keep their exact source text.

``json`` would turn ``1.50`` into ``1.5`` and ``1e3`` into ``1000.0``; numbers
are parsed into JsonNumber (a ``str`` subclass) instead so the flattened
output repeats them byte for byte.
"""

import json
import logging
from collections.abc import Iterator
from typing import Any, TextIO

logger = logging.getLogger(__name__)


class JsonNumber(str):
    """A JSON numeric literal kept as the text it was written as."""

    __slots__ = ()

    def __repr__(self) -> str:
        return f"JsonNumber({str.__repr__(self)})"


def loads(text: str) -> Any:
    """Parse one JSON document, keeping numeric literals as JsonNumber."""
    return json.loads(text, parse_int=JsonNumber, parse_float=JsonNumber, parse_constant=JsonNumber)


def read_document(stream: TextIO) -> Any:
    """Parse the whole of *stream* as a single JSON document."""
    text = stream.read()
    if not text.strip():
        logger.info("Empty input document")
        return []
    return loads(text)


def read_json_lines(stream: TextIO) -> Iterator[Any]:
    """Yield one parsed tree per non-blank line of *stream*."""
    for line_num, line in enumerate(stream, start=1):
        if not line.strip():
            continue
        try:
            yield loads(line)
        except json.JSONDecodeError:
            logger.error("Malformed JSON on line %d", line_num)
            raise


def top_level_records(tree: Any) -> list[Any]:
    """Split a document into records: the elements of a top-level array, otherwise the tree itself."""
    if isinstance(tree, list):
        return tree
    return [tree]
