"""Resolve requested output columns against the tokenised table.

A column is identified either by its zero-based position (no header row) or
by the name the header row gave it.  Requested names are resolved once,
before any row is produced, into a fixed list of column identities; an
unmatched name raises UnknownColumn.  When several columns match a name
(duplicate headers, or distinct headers that case-fold together) the
leftmost one wins.
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from flattab.errors import UnknownColumn

logger = logging.getLogger(__name__)


# ─── Column Identity ──────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ByIndex:
    """A column known only by its position."""

    index: int

    @property
    def label(self) -> str:
        return str(self.index)


@dataclass(frozen=True)
class ByName:
    """A column named by the header row."""

    index: int
    name: str

    @property
    def label(self) -> str:
        return self.name


ColumnIdentity = ByIndex | ByName


def column_identities(column_count: int, header: Sequence[str] | None = None) -> list[ColumnIdentity]:
    """Identify every column, by header name when a header row is given."""
    if header is None:
        return [ByIndex(i) for i in range(column_count)]
    return [ByName(i, name) for i, name in enumerate(header)]


def _match_key(name: str, ignore_case: bool) -> str:
    return name.casefold() if ignore_case else name


def resolve_columns(
    identities: Sequence[ColumnIdentity],
    requested: Sequence[str],
    ignore_case: bool = False,
) -> list[ColumnIdentity]:
    """Map *requested* names onto *identities*; an empty request selects every column in order."""
    if not requested:
        return list(identities)

    # First occurrence of each key wins, so ambiguous names resolve leftmost
    index: dict[str, ColumnIdentity] = {}
    for identity in identities:
        index.setdefault(_match_key(identity.label, ignore_case), identity)

    resolved: list[ColumnIdentity] = []
    for name in requested:
        identity = index.get(_match_key(name, ignore_case))
        if identity is None:
            raise UnknownColumn(name, [known.label for known in identities])
        resolved.append(identity)

    logger.debug("Resolved columns %s -> %s", list(requested), [identity.index for identity in resolved])
    return resolved


# ─── Selector ─────────────────────────────────────────────────────────────────


class ColumnSelector:
    """Project tokenised rows onto a resolved, ordered column list."""

    def __init__(self, columns: Sequence[ColumnIdentity]):
        self.columns = list(columns)

    @classmethod
    def resolve(
        cls,
        column_count: int,
        requested: Sequence[str] = (),
        header: Sequence[str] | None = None,
        ignore_case: bool = False,
    ) -> "ColumnSelector":
        """Build a selector for a table of *column_count* columns, optionally named by *header*."""
        return cls(resolve_columns(column_identities(column_count, header), requested, ignore_case))

    @property
    def names(self) -> list[str]:
        """Output header labels in selection order."""
        return [column.label for column in self.columns]

    def select(self, row: Sequence[str]) -> list[str]:
        """Return the selected fields of *row*; fields the row lacks are ``""``."""
        return [row[column.index] if column.index < len(row) else "" for column in self.columns]
