"""Error hierarchy for the flattab converters.

Only configuration-class problems are errors.  Ragged lines, absent fields,
empty input and zero inferred columns all degrade to empty output instead.
"""

from difflib import get_close_matches


class FlattabError(Exception):
    """Base class for errors the command-line layer turns into a non-zero exit."""


class UnknownColumn(FlattabError, KeyError):
    """A requested output column matches none of the known column names."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = list(known)
        self.suggestions = suggest_similar_names(name, self.known)
        super().__init__(name)

    def __str__(self) -> str:
        message = f"Unknown column {self.name!r}"
        if self.suggestions:
            message += f" (did you mean: {', '.join(self.suggestions)}?)"
        elif self.known:
            message += f" (known columns: {', '.join(self.known)})"
        return message


class MalformedTree(FlattabError, TypeError):
    """A tree node is neither an object, an array, a scalar nor null."""

    def __init__(self, path: str, node: object):
        self.path = path
        self.node_type = type(node).__name__
        super().__init__(f"Cannot flatten {self.node_type} value at {path or '(root)'!r}")


def suggest_similar_names(name: str, known: list[str], n: int = 3) -> list[str]:
    """Return up to *n* names from *known* that are close to *name*."""
    return get_close_matches(name, known, n=n, cutoff=0.6)
