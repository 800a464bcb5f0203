"""Character classes and compiled patterns for justified-table parsing.

Used by policy.py to classify characters and by spans.py to find the
whitespace runs that separate columns.
"""

import re

# ─── Border Glyphs ────────────────────────────────────────────────────────────

# ASCII rule characters used to draw tables by hand
ASCII_BORDER_CHARS = frozenset("+-|")

# Unicode "Box Drawing" block, U+2500 .. U+257F (─ │ ┌ ┐ └ ┘ ├ ┤ ┬ ┴ ┼ ═ ║ ╔ ...)
BOX_DRAWING_CHARS = frozenset(chr(code) for code in range(0x2500, 0x2580))

BORDER_CHARS = ASCII_BORDER_CHARS | BOX_DRAWING_CHARS


# ─── Control Separators ───────────────────────────────────────────────────────

UNIT_SEPARATOR = "\x1f"
RECORD_SEPARATOR = "\x1e"
NUL = "\x00"


# ─── Whitespace Runs ──────────────────────────────────────────────────────────

# Whitespace that separates columns in double-or-more mode: two or more
# consecutive whitespace characters, or any padding at either end of the line
DOUBLE_WHITESPACE_RE = re.compile(r"^\s+|\s{2,}|\s+$")

# Trailing line terminators left by line readers
LINE_ENDING_RE = re.compile(r"[\r\n]+$")
