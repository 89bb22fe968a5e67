"""Location of ``&anchor`` definitions and offset/position translation."""

import re
from typing import Optional

from location.model import Position

ANCHOR_PREFIX = "&"

# An anchor name runs until whitespace or a flow indicator, so &node must not
# match inside &nodeX or &node-x.
ANCHOR_END = r"(?=[\s,\[\]{}]|\Z)"


def _anchor_pattern(anchor_name: str) -> "re.Pattern[str]":
    return re.compile(re.escape(ANCHOR_PREFIX + anchor_name) + ANCHOR_END)


def find_anchor_offset(file_text: str, anchor_name: str) -> Optional[int]:
    """Return the offset of the first ``&anchor_name`` in ``file_text``, or None."""
    if not anchor_name:
        return None
    match = _anchor_pattern(anchor_name).search(file_text)
    return match.start() if match else None


def locate_anchor(file_text: str, anchor_name: str) -> Optional[Position]:
    """
    Find where an anchor is defined in a file.

    The first textual occurrence of ``&anchor_name`` as a whole word is the
    definition, even if the same anchor is redefined further down.

    Args:
        file_text: Raw text of the candidate file.
        anchor_name: Anchor name without the leading ``&``.

    Returns:
        Position of the ``&`` character, or None if the anchor does not
        occur in the text.
    """
    offset = find_anchor_offset(file_text, anchor_name)
    if offset is None:
        return None
    return offset_to_position(file_text, offset)


def offset_to_position(text: str, offset: int) -> Position:
    """
    Convert a character offset to a zero-based line and column.

    The line is the number of newlines before ``offset``; the column is the
    number of characters since the last of them. Offsets outside the text
    are clamped.
    """
    offset = max(0, min(offset, len(text)))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return Position(line=line, column=offset - line_start)


def position_to_offset(text: str, line: int, column: int) -> int:
    """
    Convert a zero-based line and column to a character offset.

    Lines past the end of the text map to the end of the text; columns past
    the end of a line map to the end of that line.
    """
    line_start = 0
    for _ in range(max(line, 0)):
        newline = text.find("\n", line_start)
        if newline == -1:
            return len(text)
        line_start = newline + 1

    line_end = text.find("\n", line_start)
    if line_end == -1:
        line_end = len(text)
    return min(line_start + max(column, 0), line_end)
