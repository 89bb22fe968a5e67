"""Text reporter for navigation outcomes (editor-friendly format)."""

from pathlib import Path
from typing import List, Optional

from location.model import Position, ResolvedLocation


def to_text(location: Optional[ResolvedLocation]) -> str:
    """
    Render a navigation outcome as a single line.

    Positioned targets use the ``path:line:column`` convention understood by
    most editors and terminals, with one-based line and column.

    Args:
        location: The resolved target, or None.

    Returns:
        The rendered line; empty if there is no target.
    """
    if location is None:
        return ""
    if not location.has_position:
        return _format_path(location.path)
    return _format_position(location.path, location.position)


def _format_path(path: Path) -> str:
    return str(path).replace("\\", "/")


def _format_position(path: Path, position: Position) -> str:
    return f"{_format_path(path)}:{position.line + 1}:{position.column + 1}"


class TextReporter:
    """Navigation sink that collects one output line per target found."""

    def __init__(self):
        self.lines: List[str] = []
        self.reasons: List[str] = []
        self.found = False

    def open_file(self, path: Path) -> None:
        self.found = True
        self.lines.append(_format_path(path))

    def open_file_at(self, path: Path, position: Position, anchor: Optional[str] = None) -> None:
        self.found = True
        self.lines.append(_format_position(path, position))

    def no_target(self, reason: str) -> None:
        # Kept out of the output: a miss is silent, like an editor click.
        self.reasons.append(reason)

    def render(self) -> str:
        return "\n".join(self.lines)
