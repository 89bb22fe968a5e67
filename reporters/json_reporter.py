"""JSON reporter for navigation outcomes (machine-friendly format)."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

from location.model import Position, ResolvedLocation


def _outcome(
    path: Optional[Path] = None,
    position: Optional[Position] = None,
    anchor: Optional[str] = None,
    reason: Optional[str] = None,
) -> Dict[str, Any]:
    return {
        "found": path is not None,
        "path": str(path).replace("\\", "/") if path is not None else None,
        "line": position.line if position is not None else None,
        "column": position.column if position is not None else None,
        "anchor": anchor,
        "reason": reason or None,
    }


def to_json(
    location: Optional[ResolvedLocation],
    reason: str = "",
    indent: int = 2,
) -> str:
    """
    Convert a navigation outcome to JSON.

    Line and column stay zero-based.

    Args:
        location: The resolved target, or None.
        reason: Message recorded when there is no target.
        indent: JSON indentation level.

    Returns:
        JSON string with the keys ``found``, ``path``, ``line``, ``column``,
        ``anchor`` and ``reason``.
    """
    if location is None:
        data = _outcome(reason=reason)
    else:
        data = _outcome(location.path, location.position, location.anchor)
    return json.dumps(data, indent=indent)


class JsonReporter:
    """Navigation sink that collects outcomes as JSON-ready dicts."""

    def __init__(self, indent: int = 2):
        self.indent = indent
        self.outcomes: List[Dict[str, Any]] = []

    @property
    def found(self) -> bool:
        return any(outcome["found"] for outcome in self.outcomes)

    def open_file(self, path: Path) -> None:
        self.outcomes.append(_outcome(path))

    def open_file_at(self, path: Path, position: Position, anchor: Optional[str] = None) -> None:
        self.outcomes.append(_outcome(path, position, anchor))

    def no_target(self, reason: str) -> None:
        self.outcomes.append(_outcome(reason=reason))

    def render(self) -> str:
        """Render the last outcome, or an empty result if nothing was reported."""
        data = self.outcomes[-1] if self.outcomes else _outcome()
        return json.dumps(data, indent=self.indent)
