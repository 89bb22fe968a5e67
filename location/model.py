"""Data model for documents, source spans and resolved navigation targets."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class Position:
    """Zero-based line and column inside a text."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, character {self.column}"


@dataclass(frozen=True)
class Span:
    """Half-open character range ``[start, end)`` inside a text."""

    start: int
    end: int

    def __contains__(self, offset: int) -> bool:
        # End inclusive: a caret placed right after a token still belongs to it.
        return self.start <= offset <= self.end

    def slice(self, text: str) -> str:
        """Return the part of ``text`` covered by this span."""
        return text[self.start:self.end]


@dataclass(frozen=True)
class Token:
    """A scalar or alias leaf of a YAML document, as written in the source."""

    text: str
    span: Span
    is_alias: bool = False


@dataclass(frozen=True)
class KeyValuePair:
    """
    One mapping entry of a YAML document.

    ``value`` is the raw source text of the value node (quotes, alias marker
    and nested collections included) and is empty when the key has no value.
    """

    key: str
    value: str
    key_span: Span
    value_span: Span

    @property
    def span(self) -> Span:
        """Range from the start of the key to the end of the value."""
        return Span(self.key_span.start, max(self.key_span.end, self.value_span.end))

    @property
    def is_alias(self) -> bool:
        return self.value.startswith("*")


@dataclass(frozen=True)
class Document:
    """
    Snapshot of the document the user is working in.

    Args:
        directory: Absolute directory of the document; import paths are
            resolved against it.
        text: Full text content.
        path: Optional path of the backing file, used for diagnostics only.
    """

    directory: Path
    text: str
    path: Optional[Path] = None

    @classmethod
    def from_file(cls, file_path: Path) -> "Document":
        """
        Load a document from disk.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        resolved = file_path.resolve()
        return cls(
            directory=resolved.parent,
            text=resolved.read_text(encoding="utf-8"),
            path=resolved,
        )


@dataclass(frozen=True)
class ResolvedLocation:
    """
    A navigation target.

    Import navigation yields a bare file path; anchor navigation also carries
    the position of the ``&anchor`` definition and the anchor name.
    """

    path: Path
    position: Optional[Position] = None
    anchor: Optional[str] = None

    @property
    def has_position(self) -> bool:
        return self.position is not None

    def __str__(self) -> str:
        if self.position is None:
            return str(self.path)
        return f"{self.path} ({self.position})"
