"""
Interfaces to the host environment (editor or command line).

The resolver only talks to its host through these narrow interfaces, so any
editor integration can supply its own implementations.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol

from location.model import KeyValuePair, Position, Token

logger = logging.getLogger(__name__)


class TextMapper(Protocol):
    """Maps offsets in a document to its key/value structure."""

    def find_key_value_pair(self, text: str, offset: int) -> Optional[KeyValuePair]:
        ...

    def find_token(self, text: str, offset: int) -> Optional[Token]:
        ...


class FileReader(Protocol):
    """Reads candidate files by absolute path."""

    def exists(self, path: Path) -> bool:
        ...

    def read_text(self, path: Path) -> Optional[str]:
        ...


class NavigationSink(Protocol):
    """Receives the outcome of a navigation request."""

    def open_file(self, path: Path) -> None:
        ...

    def open_file_at(self, path: Path, position: Position, anchor: Optional[str] = None) -> None:
        ...

    def no_target(self, reason: str) -> None:
        ...


class FileSystemReader:
    """File reader over the local filesystem."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def exists(self, path: Path) -> bool:
        try:
            return Path(path).is_file()
        except (OSError, ValueError):
            return False

    def read_text(self, path: Path) -> Optional[str]:
        """
        Read a file's full text.

        Returns:
            The file content, or None if the path is not a regular file or
            cannot be read or decoded.
        """
        path = Path(path)
        if not self.exists(path):
            return None
        try:
            return path.read_text(encoding=self.encoding)
        except (OSError, UnicodeDecodeError) as e:
            logger.info("Could not read %s: %s", path, e)
            return None
