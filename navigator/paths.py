"""Resolution of import path strings against a document directory."""

import os
from pathlib import Path
from typing import Union

QUOTE_CHARS = ("'", '"')


def clean_import_path(raw_path: str) -> str:
    """
    Normalize an import path string as written in a document.

    Strips surrounding whitespace, a leading ``./`` and one layer of matching
    surrounding quotes.

    Args:
        raw_path: Path string, possibly quoted.

    Returns:
        The cleaned path string (may be empty).
    """
    cleaned = raw_path.strip()

    if cleaned.startswith("./"):
        cleaned = cleaned[2:]

    if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in QUOTE_CHARS:
        cleaned = cleaned[1:-1]

    return cleaned


def resolve_import_path(base_directory: Union[str, Path], raw_path: str) -> Path:
    """
    Resolve an import path to a canonical absolute path.

    The path is always resolved against ``base_directory`` (the directory of
    the document being edited), never against the directory of another
    imported file. Whether the result exists is not checked here.

    Args:
        base_directory: Directory of the current document.
        raw_path: Import path string as written in the document.

    Returns:
        Absolute path with ``.``/``..`` collapsed and symlinks followed.
    """
    joined = Path(base_directory) / clean_import_path(raw_path)
    try:
        return joined.resolve()
    except (OSError, RuntimeError, ValueError):
        # Symlink loop or NUL character: fall back to a lexical normalization.
        return Path(os.path.normpath(joined.absolute()))
