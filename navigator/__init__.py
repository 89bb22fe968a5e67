"""Navigator module for resolving YAML aliases and imports across files."""

from .anchors import locate_anchor, offset_to_position, position_to_offset
from .host import FileSystemReader
from .imports import extract_import_paths
from .paths import resolve_import_path
from .resolver import ReferenceResolver
from .structure import YamlTextMapper, find_key_value_pair, find_token

__all__ = [
    "locate_anchor",
    "offset_to_position",
    "position_to_offset",
    "FileSystemReader",
    "extract_import_paths",
    "resolve_import_path",
    "ReferenceResolver",
    "YamlTextMapper",
    "find_key_value_pair",
    "find_token",
]
