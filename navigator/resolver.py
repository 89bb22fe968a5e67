"""Resolution of a click in a YAML document to a navigation target."""

import logging
from typing import Optional, Tuple

from location.model import Document, KeyValuePair, ResolvedLocation, Token
from .anchors import locate_anchor
from .host import FileReader, NavigationSink, TextMapper, FileSystemReader
from .imports import IMPORT_KEY, extract_import_paths
from .paths import resolve_import_path
from .structure import YamlTextMapper

logger = logging.getLogger(__name__)

ALIAS_PREFIX = "*"

_Outcome = Tuple[Optional[ResolvedLocation], str]


class ReferenceResolver:
    """
    Resolves alias values and import paths to the files that define them.

    Every call works from scratch: the document and each candidate file are
    re-read and re-parsed, nothing is cached between calls.

    Args:
        file_reader: Reads candidate files (default: the local filesystem).
        text_mapper: Maps click offsets to key/value pairs and tokens
            (default: PyYAML based mapping).
        sink: Optional receiver of the outcome of ``resolve_click``.
    """

    def __init__(
        self,
        file_reader: Optional[FileReader] = None,
        text_mapper: Optional[TextMapper] = None,
        sink: Optional[NavigationSink] = None,
    ):
        self.file_reader = file_reader if file_reader is not None else FileSystemReader()
        self.text_mapper = text_mapper if text_mapper is not None else YamlTextMapper()
        self.sink = sink

    def resolve_click(
        self,
        document: Document,
        clicked_offset: int,
        is_modifier_held: bool,
    ) -> Optional[ResolvedLocation]:
        """
        Resolve a click in ``document`` to a navigation target.

        Plain clicks (modifier not held) never navigate. The outcome is also
        reported to the sink, if one is configured.

        Returns:
            The target, or None if there is nothing to navigate to.
        """
        if not is_modifier_held:
            location, reason = None, "Navigation modifier not held"
        else:
            location, reason = self._resolve_offset(document, clicked_offset)

        if location is None:
            logger.debug("No navigation target: %s", reason)
        else:
            logger.debug("Navigation target: %s", location)
        self._report(location, reason)
        return location

    def resolve_reference(
        self,
        document: Document,
        pair: KeyValuePair,
        token: Optional[Token] = None,
    ) -> Optional[ResolvedLocation]:
        """
        Resolve an already located key/value pair.

        Args:
            document: The document containing ``pair``.
            pair: The key/value pair under the cursor.
            token: The token under the cursor; required to navigate from
                the ``import`` key.
        """
        location, _ = self._resolve_pair(document, pair, token)
        return location

    def find_declaration(self, document: Document, offset: int) -> Optional[KeyValuePair]:
        """Return the key/value pair at ``offset``, the span a host may highlight."""
        return self.text_mapper.find_key_value_pair(document.text, offset)

    def _resolve_offset(self, document: Document, offset: int) -> _Outcome:
        pair = self.text_mapper.find_key_value_pair(document.text, offset)
        if pair is None:
            return None, f"No key/value pair at offset {offset}"
        token = self.text_mapper.find_token(document.text, offset)
        return self._resolve_pair(document, pair, token)

    def _resolve_pair(
        self,
        document: Document,
        pair: KeyValuePair,
        token: Optional[Token],
    ) -> _Outcome:
        if pair.is_alias:
            anchor_name = pair.value[len(ALIAS_PREFIX):].strip()
            return self._resolve_anchor(document, anchor_name)
        if pair.key == IMPORT_KEY:
            if token is None:
                return None, "No import path under the cursor"
            return self._resolve_import(document, token.text)
        return None, f"Key '{pair.key}' is neither an alias nor an import"

    def _resolve_anchor(self, document: Document, anchor_name: str) -> _Outcome:
        """Search the imports in declaration order; the first match wins."""
        for import_path in extract_import_paths(document.text):
            resolved = resolve_import_path(document.directory, import_path)
            content = self.file_reader.read_text(resolved)
            if content is None:
                logger.info("File not found: %s", resolved)
                continue

            position = locate_anchor(content, anchor_name)
            if position is None:
                continue

            logger.info("Anchor '%s' found in %s at %s", anchor_name, resolved, position)
            return ResolvedLocation(path=resolved, position=position, anchor=anchor_name), ""

        return None, f"Anchor '{anchor_name}' not found in any import"

    def _resolve_import(self, document: Document, import_path: str) -> _Outcome:
        resolved = resolve_import_path(document.directory, import_path)
        readable = self.file_reader.exists(resolved) and self.file_reader.read_text(resolved) is not None
        if not readable:
            logger.info("File not found at path: %s", resolved)
            return None, f"File not found at path: {resolved}"

        logger.info("Navigating to import path: %s", resolved)
        return ResolvedLocation(path=resolved), ""

    def _report(self, location: Optional[ResolvedLocation], reason: str) -> None:
        if self.sink is None:
            return
        if location is None:
            self.sink.no_target(reason)
        elif not location.has_position:
            self.sink.open_file(location.path)
        else:
            self.sink.open_file_at(location.path, location.position, location.anchor)
