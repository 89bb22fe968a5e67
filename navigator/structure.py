"""
Mapping between character offsets and the key/value structure of YAML text.

The structure is recovered from PyYAML's event stream rather than from a
composed node graph: composing fails on aliases whose anchors live in another
file, which is exactly the situation this package navigates.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

import yaml

from location.model import KeyValuePair, Span, Token

logger = logging.getLogger(__name__)


@dataclass
class DocumentStructure:
    """Key/value pairs and leaf tokens of a YAML text, in document order."""

    pairs: List[KeyValuePair] = field(default_factory=list)
    tokens: List[Token] = field(default_factory=list)


@dataclass
class _Collection:
    """An open mapping or sequence while walking the event stream."""

    is_mapping: bool
    flow: bool
    start: int
    last_end: Optional[int] = None
    expecting_key: bool = True
    key: Optional[Tuple[Optional[str], Span]] = None


class _StructureBuilder:
    def __init__(self, text: str):
        self.text = text
        self.structure = DocumentStructure()
        self._stack: List[_Collection] = []

    def feed(self, event: yaml.Event) -> None:
        if isinstance(event, (yaml.ScalarEvent, yaml.AliasEvent)):
            span = Span(event.start_mark.index, event.end_mark.index)
            is_alias = isinstance(event, yaml.AliasEvent)
            if span.end > span.start:
                self.structure.tokens.append(
                    Token(text=span.slice(self.text), span=span, is_alias=is_alias)
                )
            key_text = event.value if isinstance(event, yaml.ScalarEvent) else None
            self._node_done(span, key_text)

        elif isinstance(event, (yaml.MappingStartEvent, yaml.SequenceStartEvent)):
            self._stack.append(_Collection(
                is_mapping=isinstance(event, yaml.MappingStartEvent),
                flow=bool(event.flow_style),
                start=event.start_mark.index,
            ))

        elif isinstance(event, (yaml.MappingEndEvent, yaml.SequenceEndEvent)):
            collection = self._stack.pop()
            if collection.flow or collection.last_end is None:
                end = event.end_mark.index
            else:
                # Block collections end where the next token starts, which may
                # be several lines later; stop at the last child instead.
                end = collection.last_end
            self._node_done(Span(collection.start, end), None)

    def _node_done(self, span: Span, key_text: Optional[str]) -> None:
        if not self._stack:
            return
        parent = self._stack[-1]
        parent.last_end = span.end
        if not parent.is_mapping:
            return

        if parent.expecting_key:
            parent.key = (key_text, span)
            parent.expecting_key = False
            return

        parent.expecting_key = True
        if parent.key is None:
            return
        key, key_span = parent.key
        parent.key = None
        if key is None:
            # Complex (collection or alias) keys are not navigable.
            return
        self.structure.pairs.append(KeyValuePair(
            key=key,
            value=span.slice(self.text),
            key_span=key_span,
            value_span=span,
        ))


def scan_structure(text: str) -> DocumentStructure:
    """
    Collect the key/value pairs and leaf tokens of a YAML text.

    All documents of a multi-document stream are scanned. Text that stops
    being valid YAML part way through is scanned up to the error.
    """
    builder = _StructureBuilder(text)
    try:
        for event in yaml.parse(text, Loader=yaml.SafeLoader):
            builder.feed(event)
    except yaml.YAMLError as e:
        logger.debug("YAML structure scan stopped early: %s", e)

    structure = builder.structure
    structure.pairs.sort(key=lambda pair: pair.key_span.start)
    structure.tokens.sort(key=lambda token: token.span.start)
    return structure


def iter_key_value_pairs(text: str) -> Iterator[KeyValuePair]:
    """Iterate over the key/value pairs of a YAML text in document order."""
    yield from scan_structure(text).pairs


def find_key_value_pair(text: str, offset: int) -> Optional[KeyValuePair]:
    """
    Find the innermost key/value pair enclosing an offset.

    Args:
        text: YAML text.
        offset: Character offset, e.g. a click or caret position.

    Returns:
        The enclosing pair, or None if the offset is outside every pair.
    """
    enclosing = None
    for pair in scan_structure(text).pairs:
        if offset in pair.span:
            enclosing = pair
    return enclosing


def find_token(text: str, offset: int) -> Optional[Token]:
    """Find the scalar or alias token under an offset, if any."""
    found = None
    for token in scan_structure(text).tokens:
        if offset in token.span:
            found = token
    return found


class YamlTextMapper:
    """Text mapping backed by the PyYAML event stream."""

    def find_key_value_pair(self, text: str, offset: int) -> Optional[KeyValuePair]:
        return find_key_value_pair(text, offset)

    def find_token(self, text: str, offset: int) -> Optional[Token]:
        return find_token(text, offset)
