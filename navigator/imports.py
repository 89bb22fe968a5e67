"""Extraction of the ``import`` declaration from a YAML document header."""

import logging
import re
from typing import Any, List

import yaml

logger = logging.getLogger(__name__)

IMPORT_KEY = "import"

# A line made of three or more dashes separates YAML documents.
DOCUMENT_SEPARATOR = re.compile(r"^-{3,}\s*$", re.MULTILINE)


class HeaderLoader(yaml.SafeLoader):
    """
    Safe loader that tolerates aliases to anchors defined in other files.

    Such aliases load as null instead of failing the whole header.
    """

    def compose_node(self, parent, index):
        if self.check_event(yaml.AliasEvent):
            event = self.peek_event()
            if event.anchor not in self.anchors:
                self.get_event()
                return yaml.ScalarNode(
                    "tag:yaml.org,2002:null", "", event.start_mark, event.end_mark
                )
        return super().compose_node(parent, index)


def get_header(document_text: str) -> str:
    """
    Return the header region of a document.

    The header is everything before the first document separator line,
    stripped of surrounding whitespace. A document without a separator is
    header in its entirety.
    """
    return DOCUMENT_SEPARATOR.split(document_text, maxsplit=1)[0].strip()


def extract_import_paths(document_text: str) -> List[str]:
    """
    Extract the import paths declared in a document header.

    The header must parse as a YAML mapping with an ``import`` key whose value
    is either a string or a sequence. Non-string sequence items are dropped.

    Args:
        document_text: Full text of the document.

    Returns:
        Import path strings in declaration order; empty if the document
        declares no imports or the header cannot be parsed.
    """
    header = get_header(document_text)
    if not header:
        return []

    try:
        data = yaml.load(header, Loader=HeaderLoader)
    except yaml.YAMLError as e:
        logger.debug("Could not parse document header: %s", e)
        return []

    if not isinstance(data, dict):
        return []

    return _as_path_list(data.get(IMPORT_KEY))


def _as_path_list(value: Any) -> List[str]:
    """Normalize an ``import`` value to a list of path strings."""
    if isinstance(value, str):
        return [value]
    if isinstance(value, list):
        return [item for item in value if isinstance(item, str)]
    return []
