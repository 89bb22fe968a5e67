#!/usr/bin/env python3
"""
YAML Navigator CLI

Resolves the alias or import path at a position in a YAML document to the
file (and line/column) that defines it, the way an editor does on a
modifier-click.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from location.model import Document, KeyValuePair
from navigator.anchors import position_to_offset
from navigator.host import FileSystemReader
from navigator.resolver import ReferenceResolver
from reporters import TextReporter, JsonReporter


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="yamlnav",
        description="Resolve YAML aliases and import paths across files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  yamlnav app.yaml --offset 120          # Target of the click at offset 120
  yamlnav app.yaml --line 4 --column 9   # Same, with a zero-based caret
  yamlnav app.yaml --offset 120 -f json  # JSON output
  yamlnav app.yaml --offset 120 --declaration  # Show the enclosing key/value
        """,
    )

    parser.add_argument(
        "file",
        help="YAML document the click happened in",
    )

    # Click position
    parser.add_argument(
        "--offset",
        type=int,
        default=None,
        help="Character offset of the click",
    )

    parser.add_argument(
        "--line",
        type=int,
        default=None,
        help="Zero-based line of the click (use with --column)",
    )

    parser.add_argument(
        "--column",
        type=int,
        default=0,
        help="Zero-based column of the click (default: 0)",
    )

    parser.add_argument(
        "--no-modifier",
        action="store_true",
        help="Simulate a plain click, which never navigates",
    )

    # Output options
    parser.add_argument(
        "-f", "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )

    parser.add_argument(
        "--declaration",
        action="store_true",
        help="Print the key/value pair enclosing the position instead of resolving it",
    )

    # Logging options
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log resolution steps to stderr",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log errors",
    )

    return parser.parse_args(args)


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send log records to stderr at the level selected on the command line."""
    if verbose:
        level = logging.INFO
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _render_declaration(pair: KeyValuePair, fmt: str) -> str:
    if fmt == "json":
        return json.dumps({
            "key": pair.key,
            "value": pair.value,
            "start": pair.span.start,
            "end": pair.span.end,
        }, indent=2)
    return f"{pair.key}: {pair.value} [{pair.span.start}, {pair.span.end})"


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)
    configure_logging(parsed.verbose, parsed.quiet)

    file_path = Path(parsed.file)
    try:
        document = Document.from_file(file_path)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading '{parsed.file}': {e}", file=sys.stderr)
        return 1

    if parsed.offset is not None:
        offset = parsed.offset
    elif parsed.line is not None:
        offset = position_to_offset(document.text, parsed.line, parsed.column)
    else:
        print("Error: either --offset or --line is required", file=sys.stderr)
        return 1

    reporter = JsonReporter() if parsed.format == "json" else TextReporter()
    resolver = ReferenceResolver(file_reader=FileSystemReader(), sink=reporter)

    if parsed.declaration:
        pair = resolver.find_declaration(document, offset)
        if pair is None:
            return 2
        print(_render_declaration(pair, parsed.format))
        return 0

    resolver.resolve_click(document, offset, is_modifier_held=not parsed.no_modifier)

    output = reporter.render()
    if output:
        print(output)

    return 0 if reporter.found else 2


if __name__ == "__main__":
    sys.exit(main())
