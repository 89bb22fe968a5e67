"""Reporters that render navigation outcomes in various output formats."""

from .text_reporter import TextReporter, to_text
from .json_reporter import JsonReporter, to_json

__all__ = ["TextReporter", "to_text", "JsonReporter", "to_json"]
