"""
Parsers sub-package for ga-events.

Contains the parsers that turn raw table text into a standardized
intermediate representation (header + rows + keyed rows).

Design: Strategy Pattern
- base.py defines the BaseParser ABC (protocol) and ParsedTable result.
- delimited.py implements DelimitedTextParser, the quote-aware splitter
  for delimiter-separated text.
"""

from ga_events.parsers.base import BaseParser, ParsedTable
from ga_events.parsers.delimited import DelimitedTextParser

__all__ = ["BaseParser", "ParsedTable", "DelimitedTextParser"]
