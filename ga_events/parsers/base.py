"""
Base parser protocol / ABC for ga-events.

All table parsers must implement this interface. The contract is:
1. parse() takes a file path and returns a ParsedTable.
2. ParsedTable carries the header, the raw data rows (verbatim cell
   text) and the rows keyed by header name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class ParsedTable:
    """Standardized output from any parser.

    Attributes:
        name: Table name (the source file stem). Becomes the EventGroup name.
        headers: Column names, from the first record or supplied externally.
        rows: Data rows (header row excluded), each an ordered list of
            raw cell strings.  Quote characters are kept verbatim.
        keyed_rows: ``rows`` paired positionally with ``headers``.
            Empty and whitespace-only cells are omitted.
    """
    name: str
    headers: list[str]
    rows: list[list[str]] = field(default_factory=list)
    keyed_rows: list[dict[str, str]] = field(default_factory=list)


class BaseParser(ABC):
    """Abstract base class for table parsers."""

    @abstractmethod
    def parse(self, path: str | Path, **options) -> ParsedTable:
        """Parse a table file.

        Args:
            path: Path to the table file.
            **options: Parser-specific options (separator, headers, ...).

        Returns:
            ParsedTable with header, rows and keyed rows.

        Raises:
            ParsingError: If the table has no header row.
        """
