"""
Quote-aware parser for delimiter-separated table text.

Splitting happens at two levels, both with the same splitter:

1. **Records**: the text is split on ``"\\n"``; records that are empty or
   whitespace-only are dropped (their content is otherwise kept as-is).
2. **Cells**: each record is split on the separator.

The splitter first splits naively on every occurrence of the delimiter,
then folds the fragments left to right.  While the last merged entry
holds an odd number of ``"`` characters a quoted field is still open, so
the next fragment is glued back onto it with the delimiter re-inserted.

Every ``"`` counts the same -- ``""`` is not treated as an escaped quote,
and no unquoting is performed.  A quote that is never closed keeps
merging fragments until the end of the input.  The parser never raises
on malformed quoting.

Callers must normalize ``"\\r\\n"`` to ``"\\n"`` before calling
``parse_rows()``; ``DelimitedTextParser`` does this for you.
"""

from __future__ import annotations

import logging
from functools import reduce
from pathlib import Path

from ga_events.exceptions import ParsingError
from ga_events.parsers.base import BaseParser, ParsedTable
from ga_events.reader import normalize_newlines, read_table_text, table_name
from ga_events.transforms.keying import key_rows

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ","
RECORD_SEPARATOR = "\n"
QUOTE = '"'


# ---------------------------------------------------------------------------
# Splitting primitives
# ---------------------------------------------------------------------------

def has_open_quote(fragment: str) -> bool:
    """True when *fragment* contains an odd number of ``"`` characters."""
    return fragment.count(QUOTE) % 2 == 1


def split_quoted(delimiter: str, text: str) -> list[str]:
    """Split *text* on *delimiter*, except inside a quoted field.

    Examples::

        >>> split_quoted(",", 'a,"b,c",d')
        ['a', '"b,c"', 'd']
        >>> split_quoted(",", 'x,"y,z')
        ['x', '"y,z']

    Raises:
        ValueError: If *delimiter* is empty.
    """
    if not delimiter:
        raise ValueError("Delimiter must be a non-empty string")

    def merge(merged: tuple[str, ...], fragment: str) -> tuple[str, ...]:
        if merged and has_open_quote(merged[-1]):
            return merged[:-1] + (merged[-1] + delimiter + fragment,)
        return merged + (fragment,)

    return list(reduce(merge, text.split(delimiter), ()))


def split_records(text: str) -> list[str]:
    """Split normalized table text into records, dropping blank ones."""
    return [
        record
        for record in split_quoted(RECORD_SEPARATOR, text)
        if record.strip()
    ]


def split_cells(record: str, separator: str = DEFAULT_SEPARATOR) -> list[str]:
    """Split a single record into its raw cell strings."""
    return split_quoted(separator, record)


def parse_rows(text: str, separator: str = DEFAULT_SEPARATOR) -> list[list[str]]:
    """Parse normalized table text into rows of raw cells.

    Args:
        text: Full table content with ``"\\r\\n"`` already converted to
            ``"\\n"``.
        separator: Cell delimiter.  May also appear inside quoted fields.

    Returns:
        One list of cell strings per non-blank record, in input order.
    """
    return [split_cells(record, separator) for record in split_records(text)]


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------

class DelimitedTextParser(BaseParser):
    """Parser for delimiter-separated table files (CSV by default).

    The first record is the header row unless *headers* is supplied, in
    which case every record is a data row.
    """

    def parse(
        self,
        path: str | Path,
        separator: str = DEFAULT_SEPARATOR,
        headers: list[str] | None = None,
        encoding: str = "utf-8-sig",
    ) -> ParsedTable:
        text = read_table_text(path, encoding=encoding)
        return self.parse_text(
            table_name(path), text, separator=separator, headers=headers
        )

    def parse_text(
        self,
        name: str,
        text: str,
        separator: str = DEFAULT_SEPARATOR,
        headers: list[str] | None = None,
    ) -> ParsedTable:
        """Parse already-loaded table text.

        Args:
            name: Table name to attach to the result.
            text: Raw table text.  ``"\\r\\n"`` is normalized here.
            separator: Cell delimiter.
            headers: Optional external header row.

        Raises:
            ParsingError: If *headers* is not given and the text has no
                records at all.
        """
        rows = parse_rows(normalize_newlines(text), separator)

        if headers is None:
            if not rows:
                raise ParsingError(
                    f"Table '{name}' is empty: no header row found. "
                    "Supply headers explicitly or add a header record."
                )
            headers, rows = rows[0], rows[1:]
        else:
            headers = list(headers)

        logger.debug(
            "Parsed table '%s': %d header(s), %d data row(s)",
            name, len(headers), len(rows),
        )
        return ParsedTable(
            name=name,
            headers=headers,
            rows=rows,
            keyed_rows=key_rows(rows, headers),
        )
