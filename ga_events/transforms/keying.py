"""
Header keying transform for ga-events.

Pairs each raw data row positionally with the header row to build a
``{column_name: value}`` mapping.

Rules:
  - Cells beyond the last header column are dropped.
  - Short rows simply lack the trailing keys.
  - Cells whose stripped value is empty are omitted, so an absent key
    means "empty value", never "no such column".  "Stripped" is
    ``str.strip()``: every character with ``str.isspace()``, including
    control separators such as ``\\x0b`` and ``\\x1c``.
  - Duplicate header names: the later column overwrites the earlier one,
    since values are inserted in column order.
"""

from __future__ import annotations


def key_row(row: list[str], headers: list[str]) -> dict[str, str]:
    """Key a single row by *headers*."""
    keyed: dict[str, str] = {}
    for header, value in zip(headers, row):
        if value.strip():
            keyed[header] = value
    return keyed


def key_rows(rows: list[list[str]], headers: list[str]) -> list[dict[str, str]]:
    """Key every row by *headers*, preserving row order."""
    return [key_row(row, headers) for row in rows]
