"""
Input reading for ga-events.

Lists the table files of an input directory and loads each one fully
into memory as text.  This module knows nothing about cell splitting;
it only hands normalized text to the parser.

Ordering:
  By default tables are returned in ``os.listdir`` order, which is
  filesystem-dependent.  Pass ``sort=True`` for a reproducible,
  name-sorted order.

Errors are not wrapped: a missing directory raises
``FileNotFoundError`` and undecodable bytes raise
``UnicodeDecodeError``, so the run aborts before anything is written.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_EXTENSION = ".csv"


def normalize_newlines(text: str) -> str:
    """Convert ``"\\r\\n"`` line endings to ``"\\n"``."""
    return text.replace("\r\n", "\n")


def table_name(path: str | Path) -> str:
    """Name of the table stored at *path* (the file name without extension)."""
    return Path(path).stem


def list_tables(
    input_dir: str | Path,
    extension: str = DEFAULT_EXTENSION,
    sort: bool = False,
) -> list[Path]:
    """List the table files in *input_dir* (non-recursive).

    Hidden files and entries that are not regular files are skipped,
    as are files whose suffix does not match *extension*
    (case-insensitive).

    Args:
        input_dir: Directory holding one file per event group.
        extension: Table file suffix, including the leading dot.
        sort: If ``True``, return paths sorted by file name.

    Returns:
        Paths of the table files.

    Raises:
        FileNotFoundError: If *input_dir* does not exist.
        NotADirectoryError: If *input_dir* is not a directory.
    """
    directory = Path(input_dir)
    entries = os.listdir(directory)
    if sort:
        entries = sorted(entries)

    paths: list[Path] = []
    for entry in entries:
        path = directory / entry
        if entry.startswith(".") or not path.is_file():
            continue
        if path.suffix.lower() != extension.lower():
            logger.debug("Skipping non-table file %s", path.name)
            continue
        paths.append(path)

    logger.info("Found %d table(s) in %s", len(paths), directory)
    return paths


def read_table_text(path: str | Path, encoding: str = "utf-8-sig") -> str:
    """Read a whole table file and normalize its line endings.

    The default ``utf-8-sig`` encoding drops a leading byte order mark,
    as written by spreadsheet exports, and is otherwise strict UTF-8.

    Raises:
        FileNotFoundError: If the file does not exist.
        UnicodeDecodeError: If the bytes are not valid in *encoding*.
    """
    path = Path(path)
    logger.info("Reading: %s", path.name)
    with open(path, "r", encoding=encoding, newline="") as f:
        return normalize_newlines(f.read())
