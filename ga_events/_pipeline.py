"""
Internal pipeline orchestration for ga-events.

For every table in the input directory: read -> parse -> key -> build,
collecting one EventGroup per table in listing order.  The document is
written once, after every table has been built, so any error aborts the
run without touching the output.

This module is **not** part of the public API.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ga_events.builder import EventGroup, build_event_group
from ga_events.config import ConvertConfig
from ga_events.export import export_document
from ga_events.parsers.delimited import DelimitedTextParser
from ga_events.reader import list_tables

logger = logging.getLogger(__name__)


def build_event_groups(config: ConvertConfig) -> list[EventGroup]:
    """Build the EventGroup of every table described by *config*.

    Returns:
        EventGroups in table listing order (name order when
        ``source.sort_tables`` is set).

    Raises:
        MissingEventName: If any data row has no ``name``.
        ParsingError: If a table has no header row.
        OSError / UnicodeDecodeError: On unreadable input.
    """
    source = config.source
    parser = DelimitedTextParser()
    groups: list[EventGroup] = []

    for path in list_tables(source.input_dir, source.extension, sort=source.sort_tables):
        table = parser.parse(
            path,
            separator=source.separator,
            headers=source.headers,
            encoding=source.encoding,
        )
        logger.info("Decoded: %s (%d data row(s))", path.name, len(table.rows))
        if not table.keyed_rows:
            logger.warning("Table '%s' has no data rows", table.name)
        groups.append(build_event_group(table.name, table.keyed_rows))

    return groups


def run_and_export(
    config: ConvertConfig,
    groups: list[EventGroup] | None = None,
) -> Path:
    """Write the document, building all EventGroups first if not given.

    Returns:
        Path of the written document.
    """
    if groups is None:
        groups = build_event_groups(config)
    logger.info("Generating %s", config.output.output_path)
    return export_document(
        groups, config.output.output_path, indent=config.output.indent
    )
