"""
ga-events: convert tables of analytics event definitions into a JSON
event document.

Each table file in the input directory becomes one event group named
after the file.  Every data row becomes a screen view (no
``event_label``) or an event, with its remaining columns split into
content and typed parameters (``string`` / ``int`` / ``double``).

Public API surface:

- ``convert(...)`` -- **main entry point**. Reads every table, builds
  the event groups and writes the document once. Returns an
  ``EventDocument`` handle.

- ``open(path)`` -- Open an existing JSON document as an
  ``EventDocument``.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ga_events._pipeline import build_event_groups, run_and_export
from ga_events.builder import Event, EventContent, EventGroup
from ga_events.config import ConvertConfig, generate_default_config, load_config
from ga_events.document import EventDocument

__all__ = [
    "convert",
    "open",
    "ConvertConfig",
    "Event",
    "EventContent",
    "EventDocument",
    "EventGroup",
]

logger = logging.getLogger(__name__)


def convert(
    input_dir: str = "ga",
    output_path: str = "analytics.json",
    separator: str = ",",
    headers: list[str] | None = None,
    sort_tables: bool = False,
    config_path: str | None = None,
) -> EventDocument:
    """Convert a directory of tables into an event document.

    Orchestration:
      1. Build a ``ConvertConfig`` from the arguments, or load it from
         *config_path* (the other arguments are then ignored).
      2. ``build_event_groups()`` -- parse, key and build every table
         in listing order.
      3. ``run_and_export()`` -- write the document once.

    Args:
        input_dir: Directory holding one table file per event group.
        output_path: Where to write the JSON document.
        separator: Cell delimiter of the tables.
        headers: Optional external header row shared by all tables.
        sort_tables: Process tables in file name order for reproducible
            output.
        config_path: Optional YAML config to use instead of the arguments.

    Returns:
        An ``EventDocument`` handle on the written document.

    Raises:
        MissingEventName: If any data row lacks a ``name``.
        ParsingError: If a table has no header row.
        ExportError: If the document cannot be written.
        FileNotFoundError: If the input directory is missing.
    """
    if config_path is not None:
        config = load_config(config_path)
    else:
        config = generate_default_config(
            input_dir=input_dir,
            output_path=output_path,
            separator=separator,
            headers=headers,
            sort_tables=sort_tables,
        )

    logger.info(
        "convert() -- input_dir=%s, output_path=%s",
        config.source.input_dir, config.output.output_path,
    )
    groups = build_event_groups(config)
    written = run_and_export(config, groups)
    return EventDocument(groups, written)


def open(path: str | Path) -> EventDocument:
    """Open an existing event document."""
    logger.info("open() -- loading document from %s", path)
    return EventDocument.load(path)
