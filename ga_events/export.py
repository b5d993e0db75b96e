"""
Exporter for ga-events.

Serializes the ordered list of EventGroups to a single JSON document.

Field presence rule: empty optional collections (``screen_views``,
``events``, ``content``, ``parameters``) are ``None`` on the models and
are **omitted** from the output rather than written as ``null`` or ``[]``.

The document is written to a temporary file in the destination
directory and then moved into place, so a failed write never leaves a
partial document behind.
"""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from pydantic import TypeAdapter

from ga_events.builder import EventGroup
from ga_events.exceptions import ExportError

logger = logging.getLogger(__name__)

_DOCUMENT_ADAPTER = TypeAdapter(list[EventGroup])


def dump_document(groups: list[EventGroup], indent: int | None = None) -> bytes:
    """Serialize *groups* to UTF-8 JSON bytes."""
    return _DOCUMENT_ADAPTER.dump_json(groups, indent=indent, exclude_none=True)


def load_document(data: bytes | str) -> list[EventGroup]:
    """Parse a JSON document back into EventGroup models."""
    return _DOCUMENT_ADAPTER.validate_json(data)


def export_document(
    groups: list[EventGroup],
    output_path: str | Path,
    indent: int | None = None,
) -> Path:
    """Write the event document to *output_path*.

    The parent directory is created if it does not exist.

    Args:
        groups: EventGroups in output order.
        output_path: Destination file.
        indent: JSON indentation, or ``None`` for compact output.

    Returns:
        The path that was written.

    Raises:
        ExportError: If the document cannot be written.
    """
    path = Path(output_path)
    payload = dump_document(groups, indent=indent)

    tmp_name: str | None = None
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "wb", dir=path.parent, prefix=f".{path.name}.", delete=False
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(payload)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ExportError(f"Failed to write {path}: {exc}") from exc

    logger.info(
        "Exported %d event group(s) -> %s (%d bytes)",
        len(groups), path, len(payload),
    )
    return path
