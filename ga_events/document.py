"""
Event document handle for ga-events.

``EventDocument`` is the read-side counterpart of the exporter: it wraps
a written JSON document (or an in-memory list of EventGroups) and offers
quick inspection helpers.

- ``describe()`` returns per-group counts without flattening anything.
- ``to_frame()`` flattens every content/parameter pair into a pandas
  DataFrame, one row per pair, which is handy for filtering and review.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import pandas as pd

from ga_events.builder import Event, EventGroup
from ga_events.export import load_document

logger = logging.getLogger(__name__)

FRAME_COLUMNS = [
    "group", "kind", "event", "event_trigger", "field_type", "field", "value",
]


# ---------------------------------------------------------------------------
# DocumentInfo -- lightweight summary
# ---------------------------------------------------------------------------

@dataclass
class DocumentInfo:
    """Summary of an event document, returned by ``EventDocument.describe()``.

    Attributes:
        path: Path of the document on disk, or ``None`` if in-memory.
        groups: Group names in document order.
        counts: Mapping of group name -> ``(screen_views, events)``.
        total_screen_views: Screen views across all groups.
        total_events: Generic events across all groups.
    """

    path: str | None
    groups: list[str] = field(default_factory=list)
    counts: dict[str, tuple[int, int]] = field(default_factory=dict)
    total_screen_views: int = 0
    total_events: int = 0


# ---------------------------------------------------------------------------
# EventDocument
# ---------------------------------------------------------------------------

class EventDocument:
    """Handle object for a list of EventGroups.

    Attributes:
        groups: The EventGroups, in document order.
        path: Where the document lives on disk, if anywhere.
    """

    def __init__(self, groups: list[EventGroup], path: str | Path | None = None) -> None:
        self.groups = list(groups)
        self.path = Path(path) if path is not None else None

    @classmethod
    def load(cls, path: str | Path) -> EventDocument:
        """Load a JSON document written by ``export_document()``.

        Raises:
            FileNotFoundError: If *path* does not exist.
            pydantic.ValidationError: If the content is not an event document.
        """
        path = Path(path)
        logger.info("Loading event document from %s", path)
        return cls(load_document(path.read_bytes()), path)

    def __repr__(self) -> str:
        names = [g.name for g in self.groups]
        path = str(self.path) if self.path is not None else None
        return f"EventDocument(groups={names}, path={path!r})"

    def __len__(self) -> int:
        return len(self.groups)

    def group(self, name: str) -> EventGroup:
        """Return the group called *name*.

        Raises:
            KeyError: If no group has that name.
        """
        for g in self.groups:
            if g.name == name:
                return g
        raise KeyError(
            f"Group '{name}' not found. Available groups: {[g.name for g in self.groups]}"
        )

    def describe(self) -> DocumentInfo:
        """Count screen views and events per group."""
        info = DocumentInfo(path=str(self.path) if self.path is not None else None)
        for g in self.groups:
            n_screens = len(g.screen_views or [])
            n_events = len(g.events or [])
            info.groups.append(g.name)
            info.counts[g.name] = (n_screens, n_events)
            info.total_screen_views += n_screens
            info.total_events += n_events
        return info

    def to_frame(self) -> pd.DataFrame:
        """Flatten the document into one row per content/parameter pair.

        Columns: ``group``, ``kind`` (``screen_view`` / ``event``),
        ``event``, ``event_trigger``, ``field_type`` (``content`` /
        ``parameter``), ``field``, ``value``.  An event with neither
        content nor parameters yields a single row whose field columns
        are null.
        """
        records: list[dict[str, str | None]] = []
        for g in self.groups:
            for kind, events in (("screen_view", g.screen_views), ("event", g.events)):
                for event in events or []:
                    records.extend(_event_records(g.name, kind, event))
        return pd.DataFrame.from_records(records, columns=FRAME_COLUMNS)


def _event_records(group: str, kind: str, event: Event) -> list[dict[str, str | None]]:
    base = {
        "group": group,
        "kind": kind,
        "event": event.name,
        "event_trigger": event.event_trigger,
    }
    records = [
        {**base, "field_type": field_type, "field": pair.name, "value": pair.value}
        for field_type, pairs in (("content", event.content), ("parameter", event.parameters))
        for pair in pairs or []
    ]
    if not records:
        records.append({**base, "field_type": None, "field": None, "value": None})
    return records
