"""
Event document models and builder for ga-events.

Turns the keyed rows of one table into an ``EventGroup``:

- ``name`` is taken out of each row and becomes the event's name.
- A row without ``event_label`` is a **screen view** (trigger
  ``hm_push_screen``); a row with one is a generic **event** (trigger
  ``hm_push_event``).  ``event_label`` itself stays in the row.
- Every remaining ``(key, value)`` pair whose value is exactly one of
  ``string``, ``int`` or ``double`` is a parameter; all other pairs are
  content.  Values are kept verbatim.

Empty collections are stored as ``None`` so they are omitted from the
serialized document rather than written as ``[]``.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict

from ga_events.exceptions import MissingEventName

logger = logging.getLogger(__name__)

NAME_KEY = "name"
EVENT_LABEL_KEY = "event_label"
SCREEN_TRIGGER = "hm_push_screen"
EVENT_TRIGGER = "hm_push_event"
PARAMETER_TYPES = frozenset({"string", "int", "double"})


class EventContent(BaseModel):
    """A single ``(name, value)`` pair of an event."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str


class Event(BaseModel):
    """One tracked screen view or event."""

    model_config = ConfigDict(frozen=True)

    event_trigger: str
    name: str
    content: list[EventContent] | None = None
    parameters: list[EventContent] | None = None

    @property
    def is_screen_view(self) -> bool:
        return self.event_trigger == SCREEN_TRIGGER


class EventGroup(BaseModel):
    """All events defined by one source table."""

    model_config = ConfigDict(frozen=True)

    name: str
    screen_views: list[Event] | None = None
    events: list[Event] | None = None


def is_parameter(value: str) -> bool:
    """True if *value* is a reserved parameter type token (case-sensitive)."""
    return value in PARAMETER_TYPES


def build_event(name: str, fields: dict[str, str]) -> Event:
    """Build an Event from its name and the rest of its keyed row."""
    trigger = EVENT_TRIGGER if EVENT_LABEL_KEY in fields else SCREEN_TRIGGER

    content: list[EventContent] = []
    parameters: list[EventContent] = []
    for key, value in fields.items():
        pair = EventContent(name=key, value=value)
        if is_parameter(value):
            parameters.append(pair)
        else:
            content.append(pair)

    return Event(
        event_trigger=trigger,
        name=name,
        content=content or None,
        parameters=parameters or None,
    )


def build_event_group(
    group_name: str,
    keyed_rows: list[dict[str, str]],
) -> EventGroup:
    """Build the EventGroup for one table.

    Args:
        group_name: Name of the source table.
        keyed_rows: Data rows keyed by header name.

    Returns:
        The EventGroup, with screen views and events in row order.

    Raises:
        MissingEventName: If a row has no ``name`` value.
    """
    screen_views: list[Event] = []
    events: list[Event] = []

    for row_number, keyed_row in enumerate(keyed_rows, start=1):
        fields = dict(keyed_row)
        name = fields.pop(NAME_KEY, None)
        if name is None:
            raise MissingEventName(group_name, row_number)

        event = build_event(name, fields)
        if event.is_screen_view:
            screen_views.append(event)
        else:
            events.append(event)

    logger.debug(
        "Built group '%s': %d screen view(s), %d event(s)",
        group_name, len(screen_views), len(events),
    )
    return EventGroup(
        name=group_name,
        screen_views=screen_views or None,
        events=events or None,
    )
