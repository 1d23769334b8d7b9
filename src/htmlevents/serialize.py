"""Eager serialization of event streams to text sinks."""

from __future__ import annotations

import io
import logging
from collections.abc import Iterable
from typing import Any, Protocol

from .errors import RenderError
from .tokens import Event

logger = logging.getLogger(__name__)


class TextSink(Protocol):
    def write(self, s: str, /) -> Any: ...


def _check_event(event: Any) -> Event:
    if not isinstance(event, Event):
        raise RenderError("unknown-event", event=event, detail=type(event).__name__)
    return event


def render_event(event: Event) -> str:
    """Render a single event to its HTML text."""
    parts: list[str] = []
    _check_event(event).write_to(parts.append)
    return "".join(parts)


def write_event(sink: TextSink, event: Event) -> None:
    _check_event(event).write_to(sink.write)


def write_events(sink: TextSink, events: Iterable[Event]) -> int:
    """Render each event to ``sink`` as soon as it is produced.

    ``events`` is consumed once, in order. The first exception raised by the
    sink (or by rendering) propagates and ends the run; events already written
    stay written.

    Returns:
        The number of events written.
    """
    count = 0
    write = sink.write
    for event in events:
        _check_event(event).write_to(write)
        count += 1
    logger.debug("Wrote %d events", count)
    return count


def to_html(events: Iterable[Event]) -> str:
    """Render an event stream to a string."""
    out = io.StringIO()
    write_events(out, events)
    return out.getvalue()
