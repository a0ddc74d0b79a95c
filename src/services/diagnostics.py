"""
Structured diagnostic events shared by the fence, geocoder, transport and parser.

Components receive an `EventSink` instead of writing to the console directly, so
tests can assert on emitted event names and fields rather than parsing log text.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Any, List

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiagnosticEvent:
    name: str
    level: int
    message: str
    fields: dict[str, Any] = field(default_factory=dict)


class EventSink:
    """Forward events to a logger and keep per-name counters."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or LOGGER
        self.counts: Counter[str] = Counter()

    def emit(self, name: str, message: str, *args: Any, level: int = logging.INFO, **fields: Any) -> None:
        self.counts[name] += 1
        rendered = message % args if args else message
        self.record(DiagnosticEvent(name=name, level=level, message=rendered, fields=fields))
        self.logger.log(level, "[%s] %s", name, rendered, extra={"event": name, "event_fields": fields})

    def record(self, event: DiagnosticEvent) -> None:
        """Hook for subclasses that retain events."""

    def child(self, logger: logging.Logger) -> "EventSink":
        """Return a sink that logs through `logger` but shares this sink's counters."""
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.logger = logger
        return clone


class RecordingEventSink(EventSink):
    """Sink that keeps every event in memory; used by tests and the CLI summary."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        super().__init__(logger)
        self.events: List[DiagnosticEvent] = []

    def record(self, event: DiagnosticEvent) -> None:
        self.events.append(event)

    def names(self) -> list[str]:
        return [event.name for event in self.events]

    def find(self, name: str) -> list[DiagnosticEvent]:
        return [event for event in self.events if event.name == name]


def resolve_sink(events: EventSink | None, logger: logging.Logger) -> EventSink:
    if events is None:
        return EventSink(logger)
    return events.child(logger)
