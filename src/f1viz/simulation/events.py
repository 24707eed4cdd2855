"""Race events and the bounded event log."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator

MAX_EVENTS = 10


class EventType(str, Enum):
    """Types of race events."""

    PIT = "pit"
    OVERTAKE = "overtake"
    START = "start"
    FINISH = "finish"


@dataclass(frozen=True)
class RaceEvent:
    """Represents a race event."""

    lap: int
    message: str
    event_type: EventType


class EventLog:
    """Most-recent-first log of race events, capped at ``capacity`` entries."""

    def __init__(self, capacity: int = MAX_EVENTS):
        """Initialize an empty log.

        Args:
            capacity: Number of events kept; older ones are discarded
        """
        self.capacity = capacity
        self._events: list[RaceEvent] = []

    def push(self, event: RaceEvent) -> None:
        """Add an event to the front of the log."""
        self._events.insert(0, event)
        del self._events[self.capacity:]

    def extend(self, events: Iterable[RaceEvent]) -> None:
        """Push events in order, so the last one ends up newest."""
        for event in events:
            self.push(event)

    @property
    def events(self) -> list[RaceEvent]:
        """Events, newest first."""
        return list(self._events)

    def __len__(self) -> int:
        return len(self._events)

    def __iter__(self) -> Iterator[RaceEvent]:
        return iter(list(self._events))


def pit_event(lap: int, car_name: str, tyre_name: str) -> RaceEvent:
    return RaceEvent(lap=lap, message=f"{car_name} pits for {tyre_name} tyres", event_type=EventType.PIT)


def overtake_event(lap: int, car_name: str, position: int) -> RaceEvent:
    return RaceEvent(lap=lap, message=f"{car_name} overtakes! Now P{position}", event_type=EventType.OVERTAKE)


def start_event() -> RaceEvent:
    return RaceEvent(lap=0, message="Race Started!", event_type=EventType.START)


def finish_event(lap: int) -> RaceEvent:
    return RaceEvent(lap=lap, message="Race Finished!", event_type=EventType.FINISH)
