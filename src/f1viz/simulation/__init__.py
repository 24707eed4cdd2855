"""Simulation engine components."""

from .events import EventLog, EventType, RaceEvent
from .lap import LapResult, LapSimulator
from .progress import ProgressAccumulator
from .race import RaceController, RacePhase, RaceSnapshot, RaceState, RaceStateError

__all__ = [
    "EventLog",
    "EventType",
    "LapResult",
    "LapSimulator",
    "ProgressAccumulator",
    "RaceController",
    "RaceEvent",
    "RacePhase",
    "RaceSnapshot",
    "RaceState",
    "RaceStateError",
]
