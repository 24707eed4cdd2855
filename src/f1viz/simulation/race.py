"""Race state and lifecycle controller."""

import logging
from dataclasses import dataclass, field
from enum import Enum

import numpy as np
from pydantic import BaseModel, Field

from f1viz.models import Car, RaceConfig, Strategy
from f1viz.models.tire import DRY_COMPOUNDS
from f1viz.simulation.events import EventLog, RaceEvent, finish_event, start_event
from f1viz.simulation.lap import LapResult, LapSimulator
from f1viz.simulation.progress import ProgressAccumulator

logger = logging.getLogger(__name__)

# Gap between rivals on the starting grid, as a fraction of the lap
GRID_SPACING = 0.05


class RacePhase(str, Enum):
    """Lifecycle phase of a race."""

    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    FINISHED = "finished"


class RaceStateError(RuntimeError):
    """Raised when an operation is not allowed in the current phase."""


@dataclass
class LapRecord:
    """Player car data for one completed lap."""

    lap: int
    lap_time: float
    tyre_life: float
    position: int


@dataclass
class RaceState:
    """Complete race state."""

    config: RaceConfig
    phase: RacePhase = RacePhase.IDLE
    lap: int = 0
    cars: list[Car] = field(default_factory=list)
    standings: list[Car] = field(default_factory=list)
    events: EventLog = field(default_factory=EventLog)
    history: list[LapRecord] = field(default_factory=list)
    progress: ProgressAccumulator = field(default_factory=ProgressAccumulator)

    @property
    def player(self) -> Car | None:
        for car in self.standings or self.cars:
            if car.is_player:
                return car
        return None


class RaceSnapshot(BaseModel):
    """Read-only view of the race for rendering and charts."""

    phase: RacePhase
    lap: int = Field(..., ge=0)
    total_laps: int
    progress: float = Field(..., ge=0.0, le=1.0, description="Fraction of the current lap")
    config: RaceConfig
    cars: list[Car]
    standings: list[Car]
    events: list[RaceEvent]
    history: list[LapRecord]


def build_grid(config: RaceConfig, rng: np.random.Generator) -> list[Car]:
    """Create the starting grid: the player first, then the rivals.

    Rivals get a random dry compound and a random strategy.

    Args:
        config: Race configuration
        rng: Random number generator

    Returns:
        Cars in grid order
    """
    cars = [
        Car(
            id=0,
            name="Player",
            is_player=True,
            position=1,
            current_tyre=config.starting_tyre.compound,
            strategy=Strategy.BALANCED,
        )
    ]
    strategies = list(Strategy)
    for i in range(1, config.num_rivals + 1):
        compound = DRY_COMPOUNDS[int(rng.integers(0, len(DRY_COMPOUNDS)))]
        strategy = strategies[int(rng.integers(0, len(strategies)))]
        cars.append(Car(
            id=i,
            name=f"Rival {i}",
            position=i + 1,
            current_tyre=compound,
            strategy=strategy,
            track_position=-i * GRID_SPACING,
        ))
    return cars


class RaceController:
    """Drives a race through its lifecycle, one lap update at a time."""

    def __init__(self, config: RaceConfig | None = None, rng: np.random.Generator | None = None):
        """Initialize the controller in the idle phase.

        Args:
            config: Race configuration (defaults if None)
            rng: Random number generator shared with the lap simulator
        """
        self.rng = rng if rng is not None else np.random.default_rng()
        self.lap_simulator = LapSimulator(rng=self.rng)
        self.state = RaceState(config=config if config is not None else RaceConfig())

    @property
    def phase(self) -> RacePhase:
        return self.state.phase

    @property
    def config(self) -> RaceConfig:
        return self.state.config

    def configure(self, config: RaceConfig) -> None:
        """Replace the configuration; only allowed when no race is live."""
        if self.phase in (RacePhase.RUNNING, RacePhase.PAUSED):
            raise RaceStateError(f"cannot change configuration while race is {self.phase.value}")
        self.state.config = config

    def start(self) -> None:
        """Build a fresh grid and start racing.

        Raises:
            RaceStateError: If a race is already running or paused
        """
        if self.phase in (RacePhase.RUNNING, RacePhase.PAUSED):
            raise RaceStateError(f"cannot start while race is {self.phase.value}; reset first")
        config = self.state.config
        cars = build_grid(config, self.rng)
        self.state = RaceState(
            config=config,
            phase=RacePhase.RUNNING,
            cars=cars,
            standings=list(cars),
        )
        self.state.events.push(start_event())
        logger.info(
            "Race started: %d laps, %d cars, %s track, %s",
            config.total_laps, len(cars), config.track_type.value, config.weather.value,
        )

    def toggle_pause(self) -> RacePhase:
        """Pause a running race or resume a paused one.

        Returns:
            The phase after toggling
        """
        if self.phase == RacePhase.RUNNING:
            self.state.phase = RacePhase.PAUSED
            logger.info("Race paused on lap %d", self.state.lap)
        elif self.phase == RacePhase.PAUSED:
            self.state.phase = RacePhase.RUNNING
            logger.info("Race resumed on lap %d", self.state.lap)
        else:
            logger.debug("Ignoring pause toggle while %s", self.phase.value)
        return self.phase

    def reset(self) -> None:
        """Discard the race and return to the idle phase."""
        self.state = RaceState(config=self.state.config)
        logger.info("Race reset")

    def tick(self) -> LapResult | None:
        """Run one lap update.

        Returns:
            The lap result, or None if the race is not running
        """
        state = self.state
        if state.phase != RacePhase.RUNNING:
            logger.debug("Ignoring tick while %s", state.phase.value)
            return None

        if state.lap + 1 > state.config.total_laps:
            self._finish()
            return None

        result = self.lap_simulator.simulate_lap(state.cars, state.config, state.lap)
        state.lap += 1
        state.cars = result.cars
        state.standings = result.standings
        state.events.extend(result.events)
        for car in result.pitted:
            logger.debug("Lap %d: %s stopped (%d stops)", state.lap, car.name, car.pit_stops)

        player = state.player
        if player is not None:
            state.history.append(LapRecord(
                lap=state.lap,
                lap_time=round(player.lap_time, 3),
                tyre_life=player.tyre_life,
                position=player.position,
            ))

        if state.lap >= state.config.total_laps:
            self._finish()
        return result

    def advance_frame(self) -> bool:
        """Advance the animation by one frame.

        Paused and idle races do not move. A lap update runs exactly once
        each time the accumulated progress completes a lap.

        Returns:
            True if a lap update ran on this frame
        """
        if self.phase != RacePhase.RUNNING:
            return False
        if not self.state.progress.advance():
            return False
        self.tick()
        return True

    def run_to_finish(self) -> RaceSnapshot:
        """Tick until the race is finished, starting it if idle."""
        if self.phase in (RacePhase.IDLE, RacePhase.FINISHED):
            self.start()
        elif self.phase == RacePhase.PAUSED:
            self.toggle_pause()
        while self.phase == RacePhase.RUNNING:
            self.tick()
        return self.snapshot()

    def snapshot(self) -> RaceSnapshot:
        state = self.state
        return RaceSnapshot(
            phase=state.phase,
            lap=state.lap,
            total_laps=state.config.total_laps,
            progress=state.progress.progress,
            config=state.config,
            cars=state.cars,
            standings=state.standings,
            events=state.events.events,
            history=state.history,
        )

    def _finish(self) -> None:
        self.state.phase = RacePhase.FINISHED
        self.state.progress.reset()
        self.state.events.push(finish_event(self.state.lap))
        player = self.state.player
        logger.info(
            "Race finished after %d laps, player P%s",
            self.state.lap, player.position if player else "-",
        )
