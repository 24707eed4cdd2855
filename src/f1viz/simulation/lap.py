"""Per-lap race update: lap times, tyre wear, pit stops and ranking."""

import logging
from dataclasses import dataclass, field

import numpy as np

from f1viz.models import Car, RaceConfig, Strategy, TireCompound
from f1viz.simulation.events import RaceEvent, overtake_event, pit_event

logger = logging.getLogger(__name__)

# Track temperature with no thermal penalty
IDEAL_TRACK_TEMP = 30.0
TEMP_PENALTY_PER_DEGREE = 0.02
LAP_TIME_NOISE = 0.4

PIT_LIFE_THRESHOLD = 25.0
AGGRESSIVE_PIT_LIFE_THRESHOLD = 40.0
# No stops once this few laps (or fewer) remain
PIT_CUTOFF_LAPS = 5
PIT_STOP_TIME_RANGE = (22.0, 24.0)

TOP_SPEED = 300.0


@dataclass
class LapTimeComponents:
    """Breakdown of a single lap time in seconds."""

    base: float
    tyre_effect: float
    temp_effect: float
    weather_effect: float
    strategy_effect: float
    noise: float

    @property
    def total(self) -> float:
        return (
            self.base
            + self.tyre_effect
            + self.temp_effect
            + self.weather_effect
            + self.strategy_effect
            + self.noise
        )


@dataclass
class LapResult:
    """Outcome of one lap update."""

    cars: list[Car]
    standings: list[Car]
    events: list[RaceEvent] = field(default_factory=list)

    @property
    def pitted(self) -> list[Car]:
        return [car for car in self.standings if car.last_pit]


def choose_pit_compound(laps_remaining: int) -> TireCompound:
    """Pick the compound fitted at a stop based on the distance left.

    Args:
        laps_remaining: Laps left in the race when the car pits

    Returns:
        Hard for long stints, medium for mid-length, soft for a sprint
    """
    if laps_remaining > 25:
        return TireCompound.HARD
    if laps_remaining > 15:
        return TireCompound.MEDIUM
    return TireCompound.SOFT


def rank_cars(cars: list[Car]) -> list[Car]:
    """Order cars by total time and assign positions.

    Ties keep their incoming order. ``position_change`` is positive when a
    car moved up.

    Returns:
        New car objects, leader first
    """
    ordered = sorted(cars, key=lambda c: c.total_time)
    return [
        car.model_copy(update={"position": rank, "position_change": car.position - rank})
        for rank, car in enumerate(ordered, 1)
    ]


def derive_events(standings: list[Car], lap: int) -> list[RaceEvent]:
    """Pit and overtake events for a ranked field, in standings order."""
    events: list[RaceEvent] = []
    for car in standings:
        if car.last_pit:
            events.append(pit_event(lap, car.name, car.tire.name))
        if car.position_change > 0:
            events.append(overtake_event(lap, car.name, car.position))
    return events


class LapSimulator:
    """Advances every car by one lap."""

    def __init__(self, rng: np.random.Generator | None = None):
        """Initialize the lap simulator.

        Args:
            rng: Random number generator (creates new if None). Anything
                with numpy-style ``uniform`` works, which lets tests feed
                fixed values.
        """
        self.rng = rng if rng is not None else np.random.default_rng()

    def lap_time_components(self, car: Car, config: RaceConfig) -> LapTimeComponents:
        """Calculate the parts of a lap time for ``car`` on its current tyres.

        Args:
            car: Car state before the lap
            config: Race configuration

        Returns:
            Lap time breakdown (draws one noise sample)
        """
        tire = car.tire
        return LapTimeComponents(
            base=tire.base_lap_time,
            tyre_effect=tire.wear_penalty(car.tyre_age, config.track.degradation_multiplier),
            temp_effect=abs(config.track_temp - IDEAL_TRACK_TEMP) * TEMP_PENALTY_PER_DEGREE,
            weather_effect=config.weather.tyre_penalty(car.current_tyre),
            strategy_effect=car.strategy.pace_offset,
            noise=float(self.rng.uniform(-LAP_TIME_NOISE, LAP_TIME_NOISE)),
        )

    @staticmethod
    def tyre_life_after_lap(car: Car, config: RaceConfig) -> float:
        """Tyre life left after one more lap, clamped to [0, 100]."""
        loss = car.tire.life_loss(config.track.degradation_multiplier, car.strategy.wear_factor)
        return min(100.0, max(0.0, car.tyre_life - loss))

    @staticmethod
    def should_pit(car: Car, new_life: float, config: RaceConfig, current_lap: int) -> bool:
        """Decide whether the car stops this lap.

        Aggressive cars stop earlier; conservative cars use the normal
        threshold.

        Args:
            car: Car state before the lap
            new_life: Tyre life after this lap's wear
            config: Race configuration
            current_lap: Laps completed before this one
        """
        worn = new_life < PIT_LIFE_THRESHOLD or (
            new_life < AGGRESSIVE_PIT_LIFE_THRESHOLD and car.strategy == Strategy.AGGRESSIVE
        )
        return worn and config.laps_remaining(current_lap) > PIT_CUTOFF_LAPS

    def calculate_pit_stop_time(self) -> float:
        """Time lost in the pit lane in seconds."""
        low, high = PIT_STOP_TIME_RANGE
        return float(self.rng.uniform(low, high))

    def update_car(self, car: Car, config: RaceConfig, current_lap: int) -> Car:
        """Run one lap for a single car.

        Args:
            car: Car state before the lap
            config: Race configuration
            current_lap: Laps completed before this one

        Returns:
            New car state (position is not re-ranked yet)
        """
        components = self.lap_time_components(car, config)
        lap_time = components.total
        new_life = self.tyre_life_after_lap(car, config)

        changes = {
            "speed": TOP_SPEED - components.tyre_effect * 5,
            "last_pit": False,
        }

        if self.should_pit(car, new_life, config, current_lap):
            lap_time += self.calculate_pit_stop_time()
            new_tyre = choose_pit_compound(config.laps_remaining(current_lap))
            logger.debug(
                "%s pits on lap %d: %s -> %s (life %.1f)",
                car.name, current_lap + 1, car.current_tyre.value, new_tyre.value, new_life,
            )
            changes.update(
                current_tyre=new_tyre,
                tyre_age=0,
                tyre_life=100.0,
                pit_stops=car.pit_stops + 1,
                last_pit=True,
            )
        else:
            changes.update(tyre_age=car.tyre_age + 1, tyre_life=new_life)

        changes.update(lap_time=lap_time, total_time=car.total_time + lap_time)
        return car.model_copy(update=changes)

    def simulate_lap(self, cars: list[Car], config: RaceConfig, current_lap: int) -> LapResult:
        """Advance the whole field by one lap.

        Args:
            cars: Cars in their current order
            config: Race configuration
            current_lap: Laps completed before this one

        Returns:
            LapResult with cars in input order, standings by total time
            and the pit/overtake events of this lap
        """
        updated = [self.update_car(car, config, current_lap) for car in cars]
        standings = rank_cars(updated)

        by_id = {car.id: car for car in standings}
        ranked_cars = [by_id[car.id] for car in updated]

        events = derive_events(standings, current_lap + 1)
        return LapResult(cars=ranked_cars, standings=standings, events=events)
