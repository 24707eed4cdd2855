"""Race configuration set before the start."""

from enum import Enum

from pydantic import BaseModel, Field

from f1viz.models.tire import TireCompound
from f1viz.models.track import TRACK_TYPES, Track, TrackType
from f1viz.models.weather import WeatherCondition


class StartingTyre(str, Enum):
    """Compounds a car may start the race on."""

    SOFT = "soft"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def compound(self) -> TireCompound:
        return TireCompound(self.value)


class AIDifficulty(str, Enum):
    """Rival difficulty setting."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"


class RaceConfig(BaseModel):
    """Race settings, read-only once the race starts."""

    total_laps: int = Field(default=50, ge=10, le=100, description="Race distance in laps")
    track_length: float = Field(default=5.5, gt=0.0, le=10.0, description="Lap length in km")
    starting_tyre: StartingTyre = Field(
        default=StartingTyre.MEDIUM,
        description="Compound the player starts on",
    )
    track_temp: float = Field(default=35.0, ge=15.0, le=55.0, description="Track temperature in Celsius")
    weather: WeatherCondition = Field(default=WeatherCondition.DRY, description="Weather condition")
    track_type: TrackType = Field(default=TrackType.BALANCED, description="Track layout")
    num_rivals: int = Field(default=5, ge=0, le=19, description="Number of AI rivals")
    ai_difficulty: AIDifficulty = Field(default=AIDifficulty.MEDIUM, description="Rival difficulty")

    @property
    def track(self) -> Track:
        """Static data for the configured track layout."""
        return TRACK_TYPES[self.track_type]

    def laps_remaining(self, current_lap: int) -> int:
        """Laps still to run after ``current_lap`` completed laps."""
        return self.total_laps - current_lap
