"""Car model with per-lap race state."""

from enum import Enum

from pydantic import BaseModel, Field

from f1viz.models.tire import TIRE_COMPOUNDS, Tire, TireCompound


class Strategy(str, Enum):
    """Race strategy tag controlling pace and tyre wear."""

    AGGRESSIVE = "aggressive"
    BALANCED = "balanced"
    CONSERVATIVE = "conservative"

    @property
    def pace_offset(self) -> float:
        """Lap time offset in seconds (negative = faster)."""
        if self == Strategy.AGGRESSIVE:
            return -0.3
        if self == Strategy.CONSERVATIVE:
            return 0.3
        return 0.0

    @property
    def wear_factor(self) -> float:
        """Multiplier on tyre life consumed per lap."""
        return 1.3 if self == Strategy.AGGRESSIVE else 1.0


class Car(BaseModel):
    """Represents one competitor and its race state."""

    id: int = Field(..., ge=0, description="Car identifier (player is 0)")
    name: str = Field(..., description="Display name")
    is_player: bool = Field(default=False, description="Whether this is the player's car")
    strategy: Strategy = Field(default=Strategy.BALANCED, description="Strategy tag")

    # Race state (mutable during simulation)
    lap_time: float = Field(default=0.0, ge=0.0, description="Last lap time in seconds")
    total_time: float = Field(default=0.0, ge=0.0, description="Cumulative race time in seconds")
    current_tyre: TireCompound = Field(default=TireCompound.MEDIUM, description="Fitted compound")
    tyre_age: int = Field(default=0, ge=0, description="Laps on current tyre set")
    tyre_life: float = Field(default=100.0, ge=0.0, le=100.0, description="Remaining tyre life (%)")
    pit_stops: int = Field(default=0, ge=0, description="Number of pit stops made")
    position: int = Field(default=1, ge=1, description="Current race position")
    position_change: int = Field(default=0, description="Places gained on the last lap")
    last_pit: bool = Field(default=False, description="Whether the car pitted on the last lap")

    # Rendering only
    track_position: float = Field(default=0.0, description="Offset around the lap (fraction)")
    speed: float = Field(default=0.0, description="Indicative speed in km/h")

    @property
    def tire(self) -> Tire:
        """Static data for the fitted compound."""
        return TIRE_COMPOUNDS[self.current_tyre]
