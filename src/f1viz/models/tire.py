"""Tyre compounds and their performance characteristics."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TireCompound(str, Enum):
    """Available tyre compounds."""

    SOFT = "soft"
    MEDIUM = "medium"
    HARD = "hard"
    INTERMEDIATE = "intermediate"
    WET = "wet"

    @property
    def is_wet_weather(self) -> bool:
        """Whether the compound is built for a wet track."""
        return self in (TireCompound.INTERMEDIATE, TireCompound.WET)


class Tire(BaseModel):
    """Static performance data for a tyre compound."""

    model_config = ConfigDict(frozen=True)

    compound: TireCompound = Field(..., description="Tyre compound type")
    name: str = Field(..., description="Display name")
    color: str = Field(..., description="Display colour (hex)")

    base_lap_time: float = Field(
        ...,
        gt=0,
        description="Lap time on a fresh set in seconds",
    )
    degradation: float = Field(
        ...,
        ge=0.0,
        le=1.0,
        description="Wear per lap (soft wears fastest)",
    )
    grip: float = Field(
        default=1.0,
        ge=0.0,
        le=1.5,
        description="Relative grip multiplier",
    )

    def wear_penalty(self, tyre_age: int, track_multiplier: float = 1.0) -> float:
        """Time lost to wear after ``tyre_age`` laps on this set.

        Args:
            tyre_age: Laps completed on the current set
            track_multiplier: Track harshness multiplier

        Returns:
            Time penalty in seconds
        """
        return self.degradation * tyre_age * track_multiplier

    def life_loss(self, track_multiplier: float = 1.0, aggression: float = 1.0) -> float:
        """Tyre life (0-100 scale) consumed by one lap."""
        return self.degradation * track_multiplier * 100 * aggression


TIRE_COMPOUNDS = {
    TireCompound.SOFT: Tire(
        compound=TireCompound.SOFT,
        name="Soft",
        color="#ef4444",
        base_lap_time=87.5,
        degradation=0.18,
        grip=1.15,
    ),
    TireCompound.MEDIUM: Tire(
        compound=TireCompound.MEDIUM,
        name="Medium",
        color="#f59e0b",
        base_lap_time=88.5,
        degradation=0.10,
        grip=1.05,
    ),
    TireCompound.HARD: Tire(
        compound=TireCompound.HARD,
        name="Hard",
        color="#6b7280",
        base_lap_time=89.8,
        degradation=0.05,
        grip=0.95,
    ),
    TireCompound.INTERMEDIATE: Tire(
        compound=TireCompound.INTERMEDIATE,
        name="Inter",
        color="#10b981",
        base_lap_time=92.0,
        degradation=0.08,
        grip=1.0,
    ),
    TireCompound.WET: Tire(
        compound=TireCompound.WET,
        name="Wet",
        color="#3b82f6",
        base_lap_time=95.0,
        degradation=0.04,
        grip=0.9,
    ),
}

# Compounds a race can start on and rivals are randomly given
DRY_COMPOUNDS = (TireCompound.SOFT, TireCompound.MEDIUM, TireCompound.HARD)
