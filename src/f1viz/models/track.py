"""Track layouts and how hard they are on tyres."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TrackType(str, Enum):
    """Track layout categories."""

    BALANCED = "balanced"
    HIGH_SPEED = "high_speed"
    TECHNICAL = "technical"
    STREET = "street"


class Track(BaseModel):
    """Static characteristics of a track layout."""

    model_config = ConfigDict(frozen=True)

    track_type: TrackType = Field(..., description="Layout category")
    name: str = Field(..., description="Display name")
    corner_count: int = Field(..., gt=0, description="Number of corners")
    straights: int = Field(..., ge=0, description="Number of long straights")
    degradation_multiplier: float = Field(
        default=1.0,
        gt=0.0,
        le=2.0,
        description="Tyre wear multiplier (>1 = harsher on tyres)",
    )


TRACK_TYPES = {
    TrackType.BALANCED: Track(
        track_type=TrackType.BALANCED,
        name="Balanced",
        corner_count=16,
        straights=3,
        degradation_multiplier=1.0,
    ),
    TrackType.HIGH_SPEED: Track(
        track_type=TrackType.HIGH_SPEED,
        name="High Speed",
        corner_count=10,
        straights=5,
        degradation_multiplier=0.7,
    ),
    TrackType.TECHNICAL: Track(
        track_type=TrackType.TECHNICAL,
        name="Technical",
        corner_count=22,
        straights=2,
        degradation_multiplier=1.4,
    ),
    TrackType.STREET: Track(
        track_type=TrackType.STREET,
        name="Street Circuit",
        corner_count=18,
        straights=4,
        degradation_multiplier=1.1,
    ),
}
