"""Weather conditions."""

from enum import Enum

from f1viz.models.tire import TireCompound

# Flat penalty for running slicks on a wet track
WRONG_TYRE_PENALTY = 5.0


class WeatherCondition(str, Enum):
    """Weather condition types."""

    DRY = "dry"
    WET = "wet"

    def is_wet(self) -> bool:
        """Check if conditions require wet-weather tyres."""
        return self == WeatherCondition.WET

    def tyre_penalty(self, compound: TireCompound) -> float:
        """Time penalty in seconds for running ``compound`` in these conditions.

        Args:
            compound: Tyre currently fitted

        Returns:
            Penalty in seconds (0 if the tyre suits the conditions)
        """
        if self.is_wet() and not compound.is_wet_weather:
            return WRONG_TYRE_PENALTY
        return 0.0
