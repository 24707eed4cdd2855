"""Data models for the race simulator."""

from .car import Car, Strategy
from .config import AIDifficulty, RaceConfig, StartingTyre
from .tire import Tire, TireCompound
from .track import Track, TrackType
from .weather import WeatherCondition

__all__ = [
    "AIDifficulty",
    "Car",
    "RaceConfig",
    "StartingTyre",
    "Strategy",
    "Tire",
    "TireCompound",
    "Track",
    "TrackType",
    "WeatherCondition",
]
