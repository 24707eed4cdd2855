"""Fractional lap progress driven by animation frames."""

from dataclasses import dataclass

FRAME_ACCELERATION = 0.0002
MAX_FRAME_SPEED = 0.008


@dataclass
class ProgressAccumulator:
    """Tracks how far through the current lap the animation is.

    Speed ramps up by ``acceleration`` each frame until ``max_speed``; both
    progress and speed go back to zero when a lap completes.
    """

    acceleration: float = FRAME_ACCELERATION
    max_speed: float = MAX_FRAME_SPEED
    progress: float = 0.0
    speed: float = 0.0

    def advance(self) -> bool:
        """Move forward one frame.

        Returns:
            True if this frame completed a lap
        """
        self.speed = min(self.speed + self.acceleration, self.max_speed)
        self.progress += self.speed
        if self.progress >= 1.0:
            self.reset()
            return True
        return False

    def reset(self) -> None:
        self.progress = 0.0
        self.speed = 0.0
