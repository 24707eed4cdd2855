#!/usr/bin/env python3
"""Quick simulation example driven frame by frame.

Runs a short seeded race the way the browser animation loop does: one
frame at a time, pausing for a while halfway through, and prints the
standings every few laps.

Usage:
    python examples/quick_simulation.py
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import numpy as np

from f1viz.models import RaceConfig, StartingTyre, TrackType
from f1viz.output import ConsoleOutput
from f1viz.simulation import RaceController, RacePhase


def main():
    print("F1 Visual Simulator - Quick Example")
    print("=" * 50)

    config = RaceConfig(
        total_laps=20,
        num_rivals=7,
        starting_tyre=StartingTyre.SOFT,
        track_type=TrackType.TECHNICAL,
    )
    controller = RaceController(config=config, rng=np.random.default_rng(42))
    controller.start()

    frames = 0
    paused_frames = 0
    while controller.phase != RacePhase.FINISHED:
        frames += 1

        # Pause for 120 frames when reaching half distance
        if controller.state.lap == config.total_laps // 2 and paused_frames == 0:
            controller.toggle_pause()
        if controller.phase == RacePhase.PAUSED:
            paused_frames += 1
            if paused_frames >= 120:
                controller.toggle_pause()

        if controller.advance_frame() and controller.state.lap % 5 == 0:
            ConsoleOutput.print_standings(controller.state.standings)

    print(f"\nFinished after {frames} frames ({paused_frames} paused)")
    ConsoleOutput.print_race(controller.snapshot())
    return 0


if __name__ == "__main__":
    sys.exit(main())
