"""Tests for the race lifecycle controller."""

import numpy as np
import pytest

from f1viz.models import RaceConfig, Strategy, TireCompound
from f1viz.simulation import RaceController, RacePhase, RaceStateError
from f1viz.simulation.events import EventType
from f1viz.simulation.race import build_grid

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


def _solo_config() -> RaceConfig:
    return RaceConfig(
        total_laps=10,
        num_rivals=0,
        weather="dry",
        track_type="balanced",
        starting_tyre="medium",
    )


def _started(config: RaceConfig | None = None, seed: int = 1) -> RaceController:
    controller = RaceController(config=config or RaceConfig(total_laps=20), rng=np.random.default_rng(seed))
    controller.start()
    return controller


# ---------------------------------------------------------------------------
# Grid
# ---------------------------------------------------------------------------


def test_build_grid(make_rng) -> None:
    """Player leads the grid on the configured tyre, rivals follow."""
    # compound index, strategy index for each rival
    rng = make_rng(integers=[0, 0, 2, 2, 1, 1])
    config = RaceConfig(num_rivals=3, starting_tyre="hard")
    cars = build_grid(config, rng)

    assert [c.name for c in cars] == ["Player", "Rival 1", "Rival 2", "Rival 3"]
    assert [c.position for c in cars] == [1, 2, 3, 4]
    assert cars[0].is_player
    assert cars[0].current_tyre == TireCompound.HARD
    assert cars[0].strategy == Strategy.BALANCED
    assert [c.current_tyre for c in cars[1:]] == [TireCompound.SOFT, TireCompound.HARD, TireCompound.MEDIUM]
    assert [c.strategy for c in cars[1:]] == [Strategy.AGGRESSIVE, Strategy.CONSERVATIVE, Strategy.BALANCED]
    assert cars[2].track_position == pytest.approx(-0.10)


# ---------------------------------------------------------------------------
# Lifecycle
# ---------------------------------------------------------------------------


def test_initial_phase_is_idle() -> None:
    controller = RaceController()
    assert controller.phase == RacePhase.IDLE
    assert controller.state.cars == []
    assert controller.tick() is None


def test_start_race() -> None:
    controller = _started(RaceConfig(num_rivals=4))
    state = controller.state
    assert controller.phase == RacePhase.RUNNING
    assert len(state.cars) == 5
    assert state.lap == 0
    assert state.history == []
    assert [e.event_type for e in state.events] == [EventType.START]
    assert state.events.events[0].message == "Race Started!"


def test_solo_race_finishes_after_ten_laps(fixed_rng) -> None:
    """Player alone over 10 laps: lap counter 10, finished, P1."""
    controller = RaceController(config=_solo_config(), rng=fixed_rng)
    controller.start()
    for _ in range(10):
        controller.tick()

    state = controller.state
    assert state.lap == 10
    assert controller.phase == RacePhase.FINISHED
    assert state.player.position == 1
    assert state.events.events[0].event_type == EventType.FINISH
    assert state.events.events[0].message == "Race Finished!"
    assert [r.lap for r in state.history] == list(range(1, 11))

    # No more laps once finished
    assert controller.tick() is None
    assert state.lap == 10


def test_pause_blocks_ticks_and_frames() -> None:
    controller = _started()
    for _ in range(10):
        controller.advance_frame()
    progress = controller.state.progress.progress

    assert controller.toggle_pause() == RacePhase.PAUSED
    for _ in range(500):
        assert not controller.advance_frame()
    assert controller.tick() is None
    assert controller.state.progress.progress == progress
    assert controller.state.lap == 0

    assert controller.toggle_pause() == RacePhase.RUNNING


def test_toggle_pause_ignored_when_idle() -> None:
    controller = RaceController()
    assert controller.toggle_pause() == RacePhase.IDLE


def test_frames_drive_lap_updates() -> None:
    """One lap update per progress rollover."""
    controller = _started()
    ticks = sum(controller.advance_frame() for _ in range(145))
    assert ticks == 1
    assert controller.state.lap == 1
    assert controller.state.progress.progress == 0.0

    ticks = sum(controller.advance_frame() for _ in range(145 * 3))
    assert ticks == 3
    assert controller.state.lap == 4


def test_reset_discards_race() -> None:
    controller = _started()
    for _ in range(3):
        controller.tick()
    controller.reset()

    state = controller.state
    assert controller.phase == RacePhase.IDLE
    assert state.lap == 0
    assert state.cars == []
    assert len(state.events) == 0
    assert state.history == []
    assert not controller.advance_frame()


def test_configure_only_when_not_live() -> None:
    controller = _started()
    with pytest.raises(RaceStateError):
        controller.configure(RaceConfig(total_laps=30))

    controller.reset()
    controller.configure(RaceConfig(total_laps=30))
    assert controller.config.total_laps == 30


def test_restart_after_finish() -> None:
    controller = _started(RaceConfig(total_laps=10, num_rivals=2))
    controller.run_to_finish()
    assert controller.phase == RacePhase.FINISHED

    controller.start()
    assert controller.phase == RacePhase.RUNNING
    assert controller.state.lap == 0
    assert len(controller.state.events) == 1


def test_start_refused_while_live() -> None:
    """A running or paused race must be reset before starting again."""
    controller = _started()
    controller.tick()
    with pytest.raises(RaceStateError):
        controller.start()
    assert controller.state.lap == 1

    controller.toggle_pause()
    with pytest.raises(RaceStateError):
        controller.start()
    assert controller.phase == RacePhase.PAUSED
    assert controller.state.lap == 1

    controller.reset()
    controller.start()
    assert controller.phase == RacePhase.RUNNING


def test_pit_stops_are_logged(caplog) -> None:
    """Each car that stops on a lap gets a debug line."""
    controller = _started(RaceConfig(total_laps=40, num_rivals=5), seed=3)
    with caplog.at_level("DEBUG", logger="f1viz.simulation.race"):
        controller.run_to_finish()

    stops = [r for r in caplog.records if "stopped" in r.getMessage()]
    assert len(stops) == sum(c.pit_stops for c in controller.state.cars)


def test_full_race_invariants() -> None:
    """Every tick keeps ranks a permutation and the event log bounded."""
    config = RaceConfig(total_laps=60, num_rivals=19, track_type="technical")
    controller = _started(config, seed=99)
    n_cars = 20

    while controller.phase == RacePhase.RUNNING:
        before = {c.id: c.total_time for c in controller.state.cars}
        controller.tick()
        state = controller.state
        assert sorted(c.position for c in state.standings) == list(range(1, n_cars + 1))
        assert len(state.events) <= 10
        for car in state.cars:
            assert 0.0 <= car.tyre_life <= 100.0
            assert car.total_time >= before[car.id]

    assert controller.state.lap == 60
    assert len(controller.state.history) == 60


def test_seeded_races_are_reproducible() -> None:
    config = RaceConfig(total_laps=30, num_rivals=6)
    first = RaceController(config=config, rng=np.random.default_rng(5)).run_to_finish()
    second = RaceController(config=config, rng=np.random.default_rng(5)).run_to_finish()
    assert first.model_dump() == second.model_dump()


def test_snapshot() -> None:
    controller = _started(RaceConfig(total_laps=15, num_rivals=3))
    controller.tick()
    snapshot = controller.snapshot()
    assert snapshot.phase == RacePhase.RUNNING
    assert snapshot.lap == 1
    assert snapshot.total_laps == 15
    assert len(snapshot.cars) == 4
    assert snapshot.standings[0].position == 1
    assert snapshot.history[0].lap == 1

    data = snapshot.model_dump(mode="json")
    assert data["phase"] == "running"
    assert data["events"][-1]["event_type"] == "start"
