"""Console output formatting."""

from f1viz.models import Car
from f1viz.simulation.events import RaceEvent
from f1viz.simulation.race import LapRecord, RaceSnapshot


def format_gap(gap: float) -> str:
    """Format a gap to the leader as ``+s.sss`` or ``+m:ss.ss``."""
    if gap < 60:
        return f"+{gap:.3f}s"
    mins = int(gap // 60)
    secs = gap % 60
    return f"+{mins}:{secs:05.2f}"


class ConsoleOutput:
    """Formats race state for console display."""

    @staticmethod
    def print_standings(standings: list[Car]) -> None:
        """Print the classification to console.

        Args:
            standings: Cars sorted by position
        """
        print("\n" + "=" * 70)
        print("STANDINGS")
        print("=" * 70)
        print(f"{'Pos':<4} {'Car':<12} {'Strategy':<13} {'Time/Gap':<15} {'Tyre':<8} {'Life':<7} {'Pits':<5}")
        print("-" * 70)

        leader_time = None
        for car in standings:
            if leader_time is None:
                leader_time = car.total_time
                time_str = f"{car.total_time:.3f}s"
            else:
                time_str = format_gap(car.total_time - leader_time)

            name = f"{car.name}*" if car.is_player else car.name
            print(
                f"{car.position:<4} "
                f"{name:<12} "
                f"{car.strategy.value:<13} "
                f"{time_str:<15} "
                f"{car.tire.name:<8} "
                f"{car.tyre_life:5.1f}% "
                f"{car.pit_stops:<5}"
            )

        print("=" * 70)

    @staticmethod
    def print_events(events: list[RaceEvent]) -> None:
        """Print the event log, newest first."""
        print("\nRECENT EVENTS:")
        print("-" * 50)
        for event in events:
            print(f"  Lap {event.lap:>3}  [{event.event_type.value:<8}] {event.message}")

    @staticmethod
    def print_history(history: list[LapRecord]) -> None:
        """Print the player's lap-by-lap record."""
        print("\nPLAYER LAPS:")
        print("-" * 50)
        print(f"  {'Lap':<5} {'Time':<10} {'Tyre':<8} {'Pos':<4}")
        for record in history:
            print(f"  {record.lap:<5} {record.lap_time:<10.3f} {record.tyre_life:6.1f}% P{record.position}")

    @classmethod
    def print_race(cls, snapshot: RaceSnapshot, show_history: bool = True) -> None:
        """Print standings, events and optionally the player history."""
        print(f"\nLap {snapshot.lap} / {snapshot.total_laps} ({snapshot.phase.value})")
        cls.print_standings(snapshot.standings)
        cls.print_events(snapshot.events)
        if show_history:
            cls.print_history(snapshot.history)
