"""Command line entry point.

Usage:
    f1viz serve [--host HOST] [--port PORT]
    f1viz simulate [--laps N] [--rivals N] [--tyre TYRE] [--seed SEED]
"""

import argparse
import logging
import sys

import numpy as np
from pydantic import ValidationError

from f1viz.config import LOG_LEVELS, Settings
from f1viz.models import RaceConfig, StartingTyre, TrackType, WeatherCondition
from f1viz.output import ConsoleOutput
from f1viz.simulation import RaceController

logger = logging.getLogger(__name__)


def setup_logging(level: str) -> None:
    logging.basicConfig(level=level, format="%(asctime)s - %(levelname)s - %(message)s")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="f1viz", description="F1 visual race simulator")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: F1VIZ_LOG_LEVEL or INFO)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    serve = sub.add_parser("serve", help="Serve the UI bundle and API")
    serve.add_argument("--host", default=None, help="Interface (default: HOST or 0.0.0.0)")
    serve.add_argument("--port", type=int, default=None, help="Port (default: PORT or 3000)")

    simulate = sub.add_parser("simulate", help="Run a race headless and print the result")
    simulate.add_argument("--laps", type=int, default=50, help="Race distance (default: 50)")
    simulate.add_argument("--rivals", type=int, default=5, help="Number of rivals (default: 5)")
    simulate.add_argument(
        "--tyre",
        choices=[t.value for t in StartingTyre],
        default=StartingTyre.MEDIUM.value,
        help="Player starting tyre (default: medium)",
    )
    simulate.add_argument(
        "--weather",
        choices=[w.value for w in WeatherCondition],
        default=WeatherCondition.DRY.value,
    )
    simulate.add_argument(
        "--track",
        choices=[t.value for t in TrackType],
        default=TrackType.BALANCED.value,
    )
    simulate.add_argument("--temp", type=float, default=35.0, help="Track temperature in Celsius")
    simulate.add_argument("--seed", type=int, default=None, help="Random seed for a reproducible race")
    simulate.add_argument("--no-history", action="store_false", dest="history", help="Hide player lap table")
    return parser


def run_simulate(args: argparse.Namespace) -> int:
    try:
        config = RaceConfig(
            total_laps=args.laps,
            num_rivals=args.rivals,
            starting_tyre=args.tyre,
            weather=args.weather,
            track_type=args.track,
            track_temp=args.temp,
        )
    except ValidationError as exc:
        print(f"Invalid race configuration:\n{exc}", file=sys.stderr)
        return 2

    controller = RaceController(config=config, rng=np.random.default_rng(args.seed))
    snapshot = controller.run_to_finish()
    ConsoleOutput.print_race(snapshot, show_history=args.history)
    return 0


def run_serve(args: argparse.Namespace, settings: Settings) -> int:
    import uvicorn

    from f1viz.server import create_app

    host = args.host or settings.host
    port = args.port or settings.port
    logger.info("Server running on port %d", port)
    uvicorn.run(create_app(settings), host=host, port=port, log_level=settings.log_level.lower())
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = Settings.from_env()
    except ValidationError as exc:
        print(f"Invalid environment settings:\n{exc}", file=sys.stderr)
        return 2

    if args.log_level:
        settings = settings.model_copy(update={"log_level": args.log_level})
    setup_logging(settings.log_level)

    if args.command == "serve":
        return run_serve(args, settings)
    return run_simulate(args)


if __name__ == "__main__":
    sys.exit(main())
