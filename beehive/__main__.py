"""Entry point for ``python -m beehive``.

Loads the default YAML config, builds a simulation engine, and either
opens a Pygame window to play the colony or, with ``--headless``, works
a fixed number of shifts and prints each status report.
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys
from typing import TextIO

from beehive.colony.bee import Job
from beehive.simulation.config import SimulationConfig
from beehive.simulation.engine import SimulationEngine

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    """Return the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="beehive",
        description="Beehive - honey and nectar colony simulator",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--headless",
        action="store_true",
        help="Print status reports instead of opening a window",
    )
    parser.add_argument(
        "--shifts",
        type=int,
        default=10,
        help="Shifts to work in headless mode (default: 10)",
    )
    parser.add_argument(
        "--assign",
        action="append",
        default=[],
        choices=[job.value for job in Job],
        metavar="JOB",
        help="Assign a worker before the first shift (repeatable)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: WARNING)",
    )
    return parser


def run_headless(
    engine: SimulationEngine,
    shifts: int,
    out: TextIO | None = None,
) -> int:
    """Work up to ``shifts`` shifts, printing the report after each.

    Args:
        engine: The engine to advance.
        shifts: Maximum number of shifts.
        out: Stream the reports are written to (default: stdout).

    Returns:
        Process exit code: 0 if the colony survived, 1 if it collapsed.
    """
    out = out or sys.stdout
    print(engine.status_report, file=out)
    for _ in range(shifts):
        engine.step()
        print(f"\n--- Shift {engine.shift} ---", file=out)
        print(engine.status_report, file=out)
        if engine.collapsed:
            print("\nThe colony ran out of honey.", file=out)
            return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """Parse CLI args, create engine, play or run headless."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = SimulationConfig.from_yaml(args.config)
    engine = SimulationEngine(config=config)
    for job in args.assign:
        engine.assign(job)

    if args.headless:
        return run_headless(engine, args.shifts)

    from beehive.ui.pygame_client import PygameRenderer

    renderer = PygameRenderer(engine=engine)
    renderer.run(fps=args.fps)
    return 0


if __name__ == "__main__":
    sys.exit(main())
