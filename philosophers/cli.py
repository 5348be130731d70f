"""Command-line entry point: philosophers N die eat sleep [must_eat]."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from philosophers.config import Settings
from philosophers.simulation import Simulation
from philosophers.utils import InvalidInputError, check_args


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the simulation and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        return 1
    try:
        check_args(args)
    except InvalidInputError as error:
        print(error)
        return 1
    settings = Settings.from_args(args)
    Simulation(settings, sys.stdout).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())