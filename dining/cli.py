"""Command-line entry point for the dining philosophers simulation."""

import sys
from collections.abc import Sequence

from .check import ArgumentError, validate_args
from .simulation import Simulation
from .table import Table, parse_settings

USAGE = "nbr_of_philo time_to_die time_to_eat time_to_sleep [must_eat]"


def main(argv: Sequence[str] | None = None) -> int:
    """Validate the operands and run the simulation."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        validate_args(args)
    except ArgumentError as exc:
        print(exc)
        return 0
    settings = parse_settings(args)
    if settings is None:
        return 0
    Simulation(Table(settings)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())