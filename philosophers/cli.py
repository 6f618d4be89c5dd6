"""Command-line entry point for the dining philosophers simulation."""

from __future__ import annotations

import sys
from typing import Sequence

from philosophers.parsing import ArgumentError, parse_args
from philosophers.simulation import Table

_MESSAGES = {
    1: (
        "Argument error. For proper usage provide:\n"
        "\t1. number_of_philosophers (0 - 200)\n"
        "\t2. time_to_die (>60ms)\n"
        "\t3. time_to_eat (>60ms)\n"
        "\t4. time_to_sleep (>60ms)\n"
        "\t5. max_number_of_meals (optional, >=0)"
    ),
    2: "Init error",
    3: "Free error",
}


def error_message(code: int) -> str:
    """Return the user-facing text for an exit code, or an empty string."""
    return _MESSAGES.get(code, "")


def main(argv: Sequence[str] | None = None) -> int:
    """Run the simulation from command-line arguments and return the exit code."""
    if argv is None:
        argv = sys.argv[1:]
    try:
        settings = parse_args(argv)
    except ArgumentError:
        print(error_message(1))
        return 1
    try:
        Table(settings, sys.stdout).run()
    except RuntimeError:
        print(error_message(2))
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())