"""Command-line argument parsing for the dining philosophers simulation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

MIN_TIME_MS = 60
MAX_PHILOSOPHERS = 200
_SPACES = " \t\n\v\f\r"


class ArgumentError(ValueError):
    """Raised when the simulation arguments are missing or out of range."""


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; times are in milliseconds."""

    n_philo: int
    die_time: int
    eat_time: int
    sleep_time: int
    meal_limit: int = -1


def check_atol(text: str) -> int:
    """Read a leading non-negative integer; return -1 if negative or out of int range.

    Leading whitespace and one sign are skipped, and reading stops at the
    first character that is not a digit.
    """
    rest = text.lstrip(_SPACES)
    negative = False
    if rest[:1] in ("+", "-"):
        negative = rest[0] == "-"
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not ("0" <= char <= "9"):
            break
        digits += char
    number = int(digits) if digits else 0
    if negative or number > INT_MAX or number < INT_MIN:
        return -1
    return number


def parse_args(argv: Sequence[str]) -> Settings:
    """Build settings from the arguments that follow the program name."""
    if not 4 <= len(argv) <= 5:
        raise ArgumentError("expected 4 or 5 arguments")
    n_philo, die_time, eat_time, sleep_time = (check_atol(arg) for arg in argv[:4])
    has_limit = len(argv) == 5
    meal_limit = check_atol(argv[4]) if has_limit else -1
    if die_time < MIN_TIME_MS or eat_time < MIN_TIME_MS or sleep_time < MIN_TIME_MS:
        raise ArgumentError(f"times must be at least {MIN_TIME_MS} ms")
    if not 0 < n_philo <= MAX_PHILOSOPHERS:
        raise ArgumentError(f"number of philosophers must be 1 to {MAX_PHILOSOPHERS}")
    if has_limit and meal_limit <= 0:
        raise ArgumentError("meal limit must be positive")
    return Settings(n_philo, die_time, eat_time, sleep_time, meal_limit)