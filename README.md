# philosophers

This package simulates the dining philosophers problem. Each philosopher runs
in its own thread. It sits at a round table with one fork on each side and
repeats three steps: eat, sleep, think. A monitor watches the table. It stops
the simulation when a philosopher starves. If a meal limit is given, it also
stops when every philosopher has eaten that many meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [max_number_of_meals]
```

- `number_of_philosophers`: 1 to 200
- `time_to_die`, `time_to_eat`, `time_to_sleep`: milliseconds, at least 60
- `max_number_of_meals`: optional, greater than 0

Each number is read from its leading digits. Leading whitespace and one sign
are allowed. A negative value, or a value outside the 32-bit integer range,
counts as invalid.

Example:

```
philo 5 800 200 200 7
```

Each state change is printed as one line. The line holds the milliseconds
since the start, the philosopher's number, and what happened:

```
0 1 has taken a fork
0 1 has taken a fork
0 1 is eating
200 1 is sleeping
```

If a philosopher starves, the simulation prints one last line, `<ms> <id> died`,
and nothing after it.

Exit status:

- `0` when the run finishes
- `1` for invalid arguments, after printing a usage message
- `2` when the simulation fails to start, after printing `Init error`

## Library use

```python
import sys

from philosophers.parsing import parse_args
from philosophers.simulation import Table

settings = parse_args(["4", "410", "200", "200", "3"])
reason = Table(settings, sys.stdout).run()
```

`parse_args` takes the arguments that follow the program name. It returns a
`Settings` object. It raises `ArgumentError`, a subclass of `ValueError`, when
the number of arguments is wrong or a value is out of range. `check_atol`
exposes the number reader that `parse_args` uses.

`Table.run` starts the philosophers, runs the monitor, and waits for every
thread to finish. It returns an `EndReason`: `DIED` when a philosopher
starved, or `FULL` when all reached the meal limit. `philosophers.clock`
provides `now_ms()` and `sleep_ms(duration)`, which the simulation uses for
timing.

## Tests

```
pip install .[test]
pytest
```