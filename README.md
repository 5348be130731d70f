# philosophers

A simulation of the dining philosophers problem. Each philosopher runs in its
own thread. The philosophers sit around a table, and there is one fork between
each pair of neighbours. Each philosopher repeatedly takes two forks, eats,
sleeps and thinks. A monitor thread watches the table. It ends the simulation
when a philosopher has gone `TIME_TO_DIE` milliseconds without eating, or when
every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
philosophers NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS_REQUIRED]
```

You can also start it with `python -m philosophers.cli` and the same arguments.

All times are in milliseconds. Every argument must be written with digits only,
and no argument may start with `0`. If an argument breaks either rule, the
program prints `invalid input` and exits with status 1. The program also exits
with status 1, without printing anything, if you give fewer than four arguments.
When the simulation runs, the exit status is 0.

Example:

```
philosophers 5 800 200 200 7
```

Each event is printed on its own line. A line has three parts: the number of
milliseconds since the simulation started, the philosopher's number (counting
from 1), and the event. For example:

```
12 1 has taken a fork
12 1 has taken a fork
12 1 is eating
```

The events are `has taken a fork`, `is eating`, `is sleeping`, `is thinking`
and `died`. After the simulation has ended, no more lines are printed.

A table with a single philosopher has only one fork. That philosopher takes the
fork, waits `TIME_TO_DIE` milliseconds, and dies.

## Library use

```python
import sys

from philosophers.config import Settings
from philosophers.simulation import Simulation

settings = Settings.from_args(["4", "410", "200", "200", "3"])
Simulation(settings, sys.stdout).run()
```

`Settings.from_args` takes the arguments that come after the program name. It
raises `ValueError` if there are fewer than four. When there is no fifth
argument, `must_eat` is `-1`, and the simulation runs until a philosopher dies.
If `must_eat` is `0` and there is more than one philosopher, `Simulation.run`
returns at once without printing anything.

`philosophers.utils` holds the helpers that the simulation uses:

- `atoi` parses a leading integer. It skips leading whitespace, accepts one
  optional sign, and returns 0 when it finds no digits.
- `now_ms` returns the wall-clock time in milliseconds.
- `precise_sleep` sleeps for at least the given number of microseconds.
- `check_args` checks the arguments and raises `InvalidInputError` when one is
  not valid.