# dining

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread. The philosophers sit around a table with one fork (a lock)
between each pair of neighbours. They think, eat and sleep in turn until one
of them starves or every one of them has eaten the requested number of meals.

## Installation

```
pip install .
```

## Usage

```
dining NUMBER_OF_PHILOSOPHERS TIME_TO_DIE TIME_TO_EAT TIME_TO_SLEEP [MEALS]
```

The same command can be started as `python -m dining.cli`.

All times are in milliseconds.

- `NUMBER_OF_PHILOSOPHERS`: must be at least 1.
- `TIME_TO_DIE`, `TIME_TO_EAT`, `TIME_TO_SLEEP`: each must be at least 60.
- `MEALS` (optional): must be at least 1. A philosopher who has eaten that
  many meals leaves the table; the simulation ends when all have left.

Every argument must be an optional `+` or `-` followed by digits only.

Each event is printed on standard output as one line,
`<milliseconds since start> <philosopher id> <status>`, where the status is
one of:

```
has taken a fork
is eating
is sleeping
is thinking
died
```

Once a philosopher has died, nothing more is printed. If `MEALS` was given
and nobody died, a final line is printed:

```
Each philosopher ate <MEALS> times
```

A lone philosopher takes the only fork, cannot eat, and dies after
`TIME_TO_DIE` milliseconds.

When the arguments are invalid, a message such as
`Error: Not enough arguments` is written to standard error and the command
exits with status 1. Otherwise it exits with status 0, whether or not a
philosopher died.

## Library use

```python
import sys
from dining.config import ConfigError, parse_config
from dining.simulation import run_simulation

try:
    config = parse_config(["4", "410", "200", "200", "2"])
except ConfigError as error:
    print(error, file=sys.stderr)
else:
    nobody_died = run_simulation(config, sys.stdout)
```

- `dining.config.parse_config(args)` takes the argument strings (without
  the program name) and returns a frozen `Config` dataclass with
  `num_philo`, `time_die`, `time_eat`, `time_sleep` and `num_meal`
  (`None` for no limit). It raises `ConfigError`, a `ValueError`, when the
  arguments are invalid.
- `dining.simulation.run_simulation(config, stream)` runs a whole
  simulation, writing event lines to `stream` (standard output when
  `None`), and returns `True` if nobody died.
- `dining.simulation.Table` holds the forks, the philosophers and the shared
  death flag; `Table.run()` starts and joins one thread per `Philosopher`.
- `dining.utils` provides `parse_int` (lenient, `atoi`-style integer
  parsing), `is_numeric` and `now_ms`.

## Running the tests

```
pip install .[test]
pytest
```