# dining

A command-line simulation of the dining philosophers problem. Every
philosopher runs in its own thread. Philosophers sit around a table with
one fork between each pair of neighbours. Each philosopher picks up two
forks, eats, sleeps and thinks, and then starts again. A monitor watches
the table. The simulation stops as soon as one philosopher starves, or
once every philosopher has eaten the required number of meals.

## Installation

```
pip install .
```

## Usage

```
dining nbr_of_philo time_to_die time_to_eat time_to_sleep [must_eat]
```

- `nbr_of_philo`: how many philosophers sit at the table. The table has the same number of forks.
- `time_to_die`: how many milliseconds a philosopher can go without starting a meal before dying.
- `time_to_eat`: how long a meal takes, in milliseconds.
- `time_to_sleep`: how long a philosopher sleeps after eating, in milliseconds.
- `must_eat` (optional): the simulation stops once every philosopher has eaten this many times.

Every argument must be made of digits only and must fit in a 32-bit signed
integer. A wrong argument count or an invalid argument prints a one-line
message (`argc should be 5 or 6`, `argv should be nbr only` or
`argv should within INT_RANGE`) and nothing runs. If `nbr_of_philo` or
`must_eat` is zero, nothing runs either.

Example:

```
dining 5 800 200 200 7
```

Each event is printed as a line that holds the elapsed milliseconds (padded
to five characters), the philosopher's number (padded to three) and what
happened. The messages are coloured with ANSI escape codes:

```
    0   1 has taken a fork
    0   1 has taken a fork
    0   1 is eating
  200   1 is sleeping
  400   1 is thinking
```

Even-numbered philosophers wait 100 ms before they start. When there is only
one philosopher, it takes a single fork and does nothing else until it dies.
When the run ends, the last line reports either `<time> <id> died` or
`all have eaten`, each after a blank line. No further events are printed after that.

## Library use

```python
from dining.check import validate_args
from dining.simulation import Simulation
from dining.table import Table, parse_settings

operands = ["4", "410", "200", "200", "3"]
validate_args(operands)
settings = parse_settings(operands)
if settings is not None:
    Simulation(Table(settings)).run()
```

- `dining.check.validate_args(args)` checks the operands, without the program
  name, and returns them as integers. If they are not valid, it raises
  `dining.check.ArgumentError`, a subclass of `ValueError`.
- `dining.table.parse_settings(args)` builds a `Settings` object from the
  operands. It returns `None` when there is nothing to simulate.
- `dining.table.Table(settings)` creates the forks and the `Philosopher`
  objects.
- `dining.simulation.Simulation(table, out=None)` runs the table with
  `run()`. Events go to `out`, which is standard output by default.
- `dining.clock.now()` and `dining.clock.msleep(ms)` give millisecond timing.

## Running the tests

```
pip install .[test]
pytest
```