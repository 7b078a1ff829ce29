"""Simulation settings and the table of philosophers and forks."""

import threading
from collections.abc import Sequence
from dataclasses import dataclass, field

from .check import parse_long
from .clock import now


@dataclass(frozen=True)
class Settings:
    """Parameters of one simulation run; ``must_eat`` is -1 when unlimited."""

    nbr_of_philo: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int = -1


@dataclass(eq=False)
class Philosopher:
    """One seat at the table with its two forks and meal bookkeeping."""

    id: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    last_meal: int
    meal: int = 0
    eating: bool = False
    thread: threading.Thread | None = field(default=None, repr=False)


def parse_settings(args: Sequence[str]) -> Settings | None:
    """Build settings from validated operands; None when there is nothing to simulate."""
    nbr_of_philo = parse_long(args[0])
    if nbr_of_philo <= 0:
        return None
    must_eat = parse_long(args[4]) if len(args) > 4 else -1
    if must_eat == 0:
        return None
    return Settings(
        nbr_of_philo=nbr_of_philo,
        time_to_die=parse_long(args[1]),
        time_to_eat=parse_long(args[2]),
        time_to_sleep=parse_long(args[3]),
        must_eat=must_eat,
    )


class Table:
    """Forks, philosophers and the shared state guarded by the monitor lock."""

    def __init__(self, settings: Settings):
        if settings.nbr_of_philo <= 0:
            raise ValueError("the table needs at least one philosopher")
        self.settings = settings
        self.monitor = threading.Lock()
        self.end = False
        self.start = now()
        count = settings.nbr_of_philo
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(
                id=i + 1,
                left_fork=self.forks[i],
                right_fork=self.forks[(i + 1) % count],
                last_meal=now(),
            )
            for i in range(count)
        ]