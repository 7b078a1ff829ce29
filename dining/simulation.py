"""Philosopher threads and the monitor that watches them."""

import sys
import threading
import time
from typing import TextIO

from .clock import msleep, now
from .table import Philosopher, Table

C_GRAY = "\x1b[1;30m"
C_ORANGE = "\x1b[0;33m"
C_RED = "\x1b[0;31m"
C_CYAN = "\x1b[0;36m"
NC = "\x1b[0m"

TAKEN_FORK = f"{C_GRAY}has taken a fork{NC}"
EATING = f"{C_ORANGE}is eating{NC}"
SLEEPING = f"{C_RED}is sleeping{NC}"
THINKING = f"{C_CYAN}is thinking{NC}"

_MONITOR_POLL_SECONDS = 0.0003
_EVEN_START_DELAY_MS = 100


class Simulation:
    """Runs the dining philosophers on a table, writing events to ``out``."""

    def __init__(self, table: Table, out: TextIO | None = None):
        self.table = table
        self.out = out if out is not None else sys.stdout

    def _write(self, line: str) -> None:
        print(line, file=self.out, flush=True)

    def status(self, philo: Philosopher, message: str) -> None:
        """Log a philosopher's action unless the simulation has ended."""
        with self.table.monitor:
            if not self.table.end:
                elapsed = now() - self.table.start
                self._write(f"{elapsed:5d} {philo.id:3d} {message}")

    def eat(self, philo: Philosopher) -> None:
        """Take both forks, record the meal and eat."""
        with philo.right_fork:
            self.status(philo, TAKEN_FORK)
            with philo.left_fork:
                self.status(philo, TAKEN_FORK)
                self.status(philo, EATING)
                with self.table.monitor:
                    if not self.table.end:
                        philo.last_meal = now()
                        philo.meal += 1
                msleep(self.table.settings.time_to_eat)

    def rest(self, philo: Philosopher) -> None:
        """Sleep after a meal."""
        self.status(philo, SLEEPING)
        msleep(self.table.settings.time_to_sleep)

    def _ended(self) -> bool:
        with self.table.monitor:
            return self.table.end

    def routine(self, philo: Philosopher) -> None:
        """Eat, sleep and think until the simulation ends."""
        if self.table.settings.nbr_of_philo == 1:
            self.status(philo, TAKEN_FORK)
            return
        if philo.id % 2 == 0:
            msleep(_EVEN_START_DELAY_MS)
        while not self._ended():
            self.eat(philo)
            self.rest(philo)
            self.status(philo, THINKING)

    def all_eaten(self) -> bool:
        """End the run when every philosopher has had enough meals; caller holds the monitor."""
        must_eat = self.table.settings.must_eat
        if must_eat < 0:
            return False
        if any(p.meal < must_eat for p in self.table.philosophers):
            return False
        self._write("\nall have eaten")
        self.table.end = True
        return True

    def find_dead(self) -> Philosopher | None:
        """End the run on the first starved philosopher; caller holds the monitor."""
        time_to_die = self.table.settings.time_to_die
        for philo in self.table.philosophers:
            if now() - philo.last_meal >= time_to_die:
                self._write(f"\n{now() - self.table.start} {philo.id} died")
                self.table.end = True
                return philo
        return None

    def monitor(self) -> None:
        """Poll until someone dies or everyone has eaten enough."""
        while True:
            with self.table.monitor:
                self.all_eaten()
                self.find_dead()
                if self.table.end:
                    return
            time.sleep(_MONITOR_POLL_SECONDS)

    def run(self) -> None:
        """Start all philosophers, monitor them and wait for them to finish."""
        self.table.start = now()
        for philo in self.table.philosophers:
            philo.thread = threading.Thread(
                target=self.routine, args=(philo,), name=f"philo-{philo.id}"
            )
            philo.thread.start()
        self.monitor()
        for philo in self.table.philosophers:
            philo.thread.join()