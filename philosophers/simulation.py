"""Threaded dining-philosophers simulation with a monitoring thread."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from typing import TextIO

from philosophers.config import Settings
from philosophers.utils import now_ms, precise_sleep

TAKEN_FORK = "has taken a fork"
EATING = "is eating"
SLEEPING = "is sleeping"
THINKING = "is thinking"
DIED = "died"


@dataclass
class Philosopher:
    """State of one philosopher at the table."""

    id: int
    meals_eaten: int = 0
    last_meal: int = 0
    thread: threading.Thread | None = None


class Simulation:
    """A table of philosophers sharing forks, watched by a monitor thread."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = sys.stdout if out is None else out
        self.philosophers = [Philosopher(i + 1) for i in range(settings.nb_philos)]
        self.forks = [threading.Lock() for _ in range(settings.nb_philos)]
        self.ended = False
        self.start_time = now_ms()
        self._state = threading.RLock()
        self._print = threading.Lock()

    def _is_ended(self) -> bool:
        with self._state:
            return self.ended

    def _write(self, line: str) -> None:
        with self._print:
            self.out.write(line)
            self.out.flush()

    def display(self, philo_id: int, message: str) -> None:
        """Print a timestamped status line unless the simulation has ended."""
        with self._state:
            elapsed = now_ms() - self.start_time
            if not self.ended:
                self._write(f"{elapsed} {philo_id} {message}\n")

    def _fork_indices(self, philo_id: int) -> tuple[int, int]:
        right = philo_id - 1
        left = self.settings.nb_philos - 1 if philo_id == 1 else right - 1
        return left, right

    def take_forks(self, philo_id: int) -> None:
        """Pick up both forks; even philosophers start with the left one."""
        left, right = self._fork_indices(philo_id)
        order = (left, right) if philo_id % 2 == 0 else (right, left)
        for index in order:
            self.forks[index].acquire()
            self.display(philo_id, TAKEN_FORK)

    def release_forks(self, philo_id: int) -> None:
        """Put both forks down, in the reverse order of taking them."""
        left, right = self._fork_indices(philo_id)
        order = (right, left) if philo_id % 2 == 0 else (left, right)
        for index in order:
            self.forks[index].release()

    def eat(self, philo_id: int) -> None:
        """Take the forks, record a meal and eat for time_to_eat."""
        if self._is_ended():
            return
        self.take_forks(philo_id)
        self.display(philo_id, EATING)
        with self._state:
            philosopher = self.philosophers[philo_id - 1]
            philosopher.meals_eaten += 1
            philosopher.last_meal = now_ms()
        precise_sleep(self.settings.time_to_eat * 1000)
        self.release_forks(philo_id)

    def sleep(self, philo_id: int) -> None:
        """Sleep for time_to_sleep."""
        if self._is_ended():
            return
        self.display(philo_id, SLEEPING)
        precise_sleep(self.settings.time_to_sleep * 1000)

    def think(self, philo_id: int) -> None:
        """Think, pausing briefly when eating takes at least as long as sleeping."""
        if self._is_ended():
            return
        self.display(philo_id, THINKING)
        eat, rest = self.settings.time_to_eat, self.settings.time_to_sleep
        if eat >= rest:
            precise_sleep((eat - rest + 1) * 1000)

    def routine(self, philo_id: int) -> None:
        """Eat, sleep and think in a loop until the simulation ends."""
        if philo_id % 2 == 0:
            precise_sleep(50)
        while not self._is_ended():
            self.eat(philo_id)
            self.sleep(philo_id)
            self.think(philo_id)

    def starved(self) -> bool:
        """Report and end the simulation if a philosopher went too long without eating.

        Nothing is checked while some philosopher has not yet had a first meal.
        """
        with self._state:
            for philosopher in self.philosophers:
                if philosopher.last_meal == 0:
                    return False
                if now_ms() - philosopher.last_meal >= self.settings.time_to_die:
                    self.display(philosopher.id, DIED)
                    self.ended = True
                    return True
        return False

    def all_eaten(self) -> bool:
        """End the simulation once every philosopher has eaten must_eat meals."""
        if self.settings.must_eat <= 0:
            return False
        with self._state:
            if any(p.meals_eaten < self.settings.must_eat for p in self.philosophers):
                return False
            self.ended = True
            return True

    def monitor(self) -> None:
        """Watch the table until someone dies or everyone has eaten enough."""
        while not self._is_ended():
            if self.all_eaten() or self.starved():
                return
            precise_sleep(50)

    def handle_one(self) -> None:
        """A lone philosopher takes the only fork and dies after time_to_die."""
        self.display(1, TAKEN_FORK)
        precise_sleep(self.settings.time_to_die * 1000)
        self._write(f"{now_ms() - self.start_time} 1 {DIED}\n")

    def run(self) -> None:
        """Run the simulation to its end and wait for every thread."""
        if self.settings.nb_philos == 1:
            self.handle_one()
            return
        if self.settings.must_eat == 0:
            return
        watcher = threading.Thread(target=self.monitor, name="monitor")
        watcher.start()
        for philosopher in self.philosophers:
            precise_sleep(100)
            philosopher.thread = threading.Thread(
                target=self.routine, args=(philosopher.id,), name=f"philo-{philosopher.id}"
            )
            philosopher.thread.start()
        precise_sleep(1000)
        for philosopher in self.philosophers:
            philosopher.thread.join()
        watcher.join()