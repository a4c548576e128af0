"""The dining philosophers simulation, one thread per philosopher."""

from __future__ import annotations

import sys
import threading
import time
from typing import TextIO

from dining.config import Config
from dining.utils import now_ms

_SINGLE_POLL_S = 0.0001


def _sleep_ms(milliseconds: float) -> None:
    if milliseconds > 0:
        time.sleep(milliseconds / 1000)


class Philosopher:
    """One philosopher sitting between two forks."""

    def __init__(
        self,
        ident: int,
        left: threading.Lock,
        right: threading.Lock,
        table: Table,
    ) -> None:
        self.id = ident
        self.left = left
        self.right = right
        self.table = table
        self.meals_eaten = 0
        self.last_meal = 0

    def time_remaining(self) -> int:
        """Milliseconds left before this philosopher starves."""
        return self.table.config.time_die - (now_ms() - self.last_meal)

    def run(self) -> None:
        """Think, eat and sleep until someone dies or the meal count is reached."""
        table = self.table
        self.last_meal = now_ms()
        if table.config.num_philo == 1:
            self._run_alone()
            return
        while self._think() and self._eat() and self._sleep():
            pass

    def _run_alone(self) -> None:
        table = self.table
        with table.log_lock:
            table.log(self, "has taken a fork")
        with self.left:
            while not table.check_death(self):
                time.sleep(_SINGLE_POLL_S)

    def _think(self) -> bool:
        table = self.table
        with table.log_lock:
            if table.check_death(self):
                return False
            table.log(self, "is thinking")
        if self.id % 2 == 0:
            first, second = self.left, self.right
        else:
            _sleep_ms(max(0, self.time_remaining()) // 3)
            first, second = self.right, self.left
        return self._take_forks(first, second)

    def _take_forks(self, first: threading.Lock, second: threading.Lock) -> bool:
        table = self.table
        first.acquire()
        second.acquire()
        with table.log_lock:
            if table.check_death(self):
                first.release()
                second.release()
                return False
            table.log(self, "has taken a fork")
            table.log(self, "has taken a fork")
            table.log(self, "is eating")
        return True

    def _eat(self) -> bool:
        table = self.table
        self.last_meal = now_ms()
        _sleep_ms(table.config.time_eat)
        self.left.release()
        self.right.release()
        self.meals_eaten += 1
        num_meal = table.config.num_meal
        if num_meal is not None and self.meals_eaten >= num_meal:
            with table.log_lock:
                if not table.check_death(self):
                    table.log(self, "is thinking")
            return False
        return True

    def _sleep(self) -> bool:
        table = self.table
        with table.log_lock:
            if table.check_death(self):
                return False
            table.log(self, "is sleeping")
        _sleep_ms(table.config.time_sleep)
        return True


class Table:
    """Shared state: forks, locks, the death flag and the output stream."""

    def __init__(self, config: Config, stream: TextIO | None = None) -> None:
        self.config = config
        self.stream = sys.stdout if stream is None else stream
        self.is_dead = False
        self.start_ms = now_ms()
        self.log_lock = threading.Lock()
        self._over_lock = threading.Lock()
        count = config.num_philo
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(i + 1, self.forks[i], self.forks[(i + 1) % count], self)
            for i in range(count)
        ]

    def log(self, philosopher: Philosopher, status: str) -> None:
        """Write a status line unless the simulation is already over."""
        if self.is_dead:
            return
        elapsed = now_ms() - self.start_ms
        self.stream.write(f"{elapsed} {philosopher.id} {status}\n")
        self.stream.flush()

    def check_death(self, philosopher: Philosopher) -> bool:
        """Return True if anyone has died, declaring this philosopher dead if starved."""
        with self._over_lock:
            if self.is_dead:
                return True
            if now_ms() - philosopher.last_meal >= self.config.time_die:
                self.log(philosopher, "died")
                self.is_dead = True
            return self.is_dead

    def run(self) -> bool:
        """Run every philosopher to completion; True if nobody died."""
        threads = [
            threading.Thread(target=p.run, name=f"philosopher-{p.id}")
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        return not self.is_dead


def run_simulation(config: Config, stream: TextIO | None = None) -> bool:
    """Run a whole simulation writing to ``stream``; True if nobody died."""
    return Table(config, stream).run()