"""The dining philosophers table: philosopher threads, forks and a monitor."""

from __future__ import annotations

import itertools
import sys
import threading
import time
from enum import Enum
from typing import TextIO

from philosophers.clock import now_ms, sleep_ms
from philosophers.parsing import Settings

_FORK_POLL_SECONDS = 0.001
_MONITOR_NAP_SECONDS = 0.0005


class Event(Enum):
    """Things a philosopher can do, with the text that reports them."""

    FORK = "has taken a fork"
    EAT = "is eating"
    SLEEP = "is sleeping"
    THINK = "is thinking"
    DIE = "died"

    @property
    def message(self) -> str:
        return self.value


class EndReason(Enum):
    """Why the simulation stopped, if it has."""

    NONE = 0
    DIED = 1
    FULL = 2
    ABORTED = 3


class Philosopher:
    """One diner, holding its right fork and sharing its left with the next."""

    def __init__(self, ident: int, right_fork: threading.Lock,
                 left_fork: threading.Lock, table: Table) -> None:
        self.id = ident
        self.meals_eaten = 0
        self.last_meal_time = table.start_time
        self.is_full = False
        self.right_fork = right_fork
        self.left_fork = left_fork
        self.table = table

    def __repr__(self) -> str:
        return f"Philosopher(id={self.id}, meals_eaten={self.meals_eaten})"

    def routine(self) -> None:
        """Eat, sleep and think until the simulation ends."""
        table = self.table
        with table.ready:
            pass
        if table.settings.n_philo == 1:
            table.announce(Event.FORK, self)
            sleep_ms(table.settings.die_time)
            return
        if self.id % 2 == 0:
            sleep_ms(table.settings.eat_time)
        while not table.ended:
            if not self.eat():
                break
            self.sleep()
            self.think()

    def _take(self, fork: threading.Lock) -> bool:
        while not fork.acquire(timeout=_FORK_POLL_SECONDS):
            if self.table.ended:
                return False
        return True

    def eat(self) -> bool:
        """Take both forks and eat; return False if the simulation ended first."""
        table = self.table
        if not self._take(self.right_fork):
            return False
        try:
            table.announce(Event.FORK, self)
            if not self._take(self.left_fork):
                return False
            try:
                table.announce(Event.FORK, self)
                if self.meals_eaten < table.settings.meal_limit:
                    self.meals_eaten += 1
                self.last_meal_time = now_ms()
                table.announce(Event.EAT, self)
                sleep_ms(table.settings.eat_time)
            finally:
                self.left_fork.release()
        finally:
            self.right_fork.release()
        return True

    def sleep(self) -> None:
        """Report sleeping and sleep for the configured time."""
        self.table.announce(Event.SLEEP, self)
        sleep_ms(self.table.settings.sleep_time)

    def think(self) -> None:
        """Report thinking."""
        self.table.announce(Event.THINK, self)


class Table:
    """The shared state of a simulation and the monitor that ends it."""

    def __init__(self, settings: Settings, out: TextIO | None = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = now_ms()
        self.end = EndReason.NONE
        self.full_philos = 0
        self.ready = threading.Lock()
        self._print_lock = threading.Lock()
        count = settings.n_philo
        self.forks = [threading.Lock() for _ in range(count)]
        self.philosophers = [
            Philosopher(i + 1, self.forks[i], self.forks[(i + 1) % count], self)
            for i in range(count)
        ]

    @property
    def ended(self) -> bool:
        return self.end is not EndReason.NONE

    def announce(self, event: Event, philosopher: Philosopher) -> None:
        """Print an event; deaths only once the simulation has ended, others only before."""
        with self._print_lock:
            if (event is Event.DIE) != self.ended:
                return
            stamp = now_ms() - self.start_time
            print(f"{stamp} {philosopher.id} {event.message}", file=self.out, flush=True)

    def check_end(self, philosopher: Philosopher) -> EndReason:
        """Check one philosopher for starvation or fullness and record the outcome."""
        if now_ms() - philosopher.last_meal_time > self.settings.die_time:
            with self._print_lock:
                self.end = EndReason.DIED
            return EndReason.DIED
        if philosopher.meals_eaten == self.settings.meal_limit and not philosopher.is_full:
            philosopher.is_full = True
            self.full_philos += 1
        if self.full_philos == self.settings.n_philo:
            with self._print_lock:
                self.end = EndReason.FULL
            return EndReason.FULL
        return EndReason.NONE

    def monitor(self) -> EndReason:
        """Watch the philosophers in turn until one dies or all are full."""
        last_id = self.settings.n_philo
        for philosopher in itertools.cycle(self.philosophers):
            result = self.check_end(philosopher)
            if result is not EndReason.NONE:
                break
            if philosopher.id == last_id:
                time.sleep(_MONITOR_NAP_SECONDS)
        if result is EndReason.DIED:
            self.announce(Event.DIE, philosopher)
        return result

    def run(self) -> EndReason:
        """Start every philosopher, monitor them, and wait for all to stop."""
        threads = [
            threading.Thread(target=p.routine, name=f"philosopher-{p.id}", daemon=True)
            for p in self.philosophers
        ]
        started: list[threading.Thread] = []
        try:
            with self.ready:
                for thread in threads:
                    thread.start()
                    started.append(thread)
                self.start_time = now_ms()
                for philosopher in self.philosophers:
                    philosopher.last_meal_time = self.start_time
        except BaseException:
            self.end = EndReason.ABORTED
            for thread in started:
                thread.join()
            raise
        sleep_ms(self.settings.eat_time)
        result = self.monitor()
        for thread in threads:
            thread.join()
        return result