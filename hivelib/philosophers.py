"""The dining philosophers simulation, one thread per philosopher."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from hivelib.philo_args import UNLIMITED_MEALS, ArgumentError, SimulationParams, parse_args

USAGE = (
    "<Usage:> ./philo [Num.Philos][TimeToDie]"
    "[TimeToEat][timeToSleep][HowManyMeals]"
)

_SPIN_MARGIN_MS = 5


def now_ms() -> int:
    """Current time in milliseconds on a monotonic clock."""
    return time.monotonic_ns() // 1_000_000


def sleep_until(deadline_ms: int) -> None:
    """Block until ``now_ms()`` reaches ``deadline_ms``.

    Sleeps for most of the wait and spins for the last few milliseconds.
    """
    current = now_ms()
    while deadline_ms - current > _SPIN_MARGIN_MS:
        time.sleep((deadline_ms - current - _SPIN_MARGIN_MS) / 1000)
        current = now_ms()
    while deadline_ms > current:
        time.sleep(0)
        current = now_ms()


class Action(Enum):
    """What a philosopher announces."""

    FORK = "has taken a fork"
    EAT = "is eating"
    SLEEP = "is sleeping"
    THINK = "is thinking"
    DIE = "died"


@dataclass(eq=False)
class Philosopher:
    """One diner: its forks, its deadline and its meal count."""

    id: int
    simulation: Simulation
    left_fork: threading.Lock = field(default_factory=threading.Lock)
    first_fork: threading.Lock | None = None
    second_fork: threading.Lock | None = None
    die_time: int = 0
    times_eaten: int = 0

    @property
    def params(self) -> SimulationParams:
        return self.simulation.params

    def _announce(self, action: Action) -> None:
        self.simulation.announce(self, action)

    def _eat(self) -> None:
        params = self.params
        self._announce(Action.FORK)
        self.second_fork.acquire()
        self._announce(Action.FORK)
        self._announce(Action.EAT)
        try:
            if self.simulation.is_dead:
                return
            self.die_time = now_ms() + params.time_to_die + params.time_to_eat
            sleep_until(now_ms() + params.time_to_eat)
            if params.eats != UNLIMITED_MEALS:
                self.times_eaten += 1
        finally:
            self.second_fork.release()
            self.first_fork.release()

    def _sleep(self) -> None:
        self._announce(Action.SLEEP)
        sleep_until(now_ms() + self.params.time_to_sleep)

    def _think(self) -> None:
        self._announce(Action.THINK)

    def _die(self) -> None:
        sleep_until(self.die_time)
        self._announce(Action.DIE)

    def _dine(self) -> bool:
        """One round at the table; False once this philosopher is done."""
        params = self.params
        self.first_fork.acquire()
        hungry = params.eats == UNLIMITED_MEALS or self.times_eaten < params.eats
        if now_ms() + params.time_to_eat <= self.die_time and hungry:
            self._eat()
        else:
            self.first_fork.release()
            if now_ms() + params.time_to_eat > self.die_time:
                self._die()
            return False
        if now_ms() + params.time_to_sleep > self.die_time:
            self.die_time -= params.time_to_eat
            self._die()
            return False
        self._sleep()
        self._think()
        return True

    def live(self) -> None:
        """Thread body: dine until done or until someone has died."""
        params = self.params
        self.die_time = self.simulation.start_time + params.time_to_die
        if self.id % 2 == 0:
            sleep_until(now_ms() + params.time_to_eat)
        while self._dine() and not self.simulation.is_dead:
            pass


class Simulation:
    """A table of philosophers sharing one fork between each neighbour pair."""

    def __init__(self, params: SimulationParams, out: TextIO | None = None) -> None:
        self.params = params
        self.out = sys.stdout if out is None else out
        self.is_dead = False
        self.start_time = now_ms()
        self._write_lock = threading.Lock()
        self.philosophers = [Philosopher(i, self) for i in range(params.philos)]
        count = len(self.philosophers)
        for index, philosopher in enumerate(self.philosophers):
            right = self.philosophers[(index + 1) % count].left_fork
            if index % 2:
                philosopher.first_fork, philosopher.second_fork = right, philosopher.left_fork
            else:
                philosopher.first_fork, philosopher.second_fork = philosopher.left_fork, right

    def _write(self, line: str) -> None:
        self.out.write(line)
        self.out.flush()

    def announce(self, philosopher: Philosopher, action: Action) -> None:
        """Print one event unless a death was already reported.

        The first death reported marks the simulation as over.
        """
        with self._write_lock:
            if self.is_dead:
                return
            elapsed = now_ms() - self.start_time
            self._write(f"{elapsed} {philosopher.id + 1} {action.value}\n")
            if action is Action.DIE:
                self.is_dead = True

    def all_ate(self) -> bool:
        """True unless a living philosopher still has meals to eat."""
        return not any(
            p.times_eaten < self.params.eats and not self.is_dead
            for p in self.philosophers
        )

    def run(self) -> bool:
        """Run the simulation to its end; True when nobody died."""
        self.start_time = now_ms()
        if self.params.philos == 1:
            self.announce(self.philosophers[0], Action.FORK)
            sleep_until(self.start_time + self.params.time_to_die)
            with self._write_lock:
                self._write(f"{now_ms() - self.start_time} 1 {Action.DIE.value}\n")
                self.is_dead = True
            return False
        threads = [
            threading.Thread(target=p.live, name=f"philosopher-{p.id + 1}", daemon=True)
            for p in self.philosophers
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        if self.all_ate() and not self.is_dead:
            self._write(f"Each philosopher ate {self.params.eats} times\n")
        return not self.is_dead


def main(argv: list[str] | None = None) -> int:
    """Run the simulation from command-line arguments."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        params = parse_args(args)
    except ArgumentError as error:
        if error.shown:
            print(error)
        print(USAGE)
        return 0
    Simulation(params, sys.stdout).run()
    return 0