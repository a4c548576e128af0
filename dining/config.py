"""Command-line parameters of a simulation and their validation."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from dining.utils import is_numeric, parse_int

MIN_DURATION_MS = 60


class ConfigError(ValueError):
    """Raised when the simulation parameters are invalid."""


@dataclass(frozen=True)
class Config:
    """Simulation parameters; durations are in milliseconds.

    ``num_meal`` is None when philosophers eat without limit.
    """

    num_philo: int
    time_die: int
    time_eat: int
    time_sleep: int
    num_meal: int | None = None


def parse_config(args: Sequence[str]) -> Config:
    """Validate the argument strings (without program name) and build a Config."""
    args = list(args)
    if len(args) < 4:
        raise ConfigError("Error: Not enough arguments")
    if len(args) > 5:
        raise ConfigError("Error: Too much arguments")
    if not is_numeric(args):
        raise ConfigError("Error: Character founded")
    values = [parse_int(arg) for arg in args]
    num_philo, time_die, time_eat, time_sleep = values[:4]
    if num_philo <= 0:
        raise ConfigError("Error: Not enough philosopher")
    if time_die < MIN_DURATION_MS:
        raise ConfigError("Error: Not enough time to die")
    if time_eat < MIN_DURATION_MS:
        raise ConfigError("Error: Not enough time to eat")
    if time_sleep < MIN_DURATION_MS:
        raise ConfigError("Error: Not enough time to sleep")
    num_meal = values[4] if len(values) == 5 else None
    if num_meal is not None and num_meal <= 0:
        raise ConfigError("Error: Not enough meal")
    return Config(num_philo, time_die, time_eat, time_sleep, num_meal)