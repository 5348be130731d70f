"""Simulation settings read from command-line arguments."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from philosophers.utils import atoi


@dataclass(frozen=True)
class Settings:
    """Parameters of one dining-philosophers run; times are in milliseconds."""

    nb_philos: int
    time_to_die: int
    time_to_eat: int
    time_to_sleep: int
    must_eat: int = -1

    @classmethod
    def from_args(cls, args: Sequence[str]) -> "Settings":
        """Build settings from the arguments that follow the program name.

        Four arguments are required; a fifth, if given, is the number of
        meals each philosopher must eat. Without it, must_eat is -1.
        """
        if len(args) < 4:
            raise ValueError("expected at least 4 arguments")
        must_eat = atoi(args[4]) if len(args) > 4 else -1
        return cls(
            nb_philos=atoi(args[0]),
            time_to_die=atoi(args[1]),
            time_to_eat=atoi(args[2]),
            time_to_sleep=atoi(args[3]),
            must_eat=must_eat,
        )