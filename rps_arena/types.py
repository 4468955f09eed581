"""Shared types for the arena engine."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable


@dataclass(frozen=True, slots=True)
class Arena:
    """Arena extents as reported by the renderer. Either side may be unknown."""

    width: float | None
    height: float | None

    @property
    def ready(self) -> bool:
        return self.width is not None and self.height is not None


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    request_stop: Callable[[], None]
    random: _random.Random
    arena: Arena


class ConfigError(ValueError):
    """Raised for invalid simulation configuration or speed values."""


if TYPE_CHECKING:
    from rps_arena.state import SimulationState

System = Callable[["SimulationState", TickContext], None]
