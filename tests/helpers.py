"""Shared test helpers: fixed-value rng and context factory."""
from __future__ import annotations

import random

from rps_arena.clock import Clock
from rps_arena.types import Arena, TickContext


class FixedRandom(random.Random):
    """Random whose random() always returns the same value."""

    def __init__(self, value: float) -> None:
        super().__init__(0)
        self.value = value

    def random(self) -> float:
        return self.value


def make_ctx(
    width: float | None = 400.0,
    height: float | None = 400.0,
    rng: random.Random | None = None,
) -> TickContext:
    if rng is None:
        rng = random.Random(42)
    return Clock(0.016).context(lambda: None, rng, Arena(width, height))
