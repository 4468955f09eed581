"""Clock and TickContext for the fixed-interval scheduler."""

import random
from typing import Callable

from rps_arena.types import Arena, TickContext


class Clock:
    def __init__(self, interval: float) -> None:
        if interval <= 0:
            raise ValueError("interval must be positive")
        self._interval = interval
        self._tick_number = 0

    @property
    def interval(self) -> float:
        return self._interval

    @property
    def dt(self) -> float:
        return self._interval

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._tick_number * self._interval

    def advance(self) -> int:
        self._tick_number += 1
        return self._tick_number

    def context(
        self,
        stop_fn: Callable[[], None],
        rng: random.Random,
        arena: Arena,
    ) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._interval,
            elapsed=self.elapsed,
            request_stop=stop_fn,
            random=rng,
            arena=arena,
        )

    def reset(self, tick_number: int = 0) -> None:
        self._tick_number = tick_number
