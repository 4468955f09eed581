"""Simulation - scheduler, control operations, and lifecycle hooks."""

import logging
import random
import time
from typing import Callable, Union

from rps_arena.clock import Clock
from rps_arena.components import Entity
from rps_arena.config import SimulationConfig, check_speed
from rps_arena.dominance import Kind
from rps_arena.state import SimulationState, spawn_entities
from rps_arena.systems import default_systems
from rps_arena.types import Arena, System, TickContext

logger = logging.getLogger(__name__)

ArenaSource = Union[Arena, Callable[[], Union[Arena, None]], None]
Hook = Callable[[SimulationState, TickContext], None]

_NO_ARENA = Arena(None, None)


class Simulation:
    def __init__(
        self,
        config: SimulationConfig | None = None,
        arena: ArenaSource = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config if config is not None else SimulationConfig()
        self._clock = Clock(self._config.interval)
        self._rng = rng if rng is not None else random.Random()
        self._arena = arena
        self._systems: list[System] = default_systems(self._config)
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._reset_hooks: list[Hook] = []
        self._stop_requested: bool = False
        self._dominant: Kind | None = None
        self._state = SimulationState(speed=self._config.speed)
        self.initialize()

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def entities(self) -> list[Entity]:
        return self._state.entities

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def speed(self) -> float:
        return self._state.speed

    @property
    def paused(self) -> bool:
        return self._state.paused

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def on_reset(self, hook: Hook) -> None:
        self._reset_hooks.append(hook)

    def set_arena(self, arena: ArenaSource) -> None:
        self._arena = arena

    def arena(self) -> Arena:
        """Current arena as reported by the collaborator."""
        source = self._arena
        if callable(source):
            source = source()
        return source if source is not None else _NO_ARENA

    # -- Control operations --

    def initialize(self, population: int | None = None) -> list[Entity]:
        if population is None:
            population = self._config.population
        self._state.entities = spawn_entities(
            population,
            self._config.placement_bound,
            self._rng,
            radius=self._config.radius,
            spread=self._config.launch_spread,
        )
        self._dominant = self._state.dominant()
        logger.info(
            "Spawned %d entities: %s",
            population,
            {kind.value: n for kind, n in self._state.census().items()},
        )
        return self._state.entities

    def reset(self) -> list[Entity]:
        entities = self.initialize()
        self._state.paused = False
        self._clock.reset()
        ctx = self._context()
        for hook in self._reset_hooks:
            hook(self._state, ctx)
        return entities

    def set_speed(self, value: float) -> None:
        speed = check_speed(value)
        if not self._config.in_recommended_range(speed):
            logger.warning(
                "Speed %.2f is outside the recommended range [%.1f, %.1f]",
                speed,
                self._config.min_speed,
                self._config.max_speed,
            )
        logger.debug("Speed %.2f -> %.2f", self._state.speed, speed)
        self._state.speed = speed

    def pause(self) -> None:
        if not self._state.paused:
            logger.debug("Paused at tick %d", self._clock.tick_number)
        self._state.paused = True

    def resume(self) -> None:
        if self._state.paused:
            logger.debug("Resumed at tick %d", self._clock.tick_number)
        self._state.paused = False

    def toggle_pause(self) -> bool:
        if self._state.paused:
            self.resume()
        else:
            self.pause()
        return self._state.paused

    def stop(self) -> None:
        self._request_stop()

    # -- Ticking --

    def _request_stop(self) -> None:
        self._stop_requested = True

    def _context(self, arena: Arena | None = None) -> TickContext:
        if arena is None:
            arena = self.arena()
        return self._clock.context(self._request_stop, self._rng, arena)

    def _tick(self) -> None:
        arena = self.arena()
        if not arena.ready:
            logger.debug("Arena not ready, skipping tick")
            return
        self._clock.advance()
        ctx = self._context(arena)
        for system in self._systems:
            system(self._state, ctx)
            if self._stop_requested:
                break
        self._check_convergence()

    def _check_convergence(self) -> None:
        dominant = self._state.dominant()
        if dominant is not None and dominant is not self._dominant:
            logger.info(
                "All %d entities are %s after %d ticks",
                len(self._state.entities),
                dominant.value,
                self._clock.tick_number,
            )
        self._dominant = dominant

    def step(self) -> list[Entity]:
        """Run one tick now, paused or not."""
        self._stop_requested = False
        self._tick()
        return self._state.entities

    def run(self, n: int) -> None:
        """Drive ``n`` scheduler slots. Paused slots do not tick."""
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._state, ctx)

        for _ in range(n):
            if self._stop_requested:
                break
            if not self._state.paused:
                self._tick()

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._state, ctx)

    def run_forever(self) -> None:
        self._stop_requested = False
        ctx = self._context()
        for hook in self._start_hooks:
            hook(self._state, ctx)

        interval = self._clock.interval
        while not self._stop_requested:
            start = time.monotonic()
            if not self._state.paused:
                self._tick()
            if self._stop_requested:
                break
            elapsed = time.monotonic() - start
            sleep_time = interval - elapsed
            if sleep_time > 0:
                time.sleep(sleep_time)

        ctx = self._context()
        for hook in self._stop_hooks:
            hook(self._state, ctx)


def advance(
    entities: list[Entity],
    width: float | None,
    height: float | None,
    speed: float,
    rng: random.Random | None = None,
) -> list[Entity]:
    """Run one tick of the built-in pipeline over ``entities``.

    The list is mutated in place and returned. A missing dimension makes
    this a no-op.
    """
    arena = Arena(width, height)
    if not arena.ready:
        return entities
    if rng is None:
        rng = random.Random()
    state = SimulationState(entities=entities, speed=check_speed(speed))
    config = SimulationConfig(speed=state.speed)
    ctx = Clock(config.interval).context(lambda: None, rng, arena)
    for system in default_systems(config):
        system(state, ctx)
    return entities
