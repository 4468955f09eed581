"""Tests for Simulation control operations, scheduling and hooks."""

import logging
import math
import random

import pytest

from rps_arena.components import Entity
from rps_arena.config import SimulationConfig
from rps_arena.dominance import Kind
from rps_arena.engine import Simulation, advance
from rps_arena.state import SimulationState
from rps_arena.types import Arena, ConfigError

ARENA = Arena(400.0, 400.0)


def _sim(**kwargs) -> Simulation:
    kwargs.setdefault("arena", ARENA)
    kwargs.setdefault("rng", random.Random(1234))
    return Simulation(**kwargs)


def _positions(sim: Simulation) -> list[tuple[float, float]]:
    return [e.position for e in sim.entities]


# --- Initialization ---

def test_init_defaults():
    sim = _sim()
    assert len(sim.entities) == 30
    assert sim.speed == 1.0
    assert sim.paused is False
    assert sim.clock.tick_number == 0
    assert sim.clock.interval == 0.016
    assert isinstance(sim.state, SimulationState)


def test_init_balanced_kinds():
    sim = _sim()
    assert sim.state.census() == {Kind.ROCK: 10, Kind.PAPER: 10, Kind.SCISSORS: 10}


def test_init_custom_config():
    sim = _sim(config=SimulationConfig(population=6, radius=4.0, speed=1.5))
    assert len(sim.entities) == 6
    assert all(e.radius == 4.0 for e in sim.entities)
    assert sim.speed == 1.5


def test_default_rng_unseeded():
    a = Simulation(arena=ARENA)
    b = Simulation(arena=ARENA)
    assert _positions(a) != _positions(b)


def test_initialize_population_override():
    sim = _sim()
    entities = sim.initialize(3)
    assert len(entities) == 3
    assert sim.entities is entities


# --- step() ---

def test_step_advances_tick_and_moves():
    sim = _sim()
    before = _positions(sim)
    sim.step()
    assert sim.clock.tick_number == 1
    assert _positions(sim) != before


def test_step_returns_same_entity_objects():
    sim = _sim()
    ids = [id(e) for e in sim.entities]
    result = sim.step()
    assert [id(e) for e in result] == ids


def test_step_ignores_pause():
    sim = _sim()
    sim.pause()
    sim.step()
    assert sim.clock.tick_number == 1


@pytest.mark.parametrize(
    "arena",
    [None, Arena(None, 400.0), Arena(400.0, None), lambda: None],
)
def test_step_without_arena_is_noop(arena):
    sim = _sim(arena=arena)
    before = [(e.position, e.velocity, e.kind) for e in sim.entities]
    sim.step()
    assert [(e.position, e.velocity, e.kind) for e in sim.entities] == before
    assert sim.clock.tick_number == 0


def test_arena_callable_read_each_tick():
    sizes = [None, Arena(400.0, 400.0)]
    sim = _sim(arena=lambda: sizes[0])
    sim.step()
    assert sim.clock.tick_number == 0
    sizes[0] = sizes[1]
    sim.step()
    assert sim.clock.tick_number == 1


def test_set_arena():
    sim = _sim(arena=None)
    sim.set_arena(ARENA)
    assert sim.arena() is ARENA
    sim.step()
    assert sim.clock.tick_number == 1


# --- run(n) ---

def test_run_n_ticks():
    sim = _sim()
    ticks = []
    sim.add_system(lambda s, c: ticks.append(c.tick_number))
    sim.run(5)
    assert ticks == [1, 2, 3, 4, 5]


def test_run_while_paused_does_not_tick():
    sim = _sim()
    sim.pause()
    sim.run(10)
    assert sim.clock.tick_number == 0


def test_run_calls_start_and_stop_hooks():
    sim = _sim()
    events = []
    sim.on_start(lambda s, c: events.append("start"))
    sim.on_stop(lambda s, c: events.append("stop"))
    sim.add_system(lambda s, c: events.append(f"tick-{c.tick_number}"))
    sim.run(2)
    assert events == ["start", "tick-1", "tick-2", "stop"]


def test_pause_from_system_stops_later_slots():
    sim = _sim()

    def pause_at_3(state, ctx):
        if ctx.tick_number == 3:
            sim.pause()

    sim.add_system(pause_at_3)
    sim.run(10)
    assert sim.clock.tick_number == 3
    assert sim.paused


def test_request_stop_from_system():
    sim = _sim()
    ticks = []

    def stop_at_3(state, ctx):
        ticks.append(ctx.tick_number)
        if ctx.tick_number == 3:
            ctx.request_stop()

    sim.add_system(stop_at_3)
    sim.run(100)
    assert ticks == [1, 2, 3]


# --- run_forever ---

def test_run_forever_stops_on_request():
    sim = _sim(config=SimulationConfig(interval=0.001))
    ticks = []

    def sys(state, ctx):
        ticks.append(ctx.tick_number)
        if ctx.tick_number >= 5:
            ctx.request_stop()

    sim.add_system(sys)
    sim.run_forever()
    assert ticks == [1, 2, 3, 4, 5]


def test_run_forever_calls_hooks():
    sim = _sim(config=SimulationConfig(interval=0.001))
    events = []
    sim.on_start(lambda s, c: events.append("start"))
    sim.on_stop(lambda s, c: events.append("stop"))

    def sys(state, ctx):
        events.append(f"tick-{ctx.tick_number}")
        if ctx.tick_number >= 2:
            sim.stop()

    sim.add_system(sys)
    sim.run_forever()
    assert events == ["start", "tick-1", "tick-2", "stop"]


# --- Control operations ---

def test_pause_resume_toggle():
    sim = _sim()
    sim.pause()
    assert sim.paused
    sim.resume()
    assert not sim.paused
    assert sim.toggle_pause() is True
    assert sim.toggle_pause() is False


def test_reset_mid_simulation():
    sim = _sim()
    sim.run(50)
    sim.initialize(5)
    sim.pause()
    before = _positions(sim)

    entities = sim.reset()

    assert len(entities) == 30
    assert sim.paused is False
    assert sim.clock.tick_number == 0
    assert _positions(sim)[:5] != before
    assert sim.state.census() == {Kind.ROCK: 10, Kind.PAPER: 10, Kind.SCISSORS: 10}


def test_reset_keeps_speed():
    sim = _sim()
    sim.set_speed(1.7)
    sim.reset()
    assert sim.speed == 1.7


def test_reset_hooks():
    sim = _sim()
    seen = []
    sim.on_reset(lambda s, c: seen.append((len(s.entities), c.tick_number)))
    sim.run(3)
    sim.reset()
    assert seen == [(30, 0)]


def test_set_speed_takes_effect_next_tick():
    sim = _sim()
    sim.initialize(1)
    e = sim.entities[0]
    e.position, e.velocity = (200.0, 200.0), (1.0, 0.0)
    sim.set_speed(2.0)
    sim.step()
    assert e.position == (202.0, 200.0)


@pytest.mark.parametrize("value", [-0.5, math.nan, math.inf])
def test_set_speed_rejects_invalid(value):
    sim = _sim()
    with pytest.raises(ConfigError):
        sim.set_speed(value)
    assert sim.speed == 1.0


def test_set_speed_outside_range_warns(caplog):
    sim = _sim()
    with caplog.at_level(logging.WARNING, logger="rps_arena.engine"):
        sim.set_speed(3.0)
    assert sim.speed == 3.0
    assert any("recommended range" in r.message for r in caplog.records)


def test_convergence_logged_once(caplog):
    sim = _sim()
    sim.initialize(3)
    for i, e in enumerate(sim.entities):
        e.kind = Kind.ROCK
        e.position = (50.0 + 100.0 * i, 200.0)
    with caplog.at_level(logging.INFO, logger="rps_arena.engine"):
        sim.step()
        sim.step()
    messages = [r.message for r in caplog.records if "All 3 entities" in r.message]
    assert messages == ["All 3 entities are rock after 1 ticks"]


# --- advance() ---

def test_advance_same_list_mutated():
    entities = [
        Entity(position=(100.0, 100.0), velocity=(1.0, 1.0), kind=Kind.ROCK),
    ]
    result = advance(entities, 400.0, 400.0, 1.0, random.Random(1))
    assert result is entities
    assert entities[0].position == (101.0, 101.0)


def test_advance_missing_dimension_is_noop():
    entities = [
        Entity(position=(100.0, 100.0), velocity=(1.0, 1.0), kind=Kind.ROCK),
    ]
    assert advance(entities, None, 400.0, 1.0) is entities
    assert entities[0].position == (100.0, 100.0)
    advance(entities, 400.0, None, 1.0)
    assert entities[0].position == (100.0, 100.0)


def test_advance_rejects_invalid_speed():
    with pytest.raises(ConfigError):
        advance([], 400.0, 400.0, -1.0)
