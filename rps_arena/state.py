"""Simulation state and population spawning."""
from __future__ import annotations

import random
from dataclasses import dataclass, field

from rps_arena.components import Entity
from rps_arena.dominance import CYCLE, Kind


@dataclass
class SimulationState:
    """Everything a tick reads and writes.

    ``entities`` keeps insertion order; the collision pass walks pairs in
    that order. ``paused`` is owned by the scheduler, never by systems.
    """

    entities: list[Entity] = field(default_factory=list)
    speed: float = 1.0
    paused: bool = False

    def census(self) -> dict[Kind, int]:
        counts = {kind: 0 for kind in CYCLE}
        for entity in self.entities:
            counts[entity.kind] += 1
        return counts

    def dominant(self) -> Kind | None:
        """The only kind left, or None while more than one survives."""
        alive = [kind for kind, n in self.census().items() if n]
        if len(alive) == 1:
            return alive[0]
        return None


def spawn_entities(
    population: int,
    bound: float,
    rng: random.Random,
    radius: float = 10.0,
    spread: float = 3.0,
) -> list[Entity]:
    """Create ``population`` entities with kinds assigned round-robin."""
    entities: list[Entity] = []
    for i in range(population):
        x = rng.random() * bound
        y = rng.random() * bound
        dx = (rng.random() - 0.5) * spread
        dy = (rng.random() - 0.5) * spread
        entities.append(
            Entity(
                position=(x, y),
                velocity=(dx, dy),
                kind=CYCLE[i % len(CYCLE)],
                radius=radius,
            )
        )
    return entities
