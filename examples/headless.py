"""Headless run -- no window, just the census.

Demonstrates:
- Driving the scheduler with run(n)
- Pausing from a system and resetting
- Reading the census after each phase

Run: python examples/headless.py
"""

import logging

from rps_arena import Arena, Kind, Simulation
from rps_arena.state import SimulationState
from rps_arena.types import TickContext


def print_census(label: str, state: SimulationState) -> None:
    census = state.census()
    counts = ", ".join(f"{kind.value}={census[kind]}" for kind in Kind)
    print(f"  {label}: {counts}")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    print("=== Headless Arena ===\n")

    sim = Simulation(arena=Arena(400.0, 400.0))
    print_census("start", sim.state)

    sim.run(600)
    print_census(f"after {sim.clock.tick_number} ticks", sim.state)

    def stop_when_settled(state: SimulationState, ctx: TickContext) -> None:
        if state.dominant() is not None:
            ctx.request_stop()

    sim.add_system(stop_when_settled)
    sim.run(20_000)
    print_census(f"after {sim.clock.tick_number} ticks", sim.state)

    winner = sim.state.dominant()
    if winner is not None:
        print(f"\n  {winner.value} took over the arena")
    else:
        print("\n  no single kind took over")

    sim.reset()
    print()
    print_census("after reset", sim.state)


if __name__ == "__main__":
    main()
