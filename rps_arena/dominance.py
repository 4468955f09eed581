"""Rock-paper-scissors kinds and the cyclic dominance rule."""
from __future__ import annotations

from enum import Enum


class Kind(Enum):
    ROCK = "rock"
    PAPER = "paper"
    SCISSORS = "scissors"


# Spawn order. Entity i starts as CYCLE[i % 3].
CYCLE: tuple[Kind, ...] = (Kind.ROCK, Kind.PAPER, Kind.SCISSORS)

_PREY: dict[Kind, Kind] = {
    Kind.ROCK: Kind.SCISSORS,
    Kind.PAPER: Kind.ROCK,
    Kind.SCISSORS: Kind.PAPER,
}


def beats(a: Kind, b: Kind) -> bool:
    """True when ``a`` dominates ``b``."""
    return _PREY[a] is b


def convert(a: Kind, b: Kind) -> tuple[Kind, Kind]:
    """Kinds of a colliding pair after the winner converts the loser.

    Equal kinds come back unchanged.
    """
    if beats(a, b):
        return a, a
    if beats(b, a):
        return b, b
    return a, b
