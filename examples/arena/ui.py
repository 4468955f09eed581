"""Drawing helpers and the kind -> color/label lookup for the arena demo."""
from __future__ import annotations

import pygame

from rps_arena import Entity, Kind, Simulation

BG_COLOR = (243, 244, 246)
ARENA_COLOR = (255, 255, 255)
BORDER_COLOR = (209, 213, 219)
HUD_COLOR = (55, 65, 81)
LABEL_COLOR = (17, 24, 39)

KIND_COLORS: dict[Kind, tuple[int, int, int]] = {
    Kind.ROCK: (107, 114, 128),
    Kind.PAPER: (253, 224, 71),
    Kind.SCISSORS: (239, 68, 68),
}

# Default pygame fonts have no emoji glyphs.
KIND_LABELS: dict[Kind, str] = {
    Kind.ROCK: "R",
    Kind.PAPER: "P",
    Kind.SCISSORS: "S",
}


def draw_entity(
    surface: pygame.Surface,
    font: pygame.font.Font,
    entity: Entity,
    origin: tuple[int, int],
) -> None:
    x = int(origin[0] + entity.position[0])
    y = int(origin[1] + entity.position[1])
    r = int(entity.radius)
    pygame.draw.circle(surface, KIND_COLORS[entity.kind], (x, y), r)
    label = font.render(KIND_LABELS[entity.kind], True, LABEL_COLOR)
    surface.blit(label, label.get_rect(center=(x, y)))


def draw_arena(
    surface: pygame.Surface,
    font: pygame.font.Font,
    sim: Simulation,
    rect: pygame.Rect,
) -> None:
    pygame.draw.rect(surface, ARENA_COLOR, rect)
    clip = surface.get_clip()
    surface.set_clip(rect)
    for entity in sim.entities:
        draw_entity(surface, font, entity, rect.topleft)
    surface.set_clip(clip)
    pygame.draw.rect(surface, BORDER_COLOR, rect, 1)


def draw_hud(
    surface: pygame.Surface,
    font: pygame.font.Font,
    sim: Simulation,
    top: int,
) -> None:
    census = sim.state.census()
    counts = "  ".join(f"{KIND_LABELS[k]}={n}" for k, n in census.items())
    pause_str = "  [PAUSED]" if sim.paused else ""
    winner = sim.state.dominant()
    winner_str = f"  {winner.value} wins" if winner is not None else ""
    lines = [
        f"Speed: {sim.speed:.1f}x   {counts}{pause_str}{winner_str}",
        "Up/Down=Speed  Space=Pause  R=Reset  Esc=Quit",
    ]
    for i, line in enumerate(lines):
        surf = font.render(line, True, HUD_COLOR)
        surface.blit(surf, (16, top + i * 20))
