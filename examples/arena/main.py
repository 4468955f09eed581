"""
rps-arena Demo
Rock, paper and scissors bounce around a box and convert each other on contact.
"""

import logging
import sys

import pygame

from rps_arena import Arena, Simulation, SimulationConfig

from ui import BG_COLOR, draw_arena, draw_hud

# --- Configuration ---
ARENA_SIZE = 400
MARGIN = 16
HUD_HEIGHT = 56
WIDTH = ARENA_SIZE + 2 * MARGIN
HEIGHT = ARENA_SIZE + 2 * MARGIN + HUD_HEIGHT
TITLE = "rps-arena"
SPEED_STEP = 0.1


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    config = SimulationConfig()
    pg_clock = pygame.time.Clock()
    fps = round(1.0 / config.interval)
    label_font = pygame.font.SysFont("monospace", 12, bold=True)
    hud_font = pygame.font.SysFont("monospace", 14)

    arena_rect = pygame.Rect(MARGIN, MARGIN, ARENA_SIZE, ARENA_SIZE)
    sim = Simulation(config, arena=Arena(float(ARENA_SIZE), float(ARENA_SIZE)))

    running = True
    while running:
        pg_clock.tick(fps)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    sim.toggle_pause()
                elif event.key == pygame.K_r:
                    sim.reset()
                elif event.key in (pygame.K_UP, pygame.K_DOWN):
                    step = SPEED_STEP if event.key == pygame.K_UP else -SPEED_STEP
                    speed = round(sim.speed + step, 1)
                    sim.set_speed(min(config.max_speed, max(config.min_speed, speed)))

        # --- Update ---
        if not sim.paused:
            sim.step()

        # --- Draw ---
        screen.fill(BG_COLOR)
        draw_arena(screen, label_font, sim, arena_rect)
        draw_hud(screen, hud_font, sim, arena_rect.bottom + 12)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
