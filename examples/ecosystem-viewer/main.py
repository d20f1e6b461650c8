"""
Ecosystem Viewer - tick-ecosystem Pygame Demo

Draws vegetation, animals, trails and status bars from read-only world
views. Keys map onto the world controls; all simulation happens in
World.tick().
"""
from __future__ import annotations

import logging
import math
import sys

import pygame

from tick_ecosystem import AnimalView, Behavior, Gender, VegetationView, World, WorldConfig

TITLE = "Ecosystem Viewer - tick-ecosystem"
WIDTH, HEIGHT = 1000, 700
FPS = 60
MAX_FRAME_DT = 0.1
BG_COLOR = (232, 245, 233)
HUD_COLOR = (30, 30, 40)
VEG_COLOR = (76, 175, 80)
BAR_H = 3

SPECIES_KEYS = {
    pygame.K_1: "rabbit",
    pygame.K_2: "deer",
    pygame.K_3: "fox",
    pygame.K_4: "wolf",
    pygame.K_5: "bear",
}

BEHAVIOR_MARKS = {
    Behavior.WANDERING: None,
    Behavior.HUNTING: (255, 152, 0),
    Behavior.EATING: (121, 85, 72),
    Behavior.SEEKING_MATE: (233, 30, 99),
}


def _draw_vegetation(screen: pygame.Surface, veg: VegetationView) -> None:
    alpha = int(255 * veg.energy / veg.max_energy)
    r = max(1, int(veg.size))
    surf = pygame.Surface((r * 2, r * 2), pygame.SRCALPHA)
    pygame.draw.circle(surf, (*VEG_COLOR, alpha), (r, r), r)
    screen.blit(surf, (int(veg.position[0]) - r, int(veg.position[1]) - r))


def _draw_trail(screen: pygame.Surface, view: AnimalView) -> None:
    if len(view.trail) < 2:
        return
    pts = [(int(x), int(y)) for x, y in view.trail]
    pygame.draw.lines(screen, view.color, False, pts, 1)


def _draw_bar(
    screen: pygame.Surface, x: int, y: int, w: int, frac: float,
    color: tuple[int, int, int],
) -> None:
    pygame.draw.rect(screen, (51, 51, 51), (x, y, w, BAR_H))
    fill_w = int(w * min(max(frac, 0.0), 1.0))
    pygame.draw.rect(screen, color, (x, y, fill_w, BAR_H))


def _draw_animal(screen: pygame.Surface, view: AnimalView) -> None:
    x, y = int(view.position[0]), int(view.position[1])
    r = max(2, int(view.size))
    pygame.draw.circle(screen, view.color, (x, y), r)

    # Heading indicator
    tip = (x + math.cos(view.angle) * (r + 4), y + math.sin(view.angle) * (r + 4))
    pygame.draw.line(screen, (0, 0, 0), (x, y), tip, 2)

    # Health and hunger bars above
    bar_w = r * 2
    bar_x = x - r
    bar_y = y - r - 8
    health_frac = view.health / view.max_health
    _draw_bar(screen, bar_x, bar_y, bar_w, health_frac,
              (76, 175, 80) if view.health > 50 else (244, 67, 54))
    hunger_frac = view.hunger / view.max_hunger
    hunger_color = (76, 175, 80) if hunger_frac < 0.5 else (255, 193, 7) if hunger_frac < 0.8 else (244, 67, 54)
    _draw_bar(screen, bar_x, bar_y + BAR_H + 1, bar_w, hunger_frac, hunger_color)

    gender_color = (33, 150, 243) if view.gender is Gender.MALE else (233, 30, 99)
    pygame.draw.circle(screen, gender_color, (x + r - 3, y - r + 3), 3)

    mark = BEHAVIOR_MARKS.get(view.behavior)
    if mark is not None:
        pygame.draw.circle(screen, mark, (x + r + 5, y - r - 5), 2)


def _draw_hud(
    screen: pygame.Surface, font: pygame.font.Font, world: World,
    show_trails: bool, fps_val: float,
) -> None:
    pause_str = "  [PAUSED]" if world.paused else ""
    lines = [
        f"Time: {int(world.time)}   Speed: {world.speed:.1f}x   "
        f"Animals: {world.animal_count}   Vegetation: {world.vegetation_count}   "
        f"FPS: {fps_val:.0f}{pause_str}",
    ]
    for name, s in world.statistics().items():
        flag = "" if world.species_enabled(name) else " (off)"
        lines.append(f"{name.capitalize():<7} {s.total:3d}  m{s.males} f{s.females}{flag}")
    trails = "on" if show_trails else "off"
    lines.append(
        f"Space=Pause  +/-=Speed  R=Reset  T=Trails({trails})  1-5=Toggle species  Esc=Quit"
    )
    for i, line in enumerate(lines):
        surf = font.render(line, True, HUD_COLOR)
        screen.blit(surf, (10, 8 + i * 18))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption(TITLE)
    pg_clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 14)

    world = World(WorldConfig(width=WIDTH, height=HEIGHT))
    show_trails = True
    running = True

    while running:
        dt = pg_clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    world.toggle_pause()
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                    world.adjust_speed(0.5)
                elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                    world.adjust_speed(-0.5)
                elif event.key == pygame.K_r:
                    world.reset()
                elif event.key == pygame.K_t:
                    show_trails = not show_trails
                elif event.key in SPECIES_KEYS:
                    name = SPECIES_KEYS[event.key]
                    world.toggle_species(name, not world.species_enabled(name))

        # --- Update (skip hitches such as window drags) ---
        if 0.0 < dt < MAX_FRAME_DT:
            world.tick(dt)

        # --- Draw ---
        screen.fill(BG_COLOR)
        for veg in world.vegetation_views():
            _draw_vegetation(screen, veg)
        views = world.animal_views()
        if show_trails:
            for view in views:
                _draw_trail(screen, view)
        for view in views:
            _draw_animal(screen, view)
        _draw_hud(screen, font, world, show_trails, pg_clock.get_fps())
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
