"""
Main game engine - window, input and rendering around a RoundDriver.

The engine owns no game rules: it feeds frame time to the driver, forwards key
presses as round actions and draws whatever state the driver exposes.
"""
import math

import pygame

from config import (
    WINDOW_WIDTH, WINDOW_HEIGHT, FPS, GAME_TITLE, ARENA_SIZE, ARENA_PADDING,
    COLOR_BLACK, COLOR_WHITE, COLOR_ARENA_BG, COLOR_ARENA_BORDER, COLOR_ARENA_CORNER,
    WARRIOR_COLORS, WARRIOR_RADIUS, WEAPON_RADIUS,
    MIN_WARRIORS, MAX_WARRIORS, WIN_PROBABILITY, SIM_SEED,
)
from game.entities.warrior import BoosterEffect
from game.graphics.font_cache import blit_centered
from game.round import RoundConfig, RoundDriver, RoundState
from game.sim.determinism import parse_seed
from game.systems.boosters import BoosterType
from game.ui import HUD

BOOSTER_CYCLE = [None, BoosterType.BURGER, BoosterType.GLOVE, BoosterType.SHIELD]
BOOSTER_COLORS = {
    BoosterType.BURGER: (255, 68, 68),
    BoosterType.GLOVE: (255, 221, 0),
    BoosterType.SHIELD: (68, 255, 68),
}
HIT_FLASH_MS = 200


class GameEngine:
    """Main game engine class."""

    def __init__(self, seed_text: str = SIM_SEED, win_probability: float = WIN_PROBABILITY):
        pygame.init()
        pygame.font.init()

        self.screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(GAME_TITLE)
        self.clock = pygame.time.Clock()
        self.running = True

        self.driver = RoundDriver()
        # Core arena sits at the origin; only the drawing is offset.
        self.view_offset = (ARENA_PADDING, ARENA_PADDING)
        panel_x = ARENA_SIZE + ARENA_PADDING * 2
        self.hud = HUD(panel_x, WINDOW_WIDTH - panel_x, WINDOW_HEIGHT)

        # Pre-round choices (READY state only)
        self.setup = {
            "player_index": 0,
            "mode": MAX_WARRIORS,
            "booster": None,
            "win_probability": max(0.0, min(1.0, float(win_probability))),
            "seed_text": seed_text or "",
        }

        # Presentation-only effects: warrior id -> remaining flash ms
        self.hit_flashes = {}
        self._arena_surface = self._build_arena_surface()

    def _build_arena_surface(self) -> pygame.Surface:
        surf = pygame.Surface((ARENA_SIZE, ARENA_SIZE))
        surf.fill(COLOR_ARENA_BG)
        pygame.draw.rect(surf, COLOR_ARENA_BORDER, (0, 0, ARENA_SIZE, ARENA_SIZE), 3)
        c = 14
        for cx, cy in ((0, 0), (1, 0), (0, 1), (1, 1)):
            bx = cx * (ARENA_SIZE - 1)
            by = cy * (ARENA_SIZE - 1)
            sx = 1 if cx == 0 else -1
            sy = 1 if cy == 0 else -1
            pygame.draw.lines(surf, COLOR_ARENA_CORNER, False, [(bx, by + sy * c), (bx, by), (bx + sx * c, by)], 2)
        return surf

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------
    def handle_events(self):
        """Process input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                self.handle_keydown(event)

    def handle_keydown(self, event):
        """Handle keyboard input."""
        if event.key == pygame.K_ESCAPE:
            self.running = False
        elif event.key == pygame.K_SPACE:
            self.on_start_pressed()
        elif self.driver.state == RoundState.READY:
            self._handle_setup_key(event.key)
        elif self.driver.state == RoundState.RUNNING:
            self._handle_running_key(event.key)

    def _handle_setup_key(self, key):
        setup = self.setup
        if key in (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4):
            setup["player_index"] = key - pygame.K_1
        elif key == pygame.K_m:
            setup["mode"] = MIN_WARRIORS + (setup["mode"] - MIN_WARRIORS + 1) % (MAX_WARRIORS - MIN_WARRIORS + 1)
        elif key == pygame.K_b:
            idx = BOOSTER_CYCLE.index(setup["booster"])
            setup["booster"] = BOOSTER_CYCLE[(idx + 1) % len(BOOSTER_CYCLE)]
        elif key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
            setup["win_probability"] = min(1.0, round(setup["win_probability"] + 0.05, 2))
        elif key in (pygame.K_MINUS, pygame.K_KP_MINUS):
            setup["win_probability"] = max(0.0, round(setup["win_probability"] - 0.05, 2))

    def _handle_running_key(self, key):
        if key == pygame.K_f:
            self.driver.toggle_speedup()
            return
        booster = {pygame.K_h: BoosterType.BURGER, pygame.K_g: BoosterType.GLOVE, pygame.K_s: BoosterType.SHIELD}.get(key)
        if booster is not None and not self.driver.buy_booster_mid_round(booster):
            self.hud.add_message("Can't buy a booster now", (255, 100, 100))

    def on_start_pressed(self):
        if self.driver.state in (RoundState.WIN, RoundState.LOSE):
            self.driver.reset_to_ready()
            self.hit_flashes.clear()
            return
        if self.driver.state != RoundState.READY:
            return
        setup = self.setup
        config = RoundConfig(
            mode=setup["mode"],
            player_index=setup["player_index"],
            booster=setup["booster"],
            win_probability=setup["win_probability"],
            seed=parse_seed(setup["seed_text"]),
        )
        if not self.driver.start_round(config):
            self.hud.add_message("Not enough FUN!", (255, 100, 100))

    # ------------------------------------------------------------------
    # Update / render
    # ------------------------------------------------------------------
    def update(self, dt_ms: float):
        """Update game state."""
        self.hud.update(dt_ms)
        for wid in list(self.hit_flashes):
            self.hit_flashes[wid] -= dt_ms
            if self.hit_flashes[wid] <= 0:
                del self.hit_flashes[wid]

        if self.driver.state != RoundState.RUNNING:
            return

        self.driver.update(dt_ms)
        events, messages = self.driver.pop_presentation_events()
        for ev in events:
            self.hit_flashes[ev.victim.id] = HIT_FLASH_MS
        for msg in messages:
            self.hud.add_message(msg, (255, 255, 68))

    def _to_screen(self, x: float, y: float) -> tuple:
        return int(self.view_offset[0] + x), int(self.view_offset[1] + y)

    def render(self):
        """Render the game."""
        self.screen.fill(COLOR_BLACK)
        self.screen.blit(self._arena_surface, self.view_offset)

        pickup = self.driver.pickup
        if pickup is not None and pickup.active:
            pulse = math.sin(pygame.time.get_ticks() * 0.004) * 0.15 + 0.85
            color = BOOSTER_COLORS[pickup.type]
            pygame.draw.circle(self.screen, color, self._to_screen(pickup.px, pickup.py), int(pickup.radius * pulse) + 3, 2)

        for w in self.driver.warriors:
            if not w.alive and w.alpha <= 0:
                continue
            self._render_warrior(w)

        self.hud.render(self.screen, self.driver, self.setup)
        pygame.display.flip()

    def _render_warrior(self, w):
        size = WARRIOR_RADIUS * 2 + 16
        surf = pygame.Surface((size, size), pygame.SRCALPHA)
        c = size // 2
        color = COLOR_WHITE if w.id in self.hit_flashes else WARRIOR_COLORS[w.color]
        pygame.draw.circle(surf, color, (c, c), WARRIOR_RADIUS)

        # Roll mark spins with rotation_rad.
        mark_x = c + math.cos(w.rotation_rad - math.pi / 2) * (WARRIOR_RADIUS - 5)
        mark_y = c + math.sin(w.rotation_rad - math.pi / 2) * (WARRIOR_RADIUS - 5)
        pygame.draw.line(surf, (255, 255, 255, 128), (c, c), (mark_x, mark_y), 2)

        if w.is_player:
            if w.heal_pulse:
                pygame.draw.circle(surf, (255, 68, 68), (c, c), WARRIOR_RADIUS + 5, 3)
            if w.booster_effect == BoosterEffect.GLOVE:
                pygame.draw.circle(surf, (255, 221, 0), (c, c), WARRIOR_RADIUS + 5, 3)
            elif w.booster_effect == BoosterEffect.SHIELD:
                pygame.draw.circle(surf, (68, 255, 68), (c, c), WARRIOR_RADIUS + 5, 3)

        surf.set_alpha(int(255 * w.alpha))
        sx, sy = self._to_screen(w.px, w.py)
        self.screen.blit(surf, (sx - c, sy - c))

        # Weapon hitbox
        pygame.draw.circle(self.screen, (230, 230, 230), self._to_screen(w.weapon_x, w.weapon_y), WEAPON_RADIUS, 2)

        # HP bar
        frac = max(0.0, w.health_percent)
        bar_w = WARRIOR_RADIUS * 2
        bx, by = sx - WARRIOR_RADIUS, sy - WARRIOR_RADIUS - 10
        pygame.draw.rect(self.screen, (51, 51, 51), (bx, by, bar_w, 4))
        bar_color = (68, 255, 68) if frac > 0.5 else (255, 170, 0) if frac > 0.25 else (255, 51, 51)
        pygame.draw.rect(self.screen, bar_color, (bx, by, int(bar_w * frac), 4))
        blit_centered(self.screen, 16, str(int(w.hp)), COLOR_WHITE, (sx, by - 7))
        if w.is_player:
            pygame.draw.circle(self.screen, COLOR_WHITE, (sx, sy - WARRIOR_RADIUS - 24), 3)

    def run(self):
        """Main game loop."""
        while self.running:
            dt_ms = self.clock.tick(FPS)
            self.handle_events()
            self.update(float(dt_ms))
            self.render()

        pygame.quit()

