"""
Heads-up display: balance, round profit, setup choices and round-end banner.
"""
import pygame

from config import (
    COLOR_UI_BG, COLOR_UI_BORDER, COLOR_GOLD, COLOR_WHITE, COLOR_RED, COLOR_GREEN,
    WARRIOR_COLORS, WARRIOR_COLOR_NAMES, BET_AMOUNT, BOOSTER_COST,
)
from game.graphics.font_cache import get_font
from game.round import RoundState
from game.entities.warrior import BoosterEffect

STATUS_COLORS = {
    RoundState.READY: (180, 180, 180),
    RoundState.RUNNING: COLOR_GOLD,
    RoundState.WIN: COLOR_GREEN,
    RoundState.LOSE: COLOR_RED,
}


def booster_label(booster) -> str:
    """Display name for a BoosterType (or None)."""
    return booster.value if booster is not None else "none"


class HUD:
    """Side panel next to the arena."""

    def __init__(self, x: int, width: int, height: int):
        self.x = x
        self.width = width
        self.height = height
        self.line_height = 22

        # Floating messages (pickup text etc.): dicts with text/color/ttl_ms
        self.messages = []
        self.message_duration = 1500  # ms

    def add_message(self, text: str, color: tuple = COLOR_WHITE):
        self.messages.append({"text": text, "color": color, "ttl_ms": float(self.message_duration)})
        if len(self.messages) > 5:
            self.messages.pop(0)

    def update(self, dt_ms: float):
        """Age messages (wall-clock is fine here: presentation only)."""
        for m in self.messages:
            m["ttl_ms"] -= dt_ms
        self.messages = [m for m in self.messages if m["ttl_ms"] > 0]

    def _line(self, surface, y: int, text: str, color=COLOR_WHITE, size: int = 20) -> int:
        surface.blit(get_font(size).render(text, True, color), (self.x + 12, y))
        return y + self.line_height

    def render(self, surface: pygame.Surface, driver, setup: dict):
        pygame.draw.rect(surface, COLOR_UI_BG, (self.x, 0, self.width, self.height))
        pygame.draw.line(surface, COLOR_UI_BORDER, (self.x, 0), (self.x, self.height), 2)

        economy = driver.economy
        y = 14
        y = self._line(surface, y, "CIRCLE WARRIORS", COLOR_GOLD, 26)
        y += 6
        y = self._line(surface, y, f"Balance: {economy.balance:.1f} FUN", COLOR_WHITE)
        y = self._line(surface, y, f"Round profit: {economy.round_profit:+.1f}", COLOR_WHITE)
        y = self._line(surface, y, f"Status: {driver.state.value.upper()}", STATUS_COLORS[driver.state])
        y += 8

        if driver.state == RoundState.READY:
            y = self._render_setup(surface, y, setup)
        elif driver.state == RoundState.RUNNING:
            y = self._render_running(surface, y, driver)
        else:
            y = self._render_result(surface, y, driver)

        y += 8
        for m in self.messages:
            y = self._line(surface, y, m["text"], m["color"])

    def _render_setup(self, surface, y: int, setup: dict) -> int:
        color_name = WARRIOR_COLOR_NAMES[setup["player_index"]]
        y = self._line(surface, y, f"[1-4] Warrior: {color_name}", WARRIOR_COLORS[color_name])
        y = self._line(surface, y, f"[M] Mode: 1 vs {setup['mode'] - 1}")
        y = self._line(surface, y, f"[B] Booster (+{BOOSTER_COST}): {booster_label(setup['booster'])}")
        y = self._line(surface, y, f"[+/-] Win prob: {setup['win_probability'] * 100:.0f}%")
        y = self._line(surface, y, f"Seed: {setup['seed_text'] or '(random)'}")
        y += 8
        return self._line(surface, y, f"[SPACE] Start ({BET_AMOUNT} FUN)", COLOR_GOLD)

    def _render_running(self, surface, y: int, driver) -> int:
        player = driver.player
        if player is not None and player.booster_effect != BoosterEffect.NONE:
            y = self._line(surface, y, f"Armed: {player.booster_effect.value.upper()}", COLOR_GOLD)
        bought = ", ".join(f"{t.value} x{n}" for t, n in driver.boosters_bought.items() if n)
        y = self._line(surface, y, f"Boosters: {bought or '-'}", (180, 180, 180), 18)
        pickup_live = driver.pickup is not None and driver.pickup.active
        buy_color = (120, 120, 120) if pickup_live else COLOR_WHITE
        y = self._line(surface, y, f"[H/G/S] Buy burger/glove/shield (+{BOOSTER_COST})", buy_color, 18)
        label = "ON" if driver.speedup_active else "OFF"
        return self._line(surface, y, f"[F] Speed x2: {label}", COLOR_WHITE, 18)

    def _render_result(self, surface, y: int, driver) -> int:
        win = driver.state == RoundState.WIN
        final = driver.economy.final_profit
        y = self._line(surface, y, "YOU WIN!" if win else "YOU LOSE", COLOR_GREEN if win else COLOR_RED, 30)
        y = self._line(surface, y, f"Final profit: {final:+.2f} FUN", COLOR_GREEN if final > 0 else COLOR_RED)
        if driver.result is not None:
            y = self._line(surface, y, f"Seed: {driver.result.seed}", (180, 180, 180), 18)
        y += 8
        return self._line(surface, y, f"[SPACE] Play again ({BET_AMOUNT} FUN)", COLOR_GOLD)

