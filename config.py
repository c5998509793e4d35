"""
Configuration settings for Circle Warriors.
"""
import os
from dotenv import load_dotenv

load_dotenv()


def _env_bool(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


# Window settings
WINDOW_WIDTH = 820
WINDOW_HEIGHT = 540
FPS = 60
PROTOTYPE_VERSION = "1.0.0"
GAME_TITLE = f"Circle Warriors (Prototype v{PROTOTYPE_VERSION})"

# Colors
COLOR_ARENA_BG = (13, 13, 26)
COLOR_ARENA_BORDER = (68, 68, 170)
COLOR_ARENA_CORNER = (136, 136, 255)
COLOR_UI_BG = (40, 40, 50)
COLOR_UI_BORDER = (80, 80, 100)
COLOR_GOLD = (255, 215, 0)
COLOR_WHITE = (255, 255, 255)
COLOR_BLACK = (0, 0, 0)
COLOR_RED = (220, 20, 60)
COLOR_GREEN = (50, 205, 50)

WARRIOR_COLOR_NAMES = ("red", "blue", "green", "yellow")
WARRIOR_COLORS = {
    "red": (232, 64, 64),
    "blue": (64, 128, 232),
    "green": (64, 208, 96),
    "yellow": (232, 208, 64),
}

# Arena settings
ARENA_SIZE = 500
ARENA_PADDING = 20

# Warrior settings (px, px/s)
WARRIOR_RADIUS = 22
WEAPON_RADIUS = 8
WEAPON_OFFSET = 0.8 * WARRIOR_RADIUS
WARRIOR_SPEED = 378
WARRIOR_MAX_HP = 100
SPAWN_MARGIN = WARRIOR_RADIUS + 20
SPAWN_MIN_SEPARATION = WARRIOR_RADIUS * 2.5
SPAWN_MAX_ATTEMPTS = 1000
DEATH_FADE_PER_SEC = 3.0
MIN_WARRIORS = 2
MAX_WARRIORS = 4

# Combat settings
PAIR_COOLDOWN_MS = 120
WEAPON_HIT_BASE_DAMAGE = 25
WEAPON_HIT_MIN_DAMAGE = 1
WEAPON_HIT_MAX_DAMAGE = 40
BODY_HIT_BASE_DAMAGE = 10
BODY_HIT_MIN_DAMAGE = 1
BODY_HIT_MAX_DAMAGE = 25
GLOVE_BONUS_DAMAGE = 10

# Booster settings
PICKUP_RADIUS = 14
PICKUP_SPAWN_MARGIN = PICKUP_RADIUS + 20
BURGER_HEAL = 10
HEAL_PULSE_MS = 600

# Economy settings
BET_AMOUNT = 10
BOOSTER_COST = 1
WEAPON_REWARD = 1.0
DAMAGE_PENALTY = 0.8
WIN_MULTIPLIER = 1.5
WIN_BONUS_NET = BET_AMOUNT * 0.5
STARTING_BALANCE = float(os.getenv("STARTING_BALANCE", "1000"))
BATCH_STARTING_BALANCE = 10000

# Simulation timing
SIM_TICK_HZ = 60
FIXED_DT = 1.0 / SIM_TICK_HZ
MAX_STEPS_PER_UPDATE = 5
MAX_STEPS_PER_UPDATE_SPEEDUP = 10
SPEEDUP_FACTOR = 2.0
MAX_TICKS = SIM_TICK_HZ * 120  # 2 minutes of sim time per round

# Session settings
WIN_PROBABILITY = float(os.getenv("WIN_PROBABILITY", "0.8"))
SIM_SEED = os.getenv("SIM_SEED", "")  # blank = non-deterministic seed per round
DEBUG_ROUND = _env_bool("DEBUG_ROUND")
