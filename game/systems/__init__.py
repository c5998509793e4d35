"""
Game systems package.
"""
from .combat import CombatSystem, CooldownTable, classify_collision
from .economy import EconomySystem, compute_final_profit
from .outcome import OutcomeController, OutcomeParams
from .boosters import BoosterType, BoosterPickup, spawn_booster, check_pickup, apply_booster
from . import physics
