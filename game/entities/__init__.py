"""
Game entities package.
"""
from .warrior import Warrior, BoosterEffect
