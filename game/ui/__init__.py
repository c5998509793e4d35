"""
UI package (viewer only).
"""
from .hud import HUD
