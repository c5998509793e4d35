"""
Font and label cache for the viewer.

HP numbers and HUD captions repeat every frame, so fonts are kept per size and
label surfaces per (size, text, color). The label cache is bounded (oldest out).
"""

from __future__ import annotations

from typing import Dict, Tuple

import pygame

Color = Tuple[int, int, int]

_FONTS: Dict[int, pygame.font.Font] = {}
_LABELS: Dict[Tuple[int, str, Color], pygame.Surface] = {}
_LABELS_MAX = 256


def get_font(size: int) -> pygame.font.Font:
    """Default pygame font at `size`; requires pygame.font.init()."""
    size = int(size)
    font = _FONTS.get(size)
    if font is None:
        font = _FONTS[size] = pygame.font.Font(None, size)
    return font


def render_text_cached(size: int, text: str, color: Color) -> pygame.Surface:
    key = (int(size), str(text), (int(color[0]), int(color[1]), int(color[2])))
    surf = _LABELS.get(key)
    if surf is None:
        if len(_LABELS) >= _LABELS_MAX:
            del _LABELS[next(iter(_LABELS))]
        surf = _LABELS[key] = get_font(size).render(key[1], True, key[2])
    return surf


def blit_centered(surface: pygame.Surface, size: int, text: str, color: Color, center: Tuple[int, int]):
    """Draw a cached label centred on `center` (HP numbers above warriors)."""
    label = render_text_cached(size, text, color)
    surface.blit(label, label.get_rect(center=center))
