# src/blockpath/render/sprites.py
from __future__ import annotations
import pygame
from functools import lru_cache
from typing import Tuple

from ..pool import BlockPool
from .geometry import ViewGeometry

BLOCK, HOME = "block", "home"

_COLORS = {
    BLOCK: (0, 220, 0, 255),
    HOME: (255, 220, 0, 255),
}


class BlockSprites:
    """
    Cached square surfaces per block kind and size.
    Needs no display; surfaces are plain SRCALPHA.
    """
    def __init__(self, outline: Tuple[int, int, int] = (0, 0, 0)):
        self.outline = outline

    @lru_cache(maxsize=64)
    def view(self, kind: str, size: int) -> pygame.Surface:
        img = pygame.Surface((size, size), pygame.SRCALPHA)
        img.fill(_COLORS[kind])
        pygame.draw.rect(img, self.outline, img.get_rect(), 1)
        return img


def draw_pool(
    screen: pygame.Surface,
    pool: BlockPool,
    geo: ViewGeometry,
    sprites: BlockSprites,
    origin: Tuple[int, int] = (0, 0),
) -> int:
    """Blit visible blocks onto `screen`; returns how many were drawn."""
    ox, oy = origin
    drawn = 0
    for i, b in enumerate(pool):
        if b.hidden:
            continue
        kind = HOME if i == pool.home_index else BLOCK
        x0, y0, _, _ = geo.box(b)
        screen.blit(sprites.view(kind, geo.block_size), (ox + x0, oy + y0))
        drawn += 1
    return drawn
