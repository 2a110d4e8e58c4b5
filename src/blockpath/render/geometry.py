# src/blockpath/render/geometry.py
# Top-down view of the path: scene x to the right, scene y (step) upward.

from dataclasses import dataclass
from typing import Tuple

from ..config import BLOCK_SHIFT
from ..pool import Block, BlockPool


@dataclass(frozen=True)
class ViewGeometry:
    scale: float        # pixels per scene unit
    margin: int
    block_size: int
    width: int
    height: int

    @classmethod
    def fit(cls, pool: BlockPool, scale: float = 400.0, margin: int = 16, block_size: int = 0) -> "ViewGeometry":
        if block_size <= 0:
            block_size = max(4, int(BLOCK_SHIFT * scale * 0.8))
        top = max((b.y for b in pool if not b.hidden), default=0.0)
        width = int(round(BLOCK_SHIFT * 2 * scale)) + 2 * margin + block_size
        height = int(round(top * scale)) + 2 * margin + block_size
        return cls(scale=scale, margin=margin, block_size=block_size, width=width, height=height)

    def center(self, block: Block) -> Tuple[int, int]:
        cx = self.width / 2 + block.x * self.scale
        cy = self.height - self.margin - self.block_size / 2 - block.y * self.scale
        return int(round(cx)), int(round(cy))

    def box(self, block: Block) -> Tuple[int, int, int, int]:
        cx, cy = self.center(block)
        half = self.block_size // 2
        return (cx - half, cy - half, cx - half + self.block_size - 1, cy - half + self.block_size - 1)
