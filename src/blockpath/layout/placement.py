# src/blockpath/layout/placement.py
# Block coordinates along the path. y grows one unit per step; doubles sit
# half a unit either side of the centre line.

from ..config import BLOCK_SHIFT, LINE_COMPENSATION
from ..pool import BlockPool

SHIFT_LEFT, SHIFT_CENTER, SHIFT_RIGHT = -1, 0, 1


def step_y(step: int) -> float:
    return BLOCK_SHIFT * step - LINE_COMPENSATION * step


def shift_x(shift: int) -> float:
    if shift > 0:
        return BLOCK_SHIFT / 2 - LINE_COMPENSATION / 2
    if shift < 0:
        return -BLOCK_SHIFT / 2 + LINE_COMPENSATION / 2
    return 0


def place_block(pool: BlockPool, index: int, step: int, shift: int = SHIFT_CENTER) -> None:
    """Show block `index` at `step`; only the sign of `shift` matters."""
    block = pool.get(index)
    block.hidden = False
    block.y = step_y(step)
    block.x = shift_x(shift)


def place_home(pool: BlockPool, step: int) -> None:
    place_block(pool, pool.home_index, step)
