# src/blockpath/layout/generator.py
# Path layouts: the hand-authored level 0 and the random step generator.

import logging
from typing import List, Optional

from ..config import DOUBLE_THRESHOLD, MAX_DOUBLE_RUN
from ..errors import OutOfCapacity
from ..pool import BlockPool
from ..rng import RandomSource, default_source
from .placement import SHIFT_LEFT, SHIFT_RIGHT, place_block, place_home

log = logging.getLogger(__name__)

SINGLE, DOUBLE = 1, 2

# (step, shift) per block of the canned layout, home goes one step past the end
DEFAULT_LAYOUT = (
    (0, 0), (1, 0), (2, 0),
    (3, SHIFT_RIGHT), (3, SHIFT_LEFT),
    (4, 0),
    (5, SHIFT_RIGHT), (5, SHIFT_LEFT),
    (6, 0),
)
DEFAULT_HOME_STEP = 7


def max_doubles(steps: int, max_run: int = MAX_DOUBLE_RUN) -> int:
    """Most doubles a path can hold: step 0 is single, runs are capped at max_run."""
    if steps <= 1 or max_run <= 0:
        return 0
    rest = steps - 1
    cycles, tail = divmod(rest, max_run + 1)
    return cycles * max_run + min(tail, max_run)


def required_blocks(steps: int, max_run: int = MAX_DOUBLE_RUN) -> int:
    """Worst-case blocks a generated layout of `steps` can use, home included."""
    if steps < 0:
        raise ValueError("steps must be >= 0")
    return steps + max_doubles(steps, max_run) + 1


def check_capacity(pool: BlockPool, steps: int, max_run: int = MAX_DOUBLE_RUN) -> None:
    need = required_blocks(steps, max_run)
    if need > pool.capacity:
        raise OutOfCapacity(need, pool.capacity)


def generate_level(
    pool: BlockPool,
    steps: int,
    rng: Optional[RandomSource] = None,
    max_run: int = MAX_DOUBLE_RUN,
) -> List[int]:
    """
    Hide the whole pool, then lay out `steps` steps from block 0 upward and
    put the home block at step `steps`.

    One draw per step: above DOUBLE_THRESHOLD gives a single centred block,
    otherwise a left/right pair, unless the last `max_run` steps were all
    pairs. The run counter starts full so step 0 is always single.

    Returns the shape of the path: SINGLE or DOUBLE per step.
    """
    if max_run < 0:
        raise ValueError("max_run must be >= 0")
    check_capacity(pool, steps, max_run)
    if rng is None:
        rng = default_source()

    pool.hide_all()
    shape: List[int] = []
    current_block = 0
    double_blocks = max_run
    for i in range(steps):
        if rng() > DOUBLE_THRESHOLD or double_blocks >= max_run:
            place_block(pool, current_block, i)
            current_block += 1
            double_blocks = 0
            shape.append(SINGLE)
        else:
            double_blocks += 1
            place_block(pool, current_block, i, SHIFT_LEFT)
            place_block(pool, current_block + 1, i, SHIFT_RIGHT)
            current_block += 2
            shape.append(DOUBLE)
    place_home(pool, steps)

    log.debug("generated %d steps, %d doubles, %d blocks", steps, shape.count(DOUBLE), current_block)
    return shape


def layout_default(pool: BlockPool) -> List[int]:
    """Hide the whole pool and show the fixed 7-step level 0 path."""
    need = len(DEFAULT_LAYOUT) + 1
    if need > pool.capacity:
        raise OutOfCapacity(need, pool.capacity)
    pool.hide_all()
    shape: List[int] = []
    for index, (step, shift) in enumerate(DEFAULT_LAYOUT):
        place_block(pool, index, step, shift)
        if step < len(shape):
            shape[step] = DOUBLE
        else:
            shape.append(SINGLE)
    place_home(pool, DEFAULT_HOME_STEP)
    return shape

