# src/blockpath/layout/levels.py
# Level index -> layout. Level 0 is the canned path, the rest are generated.

import logging
from typing import List, Optional

from .. import config
from ..config import LEVEL_2_STEPS, LEVEL_3_STEPS, LEVEL_COUNT
from ..errors import InvalidLevel
from ..pool import BlockPool
from ..rng import RandomSource
from .generator import generate_level, layout_default

log = logging.getLogger(__name__)

LEVEL_STEPS = {
    0: None,            # canned
    1: LEVEL_2_STEPS,
    2: LEVEL_3_STEPS,
}
HIGHEST_LEVEL = LEVEL_COUNT - 1


def normalize_level(index, strict: Optional[bool] = None) -> int:
    """
    Map a picker index onto 0..HIGHEST_LEVEL.
    Anything unrecognised becomes the highest level, or raises InvalidLevel
    in strict mode (argument wins over config.FLAGS.strict_levels).
    """
    if strict is None:
        strict = config.FLAGS.strict_levels
    if isinstance(index, int) and not isinstance(index, bool) and 0 <= index <= HIGHEST_LEVEL:
        return index
    if strict:
        raise InvalidLevel(f"level index {index!r} outside 0..{HIGHEST_LEVEL}")
    log.warning("unknown level index %r, using level %d", index, HIGHEST_LEVEL)
    return HIGHEST_LEVEL


def steps_for_level(level: int) -> Optional[int]:
    return LEVEL_STEPS[level]


def select_level(
    pool: BlockPool,
    index,
    rng: Optional[RandomSource] = None,
    strict: Optional[bool] = None,
) -> List[int]:
    """Reset the pool and lay out level `index`; returns the path shape."""
    level = normalize_level(index, strict)
    steps = steps_for_level(level)
    log.debug("select level %d (steps=%s)", level, steps)
    if steps is None:
        return layout_default(pool)
    return generate_level(pool, steps, rng)
