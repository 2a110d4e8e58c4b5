# src/blockpath/config.py
from dataclasses import dataclass, replace

# Layout constants. Changing any of these shifts the blocks visibly off the
# path in the scene, so they must stay exactly as authored.
BLOCK_SHIFT = 0.1                   # vertical unit per step (and full double width)
LINE_COMPENSATION = 0.002469135802  # per-step drift correction
DOUBLE_THRESHOLD = 0.6              # draws above this always give a single step
MAX_DOUBLE_RUN = 1                  # longest run of consecutive double steps

MAX_BLOCK = 25                      # ordinary blocks, home comes on top
POOL_SIZE = MAX_BLOCK + 1

DEFAULT_LEVEL = 0
LEVEL_2_STEPS = 10
LEVEL_3_STEPS = 15
LEVEL_COUNT = 3

# Scene names resolved at startup
BLOCK_NAME_FMT = "block-{}"         # 1-based: block-1 .. block-25
HOME_NAME = "block-home"
LEVEL_TEXTURES = ("level-1", "level-2", "level-3")

SHADOW_ANCHOR = "shadowAnchor"
SEGMENTATION = "segmentation"
SHADOW_BUTTON = "button-shadow"
SHADOW_MATERIAL = "button-shadow"
SHADOW_TEXTURE_ON = "button-shadow-on"
SHADOW_TEXTURE_OFF = "button-shadow-off"


@dataclass(frozen=True)
class ModeFlags:
    # Unknown level indices fall through to the hardest level unless strict.
    strict_levels: bool = False

# Global flags (can be swapped by launcher)
FLAGS = ModeFlags()


def set_flags(**changes) -> ModeFlags:
    """Swap the global flags for a copy with ``changes`` applied; returns the old flags."""
    global FLAGS
    old = FLAGS
    FLAGS = replace(FLAGS, **changes)
    return old
