# src/blockpath/pool.py
from dataclasses import dataclass, field
from typing import List, Sequence, Tuple

from .config import BLOCK_NAME_FMT, HOME_NAME, MAX_BLOCK
from .errors import OutOfCapacity


@dataclass
class Block:
    """A positionable, hideable scene object (x, y in local scene units)."""
    name: str
    hidden: bool = True
    x: float = 0.0
    y: float = 0.0

    def position(self) -> Tuple[float, float]:
        return (self.x, self.y)


def block_names(count: int = MAX_BLOCK) -> List[str]:
    """Scene names for a full pool: block-1..block-N, then the home block."""
    return [BLOCK_NAME_FMT.format(i + 1) for i in range(count)] + [HOME_NAME]


@dataclass
class BlockPool:
    """
    Fixed-size arena of blocks. The last slot is always the home block.
    Layout code addresses slots by index and never adds or removes any.
    """
    blocks: List[Block] = field(default_factory=list)

    @classmethod
    def empty(cls, count: int = MAX_BLOCK) -> "BlockPool":
        return cls(blocks=[Block(name) for name in block_names(count)])

    @classmethod
    def from_objects(cls, objects: Sequence[Block]) -> "BlockPool":
        if len(objects) < 1:
            raise ValueError("a pool needs at least the home block")
        return cls(blocks=list(objects))

    @property
    def capacity(self) -> int:
        return len(self.blocks)

    @property
    def home_index(self) -> int:
        return len(self.blocks) - 1

    @property
    def home(self) -> Block:
        return self.blocks[self.home_index]

    def get(self, index: int) -> Block:
        # Negative indices would silently wrap onto the home block.
        if not (0 <= index < len(self.blocks)):
            raise OutOfCapacity(index + 1, len(self.blocks))
        return self.blocks[index]

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self):
        return iter(self.blocks)

    def hide_all(self) -> None:
        for b in self.blocks:
            b.hidden = True

    def visible_indices(self) -> List[int]:
        return [i for i, b in enumerate(self.blocks) if not b.hidden]

    def visible_count(self) -> int:
        return sum(1 for b in self.blocks if not b.hidden)

    def as_rows(self) -> List[Tuple[int, str, bool, float, float]]:
        return [(i, b.name, b.hidden, b.x, b.y) for i, b in enumerate(self.blocks)]
