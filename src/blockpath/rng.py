# src/blockpath/rng.py
"""
Random sources for the layout engine.

A random source is any zero-argument callable returning a float in [0, 1).
The engine never seeds or stores one; callers pass it in so that tests can
replay exact draw sequences.
"""

import random
from dataclasses import dataclass, field
from typing import Callable, List, Sequence

RandomSource = Callable[[], float]

A = 16807
M = 0x7FFFFFFF  # 2^31-1


def pm_next(state: int) -> int:
    return (state * A) % M


def seed_state(seed: int) -> int:
    """Fold any int into a valid Park–Miller state (1..M-1)."""
    s = seed % M
    return s if s else 1


@dataclass
class PMRandom:
    """Seedable Park–Miller source; same seed, same layout."""
    state: int

    @classmethod
    def from_seed(cls, seed: int) -> "PMRandom":
        return cls(seed_state(seed))

    def next32(self) -> int:
        self.state = pm_next(self.state)
        return self.state

    def uniform(self) -> float:
        # states are 1..M-1, so this lands in [0, 1)
        return (self.next32() - 1) / (M - 1)

    def __call__(self) -> float:
        return self.uniform()


@dataclass
class SequenceRandom:
    """
    Replays a fixed list of draws.
      - cycle=True wraps around when the list runs out
      - cycle=False raises IndexError instead
    `drawn` counts how many values were handed out.
    """
    values: Sequence[float]
    cycle: bool = False
    drawn: int = 0
    history: List[float] = field(default_factory=list)

    def __post_init__(self):
        if not self.values:
            raise ValueError("SequenceRandom needs at least one value")
        for v in self.values:
            if not (0.0 <= v < 1.0):
                raise ValueError(f"draw {v!r} outside [0, 1)")

    def __call__(self) -> float:
        if self.drawn >= len(self.values) and not self.cycle:
            raise IndexError(f"SequenceRandom exhausted after {self.drawn} draws")
        v = self.values[self.drawn % len(self.values)]
        self.drawn += 1
        self.history.append(v)
        return v


def default_source() -> RandomSource:
    return random.random


def source_for(seed=None) -> RandomSource:
    """PMRandom for an explicit seed, the process RNG otherwise."""
    if seed is None:
        return default_source()
    return PMRandom.from_seed(seed)
