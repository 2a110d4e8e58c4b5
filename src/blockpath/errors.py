# src/blockpath/errors.py


class BlockpathError(Exception):
    """Base class for every error raised by blockpath."""


class AssetResolutionFailure(BlockpathError, LookupError):
    """A named scene object, material or texture could not be found at startup."""

    def __init__(self, kind: str, name: str):
        super().__init__(f"{kind} not found: {name!r}")
        self.kind = kind
        self.name = name


class OutOfCapacity(BlockpathError, IndexError):
    """A layout needs more blocks than the pool holds."""

    def __init__(self, required: int, capacity: int):
        super().__init__(f"layout needs {required} blocks but the pool holds {capacity}")
        self.required = required
        self.capacity = capacity


class InvalidLevel(BlockpathError, ValueError):
    """Raised in strict mode for a level index outside 0..LEVEL_COUNT-1."""
