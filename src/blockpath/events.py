# src/blockpath/events.py
# Minimal synchronous event plumbing: picker index changes and tap gestures.

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

Handler = Callable[[Any], None]


@dataclass(eq=False)
class Subscription:
    signal: "Signal"
    handler: Handler
    active: bool = True

    def unsubscribe(self) -> None:
        if self.active:
            self.signal._handlers.remove(self)
            self.active = False


class Signal:
    """Ordered callback list. Handlers run to completion, errors propagate."""

    def __init__(self, name: str = ""):
        self.name = name
        self._handlers: List[Subscription] = []

    def subscribe(self, handler: Handler) -> Subscription:
        sub = Subscription(self, handler)
        self._handlers.append(sub)
        return sub

    def emit(self, value: Any = None) -> None:
        # copy: a handler may unsubscribe itself
        for sub in list(self._handlers):
            sub.handler(value)

    def __len__(self) -> int:
        return len(self._handlers)


@dataclass(frozen=True)
class ValueChange:
    old_value: Any
    new_value: Any


@dataclass
class PickerItem:
    image_texture: Any


@dataclass
class Picker:
    """
    Level picker as seen from the effect: a selected index plus a change
    signal. Setting the same index again does not emit.
    """
    items: List[PickerItem] = field(default_factory=list)
    visible: bool = False
    _selected: int = 0
    changed: Signal = field(default_factory=lambda: Signal("picker.selectedIndex"))

    def configure(self, selected_index: int, items: Sequence[PickerItem]) -> None:
        self.items = list(items)
        self._selected = selected_index

    @property
    def selected_index(self) -> int:
        return self._selected

    @selected_index.setter
    def selected_index(self, value: int) -> None:
        old = self._selected
        if value == old:
            return
        self._selected = value
        self.changed.emit(ValueChange(old, value))

    def select(self, value: int) -> None:
        self.selected_index = value


@dataclass(frozen=True)
class TapGesture:
    target: Optional[str] = None
    x: float = 0.0
    y: float = 0.0
