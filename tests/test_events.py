# tests/test_events.py
import pytest

from blockpath.events import Picker, PickerItem, Signal, ValueChange

def test_signal_calls_handlers_in_order():
    sig = Signal("x")
    seen = []
    sig.subscribe(lambda v: seen.append(("a", v)))
    sig.subscribe(lambda v: seen.append(("b", v)))
    sig.emit(3)
    assert seen == [("a", 3), ("b", 3)]

def test_unsubscribe_stops_delivery():
    sig = Signal()
    seen = []
    sub = sig.subscribe(seen.append)
    sig.emit(1)
    sub.unsubscribe()
    sub.unsubscribe()  # second call is a no-op
    sig.emit(2)
    assert seen == [1]
    assert len(sig) == 0

def test_handler_may_unsubscribe_itself():
    sig = Signal()
    seen = []
    def once(v):
        seen.append(v)
        sub.unsubscribe()
    sub = sig.subscribe(once)
    sig.emit("a")
    sig.emit("b")
    assert seen == ["a"]

def test_handler_errors_propagate():
    sig = Signal()
    def boom(_):
        raise RuntimeError("boom")
    sig.subscribe(boom)
    with pytest.raises(RuntimeError):
        sig.emit()

def test_picker_emits_only_on_change():
    picker = Picker()
    picker.configure(selected_index=0, items=[PickerItem(None)] * 3)
    seen = []
    picker.changed.subscribe(seen.append)
    picker.select(0)
    picker.selected_index = 2
    picker.select(1)
    assert seen == [ValueChange(0, 2), ValueChange(2, 1)]
    assert picker.selected_index == 1
    assert len(picker.items) == 3

def test_configure_does_not_emit():
    picker = Picker()
    seen = []
    picker.changed.subscribe(seen.append)
    picker.configure(selected_index=2, items=[])
    assert seen == [] and picker.selected_index == 2
