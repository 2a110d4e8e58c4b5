# tests/test_effect.py
import asyncio

import pytest

from blockpath import config
from blockpath.effect import Effect, run_effect
from blockpath.errors import AssetResolutionFailure
from blockpath.events import TapGesture
from blockpath.host import MemoryScene, Texture
from blockpath.layout.generator import SINGLE
from blockpath.rng import SequenceRandom

def start(scene, rng=None, strict=None):
    return asyncio.run(run_effect(scene, rng=rng, strict=strict))

def test_startup_lays_out_default_level():
    scene = MemoryScene.standard()
    effect = start(scene, rng=SequenceRandom([0.9], cycle=True))
    assert effect.pool.capacity == 26
    assert effect.pool.visible_indices() == list(range(9)) + [25]
    # the pool holds the scene's own objects
    assert effect.pool.get(0) is scene.objects["block-1"]
    assert effect.pool.home is scene.objects["block-home"]

def test_startup_configures_picker():
    scene = MemoryScene.standard()
    effect = start(scene)
    picker = scene.picker
    assert picker.visible is True
    assert picker.selected_index == config.DEFAULT_LEVEL
    assert [item.image_texture for item in picker.items] == [
        Texture("level-1"), Texture("level-2"), Texture("level-3"),
    ]
    assert effect.picker is picker

def test_startup_applies_initial_shadow_state():
    scene = MemoryScene.standard()
    start(scene)
    assert scene.objects["shadowAnchor"].hidden is True
    assert scene.objects["segmentation"].hidden is False

def test_picker_change_regenerates_pool():
    scene = MemoryScene.standard()
    effect = start(scene, rng=SequenceRandom([0.9], cycle=True))
    scene.picker.select(1)
    assert effect.shape == [SINGLE] * 10
    assert effect.pool.visible_indices() == list(range(10)) + [25]
    scene.picker.select(0)
    assert effect.pool.visible_indices() == list(range(9)) + [25]

def test_tap_and_level_change_are_independent():
    scene = MemoryScene.standard()
    effect = start(scene, rng=SequenceRandom([0.9], cycle=True))
    rows = effect.pool.as_rows()
    scene.tap(config.SHADOW_BUTTON)
    assert effect.shadow.enabled is True
    assert scene.materials["button-shadow"].diffuse == Texture("button-shadow-on")
    assert effect.pool.as_rows() == rows
    scene.picker.select(2)
    assert effect.shadow.enabled is True
    assert scene.objects["shadowAnchor"].hidden is False

def test_unknown_picker_index_uses_hardest_level():
    scene = MemoryScene.standard()
    effect = start(scene, rng=SequenceRandom([0.9], cycle=True))
    scene.picker.select(9)
    assert len(effect.shape) == 15

def test_missing_block_is_fatal():
    scene = MemoryScene.standard()
    del scene.objects["block-17"]
    with pytest.raises(AssetResolutionFailure) as exc:
        start(scene)
    assert exc.value.name == "block-17"
    assert len(scene.picker.changed) == 0
    assert len(scene.taps(config.SHADOW_BUTTON)) == 0

def test_missing_texture_is_fatal():
    scene = MemoryScene.standard()
    del scene.textures["button-shadow-off"]
    with pytest.raises(LookupError):
        start(scene)

def test_lookups_may_suspend():
    scene = MemoryScene.standard()
    scene.latency = 0.001
    effect = start(scene, rng=SequenceRandom([0.9], cycle=True))
    assert effect.pool.visible_count() == 10

def test_stop_unsubscribes_handlers():
    scene = MemoryScene.standard()
    effect = start(scene)
    effect.stop()
    scene.tap(config.SHADOW_BUTTON)
    assert effect.shadow.enabled is False
    assert len(scene.picker.changed) == 0

def test_effect_start_returns_self():
    scene = MemoryScene.standard()
    effect = Effect(scene)
    assert asyncio.run(effect.start()) is effect

def test_picker_stays_hidden_when_startup_fails():
    scene = MemoryScene.standard()
    del scene.objects["block-home"]
    with pytest.raises(AssetResolutionFailure):
        start(scene)
    assert scene.picker.visible is False

def test_tap_gesture_payload_is_accepted():
    scene = MemoryScene.standard()
    effect = start(scene)
    scene.tap(config.SHADOW_BUTTON, TapGesture(config.SHADOW_BUTTON, 10, 20))
    assert effect.shadow.enabled is True
