# tests/test_shadow.py
from blockpath.host import Material, Texture
from blockpath.pool import Block
from blockpath.shadow import ShadowToggle

def make_toggle():
    return ShadowToggle(
        material=Material("button-shadow"),
        texture_on=Texture("on"),
        texture_off=Texture("off"),
        anchor=Block("shadowAnchor", hidden=False),
        segmentation=Block("segmentation", hidden=True),
    )

def test_attach_shows_segmentation_only():
    t = make_toggle()
    t.attach()
    assert t.anchor.hidden is True
    assert t.segmentation.hidden is False
    assert t.material.diffuse is None

def test_tap_flips_state_texture_and_visibility():
    t = make_toggle()
    t.attach()
    assert t.on_tap() is True
    assert t.material.diffuse == Texture("on")
    assert (t.anchor.hidden, t.segmentation.hidden) == (False, True)
    assert t.on_tap(object()) is False
    assert t.material.diffuse == Texture("off")
    assert (t.anchor.hidden, t.segmentation.hidden) == (True, False)

def test_exactly_one_visible_after_any_number_of_taps():
    t = make_toggle()
    t.attach()
    for _ in range(7):
        t.on_tap()
        assert t.anchor.hidden != t.segmentation.hidden
    assert t.enabled is True
