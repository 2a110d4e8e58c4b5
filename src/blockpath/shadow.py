# src/blockpath/shadow.py
from dataclasses import dataclass
import logging

from .host import DIFFUSE, Material, Texture
from .pool import Block

log = logging.getLogger(__name__)


@dataclass
class ShadowToggle:
    """
    Tap-driven switch between the segmentation view and the shadow view.
    Exactly one of `anchor` / `segmentation` is visible at a time.
    """
    material: Material
    texture_on: Texture
    texture_off: Texture
    anchor: Block
    segmentation: Block
    enabled: bool = False

    def attach(self) -> None:
        self._apply()

    def on_tap(self, gesture=None) -> bool:
        self.enabled = not self.enabled
        self.material.set_texture_slot(DIFFUSE, self.texture_on if self.enabled else self.texture_off)
        self._apply()
        log.debug("shadow %s", "on" if self.enabled else "off")
        return self.enabled

    def _apply(self) -> None:
        self.anchor.hidden = not self.enabled
        self.segmentation.hidden = self.enabled
