# src/blockpath/effect.py
# Startup and event wiring: resolve the scene, then react to the picker
# and to taps on the shadow button. The two handlers share no state.

from __future__ import annotations

import asyncio
import logging
from typing import List, Optional

from . import config
from .events import PickerItem, Subscription, ValueChange
from .layout.levels import select_level
from .pool import BlockPool, block_names
from .rng import RandomSource
from .shadow import ShadowToggle

log = logging.getLogger(__name__)


class Effect:
    """
    Owns the block pool and the shadow toggle for one running effect.

    `start()` may suspend on host lookups; any AssetResolutionFailure
    propagates and nothing is subscribed. After that, everything runs
    synchronously from the host's signals.
    """

    def __init__(self, host, rng: Optional[RandomSource] = None, strict: Optional[bool] = None):
        self.host = host
        self.rng = rng
        self.strict = strict
        self.pool: Optional[BlockPool] = None
        self.shadow: Optional[ShadowToggle] = None
        self.picker = None
        self._button = None
        self.shape: List[int] = []
        self.subscriptions: List[Subscription] = []

    async def start(self) -> "Effect":
        shadow = await self._init_shadow()
        picker = await self._init_picker()
        pool = await self._resolve_pool()

        self.shadow, self.picker, self.pool = shadow, picker, pool
        shadow.attach()
        picker.visible = True
        self.subscriptions.append(self.host.taps(self._button.name).subscribe(shadow.on_tap))
        self.subscriptions.append(picker.changed.subscribe(self.on_level_change))

        self.apply_level(config.DEFAULT_LEVEL)
        log.info("effect started with %d blocks", pool.capacity)
        return self

    async def _init_shadow(self) -> ShadowToggle:
        h = self.host
        anchor, segmentation, button, material, on, off = await asyncio.gather(
            h.find_object(config.SHADOW_ANCHOR),
            h.find_object(config.SEGMENTATION),
            h.find_object(config.SHADOW_BUTTON),
            h.find_material(config.SHADOW_MATERIAL),
            h.find_texture(config.SHADOW_TEXTURE_ON),
            h.find_texture(config.SHADOW_TEXTURE_OFF),
        )
        self._button = button
        return ShadowToggle(
            material=material, texture_on=on, texture_off=off,
            anchor=anchor, segmentation=segmentation,
        )

    async def _init_picker(self):
        textures = await asyncio.gather(*(self.host.find_texture(n) for n in config.LEVEL_TEXTURES))
        picker = self.host.picker
        picker.configure(
            selected_index=config.DEFAULT_LEVEL,
            items=[PickerItem(image_texture=t) for t in textures],
        )
        return picker

    async def _resolve_pool(self) -> BlockPool:
        blocks = await asyncio.gather(*(self.host.find_object(n) for n in block_names(config.MAX_BLOCK)))
        return BlockPool.from_objects(blocks)

    def on_level_change(self, change: ValueChange) -> None:
        self.apply_level(change.new_value)

    def apply_level(self, index) -> List[int]:
        self.shape = select_level(self.pool, index, self.rng, self.strict)
        return self.shape

    def stop(self) -> None:
        for sub in self.subscriptions:
            sub.unsubscribe()
        self.subscriptions.clear()


async def run_effect(host, rng: Optional[RandomSource] = None, strict: Optional[bool] = None) -> Effect:
    return await Effect(host, rng=rng, strict=strict).start()
