# src/blockpath/host.py
"""
Host-side collaborators the effect resolves at startup.

A host exposes three coroutines, each taking a name and raising
AssetResolutionFailure when it is missing:
  - find_object(name)   -> Block-like (name, hidden, x, y)
  - find_material(name) -> Material
  - find_texture(name)  -> Texture
plus `picker` (events.Picker) and `taps(name)` (events.Signal per object).

MemoryScene is the in-process host used by the tools and tests.
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from . import config
from .errors import AssetResolutionFailure
from .events import Picker, Signal
from .pool import Block, block_names

DIFFUSE = "diffuse"


@dataclass(frozen=True)
class Texture:
    name: str


@dataclass
class Material:
    name: str
    slots: Dict[str, Optional[Texture]] = field(default_factory=dict)

    def set_texture_slot(self, slot: str, texture: Texture) -> None:
        self.slots[slot] = texture

    @property
    def diffuse(self) -> Optional[Texture]:
        return self.slots.get(DIFFUSE)


@dataclass
class MemoryScene:
    objects: Dict[str, Block] = field(default_factory=dict)
    materials: Dict[str, Material] = field(default_factory=dict)
    textures: Dict[str, Texture] = field(default_factory=dict)
    picker: Picker = field(default_factory=Picker)
    tap_signals: Dict[str, Signal] = field(default_factory=dict)
    # seconds each lookup waits; lets tests prove lookups are gathered
    latency: float = 0.0

    @classmethod
    def standard(cls, block_count: int = config.MAX_BLOCK) -> "MemoryScene":
        """A scene holding everything the effect asks for."""
        scene = cls()
        scene.add_objects(block_names(block_count))
        scene.add_objects((
            config.SHADOW_ANCHOR,
            config.SEGMENTATION, config.SHADOW_BUTTON,
        ))
        scene.materials[config.SHADOW_MATERIAL] = Material(config.SHADOW_MATERIAL)
        for name in config.LEVEL_TEXTURES + (config.SHADOW_TEXTURE_ON, config.SHADOW_TEXTURE_OFF):
            scene.textures[name] = Texture(name)
        return scene

    def add_objects(self, names: Iterable[str]) -> None:
        for name in names:
            self.objects[name] = Block(name)

    async def _lookup(self, table: dict, kind: str, name: str):
        if self.latency:
            await asyncio.sleep(self.latency)
        try:
            return table[name]
        except KeyError:
            raise AssetResolutionFailure(kind, name) from None

    async def find_object(self, name: str) -> Block:
        return await self._lookup(self.objects, "object", name)

    async def find_material(self, name: str) -> Material:
        return await self._lookup(self.materials, "material", name)

    async def find_texture(self, name: str) -> Texture:
        return await self._lookup(self.textures, "texture", name)

    def taps(self, name: str) -> Signal:
        if name not in self.tap_signals:
            self.tap_signals[name] = Signal(f"tap:{name}")
        return self.tap_signals[name]

    def tap(self, name: str, gesture=None) -> None:
        self.taps(name).emit(gesture)
