# src/blockpath/render/preview.py
# Render a laid-out pool to a PNG using Pillow.

from __future__ import annotations

import os
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from ..pool import BlockPool
from .geometry import ViewGeometry

BACKGROUND = (24, 24, 24, 255)
BLOCK_COLOR = (0, 220, 0, 255)
HOME_COLOR = (255, 220, 0, 255)
OUTLINE = (0, 0, 0, 255)


def render_pool(
    pool: BlockPool,
    scale: float = 400.0,
    margin: int = 16,
    block_size: int = 0,
    labels: bool = False,
    geometry: Optional[ViewGeometry] = None,
) -> Image.Image:
    """Draw every visible block as a square; hidden blocks are skipped."""
    geo = geometry or ViewGeometry.fit(pool, scale=scale, margin=margin, block_size=block_size)
    img = Image.new("RGBA", (geo.width, geo.height), BACKGROUND)
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default() if labels else None
    for i, b in enumerate(pool):
        if b.hidden:
            continue
        color = HOME_COLOR if i == pool.home_index else BLOCK_COLOR
        draw.rectangle(geo.box(b), fill=color, outline=OUTLINE)
        if font is not None:
            cx, cy = geo.center(b)
            text = "H" if i == pool.home_index else str(i + 1)
            tw = draw.textlength(text, font=font)
            draw.text((cx - tw / 2, cy - 4), text, fill=OUTLINE, font=font)
    return img


def save_preview(pool: BlockPool, out_png: str, **kwargs) -> str:
    img = render_pool(pool, **kwargs)
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    img.save(out_png)
    return out_png
