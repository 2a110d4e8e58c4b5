#!/usr/bin/env python3
# Interactive viewer for blockpath layouts on an in-memory scene.
# - 1/2/3: pick level (drives the picker, like the native UI would)
# - R: re-roll the current level
# - Mouse click: tap the shadow button
# - Esc: quit

import argparse, asyncio, logging
import pygame

from blockpath.effect import Effect
from blockpath.events import TapGesture
from blockpath.host import MemoryScene
from blockpath.logging_config import setup_logging
from blockpath.render.geometry import ViewGeometry
from blockpath.render.sprites import BlockSprites, draw_pool
from blockpath.rng import source_for
from blockpath import config

STATUS_H = 24

def draw_status(screen, font, effect, y0):
    w = screen.get_width()
    pygame.draw.rect(screen, (40, 40, 40), pygame.Rect(0, y0, w, STATUS_H))
    shadow = "ON" if effect.shadow.enabled else "OFF"
    doubles = effect.shape.count(2)
    text = f"LEVEL {effect.picker.selected_index}  STEPS {len(effect.shape)}  DOUBLES {doubles}  SHADOW {shadow}"
    img = font.render(text, True, (220, 220, 220))
    screen.blit(img, (6, y0 + (STATUS_H - img.get_height()) // 2))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=int, default=None, help="Seed for repeatable layouts")
    ap.add_argument("--scale", type=float, default=400.0, help="Pixels per scene unit")
    ap.add_argument("--strict", action="store_true", help="Reject unknown level indices")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    scene = MemoryScene.standard()
    effect = asyncio.run(Effect(scene, rng=source_for(args.seed), strict=args.strict).start())

    # size the window for the tallest level so it never has to resize
    probe = ViewGeometry.fit(effect.pool, scale=args.scale)
    top = config.BLOCK_SHIFT * (config.LEVEL_3_STEPS + 1)
    height = int(round(top * args.scale)) + 2 * probe.margin + probe.block_size

    pygame.init()
    pygame.display.set_caption("blockpath viewer")
    clock = pygame.time.Clock()
    screen = pygame.display.set_mode((probe.width, height + STATUS_H))
    font = pygame.font.SysFont(None, 18)
    sprites = BlockSprites()

    keys = {pygame.K_1: 0, pygame.K_2: 1, pygame.K_3: 2}
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key in keys:
                    effect.picker.select(keys[ev.key])
                elif ev.key == pygame.K_r:
                    effect.apply_level(effect.picker.selected_index)
            elif ev.type == pygame.MOUSEBUTTONDOWN:
                scene.tap(config.SHADOW_BUTTON, TapGesture(config.SHADOW_BUTTON, *ev.pos))

        geo = ViewGeometry(scale=args.scale, margin=probe.margin, block_size=probe.block_size,
                           width=probe.width, height=height)
        screen.fill((10, 10, 30) if effect.shadow.enabled else (0, 0, 0))
        draw_pool(screen, effect.pool, geo, sprites)
        draw_status(screen, font, effect, height)
        pygame.display.flip()
        clock.tick(60)

    effect.stop()
    pygame.quit()

if __name__ == "__main__":
    main()
