#!/usr/bin/env python3
"""
Render one body for a quick look, without touching the sprite library or manifest.

Usage:
  python scripts/render_body.py planet terran --seed 42
  python scripts/render_body.py star M --seed 7 --size 300 --frames 4 --gif
  python scripts/render_body.py asteroid --seed 99 -o /tmp/rock.png
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

import argparse
import logging

from spritegen.config import build_sprite_config, load_config
from spritegen.output import save_atlas, save_preview
from spritegen.procedural import SpriteGenerator


def main() -> int:
    parser = argparse.ArgumentParser(description="Render a single celestial body to PNG (and GIF).")
    parser.add_argument("category", choices=["star", "planet", "moon", "asteroid"])
    parser.add_argument("kind", nargs="?", default=None, help="Stellar class or planet type.")
    parser.add_argument("--seed", type=int, default=12345, help="Body seed (default: 12345).")
    parser.add_argument("--size", type=int, default=None, help="Override the body size in pixels.")
    parser.add_argument("--frames", type=int, default=None, help="Override the frame count.")
    parser.add_argument("--pixel-size", type=int, default=None, help="Override the pixel block size.")
    parser.add_argument("--config", type=Path, default=None, help="Config YAML.")
    parser.add_argument("--output", "-o", type=Path, default=None, help="Output PNG path.")
    parser.add_argument("--gif", action="store_true", help="Also write an animated GIF next to the PNG.")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    key = f"{args.category}s"
    overrides: dict = {}
    if args.frames is not None:
        overrides["frames"] = {key: args.frames}
    if args.pixel_size is not None:
        overrides["pixel_size"] = {key: args.pixel_size}
    if args.size is not None:
        if args.category == "star":
            overrides["sizes"] = {"stars": {args.kind or "G": args.size}}
        elif args.category == "planet":
            overrides["sizes"] = {"planets": {args.kind or "terran": args.size}}
        else:
            overrides["sizes"] = {key: {"min": args.size, "max": args.size}}
    config = build_sprite_config(load_config(args.config), overrides=overrides)
    generator = SpriteGenerator(config)

    if args.category == "star":
        atlas = generator.generate_star(args.kind or "G", args.seed)
    elif args.category == "planet":
        atlas = generator.generate_planet(args.kind or "terran", 0, args.seed)
    elif args.category == "moon":
        atlas = generator.generate_moon(0, args.seed)
    else:
        atlas = generator.generate_asteroid(0, args.seed)

    path = args.output or Path(atlas.filename)
    save_atlas(atlas, path)
    print(f"Wrote {path} ({atlas.width}x{atlas.height}, seed {atlas.seed})")
    if args.gif:
        gif = save_preview(atlas, path.with_suffix(".gif"), fps=config.preview_fps)
        print(f"Wrote {gif}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
