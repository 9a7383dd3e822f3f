"""
CLI: generate celestial sprite atlases.
Usage:
  spritegen --all
  spritegen --planets --moons --seed 1234
  spritegen --stars --pixel-size 4 --output /tmp/sprites --preview
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Any

from .config import CATEGORIES, build_sprite_config, load_config
from .pipeline import generate_sprites

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="spritegen",
        description="Generate animated pixel-art sprite atlases for stars, planets, moons and asteroids.",
    )
    parser.add_argument("--all", action="store_true", help="Generate all sprite categories.")
    parser.add_argument("--stars", action="store_true", help="Generate star sprites.")
    parser.add_argument("--planets", action="store_true", help="Generate planet sprites.")
    parser.add_argument("--moons", action="store_true", help="Generate moon sprites.")
    parser.add_argument("--asteroids", action="store_true", help="Generate asteroid sprites.")
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Base seed for reproducible output (default: drawn at random and logged).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config YAML (default: config/default.yaml).",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=Path,
        default=None,
        help="Output directory (default: output.dir from config).",
    )
    parser.add_argument(
        "--pixel-size",
        type=int,
        default=None,
        help="Pixel block size for every category (default: per-category config).",
    )
    parser.add_argument(
        "--count",
        type=int,
        default=None,
        help="Sprites per planet type / moons / asteroids (default: config counts).",
    )
    parser.add_argument("--preview", action="store_true", help="Also write an animated GIF per sprite.")
    parser.add_argument("--no-manifest", action="store_true", help="Do not write manifest.json.")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging.")
    return parser


def selected_categories(args: argparse.Namespace) -> list[str]:
    if args.all:
        return list(CATEGORIES)
    return [c for c in CATEGORIES if getattr(args, c)]


def _overrides(args: argparse.Namespace) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    if args.pixel_size is not None:
        overrides["pixel_size"] = {c: args.pixel_size for c in CATEGORIES}
    if args.count is not None:
        overrides["counts"] = {"planets_per_type": args.count, "moons": args.count, "asteroids": args.count}
    output: dict[str, Any] = {}
    if args.preview:
        output["preview"] = True
    if args.no_manifest:
        output["manifest"] = False
    if output:
        overrides["output"] = output
    return overrides


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s: %(message)s",
    )

    categories = selected_categories(args)
    if not categories:
        parser.print_help(sys.stderr)
        print("\nerror: select at least one of --all, --stars, --planets, --moons, --asteroids", file=sys.stderr)
        return 1

    try:
        config = build_sprite_config(load_config(args.config), overrides=_overrides(args))
    except ValueError as e:
        logger.error("Invalid config: %s", e)
        return 2

    try:
        result = generate_sprites(categories, config, base_seed=args.seed, out_dir=args.output)
    except OSError as e:
        logger.error("Writing sprites failed: %s", e)
        return 1

    print(f"Done. {len(result.paths)} sprites in {result.out_dir} (seed {result.base_seed})")
    return 0


if __name__ == "__main__":
    sys.exit(main())
