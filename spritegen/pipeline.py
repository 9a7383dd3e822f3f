"""
Pipeline: selected categories → one PNG atlas per body (+ optional GIF preview) → manifest.
Bodies are generated one after another; each atlas is written only once it is complete.
"""
import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Iterator

from .config import CATEGORIES, SpriteConfig
from .output import (
    MANIFEST_NAME,
    load_manifest,
    manifest_entry,
    save_atlas,
    save_preview,
    sprite_path,
    write_manifest,
)
from .procedural import PlanetType, SpriteAtlas, SpriteGenerator, StellarClass
from .random_utils import asteroid_seed, draw_seed, moon_seed, planet_seed, star_seed

logger = logging.getLogger(__name__)


@dataclass
class RunResult:
    base_seed: int
    out_dir: Path
    paths: list[Path] = field(default_factory=list)
    entries: list[dict[str, Any]] = field(default_factory=list)
    manifest_path: Path | None = None


def _unique(resolved: Iterable[Any]) -> list[Any]:
    """Drop repeats (including unknown keys that fell back to the same variant), keeping order."""
    out: list[Any] = []
    for item in resolved:
        if item in out:
            logger.warning("Skipping duplicate %s in config", item.value)
            continue
        out.append(item)
    return out


def iter_stars(generator: SpriteGenerator, base_seed: int) -> Iterator[SpriteAtlas]:
    for cls in _unique(StellarClass.from_key(k) for k in generator.config.stellar_classes):
        yield generator.generate_star(cls, star_seed(base_seed, cls.value))


def iter_planets(generator: SpriteGenerator, base_seed: int) -> Iterator[SpriteAtlas]:
    for ptype in _unique(PlanetType.from_key(k) for k in generator.config.planet_types):
        logger.info("  %s:", ptype.value)
        for i in range(generator.config.planets_per_type):
            yield generator.generate_planet(ptype, i, planet_seed(base_seed, ptype.value, i))


def iter_moons(generator: SpriteGenerator, base_seed: int) -> Iterator[SpriteAtlas]:
    for i in range(generator.config.moon_count):
        yield generator.generate_moon(i, moon_seed(base_seed, i))


def iter_asteroids(generator: SpriteGenerator, base_seed: int) -> Iterator[SpriteAtlas]:
    for i in range(generator.config.asteroid_count):
        yield generator.generate_asteroid(i, asteroid_seed(base_seed, i))


_ITERATORS = {
    "stars": iter_stars,
    "planets": iter_planets,
    "moons": iter_moons,
    "asteroids": iter_asteroids,
}


def _persist(atlas: SpriteAtlas, config: SpriteConfig, out_dir: Path) -> tuple[Path, dict[str, Any]]:
    path = save_atlas(atlas, sprite_path(out_dir, atlas))
    if config.write_preview:
        save_preview(atlas, path.with_suffix(".gif"), fps=config.preview_fps)
    logger.info("  Saved: %s", path.name)
    return path, manifest_entry(atlas, out_dir, path)


def _merge_manifest(path: Path, categories: Iterable[str], entries: list[dict[str, Any]]) -> list[dict[str, Any]]:
    """
    Keep earlier entries of categories not regenerated in this run.
    Files of regenerated categories that this run did not rewrite are left on disk
    but drop out of the manifest; each one is logged.
    """
    if not path.exists():
        return entries
    regenerated = {c.rstrip("s") for c in categories}
    previous = load_manifest(path).get("sprites", [])
    kept = [e for e in previous if e.get("category") not in regenerated]
    written = {e["file"] for e in entries}
    for e in previous:
        if e.get("category") in regenerated and e.get("file") not in written:
            stale = path.parent / e["file"]
            if stale.exists():
                logger.warning("Left behind, no longer in manifest: %s", stale)
    return kept + entries


def generate_sprites(
    categories: Iterable[str],
    config: SpriteConfig,
    *,
    base_seed: int | None = None,
    out_dir: Path | None = None,
) -> RunResult:
    """
    Generate every body of the selected categories and write them under out_dir.
    With no base_seed a fresh one is drawn and logged; pass it back in to reproduce the run.
    """
    selected = [c for c in CATEGORIES if c in set(categories)]
    if not selected:
        raise ValueError(f"No categories selected (choose from {', '.join(CATEGORIES)})")
    if base_seed is None:
        base_seed = draw_seed()
        logger.info("No seed given, drew base seed %d", base_seed)
    else:
        logger.info("Base seed: %d", base_seed)

    out_dir = Path(out_dir) if out_dir is not None else config.output_dir
    generator = SpriteGenerator(config)
    result = RunResult(base_seed=base_seed, out_dir=out_dir)
    start = time.time()

    for category in selected:
        logger.info("=== Generating %s ===", category)
        count = 0
        for atlas in _ITERATORS[category](generator, base_seed):
            path, entry = _persist(atlas, config, out_dir)
            result.paths.append(path)
            result.entries.append(entry)
            count += 1
        logger.info("Generated %d %s", count, category)

    if config.write_manifest:
        manifest = out_dir / MANIFEST_NAME
        entries = _merge_manifest(manifest, selected, result.entries)
        result.manifest_path = write_manifest(entries, manifest, base_seed=base_seed)

    logger.info("Total generation time: %.2fs", time.time() - start)
    return result
