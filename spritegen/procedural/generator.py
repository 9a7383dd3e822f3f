"""
Sprite generator: one body (class/type + seed) → one RGBA atlas.
Pure compute: no file I/O here; the pipeline hands finished atlases to the writer.
"""
import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from ..config import SpriteConfig
from ..random_utils import body_rng, uniform_float, uniform_int
from .bodies import BodyCategory, PlanetType, StellarClass
from .noise import NoiseField
from .renderer import render_atlas
from .shading import AsteroidShader, BodyShader, MoonShader, PlanetShader, StarShader

logger = logging.getLogger(__name__)


def sprite_filename(category: BodyCategory, kind: str | None = None, index: int | None = None) -> str:
    """
    <category>_<kind>_<NNN>.png; kind or index are left out when the body has none
    (stars: star_G.png, moons: moon_003.png).
    """
    parts = [category.value]
    if kind:
        parts.append(kind)
    if index is not None:
        parts.append(f"{index:03d}")
    return "_".join(parts) + ".png"


@dataclass
class SpriteAtlas:
    """Finished sprite: `frames` square frames of `size` px laid out left to right."""

    category: BodyCategory
    kind: str | None
    index: int | None
    seed: int
    size: int
    frames: int
    pixel_size: int
    pixels: np.ndarray
    attributes: dict[str, Any] = field(default_factory=dict)

    @property
    def filename(self) -> str:
        return sprite_filename(self.category, self.kind, self.index)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])


class SpriteGenerator:
    """
    Generates single bodies from an explicit SpriteConfig.
    Each call builds its own NoiseField from the given seed and shares nothing,
    so calls can run in any order (or in parallel) with identical results.
    """

    def __init__(self, config: SpriteConfig):
        self.config = config

    def _render(
        self,
        shader: BodyShader,
        category: BodyCategory,
        kind: str | None,
        index: int | None,
        seed: int,
        size: int,
        attributes: dict[str, Any] | None = None,
    ) -> SpriteAtlas:
        key = category.directory
        frames = self.config.frames_for(key)
        pixel_size = self.config.pixel_size_for(key)
        pixels = render_atlas(shader, size, frames, pixel_size)
        return SpriteAtlas(
            category=category,
            kind=kind,
            index=index,
            seed=seed,
            size=size,
            frames=frames,
            pixel_size=pixel_size,
            pixels=pixels,
            attributes=attributes or {},
        )

    def generate_star(self, stellar_class: str | StellarClass, seed: int) -> SpriteAtlas:
        cls = stellar_class if isinstance(stellar_class, StellarClass) else StellarClass.from_key(stellar_class)
        size = self.config.star_size(cls.value)
        logger.info(
            "Generating %s star (%dx%dpx, %d frames, pixel:%d, seed=%d)",
            cls.value, size, size, self.config.frames_for("stars"), self.config.pixel_size_for("stars"), seed,
        )
        shader = StarShader(NoiseField(seed), cls, size)
        return self._render(shader, BodyCategory.STAR, cls.value, None, seed, size)

    def generate_planet(self, planet_type: str | PlanetType, index: int, seed: int) -> SpriteAtlas:
        ptype = planet_type if isinstance(planet_type, PlanetType) else PlanetType.from_key(planet_type)
        size = self.config.planet_size(ptype.value)
        logger.info(
            "  %s_%03d (%dx%dpx, %d frames, seed=%d)",
            ptype.value, index, size, size, self.config.frames_for("planets"), seed,
        )
        shader = PlanetShader(NoiseField(seed), ptype, size)
        return self._render(shader, BodyCategory.PLANET, ptype.value, index, seed, size)

    def generate_moon(self, index: int, seed: int) -> SpriteAtlas:
        rng = body_rng(seed)
        size = uniform_int(rng, *self.config.moon_size_range)
        icy = rng.random() > 0.5
        logger.info(
            "  moon_%03d (%dx%dpx, %d frames, %s, seed=%d)",
            index, size, size, self.config.frames_for("moons"), "icy" if icy else "rocky", seed,
        )
        shader = MoonShader(NoiseField(seed), size, icy)
        return self._render(shader, BodyCategory.MOON, None, index, seed, size, {"icy": icy})

    def generate_asteroid(self, index: int, seed: int) -> SpriteAtlas:
        rng = body_rng(seed)
        size = uniform_int(rng, *self.config.asteroid_size_range)
        irregularity = uniform_float(rng, *self.config.asteroid_irregularity)
        logger.info(
            "  asteroid_%03d (%dx%dpx, %d frames, irregularity=%.2f, seed=%d)",
            index, size, size, self.config.frames_for("asteroids"), irregularity, seed,
        )
        shader = AsteroidShader(NoiseField(seed), size, irregularity)
        return self._render(
            shader, BodyCategory.ASTEROID, None, index, seed, size, {"irregularity": round(irregularity, 4)}
        )
