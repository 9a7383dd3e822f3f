# Procedural sprite engine: noise → classification → shading → atlas

from .bodies import BodyCategory, PlanetType, StellarClass, SurfaceModel
from .generator import SpriteAtlas, SpriteGenerator, sprite_filename
from .noise import NoiseField, build_permutation
from .renderer import render_atlas, render_frame, split_frames

__all__ = [
    "BodyCategory",
    "NoiseField",
    "PlanetType",
    "SpriteAtlas",
    "SpriteGenerator",
    "StellarClass",
    "SurfaceModel",
    "build_permutation",
    "render_atlas",
    "render_frame",
    "split_frames",
    "sprite_filename",
]
