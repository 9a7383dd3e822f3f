"""
Lighting for sphere-shaded bodies.
"""
from .shading import (
    LIGHT_MODELS,
    LightModel,
    asteroid_intensity,
    get_light_model,
    lambert,
    limb_darkening,
    sphere_z,
    surface_intensity,
)

__all__ = [
    "LIGHT_MODELS",
    "LightModel",
    "asteroid_intensity",
    "get_light_model",
    "lambert",
    "limb_darkening",
    "sphere_z",
    "surface_intensity",
]
