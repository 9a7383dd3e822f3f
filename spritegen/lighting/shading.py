"""
Lighting model for sphere-shaded bodies: Lambert diffuse + limb darkening.
One light model per body class; intensity = (ambient + gain * diffuse) * limb.
"""
import math
from dataclasses import dataclass

import numpy as np


@dataclass(frozen=True)
class LightModel:
    direction: tuple[float, float, float]
    ambient: float
    gain: float
    limb_base: float
    limb_gain: float
    limb_power: float  # smaller = softer terminator


# Light directions are not normalized
LIGHT_MODELS: dict[str, LightModel] = {
    "star": LightModel((0.3, -0.5, 0.8), 0.6, 0.4, 0.6, 0.4, 0.3),
    "planet": LightModel((1.0, 0.0, 0.3), 0.15, 0.85, 0.5, 0.5, 0.3),
    "moon": LightModel((1.0, 0.0, 0.5), 0.3, 0.7, 0.4, 0.6, 0.4),
}

# Asteroids have no sphere normal: cosine falloff from a fixed light angle
ASTEROID_LIGHT_ANGLE = math.pi * 0.25
ASTEROID_AMBIENT = 0.4
ASTEROID_GAIN = 0.6


def get_light_model(body: str) -> LightModel:
    """Light model for a body class ('star', 'planet', 'moon'); unknown → planet."""
    return LIGHT_MODELS.get(body, LIGHT_MODELS["planet"])


def sphere_z(dist: np.ndarray, radius: float) -> np.ndarray:
    """Height of the unit-sphere surface above the image plane; 0 at and beyond the rim."""
    d = np.asarray(dist) / radius
    return np.sqrt(np.maximum(0.0, 1.0 - d * d))


def lambert(
    nx: np.ndarray,
    ny: np.ndarray,
    nz: np.ndarray,
    direction: tuple[float, float, float],
) -> np.ndarray:
    lx, ly, lz = direction
    return np.maximum(0.0, nx * lx + ny * ly + nz * lz)


def limb_darkening(z: np.ndarray, base: float, gain: float, power: float) -> np.ndarray:
    return base + gain * np.power(z, power)


def surface_intensity(
    model: LightModel,
    dx: np.ndarray,
    dy: np.ndarray,
    z: np.ndarray,
    radius: float,
) -> np.ndarray:
    """Combined diffuse * limb factor for points on a sphere of `radius`."""
    diffuse = model.ambient + lambert(dx / radius, dy / radius, z, model.direction) * model.gain
    return diffuse * limb_darkening(z, model.limb_base, model.limb_gain, model.limb_power)


def asteroid_intensity(dx: np.ndarray, dy: np.ndarray) -> np.ndarray:
    """May dip below zero on the far side; callers clip the final color."""
    angle = np.arctan2(dy, dx) - ASTEROID_LIGHT_ANGLE
    return ASTEROID_AMBIENT + np.cos(angle) * ASTEROID_GAIN
