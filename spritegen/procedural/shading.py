"""
Per-body shading: block-center offsets (dx, dy) + frame → RGBA.
Each shader is a pure function of its noise seed, the offsets and the frame index;
alpha is returned on the 0-255 scale, colors are unclipped floats.
"""
import math
from abc import ABC, abstractmethod

import numpy as np

from ..lighting import asteroid_intensity, get_light_model, sphere_z, surface_intensity
from .bodies import PlanetType, StellarClass
from .classify import ScalarFields, classify, paint, pick_stops
from .data.palettes import ASTEROID_COLORS, ATMOSPHERE_COLOR, MOON_COLORS, hex_to_rgb
from .noise import NoiseField

STAR_RADIUS = 0.38
PLANET_RADIUS = 0.42
MOON_RADIUS = 0.45
ASTEROID_RADIUS = 0.4

CORONA_EXTENT = 2.5
ATMOSPHERE_EXTENT = 1.15

CLOUD_THRESHOLD = 0.6
CORONAL_HOLE_THRESHOLD = 0.25
CME_THRESHOLD = 0.8
STAR_TURBULENCE_WEIGHT = 0.1
ELEVATION_CONTRAST = 5.0


def rotation_angle(frame: int, frame_count: int) -> float:
    """Body rotation for a frame: one full turn across the sequence."""
    return 2 * math.pi * frame / frame_count


def texture_coords(
    dx: np.ndarray,
    dy: np.ndarray,
    z: np.ndarray,
    dist: np.ndarray,
    rotation: float,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Spherical texture coordinates for a rotating globe.
    Returns (tex_u, tex_v, latitude); tex_u advances by 2 per full rotation.
    """
    theta = np.arctan2(dx, z) + rotation
    phi = np.arcsin(np.clip(dy / np.maximum(1.0, dist), -1.0, 1.0))
    return theta / math.pi, phi / math.pi, phi


def _with_alpha(rgb: np.ndarray, alpha: np.ndarray | float) -> np.ndarray:
    out = np.empty(rgb.shape[:-1] + (4,))
    out[..., :3] = rgb
    out[..., 3] = alpha
    return out


class BodyShader(ABC):
    """Shades one body. Subclasses set `radius` (pixels) and implement `shade`."""

    radius: float

    @property
    def outer_radius(self) -> float:
        """Beyond this distance from center every pixel is transparent."""
        return self.radius

    @abstractmethod
    def shade(self, dx: np.ndarray, dy: np.ndarray, frame: int, frame_count: int) -> np.ndarray:
        """RGBA (..., 4) for offsets (dx, dy) from the body center."""
        ...


class StarShader(BodyShader):
    """
    Boiling star surface with coronal holes, CME flares and a turbulent corona.
    Time runs 0 → (n-1)/n across the frames and does not wrap: the surface keeps
    evolving instead of looping.
    """

    def __init__(self, noise: NoiseField, stellar_class: StellarClass, size: int):
        self.noise = noise
        self.stellar_class = stellar_class
        self.radius = size * STAR_RADIUS
        base, bright, glow = stellar_class.colors
        self._base = np.array(base, dtype=np.float64)
        self._bright = np.array(bright, dtype=np.float64)
        self._glow = np.array(glow, dtype=np.float64)

    @property
    def outer_radius(self) -> float:
        return self.radius * CORONA_EXTENT

    def _corona(self, dx: np.ndarray, dy: np.ndarray, dist: np.ndarray, time: float) -> np.ndarray:
        r = self.radius
        falloff = (dist - r) / (r * (CORONA_EXTENT - 1))
        intensity = (1 - np.minimum(1.0, falloff)) ** 3
        turb = self.noise.turbulence(dx * 0.015, dy * 0.015, time * 8, 6)
        intensity = intensity * (0.7 + turb * 0.6)
        color = self._glow + (self._bright - self._glow) * 0.5
        rgb = np.broadcast_to(color, dist.shape + (3,))
        return _with_alpha(rgb, intensity * 200)

    def brightness(self, tex_u: np.ndarray, tex_v: np.ndarray, time: float) -> np.ndarray:
        """Surface brightness before lighting: cells, holes and flares."""
        n = self.noise
        big = n.fbm(tex_u * 2, tex_v * 2, time * 4, 8)
        medium = n.fbm(tex_u * 6, tex_v * 6, time * 6, 6)
        fine = n.fbm(tex_u * 12, tex_v * 12, time * 8, 4)
        turb = n.turbulence(tex_u * 8, tex_v * 8, time * 10, 6)
        holes = n.fbm(tex_u * 3, tex_v * 3, time * 2, 5)
        cme = n.fbm(tex_u * 4 + time * 20, tex_v * 4, time * 15, 4)

        b = 0.4 + big * 0.25 + medium * 0.2 + fine * 0.15 + turb * STAR_TURBULENCE_WEIGHT
        b = np.where(holes < CORONAL_HOLE_THRESHOLD, b * 0.3, b)
        b = np.where(cme > CME_THRESHOLD, np.minimum(1.5, b + (cme - CME_THRESHOLD) * 5), b)
        return b

    def _surface(self, dx: np.ndarray, dy: np.ndarray, dist: np.ndarray, time: float) -> np.ndarray:
        r = self.radius
        z = sphere_z(dist, r)
        theta = np.arctan2(dy, dx) + time * 2 * math.pi
        phi = np.arccos(np.clip(dy / np.maximum(1.0, dist), -1.0, 1.0))
        tex_u, tex_v = theta / math.pi, phi / math.pi

        b = self.brightness(tex_u, tex_v, time)
        b = b * surface_intensity(get_light_model("star"), dx, dy, z, r)
        core = np.maximum(0.0, 1 - (dist / r) * 1.2) ** 2 * 0.6

        mix = np.minimum(1.0, b)[..., None]
        rgb = self._base * (1 - mix) + self._bright * mix + self._bright * core[..., None]
        rgb = np.minimum(255.0, rgb * 1.3)
        return _with_alpha(rgb, 255.0)

    def shade(self, dx: np.ndarray, dy: np.ndarray, frame: int, frame_count: int) -> np.ndarray:
        time = frame / frame_count
        dist = np.hypot(dx, dy)
        out = np.zeros(dist.shape + (4,))
        corona = (dist > self.radius) & (dist < self.outer_radius)
        if corona.any():
            out[corona] = self._corona(dx[corona], dy[corona], dist[corona], time)
        inside = dist <= self.radius
        if inside.any():
            out[inside] = self._surface(dx[inside], dy[inside], dist[inside], time)
        return out


class PlanetShader(BodyShader):
    """Rotating planet: classified terrain or gas bands, clouds, atmosphere halo."""

    def __init__(self, noise: NoiseField, planet_type: PlanetType, size: int):
        self.noise = noise
        self.planet_type = planet_type
        self.palette = planet_type.palette
        self.radius = size * PLANET_RADIUS

    @property
    def outer_radius(self) -> float:
        if self.planet_type.has_atmosphere:
            return self.radius * ATMOSPHERE_EXTENT
        return self.radius

    def sample_fields(self, tex_u: np.ndarray, tex_v: np.ndarray, latitude: np.ndarray) -> ScalarFields:
        n = self.noise
        large = n.fbm(tex_u * 2, tex_v * 2, 0, 8)
        medium = n.fbm(tex_u * 6, tex_v * 6, 0, 8)
        small = n.fbm(tex_u * 16, tex_v * 16, 0, 6)
        micro = n.fbm(tex_u * 32, tex_v * 32, 0, 4)
        mix = large * 0.5 + medium * 0.25 + small * 0.15 + micro * 0.1
        # The octave mix clusters tightly around 0.5; stretch it so every ladder band is reachable
        elevation = np.clip(0.5 + (mix - 0.5) * ELEVATION_CONTRAST, 0.0, 1.0)
        moisture = n.fbm(tex_u * 3, tex_v * 3, 100, 8)
        temperature = (1 - np.abs(latitude) * 0.7) * (1 - elevation * 0.2)
        return ScalarFields(
            elevation=np.asarray(elevation),
            moisture=np.asarray(moisture),
            temperature=np.asarray(temperature),
            latitude=np.asarray(latitude),
            tex_u=np.asarray(tex_u),
            tex_v=np.asarray(tex_v),
        )

    def _halo(self, dist: np.ndarray) -> np.ndarray:
        falloff = (dist - self.radius) / (self.radius * (ATMOSPHERE_EXTENT - 1))
        intensity = (1 - falloff) ** 2
        rgb = np.asarray(ATMOSPHERE_COLOR, dtype=np.float64) * intensity[..., None]
        return _with_alpha(rgb, intensity * 150)

    def _clouds(self, rgb: np.ndarray, tex_u: np.ndarray, tex_v: np.ndarray, rotation: float) -> np.ndarray:
        cloud = self.noise.fbm(tex_u * 5 + rotation * 0.2, tex_v * 5, 200, 6)
        density = np.where(cloud > CLOUD_THRESHOLD, (cloud - CLOUD_THRESHOLD) * 2.5, 0.0)[..., None]
        cloud_rgb = np.array(hex_to_rgb(self.palette.get("cloud", ["#ffffff"])[0]), dtype=np.float64)
        return rgb * (1 - density * 0.9) + cloud_rgb * density

    def _surface(self, dx: np.ndarray, dy: np.ndarray, dist: np.ndarray, rotation: float) -> np.ndarray:
        r = self.radius
        z = sphere_z(dist, r)
        tex_u, tex_v, latitude = texture_coords(dx, dy, z, dist, rotation)
        fields = self.sample_fields(tex_u, tex_v, latitude)
        rgb = paint(classify(self.planet_type, fields, self.noise), self.palette)
        if self.planet_type.has_atmosphere:
            rgb = self._clouds(rgb, tex_u, tex_v, rotation)
        rgb = rgb * surface_intensity(get_light_model("planet"), dx, dy, z, r)[..., None]
        return _with_alpha(rgb, 255.0)

    def shade(self, dx: np.ndarray, dy: np.ndarray, frame: int, frame_count: int) -> np.ndarray:
        rotation = rotation_angle(frame, frame_count)
        dist = np.hypot(dx, dy)
        out = np.zeros(dist.shape + (4,))
        if self.planet_type.has_atmosphere:
            halo = (dist > self.radius) & (dist < self.outer_radius)
            if halo.any():
                out[halo] = self._halo(dist[halo])
        inside = dist <= self.radius
        if inside.any():
            out[inside] = self._surface(dx[inside], dy[inside], dist[inside], rotation)
        return out


class MoonShader(BodyShader):
    """Cratered moon; rocky or icy palette fixed for the body's lifetime."""

    def __init__(self, noise: NoiseField, size: int, icy: bool):
        self.noise = noise
        self.icy = icy
        self.stops = MOON_COLORS["icy" if icy else "rocky"]
        self.radius = size * MOON_RADIUS

    def surface_value(self, tex_u: np.ndarray, tex_v: np.ndarray) -> np.ndarray:
        n = self.noise
        elevation = n.fbm(tex_u * 4, tex_v * 4, 0, 8)
        craters = n.ridged(tex_u * 8, tex_v * 8, 0, 6)
        detail = n.fbm(tex_u * 16, tex_v * 16, 0, 4)
        return elevation * 0.6 + craters * 0.3 + detail * 0.1

    def shade(self, dx: np.ndarray, dy: np.ndarray, frame: int, frame_count: int) -> np.ndarray:
        rotation = rotation_angle(frame, frame_count)
        dist = np.hypot(dx, dy)
        out = np.zeros(dist.shape + (4,))
        inside = dist <= self.radius
        if not inside.any():
            return out
        idx, idy, idist = dx[inside], dy[inside], dist[inside]
        z = sphere_z(idist, self.radius)
        tex_u, tex_v, _ = texture_coords(idx, idy, z, idist, rotation)
        rgb = pick_stops(self.stops, self.surface_value(tex_u, tex_v))
        rgb = rgb * surface_intensity(get_light_model("moon"), idx, idy, z, self.radius)[..., None]
        out[inside] = _with_alpha(rgb, 255.0)
        return out


class AsteroidShader(BodyShader):
    """
    Irregular rock. The silhouette radius depends on the angle:
    base * (1 + (fbm(angle) - 0.5) * irregularity), rotating with the frame.
    """

    def __init__(self, noise: NoiseField, size: int, irregularity: float):
        self.noise = noise
        self.irregularity = irregularity
        self.base_radius = size * ASTEROID_RADIUS
        self.radius = self.base_radius

    @property
    def outer_radius(self) -> float:
        return self.base_radius * (1 + 0.5 * self.irregularity)

    def radius_at(self, angle: np.ndarray | float) -> np.ndarray | float:
        shape = self.noise.fbm(np.cos(angle) * 3, np.sin(angle) * 3, 0, 5)
        return self.base_radius * (1 + (shape - 0.5) * self.irregularity)

    def shade(self, dx: np.ndarray, dy: np.ndarray, frame: int, frame_count: int) -> np.ndarray:
        rotation = rotation_angle(frame, frame_count)
        dist = np.hypot(dx, dy)
        out = np.zeros(dist.shape + (4,))
        inside = dist <= self.radius_at(np.arctan2(dy, dx) + rotation)
        if not inside.any():
            return out
        idx, idy = dx[inside], dy[inside]
        surface = self.noise.fbm(idx * 0.1, idy * 0.1, rotation, 6)
        craters = self.noise.ridged(idx * 0.2, idy * 0.2, 0, 4)
        rgb = pick_stops(ASTEROID_COLORS, surface * 0.7 + craters * 0.3)
        rgb = rgb * asteroid_intensity(idx, idy)[..., None]
        out[inside] = _with_alpha(rgb, 255.0)
        return out
