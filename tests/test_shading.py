"""
Unit tests for per-body shading and the lighting model: geometry, opacity, looping.
"""
import math
import sys
import unittest
from pathlib import Path

import numpy as np

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


def _grid(size: int):
    from spritegen.procedural.renderer import block_offsets

    return block_offsets(size, 1)


class TestLighting(unittest.TestCase):
    def test_sphere_z(self):
        from spritegen.lighting import sphere_z

        z = sphere_z(np.array([0.0, 5.0, 10.0, 12.0]), 10.0)
        self.assertAlmostEqual(z[0], 1.0)
        self.assertAlmostEqual(z[1], math.sqrt(0.75))
        self.assertEqual(z[2], 0.0)
        self.assertEqual(z[3], 0.0)

    def test_lambert_clamps_back_side(self):
        from spritegen.lighting import lambert

        value = lambert(np.array([-1.0, 1.0]), np.array([0.0, 0.0]), np.array([0.0, 0.0]), (1.0, 0.0, 0.0))
        self.assertEqual(value.tolist(), [0.0, 1.0])

    def test_limb_darkening_softens_edge(self):
        from spritegen.lighting import get_light_model, limb_darkening

        m = get_light_model("planet")
        center = limb_darkening(1.0, m.limb_base, m.limb_gain, m.limb_power)
        edge = limb_darkening(0.0, m.limb_base, m.limb_gain, m.limb_power)
        self.assertAlmostEqual(center, 1.0)
        self.assertAlmostEqual(edge, 0.5)

    def test_unknown_light_model_is_planet(self):
        from spritegen.lighting import LIGHT_MODELS, get_light_model

        self.assertIs(get_light_model("comet"), LIGHT_MODELS["planet"])


class TestTextureCoords(unittest.TestCase):
    """One full rotation shifts tex_u by exactly 2 (seamless planet/moon loop)."""

    def test_full_rotation_shifts_u_by_two(self):
        from spritegen.lighting import sphere_z
        from spritegen.procedural.shading import rotation_angle, texture_coords

        frames = 24
        dx, dy = _grid(40)
        dist = np.hypot(dx, dy)
        inside = dist <= 16
        dx, dy, dist = dx[inside], dy[inside], dist[inside]
        z = sphere_z(dist, 16)
        u0, v0, _ = texture_coords(dx, dy, z, dist, rotation_angle(0, frames))
        u1, v1, _ = texture_coords(dx, dy, z, dist, rotation_angle(frames, frames))
        shift = u1 - u0
        self.assertTrue(np.allclose(shift, 2.0, atol=1e-9))
        self.assertTrue(np.array_equal(v0, v1))

    def test_center_pixel_is_finite(self):
        from spritegen.procedural.shading import texture_coords

        zero = np.array([0.0])
        u, v, lat = texture_coords(zero, zero, np.array([1.0]), zero, 0.0)
        self.assertTrue(np.all(np.isfinite(u)) and np.all(np.isfinite(v)) and np.all(np.isfinite(lat)))


class TestPlanetShader(unittest.TestCase):
    """Opaque disc, translucent halo for atmosphere types, transparent beyond."""

    def _shade(self, planet_type, size=64, frame=0, frames=8, seed=3):
        from spritegen.procedural.bodies import PlanetType
        from spritegen.procedural.noise import NoiseField
        from spritegen.procedural.shading import PlanetShader

        shader = PlanetShader(NoiseField(seed), PlanetType(planet_type), size)
        dx, dy = _grid(size)
        return shader, np.hypot(dx, dy), shader.shade(dx, dy, frame, frames)

    def test_disc_opaque_and_outside_transparent(self):
        for planet_type in ("terran", "rocky", "gas_giant", "lava"):
            shader, dist, rgba = self._shade(planet_type)
            self.assertEqual(rgba.shape, dist.shape + (4,))
            self.assertTrue(np.all(rgba[dist <= shader.radius][:, 3] == 255))
            self.assertTrue(np.all(rgba[dist > shader.outer_radius][:, 3] == 0))
            self.assertTrue(np.all(np.isfinite(rgba)))

    def test_atmosphere_halo(self):
        shader, dist, rgba = self._shade("terran")
        self.assertAlmostEqual(shader.outer_radius, shader.radius * 1.15)
        band = (dist > shader.radius) & (dist < shader.outer_radius)
        self.assertTrue(band.any())
        alpha = rgba[band][:, 3]
        self.assertTrue(np.all(alpha > 0) and np.all(alpha < 255))

    def test_no_halo_without_atmosphere(self):
        shader, dist, rgba = self._shade("desert")
        self.assertEqual(shader.outer_radius, shader.radius)
        self.assertTrue(np.all(rgba[dist > shader.radius][:, 3] == 0))

    def test_same_seed_same_pixels(self):
        _, _, a = self._shade("terran", seed=17, frame=3)
        _, _, b = self._shade("terran", seed=17, frame=3)
        self.assertTrue(np.array_equal(a, b))

    def test_rotation_changes_surface(self):
        _, _, a = self._shade("terran", seed=17, frame=0)
        _, _, b = self._shade("terran", seed=17, frame=2)
        self.assertFalse(np.array_equal(a, b))

    def test_elevation_stays_in_unit_range(self):
        from spritegen.procedural.bodies import PlanetType
        from spritegen.procedural.noise import NoiseField
        from spritegen.procedural.shading import PlanetShader

        shader = PlanetShader(NoiseField(9), PlanetType.TERRAN, 64)
        u = np.linspace(-1.0, 3.0, 500)
        v = np.linspace(-0.5, 0.5, 500)
        fields = shader.sample_fields(u, v, v * math.pi)
        for values in (fields.elevation, fields.moisture, fields.temperature):
            self.assertGreaterEqual(float(values.min()), 0.0)
            self.assertLessEqual(float(values.max()), 1.0)


class TestStarShader(unittest.TestCase):
    def _shader(self, stellar_class="G", size=80, seed=5):
        from spritegen.procedural.bodies import StellarClass
        from spritegen.procedural.noise import NoiseField
        from spritegen.procedural.shading import StarShader

        return StarShader(NoiseField(seed), StellarClass(stellar_class), size)

    def test_surface_opaque_corona_translucent(self):
        shader = self._shader()
        dx, dy = _grid(80)
        dist = np.hypot(dx, dy)
        rgba = shader.shade(dx, dy, 0, 8)
        self.assertTrue(np.all(rgba[dist <= shader.radius][:, 3] == 255))
        corona = (dist > shader.radius) & (dist < shader.outer_radius)
        self.assertTrue(np.any(rgba[corona][:, 3] > 0))
        self.assertTrue(np.all(rgba[dist >= shader.outer_radius][:, 3] == 0))
        self.assertLessEqual(float(rgba[..., :3].max()), 255.0)

    def test_surface_keeps_evolving(self):
        shader = self._shader()
        dx, dy = _grid(80)
        first = shader.shade(dx, dy, 0, 8)
        later = shader.shade(dx, dy, 4, 8)
        self.assertFalse(np.array_equal(first, later))

    def test_brightness_non_negative(self):
        shader = self._shader()
        u = np.linspace(-1, 3, 300)
        v = np.linspace(0, 1, 300)
        b = shader.brightness(u, v, 0.25)
        self.assertGreaterEqual(float(b.min()), 0.0)
        self.assertLessEqual(float(b.max()), 1.6)


class TestMoonShader(unittest.TestCase):
    def test_palette_and_opacity(self):
        from spritegen.procedural.data.palettes import MOON_COLORS, hex_to_rgb
        from spritegen.procedural.noise import NoiseField
        from spritegen.procedural.shading import MoonShader

        for icy in (True, False):
            shader = MoonShader(NoiseField(12), 60, icy)
            self.assertEqual(shader.stops, MOON_COLORS["icy" if icy else "rocky"])
            dx, dy = _grid(60)
            dist = np.hypot(dx, dy)
            rgba = shader.shade(dx, dy, 1, 16)
            inside = dist <= shader.radius
            self.assertTrue(np.all(rgba[inside][:, 3] == 255))
            self.assertTrue(np.all(rgba[~inside][:, 3] == 0))
            # lighting only darkens or mildly brightens palette colors
            brightest = max(max(hex_to_rgb(s)) for s in shader.stops)
            self.assertLessEqual(float(rgba[inside][:, :3].max()), brightest * 1.2)


class TestAsteroidShader(unittest.TestCase):
    """Angle-dependent radius within baseRadius * (1 ± irregularity)."""

    def test_radius_bounds(self):
        from spritegen.procedural.noise import NoiseField
        from spritegen.procedural.shading import AsteroidShader

        for seed, irregularity in ((1, 0.3), (2, 0.45), (3, 0.6)):
            shader = AsteroidShader(NoiseField(seed), 200, irregularity)
            angles = np.linspace(-4 * math.pi, 4 * math.pi, 2000)
            radii = shader.radius_at(angles)
            self.assertGreaterEqual(float(radii.min()), shader.base_radius * (1 - irregularity))
            self.assertLessEqual(float(radii.max()), shader.base_radius * (1 + irregularity))
            self.assertLessEqual(float(radii.max()), shader.outer_radius)

    def test_radius_is_irregular(self):
        from spritegen.procedural.noise import NoiseField
        from spritegen.procedural.shading import AsteroidShader

        shader = AsteroidShader(NoiseField(8), 200, 0.5)
        radii = shader.radius_at(np.linspace(0, 2 * math.pi, 360))
        self.assertGreater(float(radii.max() - radii.min()), 0.0)

    def test_silhouette_matches_radius(self):
        from spritegen.procedural.noise import NoiseField
        from spritegen.procedural.shading import AsteroidShader

        shader = AsteroidShader(NoiseField(4), 60, 0.4)
        dx, dy = _grid(60)
        dist = np.hypot(dx, dy)
        rgba = shader.shade(dx, dy, 0, 8)
        inside = dist <= shader.radius_at(np.arctan2(dy, dx))
        self.assertTrue(np.all(rgba[inside][:, 3] == 255))
        self.assertTrue(np.all(rgba[~inside][:, 3] == 0))


if __name__ == "__main__":
    unittest.main()
