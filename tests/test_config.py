"""
Tests for config loading (YAML + defaults) and the immutable SpriteConfig.
"""
import sys
import tempfile
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class TestLoadConfig(unittest.TestCase):
    def test_shipped_yaml_matches_defaults(self):
        from spritegen.config import _defaults, load_config

        self.assertEqual(load_config(), _defaults())

    def test_missing_file_gives_defaults(self):
        from spritegen.config import _defaults, load_config

        self.assertEqual(load_config(ROOT / "config" / "does_not_exist.yaml"), _defaults())

    def test_partial_yaml_is_merged(self):
        from spritegen.config import load_config

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "custom.yaml"
            path.write_text("sizes:\n  planets:\n    terran: 128\nframes:\n  planets: 6\n", encoding="utf-8")
            cfg = load_config(path)
        self.assertEqual(cfg["sizes"]["planets"]["terran"], 128)
        self.assertEqual(cfg["sizes"]["planets"]["ocean"], 850)
        self.assertEqual(cfg["frames"]["planets"], 6)
        self.assertEqual(cfg["frames"]["stars"], 8)

    def test_empty_yaml(self):
        from spritegen.config import _defaults, load_config

        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "empty.yaml"
            path.write_text("", encoding="utf-8")
            self.assertEqual(load_config(path), _defaults())


class TestSpriteConfig(unittest.TestCase):
    def test_defaults(self):
        from spritegen.config import CATEGORIES, build_sprite_config

        cfg = build_sprite_config({})
        self.assertEqual(len(cfg.stellar_classes), 15)
        self.assertEqual(len(cfg.planet_types), 18)
        self.assertEqual(cfg.planet_size("terran"), 800)
        self.assertEqual(cfg.star_size("NeutronStar"), 350)
        self.assertEqual([cfg.frames_for(c) for c in CATEGORIES], [8, 24, 16, 8])
        self.assertEqual(cfg.moon_size_range, (250, 400))
        self.assertEqual(cfg.asteroid_irregularity, (0.3, 0.6))
        self.assertTrue(cfg.output_dir.is_absolute())
        self.assertTrue(cfg.write_manifest)
        self.assertFalse(cfg.write_preview)

    def test_overrides_are_nested(self):
        from spritegen.config import build_sprite_config

        cfg = build_sprite_config({}, overrides={"pixel_size": {"stars": 4}, "counts": {"moons": 1}})
        self.assertEqual(cfg.pixel_size_for("stars"), 4)
        self.assertEqual(cfg.pixel_size_for("planets"), 2)
        self.assertEqual(cfg.moon_count, 1)
        self.assertEqual(cfg.asteroid_count, 8)

    def test_absolute_output_dir_kept(self):
        from spritegen.config import build_sprite_config

        with tempfile.TemporaryDirectory() as tmp:
            cfg = build_sprite_config({}, overrides={"output": {"dir": tmp}})
            self.assertEqual(cfg.output_dir, Path(tmp))

    def test_immutable(self):
        from dataclasses import FrozenInstanceError

        from spritegen.config import build_sprite_config

        cfg = build_sprite_config({})
        with self.assertRaises(FrozenInstanceError):
            cfg.moon_count = 3
        with self.assertRaises(TypeError):
            cfg.frames["stars"] = 1
        with self.assertRaises(TypeError):
            cfg.planet_sizes["terran"] = 1

    def test_invalid_values_rejected(self):
        from spritegen.config import build_sprite_config

        bad = [
            {"frames": {"planets": 0}},
            {"pixel_size": {"moons": -1}},
            {"sizes": {"planets": {"terran": 0}}},
            {"sizes": {"moons": {"min": 300, "max": 200}}},
            {"sizes": {"asteroids": {"min": 0, "max": 10}}},
            {"asteroid_irregularity": [0.5, 0.2]},
            {"asteroid_irregularity": [0.2, 1.0]},
        ]
        for overrides in bad:
            with self.assertRaises(ValueError, msg=str(overrides)):
                build_sprite_config({}, overrides=overrides)


class TestSeeds(unittest.TestCase):
    """Per-body seed derivation and attribute draws."""

    def test_derived_seeds(self):
        import hashlib

        from spritegen.random_utils import asteroid_seed, body_seed, moon_seed, planet_seed, star_seed

        expected = int.from_bytes(hashlib.sha256(b"7:planet:ocean:1").digest()[:4], "big")
        self.assertEqual(planet_seed(7, "ocean", 1), expected)
        self.assertEqual(star_seed(7, "G"), body_seed(7, "star", "G"))
        self.assertEqual(moon_seed(7, 4), body_seed(7, "moon", index=4))
        self.assertEqual(asteroid_seed(7, 2), body_seed(7, "asteroid", None, 2))
        for seed in (star_seed(7, "G"), moon_seed(7, 4), asteroid_seed(7, 2)):
            self.assertTrue(0 <= seed <= 0xFFFFFFFF)

    def test_same_index_in_different_categories_differs(self):
        from spritegen.random_utils import asteroid_seed, moon_seed, planet_seed, star_seed

        for base in (0, 5000, 999_999):
            seeds = [
                star_seed(base, "O"),
                planet_seed(base, "terran", 0),
                planet_seed(base, "rocky", 0),
                moon_seed(base, 0),
                asteroid_seed(base, 0),
            ]
            self.assertEqual(len(set(seeds)), len(seeds))

    def test_base_changes_every_seed(self):
        from spritegen.random_utils import moon_seed, planet_seed

        self.assertNotEqual(moon_seed(1, 0), moon_seed(2, 0))
        self.assertNotEqual(planet_seed(1, "terran", 3), planet_seed(2, "terran", 3))

    def test_draw_seed_range(self):
        from spritegen.random_utils import MAX_BASE_SEED, draw_seed

        for _ in range(20):
            self.assertTrue(0 <= draw_seed() < MAX_BASE_SEED)

    def test_body_rng_reproducible(self):
        from spritegen.random_utils import body_rng, uniform_float, uniform_int

        a, b = body_rng(99), body_rng(99)
        self.assertEqual(uniform_int(a, 10, 20), uniform_int(b, 10, 20))
        self.assertEqual(uniform_float(a, 0.3, 0.6), uniform_float(b, 0.3, 0.6))
        self.assertEqual(uniform_int(body_rng(1), 5, 5), 5)


if __name__ == "__main__":
    unittest.main()
