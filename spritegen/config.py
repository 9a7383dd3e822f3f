"""
Load and expose app config (YAML). The loaded dict is turned into an immutable
SpriteConfig that every generation call receives explicitly.
"""
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

import yaml


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def load_config(config_path: Path | None = None) -> dict[str, Any]:
    """Load config from YAML. Path is optional; defaults to config/default.yaml."""
    if config_path is None:
        config_path = _project_root() / "config" / "default.yaml"
    path = Path(config_path)
    if not path.exists():
        return _defaults()
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    return _merge(_defaults(), data)


def _merge(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    out = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(out.get(key), dict):
            out[key] = _merge(out[key], value)
        else:
            out[key] = value
    return out


STELLAR_CLASSES = [
    "O", "B", "A", "F", "G", "K", "M",
    "BrownDwarf", "WhiteDwarf", "NeutronStar", "Pulsar",
    "RedGiant", "BlueGiant", "RedSuperGiant", "BlueSuperGiant",
]

PLANET_TYPES = [
    "terran", "rocky", "desert", "ice", "frozen", "tundra",
    "lava", "volcanic", "ocean", "carbon", "crystal", "metal",
    "eyeball", "tidally_locked", "radioactive", "super_earth",
    "jungle", "gas_giant",
]


def _defaults() -> dict[str, Any]:
    return {
        "stellar_classes": list(STELLAR_CLASSES),
        "planet_types": list(PLANET_TYPES),
        "sizes": {
            "stars": {
                "O": 1400, "B": 1300, "A": 1100, "F": 1200, "G": 1200,
                "K": 900, "M": 600, "BrownDwarf": 600, "WhiteDwarf": 600,
                "NeutronStar": 350, "Pulsar": 400,
                "RedGiant": 1500, "BlueGiant": 1500,
                "RedSuperGiant": 1600, "BlueSuperGiant": 1500,
            },
            "planets": {
                "terran": 800, "rocky": 600, "desert": 700,
                "ice": 650, "frozen": 600, "tundra": 650,
                "lava": 650, "volcanic": 700, "ocean": 850,
                "carbon": 600, "crystal": 600, "metal": 550,
                "eyeball": 650, "tidally_locked": 650,
                "radioactive": 600, "super_earth": 1100,
                "jungle": 850, "gas_giant": 1400,
            },
            "moons": {"min": 250, "max": 400},
            "asteroids": {"min": 180, "max": 350},
        },
        # Stars boil (non-looping), planets/moons/asteroids do one full rotation
        "frames": {"stars": 8, "planets": 24, "moons": 16, "asteroids": 8},
        "pixel_size": {"stars": 2, "planets": 2, "moons": 2, "asteroids": 2},
        "counts": {"planets_per_type": 3, "moons": 5, "asteroids": 8},
        "asteroid_irregularity": [0.3, 0.6],
        "output": {
            "dir": "output/sprites",
            "manifest": True,
            "preview": False,
            "preview_fps": 12,
        },
    }


CATEGORIES = ("stars", "planets", "moons", "asteroids")


def _frozen(mapping: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(mapping))


@dataclass(frozen=True)
class SpriteConfig:
    """Immutable generation settings. Build with `from_dict` / `build_sprite_config`."""

    stellar_classes: tuple[str, ...]
    planet_types: tuple[str, ...]
    star_sizes: Mapping[str, int]
    planet_sizes: Mapping[str, int]
    moon_size_range: tuple[int, int]
    asteroid_size_range: tuple[int, int]
    frames: Mapping[str, int]
    pixel_size: Mapping[str, int]
    planets_per_type: int
    moon_count: int
    asteroid_count: int
    asteroid_irregularity: tuple[float, float]
    output_dir: Path
    write_manifest: bool = True
    write_preview: bool = False
    preview_fps: int = 12
    default_star_size: int = field(default=1200, repr=False)
    default_planet_size: int = field(default=800, repr=False)

    def star_size(self, stellar_class: str) -> int:
        return int(self.star_sizes.get(stellar_class, self.default_star_size))

    def planet_size(self, planet_type: str) -> int:
        return int(self.planet_sizes.get(planet_type, self.default_planet_size))

    def frames_for(self, category: str) -> int:
        return int(self.frames[category])

    def pixel_size_for(self, category: str) -> int:
        return int(self.pixel_size[category])

    @classmethod
    def from_dict(cls, config: Mapping[str, Any]) -> "SpriteConfig":
        """Validate the merged config dict and freeze it."""
        cfg = _merge(_defaults(), config)
        sizes = cfg["sizes"]
        frames = {k: int(v) for k, v in cfg["frames"].items()}
        pixel_size = {k: int(v) for k, v in cfg["pixel_size"].items()}
        for category in CATEGORIES:
            if frames.get(category, 0) <= 0:
                raise ValueError(f"frames.{category} must be a positive integer")
            if pixel_size.get(category, 0) <= 0:
                raise ValueError(f"pixel_size.{category} must be a positive integer")

        star_sizes = {k: int(v) for k, v in sizes["stars"].items()}
        planet_sizes = {k: int(v) for k, v in sizes["planets"].items()}
        for name, value in {**star_sizes, **planet_sizes}.items():
            if value <= 0:
                raise ValueError(f"size for {name!r} must be positive (got {value})")

        moon_range = _size_range(sizes["moons"], "moons")
        asteroid_range = _size_range(sizes["asteroids"], "asteroids")

        lo, hi = (float(x) for x in cfg["asteroid_irregularity"])
        if not 0 <= lo <= hi < 1:
            raise ValueError(f"asteroid_irregularity must satisfy 0 <= min <= max < 1 (got {lo}, {hi})")

        counts = cfg["counts"]
        out = cfg["output"]
        output_dir = Path(out.get("dir", "output/sprites"))
        if not output_dir.is_absolute():
            output_dir = _project_root() / output_dir
        return cls(
            stellar_classes=tuple(cfg["stellar_classes"]),
            planet_types=tuple(cfg["planet_types"]),
            star_sizes=_frozen(star_sizes),
            planet_sizes=_frozen(planet_sizes),
            moon_size_range=moon_range,
            asteroid_size_range=asteroid_range,
            frames=_frozen(frames),
            pixel_size=_frozen(pixel_size),
            planets_per_type=max(0, int(counts.get("planets_per_type", 3))),
            moon_count=max(0, int(counts.get("moons", 5))),
            asteroid_count=max(0, int(counts.get("asteroids", 8))),
            asteroid_irregularity=(lo, hi),
            output_dir=output_dir,
            write_manifest=bool(out.get("manifest", True)),
            write_preview=bool(out.get("preview", False)),
            preview_fps=max(1, int(out.get("preview_fps", 12))),
        )


def _size_range(entry: Mapping[str, Any], name: str) -> tuple[int, int]:
    lo, hi = int(entry["min"]), int(entry["max"])
    if lo <= 0 or hi < lo:
        raise ValueError(f"sizes.{name} needs 0 < min <= max (got {lo}, {hi})")
    return lo, hi


def build_sprite_config(
    config: Mapping[str, Any] | None = None,
    *,
    overrides: Mapping[str, Any] | None = None,
) -> SpriteConfig:
    """Loaded dict (or defaults) + optional nested overrides → SpriteConfig."""
    base = dict(config) if config is not None else load_config()
    if overrides:
        base = _merge(base, overrides)
    return SpriteConfig.from_dict(base)

