"""
Closed sets of body variants. Each variant carries its palette and surface model,
so classification never depends on runtime string matching.
"""
import logging
from enum import Enum

from .data.palettes import DEFAULT_PLANET_PALETTE, PLANET_COLORS, STAR_COLORS, hex_to_rgb

logger = logging.getLogger(__name__)


class BodyCategory(str, Enum):
    STAR = "star"
    PLANET = "planet"
    MOON = "moon"
    ASTEROID = "asteroid"

    @property
    def directory(self) -> str:
        return f"{self.value}s"


class StellarClass(str, Enum):
    O = "O"
    B = "B"
    A = "A"
    F = "F"
    G = "G"
    K = "K"
    M = "M"
    BROWN_DWARF = "BrownDwarf"
    WHITE_DWARF = "WhiteDwarf"
    NEUTRON_STAR = "NeutronStar"
    PULSAR = "Pulsar"
    RED_GIANT = "RedGiant"
    BLUE_GIANT = "BlueGiant"
    RED_SUPER_GIANT = "RedSuperGiant"
    BLUE_SUPER_GIANT = "BlueSuperGiant"

    @classmethod
    def from_key(cls, key: str) -> "StellarClass":
        """Resolve a class key; unknown keys fall back to G."""
        try:
            return cls(key)
        except ValueError:
            logger.warning("Unknown stellar class %r, using G", key)
            return cls.G

    @property
    def colors(self) -> tuple[tuple[int, int, int], tuple[int, int, int], tuple[int, int, int]]:
        """(base, bright, glow) as RGB."""
        c = STAR_COLORS[self.value]
        return hex_to_rgb(c["base"]), hex_to_rgb(c["bright"]), hex_to_rgb(c["glow"])


class SurfaceModel(Enum):
    """Which threshold ladder classifies a planet's scalar fields."""

    TERRAN = "terran"
    DESERT = "desert"
    ICE = "ice"
    LAVA = "lava"
    OCEAN = "ocean"
    JUNGLE = "jungle"
    GAS_GIANT = "gas_giant"
    ROCKY = "rocky"


_ATMOSPHERE_TYPES = frozenset({"terran", "ocean", "jungle", "super_earth"})


class PlanetType(str, Enum):
    TERRAN = "terran"
    ROCKY = "rocky"
    DESERT = "desert"
    ICE = "ice"
    FROZEN = "frozen"
    TUNDRA = "tundra"
    LAVA = "lava"
    VOLCANIC = "volcanic"
    OCEAN = "ocean"
    CARBON = "carbon"
    CRYSTAL = "crystal"
    METAL = "metal"
    EYEBALL = "eyeball"
    TIDALLY_LOCKED = "tidally_locked"
    RADIOACTIVE = "radioactive"
    SUPER_EARTH = "super_earth"
    JUNGLE = "jungle"
    GAS_GIANT = "gas_giant"

    @classmethod
    def from_key(cls, key: str) -> "PlanetType":
        """Resolve a type key; unknown keys fall back to terran."""
        try:
            return cls(key)
        except ValueError:
            logger.warning("Unknown planet type %r, using terran", key)
            return cls.TERRAN

    @property
    def palette(self) -> dict[str, list[str]]:
        return _PLANET_PALETTES[self]

    @property
    def surface_model(self) -> SurfaceModel:
        try:
            return SurfaceModel(self.value)
        except ValueError:
            return SurfaceModel.ROCKY

    @property
    def has_atmosphere(self) -> bool:
        return self.value in _ATMOSPHERE_TYPES


# Bound once: types without a dedicated palette use the default one
_PLANET_PALETTES: dict[PlanetType, dict[str, list[str]]] = {
    t: PLANET_COLORS.get(t.value, PLANET_COLORS[DEFAULT_PLANET_PALETTE]) for t in PlanetType
}
