"""
Threshold ladders: scalar fields → named palette bands → RGB.
Each ladder is an ordered list of (condition, band) pairs; the first match wins,
so every boundary value resolves to exactly one side.
"""
from dataclasses import dataclass

import numpy as np

from .bodies import PlanetType, SurfaceModel
from .data.palettes import hex_to_rgb
from .noise import NoiseField

# Terran breakpoints
SEA_LEVEL = 0.35
BEACH_TOP = 0.37
MOUNTAIN_LINE = 0.8
SNOW_LINE = 0.88
FOREST_MOISTURE = 0.6

STORM_THRESHOLD = 0.75
STORM_MAX_LATITUDE = 0.5


@dataclass(frozen=True)
class ScalarFields:
    """Per-pixel fields sampled at (tex_u, tex_v). Arrays share one shape."""

    elevation: np.ndarray
    moisture: np.ndarray
    temperature: np.ndarray
    latitude: np.ndarray
    tex_u: np.ndarray
    tex_v: np.ndarray


@dataclass(frozen=True)
class Classification:
    """Band index per pixel (into `names`) and a shade in [0, 1) picking the stop within the band."""

    codes: np.ndarray
    names: tuple[str, ...]
    shade: np.ndarray

    @property
    def labels(self) -> np.ndarray:
        return np.asarray(self.names)[self.codes]


def _ladder(
    rungs: list[tuple[np.ndarray, str]],
    default: str,
    shape: tuple[int, ...],
) -> tuple[np.ndarray, tuple[str, ...]]:
    names: list[str] = []
    for _, name in rungs:
        if name not in names:
            names.append(name)
    if default not in names:
        names.append(default)
    codes = np.select(
        [np.broadcast_to(cond, shape) for cond, _ in rungs],
        [names.index(name) for _, name in rungs],
        default=names.index(default),
    )
    return codes.astype(np.int64), tuple(names)


def _shade_by(codes: np.ndarray, names: tuple[str, ...], drivers: dict[str, np.ndarray]) -> np.ndarray:
    shade = np.zeros(codes.shape)
    for name, driver in drivers.items():
        if name in names:
            mask = codes == names.index(name)
            shade[mask] = np.broadcast_to(driver, codes.shape)[mask]
    return shade


def classify_terran(f: ScalarFields) -> Classification:
    e, m = f.elevation, f.moisture
    depth = SEA_LEVEL - e
    rungs = [
        ((e < SEA_LEVEL) & (depth > 0.15), "deep_ocean"),
        ((e < SEA_LEVEL) & (depth > 0.08), "ocean"),
        (e < SEA_LEVEL, "shallow"),
        (e < BEACH_TOP, "beach"),
        (e > SNOW_LINE, "snow"),
        (e > MOUNTAIN_LINE, "mountain"),
        (m > FOREST_MOISTURE, "forest"),
    ]
    codes, names = _ladder(rungs, "grass", e.shape)
    return Classification(codes, names, _shade_by(codes, names, {"forest": m, "grass": e}))


def classify_desert(f: ScalarFields) -> Classification:
    e = f.elevation
    dunes = np.sin(f.tex_u * 30 + f.tex_v * 20) > 0
    rungs = [
        (e < 0.3, "canyon_deep"),
        (e > 0.75, "rock"),
        (dunes, "sand"),
    ]
    codes, names = _ladder(rungs, "sand_dark", e.shape)
    return Classification(codes, names, np.zeros(e.shape))


def classify_ice(f: ScalarFields) -> Classification:
    e = f.elevation
    rungs = [
        (e < 0.25, "crevasse"),
        (e > 0.8, "snow"),
    ]
    codes, names = _ladder(rungs, "surface", e.shape)
    return Classification(codes, names, _shade_by(codes, names, {"surface": e}))


def classify_lava(f: ScalarFields) -> Classification:
    e = f.elevation
    molten = e < 0.38
    heat = 1 - e / 0.38
    rungs = [
        (molten & (heat > 0.85), "molten_bright"),
        (molten & (heat > 0.6), "molten_hot"),
        (molten & (heat > 0.4), "molten"),
        (molten, "cooling"),
        (e > 0.6, "crust_warm"),
    ]
    codes, names = _ladder(rungs, "crust", e.shape)
    return Classification(codes, names, np.zeros(e.shape))


def classify_ocean(f: ScalarFields) -> Classification:
    depth = 1 - f.elevation
    rungs = [
        (depth > 0.7, "deep"),
        (depth > 0.4, "mid"),
        (depth > 0.15, "surface"),
    ]
    codes, names = _ladder(rungs, "foam", depth.shape)
    return Classification(codes, names, np.zeros(depth.shape))


def classify_jungle(f: ScalarFields) -> Classification:
    e, m = f.elevation, f.moisture
    rungs = [
        (e < 0.3, "river"),
        (m > FOREST_MOISTURE, "canopy"),
    ]
    codes, names = _ladder(rungs, "understory", e.shape)
    return Classification(codes, names, _shade_by(codes, names, {"canopy": e}))


def classify_rocky(f: ScalarFields, palette: dict[str, list[str]]) -> Classification:
    band = "surface" if "surface" in palette else "grass"
    codes = np.zeros(f.elevation.shape, dtype=np.int64)
    return Classification(codes, (band,), np.broadcast_to(f.elevation, codes.shape).copy())


def classify_gas_giant(f: ScalarFields, noise: NoiseField) -> Classification:
    """Latitude bands perturbed by noise; storms override near the equator."""
    u, v, lat = f.tex_u, f.tex_v, f.latitude
    band_noise = noise.fbm(u * 1, v * 8, 0, 6)
    pattern = np.sin(lat * 15 + band_noise * 4)
    turb = noise.turbulence(u * 4, v * 2, 0, 6) * 0.3
    band_value = (pattern + 1) * 0.5 + turb
    storm = noise.fbm(u * 3, v * 3, 50, 5)
    rungs = [
        ((storm > STORM_THRESHOLD) & (np.abs(lat) < STORM_MAX_LATITUDE), "storm"),
        (band_value < 0.25, "band1_dark"),
        (band_value < 0.5, "band1"),
        (band_value < 0.75, "band2"),
    ]
    codes, names = _ladder(rungs, "band2_light", np.shape(band_value))
    shade = np.where(codes == names.index("storm"), 0.0, band_value)
    return Classification(codes, names, shade)


def classify(
    planet_type: PlanetType,
    fields: ScalarFields,
    noise: NoiseField,
) -> Classification:
    model = planet_type.surface_model
    if model is SurfaceModel.TERRAN:
        return classify_terran(fields)
    if model is SurfaceModel.DESERT:
        return classify_desert(fields)
    if model is SurfaceModel.ICE:
        return classify_ice(fields)
    if model is SurfaceModel.LAVA:
        return classify_lava(fields)
    if model is SurfaceModel.OCEAN:
        return classify_ocean(fields)
    if model is SurfaceModel.JUNGLE:
        return classify_jungle(fields)
    if model is SurfaceModel.GAS_GIANT:
        return classify_gas_giant(fields, noise)
    return classify_rocky(fields, planet_type.palette)


def stop_index(shade: np.ndarray, count: int) -> np.ndarray:
    """floor(shade * count) wrapped into the stop list."""
    return np.floor(np.asarray(shade) * count).astype(np.int64) % count


def pick_stops(stops: list[str], shade: np.ndarray) -> np.ndarray:
    """Color per pixel from one ordered stop list → float RGB (..., 3)."""
    table = np.array([hex_to_rgb(s) for s in stops], dtype=np.float64)
    return table[stop_index(shade, len(stops))]


def paint(classification: Classification, palette: dict[str, list[str]]) -> np.ndarray:
    """Classification → float RGB (..., 3) using the body's palette."""
    rgb = np.zeros(classification.codes.shape + (3,))
    for code, name in enumerate(classification.names):
        mask = classification.codes == code
        if not mask.any():
            continue
        rgb[mask] = pick_stops(palette[name], classification.shade[mask])
    return rgb
