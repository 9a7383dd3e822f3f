"""
Seeded 3D gradient noise and its fractal combinators (fbm, turbulence, ridged).
Every function is vectorized: pass floats or numpy arrays (broadcast together).
Scalar input returns a plain float.
"""
from dataclasses import dataclass, field
from typing import Any

import numpy as np

_LCG_MUL = 1664525
_LCG_INC = 1013904223
_MASK32 = 0xFFFFFFFF


def build_permutation(seed: int) -> np.ndarray:
    """
    Seed → 512-entry doubled permutation of 0..255.
    Fisher-Yates shuffle driven by a 32-bit linear congruential generator.
    """
    p = list(range(256))
    rng = seed & _MASK32
    for i in range(255, 0, -1):
        rng = (rng * _LCG_MUL + _LCG_INC) & _MASK32
        j = rng % (i + 1)
        p[i], p[j] = p[j], p[i]
    perm = np.array(p + p, dtype=np.int64)
    perm.flags.writeable = False
    return perm


def _fade(t: np.ndarray) -> np.ndarray:
    return t * t * t * (t * (t * 6 - 15) + 10)


def _lerp(a: np.ndarray, b: np.ndarray, t: np.ndarray) -> np.ndarray:
    return a + t * (b - a)


def _grad(h: np.ndarray, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
    h = h & 15
    u = np.where(h < 8, x, y)
    v = np.where(h < 4, y, np.where((h == 12) | (h == 14), x, z))
    return np.where(h & 1, -u, u) + np.where(h & 2, -v, v)


def _out(value: np.ndarray) -> Any:
    return float(value) if value.ndim == 0 else value


def _check_octaves(octaves: int) -> None:
    if octaves < 1:
        raise ValueError(f"octaves must be >= 1 (got {octaves})")


@dataclass(frozen=True)
class NoiseField:
    """
    One body's noise source. Immutable: the permutation is derived from the seed
    once and never changes, so outputs are a pure function of (seed, x, y, z).
    """

    seed: int
    perm: np.ndarray = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "perm", build_permutation(self.seed))

    def _noise(self, x: np.ndarray, y: np.ndarray, z: np.ndarray) -> np.ndarray:
        p = self.perm
        fx, fy, fz = np.floor(x), np.floor(y), np.floor(z)
        X = fx.astype(np.int64) & 255
        Y = fy.astype(np.int64) & 255
        Z = fz.astype(np.int64) & 255
        x, y, z = x - fx, y - fy, z - fz
        u, v, w = _fade(x), _fade(y), _fade(z)

        A = p[X] + Y
        AA = p[A] + Z
        AB = p[A + 1] + Z
        B = p[X + 1] + Y
        BA = p[B] + Z
        BB = p[B + 1] + Z

        value = _lerp(
            _lerp(
                _lerp(_grad(p[AA], x, y, z), _grad(p[BA], x - 1, y, z), u),
                _lerp(_grad(p[AB], x, y - 1, z), _grad(p[BB], x - 1, y - 1, z), u),
                v,
            ),
            _lerp(
                _lerp(_grad(p[AA + 1], x, y, z - 1), _grad(p[BA + 1], x - 1, y, z - 1), u),
                _lerp(_grad(p[AB + 1], x, y - 1, z - 1), _grad(p[BB + 1], x - 1, y - 1, z - 1), u),
                v,
            ),
            w,
        )
        return np.clip(value, -1.0, 1.0)

    @staticmethod
    def _coords(x: Any, y: Any, z: Any) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
        return np.broadcast_arrays(
            np.asarray(x, dtype=np.float64),
            np.asarray(y, dtype=np.float64),
            np.asarray(z, dtype=np.float64),
        )

    def noise(self, x: Any, y: Any, z: Any) -> Any:
        """Gradient noise in [-1, 1]."""
        x, y, z = self._coords(x, y, z)
        return _out(self._noise(x, y, z))

    def fbm(self, x: Any, y: Any, z: Any, octaves: int = 8, persistence: float = 0.5) -> Any:
        """Fractal Brownian motion, remapped to [0, 1]."""
        _check_octaves(octaves)
        x, y, z = self._coords(x, y, z)
        value = np.zeros(x.shape)
        amplitude, frequency, total = 1.0, 1.0, 0.0
        for _ in range(octaves):
            value += self._noise(x * frequency, y * frequency, z * frequency) * amplitude
            total += amplitude
            amplitude *= persistence
            frequency *= 2
        return _out((value / total) * 0.5 + 0.5)

    def turbulence(self, x: Any, y: Any, z: Any, octaves: int = 8) -> Any:
        """Sum of |noise| octaves, normalized to [0, 1]."""
        _check_octaves(octaves)
        x, y, z = self._coords(x, y, z)
        value = np.zeros(x.shape)
        amplitude, frequency, total = 1.0, 1.0, 0.0
        for _ in range(octaves):
            value += np.abs(self._noise(x * frequency, y * frequency, z * frequency)) * amplitude
            total += amplitude
            amplitude *= 0.5
            frequency *= 2
        return _out(value / total)

    def ridged(self, x: Any, y: Any, z: Any, octaves: int = 8) -> Any:
        """Ridged multifractal: (1 - |noise|)^2 with feedback weighting, clamped to [0, 1]."""
        _check_octaves(octaves)
        x, y, z = self._coords(x, y, z)
        value = np.zeros(x.shape)
        weight = np.ones(x.shape)
        amplitude, frequency = 1.0, 1.0
        for _ in range(octaves):
            signal = 1.0 - np.abs(self._noise(x * frequency, y * frequency, z * frequency))
            signal = signal * signal * weight
            weight = np.clip(signal * 2, 0.0, 1.0)
            value += signal * amplitude
            amplitude *= 0.5
            frequency *= 2
        return _out(np.clip(value * 0.5, 0.0, 1.0))
