"""
Seeding for reproducible sprites. A run has one base seed; every body derives its own
seed from it and its full identity (category, kind, index), and every per-body random
choice comes from a Random seeded with that.
Drawing an unseeded base uses the secrets module and must be logged by the caller.
"""
import hashlib
import random
import secrets

MAX_BASE_SEED = 1_000_000
SEED_MASK = 0xFFFFFFFF


def draw_seed() -> int:
    """Fresh base seed from the OS entropy pool."""
    return secrets.randbelow(MAX_BASE_SEED)


def body_seed(base: int, category: str, kind: str | None = None, index: int | None = None) -> int:
    """
    32-bit seed for one body: SHA-256 of "base:category:kind:index".
    Distinct bodies of a run never share arithmetic offsets, so their noise fields are independent.
    """
    key = f"{base}:{category}:{kind or ''}:{'' if index is None else index}"
    digest = hashlib.sha256(key.encode("utf-8")).digest()
    return int.from_bytes(digest[:4], "big") & SEED_MASK


def star_seed(base: int, stellar_class: str) -> int:
    return body_seed(base, "star", stellar_class)


def planet_seed(base: int, planet_type: str, index: int) -> int:
    return body_seed(base, "planet", planet_type, index)


def moon_seed(base: int, index: int) -> int:
    return body_seed(base, "moon", index=index)


def asteroid_seed(base: int, index: int) -> int:
    return body_seed(base, "asteroid", index=index)


def body_rng(seed: int) -> random.Random:
    """Deterministic generator for one body's attribute draws (size, palette, shape)."""
    return random.Random(seed)


def uniform_int(rng: random.Random, lo: int, hi: int) -> int:
    """Integer in [lo, hi); lo when the range is empty."""
    return lo + int(rng.random() * (hi - lo))


def uniform_float(rng: random.Random, lo: float, hi: float) -> float:
    return lo + rng.random() * (hi - lo)
