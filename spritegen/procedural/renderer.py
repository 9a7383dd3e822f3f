"""
Frame compositor: shader + frame index → chunky pixel-art frames → horizontal atlas.
Shading runs once per pixel block (block center), then the block is replicated.
"""
import math

import numpy as np

from .shading import BodyShader


def block_offsets(size: int, pixel_size: int) -> tuple[np.ndarray, np.ndarray]:
    """(dx, dy) grids of block centers relative to the sprite center, shape (n, n)."""
    if size <= 0 or pixel_size <= 0:
        raise ValueError(f"size and pixel_size must be positive (got {size}, {pixel_size})")
    blocks = math.ceil(size / pixel_size)
    centers = np.arange(blocks, dtype=np.float64) * pixel_size + pixel_size / 2
    offsets = centers - size / 2
    dx, dy = np.meshgrid(offsets, offsets)
    return dx, dy


def to_pixels(rgba: np.ndarray) -> np.ndarray:
    """Float RGBA (alpha 0-255) → uint8; fully transparent pixels become (0, 0, 0, 0)."""
    out = np.empty(rgba.shape, dtype=np.uint8)
    out[..., :3] = np.clip(np.floor(rgba[..., :3]), 0, 255)
    out[..., 3] = np.clip(np.round(rgba[..., 3]), 0, 255)
    out[out[..., 3] == 0] = 0
    return out


def render_frame(
    shader: BodyShader,
    size: int,
    pixel_size: int,
    frame: int,
    frame_count: int,
) -> np.ndarray:
    """One (size, size, 4) uint8 frame."""
    dx, dy = block_offsets(size, pixel_size)
    blocks = to_pixels(shader.shade(dx, dy, frame, frame_count))
    full = np.repeat(np.repeat(blocks, pixel_size, axis=0), pixel_size, axis=1)
    return full[:size, :size]


def render_atlas(
    shader: BodyShader,
    size: int,
    frame_count: int,
    pixel_size: int,
) -> np.ndarray:
    """All frames side by side: shape (size, size * frame_count, 4), uint8 RGBA."""
    if frame_count <= 0:
        raise ValueError(f"frame_count must be positive (got {frame_count})")
    frames = [render_frame(shader, size, pixel_size, i, frame_count) for i in range(frame_count)]
    return np.concatenate(frames, axis=1)


def split_frames(atlas: np.ndarray, frame_count: int) -> list[np.ndarray]:
    """Inverse of the atlas layout: list of (size, size, 4) frames."""
    return np.split(atlas, frame_count, axis=1)
