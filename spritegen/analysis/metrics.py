"""
Pure algorithms for summarizing sprite atlases: coverage, brightness, motion.
Written into the manifest so a sprite can be sanity-checked without opening it.
"""
from typing import Any

import numpy as np


def opaque_fraction(frame: np.ndarray) -> float:
    """Share of pixels with alpha == 255."""
    if frame.ndim != 3 or frame.shape[-1] < 4:
        raise ValueError("Expected RGBA frame (H, W, 4)")
    return float((frame[:, :, 3] == 255).mean())


def visible_fraction(frame: np.ndarray) -> float:
    """Share of pixels with any alpha (surface plus glow)."""
    if frame.ndim != 3 or frame.shape[-1] < 4:
        raise ValueError("Expected RGBA frame (H, W, 4)")
    return float((frame[:, :, 3] > 0).mean())


def mean_brightness(frame: np.ndarray) -> float:
    """Mean luminance (0–255) over visible pixels; 0 for an empty frame."""
    visible = frame[:, :, 3] > 0
    if not visible.any():
        return 0.0
    rgb = frame[visible][:, :3].astype(np.float64)
    gray = 0.299 * rgb[:, 0] + 0.587 * rgb[:, 1] + 0.114 * rgb[:, 2]
    return float(gray.mean())


def frame_difference(frame_a: np.ndarray, frame_b: np.ndarray) -> float:
    """
    Mean absolute difference between two RGBA frames (cropped to the common size).
    Used as a simple "motion" signal between consecutive frames.
    """
    ha, wa = frame_a.shape[:2]
    hb, wb = frame_b.shape[:2]
    if ha != hb or wa != wb:
        min_h, min_w = min(ha, hb), min(wa, wb)
        frame_a = frame_a[:min_h, :min_w]
        frame_b = frame_b[:min_h, :min_w]
    return float(np.abs(frame_a.astype(np.float64) - frame_b.astype(np.float64)).mean())


def summarize_frames(frames: list[np.ndarray]) -> dict[str, Any]:
    """Coverage and motion stats for one atlas (frames in order)."""
    if not frames:
        return {"opaque": 0.0, "visible": 0.0, "brightness": 0.0, "motion": 0.0}
    first = frames[0]
    motion = [frame_difference(a, b) for a, b in zip(frames, frames[1:])]
    return {
        "opaque": round(opaque_fraction(first), 4),
        "visible": round(visible_fraction(first), 4),
        "brightness": round(mean_brightness(first), 2),
        "motion": round(float(np.mean(motion)) if motion else 0.0, 3),
    }
