# Sprite atlas summaries for the manifest

from .metrics import frame_difference, mean_brightness, opaque_fraction, summarize_frames, visible_fraction

__all__ = [
    "frame_difference",
    "mean_brightness",
    "opaque_fraction",
    "summarize_frames",
    "visible_fraction",
]
