"""
Persistence for finished atlases: PNG (Pillow), optional animated GIF preview (imageio)
and a JSON manifest recording every sprite with the seed that reproduces it.
I/O errors propagate to the caller; nothing here retries.
"""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import numpy as np
from PIL import Image

from .analysis import summarize_frames
from .procedural.generator import SpriteAtlas
from .procedural.renderer import split_frames

logger = logging.getLogger(__name__)

MANIFEST_NAME = "manifest.json"


def sprite_path(out_dir: Path, atlas: SpriteAtlas) -> Path:
    """<out_dir>/<category>s/<filename>."""
    return Path(out_dir) / atlas.category.directory / atlas.filename


def save_atlas(atlas: SpriteAtlas, path: Path) -> Path:
    """Encode the atlas as an RGBA PNG. Creates parent directories."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(np.ascontiguousarray(atlas.pixels)).save(path, format="PNG")
    return path


def save_preview(atlas: SpriteAtlas, path: Path, *, fps: int = 12) -> Path:
    """Write the atlas frames as a looping animated GIF."""
    try:
        import imageio.v3 as iio
    except ImportError:
        raise ImportError(
            "GIF previews need 'imageio'. Install with: pip install imageio"
        ) from None

    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    frames = np.stack(split_frames(atlas.pixels, atlas.frames))
    iio.imwrite(path, frames, extension=".gif", duration=int(1000 / max(1, fps)), loop=0)
    return path


def manifest_entry(atlas: SpriteAtlas, out_dir: Path, path: Path) -> dict[str, Any]:
    """One manifest record. `file` is relative to the output directory."""
    return {
        "category": atlas.category.value,
        "kind": atlas.kind,
        "index": atlas.index,
        "file": Path(path).relative_to(out_dir).as_posix(),
        "seed": atlas.seed,
        "size": atlas.size,
        "frames": atlas.frames,
        "pixel_size": atlas.pixel_size,
        "width": atlas.width,
        "height": atlas.height,
        "attributes": dict(atlas.attributes),
        "stats": summarize_frames(split_frames(atlas.pixels, atlas.frames)),
    }


def write_manifest(entries: list[dict[str, Any]], path: Path, *, base_seed: int | None = None) -> Path:
    """Write (or replace) the manifest. Entries keep the order they were generated in."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    data = {
        "generated_at": datetime.now(timezone.utc).isoformat(),
        "base_seed": base_seed,
        "count": len(entries),
        "sprites": entries,
    }
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)
    logger.info("Manifest: %s (%d sprites)", path, len(entries))
    return path


def load_manifest(path: Path) -> dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return json.load(f)
