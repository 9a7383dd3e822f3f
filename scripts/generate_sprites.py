#!/usr/bin/env python3
"""
CLI: Generate celestial sprite atlases (PNG, one per body) plus a manifest.
Usage:
  python scripts/generate_sprites.py --all
  python scripts/generate_sprites.py --planets --seed 1234
  python scripts/generate_sprites.py --stars --output my_sprites --preview
"""
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from spritegen.cli import main


if __name__ == "__main__":
    sys.exit(main())
