"""
Procedural celestial sprite generator: seeded 3D noise → shaded, animated RGBA atlases.
"""

__version__ = "0.1.0"
