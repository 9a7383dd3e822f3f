"""
Our data: color tables for every body class (hex color stops).
Planet palettes map a surface band name to its ordered stops; the classifier
picks the band and a shade index within it.
"""

# Stellar classes: base surface color, brightest surface color, corona glow
STAR_COLORS: dict[str, dict[str, str]] = {
    "O": {"base": "#aaccff", "bright": "#ffffff", "glow": "#5588ff"},
    "B": {"base": "#bbddff", "bright": "#ffffff", "glow": "#6699ff"},
    "A": {"base": "#ddeeff", "bright": "#ffffff", "glow": "#aabbee"},
    "F": {"base": "#fffff8", "bright": "#ffffff", "glow": "#eeeeee"},
    "G": {"base": "#fff4ea", "bright": "#ffffaa", "glow": "#ffeecc"},
    "K": {"base": "#ffcc88", "bright": "#ffee66", "glow": "#ffaa66"},
    "M": {"base": "#ff9966", "bright": "#ffcc44", "glow": "#ff7744"},
    "BrownDwarf": {"base": "#8b4513", "bright": "#cd853f", "glow": "#6a3a1a"},
    "WhiteDwarf": {"base": "#f0f0ff", "bright": "#ffffff", "glow": "#d0d0ff"},
    "NeutronStar": {"base": "#00ffff", "bright": "#ffffff", "glow": "#00cccc"},
    "Pulsar": {"base": "#ff00ff", "bright": "#ffffff", "glow": "#cc00cc"},
    "RedGiant": {"base": "#ff6347", "bright": "#ffaa77", "glow": "#ff4420"},
    "BlueGiant": {"base": "#5080f0", "bright": "#c0d0ff", "glow": "#3050c0"},
    "RedSuperGiant": {"base": "#ff2000", "bright": "#ff8060", "glow": "#aa0000"},
    "BlueSuperGiant": {"base": "#0066ff", "bright": "#88ccff", "glow": "#0030cc"},
}

TERRAN: dict[str, list[str]] = {
    "deep_ocean": ["#001428", "#002846", "#003d5c"],
    "ocean": ["#0066aa", "#0088cc", "#00aaee"],
    "shallow": ["#33ccff", "#66ddff"],
    "beach": ["#c8b090", "#e8d0b0", "#f8e0d0"],
    "grass": ["#2d5016", "#3d7026", "#5d9046", "#7daa66", "#9dcc88"],
    "forest": ["#0a3a0a", "#1a4a1a", "#2a6a2a", "#4a8a4a"],
    "mountain": ["#4b3b2b", "#6b5b4b", "#8b7b6b", "#ab9b8b"],
    "snow": ["#d8e8f8", "#f0f8ff", "#ffffff"],
    "cloud": ["#ffffff", "#f8fcff"],
    "cities": ["#ffdd88", "#ffee99"],  # night-side light pollution
}

PLANET_COLORS: dict[str, dict[str, list[str]]] = {
    "terran": TERRAN,
    "rocky": {
        "dark": ["#1a1512", "#2a251f", "#3a352c"],
        "surface": ["#3a2d22", "#4a3d32", "#6a5d52", "#8a7d72"],
        "crater": ["#0a0502", "#1a1512"],
        "highland": ["#aa9d92", "#cabaa0", "#eadac0"],
        "dust": ["#b89060", "#c8a070"],
    },
    "desert": {
        "sand_dark": ["#b89060", "#c8a070"],
        "sand": ["#d2b48c", "#e6c8a0", "#fadcb4"],
        "dune_shadow": ["#a07850", "#b08860"],
        "rock": ["#6a5a4a", "#7a6a5a", "#8a7a6a", "#aa9a8a"],
        "canyon_deep": ["#503020", "#604030"],
        "canyon": ["#705040", "#907060"],
    },
    "ice": {
        "deep": ["#2060a0", "#3070a0", "#4080b0"],
        "surface": ["#70b0d0", "#80c8e0", "#a0e0f0", "#c0f0ff"],
        "crevasse": ["#081018", "#102030", "#203040"],
        "snow": ["#d0e8ff", "#e0f0ff", "#f0f8ff", "#ffffff"],
    },
    "lava": {
        "molten_bright": ["#ffff00", "#ffee00"],
        "molten_hot": ["#ffaa00", "#ff8800", "#ff6600"],
        "molten": ["#ff4400", "#ff3300"],
        "cooling": ["#ff2200", "#cc0000", "#aa0000"],
        "crust_warm": ["#3a2a2a", "#4a3a3a", "#5a4a4a"],
        "crust": ["#1a1a1a", "#2a2a2a"],
    },
    "ocean": {
        "deep": ["#000814", "#001428", "#002846", "#004878"],
        "mid": ["#0066aa", "#0088cc", "#0098dc"],
        "surface": ["#20c0ff", "#40d0ff", "#60e0ff"],
        "foam": ["#d0f8ff", "#e0fcff", "#ffffff"],
        "cloud": ["#ffffff", "#f8fcff"],
    },
    "jungle": {
        "canopy_dark": ["#0a4a0a", "#1a5a1a"],
        "canopy": ["#2a7a2a", "#4a9a4a", "#6aba6a"],
        "understory": ["#0a3a0a", "#1a4a1a", "#2a6a2a"],
        "flower": ["#ff6688", "#ff88aa", "#ffaacc"],
        "river": ["#4a7a7a", "#6a9a9a"],
        "cloud": ["#ffffff", "#f8fcff"],
    },
    "gas_giant": {
        "band1_dark": ["#6b4914", "#7b5914"],
        "band1": ["#8b6914", "#9b7934", "#ab8934"],
        "band2_light": ["#e2c594", "#f2d5a4", "#fce5b4"],
        "band2": ["#c49564", "#d4a574"],
        "storm": ["#cc3322", "#ee6644", "#ff8866"],
        "cloud": ["#ffffff", "#f8f8ff"],
    },
}

# Planet types without a palette of their own render with this one
DEFAULT_PLANET_PALETTE = "terran"

MOON_COLORS: dict[str, list[str]] = {
    "rocky": ["#4a3d32", "#6a5d52", "#8a7d72", "#aa9d92"],
    "icy": ["#a0c0e0", "#b0d0f0", "#c0e0ff", "#d0f0ff"],
}

ASTEROID_COLORS: list[str] = ["#3a2d22", "#4a3d32", "#5a4d42", "#6a5d52"]

ATMOSPHERE_COLOR: tuple[int, int, int] = (100, 150, 255)


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """'#rrggbb' → (r, g, b). Malformed strings map to mid grey."""
    h = value.lstrip("#")
    if len(h) != 6:
        return (128, 128, 128)
    try:
        return (int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16))
    except ValueError:
        return (128, 128, 128)
