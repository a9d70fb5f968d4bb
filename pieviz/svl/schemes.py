# pieviz/svl/schemes.py
from typing import Dict, List

# Preset palettes. Order matters: slice i gets color i.
COLOR_SCHEMES: Dict[str, List[str]] = {
    "BLUEBERRY":   ["#e3e3e3", "#aaa7ba", "#52719e", "#2e2e59", "#804070",
                    "#d6cbc0"],
    "CAKE":        ["#774F38", "#E08E79", "#F1D4AF", "#ECE5CE", "#C5E0DC"],
    "CHERRY_TREE": ["#45603B", "#6D8D4E", "#8B8D46", "#863528", "#AA6459",
                    "#DDBCB7", "#F8CD81", "#5C432D", "#725942"],
    "EARTH":       ["#C9A664", "#B78723", "#A26500", "#636900", "#401F13"],
    "EASTER":      ["#F7F7B1", "#BDDA5D", "#DAEFF1", "#D1C4DD", "#FFE4E5",
                    "#B3DBE3", "#E5F7B1", "#FFCACC", "#E8E2EE", "#C9E7F9"],
    "FLOWER":      ["#d1e8b2", "#c790ba", "#9fd4c0", "#ba4e4d", "#73698c",
                    "#6fab9b"],
    "HARVEST":     ["#EFBC7A", "#E0842F", "#B7601D", "#B83815", "#8F310F",
                    "#B7A445", "#7C6522", "#4E2507"],
    "LAKE_HOUSE":  ["#DED0B6", "#93817F", "#B8CCE7", "#CAAB8F", "#D5BC9E",
                    "#67ABEC", "#60A0EA", "#A0CBF5", "#3D78D4", "#4D4A5F"],
    "LAKE_SUNSET": ["#d4b9cc", "#8b90c7", "#3f3e61", "#402b42", "#e04c12",
                    "#f7da7b"],
    "RAINBOW":     ["red", "orange", "yellow", "green", "blue", "violet"],
    "SUMMER":      ["#018592", "#82D1E2", "#F7941C", "#FFC74E", "#937046",
                    "#C7B29F"],
}

DEFAULT_SCHEME = "EASTER"


def scheme(name: str) -> List[str]:
    """Return a copy of a preset palette, looked up case-insensitively."""
    key = (name or "").strip().upper().replace(" ", "_")
    if key not in COLOR_SCHEMES:
        raise KeyError(f"unknown color scheme: {name!r}")
    return list(COLOR_SCHEMES[key])
