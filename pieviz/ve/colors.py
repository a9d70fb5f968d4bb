# pieviz/ve/colors.py
from typing import Tuple

from matplotlib import colors as mcolors
from PIL import ImageColor

from pieviz.svl.errors import InvalidColorComponentError, InvalidColorError


def rgb_to_hex(r: int, g: int, b: int) -> str:
    """Encode three 0..255 channels as a '#rrggbb' key."""
    for name, c in (("r", r), ("g", g), ("b", b)):
        if not 0 <= c <= 255:
            raise InvalidColorComponentError(f"Invalid color component {name}={c}")
    return "#%02x%02x%02x" % (int(r), int(g), int(b))


def to_rgba255(color: str) -> Tuple[int, int, int, int]:
    """
    Parse a color to 0..255 RGBA.
    matplotlib handles names and hex ('red', '#fff', '#A0CBF5', 'tab:blue');
    Pillow picks up the CSS function forms ('rgb(255,0,0)', 'hsl(0,100%,50%)').
    """
    try:
        rgba = mcolors.to_rgba(color)
    except (ValueError, TypeError):
        rgba = None
    if rgba is not None:
        r, g, b, a = (int(round(c * 255)) for c in rgba)
        return r, g, b, a
    try:
        rgb = ImageColor.getrgb(color)
    except (ValueError, TypeError, AttributeError) as e:
        raise InvalidColorError(f"Unrecognized color: {color!r}") from e
    if len(rgb) == 3:
        return rgb[0], rgb[1], rgb[2], 255
    return tuple(rgb)


def color_key(color: str) -> str:
    """Canonical lowercase '#rrggbb' for a color string; alpha is dropped."""
    r, g, b, _ = to_rgba255(color)
    return rgb_to_hex(r, g, b)
