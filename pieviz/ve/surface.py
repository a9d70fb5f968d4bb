# pieviz/ve/surface.py
from __future__ import annotations

import io
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Dict, List, NamedTuple, Optional, Tuple

import numpy as np
from PIL import Image, ImageDraw

from .colors import to_rgba255

POINTER_MOVE = "pointermove"
POINTER_LEAVE = "pointerleave"

TAU = 2 * math.pi
ARC_STEP_PX = 2.0   # max chord length when flattening arcs

Point = Tuple[float, float]


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int


TRANSPARENT = RGBA(0, 0, 0, 0)


@dataclass
class PointerEvent:
    """Viewport position of the pointer plus the page scroll at the time."""
    client_x: float = 0.0
    client_y: float = 0.0
    scroll_x: float = 0.0
    scroll_y: float = 0.0

    @property
    def page_x(self) -> float:
        return self.client_x + self.scroll_x

    @property
    def page_y(self) -> float:
        return self.client_y + self.scroll_y


def arc_sweep(start: float, end: float, ccw: bool = False) -> float:
    """Signed angle an arc covers, with the same wrapping rules as an HTML canvas."""
    if not ccw:
        if end - start >= TAU:
            return TAU
        return (end - start) % TAU
    if start - end >= TAU:
        return -TAU
    return -((start - end) % TAU)


def _area(points: List[Point]) -> float:
    s = 0.0
    for (x0, y0), (x1, y1) in zip(points, points[1:] + points[:1]):
        s += x0 * y1 - x1 * y0
    return s / 2


class RenderSurface(ABC):
    """
    Minimal 2D canvas the chart draws on and reads back from.
    Subclasses provide the path/paint primitives; event plumbing lives here.
    """

    def __init__(self, left: float = 0.0, top: float = 0.0):
        self._left = left
        self._top = top
        self._handlers: Dict[str, List[Callable]] = {}

    # ---- drawing ----
    @abstractmethod
    def begin_path(self) -> None: ...

    @abstractmethod
    def move_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def line_to(self, x: float, y: float) -> None: ...

    @abstractmethod
    def arc(self, cx: float, cy: float, r: float,
            start: float, end: float, ccw: bool = False) -> None: ...

    @abstractmethod
    def fill(self, color: str) -> None: ...

    @abstractmethod
    def stroke(self, color: str, width: float) -> None: ...

    @abstractmethod
    def read_pixel(self, x: float, y: float) -> RGBA:
        """Color at a surface-local point; TRANSPARENT outside the surface."""

    # ---- placement ----
    def offset(self) -> Tuple[float, float]:
        return self._left, self._top

    def place(self, left: float, top: float) -> None:
        self._left, self._top = left, top

    # ---- events ----
    def bind(self, event: str, handler: Callable) -> None:
        self._handlers.setdefault(event, []).append(handler)

    def unbind(self, event: str, handler: Callable) -> None:
        handlers = self._handlers.get(event, [])
        if handler in handlers:
            handlers.remove(handler)

    def handlers(self, event: str) -> List[Callable]:
        return list(self._handlers.get(event, []))

    def dispatch(self, event: str, payload: Optional[PointerEvent] = None) -> None:
        for handler in self.handlers(event):
            handler(payload)


class RasterSurface(RenderSurface):
    """Pillow-backed surface. Fills are not anti-aliased, so read-back returns painted colors exactly."""

    def __init__(self, width: int, height: int, left: float = 0.0, top: float = 0.0):
        super().__init__(left, top)
        self.image = Image.new("RGBA", (int(width), int(height)), TRANSPARENT)
        self._draw = ImageDraw.Draw(self.image)
        self._subpaths: List[List[Point]] = []

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(float(x), float(y))])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self.move_to(x, y)
        else:
            self._subpaths[-1].append((float(x), float(y)))

    def arc(self, cx: float, cy: float, r: float,
            start: float, end: float, ccw: bool = False) -> None:
        sweep = arc_sweep(start, end, ccw)
        n = max(2, int(math.ceil(abs(sweep) * max(r, 1.0) / ARC_STEP_PX)) + 1)
        theta = np.linspace(start, start + sweep, n)
        xs = (cx + r * np.cos(theta)).tolist()
        ys = (cy + r * np.sin(theta)).tolist()
        pts = list(zip(xs, ys))
        if not self._subpaths:
            self._subpaths.append(pts)
        else:
            self._subpaths[-1].extend(pts)

    def fill(self, color: str) -> None:
        rgba = to_rgba255(color)
        for sub in self._subpaths:
            # zero-area paths (e.g. a 0% wedge) paint nothing
            if len(sub) >= 3 and abs(_area(sub)) > 1e-9:
                self._draw.polygon(sub, fill=rgba)

    def stroke(self, color: str, width: float) -> None:
        rgba = to_rgba255(color)
        w = max(1, int(round(width)))
        for sub in self._subpaths:
            if len(sub) >= 2:
                self._draw.line(sub, fill=rgba, width=w, joint="curve")

    def read_pixel(self, x: float, y: float) -> RGBA:
        xi, yi = int(math.floor(x)), int(math.floor(y))
        if not (0 <= xi < self.width and 0 <= yi < self.height):
            return TRANSPARENT
        return RGBA(*self.image.getpixel((xi, yi)))

    def to_png(self) -> bytes:
        buf = io.BytesIO()
        self.image.save(buf, format="PNG")
        return buf.getvalue()
