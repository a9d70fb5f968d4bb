# pieviz/ve/layout.py
"""
Header block, host container, and a PNG composition of the three blocks.

Proportions: the container is 6/5 of the chart height, the header takes a sixth of that,
and legend rows are 20px swatches stacked 30px apart from a quarter of
the way down.
"""
from __future__ import annotations

import io
from dataclasses import dataclass, field
from typing import Any, List, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from .colors import to_rgba255
from .legend import Legend
from .surface import RasterSurface, RenderSurface

ROW_PITCH = 30
LABEL_GAP = 5
TEXT_COLOR = (0, 0, 0, 255)
BACKGROUND = (255, 255, 255, 255)


@dataclass
class Header:
    title: str
    justify: str = "left"
    title_class: str = ""
    height: float = 0.0

    @property
    def font_size(self) -> float:
        return self.height - self.height / 4


@dataclass
class Container:
    """Where a chart is mounted: page position, box size and ordered child blocks."""
    left: float = 0.0
    top: float = 0.0
    width: Optional[int] = None
    height: Optional[int] = None
    children: List[Any] = field(default_factory=list)

    def append(self, child: Any) -> None:
        self.children.append(child)

    def prepend(self, child: Any) -> None:
        self.children.insert(0, child)

    def remove(self, child: Any) -> None:
        self.children = [c for c in self.children if c is not child]


def mount(container: Container, surface: RasterSurface, header: Optional[Header] = None,
          legend: Optional[Legend] = None, chart_side: str = "left") -> None:
    """Insert the chart blocks into the container and place the surface on the page."""
    size = surface.height
    container.height = int(size + size / 5)
    if container.width is None:
        container.width = size * 2 if legend is not None else size

    container.append(surface)
    if legend is not None:
        if chart_side == "right":
            container.prepend(legend)
        else:
            container.append(legend)
    if header is not None:
        header.height = container.height / 6
        container.prepend(header)

    for child, (x, y) in block_positions(container):
        if child is surface:
            surface.place(container.left + x, container.top + y)


def unmount(container: Container, *blocks: Any) -> None:
    for block in blocks:
        if block is not None:
            container.remove(block)


def _block_width(container: Container, child: Any) -> int:
    if isinstance(child, RenderSurface):
        return child.width
    charts = [c for c in container.children if isinstance(c, RenderSurface)]
    used = sum(c.width for c in charts)
    return max((container.width or 0) - used, 0)


def block_positions(container: Container) -> List[Tuple[Any, Tuple[float, float]]]:
    """Container-local top-left corner of every child, header on top, the rest side by side."""
    out = []
    header_h = 0.0
    for child in container.children:
        if isinstance(child, Header):
            out.append((child, (0.0, 0.0)))
            header_h = child.height
    x = 0.0
    for child in container.children:
        if isinstance(child, Header):
            continue
        out.append((child, (x, header_h)))
        x += _block_width(container, child)
    return out


def _font(size: float):
    return ImageFont.load_default(size=max(int(size), 1))


def _draw_header(draw: ImageDraw.ImageDraw, header: Header, width: int) -> None:
    font = _font(header.font_size)
    tw = draw.textlength(header.title, font=font)
    if header.justify == "right":
        x = width - tw
    elif header.justify == "center":
        x = (width - tw) / 2
    else:
        x = 0
    draw.text((x, (header.height - header.font_size) / 2), header.title,
              fill=TEXT_COLOR, font=font)


def _draw_legend(draw: ImageDraw.ImageDraw, legend: Legend, x: float, y: float,
                 block_h: float) -> None:
    size = 14
    font = _font(size)
    top = y + block_h / 4
    left = x + block_h / 7
    for i, item in enumerate(legend.items):
        row_y = top + i * ROW_PITCH
        s = item.swatch_size
        color = to_rgba255(item.color)
        if item.box_shadow != "none":
            draw.rectangle([left - 1, row_y - 1, left + s, row_y + s], outline=color)
        draw.rectangle([left, row_y, left + s - 1, row_y + s - 1], fill=color)
        tx, ty = left + s + LABEL_GAP, row_y + (s - size) / 2
        draw.text((tx, ty), item.label, fill=TEXT_COLOR, font=font)
        if item.font_weight == "bold":
            draw.text((tx + 1, ty), item.label, fill=TEXT_COLOR, font=font)


def render_png(container: Container) -> bytes:
    """Compose header, chart and legend into a single PNG."""
    width, height = int(container.width or 1), int(container.height or 1)
    img = Image.new("RGBA", (width, height), BACKGROUND)
    draw = ImageDraw.Draw(img)
    header_h = 0.0
    for child, (x, y) in block_positions(container):
        if isinstance(child, Header):
            header_h = child.height
            _draw_header(draw, child, width)
        elif isinstance(child, RasterSurface):
            img.alpha_composite(child.image, dest=(int(x), int(y)))
        elif isinstance(child, Legend):
            _draw_legend(draw, child, x, y, height - header_h)
    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return buf.getvalue()
