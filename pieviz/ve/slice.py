# pieviz/ve/slice.py
from dataclasses import dataclass

from pieviz.svl.pie_verify import AngularSpan
from .surface import RenderSurface


@dataclass(frozen=True)
class Slice:
    """One wedge of the pie: its span and how it is painted."""
    span: AngularSpan
    color: str
    border_color: str = "#fff"
    border_width: float = 0

    def draw(self, surface: RenderSurface, center: float, radius: float) -> None:
        start, end = self.span.radians
        surface.begin_path()
        surface.move_to(center, center)
        surface.arc(center, center, radius, start, end, False)
        surface.fill(self.color)

        # a zero width would still give a 1px outline, so skip the stroke entirely
        if self.border_width > 0:
            surface.line_to(center, center)
            surface.stroke(self.border_color, self.border_width)
