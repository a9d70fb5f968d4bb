# pieviz/ve/chart.py
from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional, Union

from pieviz.svl.pie_spec import PieOptions
from pieviz.svl.pie_verify import AngularSpan, to_spans, verify_pie
from .colors import color_key
from .hit_test import GeometryHitTester, PixelHitTester
from .hover import HoverController
from .layout import Container, Header, mount, unmount
from .legend import Legend, LegendEntry, LegendIndex
from .slice import Slice
from .surface import POINTER_LEAVE, POINTER_MOVE, RasterSurface

logger = logging.getLogger(__name__)

CHART_MARGIN = 20  # room between the circle and the square's edge


class PieChart:
    """
    A pie chart drawn on its own square surface, with an optional header,
    an optional legend, and hover highlighting of legend rows.

    Everything is validated before anything is drawn or mounted: a bad
    option raises and leaves the container untouched.
    """

    def __init__(self, container: Optional[Container] = None,
                 options: Union[PieOptions, Mapping[str, Any], None] = None):
        self.options = opts = verify_pie(options if options is not None else {})
        n = len(opts.percentages)
        colors = opts.colors[:n]

        self.spans: List[AngularSpan] = to_spans(opts.percentages)
        self.slices = [Slice(span, color, opts.border_color, opts.border_width)
                       for span, color in zip(self.spans, colors)]
        if opts.border_width > 0:
            color_key(opts.border_color)  # raises on an unparseable border color

        self.legend = (Legend(colors, opts.labels, opts.legend_class, opts.chart_side)
                       if opts.show_legend else None)
        self.legend_index = (self.legend.index if self.legend is not None
                             else LegendIndex.build(colors, opts.labels))
        self.header = (Header(opts.title, opts.title_justify, opts.title_class)
                       if opts.title else None)

        self.container = container if container is not None else Container()
        self.surface = RasterSurface(opts.height, opts.height)
        mount(self.container, self.surface, self.header, self.legend, opts.chart_side)
        self.display()

        if opts.hit_test == "geometry":
            tester = GeometryHitTester(self.spans, self.legend_index.entries,
                                       self.center, self.radius)
        else:
            tester = PixelHitTester(self.surface, self.legend_index)
        self.hover = HoverController(
            self.surface, tester,
            self.legend.apply_highlight if self.legend else None,
            self.legend.clear_highlight if self.legend else None,
        )
        self.surface.bind(POINTER_MOVE, self.hover.handle_move)
        self.surface.bind(POINTER_LEAVE, self.hover.handle_leave)
        self._destroyed = False
        logger.debug("pie chart: %d slices, %dpx, legend=%s",
                     n, opts.height, self.legend is not None)

    @property
    def center(self) -> float:
        return self.options.height / 2

    @property
    def radius(self) -> float:
        return max(self.center - CHART_MARGIN, 0)

    @property
    def shares(self) -> List[float]:
        return list(self.options.percentages)

    @property
    def highlighted(self) -> Optional[LegendEntry]:
        return self.hover.current

    def display(self) -> None:
        for piece in self.slices:
            piece.draw(self.surface, self.center, self.radius)

    def destroy(self) -> None:
        """Unhook pointer handlers and detach from the container."""
        if self._destroyed:
            return
        self.surface.unbind(POINTER_MOVE, self.hover.handle_move)
        self.surface.unbind(POINTER_LEAVE, self.hover.handle_leave)
        self.hover.on_pointer_leave()
        unmount(self.container, self.header, self.surface, self.legend)
        self._destroyed = True


def piechart(container: Optional[Container] = None, **options) -> PieChart:
    """Build a chart from keyword options, e.g. piechart(box, percentages=[75, 100], showLegend=True)."""
    return PieChart(container, options)
