# pieviz/ve/hover.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Callable, Optional

from .legend import LegendEntry
from .surface import PointerEvent, RenderSurface

logger = logging.getLogger(__name__)

Effect = Callable[[LegendEntry], None]


def _noop(entry: LegendEntry) -> None:
    return None


@dataclass
class HoverState:
    current: Optional[LegendEntry] = None

    @property
    def idle(self) -> bool:
        return self.current is None


class HoverController:
    """
    Tracks which slice is under the pointer and keeps exactly one legend
    entry highlighted while the pointer is over a wedge.

    States: idle (current is None) and highlighting(current).
    `hit_tester` maps a surface-local point to a LegendEntry or None.
    """

    def __init__(self, surface: RenderSurface, hit_tester,
                 apply_highlight: Optional[Effect] = None,
                 clear_highlight: Optional[Effect] = None):
        self.surface = surface
        self.hit_tester = hit_tester
        self.apply_highlight = apply_highlight or _noop
        self.clear_highlight = clear_highlight or _noop
        self.state = HoverState()

    @property
    def current(self) -> Optional[LegendEntry]:
        return self.state.current

    def on_pointer_move(self, x: float, y: float) -> None:
        """x, y are page coordinates."""
        left, top = self.surface.offset()
        entry = self.hit_tester.resolve(x - math.floor(left), y - math.floor(top))
        if entry is None:
            self._to_idle()
            return

        prev = self.state.current
        if prev == entry:
            return
        if prev is not None:
            self.clear_highlight(prev)
        self.apply_highlight(entry)
        self.state.current = entry
        logger.debug("highlight %s (%s)", entry.color_key, entry.label)

    def on_pointer_leave(self) -> None:
        # a fast exit can skip the last background sample
        self._to_idle()

    # surface event adapters
    def handle_move(self, event: PointerEvent) -> None:
        self.on_pointer_move(event.page_x, event.page_y)

    def handle_leave(self, event: Optional[PointerEvent] = None) -> None:
        self.on_pointer_leave()

    def _to_idle(self) -> None:
        prev = self.state.current
        if prev is None:
            return
        self.clear_highlight(prev)
        self.state.current = None
        logger.debug("clear %s", prev.color_key)
