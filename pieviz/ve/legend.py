# pieviz/ve/legend.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence

from pieviz.svl.errors import DuplicateColorError, InvalidColorError
from .colors import color_key


@dataclass
class LegendItem:
    """One legend row: swatch + label, with the two style knobs hover toggles."""
    label: str
    color: str
    swatch_size: int = 20
    font_weight: str = "normal"
    box_shadow: str = "none"

    @property
    def highlighted(self) -> bool:
        return self.font_weight == "bold"


@dataclass(frozen=True)
class LegendEntry:
    color_key: str
    label: str
    swatch: Optional[LegendItem] = field(default=None, compare=False, repr=False)


class LegendIndex:
    """Normalized color key -> legend entry. Built once, read on every pointer move."""

    def __init__(self, entries: Dict[str, LegendEntry]):
        self._entries = dict(entries)

    @classmethod
    def build(cls, colors: Sequence[str], labels: Sequence[str],
              swatches: Optional[Sequence[LegendItem]] = None) -> "LegendIndex":
        entries: Dict[str, LegendEntry] = {}
        for i, color in enumerate(colors):
            key = color_key(color)
            if key in entries:
                raise DuplicateColorError(
                    f"colors[{i}] ({color!r}) renders the same as an earlier color ({key}).")
            label = labels[i] if i < len(labels) else ""
            swatch = swatches[i] if swatches is not None and i < len(swatches) else None
            entries[key] = LegendEntry(key, label, swatch)
        return cls(entries)

    def lookup(self, key: str) -> Optional[LegendEntry]:
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        try:
            return self._entries.get(color_key(key))
        except InvalidColorError:
            return None

    @property
    def entries(self) -> List[LegendEntry]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[LegendEntry]:
        return iter(self._entries.values())


class Legend:
    """
    The color-keyed legend shown next to the chart.
    Owns the highlight effect pair: bold label + a thin glow on the swatch
    in the slice's color, and the exact inverse.
    """

    def __init__(self, colors: Sequence[str], labels: Sequence[str],
                 legend_class: str = "", chart_side: str = "left"):
        self.legend_class = legend_class
        self.chart_side = chart_side
        self.items = [LegendItem(label=labels[i] if i < len(labels) else "", color=c)
                      for i, c in enumerate(colors)]
        self.index = LegendIndex.build(colors, labels, swatches=self.items)

    def apply_highlight(self, entry: LegendEntry) -> None:
        item = entry.swatch
        if item is None:
            return
        item.font_weight = "bold"
        item.box_shadow = f"0 0 1px 0 {entry.color_key}"

    def clear_highlight(self, entry: LegendEntry) -> None:
        item = entry.swatch
        if item is None:
            return
        item.font_weight = "normal"
        item.box_shadow = "none"

    @property
    def highlighted(self) -> List[LegendItem]:
        return [it for it in self.items if it.highlighted]
