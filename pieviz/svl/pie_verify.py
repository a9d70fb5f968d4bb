# pieviz/svl/pie_verify.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence, Union

from .errors import InsufficientColorsError, InvalidPercentageError
from .pie_spec import PieOptions

logger = logging.getLogger(__name__)

WHOLE = 100.0
REL_TOL = 1e-9  # 100 +/- 1e-7 counts as a whole pie


def _is_whole(x: float) -> bool:
    return math.isclose(x, WHOLE, rel_tol=REL_TOL)


@dataclass(frozen=True)
class AngularSpan:
    """A [start, end) slice of a full turn, both ends as fractions in [0, 1]."""
    start: float
    end: float

    @property
    def sweep(self) -> float:
        return self.end - self.start

    @property
    def radians(self):
        return 2 * math.pi * self.start, 2 * math.pi * self.end

    def contains(self, fraction: float) -> bool:
        return self.start <= fraction < self.end


def normalize_percentages(percentages: Sequence[float],
                          colors: Optional[Sequence[str]] = None) -> List[float]:
    """
    Turn raw percentages into independent shares summing to 100.
    - a sequence ending in 100 is a running total and is differenced
    - colors, when given, must cover every division
    The input sequence is left untouched.
    """
    values = [float(p) for p in percentages]

    if colors is not None and len(colors) < len(values):
        raise InsufficientColorsError(
            f"Not enough colors given: {len(colors)} for {len(values)} divisions.")
    if not values:
        raise InvalidPercentageError("At least one percentage is required.")
    if not all(math.isfinite(v) for v in values):
        raise InvalidPercentageError("Percentages must be finite numbers.")

    if _is_whole(values[-1]):
        shares, prev = [], 0.0
        for i, total in enumerate(values):
            if total < prev:
                raise InvalidPercentageError(
                    f"Running total decreases at index {i}: {prev:g} -> {total:g}.")
            shares.append(total - prev)
            prev = total
        values = shares

    if any(v < 0 for v in values):
        raise InvalidPercentageError("Percentages must be >= 0.")

    total = math.fsum(values)
    if not _is_whole(total):
        raise InvalidPercentageError(f"Percentages must sum to 100, got {total:g}.")
    return values


def to_spans(shares: Sequence[float]) -> List[AngularSpan]:
    """Lay shares around the circle in order, each span starting where the last ended."""
    spans: List[AngularSpan] = []
    running = 0.0
    for share in shares:
        # float drift can overshoot a full turn; keep start <= end <= 1
        end = min(running + share / WHOLE, 1.0)
        spans.append(AngularSpan(running, end))
        running = end
    # or land a hair short of it
    spans = [AngularSpan(_snap_turn(s.start), _snap_turn(s.end)) for s in spans]
    if spans:
        spans[-1] = AngularSpan(spans[-1].start, 1.0)
    return spans


def _snap_turn(fraction: float) -> float:
    return 1.0 if math.isclose(fraction, 1.0, rel_tol=REL_TOL) else fraction


def verify_pie(raw: Union[PieOptions, Mapping[str, Any]]) -> PieOptions:
    """
    Validate pie options and return them with percentages normalized to shares.
    Schema problems raise pydantic's ValidationError; percentage/color count
    problems raise InvalidPercentageError / InsufficientColorsError.
    """
    spec = raw if isinstance(raw, PieOptions) else PieOptions.model_validate(dict(raw))
    shares = normalize_percentages(spec.percentages, spec.colors)
    logger.debug("normalized %s -> %s", spec.percentages, shares)
    return spec.model_copy(update={"percentages": shares})
