# pieviz/svl/errors.py


class PieChartError(ValueError):
    """Base class for every construction-time failure of a pie chart."""


class InvalidPercentageError(PieChartError):
    """Shares don't sum to 100, or a running total goes backwards."""


class InsufficientColorsError(InvalidPercentageError):
    """Fewer colors than percentage divisions."""


class InvalidColorError(PieChartError):
    """A color string that can't be parsed."""


class InvalidColorComponentError(PieChartError):
    """A channel value outside 0..255 while encoding a color key."""


class DuplicateColorError(PieChartError):
    """Two slices share a color, so a pixel can't tell them apart."""
