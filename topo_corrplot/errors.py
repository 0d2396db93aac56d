from __future__ import annotations


class CorrelationPlotError(Exception):
    """Base class for errors raised by topo_corrplot."""


class ColorParseError(CorrelationPlotError, ValueError):
    """Raised when a color string cannot be parsed."""


class PlotDataError(CorrelationPlotError, ValueError):
    """Raised when correlation data cannot be built from the given arrays."""
