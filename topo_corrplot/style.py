from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from topo_corrplot.raster.canvas import RGBA


@dataclass(frozen=True)
class PlotStyle:
    """Drawing constants shared by the plot processes."""

    font_family: str = "Arial"
    font_size_px: float = 14.0
    text_color: RGBA = (0, 0, 0, 255)
    stroke_color: RGBA = (0, 0, 0, 255)
    line_width: int = 1

    # heatmap
    color_buckets: int = 40
    neighborhood_size: int = 6

    # head outline
    nose_half_width: float = 4.0
    nose_height: float = 4.0

    # colorbar, relative to the disc's top-right corner
    colorbar_top: float = -5.0
    colorbar_left: float = 20.0
    colorbar_width: float = 15.0
    colorbar_label_gap: float = 2.0
    colorbar_units_gap: float = 20.0
    extent_decimals: int = 2

    # label, relative to the disc's bottom-left corner
    label_dx: float = -15.0
    label_dy: float = 20.0
    frequency_decimals: int = 3
    frequency_unit: str = "Hz"


DEFAULT_STYLE = PlotStyle()

_POSITIVE_INT_FIELDS = ("color_buckets", "neighborhood_size", "line_width")
_NON_NEGATIVE_INT_FIELDS = ("extent_decimals", "frequency_decimals")
_COLOR_FIELDS = ("text_color", "stroke_color")


def resolve_plot_style(overrides: Mapping[str, Any] | None = None) -> PlotStyle:
    """Merge overrides into the default style and validate the result."""

    raw: dict[str, Any] = asdict(DEFAULT_STYLE)
    if overrides:
        for key, value in overrides.items():
            if key not in raw:
                raise ValueError(f"Unknown style key: {key}")
            raw[key] = value

    for key in _POSITIVE_INT_FIELDS:
        if not isinstance(raw[key], int) or raw[key] <= 0:
            raise ValueError(f"Style `{key}` must be a positive integer")
    for key in _NON_NEGATIVE_INT_FIELDS:
        if not isinstance(raw[key], int) or raw[key] < 0:
            raise ValueError(f"Style `{key}` must be a non-negative integer")
    for key in _COLOR_FIELDS:
        value = tuple(raw[key])
        if len(value) != 4 or not all(isinstance(c, int) and 0 <= c <= 255 for c in value):
            raise ValueError(f"Style `{key}` must be an RGBA tuple of 0-255 ints")
        raw[key] = value
    if not isinstance(raw["font_family"], str) or not raw["font_family"].strip():
        raise ValueError("Style `font_family` must be a non-empty string")
    if not isinstance(raw["font_size_px"], (int, float)) or float(raw["font_size_px"]) <= 0:
        raise ValueError("Style `font_size_px` must be a positive number")

    return PlotStyle(**{f.name: raw[f.name] for f in fields(PlotStyle)})
