from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Any, Iterable, Mapping

import numpy as np
from PIL import ImageColor

from topo_corrplot.errors import ColorParseError


RGBA = tuple[int, int, int, int]

_HEX_COLOR = re.compile(r"^#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_RGB_FUNC = re.compile(r"^rgba?\(\s*([^)]*)\)$")


@dataclass(frozen=True)
class ColorStop:
    t: float
    color: str


def coerce_color_stops(stops: Iterable[ColorStop | Mapping[str, Any]] | None) -> tuple[ColorStop, ...]:
    """Accept ColorStop instances or `{"t": ..., "color": ...}` mappings, keeping order."""
    if stops is None:
        return ()
    out: list[ColorStop] = []
    for stop in stops:
        if isinstance(stop, ColorStop):
            out.append(stop)
        else:
            out.append(ColorStop(t=float(stop["t"]), color=str(stop["color"])))
    return tuple(out)


def parse_color(value: str) -> RGBA:
    """Parse hex, `rgb()`/`rgba()` or a CSS color name into RGBA bytes."""
    text = value.strip()
    m = _HEX_COLOR.match(text)
    if m:
        digits = m.group(1)
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        if len(digits) == 6:
            digits += "ff"
        return tuple(int(digits[i : i + 2], 16) for i in range(0, 8, 2))  # type: ignore[return-value]

    m = _RGB_FUNC.match(text.lower())
    if m:
        parts = [p.strip() for p in m.group(1).split(",")]
        if len(parts) not in (3, 4):
            raise ColorParseError(f"expected 3 or 4 components: {value!r}")
        try:
            r, g, b = (int(round(float(p))) for p in parts[:3])
            a = float(parts[3]) if len(parts) == 4 else 1.0
        except ValueError as exc:
            raise ColorParseError(f"non-numeric color component: {value!r}") from exc
        return (_clamp_byte(r), _clamp_byte(g), _clamp_byte(b), _clamp_byte(int(round(a * 255))))

    name = text.lower()
    if name == "transparent":
        return (0, 0, 0, 0)
    if name in ImageColor.colormap:
        r, g, b = ImageColor.getrgb(name)[:3]
        return (r, g, b, 255)

    raise ColorParseError(f"unsupported color: {value!r}")


def pack_rgba(color: RGBA) -> int:
    """Pack RGBA into one little-endian 32-bit pixel (R in the lowest byte)."""
    r, g, b, a = color
    return (a << 24) | (b << 16) | (g << 8) | r


def unpack_rgba(pixel: int) -> RGBA:
    return (pixel & 0xFF, (pixel >> 8) & 0xFF, (pixel >> 16) & 0xFF, (pixel >> 24) & 0xFF)


def sample_gradient(stops: Iterable[tuple[float, RGBA]], positions: np.ndarray) -> np.ndarray:
    """Linearly interpolate RGBA colors at `positions`, clamping to the end stops.

    Stops must be sorted by offset. Returns a `(len(positions), 4)` uint8 array,
    fully transparent when no stops are given.
    """
    stop_list = list(stops)
    out = np.zeros((positions.size, 4), dtype=np.uint8)
    if not stop_list:
        return out
    offsets = np.asarray([s[0] for s in stop_list], dtype=np.float64)
    colors = np.asarray([s[1] for s in stop_list], dtype=np.float64)
    for channel in range(4):
        out[:, channel] = np.clip(np.rint(np.interp(positions, offsets, colors[:, channel])), 0, 255)
    return out


class ColorMap:
    """Discretized color lookup over [0, 1] built from ordered color stops."""

    def __init__(self, buckets: int, stops: Iterable[ColorStop | Mapping[str, Any]] | None) -> None:
        if buckets <= 0:
            raise ValueError("buckets must be > 0")
        self.buckets = buckets
        self.stops = coerce_color_stops(stops)
        parsed = sorted(((float(s.t), parse_color(s.color)) for s in self.stops), key=lambda s: s[0])
        centers = (np.arange(buckets, dtype=np.float64) + 0.5) / buckets
        table = sample_gradient(parsed, centers).astype(np.uint32)
        self.table = (table[:, 3] << 24) | (table[:, 2] << 16) | (table[:, 1] << 8) | table[:, 0]
        self.empty = not self.stops

    def interpolate(self, value: float | np.ndarray) -> int | np.ndarray:
        """Map normalized samples to packed pixels; NaN and empty maps give transparent 0."""
        arr = np.asarray(value, dtype=np.float64)
        if self.empty:
            out = np.zeros(arr.shape, dtype=np.uint32)
        else:
            finite = np.isfinite(arr)
            idx = np.clip(np.floor(np.where(finite, arr, 0.0) * self.buckets), 0, self.buckets - 1).astype(np.intp)
            out = np.where(finite, self.table[idx], np.uint32(0)).astype(np.uint32)
        if out.ndim == 0:
            return int(out)
        return out


def _clamp_byte(v: int) -> int:
    return max(0, min(255, int(v)))
