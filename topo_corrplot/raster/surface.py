from __future__ import annotations

import math

import numpy as np

from topo_corrplot.colors import parse_color, sample_gradient
from topo_corrplot.raster.canvas import (
    RGBA,
    blend_patch,
    clear_rect,
    draw_hline,
    draw_vline,
    new_canvas,
    put_image,
)
from topo_corrplot.raster.draw_lines import draw_polyline
from topo_corrplot.raster.draw_text import DEFAULT_FONT_FAMILY, DEFAULT_FONT_SIZE_PX, draw_text


class LinearGradient:
    """Gradient along the line (x0, y0) -> (x1, y1); colors clamp past either end."""

    def __init__(self, x0: float, y0: float, x1: float, y1: float) -> None:
        self.x0 = x0
        self.y0 = y0
        self.x1 = x1
        self.y1 = y1
        self.stops: list[tuple[float, RGBA]] = []

    def add_color_stop(self, offset: float, color: str) -> None:
        if not 0.0 <= offset <= 1.0:
            raise ValueError("gradient stop offset must be within [0, 1]")
        self.stops.append((float(offset), parse_color(color)))
        self.stops.sort(key=lambda s: s[0])

    def colors_at(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        dx = self.x1 - self.x0
        dy = self.y1 - self.y0
        length_sq = dx * dx + dy * dy
        if length_sq == 0.0:
            # A zero-length gradient paints nothing.
            return np.zeros(xs.shape + (4,), dtype=np.uint8)
        t = ((xs - self.x0) * dx + (ys - self.y0) * dy) / length_sq
        return sample_gradient(self.stops, t.ravel()).reshape(xs.shape + (4,))


FillStyle = RGBA | LinearGradient


class RasterContext:
    """Small canvas-2D style drawing context over a Canvas' RGBA pixels."""

    def __init__(self, canvas: "Canvas") -> None:
        self.canvas = canvas
        self.fill_style: FillStyle = (0, 0, 0, 255)
        self.stroke_style: RGBA = (0, 0, 0, 255)
        self.line_width = 1
        self.font_family = DEFAULT_FONT_FAMILY
        self.font_size_px = DEFAULT_FONT_SIZE_PX
        self._subpaths: list[list[tuple[float, float]]] = []

    @property
    def pixels(self) -> np.ndarray:
        return self.canvas.pixels

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        clear_rect(self.pixels, int(math.floor(x)), int(math.floor(y)), int(math.ceil(width)), int(math.ceil(height)))

    def put_image_data(self, image: np.ndarray, dx: float, dy: float) -> None:
        # Offsets truncate toward zero, pixels are replaced without blending.
        put_image(self.pixels, image, int(dx), int(dy))

    def begin_path(self) -> None:
        self._subpaths = []

    def move_to(self, x: float, y: float) -> None:
        self._subpaths.append([(x, y)])

    def line_to(self, x: float, y: float) -> None:
        if not self._subpaths:
            self._subpaths.append([(x, y)])
            return
        self._subpaths[-1].append((x, y))

    def arc(self, x: float, y: float, radius: float, start: float, end: float) -> None:
        if radius < 0:
            raise ValueError("arc radius must be >= 0")
        sweep = end - start
        n = max(8, int(math.ceil(abs(sweep) * max(radius, 0.0))))
        theta = np.linspace(start, end, n + 1, dtype=np.float64)
        points = list(zip((x + radius * np.cos(theta)).tolist(), (y + radius * np.sin(theta)).tolist()))
        if self._subpaths:
            self._subpaths[-1].extend(points)
        else:
            self._subpaths.append(points)

    def stroke(self) -> None:
        for subpath in self._subpaths:
            if len(subpath) < 2:
                continue
            xs = np.asarray([p[0] for p in subpath], dtype=np.float64)
            ys = np.asarray([p[1] for p in subpath], dtype=np.float64)
            draw_polyline(self.pixels, xs, ys, color=self.stroke_style, width=self.line_width)

    def create_linear_gradient(self, x0: float, y0: float, x1: float, y1: float) -> LinearGradient:
        return LinearGradient(x0, y0, x1, y1)

    def fill_rect(self, x: float, y: float, width: float, height: float) -> None:
        x0, y0, x1, y1 = _rect_pixels(x, y, width, height)
        if x0 >= x1 or y0 >= y1:
            return
        ys, xs = np.mgrid[y0:y1, x0:x1].astype(np.float64)
        if isinstance(self.fill_style, LinearGradient):
            colors = self.fill_style.colors_at(xs + 0.5, ys + 0.5)
        else:
            colors = np.broadcast_to(np.asarray(self.fill_style, dtype=np.uint8), xs.shape + (4,))
        blend_patch(self.pixels, x0, y0, colors)

    def stroke_rect(self, x: float, y: float, width: float, height: float) -> None:
        x0, y0, x1, y1 = _rect_pixels(x, y, width, height)
        if x0 >= x1 or y0 >= y1:
            return
        color = self.stroke_style
        draw_hline(self.pixels, x0, x1 - 1, y0, color)
        if y1 - 1 > y0:
            draw_hline(self.pixels, x0, x1 - 1, y1 - 1, color)
        if y1 - 2 > y0:
            draw_vline(self.pixels, x0, y0 + 1, y1 - 2, color)
            if x1 - 1 > x0:
                draw_vline(self.pixels, x1 - 1, y0 + 1, y1 - 2, color)

    def fill_text(self, text: str, x: float, y: float) -> None:
        color = self.fill_style if not isinstance(self.fill_style, LinearGradient) else (0, 0, 0, 255)
        draw_text(
            self.pixels,
            int(round(x)),
            int(round(y)),
            text,
            color,
            font_family=self.font_family,
            font_size_px=self.font_size_px,
        )


class Canvas:
    """RGBA pixel surface with a separate on-screen (client) size, like an HTML canvas."""

    def __init__(
        self,
        width: int,
        height: int,
        *,
        client_width: float | None = None,
        client_height: float | None = None,
    ) -> None:
        self.pixels = new_canvas(width, height)
        self.client_width = float(width if client_width is None else client_width)
        self.client_height = float(height if client_height is None else client_height)

    @property
    def width(self) -> int:
        return int(self.pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self.pixels.shape[0])

    def resize(self, width: int, height: int) -> None:
        # Resizing discards the current content.
        self.pixels = new_canvas(int(width), int(height))

    def get_bounding_client_rect(self) -> tuple[float, float]:
        return (self.client_width, self.client_height)

    def get_context(self) -> RasterContext:
        return RasterContext(self)


def _rect_pixels(x: float, y: float, width: float, height: float) -> tuple[int, int, int, int]:
    xa, xb = sorted((x, x + width))
    ya, yb = sorted((y, y + height))
    return (int(round(xa)), int(round(ya)), int(round(xb)), int(round(yb)))
