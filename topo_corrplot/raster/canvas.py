from __future__ import annotations

import numpy as np

from topo_corrplot.colors import RGBA


TRANSPARENT: RGBA = (0, 0, 0, 0)


def new_canvas(width: int, height: int, color: RGBA = TRANSPARENT) -> np.ndarray:
    canvas = np.zeros((max(0, height), max(0, width), 4), dtype=np.uint8)
    canvas[:, :] = np.asarray(color, dtype=np.uint8)
    return canvas


def put_image(dst: np.ndarray, src: np.ndarray, x0: int = 0, y0: int = 0) -> None:
    """Copy `src` into `dst` at (x0, y0) replacing pixels, clipped to `dst`."""
    h, w, _ = src.shape
    dx0 = max(0, x0)
    dy0 = max(0, y0)
    dx1 = min(dst.shape[1], x0 + w)
    dy1 = min(dst.shape[0], y0 + h)
    if dx0 >= dx1 or dy0 >= dy1:
        return
    dst[dy0:dy1, dx0:dx1] = src[dy0 - y0 : dy1 - y0, dx0 - x0 : dx1 - x0]


def clear_rect(dst: np.ndarray, x: int, y: int, width: int, height: int) -> None:
    xa = max(0, min(x, x + width))
    xb = min(dst.shape[1], max(x, x + width))
    ya = max(0, min(y, y + height))
    yb = min(dst.shape[0], max(y, y + height))
    if xa >= xb or ya >= yb:
        return
    dst[ya:yb, xa:xb] = 0


def _blend(current: np.ndarray, color: RGBA | np.ndarray) -> np.ndarray:
    rgba = np.asarray(color, dtype=np.float32)
    a = rgba[..., 3:4] / 255.0
    src = rgba[..., 0:3]
    dst_rgb = current[..., :3].astype(np.float32)
    dst_a = current[..., 3:4].astype(np.float32) / 255.0
    out_a = a + dst_a * (1.0 - a)
    safe_a = np.where(out_a > 1e-6, out_a, 1.0)
    out_rgb = (src * a + dst_rgb * dst_a * (1.0 - a)) / safe_a
    out = np.empty_like(current)
    out[..., :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    out[..., 3] = np.clip(out_a[..., 0] * 255.0, 0, 255).astype(np.uint8)
    return out


def draw_pixel(dst: np.ndarray, x: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0] or x < 0 or x >= dst.shape[1]:
        return
    dst[y, x] = _blend(dst[y, x], color)


def draw_hline(dst: np.ndarray, x0: int, x1: int, y: int, color: RGBA) -> None:
    if y < 0 or y >= dst.shape[0]:
        return
    xa = max(0, min(x0, x1))
    xb = min(dst.shape[1] - 1, max(x0, x1))
    if xa > xb:
        return
    dst[y, xa : xb + 1] = _blend(dst[y, xa : xb + 1], color)


def draw_vline(dst: np.ndarray, x: int, y0: int, y1: int, color: RGBA) -> None:
    if x < 0 or x >= dst.shape[1]:
        return
    ya = max(0, min(y0, y1))
    yb = min(dst.shape[0] - 1, max(y0, y1))
    if ya > yb:
        return
    dst[ya : yb + 1, x] = _blend(dst[ya : yb + 1, x], color)


def blend_patch(dst: np.ndarray, x: int, y: int, colors: np.ndarray) -> None:
    """Blend an `(h, w, 4)` array of per-pixel colors over `dst` at (x, y), clipped."""
    h, w, _ = colors.shape
    dx0 = max(0, x)
    dy0 = max(0, y)
    dx1 = min(dst.shape[1], x + w)
    dy1 = min(dst.shape[0], y + h)
    if dx0 >= dx1 or dy0 >= dy1:
        return
    patch = colors[dy0 - y : dy1 - y, dx0 - x : dx1 - x]
    dst[dy0:dy1, dx0:dx1] = _blend(dst[dy0:dy1, dx0:dx1], patch)
