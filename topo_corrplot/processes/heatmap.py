from __future__ import annotations

from dataclasses import dataclass
import logging

import numpy as np

from topo_corrplot.colors import ColorMap
from topo_corrplot.geometry import HeatmapBox, compute_disc, heatmap_box
from topo_corrplot.process import DrawProcess
from topo_corrplot.props import PlotContext, PlotProps


LOGGER = logging.getLogger(__name__)


@dataclass
class HeatmapState:
    hbox: HeatmapBox | None = None
    data_buffer: np.ndarray | None = None
    image_data: np.ndarray | None = None
    color_map: ColorMap | None = None
    frequency: float | None = None


def pixel_disc_coordinates(
    hbox: HeatmapBox, center_x: float, center_y: float, radius: float
) -> tuple[np.ndarray, np.ndarray]:
    """Normalized disc coordinates of every buffer index.

    Indices advance along x modulo `hbox.height` and along y by whole
    multiples of `hbox.height`; the box is square so this matches the
    byte view's row layout.
    """
    i = np.arange(hbox.size, dtype=np.int64)
    px = (hbox.left + (i % hbox.height) - center_x) / radius
    py = (hbox.top + (i // hbox.height) - center_y) / radius
    return px, py


def _init(state: HeatmapState, plot_context: PlotContext, props: PlotProps) -> None:
    canvas = plot_context.canvas
    disc = compute_disc(canvas.width, canvas.height)
    state.hbox = heatmap_box(disc)
    state.data_buffer = np.zeros(state.hbox.size, dtype="<u4")
    state.image_data = state.data_buffer.view(np.uint8).reshape(state.hbox.height, state.hbox.width, 4)
    state.color_map = ColorMap(props.style.color_buckets, props.color_map)
    state.frequency = None
    if disc.degenerate:
        LOGGER.warning("degenerate plot surface %dx%d; heatmap disabled", canvas.width, canvas.height)


def _loop(state: HeatmapState, plot_context: PlotContext, props: PlotProps) -> None:
    if props.cursor_freq is None:
        return
    ctx = plot_context.ctx
    hbox = state.hbox
    if state.frequency is not None and state.frequency == props.cursor_freq:
        LOGGER.debug("heatmap cache hit at %s", state.frequency)
        ctx.put_image_data(state.image_data, hbox.left, hbox.top)
        return

    state.frequency = props.cursor_freq
    canvas = plot_context.canvas
    disc = compute_disc(canvas.width, canvas.height)
    if not disc.degenerate:
        LOGGER.debug("heatmap recompute at %s", state.frequency)
        px, py = pixel_disc_coordinates(hbox, disc.center_x, disc.center_y, disc.radius)
        inside = np.flatnonzero(px * px + py * py < 1.0)
        if inside.size:
            data = props.data
            size = props.style.neighborhood_size
            frequency = state.frequency
            samples = np.fromiter(
                (data.interpolate(size, frequency, (x, y)) for x, y in zip(px[inside].tolist(), py[inside].tolist())),
                dtype=np.float64,
                count=inside.size,
            )
            state.data_buffer[inside] = state.color_map.interpolate(samples)
    ctx.put_image_data(state.image_data, hbox.left, hbox.top)


def create_heatmap_process() -> DrawProcess:
    return DrawProcess(init=_init, loop=_loop, state=HeatmapState(), name="heatmap")
