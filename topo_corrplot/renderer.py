from __future__ import annotations

import logging
from typing import Any, Callable

from topo_corrplot.process import DrawProcess, compose
from topo_corrplot.processes import (
    create_colorbar_process,
    create_head_outline_process,
    create_heatmap_process,
    create_label_process,
)
from topo_corrplot.props import NoData, PlotContext, PlotProps, PlotView, resolve_view


LOGGER = logging.getLogger(__name__)


def create_plot_process() -> DrawProcess:
    """Heatmap first so its blit never covers the vector strokes drawn after it."""
    return compose(
        create_heatmap_process(),
        create_head_outline_process(),
        create_colorbar_process(),
        create_label_process(),
    )


class CorrelationPlotRenderer:
    """Drives one plot process chain over a host-provided canvas.

    The host assigns surface references through `set_refs`, calls `mount`
    once and `receive_props` on every later prop change. `render` wraps both
    behind the NoData/Ready dispatch.
    """

    def __init__(self, process_factory: Callable[[], DrawProcess] = create_plot_process) -> None:
        self._process_factory = process_factory
        self.plot_context = PlotContext()
        self.process: DrawProcess | None = None

    @property
    def mounted(self) -> bool:
        return self.process is not None

    def set_refs(self, **refs: Any) -> None:
        self.plot_context.set_refs(**refs)

    def mount(self, props: PlotProps) -> None:
        canvas = self.plot_context.canvas
        if canvas is None:
            raise RuntimeError("canvas ref must be set before mount")
        width, height = canvas.get_bounding_client_rect()
        canvas.resize(int(width), int(height))
        self.plot_context.ctx = canvas.get_context()
        LOGGER.debug("mounting correlation plot on %dx%d canvas", canvas.width, canvas.height)
        self.process = self._process_factory().initialize(self.plot_context, props).update(self.plot_context, props)

    def receive_props(self, props: PlotProps) -> None:
        if self.process is None:
            raise RuntimeError("renderer is not mounted")
        canvas = self.plot_context.canvas
        self.plot_context.ctx.clear_rect(0, 0, canvas.width, canvas.height)
        self.process.update(self.plot_context, props)

    def unmount(self) -> None:
        self.process = None
        self.plot_context.ctx = None

    def render(self, props: PlotProps) -> PlotView:
        view = resolve_view(props)
        if isinstance(view, NoData):
            if self.mounted:
                self.unmount()
            return view
        if self.mounted:
            self.receive_props(props)
        else:
            self.mount(props)
        return view
