from __future__ import annotations

from dataclasses import dataclass

from topo_corrplot.formatting import format_rounded
from topo_corrplot.geometry import Disc, compute_disc
from topo_corrplot.process import DrawProcess
from topo_corrplot.props import PlotContext, PlotProps
from topo_corrplot.style import PlotStyle


@dataclass(frozen=True)
class ColorbarRect:
    left: float
    top: float
    width: float
    height: float

    @property
    def bottom(self) -> float:
        return self.top + self.height


def gradient_stop_offsets(count: int) -> list[float]:
    """Stop midpoints: stop i of `count` sits at (i + 0.5) / count."""
    return [(i + 0.5) / count for i in range(count)]


def colorbar_rect(disc: Disc, style: PlotStyle) -> ColorbarRect:
    x0 = disc.center_x + disc.radius
    y0 = disc.center_y - disc.radius
    return ColorbarRect(
        left=x0 + style.colorbar_left,
        top=y0 + style.colorbar_top,
        width=style.colorbar_width,
        height=2.0 * disc.radius,
    )


def _loop(state: object, plot_context: PlotContext, props: PlotProps) -> None:
    canvas = plot_context.canvas
    ctx = plot_context.ctx
    style = props.style
    rect = colorbar_rect(compute_disc(canvas.width, canvas.height), style)

    ctx.begin_path()
    # Low values at the bottom, high values at the top.
    grad = ctx.create_linear_gradient(rect.left, rect.bottom, rect.left, rect.top)
    for stop, offset in zip(props.color_map, gradient_stop_offsets(len(props.color_map))):
        grad.add_color_stop(offset, stop.color)
    ctx.fill_style = grad
    ctx.fill_rect(rect.left, rect.top, rect.width, rect.height)
    ctx.stroke_style = style.stroke_color
    ctx.line_width = style.line_width
    ctx.stroke_rect(rect.left, rect.top, rect.width, rect.height)

    data = props.data
    lo, hi = data.extent
    ctx.font_family = style.font_family
    ctx.font_size_px = style.font_size_px
    ctx.fill_style = style.text_color
    label_x = rect.left + rect.width + style.colorbar_label_gap
    ctx.fill_text(format_rounded(hi, style.extent_decimals), label_x, rect.top + 15)
    ctx.fill_text(format_rounded(lo, style.extent_decimals), label_x, rect.bottom)
    ctx.fill_text(f"{data.units}", rect.left, rect.bottom + style.colorbar_units_gap)


def create_colorbar_process() -> DrawProcess:
    return DrawProcess(loop=_loop, name="colorbar")
