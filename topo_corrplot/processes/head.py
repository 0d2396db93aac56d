from __future__ import annotations

import math

from topo_corrplot.geometry import compute_disc
from topo_corrplot.process import DrawProcess
from topo_corrplot.props import PlotContext, PlotProps


def _loop(state: object, plot_context: PlotContext, props: PlotProps) -> None:
    canvas = plot_context.canvas
    ctx = plot_context.ctx
    style = props.style
    disc = compute_disc(canvas.width, canvas.height)
    x, y, r = disc.center_x, disc.center_y, disc.radius
    ctx.stroke_style = style.stroke_color
    ctx.line_width = style.line_width
    ctx.begin_path()
    ctx.arc(x, y, r, 0.0, 2.0 * math.pi)
    # nose
    ctx.move_to(x - style.nose_half_width, y - r)
    ctx.line_to(x, y - r - style.nose_height)
    ctx.line_to(x + style.nose_half_width, y - r)
    ctx.stroke()


def create_head_outline_process() -> DrawProcess:
    return DrawProcess(loop=_loop, name="head-outline")
