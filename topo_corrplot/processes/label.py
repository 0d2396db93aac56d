from __future__ import annotations

from topo_corrplot.formatting import format_rounded
from topo_corrplot.geometry import compute_disc
from topo_corrplot.process import DrawProcess
from topo_corrplot.props import PlotContext, PlotProps


def label_text(props: PlotProps) -> str:
    style = props.style
    text = f"{props.data.label}"
    if props.cursor_freq is not None:
        text += f" {format_rounded(props.cursor_freq, style.frequency_decimals)} {style.frequency_unit}"
    return text


def _loop(state: object, plot_context: PlotContext, props: PlotProps) -> None:
    canvas = plot_context.canvas
    ctx = plot_context.ctx
    style = props.style
    disc = compute_disc(canvas.width, canvas.height)
    ctx.font_family = style.font_family
    ctx.font_size_px = style.font_size_px
    ctx.fill_style = style.text_color
    ctx.fill_text(
        label_text(props),
        disc.center_x - disc.radius + style.label_dx,
        disc.center_y + disc.radius + style.label_dy,
    )


def create_label_process() -> DrawProcess:
    return DrawProcess(loop=_loop, name="label")
