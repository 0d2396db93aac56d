from topo_corrplot.colors import ColorMap, ColorStop, parse_color
from topo_corrplot.errors import ColorParseError, CorrelationPlotError, PlotDataError
from topo_corrplot.geometry import Disc, HeatmapBox, compute_disc, heatmap_box
from topo_corrplot.process import DrawProcess, compose
from topo_corrplot.props import NoData, PlotContext, PlotProps, PlotState, PlotView, Ready, resolve_view
from topo_corrplot.raster import Canvas, RasterContext
from topo_corrplot.renderer import CorrelationPlotRenderer, create_plot_process
from topo_corrplot.series import CorrelationPlotData, DataSeries
from topo_corrplot.style import DEFAULT_STYLE, PlotStyle, resolve_plot_style

__all__ = [
    "Canvas",
    "ColorMap",
    "ColorParseError",
    "ColorStop",
    "CorrelationPlotData",
    "CorrelationPlotError",
    "CorrelationPlotRenderer",
    "DEFAULT_STYLE",
    "DataSeries",
    "Disc",
    "DrawProcess",
    "HeatmapBox",
    "NoData",
    "PlotContext",
    "PlotDataError",
    "PlotProps",
    "PlotState",
    "PlotStyle",
    "PlotView",
    "RasterContext",
    "Ready",
    "compose",
    "compute_disc",
    "create_plot_process",
    "heatmap_box",
    "parse_color",
    "resolve_plot_style",
    "resolve_view",
]
