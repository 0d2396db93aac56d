from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Iterable, Mapping, TypeAlias

from topo_corrplot.colors import ColorStop, coerce_color_stops
from topo_corrplot.raster.surface import Canvas, RasterContext
from topo_corrplot.series import DataSeries
from topo_corrplot.style import DEFAULT_STYLE, PlotStyle


NO_DATA_MESSAGE = "No data currently set."


@dataclass(frozen=True)
class PlotState:
    data: DataSeries


@dataclass(frozen=True)
class PlotProps:
    color_map: tuple[ColorStop, ...] = ()
    cursor_freq: float | None = None
    set_cursor_freq: Callable[[float], None] | None = None
    plot_state: PlotState | None = None
    style: PlotStyle = field(default=DEFAULT_STYLE)

    @classmethod
    def create(
        cls,
        color_map: Iterable[ColorStop | Mapping[str, Any]] | None = None,
        **kwargs: Any,
    ) -> "PlotProps":
        return cls(color_map=coerce_color_stops(color_map), **kwargs)

    @property
    def data(self) -> DataSeries:
        if self.plot_state is None:
            raise RuntimeError("plot props carry no plot state")
        return self.plot_state.data

    def with_frequency(self, cursor_freq: float | None) -> "PlotProps":
        return replace(self, cursor_freq=cursor_freq)


@dataclass
class PlotContext:
    """Surface references handed over by the host before mount."""

    canvas: Canvas | None = None
    ctx: RasterContext | None = None

    def set_refs(self, **refs: Any) -> None:
        for key, value in refs.items():
            if key not in ("canvas", "ctx"):
                raise ValueError(f"Unknown plot ref: {key}")
            setattr(self, key, value)


@dataclass(frozen=True)
class NoData:
    message: str = NO_DATA_MESSAGE


@dataclass(frozen=True)
class Ready:
    data: DataSeries


PlotView: TypeAlias = NoData | Ready


def resolve_view(props: PlotProps) -> PlotView:
    if props.plot_state is None:
        return NoData()
    return Ready(props.plot_state.data)
