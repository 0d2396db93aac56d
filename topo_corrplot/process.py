from __future__ import annotations

from functools import partial, reduce
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, Callable

if TYPE_CHECKING:
    from topo_corrplot.props import PlotContext, PlotProps


Handler = Callable[["PlotContext", "PlotProps"], None]
StateHandler = Callable[[Any, "PlotContext", "PlotProps"], None]


class DrawProcess:
    """Composable drawing step with private state.

    `init` runs once per mount, `loop` on every redraw. Both receive the
    process' own state object first, followed by the plot context and props.
    Chained processes keep their handlers bound to their own states.
    """

    def __init__(
        self,
        init: StateHandler | None = None,
        loop: StateHandler | None = None,
        *,
        state: Any = None,
        name: str | None = None,
    ) -> None:
        self.state = SimpleNamespace() if state is None else state
        self.name = name
        self._init_handlers: tuple[Handler, ...] = (partial(init, self.state),) if init is not None else ()
        self._update_handlers: tuple[Handler, ...] = (partial(loop, self.state),) if loop is not None else ()

    @property
    def init_handlers(self) -> tuple[Handler, ...]:
        return self._init_handlers

    @property
    def update_handlers(self) -> tuple[Handler, ...]:
        return self._update_handlers

    def initialize(self, plot_context: PlotContext, props: PlotProps) -> DrawProcess:
        for handler in self._init_handlers:
            handler(plot_context, props)
        return self

    def update(self, plot_context: PlotContext, props: PlotProps) -> DrawProcess:
        for handler in self._update_handlers:
            handler(plot_context, props)
        return self

    def chain(self, other: DrawProcess) -> DrawProcess:
        compound = DrawProcess(name=_join_names(self.name, other.name))
        compound._init_handlers = self._init_handlers + other._init_handlers
        compound._update_handlers = self._update_handlers + other._update_handlers
        return compound

    def __repr__(self) -> str:
        return (
            f"DrawProcess(name={self.name!r}, init_handlers={len(self._init_handlers)}, "
            f"update_handlers={len(self._update_handlers)})"
        )


def compose(*processes: DrawProcess) -> DrawProcess:
    """Chain processes left to right; an empty call gives a no-op process."""
    if not processes:
        return DrawProcess()
    return reduce(lambda acc, process: acc.chain(process), processes)


def _join_names(a: str | None, b: str | None) -> str | None:
    if a is None:
        return b
    if b is None:
        return a
    return f"{a}+{b}"
