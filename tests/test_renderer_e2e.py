from __future__ import annotations

import unittest

import numpy as np

from topo_corrplot import CorrelationPlotData, CorrelationPlotRenderer, NoData, PlotProps, PlotState, Ready
from topo_corrplot.process import DrawProcess
from topo_corrplot.raster.surface import Canvas, RasterContext
from topo_corrplot.renderer import create_plot_process


GRAYSCALE = [{"t": 0, "color": "#000"}, {"t": 1, "color": "#fff"}]


class _RecordingContext(RasterContext):
    def __init__(self, canvas: Canvas) -> None:
        super().__init__(canvas)
        self.texts: list[str] = []
        self.clears = 0

    def fill_text(self, text: str, x: float, y: float) -> None:
        self.texts.append(text)
        super().fill_text(text, x, y)

    def clear_rect(self, x: float, y: float, width: float, height: float) -> None:
        self.clears += 1
        super().clear_rect(x, y, width, height)


class _RecordingCanvas(Canvas):
    def get_context(self) -> _RecordingContext:
        return _RecordingContext(self)


def _scalp_data() -> CorrelationPlotData:
    positions = [(-0.6, -0.4), (0.6, -0.4), (0.0, 0.0), (-0.5, 0.5), (0.5, 0.5), (0.0, -0.8)]
    frequencies = [5.0, 10.0, 20.0]
    values = [
        [-1.0, 2.0, 0.0],
        [0.5, -1.0, 1.0],
        [1.0, 0.0, 2.0],
        [0.0, 1.5, -1.0],
        [2.0, 0.5, 0.5],
        [-0.5, -0.5, 1.5],
    ]
    return CorrelationPlotData.from_arrays(positions, frequencies, values, units="µV", label="Ch1", extent=(-1.0, 2.0))


def _mounted(props: PlotProps) -> tuple[CorrelationPlotRenderer, _RecordingCanvas]:
    canvas = _RecordingCanvas(1, 1, client_width=300.0, client_height=300.0)
    renderer = CorrelationPlotRenderer()
    renderer.set_refs(canvas=canvas)
    renderer.mount(props)
    return renderer, canvas


class CorrelationPlotRendererTests(unittest.TestCase):
    def test_end_to_end_render(self) -> None:
        props = PlotProps.create(GRAYSCALE, cursor_freq=10, plot_state=PlotState(data=_scalp_data()))
        renderer, canvas = _mounted(props)
        ctx = renderer.plot_context.ctx

        self.assertEqual((canvas.width, canvas.height), (300, 300))
        self.assertEqual(ctx.texts, ["2", "-1", "µV", "Ch1 10 Hz"])
        # Heatmap pixels are opaque inside the disc.
        self.assertEqual(int(canvas.pixels[115, 100, 3]), 255)
        self.assertGreater(int(np.count_nonzero(canvas.pixels[60:170, 50:150, 3] == 255)), 5000)

    def test_update_clears_and_redraws_without_reinitializing(self) -> None:
        data = _scalp_data()
        props = PlotProps.create(GRAYSCALE, cursor_freq=10.0, plot_state=PlotState(data=data))
        inits: list[int] = []

        def factory() -> DrawProcess:
            counter = DrawProcess(init=lambda state, plot_context, p: inits.append(1))
            return counter.chain(create_plot_process())

        renderer = CorrelationPlotRenderer(process_factory=factory)
        canvas = _RecordingCanvas(300, 300)
        renderer.set_refs(canvas=canvas)
        renderer.mount(props)
        ctx = renderer.plot_context.ctx
        before = canvas.pixels.copy()

        renderer.receive_props(props)
        self.assertEqual(inits, [1])
        self.assertEqual(ctx.clears, 1)
        self.assertTrue(np.array_equal(before, canvas.pixels))
        self.assertEqual(ctx.texts[-1], "Ch1 10 Hz")

        renderer.receive_props(props.with_frequency(20.0))
        self.assertEqual(ctx.texts[-1], "Ch1 20 Hz")
        self.assertFalse(np.array_equal(before, canvas.pixels))

    def test_render_dispatches_no_data(self) -> None:
        renderer = CorrelationPlotRenderer()
        renderer.set_refs(canvas=_RecordingCanvas(300, 300))
        view = renderer.render(PlotProps.create(GRAYSCALE, cursor_freq=10.0))
        self.assertIsInstance(view, NoData)
        self.assertEqual(view.message, "No data currently set.")
        self.assertFalse(renderer.mounted)

    def test_render_mounts_then_updates(self) -> None:
        data = _scalp_data()
        renderer = CorrelationPlotRenderer()
        renderer.set_refs(canvas=_RecordingCanvas(300, 300))
        props = PlotProps.create(GRAYSCALE, plot_state=PlotState(data=data))
        view = renderer.render(props)
        self.assertIsInstance(view, Ready)
        self.assertIs(view.data, data)
        self.assertTrue(renderer.mounted)
        renderer.render(props.with_frequency(5.0))
        self.assertEqual(renderer.plot_context.ctx.clears, 1)
        self.assertEqual(renderer.plot_context.ctx.texts[-1], "Ch1 5 Hz")

    def test_no_data_after_mount_unmounts(self) -> None:
        renderer = CorrelationPlotRenderer()
        renderer.set_refs(canvas=_RecordingCanvas(300, 300))
        renderer.render(PlotProps.create(GRAYSCALE, plot_state=PlotState(data=_scalp_data())))
        renderer.render(PlotProps.create(GRAYSCALE))
        self.assertFalse(renderer.mounted)

    def test_missing_frequency_draws_overlays_only(self) -> None:
        props = PlotProps.create(GRAYSCALE, plot_state=PlotState(data=_scalp_data()))
        renderer, canvas = _mounted(props)
        self.assertEqual(renderer.plot_context.ctx.texts[-1], "Ch1")
        self.assertEqual(int(canvas.pixels[115, 100, 3]), 0)

    def test_mount_requires_canvas_ref(self) -> None:
        with self.assertRaises(RuntimeError):
            CorrelationPlotRenderer().mount(PlotProps())

    def test_update_requires_mount(self) -> None:
        renderer = CorrelationPlotRenderer()
        renderer.set_refs(canvas=Canvas(10, 10))
        with self.assertRaises(RuntimeError):
            renderer.receive_props(PlotProps())

    def test_unknown_ref_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            CorrelationPlotRenderer().set_refs(surface=Canvas(1, 1))


if __name__ == "__main__":
    unittest.main()
