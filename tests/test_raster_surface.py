from __future__ import annotations

import math
import unittest

import numpy as np

from topo_corrplot.raster import Canvas, draw_text, new_canvas, put_image
from topo_corrplot.raster.surface import LinearGradient


class RasterPrimitiveTests(unittest.TestCase):
    def test_new_canvas_defaults_to_transparent(self) -> None:
        canvas = new_canvas(4, 3)
        self.assertEqual(canvas.shape, (3, 4, 4))
        self.assertFalse(np.any(canvas))

    def test_put_image_replaces_and_clips(self) -> None:
        dst = new_canvas(4, 4, color=(9, 9, 9, 255))
        src = np.zeros((3, 3, 4), dtype=np.uint8)
        src[:, :] = (1, 2, 3, 0)
        put_image(dst, src, -1, 2)
        # Transparent source pixels still replace the destination.
        self.assertEqual(dst[2, 0].tolist(), [1, 2, 3, 0])
        self.assertEqual(dst[3, 1].tolist(), [1, 2, 3, 0])
        self.assertEqual(dst[1, 0].tolist(), [9, 9, 9, 255])
        self.assertEqual(dst[2, 2].tolist(), [9, 9, 9, 255])

    def test_text_renderer_draws_coverage(self) -> None:
        canvas = new_canvas(120, 40)
        draw_text(canvas, 4, 28, "Ch1 10 Hz", (0, 0, 0, 255))
        self.assertTrue(np.any(canvas[:, :, 3] > 0))
        # No descenders, so nothing lands clearly below the baseline.
        self.assertFalse(np.any(canvas[31:, :, 3]))


class RasterContextTests(unittest.TestCase):
    def test_clear_rect_zeroes_region(self) -> None:
        canvas = Canvas(10, 10)
        canvas.pixels[:] = 200
        ctx = canvas.get_context()
        ctx.clear_rect(0, 0, canvas.width, canvas.height)
        self.assertFalse(np.any(canvas.pixels))

    def test_stroke_circle_touches_circumference_only(self) -> None:
        canvas = Canvas(60, 60)
        ctx = canvas.get_context()
        ctx.begin_path()
        ctx.arc(30, 30, 20, 0.0, 2.0 * math.pi)
        ctx.stroke()
        self.assertEqual(int(canvas.pixels[30, 50, 3]), 255)
        self.assertEqual(int(canvas.pixels[10, 30, 3]), 255)
        self.assertEqual(int(canvas.pixels[30, 30, 3]), 0)

    def test_move_to_starts_new_subpath(self) -> None:
        canvas = Canvas(20, 20)
        ctx = canvas.get_context()
        ctx.begin_path()
        ctx.move_to(2, 2)
        ctx.line_to(2, 10)
        ctx.move_to(15, 2)
        ctx.line_to(15, 10)
        ctx.stroke()
        self.assertEqual(int(canvas.pixels[5, 2, 3]), 255)
        self.assertEqual(int(canvas.pixels[5, 15, 3]), 255)
        self.assertEqual(int(canvas.pixels[5, 8, 3]), 0)

    def test_vertical_gradient_fill_runs_bottom_to_top(self) -> None:
        canvas = Canvas(10, 40)
        ctx = canvas.get_context()
        grad = ctx.create_linear_gradient(0, 40, 0, 0)
        grad.add_color_stop(0.0, "#000")
        grad.add_color_stop(1.0, "#fff")
        ctx.fill_style = grad
        ctx.fill_rect(0, 0, 10, 40)
        top = int(canvas.pixels[0, 5, 0])
        bottom = int(canvas.pixels[39, 5, 0])
        self.assertGreater(top, 240)
        self.assertLess(bottom, 15)
        self.assertEqual(int(canvas.pixels[20, 5, 3]), 255)

    def test_gradient_without_stops_paints_nothing(self) -> None:
        canvas = Canvas(10, 10)
        ctx = canvas.get_context()
        ctx.fill_style = ctx.create_linear_gradient(0, 10, 0, 0)
        ctx.fill_rect(0, 0, 10, 10)
        self.assertFalse(np.any(canvas.pixels))

    def test_gradient_rejects_out_of_range_offsets(self) -> None:
        with self.assertRaises(ValueError):
            LinearGradient(0, 0, 0, 1).add_color_stop(1.5, "#000")

    def test_stroke_rect_leaves_interior(self) -> None:
        canvas = Canvas(20, 20)
        ctx = canvas.get_context()
        ctx.stroke_rect(2, 2, 10, 10)
        self.assertEqual(int(canvas.pixels[2, 5, 3]), 255)
        self.assertEqual(int(canvas.pixels[11, 5, 3]), 255)
        self.assertEqual(int(canvas.pixels[6, 2, 3]), 255)
        self.assertEqual(int(canvas.pixels[6, 11, 3]), 255)
        self.assertEqual(int(canvas.pixels[6, 6, 3]), 0)

    def test_resize_discards_content_and_tracks_client_size(self) -> None:
        canvas = Canvas(5, 5, client_width=32.0, client_height=24.0)
        canvas.pixels[:] = 1
        self.assertEqual(canvas.get_bounding_client_rect(), (32.0, 24.0))
        canvas.resize(32, 24)
        self.assertEqual((canvas.width, canvas.height), (32, 24))
        self.assertFalse(np.any(canvas.pixels))


if __name__ == "__main__":
    unittest.main()
