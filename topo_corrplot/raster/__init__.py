from .canvas import blend_patch, clear_rect, draw_hline, draw_pixel, draw_vline, new_canvas, put_image
from .draw_lines import draw_polyline
from .draw_text import draw_text
from .surface import Canvas, LinearGradient, RasterContext

__all__ = [
    "Canvas",
    "LinearGradient",
    "RasterContext",
    "blend_patch",
    "clear_rect",
    "draw_hline",
    "draw_pixel",
    "draw_polyline",
    "draw_text",
    "draw_vline",
    "new_canvas",
    "put_image",
]
