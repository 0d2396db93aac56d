from .colorbar import create_colorbar_process, gradient_stop_offsets
from .head import create_head_outline_process
from .heatmap import HeatmapState, create_heatmap_process
from .label import create_label_process, label_text

__all__ = [
    "HeatmapState",
    "create_colorbar_process",
    "create_head_outline_process",
    "create_heatmap_process",
    "create_label_process",
    "gradient_stop_offsets",
    "label_text",
]
