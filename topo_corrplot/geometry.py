from __future__ import annotations

from dataclasses import dataclass
import math


RADIUS_DIVISOR = 2.9
CENTER_Y_OFFSET = 15.0


@dataclass(frozen=True)
class Disc:
    center_x: float
    center_y: float
    radius: float

    @property
    def degenerate(self) -> bool:
        return self.radius <= 0.0


@dataclass(frozen=True)
class HeatmapBox:
    """Bounding square of the disc in surface pixels."""

    left: float
    top: float
    width: int
    height: int

    @property
    def size(self) -> int:
        return self.width * self.height


def compute_disc(width: float, height: float) -> Disc:
    return Disc(
        center_x=width / 3.0,
        center_y=height / 3.0 + CENTER_Y_OFFSET,
        radius=min(abs(width), abs(height)) / RADIUS_DIVISOR,
    )


def heatmap_box(disc: Disc) -> HeatmapBox:
    side = int(math.ceil(2.0 * disc.radius)) + 1
    return HeatmapBox(
        left=disc.center_x - disc.radius,
        top=disc.center_y - disc.radius,
        width=side,
        height=side,
    )
