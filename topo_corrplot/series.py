from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, Sequence

import numpy as np

from topo_corrplot.errors import PlotDataError


class DataSeries(Protocol):
    """Read-only data snapshot consumed by the plot processes.

    `interpolate` is called once per pixel with one `(x, y)` point in
    normalized disc coordinates and returns a scalar sample normalized to
    `extent` (0 at the minimum, 1 at the maximum).
    """

    extent: tuple[float, float]
    units: str
    label: str

    def interpolate(self, neighborhood_size: int, frequency: float, point: tuple[float, float]) -> float:
        ...


@dataclass(frozen=True, eq=False)
class CorrelationPlotData:
    """Per-channel spectra at sensor positions on the disc.

    `positions` is `(channels, 2)` in normalized disc coordinates,
    `frequencies` is an increasing `(bins,)` axis and `values` is
    `(channels, bins)`.
    """

    positions: np.ndarray
    frequencies: np.ndarray
    values: np.ndarray
    units: str = ""
    label: str = ""
    extent: tuple[float, float] = field(default=(0.0, 1.0))
    _sample_cache: tuple[float, np.ndarray] | None = field(default=None, init=False, repr=False)

    @classmethod
    def from_arrays(
        cls,
        positions: Sequence[Sequence[float]] | np.ndarray,
        frequencies: Sequence[float] | np.ndarray,
        values: Sequence[Sequence[float]] | np.ndarray,
        *,
        units: str = "",
        label: str = "",
        extent: tuple[float, float] | None = None,
    ) -> "CorrelationPlotData":
        pos = np.array(positions, dtype=np.float64)
        freqs = np.array(frequencies, dtype=np.float64)
        vals = np.array(values, dtype=np.float64)
        if pos.ndim != 2 or pos.shape[1] != 2 or pos.shape[0] == 0:
            raise PlotDataError("positions must have shape (channels, 2) with at least one channel")
        if not np.all(np.isfinite(pos)):
            raise PlotDataError("positions must be finite")
        if freqs.ndim != 1 or freqs.size == 0:
            raise PlotDataError("frequencies must be a non-empty 1-D axis")
        if freqs.size > 1 and not np.all(np.diff(freqs) > 0):
            raise PlotDataError("frequencies must be strictly increasing")
        if vals.shape != (pos.shape[0], freqs.size):
            raise PlotDataError(f"values shape {vals.shape} != (channels, bins) {(pos.shape[0], freqs.size)}")
        if extent is None:
            finite = vals[np.isfinite(vals)]
            if finite.size == 0:
                raise PlotDataError("values contain no finite samples")
            extent = (float(np.min(finite)), float(np.max(finite)))
        pos.setflags(write=False)
        freqs.setflags(write=False)
        vals.setflags(write=False)
        return cls(
            positions=pos,
            frequencies=freqs,
            values=vals,
            units=units,
            label=label,
            extent=(float(extent[0]), float(extent[1])),
        )

    @property
    def channel_count(self) -> int:
        return int(self.positions.shape[0])

    def values_at(self, frequency: float) -> np.ndarray:
        """Per-channel values linearly interpolated between frequency bins, clamped at the ends."""
        freqs = self.frequencies
        if freqs.size == 1:
            return self.values[:, 0].copy()
        f = min(max(float(frequency), float(freqs[0])), float(freqs[-1]))
        j = min(max(int(np.searchsorted(freqs, f, side="right")) - 1, 0), freqs.size - 2)
        t = (f - freqs[j]) / (freqs[j + 1] - freqs[j])
        return self.values[:, j] * (1.0 - t) + self.values[:, j + 1] * t

    def _samples(self, frequency: float) -> np.ndarray:
        # The heatmap asks for every pixel at one frequency in turn.
        cached = self._sample_cache
        if cached is not None and cached[0] == frequency:
            return cached[1]
        samples = self.values_at(frequency)
        object.__setattr__(self, "_sample_cache", (frequency, samples))
        return samples

    def interpolate(self, neighborhood_size: int, frequency: float, point: Any) -> float | np.ndarray:
        """Inverse-distance weighted sample at `point` from the nearest sensors.

        `point` is one `(x, y)` pair, giving a float, or an `(N, 2)` array,
        giving an `(N,)` array.
        """
        pts = np.asarray(point, dtype=np.float64)
        single = pts.ndim == 1
        pts = pts.reshape(-1, 2)

        samples = self._samples(frequency)
        k = max(1, min(int(neighborhood_size), self.channel_count))

        # (points, channels) distances; only the k nearest sensors contribute.
        dist = np.linalg.norm(pts[:, None, :] - self.positions[None, :, :], axis=2)
        if k < self.channel_count:
            nearest = np.argpartition(dist, k - 1, axis=1)[:, :k]
        else:
            nearest = np.broadcast_to(np.arange(self.channel_count), (pts.shape[0], self.channel_count))
        near_dist = np.take_along_axis(dist, nearest, axis=1)
        near_vals = samples[nearest]

        exact = near_dist <= 1e-12
        with np.errstate(divide="ignore", invalid="ignore"):
            weights = np.where(exact, 0.0, 1.0 / (near_dist * near_dist))
            raw = np.sum(weights * near_vals, axis=1) / np.sum(weights, axis=1)
        hit = np.any(exact, axis=1)
        if np.any(hit):
            first = np.argmax(exact, axis=1)
            raw = np.where(hit, near_vals[np.arange(pts.shape[0]), first], raw)

        lo, hi = self.extent
        span = hi - lo
        out = np.full(raw.shape, 0.5) if span == 0 else (raw - lo) / span
        if single:
            return float(out[0])
        return out
