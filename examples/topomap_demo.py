from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np
from PIL import Image

from topo_corrplot import Canvas, CorrelationPlotData, CorrelationPlotRenderer, PlotProps, PlotState


# Approximate 10-20 sensor layout in normalized disc coordinates (nose up).
SENSORS = {
    "Fp1": (-0.30, -0.85),
    "Fp2": (0.30, -0.85),
    "F7": (-0.75, -0.50),
    "F3": (-0.40, -0.45),
    "Fz": (0.00, -0.45),
    "F4": (0.40, -0.45),
    "F8": (0.75, -0.50),
    "T7": (-0.90, 0.00),
    "C3": (-0.45, 0.00),
    "Cz": (0.00, 0.00),
    "C4": (0.45, 0.00),
    "T8": (0.90, 0.00),
    "P7": (-0.75, 0.50),
    "P3": (-0.40, 0.45),
    "Pz": (0.00, 0.45),
    "P4": (0.40, 0.45),
    "P8": (0.75, 0.50),
    "O1": (-0.30, 0.85),
    "O2": (0.30, 0.85),
}

VIRIDIS_STOPS = [
    {"t": 0.0, "color": "#440154"},
    {"t": 0.25, "color": "#3b528b"},
    {"t": 0.5, "color": "#21918c"},
    {"t": 0.75, "color": "#5ec962"},
    {"t": 1.0, "color": "#fde725"},
]


def synthetic_coherence(seed: int = 7) -> CorrelationPlotData:
    rng = np.random.default_rng(seed)
    positions = np.asarray(list(SENSORS.values()), dtype=np.float64)
    frequencies = np.linspace(1.0, 40.0, 40)
    # Alpha-band peak over posterior sensors plus noise.
    posterior = np.clip(positions[:, 1], 0.0, None)[:, None]
    alpha = np.exp(-0.5 * ((frequencies[None, :] - 10.0) / 2.0) ** 2)
    values = 0.2 + 0.7 * posterior * alpha + 0.05 * rng.standard_normal((positions.shape[0], frequencies.size))
    return CorrelationPlotData.from_arrays(positions, frequencies, values, units="coh", label="O1 seed")


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a synthetic scalp coherence map to PNG")
    parser.add_argument("--width", type=int, default=360)
    parser.add_argument("--height", type=int, default=360)
    parser.add_argument("--freq", type=float, action="append", help="frequency to render (repeatable)")
    parser.add_argument("--out-dir", type=Path, default=Path("."))
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG)

    data = synthetic_coherence()
    renderer = CorrelationPlotRenderer()
    canvas = Canvas(args.width, args.height)
    renderer.set_refs(canvas=canvas)
    props = PlotProps.create(VIRIDIS_STOPS, plot_state=PlotState(data=data))

    args.out_dir.mkdir(parents=True, exist_ok=True)
    for freq in args.freq or [10.0]:
        renderer.render(props.with_frequency(freq))
        out = args.out_dir / f"topomap_{freq:g}hz.png"
        Image.fromarray(canvas.pixels).save(out)
        print(out)


if __name__ == "__main__":
    main()
