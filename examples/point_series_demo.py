from __future__ import annotations

import argparse
import logging
from pathlib import Path

import numpy as np

from pointplot import Disk, Interval, PointSeriesRenderer, RasterSurface, series_from_xy


def _render(renderer: PointSeriesRenderer, width: int, height: int) -> RasterSurface:
    surface = RasterSurface(width, height, background=(16, 18, 24, 255))
    renderer.set_viewport(surface.bounds)
    renderer.render(surface)
    return surface


def main() -> None:
    parser = argparse.ArgumentParser(description="Render a point series to PNG and probe it with hit tests.")
    parser.add_argument("--out-dir", type=Path, default=Path.cwd())
    parser.add_argument("--width", type=int, default=640)
    parser.add_argument("--height", type=int, default=360)
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    x = np.linspace(0.0, 12.0, 25, dtype=np.float64)
    y = 0.8 * np.sin(x * 0.9) + 0.3 * np.cos(x * 0.35)
    series = series_from_xy(
        y,
        x=x,
        line_width=2.0,
        line_color=(255, 170, 70),
        fill_color=(96, 182, 255, 90),
        point_color=(240, 240, 240),
        marker=Disk(3.0),
    )
    renderer = PointSeriesRenderer.from_series(series, y_interval=Interval(-1.5, 1.5))

    args.out_dir.mkdir(parents=True, exist_ok=True)
    full_path = args.out_dir / "point_series_full.png"
    _render(renderer, args.width, args.height).save(full_path)

    renderer.set_x_interval(Interval(3.0, 7.0))
    zoom_path = args.out_dir / "point_series_zoomed.png"
    _render(renderer, args.width, args.height).save(zoom_path)

    probe = renderer.convert_to_device(float(x[10]), float(y[10]))
    print(f"value at {probe}: {renderer.value_at(probe)}")
    print(f"wrote {full_path}")
    print(f"wrote {zoom_path}")


if __name__ == "__main__":
    main()
