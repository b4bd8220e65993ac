from __future__ import annotations

import logging
from typing import Callable

import numpy as np

from pointplot.colors import BLACK, first_color
from pointplot.geometry import DevicePoint, Rect
from pointplot.intervals import DEFAULT_INTERVAL, Interval, map_value, map_values
from pointplot.layers import DirtyState
from pointplot.markers import draw_markers
from pointplot.path import Path, build_closed_path, build_open_path
from pointplot.series import PointSeries
from pointplot.surface import DrawingSurface


LOGGER = logging.getLogger(__name__)

HIT_TOLERANCE = 8.0
DEFAULT_VIEWPORT = Rect(0.0, 0.0, 512.0, 512.0)


class PointSeriesRenderer:
    """Draws a point series into a device viewport and answers nearest-point queries.

    The renderer owns no axes. ``x_interval``/``y_interval`` select the
    data-space window mapped onto the viewport, each axis independently.
    Mutations go through the ``set_*`` methods, which mark the renderer dirty
    and call ``on_redraw_request`` so the host can schedule a draw.
    """

    def __init__(
        self,
        series: PointSeries | None = None,
        *,
        x_interval: Interval = DEFAULT_INTERVAL,
        y_interval: Interval = DEFAULT_INTERVAL,
        viewport: Rect = DEFAULT_VIEWPORT,
        hit_tolerance: float = HIT_TOLERANCE,
        on_redraw_request: Callable[[], None] | None = None,
    ) -> None:
        if hit_tolerance <= 0:
            raise ValueError("hit_tolerance must be > 0")
        self._series = series if series is not None else PointSeries()
        self._x_interval = x_interval
        self._y_interval = y_interval
        self._viewport = viewport
        self._hit_tolerance = float(hit_tolerance)
        self._on_redraw_request = on_redraw_request
        self._dirty = DirtyState()
        self._reported_degenerate: set[str] = set()

    @classmethod
    def from_series(
        cls,
        series: PointSeries,
        *,
        x_interval: Interval | None = None,
        y_interval: Interval | None = None,
        viewport: Rect = DEFAULT_VIEWPORT,
        hit_tolerance: float = HIT_TOLERANCE,
        on_redraw_request: Callable[[], None] | None = None,
    ) -> "PointSeriesRenderer":
        """Build a renderer whose axis window defaults to the series' natural intervals."""
        return cls(
            series,
            x_interval=x_interval if x_interval is not None else series.x_interval,
            y_interval=y_interval if y_interval is not None else series.y_interval,
            viewport=viewport,
            hit_tolerance=hit_tolerance,
            on_redraw_request=on_redraw_request,
        )

    @property
    def series(self) -> PointSeries:
        return self._series

    @property
    def x_interval(self) -> Interval:
        return self._x_interval

    @property
    def y_interval(self) -> Interval:
        return self._y_interval

    @property
    def viewport(self) -> Rect:
        return self._viewport

    @property
    def hit_tolerance(self) -> float:
        return self._hit_tolerance

    @property
    def needs_display(self) -> bool:
        return self._dirty.dirty

    @property
    def dirty_state(self) -> DirtyState:
        return self._dirty

    def set_series(self, series: PointSeries) -> None:
        self._series = series
        self._request_redraw("series", points=len(series))

    def set_x_interval(self, interval: Interval) -> None:
        self._x_interval = interval
        self._reported_degenerate.discard("x")
        self._request_redraw("x_interval")

    def set_y_interval(self, interval: Interval) -> None:
        self._y_interval = interval
        self._reported_degenerate.discard("y")
        self._request_redraw("y_interval")

    def set_intervals(self, *, x: Interval | None = None, y: Interval | None = None) -> None:
        """Replace either or both axis intervals with a single redraw request."""
        if x is None and y is None:
            return
        if x is not None:
            self._x_interval = x
            self._reported_degenerate.discard("x")
        if y is not None:
            self._y_interval = y
            self._reported_degenerate.discard("y")
        self._request_redraw("intervals")

    def set_viewport(self, viewport: Rect) -> None:
        self._viewport = viewport
        self._request_redraw("viewport")

    def convert_to_device(self, x: float, y: float) -> DevicePoint:
        self._note_degenerate()
        return DevicePoint(
            map_value(x, self._x_interval, self._viewport.x_interval),
            map_value(y, self._y_interval, self._viewport.y_interval),
        )

    def device_points(self) -> tuple[np.ndarray, np.ndarray]:
        """Series points mapped into device space, as parallel x/y arrays in series order."""
        self._note_degenerate()
        xs, ys = self._series.as_arrays()
        px = map_values(xs, self._x_interval, self._viewport.x_interval)
        py = map_values(ys, self._y_interval, self._viewport.y_interval)
        return px, py

    def open_path(self) -> Path:
        px, py = self.device_points()
        return build_open_path(px, py)

    def closed_path(self) -> Path:
        px, py = self.device_points()
        baseline = map_value(0.0, self._y_interval, self._viewport.y_interval)
        return build_closed_path(px, py, baseline)

    def render(self, surface: DrawingSurface) -> None:
        series = self._series
        surface.set_line_width(series.line_width)

        if series.line_color is not None:
            surface.set_stroke_color(series.line_color)
            surface.stroke_path(self.open_path())

        if series.fill_color is not None:
            surface.set_fill_color(series.fill_color)
            surface.fill_path(self.closed_path())

        if not series.is_empty:
            px, py = self.device_points()
            color = first_color(series.point_color, series.line_color, BLACK)
            # Points far outside the axis window can overflow to inf in device space.
            visible = np.isfinite(px) & np.isfinite(py)
            centers = (DevicePoint(x, y) for x, y in zip(px[visible].tolist(), py[visible].tolist(), strict=True))
            draw_markers(surface, series.marker, centers, color)

        self._dirty.clear()

    def nearest_index(self, location: tuple[float, float]) -> int | None:
        """Index of the closest point strictly within the hit tolerance; ties go to the earliest point."""
        if self._series.is_empty:
            return None
        lx, ly = location
        px, py = self.device_points()
        distances = np.hypot(px - float(lx), py - float(ly))
        distances = np.where(np.isfinite(distances), distances, np.inf)
        # argmin returns the first minimum, so earlier points win ties.
        idx = int(np.argmin(distances))
        if distances[idx] < self._hit_tolerance:
            return idx
        return None

    def value_at(self, location: tuple[float, float]) -> float | None:
        idx = self.nearest_index(location)
        if idx is None:
            return None
        return self._series.points[idx].y

    def _request_redraw(self, reason: str, **metadata: object) -> None:
        self._dirty.mark_dirty(reason, **metadata)
        LOGGER.debug("redraw requested (%s), revision=%d", reason, self._dirty.revision)
        if self._on_redraw_request is not None:
            self._on_redraw_request()

    def _note_degenerate(self) -> None:
        for axis, interval in (("x", self._x_interval), ("y", self._y_interval)):
            if interval.is_degenerate and axis not in self._reported_degenerate:
                self._reported_degenerate.add(axis)
                LOGGER.debug(
                    "%s interval [%s, %s] has zero width; mapping every value to the viewport midpoint",
                    axis,
                    interval.low,
                    interval.high,
                )
