from __future__ import annotations

from dataclasses import dataclass, field, replace
import math
from typing import Iterable, Union

import numpy as np

from pointplot.colors import RGBA, coerce_color
from pointplot.intervals import Interval, infer_interval


@dataclass(frozen=True)
class Point2D:
    x: float
    y: float

    def __post_init__(self) -> None:
        if not (math.isfinite(self.x) and math.isfinite(self.y)):
            raise ValueError(f"point coordinates must be finite, got ({self.x}, {self.y})")


@dataclass(frozen=True)
class NoMarker:
    pass


@dataclass(frozen=True)
class Ring:
    radius: float

    def __post_init__(self) -> None:
        _require_size("ring radius", self.radius)


@dataclass(frozen=True)
class Disk:
    radius: float

    def __post_init__(self) -> None:
        _require_size("disk radius", self.radius)


@dataclass(frozen=True)
class Square:
    side: float

    def __post_init__(self) -> None:
        _require_size("square side", self.side)


@dataclass(frozen=True)
class FilledSquare:
    side: float

    def __post_init__(self) -> None:
        _require_size("filled square side", self.side)


MarkerKind = Union[NoMarker, Ring, Disk, Square, FilledSquare]

PointLike = Union[Point2D, tuple[float, float]]


@dataclass(frozen=True)
class PointSeries:
    """Ordered data points plus the style used to draw them.

    Point order is connection order and is never sorted. When ``x_interval`` or
    ``y_interval`` is omitted it is inferred from the points; an empty series
    falls back to ``[0, 1]``.
    """

    points: tuple[Point2D, ...] = ()
    line_width: float = 1.0
    line_color: RGBA | None = None
    fill_color: RGBA | None = None
    point_color: RGBA | None = None
    marker: MarkerKind = field(default_factory=NoMarker)
    x_interval: Interval | None = None
    y_interval: Interval | None = None

    def __post_init__(self) -> None:
        points = tuple(_coerce_point(p) for p in self.points)
        object.__setattr__(self, "points", points)
        if not math.isfinite(self.line_width) or self.line_width < 0:
            raise ValueError(f"line_width must be a finite value >= 0, got {self.line_width}")
        if not isinstance(self.marker, (NoMarker, Ring, Disk, Square, FilledSquare)):
            raise ValueError(f"unsupported marker kind: {self.marker!r}")
        for name in ("line_color", "fill_color", "point_color"):
            color = getattr(self, name)
            if color is not None:
                object.__setattr__(self, name, coerce_color(color))
        if self.x_interval is None:
            object.__setattr__(self, "x_interval", infer_interval(p.x for p in points))
        if self.y_interval is None:
            object.__setattr__(self, "y_interval", infer_interval(p.y for p in points))

    def __len__(self) -> int:
        return len(self.points)

    @property
    def is_empty(self) -> bool:
        return not self.points

    def as_arrays(self) -> tuple[np.ndarray, np.ndarray]:
        xs = np.fromiter((p.x for p in self.points), dtype=np.float64, count=len(self.points))
        ys = np.fromiter((p.y for p in self.points), dtype=np.float64, count=len(self.points))
        return xs, ys

    def with_points(self, points: Iterable[PointLike]) -> "PointSeries":
        """Return a copy carrying ``points`` and the same style, with intervals re-inferred."""
        return replace(self, points=tuple(points), x_interval=None, y_interval=None)


def _coerce_point(point: PointLike) -> Point2D:
    if isinstance(point, Point2D):
        return point
    x, y = point
    return Point2D(float(x), float(y))


def _require_size(label: str, value: float) -> None:
    if not math.isfinite(value) or value < 0:
        raise ValueError(f"{label} must be a finite value >= 0, got {value}")
