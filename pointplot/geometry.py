from __future__ import annotations

from dataclasses import dataclass
import math
from typing import NamedTuple

from pointplot.intervals import Interval


class DevicePoint(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned device-space rectangle given by its min/max corners."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def __post_init__(self) -> None:
        bounds = (self.min_x, self.min_y, self.max_x, self.max_y)
        if not all(math.isfinite(v) for v in bounds):
            raise ValueError(f"rect bounds must be finite, got {bounds}")
        if self.min_x > self.max_x or self.min_y > self.max_y:
            raise ValueError(f"rect min corner must not exceed max corner, got {bounds}")

    @classmethod
    def from_origin_size(cls, x: float, y: float, width: float, height: float) -> "Rect":
        return cls(min_x=x, min_y=y, max_x=x + width, max_y=y + height)

    @classmethod
    def centered(cls, center: DevicePoint, half_width: float, half_height: float) -> "Rect":
        cx, cy = center
        return cls(
            min_x=cx - half_width,
            min_y=cy - half_height,
            max_x=cx + half_width,
            max_y=cy + half_height,
        )

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> DevicePoint:
        return DevicePoint((self.min_x + self.max_x) / 2.0, (self.min_y + self.max_y) / 2.0)

    @property
    def x_interval(self) -> Interval:
        return Interval(self.min_x, self.max_x)

    @property
    def y_interval(self) -> Interval:
        return Interval(self.min_y, self.max_y)
