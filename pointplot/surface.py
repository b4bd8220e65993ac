from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol

from pointplot.colors import RGBA
from pointplot.geometry import Rect
from pointplot.path import Path


class DrawingSurface(Protocol):
    def set_line_width(self, width: float) -> None:
        ...

    def set_stroke_color(self, color: RGBA) -> None:
        ...

    def set_fill_color(self, color: RGBA) -> None:
        ...

    def stroke_path(self, path: Path) -> None:
        ...

    def fill_path(self, path: Path) -> None:
        ...

    def stroke_ellipse_in_rect(self, rect: Rect) -> None:
        ...

    def fill_ellipse_in_rect(self, rect: Rect) -> None:
        ...

    def stroke_rect(self, rect: Rect) -> None:
        ...

    def fill_rect(self, rect: Rect) -> None:
        ...


@dataclass
class RecordingSurface:
    """Surface that records every call as ``(operation, argument)`` for replay or inspection."""

    calls: list[tuple[str, Any]] = field(default_factory=list)

    def set_line_width(self, width: float) -> None:
        self.calls.append(("set_line_width", width))

    def set_stroke_color(self, color: RGBA) -> None:
        self.calls.append(("set_stroke_color", color))

    def set_fill_color(self, color: RGBA) -> None:
        self.calls.append(("set_fill_color", color))

    def stroke_path(self, path: Path) -> None:
        self.calls.append(("stroke_path", path))

    def fill_path(self, path: Path) -> None:
        self.calls.append(("fill_path", path))

    def stroke_ellipse_in_rect(self, rect: Rect) -> None:
        self.calls.append(("stroke_ellipse_in_rect", rect))

    def fill_ellipse_in_rect(self, rect: Rect) -> None:
        self.calls.append(("fill_ellipse_in_rect", rect))

    def stroke_rect(self, rect: Rect) -> None:
        self.calls.append(("stroke_rect", rect))

    def fill_rect(self, rect: Rect) -> None:
        self.calls.append(("fill_rect", rect))

    def operations(self) -> list[str]:
        return [op for op, _ in self.calls]

    def calls_of(self, operation: str) -> list[Any]:
        return [arg for op, arg in self.calls if op == operation]

    def replay(self, target: DrawingSurface) -> None:
        for op, arg in self.calls:
            getattr(target, op)(arg)

    def clear(self) -> None:
        self.calls.clear()
