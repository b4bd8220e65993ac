from __future__ import annotations

from typing import Iterable

from pointplot.colors import RGBA
from pointplot.geometry import DevicePoint, Rect
from pointplot.series import Disk, FilledSquare, MarkerKind, NoMarker, Ring, Square
from pointplot.surface import DrawingSurface


def marker_rect(marker: MarkerKind, center: DevicePoint) -> Rect | None:
    """Bounding rect of ``marker`` centred on ``center``; ``None`` for :class:`NoMarker`."""
    if isinstance(marker, (Ring, Disk)):
        return Rect.centered(center, marker.radius, marker.radius)
    if isinstance(marker, (Square, FilledSquare)):
        half = marker.side / 2.0
        return Rect.centered(center, half, half)
    return None


def draw_marker(surface: DrawingSurface, marker: MarkerKind, center: DevicePoint) -> None:
    rect = marker_rect(marker, center)
    if rect is None:
        return
    if isinstance(marker, Ring):
        surface.stroke_ellipse_in_rect(rect)
    elif isinstance(marker, Disk):
        surface.fill_ellipse_in_rect(rect)
    elif isinstance(marker, Square):
        surface.stroke_rect(rect)
    elif isinstance(marker, FilledSquare):
        surface.fill_rect(rect)


def draw_markers(surface: DrawingSurface, marker: MarkerKind, centers: Iterable[DevicePoint], color: RGBA) -> None:
    if isinstance(marker, NoMarker):
        return
    # Outlined kinds use the stroke colour, solid kinds the fill colour.
    surface.set_stroke_color(color)
    surface.set_fill_color(color)
    for center in centers:
        draw_marker(surface, marker, center)
