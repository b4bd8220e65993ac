from pointplot.adapters.normalize import series_from_xy
from pointplot.colors import BLACK, RGBA, first_color
from pointplot.errors import PlotDataError
from pointplot.geometry import DevicePoint, Rect
from pointplot.intervals import Interval, map_value, map_values
from pointplot.path import Path, PathCommand
from pointplot.raster import RasterSurface
from pointplot.series import Disk, FilledSquare, MarkerKind, NoMarker, Point2D, PointSeries, Ring, Square
from pointplot.surface import DrawingSurface, RecordingSurface
from pointplot.view import DEFAULT_VIEWPORT, HIT_TOLERANCE, PointSeriesRenderer

__all__ = [
    "BLACK",
    "DEFAULT_VIEWPORT",
    "DevicePoint",
    "Disk",
    "DrawingSurface",
    "FilledSquare",
    "HIT_TOLERANCE",
    "Interval",
    "MarkerKind",
    "NoMarker",
    "Path",
    "PathCommand",
    "PlotDataError",
    "Point2D",
    "PointSeries",
    "PointSeriesRenderer",
    "RGBA",
    "RasterSurface",
    "RecordingSurface",
    "Rect",
    "Ring",
    "Square",
    "first_color",
    "map_value",
    "map_values",
    "series_from_xy",
]
