from __future__ import annotations


class PlotDataError(ValueError):
    """Raised when caller data cannot be normalized into a point series."""
