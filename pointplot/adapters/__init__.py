from .normalize import series_from_xy

__all__ = ["series_from_xy"]
