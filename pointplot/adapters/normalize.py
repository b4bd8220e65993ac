from __future__ import annotations

from collections.abc import Sequence
from typing import Any

import numpy as np

from pointplot.errors import PlotDataError
from pointplot.series import Point2D, PointSeries


try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


def series_from_xy(y: Any, *, x: Any = None, **style: Any) -> PointSeries:
    """Build a :class:`PointSeries` from 1-D array-likes.

    ``x`` defaults to ``0..n-1``. Pairs where either coordinate is not finite
    are dropped; order is preserved. Extra keyword arguments are passed to
    :class:`PointSeries` as style.
    """
    if y is None:
        raise PlotDataError("y input is required")
    y_arr = _float_column(y, label="y")
    if y_arr.size == 0:
        raise PlotDataError("empty series")

    if x is None:
        x_arr = np.arange(y_arr.size, dtype=np.float64)
    else:
        x_arr = _float_column(x, label="x")

    if x_arr.shape != y_arr.shape:
        raise PlotDataError(f"x and y length mismatch: {x_arr.size} != {y_arr.size}")

    mask = np.isfinite(x_arr) & np.isfinite(y_arr)
    if not np.any(mask):
        raise PlotDataError("series contains no finite points")

    points = tuple(Point2D(px, py) for px, py in zip(x_arr[mask].tolist(), y_arr[mask].tolist(), strict=True))
    return PointSeries(points=points, **style)


def _float_column(value: Any, *, label: str) -> np.ndarray:
    arr = _as_ndarray(value, label=label)
    if arr.ndim != 1:
        raise PlotDataError(f"{label} must be 1-D, got shape {arr.shape}")
    if arr.dtype.kind in "iufb":
        return arr.astype(np.float64, copy=False)
    return np.fromiter(
        (_scalar_to_float(raw, label=label, index=i) for i, raw in enumerate(arr.tolist())),
        dtype=np.float64,
        count=arr.shape[0],
    )


def _as_ndarray(value: Any, *, label: str) -> np.ndarray:
    """Unwrap tensors, pandas series and plain sequences into a numpy array without coercing dtype."""
    if torch is not None and isinstance(value, torch.Tensor):
        return value.detach().cpu().numpy()
    if pd is not None and isinstance(value, pd.Series):
        return value.to_numpy()
    if isinstance(value, np.ndarray):
        return value
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes, bytearray)):
        return np.asarray(value, dtype=object)
    raise PlotDataError(f"unsupported {label} input type: {type(value)!r}")


def _scalar_to_float(raw: Any, *, label: str, index: int) -> float:
    # None marks a missing sample; it is dropped with the other non-finite pairs.
    if raw is None:
        return float("nan")
    try:
        return float(raw)
    except (TypeError, ValueError) as exc:
        raise PlotDataError(f"{label} contains non-numeric value at index {index}: {raw!r}") from exc
