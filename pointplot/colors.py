from __future__ import annotations

from typing import Sequence


RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)


def coerce_color(color: Sequence[int], alpha: float = 1.0) -> RGBA:
    """Normalize an RGB or RGBA sequence to an RGBA tuple, scaling its alpha by ``alpha``."""
    if len(color) not in (3, 4):
        raise ValueError(f"color must have 3 or 4 channels, got {len(color)}")
    channels = [int(c) for c in color]
    if any(c < 0 or c > 255 for c in channels):
        raise ValueError(f"color channels must be within 0..255, got {tuple(channels)}")
    a = max(0.0, min(1.0, alpha))
    if len(channels) == 3:
        r, g, b = channels
        return (r, g, b, int(a * 255))
    r, g, b, base_a = channels
    return (r, g, b, int(a * base_a))


def first_color(*candidates: RGBA | None) -> RGBA | None:
    for color in candidates:
        if color is not None:
            return color
    return None
