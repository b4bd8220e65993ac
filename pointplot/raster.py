from __future__ import annotations

import logging
from pathlib import Path as FilePath
from typing import Literal

import numpy as np
from PIL import Image, ImageDraw

from pointplot.colors import BLACK, RGBA, coerce_color
from pointplot.geometry import DevicePoint, Rect
from pointplot.path import Path


LOGGER = logging.getLogger(__name__)

Origin = Literal["bottom_left", "top_left"]


def new_canvas(width: int, height: int, color: RGBA = (0, 0, 0, 0)) -> np.ndarray:
    canvas = np.zeros((height, width, 4), dtype=np.uint8)
    canvas[:, :, 0] = color[0]
    canvas[:, :, 1] = color[1]
    canvas[:, :, 2] = color[2]
    canvas[:, :, 3] = color[3]
    return canvas


def blend_coverage(dst: np.ndarray, mask: np.ndarray, color: RGBA) -> None:
    """Source-over composite ``color`` into ``dst`` weighted by an 8-bit coverage ``mask``."""
    cov = mask.astype(np.float32) / 255.0
    src_alpha = (color[3] / 255.0) * cov
    if not np.any(src_alpha > 0):
        return

    dst_rgb = dst[:, :, :3].astype(np.float32)
    dst_alpha = dst[:, :, 3].astype(np.float32) / 255.0
    src_rgb = np.asarray(color[:3], dtype=np.float32).reshape(1, 1, 3)

    out_alpha = src_alpha + dst_alpha * (1.0 - src_alpha)
    out_rgb_num = src_rgb * src_alpha[:, :, None] + dst_rgb * dst_alpha[:, :, None] * (1.0 - src_alpha[:, :, None])
    safe_alpha = np.where(out_alpha > 1e-6, out_alpha, 1.0)
    out_rgb = out_rgb_num / safe_alpha[:, :, None]

    dst[:, :, :3] = np.clip(out_rgb, 0, 255).astype(np.uint8)
    dst[:, :, 3] = np.clip(out_alpha * 255.0, 0, 255).astype(np.uint8)


class RasterSurface:
    """RGBA numpy canvas implementing the drawing surface contract.

    Device units are pixels. With ``origin="bottom_left"`` device y grows
    upward and is flipped onto image rows; ``"top_left"`` uses image rows as-is.
    Each primitive is rasterized into a Pillow coverage mask and composited
    onto the canvas.
    """

    def __init__(
        self,
        width: int,
        height: int,
        *,
        background: RGBA = (0, 0, 0, 0),
        origin: Origin = "bottom_left",
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("raster surface width/height must be > 0")
        if origin not in ("bottom_left", "top_left"):
            raise ValueError(f"unsupported origin: {origin!r}")
        self.width = width
        self.height = height
        self.origin = origin
        self.canvas = new_canvas(width, height, coerce_color(background))
        self._line_width = 1.0
        self._stroke_color: RGBA = BLACK
        self._fill_color: RGBA = BLACK

    @property
    def bounds(self) -> Rect:
        return Rect(0.0, 0.0, float(self.width), float(self.height))

    def set_line_width(self, width: float) -> None:
        if width < 0:
            raise ValueError("line width must be >= 0")
        self._line_width = width

    def set_stroke_color(self, color: RGBA) -> None:
        self._stroke_color = coerce_color(color)

    def set_fill_color(self, color: RGBA) -> None:
        self._fill_color = coerce_color(color)

    def stroke_path(self, path: Path) -> None:
        mask, draw = self._new_mask()
        for vertices, closed in path.subpaths():
            xy = [self._to_image(p) for p in vertices]
            if closed and len(xy) > 1:
                xy.append(xy[0])
            if len(xy) == 1:
                xy.append(xy[0])
            draw.line(xy, fill=255, width=self._stroke_px(), joint="curve")
        blend_coverage(self.canvas, np.asarray(mask, dtype=np.uint8), self._stroke_color)

    def fill_path(self, path: Path) -> None:
        mask, draw = self._new_mask()
        for vertices, _ in path.subpaths():
            if len(vertices) < 3:
                LOGGER.warning("skipping fill of subpath with %d vertices", len(vertices))
                continue
            draw.polygon([self._to_image(p) for p in vertices], fill=255)
        blend_coverage(self.canvas, np.asarray(mask, dtype=np.uint8), self._fill_color)

    def stroke_ellipse_in_rect(self, rect: Rect) -> None:
        mask, draw = self._new_mask()
        draw.ellipse(self._image_box(rect), outline=255, width=self._stroke_px())
        blend_coverage(self.canvas, np.asarray(mask, dtype=np.uint8), self._stroke_color)

    def fill_ellipse_in_rect(self, rect: Rect) -> None:
        mask, draw = self._new_mask()
        draw.ellipse(self._image_box(rect), fill=255)
        blend_coverage(self.canvas, np.asarray(mask, dtype=np.uint8), self._fill_color)

    def stroke_rect(self, rect: Rect) -> None:
        mask, draw = self._new_mask()
        draw.rectangle(self._image_box(rect), outline=255, width=self._stroke_px())
        blend_coverage(self.canvas, np.asarray(mask, dtype=np.uint8), self._stroke_color)

    def fill_rect(self, rect: Rect) -> None:
        mask, draw = self._new_mask()
        draw.rectangle(self._image_box(rect), fill=255)
        blend_coverage(self.canvas, np.asarray(mask, dtype=np.uint8), self._fill_color)

    def to_image(self) -> Image.Image:
        return Image.fromarray(self.canvas)

    def save(self, path: str | FilePath) -> None:
        self.to_image().save(path, format="PNG")

    def _new_mask(self) -> tuple[Image.Image, ImageDraw.ImageDraw]:
        mask = Image.new("L", (self.width, self.height), 0)
        return mask, ImageDraw.Draw(mask)

    def _stroke_px(self) -> int:
        return max(1, int(round(self._line_width)))

    def _to_image(self, point: DevicePoint) -> tuple[float, float]:
        if self.origin == "bottom_left":
            return (point.x, (self.height - 1) - point.y)
        return (point.x, point.y)

    def _image_box(self, rect: Rect) -> tuple[float, float, float, float]:
        x0, y0 = self._to_image(DevicePoint(rect.min_x, rect.min_y))
        x1, y1 = self._to_image(DevicePoint(rect.max_x, rect.max_y))
        return (min(x0, x1), min(y0, y1), max(x0, x1), max(y0, y1))
