from __future__ import annotations

import unittest

import numpy as np

from pointplot.geometry import DevicePoint, Rect
from pointplot.markers import draw_markers, marker_rect
from pointplot.path import Path, PathCommand, build_closed_path, build_open_path
from pointplot.series import Disk, NoMarker, Ring
from pointplot.surface import RecordingSurface


class PathBuilderTests(unittest.TestCase):
    def test_open_path_from_empty_arrays(self) -> None:
        path = build_open_path(np.asarray([]), np.asarray([]))
        self.assertTrue(path.is_empty)
        self.assertEqual(path.subpaths(), [])

    def test_closed_path_vertex_count(self) -> None:
        px = np.asarray([1.0, 2.0, 3.0, 4.0])
        py = np.asarray([5.0, 6.0, 7.0, 8.0])
        path = build_closed_path(px, py, baseline_y=0.0)
        self.assertEqual(len(path.vertices), px.size + 2)
        self.assertTrue(path.is_closed)
        self.assertEqual(path.vertices[0], DevicePoint(1.0, 0.0))
        self.assertEqual(path.vertices[-1], DevicePoint(4.0, 0.0))

    def test_subpaths_split_on_move_and_close(self) -> None:
        path = Path(
            (
                PathCommand("move", DevicePoint(0.0, 0.0)),
                PathCommand("line", DevicePoint(1.0, 0.0)),
                PathCommand("close"),
                PathCommand("move", DevicePoint(5.0, 5.0)),
                PathCommand("line", DevicePoint(6.0, 6.0)),
            )
        )
        runs = path.subpaths()
        self.assertEqual(runs[0], ([DevicePoint(0.0, 0.0), DevicePoint(1.0, 0.0)], True))
        self.assertEqual(runs[1], ([DevicePoint(5.0, 5.0), DevicePoint(6.0, 6.0)], False))


class MarkerDispatchTests(unittest.TestCase):
    def test_marker_rect_for_each_kind(self) -> None:
        center = DevicePoint(10.0, 20.0)
        self.assertEqual(marker_rect(Ring(2.0), center), Rect(8.0, 18.0, 12.0, 22.0))
        self.assertIsNone(marker_rect(NoMarker(), center))

    def test_no_marker_touches_nothing(self) -> None:
        surface = RecordingSurface()
        draw_markers(surface, NoMarker(), [DevicePoint(1.0, 1.0)], (0, 0, 0, 255))
        self.assertEqual(surface.calls, [])

    def test_replay_reproduces_calls(self) -> None:
        source = RecordingSurface()
        draw_markers(source, Disk(1.0), [DevicePoint(1.0, 1.0), DevicePoint(3.0, 3.0)], (9, 9, 9, 255))
        target = RecordingSurface()
        source.replay(target)
        self.assertEqual(target.calls, source.calls)
        self.assertEqual(len(target.calls_of("fill_ellipse_in_rect")), 2)


if __name__ == "__main__":
    unittest.main()
