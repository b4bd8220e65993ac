from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Literal

import numpy as np

from pointplot.geometry import DevicePoint


PathOp = Literal["move", "line", "close"]


@dataclass(frozen=True)
class PathCommand:
    op: PathOp
    point: DevicePoint | None = None


@dataclass(frozen=True)
class Path:
    """Immutable device-space path made of move/line/close commands."""

    commands: tuple[PathCommand, ...] = ()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self.commands)

    @property
    def is_empty(self) -> bool:
        return not self.commands

    @property
    def is_closed(self) -> bool:
        return bool(self.commands) and self.commands[-1].op == "close"

    @property
    def vertices(self) -> tuple[DevicePoint, ...]:
        return tuple(cmd.point for cmd in self.commands if cmd.point is not None)

    def subpaths(self) -> list[tuple[list[DevicePoint], bool]]:
        """Split into ``(vertices, closed)`` runs, one per ``move``."""
        runs: list[tuple[list[DevicePoint], bool]] = []
        current: list[DevicePoint] = []
        for cmd in self.commands:
            if cmd.op == "move":
                if current:
                    runs.append((current, False))
                current = [cmd.point]
            elif cmd.op == "line":
                current.append(cmd.point)
            elif current:
                runs.append((current, True))
                current = []
        if current:
            runs.append((current, False))
        return runs


EMPTY_PATH = Path()


def build_open_path(px: np.ndarray, py: np.ndarray) -> Path:
    """Polyline through the device points in order: one ``move`` then a ``line`` per remaining point."""
    if px.size == 0:
        return EMPTY_PATH
    commands = [PathCommand("move", DevicePoint(float(px[0]), float(py[0])))]
    for x, y in zip(px[1:].tolist(), py[1:].tolist(), strict=True):
        commands.append(PathCommand("line", DevicePoint(x, y)))
    return Path(tuple(commands))


def build_closed_path(px: np.ndarray, py: np.ndarray, baseline_y: float) -> Path:
    """Area-under-curve polygon dropped from the first and last points to ``baseline_y``."""
    if px.size == 0:
        return EMPTY_PATH
    commands = [PathCommand("move", DevicePoint(float(px[0]), float(baseline_y)))]
    for x, y in zip(px.tolist(), py.tolist(), strict=True):
        commands.append(PathCommand("line", DevicePoint(x, y)))
    commands.append(PathCommand("line", DevicePoint(float(px[-1]), float(baseline_y))))
    commands.append(PathCommand("close"))
    return Path(tuple(commands))
