from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DirtyState:
    dirty: bool = True
    revision: int = 0
    reason: str | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def mark_dirty(self, reason: str, **metadata: Any) -> None:
        self.dirty = True
        self.revision += 1
        self.reason = reason
        self.metadata = dict(metadata)

    def clear(self) -> None:
        self.dirty = False
        self.reason = None
        self.metadata = {}
