"""Frames cut from a texture and the animations built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class Frame:
    """A rectangle of a texture, with free-form data attached to it."""

    x: int
    y: int
    w: int
    h: int
    flipped: bool = False
    data: dict[str, Any] = field(default_factory=dict)

    def set_data(self, key: str, value: Any) -> None:
        self.data[key] = value

    def get_data(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key``, or ``default`` if absent."""
        return self.data.get(key, default)

    def has_data(self, key: str) -> bool:
        return key in self.data

    def remove_data(self, key: str) -> None:
        """Remove ``key`` if present; missing keys are ignored."""
        self.data.pop(key, None)


@dataclass
class Animation:
    """A named sequence of frames."""

    name: str
    frames: list[Frame] = field(default_factory=list)