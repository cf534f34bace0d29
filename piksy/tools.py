"""Editing tools available in the viewport."""

from __future__ import annotations

from enum import IntEnum


class Tool(IntEnum):
    """A tool the user can pick in the viewport toolbar."""

    SELECT = 0
    MOVE = 1
    SCALE = 2
    ERASE = 3
    MEASURE = 4
    PAN = 5
    COLOR_SWAP = 6
    BRUSH = 7
    AUTO_EXTRACT = 8
    EXTRACT = 9
    VIEW = 10
    LASSO_SELECT = 11
    ZOOM_IN = 12
    ZOOM_OUT = 13
    COUNT = 14


_TOOL_NAMES: dict[Tool, str] = {
    Tool.SELECT: "SELECT",
    Tool.MOVE: "MOVE",
    Tool.SCALE: "SCALE",
    Tool.ERASE: "ERASE",
    Tool.MEASURE: "MEASURE",
    Tool.AUTO_EXTRACT: "AUTO EXTRACT",
    Tool.PAN: "PAN",
    Tool.COLOR_SWAP: "COLOR SWAP",
    Tool.BRUSH: "BRUSH",
    Tool.EXTRACT: "EXTRACT",
    Tool.VIEW: "VIEW",
    Tool.LASSO_SELECT: "LASSO_SELECT",
    Tool.ZOOM_IN: "ZOOM_IN",
    Tool.ZOOM_OUT: "ZOOM_OUT",
    Tool.COUNT: "COUNT",
}


def tool_to_string(tool: Tool | int) -> str:
    """Return the display name of ``tool``, or ``"Unknown"`` for other values."""
    try:
        return _TOOL_NAMES[Tool(tool)]
    except ValueError:
        return "Unknown"