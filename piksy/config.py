"""Configuration values for the editor, its window, its UI and its logger."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path

LOG_DIR = Path("logs")
RESOURCE_DIR = Path("resources")

Color = tuple[float, float, float, float]


class LogLevel(IntEnum):
    """Severity of a log message, ordered from least to most severe."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4
    FATAL = 5


_LEVEL_COLORS: dict[LogLevel, Color] = {
    LogLevel.TRACE: (0.5, 0.5, 0.5, 1.0),  # dark gray
    LogLevel.DEBUG: (0.6, 0.6, 0.6, 1.0),  # gray
    LogLevel.INFO: (0.6, 0.8, 1.0, 1.0),  # light blue
    LogLevel.WARN: (1.0, 1.0, 0.4, 1.0),  # yellow
    LogLevel.ERROR: (1.0, 0.4, 0.4, 1.0),  # red
    LogLevel.FATAL: (1.0, 0.1, 0.1, 1.0),  # dark red
}
_DEFAULT_COLOR: Color = (1.0, 1.0, 1.0, 1.0)


def log_level_to_color(level: LogLevel | int) -> Color:
    """Return the RGBA colour used to display messages of ``level``.

    Unknown levels are shown in white.
    """
    try:
        return _LEVEL_COLORS[LogLevel(level)]
    except ValueError:
        return _DEFAULT_COLOR


@dataclass
class LoggerConfig:
    """Settings for the application logger."""

    level: LogLevel = LogLevel.DEBUG
    log_file: Path = field(default_factory=lambda: LOG_DIR / "piksy.log")
    enable_colors: bool = True


@dataclass
class WindowConfig:
    """Settings for the main window and its renderer."""

    width: int = 1440
    height: int = 900
    title: str = "Piksy - App"
    resizable: bool = True
    allow_high_dpi: bool = True
    vsync: bool = True
    accelerated: bool = True


@dataclass
class ImGuiConfig:
    """Settings for the immediate-mode UI layer."""

    docking_enable: bool = True
    viewports_enable: bool = True
    nav_enable_keyboard: bool = True
    font_scale: float = 1.0
    global_font_scale: float = 0.95
    base_font_size: float = 18.0
    custom_mouse_cursor: bool = False
    ini_filename: Path = field(
        default_factory=lambda: RESOURCE_DIR / "config" / "window.ini"
    )
    font_filename: Path = field(
        default_factory=lambda: RESOURCE_DIR / "fonts" / "PixelifySans-Regular.ttf"
    )

    @property
    def icon_font_size(self) -> float:
        """Size of the icon font merged into the base font."""
        return self.base_font_size * 2.0 / 3.0


@dataclass
class AppConfig:
    """Application-level settings."""

    save_file: Path = field(default_factory=lambda: Path("./project.pkproj"))


@dataclass
class Config:
    """All configuration sections of the application."""

    window_config: WindowConfig = field(default_factory=WindowConfig)
    imgui_config: ImGuiConfig = field(default_factory=ImGuiConfig)
    logger_config: LoggerConfig = field(default_factory=LoggerConfig)
    app_config: AppConfig = field(default_factory=AppConfig)