"""Loads textures and fonts once and hands out the shared instances."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from piksy.logger import Logger, get_logger
from piksy.texture import Font, Texture2D


class ResourceManager:
    """A cache of textures and fonts keyed by the path they were loaded from."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._textures: dict[str, Texture2D] = {}
        self._fonts: dict[str, Font] = {}

    @property
    def textures(self) -> Mapping[str, Texture2D]:
        return MappingProxyType(self._textures)

    @property
    def fonts(self) -> Mapping[str, Font]:
        return MappingProxyType(self._fonts)

    def load_texture(self, texture_path: str) -> None:
        self.get_texture(texture_path)

    def get_texture(self, texture_path: str) -> Texture2D:
        """Return the texture at ``texture_path``, loading it on first use."""
        key = str(texture_path)
        if key in self._textures:
            return self._textures[key]
        if not Path(key).exists():
            self._logger.error(
                "Failed to get the texture: File not found, Path: %s", key
            )
            raise FileNotFoundError(
                f"Failed to get the texture: File not found at: {key}"
            )
        self._logger.debug("Loading texture: %s", key)
        texture = Texture2D(key)
        self._textures[key] = texture
        return texture

    def load_font(self, font_path: str) -> None:
        self.get_font(font_path)

    def get_font(self, font_path: str) -> Font:
        """Return the font at ``font_path``, loading it on first use."""
        key = str(font_path)
        if key in self._fonts:
            return self._fonts[key]
        if not Path(key).exists():
            self._logger.error("Failed to get the font: File not found, Path: %s", key)
            raise FileNotFoundError(f"Failed to get the font: File not found at: {key}")
        self._logger.debug("Loading font: %s", key)
        font = Font(key)
        self._fonts[key] = font
        return font

    def cleanup(self) -> None:
        """Drop every cached texture and font."""
        for path in self._textures:
            self._logger.debug("Cleaning up texture: %s", path)
        self._textures.clear()
        for path in self._fonts:
            self._logger.debug("Cleaning up font: %s", path)
        self._fonts.clear()
        self._logger.debug("Resource manager cleaned up successfully")