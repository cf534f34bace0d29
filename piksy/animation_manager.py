"""Keeps the project's named animations and tracks the current one."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from piksy.animation import Animation
from piksy.logger import Logger, get_logger

_DEFAULT_PREFIX = "New Animation "


class AnimationManager:
    """A collection of animations keyed by unique name."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._animations: dict[str, Animation] = {}
        self._current: str | None = None

    def new_default_animation(self) -> None:
        """Add an empty animation named ``New Animation <n>`` with the lowest free n."""
        index = 1
        while f"{_DEFAULT_PREFIX}{index}" in self._animations:
            index += 1
        name = f"{_DEFAULT_PREFIX}{index}"
        self.add_animation(name, Animation(name))

    def add_animation(self, name: str, animation: Animation) -> None:
        """Add ``animation`` and make it current.

        A taken name gets a number suffix: ``<name> <n>``.
        """
        animation_name = name
        if animation_name in self._animations:
            index = 1
            while f"{name} {index}" in self._animations:
                index += 1
            animation_name = f"{name} {index}"
        animation.name = animation_name
        self._animations[animation_name] = animation
        self._logger.info("Added animation '%s'.", animation_name)
        self.set_current_animation(animation_name)

    def remove_animation(self, name: str) -> None:
        """Remove the animation called ``name``; unknown names are logged and ignored."""
        if name not in self._animations:
            self._logger.warn("Animation '%s' not found. Cannot delete it.", name)
            return
        if self._current == name:
            self._current = None
        self._logger.info("Deleted animation '%s'.", name)
        del self._animations[name]

    def set_current_animation(self, name: str) -> None:
        """Make ``name`` current; unknown names leave the current one unchanged."""
        if name not in self._animations:
            self._logger.info(
                "Animation '%s' not found. Cannot set as current animation.", name
            )
            return
        self._current = name

    def update_animation_name(self, name: str) -> bool:
        """Rename the current animation to ``name``.

        Returns False if ``name`` is taken or there is no current animation.
        """
        if name in self._animations:
            self._logger.warn(
                "Animation '%s' already exists. Cannot rename the animation.", name
            )
            return False
        if self._current is None:
            self._logger.warn("No current animation to rename to '%s'.", name)
            return False
        old_name = self._current
        animation = self._animations.pop(old_name)
        animation.name = name
        self._animations[name] = animation
        self._current = name
        self._logger.info("Renamed animation '%s' to '%s'.", old_name, name)
        return True

    def clear(self) -> None:
        """Remove every animation."""
        self._animations.clear()
        self._current = None
        self._logger.info("Cleared all the animations.")

    @property
    def animations(self) -> Mapping[str, Animation]:
        """Read-only view of the animations by name."""
        return MappingProxyType(self._animations)

    @property
    def current_animation(self) -> Animation | None:
        if self._current is None:
            return None
        return self._animations[self._current]