"""Layers of the application and the ordered stack that holds them."""

from __future__ import annotations

from typing import Any

from piksy.logger import Logger, get_logger


class Layer:
    """A unit of the application that receives updates, renders and events.

    The base implementation keeps track of its own lifecycle: whether it is
    attached, how much time it has been advanced by, how many times it has
    been drawn and the last event it saw. Subclasses override the hooks to
    add behaviour of their own.
    """

    def __init__(self, state: Any, debug_name: str = "<Unnamed Layer>") -> None:
        self.state = state
        self.debug_name = debug_name
        self.attached = False
        self.elapsed = 0.0
        self.render_count = 0
        self.last_event: Any = None

    def on_attach(self) -> None:
        """Called when the layer is added to a stack."""
        self.attached = True

    def on_detach(self) -> None:
        """Called when the layer leaves a stack."""
        self.attached = False

    def on_update(self, dt: float) -> None:
        """Advance the layer by ``dt`` seconds."""
        self.elapsed += dt

    def on_render(self) -> None:
        """Draw the layer."""
        self.render_count += 1

    def on_event(self, event: Any) -> bool:
        """Handle ``event``; return True to stop it reaching later layers."""
        self.last_event = event
        return False


class LayerStack:
    """Normal layers followed by overlays, in the order they are processed."""

    def __init__(self, logger: Logger | None = None) -> None:
        self._logger = logger if logger is not None else get_logger()
        self._layers: list[Layer] = []
        self._insert_index = 0

    def __enter__(self) -> LayerStack:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def __iter__(self):
        return iter(list(self._layers))

    def __len__(self) -> int:
        return len(self._layers)

    def push_layer(self, layer: Layer) -> None:
        """Attach ``layer`` and place it after the other normal layers."""
        layer.on_attach()
        self._layers.insert(self._insert_index, layer)
        self._insert_index += 1

    def push_overlay(self, overlay: Layer) -> None:
        """Attach ``overlay`` and place it at the very end."""
        overlay.on_attach()
        self._layers.append(overlay)

    def pop_layer(self, layer: Layer) -> None:
        """Detach and remove a normal layer; a missing one is logged."""
        for position, candidate in enumerate(self._layers[: self._insert_index]):
            if candidate is layer:
                candidate.on_detach()
                del self._layers[position]
                self._insert_index -= 1
                return
        self._logger.warn("pop_layer(): Layer not found among normal layers!")

    def pop_overlay(self, overlay: Layer) -> None:
        """Detach and remove an overlay; a missing one is logged."""
        for offset, candidate in enumerate(self._layers[self._insert_index :]):
            if candidate is overlay:
                candidate.on_detach()
                del self._layers[self._insert_index + offset]
                return
        self._logger.warn("pop_overlay(): Overlay not found!")

    @property
    def layers(self) -> list[Layer]:
        """The layers in processing order."""
        return list(self._layers)

    def close(self) -> None:
        """Detach every layer, last first, and empty the stack."""
        for layer in reversed(self._layers):
            layer.on_detach()
        self._layers.clear()
        self._insert_index = 0