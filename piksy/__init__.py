"""Core of a sprite and animation editor: config, logging, frames, animations, textures, sprites, layers and state."""

__version__ = "1.0.0"