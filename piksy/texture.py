"""Images loaded from disk for drawing, and fonts for text."""

from __future__ import annotations

from os import PathLike
from pathlib import Path

from PIL import Image, ImageFont

from piksy.logger import get_logger

DEFAULT_FONT_SIZE = 24


class TextureError(RuntimeError):
    """Raised when a texture cannot be loaded."""


class Texture2D:
    """An RGBA image, optionally backed by a file it can be reloaded from."""

    def __init__(
        self,
        path: str | PathLike[str] | None = None,
        image: Image.Image | None = None,
    ) -> None:
        self.path: Path | None = Path(path) if path is not None else None
        self._image: Image.Image | None = None
        if image is not None:
            self._image = image.convert("RGBA")
        elif self.path is not None:
            self._load()

    @classmethod
    def from_image(cls, image: Image.Image) -> Texture2D:
        """Wrap a copy of ``image``, converted to RGBA."""
        return cls(image=image)

    def reload(self) -> None:
        """Read the image again from :attr:`path`."""
        self._load()

    def _load(self) -> None:
        logger = get_logger()
        if self.path is None:
            logger.error("Failed to load the texture, it has no path")
            raise TextureError("Failed to load the texture, it has no path")
        if not self.path.exists():
            logger.error("Failed to load the texture, file does not exist")
            raise TextureError(
                f"Failed to load the texture, file does not exist: {self.path}"
            )
        try:
            with Image.open(self.path) as source:
                self._image = source.convert("RGBA")
        except OSError as exc:
            logger.error("Failed to load the image %s: %s", str(self.path), str(exc))
            raise TextureError(f"Failed to load the image: {exc}") from exc

    @property
    def image(self) -> Image.Image | None:
        """The pixels of the texture, or None for an empty texture."""
        return self._image

    @property
    def width(self) -> int:
        return self._image.width if self._image is not None else 0

    @property
    def height(self) -> int:
        return self._image.height if self._image is not None else 0


class Font:
    """A TrueType font at a fixed size; failure to open it is logged."""

    def __init__(self, path: str | PathLike[str], size: int = DEFAULT_FONT_SIZE) -> None:
        self.path = Path(path)
        self.size = size
        self._font: ImageFont.FreeTypeFont | None
        try:
            self._font = ImageFont.truetype(str(self.path), size)
        except (OSError, ImportError) as exc:
            get_logger().error("Failed to load font: %s", str(exc))
            self._font = None

    @property
    def font(self) -> ImageFont.FreeTypeFont | None:
        """The loaded font, or None if it could not be opened."""
        return self._font