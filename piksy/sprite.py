"""A positioned, scalable view of a region of a texture."""

from __future__ import annotations

from dataclasses import dataclass, replace

from PIL import Image, ImageDraw

from piksy.texture import Texture2D

_SELECTION_COLOR = "#ffff00"


@dataclass
class Rect:
    """An integer rectangle."""

    x: int = 0
    y: int = 0
    w: int = 0
    h: int = 0


def _blit(target: Image.Image, source: Image.Image, x: int, y: int) -> None:
    left, top = max(x, 0), max(y, 0)
    right = min(x + source.width, target.width)
    bottom = min(y + source.height, target.height)
    if right <= left or bottom <= top:
        return
    part = source.crop((left - x, top - y, right - x, bottom - y))
    if target.mode == "RGBA":
        target.alpha_composite(part, (left, top))
    else:
        target.paste(part, (left, top), part)


class Sprite:
    """Draws ``frame_rect`` of a texture into ``rect`` of a target image."""

    def __init__(
        self,
        texture: Texture2D | None = None,
        rect: Rect | None = None,
        frame_rect: Rect | None = None,
    ) -> None:
        self._texture = texture
        self._rect = replace(rect) if rect is not None else Rect()
        self._frame_rect = replace(frame_rect) if frame_rect is not None else Rect()
        self.selected = False
        if texture is None:
            return
        if self._frame_rect.w == 0:
            self._frame_rect.w = texture.width
        if self._rect.w == 0:
            self._rect.w = texture.width
        if self._frame_rect.h == 0:
            self._frame_rect.h = texture.height
        if self._rect.h == 0:
            self._rect.h = texture.height

    def set_size(self, w: int, h: int) -> None:
        self._rect.w = w
        self._rect.h = h

    def set_position(self, x: int, y: int) -> None:
        self._rect.x = x
        self._rect.y = y

    def set_frame_rect(self, frame_rect: Rect) -> None:
        self._frame_rect = replace(frame_rect)

    def set_texture(self, texture: Texture2D | None) -> None:
        """Use ``texture`` and, if it is not None, resize to all of it."""
        self._texture = texture
        if texture is None:
            return
        self._frame_rect.w = texture.width
        self._frame_rect.h = texture.height
        self._rect.w = texture.width
        self._rect.h = texture.height

    @property
    def texture(self) -> Texture2D | None:
        return self._texture

    @property
    def x(self) -> int:
        return self._rect.x

    @property
    def y(self) -> int:
        return self._rect.y

    @property
    def width(self) -> int:
        return self._rect.w

    @property
    def height(self) -> int:
        return self._rect.h

    @property
    def rect(self) -> Rect:
        return replace(self._rect)

    @property
    def frame_rect(self) -> Rect:
        return replace(self._frame_rect)

    def move(self, dx: int, dy: int) -> None:
        self._rect.x += dx
        self._rect.y += dy

    def render(
        self,
        target: Image.Image | None,
        scale: float = 1.0,
        offset_x: float = 0.0,
        offset_y: int = 0,
    ) -> Rect:
        """Draw the sprite onto ``target`` and return the rectangle it covers."""
        if target is None:
            raise ValueError("Cannot render a sprite if the target is null.")
        if self._texture is None or self._texture.image is None:
            raise ValueError("Cannot render a sprite if the texture is null.")

        scaled = Rect(
            int((self._rect.x + offset_x) * scale),
            int((self._rect.y + offset_y) * scale),
            int(self._rect.w * scale),
            int(self._rect.h * scale),
        )

        frame = self._frame_rect
        if scaled.w > 0 and scaled.h > 0 and frame.w > 0 and frame.h > 0:
            region = self._texture.image.crop(
                (frame.x, frame.y, frame.x + frame.w, frame.y + frame.h)
            )
            region = region.resize((scaled.w, scaled.h), Image.Resampling.NEAREST)
            _blit(target, region, scaled.x, scaled.y)

        if self.selected and scaled.w > 0 and scaled.h > 0:
            ImageDraw.Draw(target).rectangle(
                [scaled.x, scaled.y, scaled.x + scaled.w - 1, scaled.y + scaled.h - 1],
                outline=_SELECTION_COLOR,
            )
        return scaled