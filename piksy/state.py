"""Editor state shared between the UI components."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from piksy.config import RESOURCE_DIR
from piksy.maths import Vec2
from piksy.sprite import Rect, Sprite
from piksy.tools import Tool


@dataclass
class MouseState:
    start_pos: Vec2 = field(default_factory=Vec2)
    current_pos: Vec2 = field(default_factory=Vec2)
    is_pressed: bool = False
    is_panning: bool = False
    is_dragging: bool = False


@dataclass
class ZoomState:
    current_scale: float = 1.0
    target_scale: float = 1.0
    zoom_speed: float = 0.1


@dataclass
class PanState:
    current_offset: Vec2 = field(default_factory=Vec2)
    target_offset: Vec2 = field(default_factory=Vec2)
    pan_speed: float = 0.7


@dataclass
class AnimationState:
    """Playback state; ``frame_duration`` defaults to one over ``fps``."""

    is_playing: bool = False
    fps: float = 24.0
    current_frame: int = 0
    frame_duration: float | None = None
    timer: float = 0.0
    selected_frames: set[int] = field(default_factory=set)

    def __post_init__(self) -> None:
        if self.frame_duration is None:
            self.frame_duration = 1.0 / self.fps


@dataclass
class ViewportState:
    size: Vec2 = field(default_factory=Vec2)
    selection_rect: Rect = field(default_factory=Rect)
    grid_cell_size: int = 20


@dataclass
class State:
    """Everything the editor components read and change while running."""

    texture_sprite: Sprite = field(default_factory=Sprite)
    replacement_color: list[float] = field(default_factory=lambda: [0.0, 0.0, 0.0, 0.0])
    current_path: Path = RESOURCE_DIR
    mouse_state: MouseState = field(default_factory=MouseState)
    zoom_state: ZoomState = field(default_factory=ZoomState)
    pan_state: PanState = field(default_factory=PanState)
    animation_state: AnimationState = field(default_factory=AnimationState)
    viewport_state: ViewportState = field(default_factory=ViewportState)
    delta_time: float = 0.0
    fps: float = 0.0
    current_tool: Tool = Tool.PAN