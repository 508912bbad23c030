# animation.py
from __future__ import annotations
import logging
import random
from dataclasses import dataclass

import pygame

from . import settings
from .input import FrameInput
from .utils import clamp, frame_rect

logger = logging.getLogger(__name__)


@dataclass
class AnimationState:
    column: int = 1
    row: int = 1
    ticks_per_frame: int = settings.TICKS_PER_FRAME
    frame_counter: int = 0
    scale: float = settings.ANIM_SCALE


@dataclass(frozen=True)
class DrawCommand:
    """What to draw this frame: which sheet, which part of it, where and how big."""
    character: str
    source: pygame.Rect
    scale: float
    offset: tuple[float, float]
    tint: tuple[int, int, int, int]


class AnimationController:
    """
    Tick-based sprite-sheet animation that follows the cursor.

    - tick(frame_input) once per logical tick: speed, character and debug toggles.
    - render(cursor) once per drawn frame: steps the sheet and returns a DrawCommand.
    - Steps one column every ticks_per_frame ticks, left to right, top to bottom.
    - The sprite shrinks a little every frame and pops back to full size
      when the sheet loops.
    """

    def __init__(
        self,
        characters: tuple[str, str] = tuple(settings.CHARACTER_IMAGES),
        starting_character: str = settings.STARTING_CHARACTER,
        ticks_per_frame: int = settings.TICKS_PER_FRAME,
        frame_w: int = settings.FRAME_WIDTH,
        frame_h: int = settings.FRAME_HEIGHT,
        cols: int = settings.SHEET_COLS,
        rows: int = settings.SHEET_ROWS,
        base_scale: float = settings.ANIM_SCALE,
        fractional_anchor: bool = settings.FRACTIONAL_ANCHOR,
        rng: random.Random | None = None,
    ):
        if len(characters) != 2:
            raise ValueError("AnimationController switches between exactly two characters.")
        if starting_character not in characters:
            raise ValueError(f"Unknown starting character: {starting_character!r}")
        if not settings.MIN_TICKS_PER_FRAME <= ticks_per_frame <= settings.MAX_TICKS_PER_FRAME:
            raise ValueError(
                f"ticks_per_frame must be in [{settings.MIN_TICKS_PER_FRAME}, "
                f"{settings.MAX_TICKS_PER_FRAME}], got {ticks_per_frame}"
            )
        if frame_w <= 0 or frame_h <= 0 or cols <= 0 or rows <= 0:
            raise ValueError("Sheet geometry must be positive.")

        self.characters = tuple(characters)
        self.character = starting_character
        self.frame_w = frame_w
        self.frame_h = frame_h
        self.cols = cols
        self.rows = rows
        self.base_scale = float(base_scale)
        self.fractional_anchor = fractional_anchor
        self.rng = rng or random.Random()

        self.state = AnimationState(ticks_per_frame=ticks_per_frame, scale=self.base_scale)
        self.debug = False
        self.cursor_text = ""
        self.tint: tuple[int, int, int, int] = settings.TINT_START

    # --------------------------
    # Update (fixed tick)
    # --------------------------

    def tick(self, frame_input: FrameInput) -> None:
        self.state.frame_counter += 1

        if self.debug:
            x, y = frame_input.cursor
            self.cursor_text = f"X:{x},Y:{y}"

        # Only one transition per tick; first match wins
        if frame_input.speed_up:
            self.set_ticks_per_frame(self.state.ticks_per_frame - 1)
        elif frame_input.slow_down:
            self.set_ticks_per_frame(self.state.ticks_per_frame + 1)
        elif frame_input.change_character:
            self.switch_character()
        elif frame_input.debug_held_ticks == settings.DEBUG_HOLD_TICKS:
            self.toggle_debug()

    def set_ticks_per_frame(self, value: int) -> None:
        self.state.ticks_per_frame = int(
            clamp(value, settings.MIN_TICKS_PER_FRAME, settings.MAX_TICKS_PER_FRAME)
        )
        logger.debug("ticks per frame: %d", self.state.ticks_per_frame)

    def switch_character(self) -> None:
        first, second = self.characters
        self.character = second if self.character == first else first
        logger.debug("character: %s", self.character)

    def toggle_debug(self) -> None:
        self.debug = not self.debug
        logger.debug("debug overlay %s", "on" if self.debug else "off")

    # --------------------------
    # Render (every drawn frame)
    # --------------------------

    def render(self, cursor: tuple[int, int]) -> DrawCommand:
        s = self.state

        # Counter jumps to ticks_per_frame, not 0, after a step
        if s.frame_counter % s.ticks_per_frame == 0:
            s.column += 1
            s.frame_counter = s.ticks_per_frame

        if s.column > self.cols:
            s.column = 1
            s.row += 1
            self.tint = self.random_tint()

        if s.row > self.rows:
            s.row = 1
            s.scale = self.base_scale

        x, y = cursor
        if self.fractional_anchor:
            anchor = s.scale
        else:
            anchor = int(s.scale)
        offset = (x - self.frame_w * anchor, y - self.frame_h * anchor)

        command = DrawCommand(
            character=self.character,
            source=frame_rect(s.column, s.row, self.frame_w, self.frame_h),
            scale=s.scale,
            offset=offset,
            tint=self.tint,
        )
        s.scale -= settings.SCALE_DECAY
        return command

    def random_tint(self) -> tuple[int, int, int, int]:
        lo, hi = settings.TINT_CHANNEL_MIN, settings.TINT_CHANNEL_MAX
        return (
            self.rng.randint(lo, hi),
            self.rng.randint(lo, hi),
            self.rng.randint(lo, hi),
            settings.TINT_ALPHA,
        )
