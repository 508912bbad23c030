# input.py
# Turns "which keys are down right now" into per-tick key queries:
# - just_pressed(key): the key went down this tick
# - duration(key): how many consecutive ticks the key has been held

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable

from . import settings


@dataclass(frozen=True)
class FrameInput:
    """Everything the animation controller reads for one tick."""
    speed_up: bool = False
    slow_down: bool = False
    change_character: bool = False
    debug_held_ticks: int = 0
    cursor: tuple[int, int] = (0, 0)


class KeyTracker:
    """
    Counts how long each watched key has been held.

    Call update() exactly once per tick with the result of
    pygame.key.get_pressed() (or anything indexable by key code).
    """

    def __init__(self, keys: Iterable[int] | None = None):
        if keys is None:
            keys = (
                settings.SPEED_UP_KEY,
                settings.SLOW_DOWN_KEY,
                settings.CHANGE_CHARACTER_KEY,
                settings.DEBUG_KEY,
            )
        self.durations: dict[int, int] = {key: 0 for key in keys}

    def update(self, pressed) -> None:
        for key in self.durations:
            if pressed[key]:
                self.durations[key] += 1
            else:
                self.durations[key] = 0

    def duration(self, key: int) -> int:
        return self.durations.get(key, 0)

    def just_pressed(self, key: int) -> bool:
        return self.duration(key) == 1

    def snapshot(self, cursor: tuple[int, int]) -> FrameInput:
        return FrameInput(
            speed_up=self.just_pressed(settings.SPEED_UP_KEY),
            slow_down=self.just_pressed(settings.SLOW_DOWN_KEY),
            change_character=self.just_pressed(settings.CHANGE_CHARACTER_KEY),
            debug_held_ticks=self.duration(settings.DEBUG_KEY),
            cursor=(int(cursor[0]), int(cursor[1])),
        )
