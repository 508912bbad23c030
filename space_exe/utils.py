# utils.py
# Small helpers so core classes stay readable.

from __future__ import annotations
import os
import pygame

def asset_path(*parts: str, root: str | None = None) -> str:
    """Build a path under the asset root (project root/assets by default)."""
    if root is None:
        here = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        root = os.path.join(here, "assets")
    return os.path.join(root, *parts)

def load_image(path: str, convert: bool = True) -> pygame.Surface:
    """Load an image with per-pixel alpha.

    convert=False skips convert_alpha(), which needs an open display.
    """
    image = pygame.image.load(path)
    return image.convert_alpha() if convert else image

def frame_rect(column: int, row: int, frame_w: int, frame_h: int) -> pygame.Rect:
    """
    Source rectangle of one frame in a grid sprite sheet.

    column and row are 1-based: (1, 1) is the top-left frame.
    """
    if column < 1 or row < 1:
        raise ValueError(f"Frame indices are 1-based, got column={column}, row={row}")
    return pygame.Rect((column - 1) * frame_w, (row - 1) * frame_h, frame_w, frame_h)

def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))

def unpremultiply(color: tuple[int, int, int, int]) -> tuple[int, int, int, int]:
    """
    Turn a premultiplied-alpha colour into the straight-alpha colour pygame expects.

    (130, 0, 0, 140) premultiplied is (236, 0, 0, 140) straight.
    """
    r, g, b, a = color
    if a == 0:
        return (0, 0, 0, 0)
    return (
        min(255, r * 255 // a),
        min(255, g * 255 // a),
        min(255, b * 255 // a),
        a,
    )
