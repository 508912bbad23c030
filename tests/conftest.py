"""Pytest configuration and fixtures."""

from __future__ import annotations

import os
import random
import shutil
import wave
from collections import defaultdict

# No real window or sound card during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from space_exe import settings
from space_exe.animation import AnimationController
from space_exe.assets import asset_manifest

BACKGROUND_COLOR = (200, 200, 200)
SHEET_COLOR = (250, 10, 10)
SHEET_FRAME = 4  # tiny square frames so test sheets stay small


def write_image(path: str, size=(12, 8), color=(40, 80, 120)) -> None:
    os.makedirs(os.path.dirname(path), exist_ok=True)
    surface = pygame.Surface(size)
    surface.fill(color)
    pygame.image.save(surface, path)


def write_silence(path: str) -> None:
    """A tenth of a second of 16-bit mono silence."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with wave.open(path, "wb") as w:
        w.setnchannels(1)
        w.setsampwidth(2)
        w.setframerate(22050)
        w.writeframes(b"\x00\x00" * 2205)


@pytest.fixture
def controller() -> AnimationController:
    """Controller with default settings and a seeded tint generator."""
    return AnimationController(rng=random.Random(1234))


@pytest.fixture
def pressed():
    """Build a get_pressed()-like mapping from the given key codes."""
    def _pressed(*keys: int):
        return defaultdict(bool, {key: True for key in keys})
    return _pressed


@pytest.fixture
def asset_dir(tmp_path, monkeypatch):
    """A complete asset directory with tiny placeholder files.

    The track is a short WAV, so the music file name is switched to .wav.
    """
    monkeypatch.setattr(settings, "MUSIC_FILE", ("music", "track.wav"))
    root = str(tmp_path)
    manifest = asset_manifest(root)

    pygame.font.init()
    default_font = os.path.join(os.path.dirname(pygame.__file__), pygame.font.get_default_font())
    os.makedirs(os.path.dirname(manifest["font"]), exist_ok=True)
    shutil.copy(default_font, manifest["font"])

    write_silence(manifest["music"])

    write_image(manifest["background"], size=(settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT), color=BACKGROUND_COLOR)
    sheet_size = (SHEET_FRAME * settings.SHEET_COLS, SHEET_FRAME * settings.SHEET_ROWS)
    for name in settings.CHARACTER_IMAGES:
        write_image(manifest[name], size=sheet_size, color=SHEET_COLOR)
    return root
