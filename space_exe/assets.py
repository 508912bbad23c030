# assets.py
# Loads everything the game needs up front.
#
# load_assets() never raises for a bad asset: it returns an AssetLoadResult
# holding either a full AssetBundle or the list of problems. The caller
# decides what to do (the game refuses to start).

from __future__ import annotations
import logging
import os
from dataclasses import dataclass, field

import pygame

from . import settings
from .utils import asset_path, load_image

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AssetError:
    name: str
    path: str
    reason: str

    def __str__(self) -> str:
        return f"{self.name} ({self.path}): {self.reason}"


class AssetLoadError(Exception):
    """Raised by the game when start-up assets could not be loaded."""

    def __init__(self, errors: list[AssetError]):
        self.errors = list(errors)
        super().__init__("; ".join(str(e) for e in self.errors))


@dataclass
class AssetBundle:
    font: pygame.font.Font
    music_path: str
    background: pygame.Surface
    characters: dict[str, pygame.Surface]


@dataclass
class AssetLoadResult:
    bundle: AssetBundle | None = None
    errors: list[AssetError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.bundle is not None and not self.errors


def asset_manifest(root: str | None = None) -> dict[str, str]:
    """Logical asset name -> file path."""
    manifest = {
        "font": asset_path(*settings.FONT_FILE, root=root),
        "music": asset_path(*settings.MUSIC_FILE, root=root),
        "background": asset_path(*settings.BACKGROUND_IMAGE, root=root),
    }
    for name, parts in settings.CHARACTER_IMAGES.items():
        manifest[name] = asset_path(*parts, root=root)
    return manifest


def check_music(path: str) -> str:
    """Open the track with the mixer so a bad file fails now, not at playback."""
    if not pygame.mixer.get_init():
        pygame.mixer.init()
    pygame.mixer.music.load(path)
    pygame.mixer.music.unload()
    return path


def load_assets(root: str | None = None, convert: bool = True, music: bool = True) -> AssetLoadResult:
    """
    Load every start-up asset.

    music=False skips opening the track (the game is muted and never plays it);
    the file must still exist.
    """
    manifest = asset_manifest(root)

    missing = [
        AssetError(name, path, "file not found")
        for name, path in manifest.items()
        if not os.path.isfile(path)
    ]
    if missing:
        return AssetLoadResult(errors=missing)

    errors: list[AssetError] = []
    loaded: dict[str, object] = {}

    if not pygame.font.get_init():
        pygame.font.init()

    for name, path in manifest.items():
        try:
            if name == "font":
                loaded[name] = pygame.font.Font(path, settings.INSTRUCTIONS_FONT_SIZE)
            elif name == "music":
                loaded[name] = check_music(path) if music else path
            else:
                loaded[name] = load_image(path, convert=convert)
        except (pygame.error, OSError) as exc:
            errors.append(AssetError(name, path, str(exc)))

    if errors:
        return AssetLoadResult(errors=errors)

    bundle = AssetBundle(
        font=loaded["font"],
        music_path=loaded["music"],
        background=loaded["background"],
        characters={name: loaded[name] for name in settings.CHARACTER_IMAGES},
    )
    logger.info("Loaded %d assets from %s", len(manifest), root or asset_path())
    return AssetLoadResult(bundle=bundle)
