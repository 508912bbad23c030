# game.py
# The Game class owns the window, the music and the main loop.
# All animation rules live in AnimationController; this file only feeds it
# input and draws what it asks for.

from __future__ import annotations
import logging

import pygame

from . import settings
from .animation import AnimationController, DrawCommand
from .assets import AssetError, AssetLoadError, load_assets
from .input import KeyTracker
from .utils import unpremultiply

logger = logging.getLogger(__name__)


class Game:
    def __init__(
        self,
        asset_root: str | None = None,
        muted: bool = settings.SOUND_OFF,
        fractional_anchor: bool = settings.FRACTIONAL_ANCHOR,
    ):
        pygame.init()

        # Fixed logical size; the window is never resized
        self.window = pygame.display.set_mode((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT))
        pygame.display.set_caption(settings.WINDOW_TITLE)
        pygame.mouse.set_visible(False)

        result = load_assets(asset_root, music=not muted)
        if not result.ok:
            pygame.quit()
            raise AssetLoadError(result.errors)
        self.assets = result.bundle

        self.clock = pygame.time.Clock()
        self.debug_font = pygame.font.SysFont("consolas", settings.DEBUG_FONT_SIZE)

        # Translucent layer filled with the current tint every frame
        self.tint_layer = pygame.Surface((settings.WINDOW_WIDTH, settings.WINDOW_HEIGHT), pygame.SRCALPHA)

        self.tracker = KeyTracker()
        self.controller = AnimationController(fractional_anchor=fractional_anchor)
        self.running = True

        if not muted:
            try:
                self.start_music()
            except AssetLoadError:
                pygame.quit()
                raise

    def start_music(self) -> None:
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(self.assets.music_path)
            pygame.mixer.music.set_volume(settings.MUSIC_VOLUME)
            pygame.mixer.music.play(-1)  # loop
        except pygame.error as exc:
            raise AssetLoadError([AssetError("music", self.assets.music_path, str(exc))]) from exc
        logger.info("Background music started")

    # ------------------ Main loop ------------------
    def run(self) -> None:
        while self.running:
            self.clock.tick(settings.FPS)

            self.handle_events()
            self.update()
            self.draw()

        pygame.quit()

    # ------------------ Events ------------------
    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False

            if event.type == pygame.KEYDOWN and event.key == settings.QUIT_KEY:
                self.running = False

    # ------------------ Update ------------------
    def update(self) -> None:
        self.tracker.update(pygame.key.get_pressed())
        self.controller.tick(self.tracker.snapshot(pygame.mouse.get_pos()))

    # ------------------ Draw ------------------
    def draw(self) -> None:
        command = self.controller.render(pygame.mouse.get_pos())

        self.window.blit(self.assets.background, (0, 0))
        # Tints are premultiplied; the layer blends straight alpha
        self.tint_layer.fill(unpremultiply(command.tint))
        self.window.blit(self.tint_layer, (0, 0))

        self.draw_sprite(command)
        self.draw_instructions()

        if self.controller.debug:
            self.draw_debug()

        pygame.display.flip()

    def draw_sprite(self, command: DrawCommand) -> None:
        w = round(command.source.width * command.scale)
        h = round(command.source.height * command.scale)
        if w <= 0 or h <= 0:
            return

        sheet = self.assets.characters[command.character]
        frame = sheet.subsurface(command.source)
        frame = pygame.transform.smoothscale(frame, (w, h))
        self.window.blit(frame, command.offset)

    def instruction_positions(self) -> list[tuple[int, int]]:
        """Top-left of each instruction line; INSTRUCTIONS_POS is the first baseline."""
        x, baseline = settings.INSTRUCTIONS_POS
        top = baseline - self.assets.font.get_ascent()
        line_height = self.assets.font.get_linesize()
        return [(x, top + i * line_height) for i in range(len(settings.INSTRUCTIONS))]

    def draw_instructions(self) -> None:
        for line, pos in zip(settings.INSTRUCTIONS, self.instruction_positions()):
            surf = self.assets.font.render(line, True, settings.TEXT_COLOR)
            self.window.blit(surf, pos)

    def draw_debug(self) -> None:
        # Ticks and frames share one loop, so TPS and FPS read the same clock
        fps = self.clock.get_fps()
        lines = (
            self.controller.cursor_text,
            f"FPS：{fps:.2f}",
            f"TPS：{fps:.2f}",
        )
        for i, line in enumerate(lines):
            surf = self.debug_font.render(line, True, settings.TEXT_COLOR)
            self.window.blit(surf, (0, i * settings.DEBUG_LINE_HEIGHT))
