# settings.py
# Central place for constants so the toy can be tuned without touching logic.

import pygame

# Window / render
WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "space.exe"
FPS = 60  # also the logical tick rate

# Sprite sheets: COLS x ROWS grid of equal frames
FRAME_WIDTH = 750
FRAME_HEIGHT = 720
SHEET_COLS = 6
SHEET_ROWS = 4

# Animation tuning
ANIM_SCALE = 0.8           # base scale, restored every time the sheet loops
SCALE_DECAY = 0.0033       # scale lost per drawn frame
TICKS_PER_FRAME = 6        # ticks between sheet steps (lower = faster)
MIN_TICKS_PER_FRAME = 1
MAX_TICKS_PER_FRAME = 8
FRACTIONAL_ANCHOR = False  # False keeps the int(scale) cursor anchoring

# Debug overlay
DEBUG_HOLD_TICKS = 30      # hold the debug key this long to toggle

# Background tint (premultiplied alpha: r, g, b are already scaled by alpha)
TINT_START = (0, 0, 0, 255)
TINT_CHANNEL_MIN = 1
TINT_CHANNEL_MAX = 130
TINT_ALPHA = 140

# Keys
SPEED_UP_KEY = pygame.K_RIGHT
SLOW_DOWN_KEY = pygame.K_LEFT
CHANGE_CHARACTER_KEY = pygame.K_SPACE
DEBUG_KEY = pygame.K_F4
QUIT_KEY = pygame.K_ESCAPE

# Text
INSTRUCTIONS = (
    "←: Kalm",
    "→: Gotta Go Fast",
    "Space: Switch character",
)
INSTRUCTIONS_POS = (15, 75)  # x, baseline of the first line
INSTRUCTIONS_FONT_SIZE = 26
DEBUG_FONT_SIZE = 16
DEBUG_LINE_HEIGHT = 15
TEXT_COLOR = (255, 255, 255)

# Assets (relative to the asset root)
FONT_FILE = ("font", "BalsamiqSans-Regular.ttf")
MUSIC_FILE = ("music", "shootingStars.mp3")
BACKGROUND_IMAGE = ("images", "spaceBG.png")
CHARACTER_IMAGES = {
    "ame": ("images", "ameSprite.png"),
    "kfc": ("images", "kfcSprite.png"),
}
STARTING_CHARACTER = "ame"

# Audio
MUSIC_VOLUME = 0.5
SOUND_OFF = False
