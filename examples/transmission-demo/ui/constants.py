"""Layout constants and color definitions."""

# Timing
FPS = 60
GLOBE_LOAD_MS = 1200  # simulated renderer library load

# Layout dimensions
SCREEN_W = 960
SCREEN_H = 640
TEXT_MARGIN = 80
LINE_H = 26
BUTTON_W = 160
BUTTON_H = 40

# Starfield
STAR_COUNT = 180

# Colors
BG_COLOR = (8, 8, 18)
ROMANTIC_BG = (36, 16, 28)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
TERMINAL_COLOR = (120, 230, 160)
ACCENT = (167, 139, 250)
BUTTON_BG = (45, 40, 70)
BUTTON_DISABLED = (35, 35, 45)
ERROR_COLOR = (240, 110, 110)
GLOBE_FILL = (18, 30, 60)
GLOBE_GRID = (40, 60, 100)

# Globe map window, degrees
MAP_LNG = (-130.0, -60.0)
MAP_LAT = (22.0, 52.0)


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    value = value.lstrip("#")
    return int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16)
