"""Layout constants and color definitions."""

# Timing
DURATION_MS = 2000
THROTTLE_MS = 40  # 25 fps, 50 frames over the default duration

# Layout dimensions
LANE_H = 80
LABEL_W = 120
CURVE_W = 120
TRACK_W = 480
STATUS_H = 36

# Box
BOX_W = 24
BOX_START = 20  # left edge of the box when the tween starts, inside the track
BOX_TRAVEL = 400  # pixels moved when the eased value reaches 1.0

# Colors
BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
LANE_SELECTED = (42, 42, 62)
LANE_BORDER = (50, 50, 70)
CURVE_BG = (15, 15, 25)
TRACK_RAIL = (60, 60, 80)
STATUS_BG = (35, 35, 50)
TEXT_COLOR = (200, 200, 210)
TEXT_DIM = (120, 120, 140)
LABEL_COLOR = (180, 180, 200)

# Easing name → color
EASING_COLORS: dict[str, tuple[int, int, int]] = {
    "linear": (0, 220, 220),
    "in_out_cubic": (255, 160, 40),
    "in_out_quartic": (60, 220, 80),
    "out_back": (220, 80, 220),
    "out_back2": (240, 220, 60),
    "out_elastic": (90, 140, 255),
}

EASING_NAMES = list(EASING_COLORS)

SCREEN_W = LABEL_W + CURVE_W + TRACK_W
SCREEN_H = LANE_H * len(EASING_NAMES) + STATUS_H
