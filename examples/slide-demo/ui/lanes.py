"""Lane rendering: label, curve plot, and sliding box per easing."""
from __future__ import annotations

import pygame

from ui.constants import (
    BOX_START,
    BOX_W,
    CURVE_W,
    EASING_COLORS,
    EASING_NAMES,
    LABEL_COLOR,
    LABEL_W,
    LANE_BG,
    LANE_BORDER,
    LANE_H,
    LANE_SELECTED,
    SCREEN_H,
    SCREEN_W,
    STATUS_BG,
    STATUS_H,
    TEXT_DIM,
    TRACK_RAIL,
    TRACK_W,
)
from ui.curves import draw_curve_plot


def draw_lanes(
    surface: pygame.Surface,
    font: pygame.font.Font,
    selected: str,
    box_x: dict[str, float],
    current_t: float,
) -> None:
    """Draw one lane per easing; only the selected lane tracks current_t."""
    track_x = LABEL_W + CURVE_W

    for i, easing in enumerate(EASING_NAMES):
        lane_y = i * LANE_H
        bg = LANE_SELECTED if easing == selected else LANE_BG
        pygame.draw.rect(surface, bg, (0, lane_y, SCREEN_W, LANE_H))
        pygame.draw.line(surface, LANE_BORDER, (0, lane_y + LANE_H - 1), (SCREEN_W, lane_y + LANE_H - 1))

        label = font.render(f"{i + 1} {easing}", True, LABEL_COLOR)
        surface.blit(label, (8, lane_y + LANE_H // 2 - label.get_height() // 2))

        t = current_t if easing == selected else -1.0
        draw_curve_plot(surface, easing, LABEL_W, lane_y, CURVE_W, LANE_H, t)

        rail_y = lane_y + LANE_H // 2
        pygame.draw.line(surface, TRACK_RAIL, (track_x + BOX_START, rail_y), (track_x + TRACK_W - 20, rail_y))

        x = int(track_x + box_x.get(easing, BOX_START))
        pygame.draw.rect(surface, EASING_COLORS[easing], (x, rail_y - BOX_W // 2, BOX_W, BOX_W))


def draw_status_bar(surface: pygame.Surface, font: pygame.font.Font, message: str) -> None:
    """Draw the bottom help line."""
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    text = font.render(message, True, TEXT_DIM)
    surface.blit(text, (10, y + STATUS_H // 2 - text.get_height() // 2))
