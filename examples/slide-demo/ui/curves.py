"""Easing curve plot renderer."""
from __future__ import annotations

import pygame

from timed_tween import get_easing

from ui.constants import CURVE_BG, EASING_COLORS, TEXT_DIM


def draw_curve_plot(
    surface: pygame.Surface,
    easing_name: str,
    x: int,
    y: int,
    w: int,
    h: int,
    current_t: float,
) -> None:
    """Draw an easing curve with a tracking dot.

    The plot leaves a quarter of its height above and below [0, 1] so the
    overshooting curves stay visible.
    """
    pad = 8
    plot_x = x + pad
    plot_w = w - 2 * pad
    plot_h = (h - 2 * pad) // 2
    plot_y = y + pad + plot_h // 2

    pygame.draw.rect(surface, CURVE_BG, (x, y, w, h))

    # Axes
    pygame.draw.line(
        surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x + plot_w, plot_y + plot_h)
    )
    pygame.draw.line(surface, TEXT_DIM, (plot_x, plot_y + plot_h), (plot_x, plot_y))

    easing_fn = get_easing(easing_name)
    color = EASING_COLORS.get(easing_name, (200, 200, 200))

    samples = 80
    points = []
    for i in range(samples + 1):
        t = i / samples
        v = easing_fn(t)
        points.append((plot_x + t * plot_w, plot_y + plot_h - v * plot_h))
    pygame.draw.lines(surface, color, False, points, 2)

    # Moving dot
    if 0.0 <= current_t <= 1.0:
        v = easing_fn(current_t)
        dot_x = int(plot_x + current_t * plot_w)
        dot_y = int(plot_y + plot_h - v * plot_h)
        pygame.draw.circle(surface, (255, 255, 255), (dot_x, dot_y), 4)
        pygame.draw.circle(surface, color, (dot_x, dot_y), 3)
