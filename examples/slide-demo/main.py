"""Slide Demo — Blocking tweens driving a pygame window.

Exercises timed_tween.run_tween: each run blocks the main loop, and the
performer redraws the window and pumps events itself, the way a desktop
app animates a widget in place.

Controls:
  Space   Slide the selected box out (or back)
  1-6     Select easing function
  T       Toggle throttle (25 fps cap / unthrottled)
  +/-     Adjust tween duration
  Esc     Quit (also stops a running tween)
"""
from __future__ import annotations

import logging
import sys

import pygame

from timed_tween import Step, TweenOptions, lerp_performer, run_tween

from ui.constants import (
    BG_COLOR,
    BOX_START,
    BOX_TRAVEL,
    DURATION_MS,
    EASING_NAMES,
    SCREEN_H,
    SCREEN_W,
    THROTTLE_MS,
)
from ui.lanes import draw_lanes, draw_status_bar

_NUMBER_KEYS = [pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5, pygame.K_6]


class DemoState:
    """Holds window state between tweens."""

    def __init__(self, screen: pygame.Surface, font: pygame.font.Font) -> None:
        self.screen = screen
        self.font = font
        self.selected = EASING_NAMES[0]
        self.duration = DURATION_MS
        self.throttled = True
        self.running = True
        self.box_x = {name: float(BOX_START) for name in EASING_NAMES}
        self.current_t = -1.0
        self.frames = 0

    def status(self) -> str:
        throttle = f"{THROTTLE_MS} ms" if self.throttled else "off"
        return (
            f"Space: slide   1-6: easing   T: throttle ({throttle})   "
            f"+/-: duration ({self.duration} ms)   last run: {self.frames} frames"
        )

    def render(self) -> None:
        self.screen.fill(BG_COLOR)
        draw_lanes(self.screen, self.font, self.selected, self.box_x, self.current_t)
        draw_status_bar(self.screen, self.font, self.status())
        pygame.display.flip()

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
            elif event.key == pygame.K_SPACE:
                self.slide()
            elif event.key == pygame.K_t:
                self.throttled = not self.throttled
            elif event.key in (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS):
                self.duration = min(self.duration + 500, 5000)
            elif event.key in (pygame.K_MINUS, pygame.K_KP_MINUS):
                self.duration = max(self.duration - 500, 0)
            elif event.key in _NUMBER_KEYS:
                self.selected = EASING_NAMES[_NUMBER_KEYS.index(event.key)]

    def slide(self) -> None:
        """Run one blocking tween moving the selected box to the other end."""
        name = self.selected
        start = self.box_x[name]
        end = BOX_START + BOX_TRAVEL if start == BOX_START else float(BOX_START)
        self.current_t = 0.0

        def move(x: float) -> Step:
            self.box_x[name] = x
            self.render()
            for event in pygame.event.get():
                if event.type == pygame.QUIT or (
                    event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE
                ):
                    self.running = False
                    return Step.STOP
            return Step.CONTINUE

        slide_to = lerp_performer(start, end, move)
        ticks_start = pygame.time.get_ticks()

        def performer(value: float) -> Step:
            # Curve dot follows elapsed time, not the eased value.
            if self.duration:
                self.current_t = min((pygame.time.get_ticks() - ticks_start) / self.duration, 1.0)
            else:
                self.current_t = 1.0
            return slide_to(value)

        options = TweenOptions(throttle=THROTTLE_MS if self.throttled else 0)
        self.frames = run_tween(name, self.duration, performer, options=options)
        self.current_t = -1.0
        self.render()


def main() -> None:
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Slide Demo — timed-tween")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    state = DemoState(screen, font)

    while state.running:
        clock.tick(30)
        for event in pygame.event.get():
            state.handle_event(event)
            if not state.running:
                break
        state.render()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
