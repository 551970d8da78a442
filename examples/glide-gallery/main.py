"""Glide Gallery -- side-by-side easing lanes driven by tick-glide.

Each lane owns its own Tweenable, so a lane only accepts a new launch once
its orb has arrived or been stopped. All lanes share one RealtimeScheduler,
pumped once per frame.

Controls:
  Space   Launch every idle lane
  P       Pause / resume all lanes
  S       Stop all lanes where they are
  E       Stop all lanes at their target
  R       Toggle whole-pixel rounding filter
  Esc     Quit
"""
from __future__ import annotations

import logging
import sys

import pygame

from tick_glide import FILTERS, RealtimeScheduler, TweenController, Tweenable

FPS = 60
TWEEN_FPS = 30
DURATION = 1500

LANE_H = 90
LABEL_W = 120
TRACK_W = 520
PAD = 24
STATUS_H = 32
ORB_RADIUS = 12

SCREEN_W = LABEL_W + TRACK_W + PAD
EASING_NAMES = ["linear", "ease_in", "ease_out", "ease_in_out"]
SCREEN_H = LANE_H * len(EASING_NAMES) + STATUS_H

BG_COLOR = (20, 20, 30)
LANE_BG = (30, 30, 45)
TRACK_RAIL = (60, 60, 80)
TEXT_COLOR = (200, 200, 210)
STATUS_BG = (35, 35, 50)
PAUSED_COLOR = (128, 128, 128)

EASING_COLORS: dict[str, tuple[int, int, int]] = {
    "linear": (0, 220, 220),
    "ease_in": (255, 160, 40),
    "ease_out": (60, 220, 80),
    "ease_in_out": (220, 80, 220),
}

LOG = logging.getLogger("glide-gallery")


def _round_to_pixels(current: dict[str, float], original: dict[str, float], to: dict[str, float]) -> None:
    for key, value in current.items():
        current[key] = round(value)


class Lane:
    """One easing lane: a Tweenable plus the last controller it handed out."""

    def __init__(self, index: int, easing: str, scheduler: RealtimeScheduler) -> None:
        self.index = index
        self.easing = easing
        self.tweenable = Tweenable(
            fps=TWEEN_FPS, easing=easing, duration=DURATION, scheduler=scheduler
        )
        self.controller: TweenController | None = None
        self.position = {"x": 0.0}
        self.arrivals = 0

    def launch(self) -> None:
        start = self.position["x"]
        target = 0.0 if start >= TRACK_W else float(TRACK_W)
        ctrl = self.tweenable.tween({"x": start}, {"x": target}, callback=self._arrived)
        if ctrl is None:
            return
        self.controller = ctrl
        self.position = ctrl.get()

    def _arrived(self, current: dict[str, float]) -> None:
        self.arrivals += 1
        LOG.info("%s arrived at %s", self.easing, current["x"])

    @property
    def paused(self) -> bool:
        return self.controller is not None and self.controller.is_paused


def draw_lane(surface: pygame.Surface, font: pygame.font.Font, lane: Lane) -> None:
    y = lane.index * LANE_H
    pygame.draw.rect(surface, LANE_BG, (0, y + 2, SCREEN_W, LANE_H - 4))

    label = font.render(f"{lane.easing} ({lane.arrivals})", True, TEXT_COLOR)
    surface.blit(label, (8, y + LANE_H // 2 - label.get_height() // 2))

    rail_y = y + LANE_H // 2
    pygame.draw.line(surface, TRACK_RAIL, (LABEL_W, rail_y), (LABEL_W + TRACK_W, rail_y), 2)

    x = LABEL_W + int(lane.position["x"])
    color = PAUSED_COLOR if lane.paused else EASING_COLORS[lane.easing]
    pygame.draw.circle(surface, color, (x, rail_y), ORB_RADIUS)


def draw_status(surface: pygame.Surface, font: pygame.font.Font, rounding: bool) -> None:
    y = SCREEN_H - STATUS_H
    pygame.draw.rect(surface, STATUS_BG, (0, y, SCREEN_W, STATUS_H))
    text = "Space launch  P pause  S stop  E end  R round"
    if rounding:
        text += "  [rounding on]"
    surface.blit(font.render(text, True, TEXT_COLOR), (8, y + 8))


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(name)s: %(message)s")

    pygame.init()
    screen = pygame.display.set_mode((SCREEN_W, SCREEN_H))
    pygame.display.set_caption("Glide Gallery -- tick-glide demo")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 13)

    scheduler = RealtimeScheduler()
    lanes = [Lane(i, name, scheduler) for i, name in enumerate(EASING_NAMES)]
    rounding = False
    running = True

    while running:
        clock.tick(FPS)

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False

                elif event.key == pygame.K_SPACE:
                    for lane in lanes:
                        lane.launch()

                elif event.key == pygame.K_p:
                    for lane in lanes:
                        if lane.controller is None:
                            continue
                        if lane.paused:
                            lane.controller.resume()
                        else:
                            lane.controller.pause()

                elif event.key == pygame.K_s:
                    for lane in lanes:
                        if lane.controller is not None:
                            lane.controller.stop()

                elif event.key == pygame.K_e:
                    for lane in lanes:
                        if lane.controller is not None:
                            lane.controller.stop(True)

                elif event.key == pygame.K_r:
                    rounding = not rounding
                    if rounding:
                        FILTERS.add("pixels", after_tween=_round_to_pixels)
                    else:
                        FILTERS.remove("pixels")

        # --- Tick ---
        scheduler.pump()

        # --- Render ---
        screen.fill(BG_COLOR)
        for lane in lanes:
            draw_lane(screen, font, lane)
        draw_status(screen, font, rounding)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
