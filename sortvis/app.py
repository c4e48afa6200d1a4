"""Window that shows bubble, selection and merge sort side by side."""

from __future__ import annotations

import argparse
import random
import sys

import pygame

from .cases.bubble import create_bubble_case
from .cases.merge import create_merge_case
from .cases.selection import create_selection_case
from .sorting import SortingCases
from .visual import BACKGROUND_COLOR, Color

WINDOW_WIDTH = 800
WINDOW_HEIGHT = 600
AREA_HEIGHT = 200
FRAME_DELAY_MS = 20
TITLE = "Sorting Visualizer"


class PygameRenderer:
    """Renderer that draws onto a pygame surface."""

    def __init__(self, surface: pygame.Surface) -> None:
        self.surface = surface
        self.color: Color = BACKGROUND_COLOR

    def set_color(self, r: int, g: int, b: int, a: int) -> None:
        self.color = (r, g, b, a)

    def fill_rect(self, x: int, y: int, w: int, h: int) -> None:
        pygame.draw.rect(self.surface, self.color, pygame.Rect(x, y, w, h))

    def clear(self) -> None:
        self.surface.fill(self.color)

    def present(self) -> None:
        pygame.display.flip()


def build_cases(
    width: int = WINDOW_WIDTH, rng: random.Random | None = None
) -> SortingCases:
    """The three sorting cases stacked one above the other."""
    rng = rng if rng is not None else random.Random()
    cases = SortingCases()
    cases.add(create_bubble_case(width - 1, width, AREA_HEIGHT, 0, 200, rng))
    cases.add(create_selection_case(width - 1, width, AREA_HEIGHT, 0, 400, rng))
    cases.add(create_merge_case(width - 1, width, AREA_HEIGHT, 0, 600, rng))
    return cases


def main(argv: list[str] | None = None) -> int:
    """Open the window and run the sorts until they finish or it is closed."""
    parser = argparse.ArgumentParser(
        prog="sortvis", description="Show sorting algorithms at work."
    )
    parser.parse_args(argv)

    try:
        pygame.display.init()
    except pygame.error as exc:
        print(f"Display init error: {exc}", file=sys.stderr)
        return 1
    try:
        try:
            screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        except pygame.error as exc:
            print(f"CreateWindow error: {exc}", file=sys.stderr)
            return 1
        pygame.display.set_caption(TITLE)
        renderer = PygameRenderer(screen)
        cases = build_cases(WINDOW_WIDTH)

        quit_requested = False
        while not quit_requested:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    quit_requested = True
            if cases.proceed(renderer):
                break
            pygame.time.delay(FRAME_DELAY_MS)
    finally:
        pygame.quit()
    return 0