"""Drawing of sorting cases as bar charts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from .area import float32

if TYPE_CHECKING:
    from .sorting import SortingCase, SortingCases

Color = tuple[int, int, int, int]

BACKGROUND_COLOR: Color = (0, 0, 0, 255)
BAR_COLOR: Color = (100, 200, 255, 255)
SWAP_COLOR: Color = (250, 20, 20, 255)


@dataclass(frozen=True)
class Bar:
    """A filled rectangle with its colour."""

    x: int
    y: int
    w: int
    h: int
    color: Color


class Renderer:
    """Headless renderer that records what is drawn."""

    def __init__(self) -> None:
        self.color: Color = BACKGROUND_COLOR
        self.background: Color | None = None
        self.current: list[Bar] = []
        self.frames: list[list[Bar]] = []

    def set_color(self, r: int, g: int, b: int, a: int) -> None:
        self.color = (r, g, b, a)

    def fill_rect(self, x: int, y: int, w: int, h: int) -> None:
        self.current.append(Bar(x, y, w, h, self.color))

    def clear(self) -> None:
        self.background = self.color
        self.current = []

    def present(self) -> None:
        self.frames.append(list(self.current))


def area_bars(scase: SortingCase | None) -> list[Bar]:
    """The bars that show ``scase`` inside its area."""
    if scase is None or scase.nodes is None or scase.area is None:
        return []
    area = scase.area
    cols = area.scale.cols_per_px
    highlighted = area.data.swapped
    bars: list[Bar] = []
    count = 0
    max_y = -1
    x = 0.0
    for node in scase.nodes:
        max_y = max(max_y, node.value)
        count += 1
        if count >= cols:
            width = 1.0 if cols > 1 else float32(1.0 / cols)
            height = float32(float32(max_y) * area.scale.ratio_by_y)
            color = (
                SWAP_COLOR
                if any(node is marked for marked in highlighted)
                else BAR_COLOR
            )
            bars.append(
                Bar(
                    x=int(float32(x + area.position.left)),
                    y=int(float32(area.position.top - height)),
                    w=int(width),
                    h=int(height),
                    color=color,
                )
            )
            x = float32(x + width)
            max_y = -1
            count = 0
    return bars


def render_area(scase: SortingCase | None, renderer: Any) -> None:
    """Draw the bars of one case."""
    for bar in area_bars(scase):
        renderer.set_color(*bar.color)
        renderer.fill_rect(bar.x, bar.y, bar.w, bar.h)


def render_areas(cases: SortingCases | None, renderer: Any) -> None:
    """Clear the screen, draw every case and present the frame."""
    if cases is None:
        return
    renderer.set_color(*BACKGROUND_COLOR)
    renderer.clear()
    for scase in cases:
        render_area(scase, renderer)
    renderer.present()