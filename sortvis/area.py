"""Screen area of one sorting case: placement, scaling and statistics."""

from __future__ import annotations

import logging
import math
import struct
from dataclasses import dataclass, field

from .model import Node, Nodes

logger = logging.getLogger(__name__)


def float32(value: float) -> float:
    """Round ``value`` to single precision."""
    return struct.unpack("f", struct.pack("f", value))[0]


def _divide(numerator: float, denominator: float) -> float:
    """Single-precision division with IEEE results for a zero denominator."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        return math.copysign(math.inf, numerator)
    return float32(float32(numerator) / float32(denominator))


@dataclass
class AreaSize:
    width: int
    height: int


@dataclass
class AreaPosition:
    left: int
    top: int


@dataclass
class AreaScale:
    ratio_by_y: float
    ratio_by_x: float
    cols_per_px: float
    length: int


@dataclass(eq=False)
class AreaData:
    """Running statistics and highlight state of a sorting case."""

    name: str
    swaps: int = 0
    shifts: int = 0
    swapped: list[Node | None] = field(default_factory=lambda: [None, None])
    last: Node | None = None


@dataclass(eq=False)
class Area:
    data: AreaData
    size: AreaSize
    position: AreaPosition
    scale: AreaScale


def area_scale(length: int, width: int, height: int, nodes: Nodes) -> AreaScale:
    """Scaling of ``length`` columns with values of ``nodes`` into a box."""
    max_y = nodes.max_value()
    scale = AreaScale(
        ratio_by_y=_divide(height, max_y),
        ratio_by_x=_divide(width, length),
        cols_per_px=_divide(length, width),
        length=length,
    )
    logger.debug(
        "maxY=%d length=%d width=%d colsPerPx=%f ratioByX=%f ratioByY=%f",
        max_y,
        length,
        width,
        scale.cols_per_px,
        scale.ratio_by_x,
        scale.ratio_by_y,
    )
    return scale


def new_area(
    name: str, length: int, width: int, height: int, left: int, top: int, nodes: Nodes
) -> Area:
    """A fresh area for a case named ``name`` showing ``nodes``."""
    return Area(
        data=AreaData(name=name),
        size=AreaSize(width=width, height=height),
        position=AreaPosition(left=left, top=top),
        scale=area_scale(length, width, height, nodes),
    )