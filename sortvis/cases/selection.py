"""Selection sort that places one element per step."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterator
from typing import Any

from ..area import new_area
from ..model import Node, random_nodes
from ..sorting import SortingCase, SortingCases
from ..visual import render_areas

logger = logging.getLogger(__name__)


def _walk(node: Node | None) -> Iterator[Node]:
    while node is not None:
        yield node
        node = node.next


def selection_step(scase: SortingCase | None) -> Node | None:
    """Move the smallest remaining value to the front of the unsorted part.

    Returns the first node of the part still to sort, or ``None`` when
    the list has been placed completely.
    """
    if scase is None or scase.nodes is None or scase.area is None:
        return None
    data = scase.area.data
    start = data.last if data.last is not None else scase.nodes.head
    if start is None:
        return None
    remaining = list(_walk(start))
    smallest = min(remaining, key=lambda node: node.value)
    data.shifts += len(remaining)
    start.value, smallest.value = smallest.value, start.value
    data.swapped = [start, smallest]
    data.swaps += 1
    return start.next


def selection_sort(
    cases: SortingCases, scase: SortingCase, renderer: Any
) -> bool:
    """One step of selection sort; True once every position is placed."""
    scase.area.data.last = selection_step(scase)
    render_areas(cases, renderer)
    return scase.area.data.last is None


def create_selection_case(
    length: int,
    width: int,
    height: int,
    left: int,
    top: int,
    rng: random.Random | None = None,
) -> SortingCase:
    """A selection-sort case over ``length`` random values."""
    nodes = random_nodes(length, rng)
    logger.debug("nodes length = %d", len(nodes))
    area = new_area("selection", len(nodes), width, height, left, top, nodes)
    return SortingCase(nodes=nodes, area=area, sort=selection_sort)