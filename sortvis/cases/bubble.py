"""Bubble sort that advances one pass per step."""

from __future__ import annotations

import logging
import random
from typing import Any

from ..area import new_area
from ..model import Node, random_nodes
from ..sorting import SortingCase, SortingCases
from ..visual import render_areas

logger = logging.getLogger(__name__)


def bubble_pass(
    cases: SortingCases | None, scase: SortingCase | None, renderer: Any
) -> Node | None:
    """Run one bubble pass, stopping before the sorted tail.

    Returns the node that received the larger value in the last swap,
    or ``None`` when the pass made no swap.
    """
    if scase is None or scase.nodes is None or scase.area is None:
        return None
    data = scase.area.data
    last = data.last
    data.swapped = [None, None]
    updated: Node | None = None
    node = scase.nodes.head
    while node is not None and node.next is not None:
        if last is not None and node.next is last:
            break
        following = node.next
        if node.value > following.value:
            node.value, following.value = following.value, node.value
            updated = following
            data.swapped = [node, following]
            data.swaps += 1
            render_areas(cases, renderer)
        node = following
        data.shifts += 1
    return updated


def bubble_sort(cases: SortingCases, scase: SortingCase, renderer: Any) -> bool:
    """One step of bubble sort; True once a pass finds nothing to swap."""
    scase.area.data.last = bubble_pass(cases, scase, renderer)
    render_areas(cases, renderer)
    return scase.area.data.last is None


def create_bubble_case(
    length: int,
    width: int,
    height: int,
    left: int,
    top: int,
    rng: random.Random | None = None,
) -> SortingCase:
    """A bubble-sort case over ``length`` random values."""
    nodes = random_nodes(length, rng)
    logger.debug("nodes length = %d", len(nodes))
    area = new_area("bubble", len(nodes), width, height, left, top, nodes)
    return SortingCase(nodes=nodes, area=area, sort=bubble_sort)