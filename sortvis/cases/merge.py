"""Merge sort over the linked list, done in a single step."""

from __future__ import annotations

import logging
import random
from typing import Any

from ..area import new_area
from ..model import Node, Nodes, random_nodes
from ..sorting import SortingCase, SortingCases
from ..visual import render_areas

logger = logging.getLogger(__name__)


def split(head: Node) -> Node | None:
    """Cut the list after its middle and return the second half."""
    slow = head
    fast = head.next
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
    mid = slow.next
    slow.next = None
    if mid is not None:
        mid.prev = None
    return mid


def merge(a: Node | None, b: Node | None) -> Node | None:
    """Merge two sorted lists, taking from ``a`` first on equal values."""
    head: Node | None = None
    tail: Node | None = None
    while a is not None and b is not None:
        if a.value <= b.value:
            node, a = a, a.next
        else:
            node, b = b, b.next
        node.prev = tail
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    rest = a if a is not None else b
    if tail is None:
        return rest
    tail.next = rest
    if rest is not None:
        rest.prev = tail
    return head


def merge_and_sort(
    head: Node | None, cases: SortingCases | None, renderer: Any
) -> Node | None:
    """Sort the list starting at ``head`` and return its new head."""
    if head is None or head.next is None:
        return head
    mid = split(head)
    left = merge_and_sort(head, cases, renderer)
    right = merge_and_sort(mid, cases, renderer)
    render_areas(cases, renderer)
    return merge(left, right)


def _update_metadata(nodes: Nodes) -> None:
    tail = nodes.head
    count = 0
    while tail is not None and tail.next is not None:
        tail = tail.next
        count += 1
    nodes.tail = tail
    nodes.length = count + 1


def merge_sort_nodes(
    nodes: Nodes | None, cases: SortingCases | None, renderer: Any
) -> None:
    """Sort ``nodes`` in place and refresh its tail and length."""
    if nodes is None or nodes.head is None:
        return
    nodes.head = merge_and_sort(nodes.head, cases, renderer)
    _update_metadata(nodes)


def merge_sort(cases: SortingCases, scase: SortingCase, renderer: Any) -> bool:
    """Sort the whole list on the first call; always reports done."""
    if scase.area.data.last is not None:
        return True
    merge_sort_nodes(scase.nodes, cases, renderer)
    render_areas(cases, renderer)
    scase.area.data.last = scase.nodes.head
    return True


def create_merge_case(
    length: int,
    width: int,
    height: int,
    left: int,
    top: int,
    rng: random.Random | None = None,
) -> SortingCase:
    """A merge-sort case over ``length`` random values."""
    nodes = random_nodes(length, rng)
    logger.debug("nodes length = %d", len(nodes))
    area = new_area("merge", len(nodes), width, height, left, top, nodes)
    return SortingCase(nodes=nodes, area=area, sort=merge_sort)