"""Doubly linked list of random integer values that the sorting cases work on."""

from __future__ import annotations

import random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

RAND_MAX = 2**31 - 1


class Node:
    """One element of a :class:`Nodes` list."""

    __slots__ = ("value", "prev", "next")

    def __init__(
        self, value: int, prev: Node | None = None, next: Node | None = None
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    def __repr__(self) -> str:
        return f"Node({self.value!r})"


@dataclass(eq=False)
class Nodes:
    """A doubly linked list with head, tail and a recorded length."""

    head: Node | None = None
    tail: Node | None = None
    length: int = 0

    @classmethod
    def from_values(cls, values: Iterable[int]) -> Nodes:
        """Build a linked list holding ``values`` in order."""
        nodes = cls()
        for value in values:
            node = Node(value, prev=nodes.tail)
            if nodes.head is None:
                nodes.head = node
            else:
                nodes.tail.next = node
            nodes.tail = node
            nodes.length += 1
        return nodes

    def __iter__(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return self.length

    def values(self) -> list[int]:
        """The values from head to tail."""
        return [node.value for node in self]

    def max_value(self) -> int:
        """The largest value, or -1 for an empty list."""
        return max(self.values(), default=-1)


def random_nodes(length: int, rng: random.Random | None = None) -> Nodes:
    """A list of ``length`` random values between 0 and ``RAND_MAX``."""
    rng = rng if rng is not None else random.Random()
    return Nodes.from_values(rng.randint(0, RAND_MAX) for _ in range(length))