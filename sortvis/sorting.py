"""Sorting cases and the collection that advances them together."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from typing import Any

from .area import Area
from .model import Nodes

SortFunction = Callable[["SortingCases", "SortingCase", Any], bool]


@dataclass(eq=False)
class SortingCase:
    """A list of nodes, its screen area and the step function sorting it."""

    nodes: Nodes
    area: Area
    sort: SortFunction


class SortingCases:
    """Ordered collection of sorting cases."""

    def __init__(self) -> None:
        self._cases: list[SortingCase] = []

    def add(self, scase: SortingCase | None) -> None:
        """Append ``scase``; ``None`` is ignored."""
        if scase is not None:
            self._cases.append(scase)

    def __iter__(self) -> Iterator[SortingCase]:
        return iter(self._cases)

    def __len__(self) -> int:
        return len(self._cases)

    def proceed(self, renderer: Any) -> bool:
        """Run one step of every case; True once all of them are done."""
        done = True
        for scase in self._cases:
            if not scase.sort(self, scase, renderer):
                done = False
        return done