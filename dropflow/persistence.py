"""Extrema pairing and persistence for one-dimensional data."""

from __future__ import annotations

import bisect
from collections import Counter
from dataclasses import dataclass
from typing import Iterable

_MATLAB_INDEX_FACTOR = 1


@dataclass(frozen=True)
class PairedExtrema:
    """A local minimum matched with a local maximum.

    ``persistence`` is ``data[max_index] - data[min_index]`` and is never negative.
    """

    min_index: int
    max_index: int
    persistence: float

    def sort_key(self) -> tuple[float, int]:
        return (self.persistence, self.min_index)


@dataclass
class _Component:
    left_edge: int
    right_edge: int
    min_index: int
    min_value: float
    alive: bool = True


class Persistence1D:
    """Finds local extrema in 1D data, pairs them and ranks them by persistence.

    The global minimum is never paired; it is available through
    :meth:`global_minimum_index` and :meth:`global_minimum_value`.
    """

    def __init__(self) -> None:
        self._data: list[float] = []
        self._colors: list[int | None] = []
        self._components: list[_Component] = []
        self._pairs: list[PairedExtrema] = []

    def run(self, data: Iterable[float]) -> None:
        """Analyse ``data``; results of any earlier run are discarded."""
        self._data = [float(v) for v in data]
        self._colors = [None] * len(self._data)
        self._components = []
        self._pairs = []
        if not self._data:
            return
        self._watershed()
        self._pairs.sort(key=PairedExtrema.sort_key)

    # ---- results -------------------------------------------------------

    def get_paired_extrema(
        self, threshold: float = 0.0, matlab_indexing: bool = False
    ) -> list[PairedExtrema]:
        """Pairs whose persistence is at least ``threshold``, least persistent first."""
        if threshold < 0:
            raise ValueError("threshold must be greater than or equal to 0")
        offset = _MATLAB_INDEX_FACTOR if matlab_indexing else 0
        return [
            PairedExtrema(p.min_index + offset, p.max_index + offset, p.persistence)
            for p in self._pairs[self._first_at_or_above(threshold):]
        ]

    def get_extrema_indices(
        self, threshold: float = 0.0, matlab_indexing: bool = False
    ) -> tuple[list[int], list[int]]:
        """Indices of paired minima and paired maxima, as two lists of equal length."""
        pairs = self.get_paired_extrema(threshold, matlab_indexing)
        return [p.min_index for p in pairs], [p.max_index for p in pairs]

    def global_minimum_index(self, matlab_indexing: bool = False) -> int:
        """Index of the unpaired global minimum, or -1 before any data was analysed."""
        if not self._components:
            return -1
        index = self._components[0].min_index
        return index + _MATLAB_INDEX_FACTOR if matlab_indexing else index

    def global_minimum_value(self) -> float:
        """Value of the global minimum, or 0 before any data was analysed."""
        if not self._components:
            return 0.0
        return self._components[0].min_value

    def verify_results(self) -> bool:
        """Run sanity checks on the latest results."""
        mins, maxs = self.get_extrema_indices()
        global_min = self.global_minimum_index()
        mins.sort()
        maxs.sort()
        combined = sorted((Counter(mins) | Counter(maxs)).elements())

        ok = True
        if len(combined) != len(mins) + len(maxs):
            ok = False
        pos = bisect.bisect_left(combined, global_min)
        if pos < len(combined) and combined[pos] == global_min:
            ok = False
        if global_min > len(self._data) - 1 or global_min < -1:
            ok = False
        if global_min == -1 and mins:
            ok = False
        unique_mins, unique_maxs = len(set(mins)), len(set(maxs))
        if unique_mins != len(mins) or unique_maxs != len(maxs) or unique_mins != unique_maxs:
            ok = False
        return ok

    def format_results(self, threshold: float = 0.0, matlab_indexing: bool = False) -> str:
        """Text listing of the selected pairs followed by the global minimum."""
        lines = [
            f"Persistence: {p.persistence:g} minimum index: {p.min_index} "
            f"maximum index: {p.max_index}"
            for p in self.get_paired_extrema(threshold, matlab_indexing)
        ]
        lines.append(
            f"Global minimum value: {self.global_minimum_value():g} "
            f"index: {self.global_minimum_index(matlab_indexing)}"
        )
        return "\n".join(lines) + "\n"

    # ---- algorithm -----------------------------------------------------

    def _first_at_or_above(self, threshold: float) -> int:
        if threshold <= 0:
            return 0
        keys = [p.sort_key() for p in self._pairs]
        return bisect.bisect_left(keys, (threshold, 0))

    def _watershed(self) -> None:
        data = self._data
        colors = self._colors
        last = len(data) - 1
        if last == 0:
            self._create_component(0)
            return

        for i in sorted(range(len(data)), key=lambda k: (data[k], k)):
            if i == 0:
                self._grow(colors[1], i)
                continue
            if i == last:
                self._grow(colors[i - 1], i)
                continue

            left, right = colors[i - 1], colors[i + 1]
            if left is None and right is None:
                self._create_component(i)
            elif right is None:
                self._extend_component(left, i)
            elif left is None:
                self._extend_component(right, i)
            else:
                components = self._components
                if components[right].min_value < components[left].min_value:
                    self._create_pair(components[left].min_index, i)
                else:
                    self._create_pair(components[right].min_index, i)
                self._merge_components(left, right)
                colors[i] = colors[i - 1]

    def _grow(self, neighbour: int | None, index: int) -> None:
        if neighbour is None:
            self._create_component(index)
        else:
            self._extend_component(neighbour, index)

    def _create_component(self, index: int) -> None:
        self._colors[index] = len(self._components)
        self._components.append(
            _Component(index, index, index, self._data[index])
        )

    def _extend_component(self, component_index: int, index: int) -> None:
        component = self._components[component_index]
        if index + 1 == component.left_edge:
            component.left_edge = index
        elif index - 1 == component.right_edge:
            component.right_edge = index
        self._colors[index] = component_index

    def _merge_components(self, first: int, second: int) -> None:
        components = self._components
        a, b = components[first].min_value, components[second].min_value
        if a < b:
            survivor, destroyed = first, second
        elif a > b:
            survivor, destroyed = second, first
        elif first < second:
            survivor, destroyed = first, second
        else:
            survivor, destroyed = second, first

        dead = components[destroyed]
        kept = components[survivor]
        dead.alive = False
        self._colors[dead.right_edge] = survivor
        self._colors[dead.left_edge] = survivor
        if kept.min_index > dead.min_index:
            kept.left_edge = dead.left_edge
        else:
            kept.right_edge = dead.right_edge

    def _create_pair(self, first: int, second: int) -> None:
        data = self._data
        if data[first] > data[second]:
            max_index, min_index = first, second
        elif data[second] > data[first]:
            max_index, min_index = second, first
        elif first < second:
            min_index, max_index = first, second
        else:
            min_index, max_index = second, first
        self._pairs.append(
            PairedExtrema(min_index, max_index, data[max_index] - data[min_index])
        )