"""Basic data structures."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import List


@dataclass
class DisjointSetForest:
    """Weighted union-find forest over the dense node ids ``0..size``.

    `find` and `connected` walk parent links without touching them. Only
    `union` compresses, halving the paths it walks while resolving roots.
    """

    size: int = 0
    parent: List[int] = field(init=False)
    weight: List[int] = field(init=False)

    def __post_init__(self) -> None:
        if self.size < 0:
            raise ValueError("size must be non-negative")
        self.parent = list(range(self.size))
        self.weight = [1] * self.size

    def __len__(self) -> int:
        return len(self.parent)

    @property
    def count(self) -> int:
        return len(self.parent)

    @property
    def is_empty(self) -> bool:
        return not self.parent

    def grow(self, by: int = 1) -> None:
        """Append `by` disconnected nodes after the current highest id."""

        if by <= 0:
            raise ValueError("by must be greater than zero")
        start = len(self.parent)
        self.parent.extend(range(start, start + by))
        self.weight.extend([1] * by)
        self.size = len(self.parent)

    def find(self, index: int) -> int:
        """Return the root of `index` without modifying the forest."""

        self._check_index(index)
        return self._root_of(index)

    def union(self, left: int, right: int) -> None:
        self._check_index(left)
        self._check_index(right)
        self._union(left, right)

    def connected(self, left: int, right: int) -> bool:
        self._check_index(left)
        self._check_index(right)
        return self._root_of(left) == self._root_of(right)

    def roots(self) -> List[int]:
        return [index for index, parent in enumerate(self.parent) if parent == index]

    def _union(self, left: int, right: int) -> None:
        if left == right:
            return
        root_left = self._compressing_root_of(left)
        root_right = self._compressing_root_of(right)
        if root_left == root_right:
            return
        # ties keep the right root
        if self.weight[root_left] <= self.weight[root_right]:
            self.parent[root_left] = root_right
            self.weight[root_right] += self.weight[root_left]
        else:
            self.parent[root_right] = root_left
            self.weight[root_left] += self.weight[root_right]

    def _root_of(self, index: int) -> int:
        parent = self.parent
        while parent[index] != index:
            index = parent[index]
        return index

    def _compressing_root_of(self, index: int) -> int:
        parent = self.parent
        while parent[index] != index:
            parent[index] = parent[parent[index]]
            index = parent[index]
        return index

    def _check_index(self, index: int) -> None:
        if not isinstance(index, numbers.Integral):
            raise TypeError(f"node id must be an integer, got {type(index).__name__}")
        if not 0 <= index < len(self.parent):
            raise IndexError(f"node id {index} out of range [0, {len(self.parent)})")
