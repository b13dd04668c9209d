"""Site percolation on a square grid backed by a disjoint-set forest."""

from __future__ import annotations

from typing import List

import numpy as np

from .structures import DisjointSetForest


MIN_SIDE = 5


class PercolationSimulation:
    """An ``side x side`` grid of sites that are opened one at a time.

    Site ``i`` (row-major) is forest node ``i``. Node ``0`` doubles as the
    virtual top, so random opening never picks site ``0``; node
    ``site_count + 1`` is the virtual bottom.
    """

    PERCOLATION_THRESHOLD: float = 0.596
    VIRTUAL_TOP: int = 0

    def __init__(self, side: int = MIN_SIDE, rng: np.random.Generator | None = None) -> None:
        if side < MIN_SIDE:
            raise ValueError(f"side must be greater than or equal to {MIN_SIDE}")
        self.side = side
        self.site_count = side * side
        self.open_sites = np.zeros(self.site_count, dtype=bool)
        self.open_count = 0
        self.rng = rng if rng is not None else np.random.default_rng()
        self.forest = DisjointSetForest(self.site_count + 2)
        self.virtual_bottom = self.forest.count - 1

        for site in range(side):
            self.forest.union(self.VIRTUAL_TOP, site)
        for site in range(self.site_count - side, self.site_count):
            self.forest.union(self.virtual_bottom, site)

    @property
    def is_percolating(self) -> bool:
        return self.forest.find(self.VIRTUAL_TOP) == self.forest.find(self.virtual_bottom)

    @property
    def open_fraction(self) -> float:
        return self.open_count / self.site_count

    @property
    def closed_count(self) -> int:
        """Closed sites that random opening can still pick."""

        return self.site_count - self.open_count - (0 if self.open_sites[0] else 1)

    def is_open(self, site: int) -> bool:
        self._check_site(site)
        return bool(self.open_sites[site])

    def open_random_site(self) -> int | None:
        """Open a uniformly random closed site and return it, or None if none is left."""

        if self.closed_count == 0:
            return None
        site = self._random_closed_site()
        self._open(site)
        return site

    def open_site(self, site: int) -> bool:
        """Open `site`; return False when it was already open."""

        self._check_site(site)
        if self.open_sites[site]:
            return False
        self._open(site)
        return True

    def _open(self, site: int) -> None:
        self.open_sites[site] = True
        self.open_count += 1
        for neighbor in self._open_neighbors(site):
            self.forest.union(site, neighbor)

    def _random_closed_site(self) -> int:
        while True:
            site = int(self.rng.integers(1, self.site_count))
            if not self.open_sites[site]:
                return site

    def _open_neighbors(self, site: int) -> List[int]:
        # only the flat range is checked, so +-1 can reach the next row's edge
        candidates = (site - self.side, site + 1, site + self.side, site - 1)
        return [
            neighbor
            for neighbor in candidates
            if 0 <= neighbor < self.site_count and self.open_sites[neighbor]
        ]

    def _check_site(self, site: int) -> None:
        if not 0 <= site < self.site_count:
            raise IndexError(f"site {site} out of range [0, {self.site_count})")


__all__ = ["MIN_SIDE", "PercolationSimulation"]
