"""Nearest-neighbour lookup over map centers."""

from typing import List, Sequence

import numpy as np
from sklearn.neighbors import KDTree

from .graph import Center


class CenterIndex:
    """
    Points are added one at a time while the map is classified and queried
    afterwards. The KDTree is built on the first query and rebuilt only if
    more points are added later.
    """

    def __init__(self, leaf_size: int = 40):
        self.leaf_size = leaf_size
        self._points: List[Sequence[float]] = []
        self._centers: List[Center] = []
        self._tree = None

    def __len__(self):
        return len(self._centers)

    def add_point(self, coordinate, center: Center) -> None:
        self._points.append((float(coordinate[0]), float(coordinate[1])))
        self._centers.append(center)
        self._tree = None

    def nearest_neighbors(self, coordinate, k: int = 1) -> List[Center]:
        """Return up to k centers ordered by distance to coordinate."""
        if k < 1:
            raise ValueError("k must be >= 1")
        if not self._centers:
            return []
        if self._tree is None:
            self._tree = KDTree(np.asarray(self._points, dtype=float), leaf_size=self.leaf_size)

        k = min(k, len(self._centers))
        query = np.asarray([[float(coordinate[0]), float(coordinate[1])]])
        _, indices = self._tree.query(query, k=k)
        return [self._centers[i] for i in indices[0]]
