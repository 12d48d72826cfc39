"""Organic map graph from relaxed random Voronoi sites."""

import math
from typing import Iterator

import numpy as np
import structlog
from scipy.spatial import Voronoi

from .builders import GraphBuilder, RawEdge

logger = structlog.get_logger()


def random_sites(width: float, height: float, count: int, rng: np.random.Generator) -> np.ndarray:
    """Uniform random sites inside the map rectangle."""
    xs = rng.uniform(0.0, width, count)
    ys = rng.uniform(0.0, height, count)
    return np.column_stack([xs, ys])


def get_boundary_points(width: float, height: float, spacing: float) -> np.ndarray:
    """
    Generate points ringing the map rectangle one spacing outside it.

    They close the Voronoi cells of the real sites near the map edge, so
    those cells get finite vertices.

    Args:
        width: Map width
        height: Map height
        spacing: Mean distance between sites

    Returns:
        Array of boundary point coordinates
    """
    offset = -spacing
    b_spacing = spacing * 2
    w = width - offset * 2
    h = height - offset * 2

    number_x = max(int(math.ceil(w / b_spacing) - 1), 1)
    number_y = max(int(math.ceil(h / b_spacing) - 1), 1)

    points = []
    for i in range(number_x):
        x = w * (i + 0.5) / number_x + offset
        points.append([x, offset])
        points.append([x, h + offset])
    for i in range(number_y):
        y = h * (i + 0.5) / number_y + offset
        points.append([offset, y])
        points.append([w + offset, y])

    return np.array(points)


def relax_sites(sites: np.ndarray, boundary_points: np.ndarray,
                width: float, height: float, n_iterations: int) -> np.ndarray:
    """
    Smooth the site distribution.

    Each iteration moves every site to the mean of its finite Voronoi
    vertices, clamped to the map rectangle.

    Args:
        sites: Sites to relax
        boundary_points: Fixed points outside the map
        width: Map width
        height: Map height
        n_iterations: Number of smoothing rounds

    Returns:
        Relaxed site coordinates
    """
    sites = sites.copy()
    n_sites = len(sites)

    for iteration in range(n_iterations):
        vor = Voronoi(np.vstack([sites, boundary_points]))
        for i in range(n_sites):
            region = vor.regions[vor.point_region[i]]
            finite = [v for v in region if v != -1]
            if not finite:
                continue
            mean = vor.vertices[finite].mean(axis=0)
            sites[i][0] = np.clip(mean[0], 0, width)
            sites[i][1] = np.clip(mean[1], 0, height)
        logger.debug("Relaxation iteration complete", iteration=iteration + 1)

    return sites


class VoronoiBuilder(GraphBuilder):
    """Builds an organic map from site_count random sites smoothed `smoothing` times."""

    name = "voronoi"
    prunes_lakes = True

    def __init__(self, width: float, height: float, site_count: int, seed: int,
                 smoothing: int = 10, **options):
        super().__init__(width, height, seed, **options)
        if site_count < 3:
            raise ValueError("site_count must be >= 3")
        if smoothing < 0:
            raise ValueError("smoothing must be >= 0")
        self.site_count = site_count
        self.smoothing = smoothing
        self.spacing = math.sqrt(width * height / site_count)

    def generate_sites(self) -> np.ndarray:
        rng = np.random.default_rng(self.seed)
        sites = random_sites(self.width, self.height, self.site_count, rng)
        boundary = get_boundary_points(self.width, self.height, self.spacing)
        if self.smoothing:
            sites = relax_sites(sites, boundary, self.width, self.height, self.smoothing)
        return sites

    def raw_edges(self) -> Iterator[RawEdge]:
        sites = self.generate_sites()
        boundary = get_boundary_points(self.width, self.height, self.spacing)
        n_sites = len(sites)
        vor = Voronoi(np.vstack([sites, boundary]))

        logger.info("Voronoi diagram calculated", sites=n_sites,
                    vertices=len(vor.vertices), ridges=len(vor.ridge_points))

        for (p1, p2), (v1, v2) in zip(vor.ridge_points, vor.ridge_vertices):
            if v1 == -1 or v2 == -1:
                continue
            if p1 >= n_sites and p2 >= n_sites:
                continue
            a, b = vor.vertices[v1], vor.vertices[v2]
            if not (self._inside(a) or self._inside(b)):
                continue
            yield RawEdge(
                site_a=sites[p1] if p1 < n_sites else None,
                site_b=sites[p2] if p2 < n_sites else None,
                vertex_a=a,
                vertex_b=b,
            )

    def _inside(self, point) -> bool:
        return 0 <= point[0] <= self.width and 0 <= point[1] <= self.height
