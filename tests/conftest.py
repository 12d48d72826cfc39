"""Shared fixtures: small hand-built maps."""

import pytest

from py_landmass.core.assembler import assemble_graph
from py_landmass.core.factory import DataFactory
from py_landmass.core.graph import Map
from py_landmass.core.hex_builder import HexBuilder, grid_size


def build_hex(columns: int, rows: int, seed: int = 1) -> HexBuilder:
    width, height = grid_size(columns, rows)
    builder = HexBuilder(width, height, seed)
    builder.build()
    return builder


@pytest.fixture
def make_hex():
    return build_hex


@pytest.fixture
def hex_2x2():
    return build_hex(2, 2)


@pytest.fixture
def two_cells():
    """
    Two centers X (left) and Y (right) separated by one vertical edge p-q,
    plus a boundary edge q-r on X's side.
    """
    factory = DataFactory(Map())
    x = factory.get_or_create_center((0.0, 0.0))
    y = factory.get_or_create_center((100.0, 0.0))
    p = factory.get_or_create_corner((50.0, -50.0))
    q = factory.get_or_create_corner((50.0, 50.0))
    r = factory.get_or_create_corner((-50.0, 50.0))
    shared = factory.get_or_create_edge(p, q, x, y)
    boundary = factory.get_or_create_edge(q, r, x, None)
    assemble_graph(factory.map)
    return dict(factory=factory, map=factory.map, x=x, y=y, p=p, q=q, r=r,
                shared=shared, boundary=boundary)
