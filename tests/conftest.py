"""Shared fixtures: small nets with single-letter points.

Each net fixture returns ``(net, points)`` where ``points`` maps a letter to
its point object.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

import pytest

from netpaths.model.net import Net
from netpaths.model.node import NodeBuilder


@dataclass(frozen=True)
class Letter:
    identifier: str


NetAndPoints = Tuple[Net, Dict[str, Letter]]


def _net(adjacency: Dict[str, List[str]]) -> NetAndPoints:
    points = {name: Letter(name) for name in adjacency}
    nodes = [
        NodeBuilder()
        .set_point(points[name])
        .add_connections(points[n] for n in neighbors)
        .build()
        for name, neighbors in adjacency.items()
    ]
    return Net(nodes), points


@pytest.fixture
def letter():
    """Factory for single-letter points."""
    return Letter


@pytest.fixture
def build_net():
    """Factory building a net from an adjacency mapping of letters."""
    return _net


@pytest.fixture
def a_b_net() -> NetAndPoints:
    # A - B
    return _net({"A": ["B"], "B": ["A"]})


@pytest.fixture
def isolated_net() -> NetAndPoints:
    # A   B
    return _net({"A": [], "B": []})


@pytest.fixture
def linear_net() -> NetAndPoints:
    # A - B - C
    return _net({"A": ["B"], "B": ["A", "C"], "C": ["B"]})


@pytest.fixture
def square_net() -> NetAndPoints:
    # A - B
    # |   |
    # D - C
    return _net(
        {
            "A": ["B", "D"],
            "B": ["A", "C"],
            "C": ["B", "D"],
            "D": ["A", "C"],
        }
    )


@pytest.fixture
def meshed_net() -> NetAndPoints:
    # A - B
    # | / |
    # D - C      (no A - C edge)
    return _net(
        {
            "A": ["B", "D"],
            "B": ["A", "C", "D"],
            "C": ["B", "D"],
            "D": ["A", "B", "C"],
        }
    )
