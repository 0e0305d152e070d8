"""Tests for the public package surface."""

from dataclasses import dataclass

import netpaths
from netpaths import Net, NodeBuilder


@dataclass(frozen=True)
class Region:
    identifier: str


def test_all_exports_resolve() -> None:
    for name in netpaths.__all__:
        assert hasattr(netpaths, name), name


def test_version() -> None:
    assert netpaths.__version__ == "0.1.0"


def test_readme_example() -> None:
    a, b, c, d = (Region(x) for x in "ABCD")
    net = Net(
        [
            NodeBuilder().set_point(a).add_connections([b, d]).build(),
            NodeBuilder().set_point(b).add_connections([a, c]).build(),
            NodeBuilder().set_point(c).add_connections([b, d]).build(),
            NodeBuilder().set_point(d).add_connections([a, c]).build(),
        ]
    )
    assert sorted(p.render() for p in net.find_paths(a, c)) == ["A-B-C", "A-D-C"]
