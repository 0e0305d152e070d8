"""NetPaths: all simple paths between two points of a connectivity net.

Primary API:
    Point - Capability any domain object with an ``identifier`` satisfies
    NodeBuilder, Node - A point plus its outbound connections
    Net - Collection of nodes; ``find_paths`` enumerates simple paths
    Path, PathBuilder - Ordered routes of points
    from_networkx() / to_networkx() - NetworkX interoperability

Example:
    from dataclasses import dataclass
    from netpaths import Net, NodeBuilder

    @dataclass(frozen=True)
    class City:
        identifier: str

    a, b, c = City("A"), City("B"), City("C")
    net = Net([
        NodeBuilder().set_point(a).add_connection(b).build(),
        NodeBuilder().set_point(b).add_connections([a, c]).build(),
        NodeBuilder().set_point(c).add_connection(b).build(),
    ])
    [p.render() for p in net.find_paths(a, c)]  # ['A-B-C']
"""

from __future__ import annotations

from netpaths import logging
from netpaths._version import __version__
from netpaths.config import NET_CONFIG, NetConfig
from netpaths.errors import (
    DuplicateConnectionError,
    DuplicatePointError,
    EmptyPathError,
    MissingPointError,
    NetIntegrityError,
    NetPathsError,
    NoPathFoundError,
    PathCannotBeBuiltError,
    PointNotFoundError,
    SelfConnectionError,
)
from netpaths.lib.nx import LabeledPoint, from_networkx, to_networkx
from netpaths.model.net import Net
from netpaths.model.node import Connection, Node, NodeBuilder
from netpaths.model.path import Path, PathBuilder
from netpaths.types.base import Point, identifier_of, is_same

__all__ = [
    # Version
    "__version__",
    # Model
    "Point",
    "Connection",
    "Node",
    "NodeBuilder",
    "Path",
    "PathBuilder",
    "Net",
    "identifier_of",
    "is_same",
    # Configuration
    "NetConfig",
    "NET_CONFIG",
    # Errors
    "NetPathsError",
    "MissingPointError",
    "SelfConnectionError",
    "DuplicateConnectionError",
    "EmptyPathError",
    "DuplicatePointError",
    "PointNotFoundError",
    "NoPathFoundError",
    "PathCannotBeBuiltError",
    "NetIntegrityError",
    # Library integrations (NetworkX)
    "LabeledPoint",
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
