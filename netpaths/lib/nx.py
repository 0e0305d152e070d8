"""NetworkX graph conversion utilities.

Example:
    >>> import networkx as nx
    >>> from netpaths.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.Graph()
    >>> G.add_edges_from([("A", "B"), ("B", "C")])
    >>> net = from_networkx(G)
    >>> [p.render() for p in net.find_paths(*net.points[0::2])]
    ['A-B-C']
    >>>
    >>> G_out = to_networkx(net)  # DiGraph with both directions
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Hashable, Optional, Union

from netpaths.config import NetConfig
from netpaths.logging import get_logger
from netpaths.model.net import Net
from netpaths.model.node import NodeBuilder
from netpaths.types.base import Point, identifier_of

if TYPE_CHECKING:
    import networkx as nx

    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any

LOGGER = get_logger(__name__)


@dataclass(frozen=True)
class LabeledPoint:
    """Minimal point wrapping a graph node label.

    Attributes:
        identifier: The label itself.
    """

    identifier: Hashable

    def __str__(self) -> str:
        return str(self.identifier)


def from_networkx(
    G: NxGraph,
    point_factory: Optional[Callable[[Hashable], Point]] = None,
    config: Optional[NetConfig] = None,
) -> Net:
    """Convert a NetworkX graph to a :class:`Net`.

    Directed graphs keep edge direction. Undirected graphs contribute a
    connection in both directions. Parallel edges of multigraphs collapse
    into a single connection. Node order and neighbor order follow the
    graph's own insertion order.

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        point_factory: Builds a point from a graph node label. Defaults to
            :class:`LabeledPoint`.
        config: Optional configuration for the resulting net.

    Returns:
        A net with one node per graph node.

    Raises:
        TypeError: If G is not a NetworkX graph.
        ValueError: If the graph has no nodes.
        SelfConnectionError: If the graph contains a self loop.
    """
    import networkx as nx

    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    if G.number_of_nodes() == 0:
        raise ValueError("Graph has no nodes")

    factory = point_factory if point_factory is not None else LabeledPoint
    points: Dict[Hashable, Point] = {label: factory(label) for label in G.nodes()}

    net: Net = Net(config=config)
    for label, point in points.items():
        builder = NodeBuilder().set_point(point)
        # G.adj yields successors for directed graphs, neighbors otherwise
        builder.add_connections(points[neighbor] for neighbor in G.adj[label])
        net.add_node(builder.build())

    LOGGER.debug(
        "Converted %s with %d nodes into a net",
        type(G).__name__,
        G.number_of_nodes(),
    )
    return net


def to_networkx(net: Net) -> "nx.DiGraph":
    """Convert a :class:`Net` to a NetworkX DiGraph.

    Each point becomes a graph node keyed by its identifier with the point
    stored in the ``point`` attribute. Each connection becomes a directed edge.

    Args:
        net: Net to convert.

    Returns:
        nx.DiGraph mirroring the net's nodes and connections.
    """
    import networkx as nx

    G = nx.DiGraph()
    for node in net:
        G.add_node(node.identifier, point=node.point)
    for node in net:
        for target in node.connected_points:
            G.add_edge(node.identifier, identifier_of(target))
    return G
