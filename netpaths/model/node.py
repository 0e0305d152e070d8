"""Adjacency model: a point together with its outbound connections.

Nodes are immutable once built. Use :class:`NodeBuilder` to assemble one
incrementally; the builder collapses repeated connections and refuses to
build a node connected to its own point.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Generic, Iterable, List, Optional, Tuple

from netpaths.errors import (
    DuplicateConnectionError,
    MissingPointError,
    SelfConnectionError,
)
from netpaths.logging import get_logger
from netpaths.types.base import Identifier, PointT, identifier_of, is_same

if TYPE_CHECKING:
    from netpaths.model.path import Path

LOGGER = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Connection(Generic[PointT]):
    """Directed edge record naming a target point.

    Two connections are equal when they target the same point identifier,
    regardless of any other state carried by the target objects.

    Attributes:
        target: The point this connection leads to.
    """

    target: PointT

    def targets(self, point: PointT) -> bool:
        """Return True if this connection leads to ``point``."""
        return is_same(self.target, point)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Connection):
            return NotImplemented
        return self.targets(other.target)

    def __hash__(self) -> int:
        return hash(identifier_of(self.target))


@dataclass(frozen=True, eq=False)
class Node(Generic[PointT]):
    """A point plus its outbound connections, in insertion order.

    Attributes:
        point: Subject point of the node.
        connections: Outbound connections. Never contains the node's own
            point and never two connections to the same target.

    Raises:
        SelfConnectionError: If a connection targets ``point``.
        DuplicateConnectionError: If two connections share a target.
    """

    point: PointT
    connections: Tuple[Connection[PointT], ...] = field(default=())

    def __post_init__(self) -> None:
        connections = tuple(self.connections)
        object.__setattr__(self, "connections", connections)

        seen = set()
        for connection in connections:
            target_id = identifier_of(connection.target)
            if connection.targets(self.point):
                raise SelfConnectionError(self.identifier)
            if target_id in seen:
                raise DuplicateConnectionError(self.identifier, target_id)
            seen.add(target_id)

    @property
    def identifier(self) -> Identifier:
        return identifier_of(self.point)

    @property
    def connected_points(self) -> Tuple[PointT, ...]:
        """Connection targets in insertion order."""
        return tuple(connection.target for connection in self.connections)

    def point_is(self, point: PointT) -> bool:
        """Return True if ``point`` is this node's subject."""
        return is_same(self.point, point)

    def is_connected_to(self, point: PointT) -> bool:
        return any(connection.targets(point) for connection in self.connections)

    def connected_points_not_in_path(
        self, path: Path[PointT]
    ) -> Optional[List[PointT]]:
        """Return connection targets that do not occur in ``path``.

        Args:
            path: Route travelled so far.

        Returns:
            Unvisited targets in connection order, or None when every target
            has already been visited (or the node has no connections).
        """
        candidates = [
            connection.target
            for connection in self.connections
            if path.does_not_contain(connection.target)
        ]
        return candidates or None

    def __eq__(self, other: Any) -> bool:
        """Same subject point and pairwise same connection targets, in order."""
        if not isinstance(other, Node):
            return NotImplemented
        return self.point_is(other.point) and self.connections == other.connections

    def __hash__(self) -> int:
        return hash(self.identifier)


class NodeBuilder(Generic[PointT]):
    """Incrementally assembles a :class:`Node`.

    Example:
        >>> node = NodeBuilder().set_point(a).add_connections([b, c]).build()
    """

    def __init__(self) -> None:
        self._point: Optional[PointT] = None
        self._connections: List[Connection[PointT]] = []

    @classmethod
    def from_node(cls, node: Node[PointT]) -> NodeBuilder[PointT]:
        """Start a builder pre-filled with ``node``'s point and connections."""
        builder: NodeBuilder[PointT] = cls()
        builder.set_point(node.point)
        builder.add_connections(node.connected_points)
        return builder

    def set_point(self, point: PointT) -> NodeBuilder[PointT]:
        """Set (or replace) the subject point."""
        self._point = point
        return self

    def add_connection(self, point: PointT) -> NodeBuilder[PointT]:
        """Connect to ``point`` unless a connection to it already exists."""
        if any(connection.targets(point) for connection in self._connections):
            LOGGER.debug(
                "Ignoring duplicate connection to point %r", identifier_of(point)
            )
            return self
        self._connections.append(Connection(point))
        return self

    def add_connections(self, points: Iterable[PointT]) -> NodeBuilder[PointT]:
        for point in points:
            self.add_connection(point)
        return self

    def build(self) -> Node[PointT]:
        """Build an immutable node.

        Raises:
            MissingPointError: If no point was set.
            SelfConnectionError: If the point is connected to itself.
        """
        if self._point is None:
            raise MissingPointError()
        return Node(self._point, tuple(self._connections))
