"""Net of nodes and exhaustive simple-path search between two points.

``Net.find_paths`` enumerates every loop-free route from one point to
another with a depth-first search. Each branch extends its own copy of the
path travelled so far, so a point visited on one branch can still be
visited on a sibling branch. A branch with nowhere left to go reports
:class:`NoPathFoundError`, which its parent absorbs; only when no branch at
all reaches the destination does the error reach the caller.

Connections are directed: an undirected edge between A and B is expressed
by listing B in A's node and A in B's node.
"""

from __future__ import annotations

from typing import Dict, Generic, Iterable, Iterator, List, Optional, Tuple

from netpaths.config import NET_CONFIG, NetConfig
from netpaths.errors import (
    DuplicatePointError,
    EmptyPathError,
    NetIntegrityError,
    NoPathFoundError,
    PathCannotBeBuiltError,
    PointNotFoundError,
)
from netpaths.logging import get_logger
from netpaths.model.node import Node
from netpaths.model.path import Path, PathBuilder
from netpaths.types.base import Identifier, PointT, identifier_of

LOGGER = get_logger(__name__)


class Net(Generic[PointT]):
    """A collection of nodes, at most one per point identifier.

    The net must not be modified while a search is running.

    Attributes:
        config: Settings consulted for duplicate handling and for the
            separator carried by the paths ``find_paths`` returns.
    """

    def __init__(
        self,
        nodes: Iterable[Node[PointT]] = (),
        config: Optional[NetConfig] = None,
    ) -> None:
        self.config: NetConfig = config if config is not None else NET_CONFIG
        self._nodes: Dict[Identifier, Node[PointT]] = {}
        self.add_nodes_from(nodes)

    def add_node(self, node: Node[PointT]) -> None:
        """Add ``node`` keyed by its point identifier.

        Raises:
            DuplicatePointError: If a node for the same point exists and
                ``config.reject_duplicate_points`` is set. Otherwise the
                existing node is kept and the new one is dropped.
        """
        ident = node.identifier
        if ident in self._nodes:
            if self.config.reject_duplicate_points:
                raise DuplicatePointError(ident)
            LOGGER.warning(
                "Dropping duplicate node for point %r; keeping the first one", ident
            )
            return
        self._nodes[ident] = node

    def add_nodes_from(self, nodes: Iterable[Node[PointT]]) -> Net[PointT]:
        for node in nodes:
            self.add_node(node)
        return self

    @property
    def nodes(self) -> List[Node[PointT]]:
        """Nodes in insertion order."""
        return list(self._nodes.values())

    @property
    def points(self) -> List[PointT]:
        return [node.point for node in self._nodes.values()]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node[PointT]]:
        return iter(self._nodes.values())

    def __contains__(self, point: object) -> bool:
        try:
            return identifier_of(point) in self._nodes
        except TypeError:
            return False

    def find_node(self, point: PointT) -> Node[PointT]:
        """Return the node for ``point``.

        Raises:
            PointNotFoundError: If the net has no node for ``point``.
        """
        ident = identifier_of(point)
        try:
            return self._nodes[ident]
        except KeyError:
            raise PointNotFoundError(ident) from None

    def dangling_connections(self) -> List[Tuple[PointT, PointT]]:
        """Return ``(point, target)`` pairs whose target has no node."""
        return [
            (node.point, target)
            for node in self._nodes.values()
            for target in node.connected_points
            if identifier_of(target) not in self._nodes
        ]

    def validate(self) -> None:
        """Check that every connection leads to a node of this net.

        Raises:
            NetIntegrityError: On the first connection without a target node.
        """
        dangling = self.dangling_connections()
        if dangling:
            point, target = dangling[0]
            raise NetIntegrityError(identifier_of(point), identifier_of(target))

    def is_valid_path(self, path: Path[PointT]) -> bool:
        """Return True if ``path`` is a simple path along connections of this net."""
        if not path:
            return False
        if len(set(path.identifiers)) != len(path):
            return False
        if any(point not in self for point in path):
            return False
        return all(
            self.find_node(current).is_connected_to(following)
            for current, following in zip(path.points, path.points[1:])
        )

    def find_paths(self, source: PointT, target: PointT) -> List[Path[PointT]]:
        """Find every simple path from ``source`` to ``target``.

        Paths are returned in traversal order, which follows each node's
        connection order. They are not sorted by length or otherwise.
        A query from a point to itself yields the single one-point path.
        Returned paths render with ``config.path_separator``.

        The search recurses once per point on the path, so a path can hold
        at most about ``sys.getrecursionlimit()`` points; longer routes
        raise ``RecursionError``.

        Args:
            source: Point to start from.
            target: Point to reach.

        Returns:
            List of paths, each starting with ``source`` and ending with
            ``target`` without repeating a point.

        Raises:
            PointNotFoundError: If ``source`` (checked first) or ``target``
                has no node in the net.
            NoPathFoundError: If no path connects the two points.
            NetIntegrityError: If a connection leads to a point without a node.
        """
        start = self.find_node(source)
        self.find_node(target)

        try:
            seed = PathBuilder(self.config.path_separator).add_point(source).build()
        except EmptyPathError as exc:
            raise PathCannotBeBuiltError(
                f"Could not start a path at point {identifier_of(source)!r}"
            ) from exc

        LOGGER.debug(
            "Searching paths from %r to %r in a net of %d nodes",
            identifier_of(source),
            identifier_of(target),
            len(self),
        )
        try:
            paths = self._search(start, target, seed)
        except NoPathFoundError:
            raise NoPathFoundError(
                identifier_of(source), identifier_of(target)
            ) from None

        LOGGER.debug(
            "Found %d path(s) from %r to %r",
            len(paths),
            identifier_of(source),
            identifier_of(target),
        )
        return paths

    def _search(
        self, node: Node[PointT], destination: PointT, path: Path[PointT]
    ) -> List[Path[PointT]]:
        """Extend ``path`` from ``node`` and collect the branches reaching ``destination``.

        Raises:
            NoPathFoundError: If no branch from here reaches ``destination``.
        """
        if path.ends_with(destination):
            return [path]

        candidates = node.connected_points_not_in_path(path)
        if candidates is None:
            raise NoPathFoundError()

        found: List[Path[PointT]] = []
        for candidate in candidates:
            next_node = self._resolve(node, candidate)
            branch = path.copy()
            branch.push(candidate)
            try:
                found.extend(self._search(next_node, destination, branch))
            except NoPathFoundError:
                LOGGER.debug("Dead end at %s", branch)

        if not found:
            raise NoPathFoundError()
        return found

    def _resolve(self, node: Node[PointT], candidate: PointT) -> Node[PointT]:
        """Return the node for a connection target, or fail loudly."""
        try:
            return self.find_node(candidate)
        except PointNotFoundError:
            raise NetIntegrityError(
                node.identifier, identifier_of(candidate)
            ) from None

    def __repr__(self) -> str:
        return f"Net(nodes={len(self)})"
