"""Ordered route of points used while searching a net.

A ``Path`` keeps the points visited so far. The search never shares a path
between branches: each branch works on its own :meth:`Path.copy`, so pushing
a point onto one branch never affects a sibling.
"""

from __future__ import annotations

from typing import Any, Generic, Iterable, Iterator, List, Optional, Tuple

from netpaths.config import NET_CONFIG
from netpaths.errors import EmptyPathError
from netpaths.types.base import Identifier, PointT, identifier_of, is_same


class Path(Generic[PointT]):
    """Represents a single route through a net.

    Attributes:
        points: Points in route order. Treat as read-only once the path has
            been handed out; use :meth:`copy` before extending a shared path.
        separator: Default text between identifiers in :meth:`render`. When
            None, ``NET_CONFIG.path_separator`` is used.
    """

    __slots__ = ("points", "separator")

    def __init__(
        self, points: Iterable[PointT] = (), separator: Optional[str] = None
    ) -> None:
        self.points: List[PointT] = list(points)
        self.separator = separator

    def push(self, point: PointT) -> None:
        """Append ``point`` to the end of the path."""
        self.points.append(point)

    def copy(self) -> Path[PointT]:
        """Return an independent path with the same points and separator."""
        return Path(self.points, self.separator)

    def contains(self, point: PointT) -> bool:
        """Return True if a point with the same identifier is on the path."""
        return any(is_same(visited, point) for visited in self.points)

    def does_not_contain(self, point: PointT) -> bool:
        return not self.contains(point)

    def ends_with(self, point: PointT) -> bool:
        """Return True if the last point is ``point``; always False when empty."""
        return bool(self.points) and is_same(self.points[-1], point)

    def render(self, separator: Optional[str] = None) -> str:
        """Join point identifiers in path order.

        Args:
            separator: Text between identifiers. Defaults to the path's own
                ``separator``, then ``NET_CONFIG.path_separator``.

        Returns:
            A string such as ``"A-B-C"``.
        """
        if separator is None:
            separator = self.separator
        if separator is None:
            separator = NET_CONFIG.path_separator
        return separator.join(str(ident) for ident in self.identifiers)

    @property
    def identifiers(self) -> Tuple[Identifier, ...]:
        """Point identifiers in path order."""
        return tuple(identifier_of(point) for point in self.points)

    @property
    def src_point(self) -> PointT:
        """First point of the path."""
        return self.points[0]

    @property
    def dst_point(self) -> PointT:
        """Last point of the path."""
        return self.points[-1]

    def __contains__(self, point: Any) -> bool:
        return self.contains(point)

    def __getitem__(self, idx: int) -> PointT:
        return self.points[idx]

    def __iter__(self) -> Iterator[PointT]:
        return iter(self.points)

    def __len__(self) -> int:
        return len(self.points)

    def __eq__(self, other: Any) -> bool:
        """Paths are equal when they visit the same identifiers in the same order."""
        if not isinstance(other, Path):
            return NotImplemented
        return self.identifiers == other.identifiers

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Path({self.render()!r})"


class PathBuilder(Generic[PointT]):
    """Collects points one at a time or in batches and builds a :class:`Path`.

    Example:
        >>> path = PathBuilder().add_point(a).add_points([b, c]).build()
    """

    def __init__(self, separator: Optional[str] = None) -> None:
        self._points: List[PointT] = []
        self._separator = separator

    def add_point(self, point: PointT) -> PathBuilder[PointT]:
        self._points.append(point)
        return self

    def add_points(self, points: Iterable[PointT]) -> PathBuilder[PointT]:
        self._points.extend(points)
        return self

    def build(self) -> Path[PointT]:
        """Build the path.

        Raises:
            EmptyPathError: If no point was added; a path must start somewhere.
        """
        if not self._points:
            raise EmptyPathError()
        return Path(self._points, self._separator)
