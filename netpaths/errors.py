"""Exceptions raised by NetPaths.

Builder and lookup failures derive from :class:`NetPathsError` and are meant
to be handled by callers. :class:`NetIntegrityError` signals a net whose
connections point at missing nodes; it is a programming error and is kept
outside that hierarchy.
"""

from __future__ import annotations

from typing import Any, Optional


class NetPathsError(Exception):
    """Base class for recoverable NetPaths errors."""


class MissingPointError(NetPathsError, ValueError):
    """A node builder was asked to build without a subject point."""

    def __init__(self) -> None:
        super().__init__("A node needs a point; call set_point() before build()")


class SelfConnectionError(NetPathsError, ValueError):
    """A node's point is connected to itself."""

    def __init__(self, point_id: Any) -> None:
        self.point_id = point_id
        super().__init__(f'The point with id "{point_id}" cannot connect to itself')


class DuplicateConnectionError(NetPathsError, ValueError):
    """A node was given two connections to the same target point."""

    def __init__(self, point_id: Any, target_id: Any) -> None:
        self.point_id = point_id
        self.target_id = target_id
        super().__init__(
            f'The point with id "{point_id}" is connected to "{target_id}" more than once'
        )


class EmptyPathError(NetPathsError, ValueError):
    """A path builder was asked to build without any point."""

    def __init__(self) -> None:
        super().__init__("Should set at least one point for the path")


class DuplicatePointError(NetPathsError, ValueError):
    """A net received a second node for an already known point."""

    def __init__(self, point_id: Any) -> None:
        self.point_id = point_id
        super().__init__(f'The point with id "{point_id}" already exists in the net')


class PointNotFoundError(NetPathsError, LookupError):
    """A point has no node in the net."""

    def __init__(self, point_id: Any) -> None:
        self.point_id = point_id
        super().__init__(f'The point with id "{point_id}" could not be found')


class NoPathFoundError(NetPathsError):
    """No simple path connects the requested points."""

    def __init__(
        self, source_id: Optional[Any] = None, target_id: Optional[Any] = None
    ) -> None:
        self.source_id = source_id
        self.target_id = target_id
        message = "No path found between points"
        if source_id is not None and target_id is not None:
            message = f'{message} "{source_id}" and "{target_id}"'
        super().__init__(message)


class PathCannotBeBuiltError(NetPathsError, RuntimeError):
    """The initial search path could not be created."""


class NetIntegrityError(RuntimeError):
    """A connection targets a point that has no node in the net."""

    def __init__(self, point_id: Any, target_id: Any) -> None:
        self.point_id = point_id
        self.target_id = target_id
        super().__init__(
            f'The point with id "{point_id}" is connected to "{target_id}", '
            "which has no node in the net"
        )
