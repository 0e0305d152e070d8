"""Point capability shared by nodes, paths and nets.

Any domain object exposing a stable ``identifier`` can be placed in a net;
no base class is required. Frozen dataclasses are the usual choice::

    @dataclass(frozen=True)
    class Country:
        identifier: str
"""

from __future__ import annotations

from typing import Any, Hashable, Protocol, TypeVar, runtime_checkable

#: Identifier carried by a point. Must be hashable so nets can index nodes.
Identifier = Hashable


@runtime_checkable
class Point(Protocol):
    """Anything with a stable, comparable identity."""

    @property
    def identifier(self) -> Identifier: ...


#: Type variable for the point type a node, path or net is parameterized over.
PointT = TypeVar("PointT", bound=Point)


def identifier_of(point: Any) -> Identifier:
    """Return the identifier of ``point``.

    Raises:
        TypeError: If ``point`` does not provide an ``identifier``.
    """
    try:
        return point.identifier
    except AttributeError:
        raise TypeError(
            f"Expected a point with an 'identifier', got {type(point).__name__}"
        ) from None


def is_same(a: Point, b: Point) -> bool:
    """Return True when both points carry the same identifier."""
    return identifier_of(a) == identifier_of(b)
