"""Tests for the point capability helpers."""

from dataclasses import dataclass

import pytest

from netpaths.types.base import Point, identifier_of, is_same


@dataclass(frozen=True)
class Country:
    identifier: str
    population: int = 0


class Region:
    def __init__(self, code: int) -> None:
        self._code = code

    @property
    def identifier(self) -> int:
        return self._code


def test_is_same_compares_identifiers_only() -> None:
    assert is_same(Country("Portugal", 10), Country("Portugal", 11))
    assert not is_same(Country("Portugal"), Country("Spain"))


def test_property_based_points_are_supported() -> None:
    assert is_same(Region(1), Region(1))
    assert identifier_of(Region(7)) == 7


def test_runtime_protocol_check() -> None:
    assert isinstance(Country("Iceland"), Point)
    assert isinstance(Region(3), Point)
    assert not isinstance("Iceland", Point)


def test_identifier_of_rejects_non_points() -> None:
    with pytest.raises(TypeError, match="identifier"):
        identifier_of(42)
