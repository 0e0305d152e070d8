"""Tests for exception messages and hierarchy."""

import pytest

from netpaths.errors import (
    DuplicatePointError,
    EmptyPathError,
    MissingPointError,
    NetIntegrityError,
    NetPathsError,
    NoPathFoundError,
    PointNotFoundError,
    SelfConnectionError,
)


def test_point_not_found_message_and_payload() -> None:
    err = PointNotFoundError("C")
    assert err.point_id == "C"
    assert str(err) == 'The point with id "C" could not be found'
    assert isinstance(err, LookupError)


def test_no_path_found_message() -> None:
    assert str(NoPathFoundError()) == "No path found between points"
    err = NoPathFoundError("A", "B")
    assert (err.source_id, err.target_id) == ("A", "B")
    assert str(err) == 'No path found between points "A" and "B"'


@pytest.mark.parametrize(
    "err",
    [
        MissingPointError(),
        SelfConnectionError("A"),
        EmptyPathError(),
        DuplicatePointError("A"),
    ],
)
def test_validation_errors_are_recoverable_value_errors(err) -> None:
    assert isinstance(err, NetPathsError)
    assert isinstance(err, ValueError)


def test_integrity_error_is_outside_recoverable_hierarchy() -> None:
    err = NetIntegrityError("A", "Z")
    assert not isinstance(err, NetPathsError)
    assert isinstance(err, RuntimeError)
    assert '"Z"' in str(err)
