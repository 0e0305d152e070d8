"""Tests for `netpaths.config`."""

from netpaths.config import NET_CONFIG, NetConfig


def test_defaults() -> None:
    config = NetConfig()
    assert config.path_separator == "-"
    assert config.reject_duplicate_points is True


def test_global_instance_uses_defaults() -> None:
    assert NET_CONFIG == NetConfig()
