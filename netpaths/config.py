"""Configuration classes for NetPaths components."""

from dataclasses import dataclass


@dataclass
class NetConfig:
    """Configuration shared by nets and paths."""

    # Separator placed between point identifiers when rendering a path
    path_separator: str = "-"

    # Reject a second node for an already known point identifier. When False,
    # the first node wins and the duplicate is logged and dropped.
    reject_duplicate_points: bool = True


# Global configuration instance
NET_CONFIG = NetConfig()
