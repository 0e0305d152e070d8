"""Library utilities for netpaths.

This package contains integration modules for external libraries.
"""

from netpaths.lib.nx import LabeledPoint, from_networkx, to_networkx

__all__ = ["LabeledPoint", "from_networkx", "to_networkx"]
