"""Graph model: nodes, paths and the net that searches them."""

from netpaths.model.net import Net
from netpaths.model.node import Connection, Node, NodeBuilder
from netpaths.model.path import Path, PathBuilder

__all__ = ["Connection", "Net", "Node", "NodeBuilder", "Path", "PathBuilder"]
