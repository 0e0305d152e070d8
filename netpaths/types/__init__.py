"""Core type definitions for NetPaths."""

from netpaths.types.base import Identifier, Point, PointT, identifier_of, is_same

__all__ = ["Identifier", "Point", "PointT", "identifier_of", "is_same"]
