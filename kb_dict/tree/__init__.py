"""Binding tree construction and rendering utilities."""

from .builder import Node, Tree, build_tree, insert
from .serializer import dumps, format_tree, quote


__all__ = ["Node", "Tree", "build_tree", "dumps", "format_tree", "insert", "quote"]
