"""Nested binding tree construction from key sequence paths."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeAlias, Union


if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence


Node: TypeAlias = Union[str, "Tree"]
Tree: TypeAlias = dict[str, Node]


def insert(tree: Tree, value: str, path: Sequence[str]) -> None:
    """Insert value at path, creating interior nodes as needed.

    An empty path is ignored. A full path that already holds a leaf is
    overwritten. A longer path running through an existing leaf is dropped
    and the leaf is kept, so the first of two colliding sequences wins.
    """
    if not path:
        return

    head = path[0]
    if len(path) == 1:
        tree[head] = value
        return

    child = tree.get(head)
    if child is None:
        child = {}
        tree[head] = child
    if not isinstance(child, dict):
        return
    insert(child, value, path[1:])


def build_tree(items: Iterable[tuple[Sequence[str], str]]) -> Tree:
    """Build a tree from (path, value) pairs applied in order."""
    tree: Tree = {}
    for path, value in items:
        insert(tree, value, path)
    return tree
