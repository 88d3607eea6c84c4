from __future__ import annotations
import enum
from typing import Tuple

from .models import Node


class SortPolicy(enum.Enum):
    NAME_ASCENDING = "name"
    SIZE_DESCENDING = "size"

    def next(self) -> "SortPolicy":
        if self is SortPolicy.NAME_ASCENDING:
            return SortPolicy.SIZE_DESCENDING
        return SortPolicy.NAME_ASCENDING

    @property
    def label(self) -> str:
        return "name" if self is SortPolicy.NAME_ASCENDING else "size"


def name_key(node: Node) -> Tuple[str, str]:
    # case-insensitive first; paths differing only in case fall back to exact order
    return node.path.lower(), node.path


def size_key(node: Node) -> Tuple[int, str, str]:
    # equal sizes are ordered by name so repeated sorts are deterministic
    return (-node.size,) + name_key(node)


def sort_children(node: Node, policy: SortPolicy) -> None:
    key = name_key if policy is SortPolicy.NAME_ASCENDING else size_key
    node.children.sort(key=key)


def sort_tree(root: Node, policy: SortPolicy) -> None:
    stack = [root]
    while stack:
        node = stack.pop()
        if not node.children:
            continue
        sort_children(node, policy)
        stack.extend(node.children)
