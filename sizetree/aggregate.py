from __future__ import annotations
from .models import Node


def propagate_size(node: Node, size: int) -> None:
    """Add a file's size to every directory above it."""
    cur = node.parent
    while cur is not None:
        cur.size += size
        cur = cur.parent
