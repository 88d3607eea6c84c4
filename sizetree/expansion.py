from __future__ import annotations
from .models import Node


def expand(node: Node) -> None:
    """Expand node, then keep going down while there is exactly one child.

    Stops at a node with zero or several children; a file at the end of the
    chain gets the flag too, which is harmless.
    """
    cur = node
    cur.expanded = True
    while len(cur.children) == 1:
        cur = cur.children[0]
        cur.expanded = True


def toggle(node: Node) -> None:
    if node.expanded:
        # only this node; descendants keep their own state
        node.expanded = False
    else:
        expand(node)
