from __future__ import annotations
import logging

from .models import Node
from .sorting import SortPolicy, sort_tree

logger = logging.getLogger(__name__)

SORT_KEY = "s"
DEFAULT_POLICY = SortPolicy.SIZE_DESCENDING


class InputDispatcher:
    """Turns raw key presses into sort policy changes.

    Keys other than SORT_KEY are not ours; the caller passes them on to the
    tree view untouched.
    """

    def __init__(self, root: Node, policy: SortPolicy = DEFAULT_POLICY):
        self.root = root
        self.policy = policy

    def apply(self) -> None:
        sort_tree(self.root, self.policy)

    def cycle_sort(self) -> SortPolicy:
        self.policy = self.policy.next()
        logger.debug("sort policy -> %s", self.policy.label)
        self.apply()
        return self.policy

    def handle_key(self, key: str) -> bool:
        """Return True when the tree needs repainting."""
        if key != SORT_KEY:
            return False
        self.cycle_sort()
        return True
