from __future__ import annotations
import logging
import os
import stat as statmod
import time
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from .aggregate import propagate_size
from .errors import InternalInvariantError, ScanError
from .models import Entry, Node, NodeKind, ScanResult

logger = logging.getLogger(__name__)

Walker = Callable[[str], Iterable[Entry]]


def _entry_from_stat(path: str, st: os.stat_result) -> Entry:
    if statmod.S_ISDIR(st.st_mode):
        return Entry(path, NodeKind.DIRECTORY, 0)
    return Entry(path, NodeKind.FILE, int(st.st_size))


def _list_dir(dir_path: str) -> List[os.DirEntry]:
    try:
        with os.scandir(dir_path) as it:
            entries = list(it)
    except OSError as e:
        raise ScanError(dir_path, e.strerror or e) from e
    entries.sort(key=lambda e: e.name)
    return entries


def walk(root: str) -> Iterator[Entry]:
    """Lexical pre-order walk: every entry comes before its descendants.

    Symlinks below the root are reported as files and never followed.
    """
    try:
        st = os.stat(root)
    except OSError as e:
        raise ScanError(root, e.strerror or e) from e

    first = _entry_from_stat(root, st)
    yield first
    if first.kind is not NodeKind.DIRECTORY:
        return

    # stack holds directory listings still being consumed, innermost last
    stack = [iter(_list_dir(root))]
    while stack:
        entry = next(stack[-1], None)
        if entry is None:
            stack.pop()
            continue
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            raise ScanError(entry.path, e.strerror or e) from e

        item = _entry_from_stat(entry.path, st)
        yield item
        if item.kind is NodeKind.DIRECTORY:
            stack.append(iter(_list_dir(entry.path)))


def scan_tree(root: str, walker: Optional[Walker] = None) -> ScanResult:
    t0 = time.time()
    root = os.path.normpath(root)
    walker = walker or walk

    registry: Dict[str, Node] = {}
    root_node: Optional[Node] = None
    files = 0
    dirs = 0
    bytes_scanned = 0

    for entry in walker(root):
        path = os.path.normpath(entry.path)
        node = Node(path=path, kind=entry.kind,
                    size=entry.size if entry.kind is NodeKind.FILE else 0)

        if path == root:
            root_node = node
        else:
            parent = registry.get(os.path.dirname(path))
            if parent is None:
                raise InternalInvariantError(f"unrooted child path at {path}")
            parent.add_child(node)
        registry[path] = node

        if node.is_dir:
            dirs += 1
            logger.debug("dir %s", path)
        else:
            files += 1
            bytes_scanned += node.size
            propagate_size(node, node.size)

    if root_node is None:
        raise InternalInvariantError(f"walk of {root} never produced the root")

    elapsed = time.time() - t0
    logger.info("Scanned %s: %d files, %d dirs, %d bytes in %.2fs",
                root, files, dirs, bytes_scanned, elapsed)
    return ScanResult(
        root=root_node,
        registry=registry,
        files=files,
        dirs=dirs,
        bytes_scanned=bytes_scanned,
        elapsed_sec=elapsed,
    )
