from __future__ import annotations
import argparse
import logging
import os
import stat as statmod
from typing import Callable, List, Optional, Tuple

from .app import run as run_app
from .dispatch import InputDispatcher
from .errors import ArgumentError, InternalInvariantError, ScanError
from .expansion import expand
from .models import ScanResult
from .scanner import scan_tree

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

Runner = Callable[[ScanResult, InputDispatcher], None]


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sizetree",
        description="Interactive disk usage tree.",
        add_help=False,
    )
    p.add_argument("path", nargs="?", default=None)
    return p


def resolve_root(path: Optional[str]) -> str:
    if path is None:
        return os.path.abspath(os.getcwd())
    try:
        st = os.stat(path)
    except OSError as e:
        raise ArgumentError(f"Cannot open {path}: {e.strerror or e}") from e
    if not statmod.S_ISDIR(st.st_mode):
        raise ArgumentError(f"Cannot open {path}: is not a directory")
    return os.path.abspath(path)


def prepare(root: str) -> Tuple[ScanResult, InputDispatcher]:
    """Scan root and put the tree in its startup state."""
    result = scan_tree(root)
    dispatcher = InputDispatcher(result.root)
    dispatcher.apply()
    expand(result.root)
    return result, dispatcher


def main(argv: Optional[List[str]] = None, runner: Runner = run_app) -> int:
    logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT)
    args = _build_parser().parse_args(argv)

    try:
        root = resolve_root(args.path)
        print(f"Scanning {root}... (may take a while)")
        result, dispatcher = prepare(root)
    except ArgumentError as e:
        print(e)
        return 1
    except ScanError as e:
        print(f"Unable to populate filesystem tree: {e}")
        return 1
    except InternalInvariantError:
        logger.critical("filesystem walk broke parent-before-child order", exc_info=True)
        return 1

    runner(result, dispatcher)
    return 0
