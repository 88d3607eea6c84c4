from __future__ import annotations
from typing import Tuple

from .models import Node

KIBIBYTE = 1 << 10
MEBIBYTE = 1 << 20
GIBIBYTE = 1 << 30


def size_magnitude(num: int) -> Tuple[int, str]:
    # strict ">": exactly 1024 bytes is still shown in B
    if num > GIBIBYTE:
        return num // GIBIBYTE, "GiB"
    if num > MEBIBYTE:
        return num // MEBIBYTE, "MiB"
    if num > KIBIBYTE:
        return num // KIBIBYTE, "KiB"
    return num, "B"


def format_size(num: int) -> str:
    n, unit = size_magnitude(num)
    return f"{n:3d} {unit:>3s}"


def node_label(node: Node) -> str:
    return f"{format_size(node.size)} {node.path}"


def clamp(v, lo, hi):
    return lo if v < lo else hi if v > hi else v
