from __future__ import annotations
import enum
import os
from dataclasses import dataclass, field
from typing import Dict, List, NamedTuple, Optional


class NodeKind(enum.Enum):
    FILE = "file"
    DIRECTORY = "directory"


class Entry(NamedTuple):
    path: str
    kind: NodeKind
    size: int = 0


@dataclass(eq=False)
class Node:
    path: str
    kind: NodeKind
    size: int = 0
    children: List["Node"] = field(default_factory=list, repr=False)
    parent: Optional["Node"] = field(default=None, repr=False)
    expanded: bool = False

    @property
    def name(self) -> str:
        return os.path.basename(self.path.rstrip("\\/")) or self.path

    @property
    def is_dir(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def add_child(self, child: "Node") -> None:
        child.parent = self
        self.children.append(child)


@dataclass
class ScanResult:
    root: Node
    registry: Dict[str, Node]  # path -> node
    files: int
    dirs: int
    bytes_scanned: int
    elapsed_sec: float
