from __future__ import annotations
from typing import Dict, Optional

from rich.text import Text
from textual import events
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.reactive import var
from textual.widgets import Footer, Header, Tree
from textual.widgets.tree import TreeNode

from .dispatch import SORT_KEY, InputDispatcher
from .drives import disk_usage_summary
from .expansion import expand, toggle
from .models import Node, ScanResult
from .utils import node_label

APP_NAME = "sizetree"

COLOR_DIR = "green"
COLOR_FILE = "grey74"
COLOR_GUIDES = "silver"


def _label(node: Node) -> Text:
    # Text, not str: the tree would parse a plain str as markup and paths may contain "["
    return Text(node_label(node), style=COLOR_DIR if node.is_dir else COLOR_FILE, no_wrap=True)


class DiskTree(Tree[Node]):
    """Tree widget mirroring a Node tree.

    Only children of expanded nodes are materialised; rebuild() is called
    after every change to order or expansion.
    """

    DEFAULT_CSS = f"""
    DiskTree > .tree--guides {{
        color: {COLOR_GUIDES};
    }}
    """

    auto_expand = var(False)

    def __init__(self, root: Node, **kwargs):
        super().__init__(_label(root), data=root, **kwargs)
        self.model_root = root
        self._widget_nodes: Dict[int, TreeNode[Node]] = {}

    def rebuild(self, focus: Optional[Node] = None) -> None:
        self.clear()
        self._widget_nodes = {id(self.model_root): self.root}
        self.root.set_label(_label(self.model_root))
        self.root.data = self.model_root
        if self.model_root.expanded:
            self.root.expand()
        else:
            self.root.collapse()

        stack = [(self.root, self.model_root)]
        while stack:
            tn, node = stack.pop()
            if not node.expanded:
                continue
            for child in node.children:
                ctn = tn.add(_label(child), data=child,
                             expand=child.expanded, allow_expand=child.is_dir)
                self._widget_nodes[id(child)] = ctn
                stack.append((ctn, child))

        if focus is not None:
            self.focus_node(focus)

    def focus_node(self, node: Node) -> None:
        # nearest visible ancestor when node itself sits under a collapsed parent
        cur: Optional[Node] = node
        while cur is not None and id(cur) not in self._widget_nodes:
            cur = cur.parent
        if cur is None:
            return
        tn = self._widget_nodes[id(cur)]
        self.call_after_refresh(self.move_cursor, tn)

    def widget_node(self, node: Node) -> Optional[TreeNode[Node]]:
        return self._widget_nodes.get(id(node))

    def _step_cursor(self, step: int) -> None:
        # files aren't selectable: up/down jump over them
        line = self.cursor_line
        while True:
            line += step
            if line < 0:
                return
            tn = self.get_node_at_line(line)
            if tn is None:
                return
            if tn.data is None or tn.data.is_dir:
                self.cursor_line = line
                return

    def action_cursor_down(self) -> None:
        self._step_cursor(1)

    def action_cursor_up(self) -> None:
        self._step_cursor(-1)

    def action_toggle_expand_all(self) -> None:
        # no expand-all transition: shift+space acts on the cursor node only
        self.action_toggle_node()


class SizeTreeApp(App[None]):
    """Interactive disk usage tree."""

    TITLE = APP_NAME
    BINDINGS = [
        Binding("q", "quit", "Quit"),
    ]

    def __init__(self, result: ScanResult, dispatcher: InputDispatcher, **kwargs):
        super().__init__(**kwargs)
        self.result = result
        self.dispatcher = dispatcher
        self._usage = disk_usage_summary(result.root.path)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        yield DiskTree(self.result.root, id="disk_tree")
        yield Footer()

    @property
    def disk_tree(self) -> DiskTree:
        return self.query_one(DiskTree)

    def on_mount(self) -> None:
        self.title = self.result.root.path
        self._update_subtitle()
        self.disk_tree.rebuild(focus=self.result.root)
        self.disk_tree.focus()

    def _update_subtitle(self) -> None:
        parts = [f"sorted by {self.dispatcher.policy.label} ({SORT_KEY} to change)"]
        if self._usage:
            parts.append(self._usage)
        self.sub_title = "  ·  ".join(parts)

    def on_key(self, event: events.Key) -> None:
        # input hook: the event is never stopped, the tree still sees it
        if self.dispatcher.handle_key(event.key):
            self._update_subtitle()
            cursor = self.disk_tree.cursor_node
            self.disk_tree.rebuild(focus=cursor.data if cursor is not None else None)

    def on_tree_node_selected(self, event: Tree.NodeSelected) -> None:
        node = event.node.data
        if node is None or not node.is_dir:
            return
        toggle(node)
        self.disk_tree.rebuild(focus=node)

    def on_tree_node_expanded(self, event: Tree.NodeExpanded) -> None:
        node = event.node.data
        if node is None or node.expanded:
            return
        expand(node)
        self.disk_tree.rebuild(focus=node)

    def on_tree_node_collapsed(self, event: Tree.NodeCollapsed) -> None:
        node = event.node.data
        if node is None or not node.expanded:
            return
        toggle(node)
        self.disk_tree.rebuild(focus=node)


def run(result: ScanResult, dispatcher: InputDispatcher) -> None:
    SizeTreeApp(result, dispatcher).run()
