from sizetree.dispatch import DEFAULT_POLICY, SORT_KEY, InputDispatcher
from sizetree.sorting import SortPolicy

from treeutil import make_tree, names


def _dispatcher():
    root = make_tree("/r", {"x": 500, "Y": {"z": 2048}})
    d = InputDispatcher(root)
    d.apply()
    return d


def test_starts_sorted_by_size():
    d = _dispatcher()
    assert DEFAULT_POLICY is SortPolicy.SIZE_DESCENDING
    assert d.policy is SortPolicy.SIZE_DESCENDING
    assert names(d.root.children) == ["Y", "x"]


def test_sort_key_cycles_policy_and_reorders():
    d = _dispatcher()

    assert d.handle_key(SORT_KEY) is True
    assert d.policy is SortPolicy.NAME_ASCENDING
    assert names(d.root.children) == ["x", "Y"]

    assert d.handle_key(SORT_KEY) is True
    assert d.policy is SortPolicy.SIZE_DESCENDING
    assert names(d.root.children) == ["Y", "x"]


def test_other_keys_pass_through():
    d = _dispatcher()
    for key in ("S", "enter", "up", "space", "q"):
        assert d.handle_key(key) is False
    assert d.policy is SortPolicy.SIZE_DESCENDING
    assert names(d.root.children) == ["Y", "x"]


def test_sorting_keeps_expansion_state():
    d = _dispatcher()
    d.root.expanded = True
    d.handle_key(SORT_KEY)
    assert d.root.expanded
    assert not d.root.children[1].expanded
