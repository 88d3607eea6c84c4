import pytest

from sizetree.models import Node, NodeKind
from sizetree.utils import GIBIBYTE, KIBIBYTE, MEBIBYTE, format_size, node_label, size_magnitude


@pytest.mark.parametrize("num, expected", [
    (0, (0, "B")),
    (999, (999, "B")),
    (1024, (1024, "B")),
    (1025, (1, "KiB")),
    (2047, (1, "KiB")),
    (MEBIBYTE, (1024, "KiB")),
    (MEBIBYTE + 1, (1, "MiB")),
    (GIBIBYTE, (1024, "MiB")),
    (GIBIBYTE + 1, (1, "GiB")),
    (5 * GIBIBYTE + 7, (5, "GiB")),
])
def test_size_magnitude_boundaries(num, expected):
    assert size_magnitude(num) == expected


def test_format_size_is_right_aligned():
    assert format_size(0) == "  0   B"
    assert format_size(999) == "999   B"
    assert format_size(1024) == "1024   B"
    assert format_size(KIBIBYTE + 1) == "  1 KiB"
    assert format_size(100 * MEBIBYTE + 1) == "100 MiB"


def test_node_label():
    node = Node("/data/Y", NodeKind.DIRECTORY, size=2048)
    assert node_label(node) == "  2 KiB /data/Y"
    assert node_label(Node("/data/x", NodeKind.FILE, size=500)) == "500   B /data/x"
