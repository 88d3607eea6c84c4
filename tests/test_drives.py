from collections import namedtuple

import psutil

from sizetree import drives
from sizetree.utils import GIBIBYTE

Usage = namedtuple("Usage", "total used free percent")


def test_summary_formats_usage(monkeypatch):
    monkeypatch.setattr(psutil, "disk_usage",
                        lambda p: Usage(100 * GIBIBYTE + 1, 25 * GIBIBYTE + 1, 75 * GIBIBYTE, 25.0))
    assert drives.disk_usage_summary("/") == "25 GiB used of 100 GiB (25%)"


def test_summary_none_when_unavailable(monkeypatch):
    def boom(path):
        raise FileNotFoundError(2, "No such file or directory", path)

    monkeypatch.setattr(psutil, "disk_usage", boom)
    assert drives.disk_usage_summary("/gone") is None


def test_summary_for_real_path(tmp_path):
    text = drives.disk_usage_summary(str(tmp_path))
    assert text is None or "used of" in text
