from __future__ import annotations
import logging
from typing import Optional

import psutil

from .utils import clamp, format_size

logger = logging.getLogger(__name__)


def disk_usage_summary(path: str) -> Optional[str]:
    """Usage of the filesystem holding path, e.g. '12 GiB used of 465 GiB (3%)'."""
    try:
        u = psutil.disk_usage(path)
    except OSError as e:
        logger.debug("disk_usage(%s) failed: %s", path, e)
        return None
    pct = clamp(float(u.percent), 0.0, 100.0)
    return f"{format_size(int(u.used)).strip()} used of {format_size(int(u.total)).strip()} ({pct:.0f}%)"
