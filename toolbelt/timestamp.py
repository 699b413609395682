"""POSIX timestamps to and from ISO-8601 text.

Text is rendered in the local time zone using the ``YYYY-MM-DDTHH:MM:SSZ``
pattern. Neither direction raises: out-of-range input gives ``None``.
"""

from __future__ import annotations

import time
from datetime import datetime
from typing import Optional

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def now() -> int:
    """Return the current timestamp in whole seconds."""

    return int(time.time())


def to_string(timestamp: float) -> Optional[str]:
    try:
        return datetime.fromtimestamp(timestamp).strftime(ISO_FORMAT)
    except (ValueError, OverflowError, OSError):
        return None


def from_string(text: str) -> Optional[int]:
    """Parse text produced by :func:`to_string`; ``None`` if malformed."""

    try:
        return int(datetime.strptime(text.strip(), ISO_FORMAT).timestamp())
    except (ValueError, OverflowError, OSError):
        return None
