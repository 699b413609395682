"""Toolbelt: option map, statistics, string helpers, interval timer and timestamps.

The submodules are independent; import what you need::

    from toolbelt import IntervalTimer, Precision, describe
"""

from importlib import metadata

from toolbelt.options import Arguments
from toolbelt.stats import describe
from toolbelt.utils.timer import IntervalTimer, Precision, TimerStateError


def get_version() -> str:
    """Installed distribution version, ``0.0.0`` when running from a checkout."""
    try:
        return metadata.version("toolbelt")
    except metadata.PackageNotFoundError:
        return "0.0.0"


__all__ = [
    "Arguments",
    "IntervalTimer",
    "Precision",
    "TimerStateError",
    "describe",
    "get_version",
]
