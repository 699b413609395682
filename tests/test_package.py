import toolbelt
from toolbelt.utils.timer import IntervalTimer


def test_top_level_exports():
    assert toolbelt.IntervalTimer is IntervalTimer
    assert toolbelt.describe([1, 2, 3])["count"] == 3
    assert toolbelt.Arguments(["--a=1"]).get("a", int) == 1
    assert isinstance(toolbelt.get_version(), str)
