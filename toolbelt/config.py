"""Configuration dataclasses for toolbelt commands."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict

from toolbelt.utils.timer import Precision


@dataclass
class TimerConfig:
    """Settings for the phase timer."""

    precision: Precision = Precision.MILLISECONDS


@dataclass
class SummaryConfig:
    """Full configuration of a summarize run."""

    input_path: Path | None = None
    values: str | None = None
    delimiter: str = ","
    output_path: Path | None = None
    log_path: Path | None = None
    verbose: bool = False
    timer: TimerConfig = field(default_factory=TimerConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize the config to a plain, JSON-friendly dict."""
        data = asdict(self)
        for key in ("input_path", "output_path", "log_path"):
            if data[key] is not None:
                data[key] = str(data[key])
        data["timer"] = {"precision": self.timer.precision.name.lower()}
        return data
