"""Summarize a list of numbers with descriptive statistics."""

from __future__ import annotations

import argparse
import json
import logging
import math
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from toolbelt import get_version, stats, strings, timestamp
from toolbelt.config import SummaryConfig, TimerConfig
from toolbelt.options import Arguments
from toolbelt.utils.logging import setup_console_logger, setup_file_logger
from toolbelt.utils.timer import IntervalTimer, Precision

PRECISIONS = {p.name.lower(): p for p in Precision}
LOGGER_NAME = "toolbelt.summarize"


def parse_args(
    argv: Optional[Sequence[str]] = None,
) -> Tuple[argparse.Namespace, List[str]]:
    parser = argparse.ArgumentParser(
        allow_abbrev=False,
        description="Descriptive statistics for a list of numbers",
        epilog="Unrecognized --key=value options are recorded as report tags.",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--input", type=str, help="Text file holding the numbers.")
    source.add_argument("--values", type=str, help="Inline numbers, e.g. '1,2,3'.")
    parser.add_argument(
        "--delimiter",
        type=str,
        default=",",
        help="Separator between numbers; newlines always separate (default: ',').",
    )
    parser.add_argument(
        "--precision",
        choices=sorted(PRECISIONS),
        default="milliseconds",
        help="Unit of the phase timings in the report.",
    )
    parser.add_argument("--output", type=str, default=None, help="Write the JSON report here.")
    parser.add_argument("--log_file", type=str, default=None)
    parser.add_argument("--verbose", action="store_true", help="Log at debug level.")
    parser.add_argument("--version", action="version", version=get_version())
    return parser.parse_known_args(argv)


def build_config(args: argparse.Namespace) -> SummaryConfig:
    return SummaryConfig(
        input_path=Path(args.input).expanduser() if args.input else None,
        values=args.values,
        delimiter=args.delimiter,
        output_path=Path(args.output).expanduser() if args.output else None,
        log_path=Path(args.log_file).expanduser() if args.log_file else None,
        verbose=args.verbose,
        timer=TimerConfig(precision=PRECISIONS[args.precision]),
    )


def _build_logger(config: SummaryConfig) -> logging.Logger:
    level = logging.DEBUG if config.verbose else logging.INFO
    if config.log_path is not None:
        config.log_path.parent.mkdir(parents=True, exist_ok=True)
        return setup_file_logger(config.log_path, level=level, name=LOGGER_NAME)
    return setup_console_logger(level=level)


def parse_values(text: str, delimiter: str, logger: logging.Logger) -> List[float]:
    """Turn delimited text into floats, skipping tokens that are not numbers."""

    values: List[float] = []
    for line in text.splitlines():
        for token in strings.split(line, delimiter):
            token = token.strip()
            if not token:
                continue
            try:
                values.append(float(token))
            except ValueError:
                logger.warning("Skipping non-numeric token %r", token)
    return values


def load_text(config: SummaryConfig) -> str:
    if config.input_path is not None:
        return config.input_path.read_text(encoding="utf-8")
    return config.values or ""


def run_summary(
    config: SummaryConfig,
    tags: Optional[Dict[str, Any]] = None,
    logger: Optional[logging.Logger] = None,
    timer: Optional[IntervalTimer] = None,
) -> Dict[str, Any]:
    """Load, describe and report; each phase is timed as a lap."""

    logger = logger or logging.getLogger(__name__)
    timer = timer or IntervalTimer(config.timer.precision)
    timer.start()

    values = parse_values(load_text(config), config.delimiter, logger)
    timer.lap("load")
    logger.info("Loaded %d values", len(values))

    summary = stats.describe(values)
    timer.lap("compute")

    report: Dict[str, Any] = {
        "generated_at": timestamp.to_string(timestamp.now()),
        "precision": config.timer.precision.name.lower(),
        "stats": summary,
        "tags": dict(tags or {}),
    }
    timer.stop()
    report["timings"] = timer.timings()
    if config.output_path is not None:
        config.output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config.output_path, "w", encoding="utf-8") as handle:
            json.dump(_json_safe(report), handle, indent=2, allow_nan=False)
        logger.info("Wrote report to %s", config.output_path)
    return report


def _json_safe(value: Any) -> Any:
    """Replace non-finite floats with ``None`` so the report is strict JSON."""

    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def _format_line(summary: Dict[str, Any]) -> str:
    keys = ("count", "mean", "median", "std", "min", "max")
    return strings.merge((f"{key}={summary[key]:g}" for key in keys), "  ")


def main(argv: Optional[Sequence[str]] = None) -> int:
    args, extras = parse_args(argv)
    config = build_config(args)
    logger = _build_logger(config)
    tags = Arguments(extras)
    if tags.positionals:
        logger.warning("Ignoring positional arguments: %s", strings.merge(tags.positionals, " "))
    logger.debug("Config: %s", config.to_dict())

    report = run_summary(config, tags=tags.as_dict(), logger=logger)
    print(_format_line(report["stats"]))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
