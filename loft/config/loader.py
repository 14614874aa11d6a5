"""Configuration loading and logger construction."""

from __future__ import annotations

import json
import sys
from functools import reduce
from pathlib import Path
from typing import IO, Any, Callable, Dict, List

from loft.config.merge import merge_config
from loft.config.models import HandlerConfig, LoggerConfig
from loft.handler import StdHandler
from loft.line_writer import LineFlags
from loft.logger import DEFAULT_NAME, Logger
from loft.severity import Severity


DEFAULTS: Dict[str, Any] = {
    "name": DEFAULT_NAME,
    "handler_defaults": {"threshold": "info", "sink": "stderr", "flags": ["date", "time"]},
    "handlers": [],
}

_FLAG_NAMES = {name.lower(): flag for name, flag in LineFlags.__members__.items()}


def _as_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, list):
        return [str(v) for v in value]
    return [str(value)]


def _as_str(value: Any, default: str) -> str:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def parse_flags(names: List[str]) -> LineFlags:
    """Combine flag names such as ``["date", "time"]`` into LineFlags.

    Raises:
        ValueError: If a name is not a known flag.
    """
    flags = []
    for name in names:
        key = name.strip().lower()
        if key not in _FLAG_NAMES:
            known = ", ".join(sorted(_FLAG_NAMES))
            raise ValueError(f"Unknown line flag: {name!r} (expected one of: {known})")
        flags.append(_FLAG_NAMES[key])
    return reduce(lambda acc, flag: acc | flag, flags, LineFlags.NONE)


def handler_config_from_dict(raw: Dict[str, Any]) -> HandlerConfig:
    """Build a HandlerConfig from a merged handler entry."""
    return HandlerConfig(
        threshold=Severity.parse(raw.get("threshold", Severity.INFO)),
        sink=_as_str(raw.get("sink"), "stderr"),
        flags=parse_flags(_as_list(raw.get("flags"))),
    )


def config_from_dict(raw: Dict[str, Any]) -> LoggerConfig:
    """Build a LoggerConfig from a raw dictionary."""
    merged = merge_config(DEFAULTS, raw or {})
    return LoggerConfig(
        name=_as_str(merged.get("name"), DEFAULT_NAME),
        handlers=[handler_config_from_dict(entry) for entry in merged["handlers"]],
    )


def load_config(path: Path) -> LoggerConfig:
    """Load a JSON config file into a LoggerConfig."""
    with path.open("r", encoding="utf-8") as f:
        return config_from_dict(json.load(f))


def open_sink(target: str) -> IO[Any]:
    """Resolve a sink name to a stream: stdout, stderr, or an appended file."""
    if target == "stdout":
        return sys.stdout
    if target == "stderr":
        return sys.stderr
    path = Path(target).expanduser()
    path.parent.mkdir(parents=True, exist_ok=True)
    return path.open("a", encoding="utf-8")


def build_logger(cfg: LoggerConfig, opener: Callable[[str], IO[Any]] | None = None) -> Logger:
    """Create a Logger whose stack mirrors ``cfg.handlers``.

    Args:
        cfg: Logger configuration.
        opener: Optional sink resolver, defaults to ``open_sink``.

    Returns:
        Configured logger. Streams other than stdout and stderr belong to
        their handlers and are closed by ``Logger.close()``.
    """
    opener = opener or open_sink
    handlers = []
    for entry in cfg.handlers:
        stream = opener(entry.sink)
        owned = stream is not sys.stdout and stream is not sys.stderr
        handlers.append(StdHandler(entry.threshold, stream, entry.flags, close_sink=owned))
    return Logger(cfg.name, handlers)
