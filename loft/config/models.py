"""Configuration dataclasses."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from loft.line_writer import LineFlags
from loft.severity import Severity


@dataclass
class HandlerConfig:
    """Settings for one standard handler."""

    threshold: Severity = Severity.INFO
    sink: str = "stderr"
    flags: LineFlags = LineFlags.STD


@dataclass
class LoggerConfig:
    """Logger name plus its handler stack, bottom first."""

    name: str = "default"
    handlers: List[HandlerConfig] = field(default_factory=list)
