"""Config package facade."""

from loft.config.loader import build_logger, config_from_dict, load_config, open_sink, parse_flags
from loft.config.models import HandlerConfig, LoggerConfig

__all__ = [
    "HandlerConfig",
    "LoggerConfig",
    "build_logger",
    "config_from_dict",
    "load_config",
    "open_sink",
    "parse_flags",
]
