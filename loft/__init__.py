"""Leveled logging facade with a stack of severity-routed handlers."""

from loft.handler import Handler, StdHandler, label, new_std_handler
from loft.line_writer import LineFlags, LineWriter
from loft.logger import HandlerStackEmptyError, Logger, new
from loft.registry import get_logger, reset_loggers
from loft.severity import Severity, UnknownSeverityError

DEBUG = Severity.DEBUG
INFO = Severity.INFO
NOTICE = Severity.NOTICE
WARN = Severity.WARN
ERROR = Severity.ERROR
FATAL = Severity.FATAL
EMERGENCY = Severity.EMERGENCY

__all__ = [
    "DEBUG",
    "EMERGENCY",
    "ERROR",
    "FATAL",
    "INFO",
    "NOTICE",
    "WARN",
    "Handler",
    "HandlerStackEmptyError",
    "LineFlags",
    "LineWriter",
    "Logger",
    "Severity",
    "StdHandler",
    "UnknownSeverityError",
    "get_logger",
    "label",
    "new",
    "new_std_handler",
    "reset_loggers",
]
