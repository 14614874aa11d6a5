"""Ordered severity levels."""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType

from rapidfuzz import process


class UnknownSeverityError(ValueError):
    """Raised when a severity name or value cannot be resolved."""


class Severity(IntEnum):
    """Log severity, lowest to highest."""

    DEBUG = -1
    INFO = 0
    NOTICE = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    EMERGENCY = 5

    @property
    def label(self) -> str:
        """Upper-case display name used in rendered records."""
        return LABELS[self]

    @classmethod
    def parse(cls, value: object) -> "Severity":
        """Resolve a severity from a member, an integer value, or a name.

        Args:
            value: Severity, int, or case-insensitive name such as "warn".

        Returns:
            Matching severity.

        Raises:
            UnknownSeverityError: If nothing matches.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                raise UnknownSeverityError(f"Unknown severity value: {value}") from None
        text = str(value).strip().upper()
        if text in _BY_NAME:
            return _BY_NAME[text]
        raise UnknownSeverityError(_unknown_name_message(str(value)))


LABELS = MappingProxyType(
    {
        Severity.DEBUG: "DEBUG",
        Severity.INFO: "INFO",
        Severity.NOTICE: "NOTICE",
        Severity.WARN: "WARN",
        Severity.ERROR: "ERROR",
        Severity.FATAL: "FATAL",
        Severity.EMERGENCY: "EMERGENCY",
    }
)

_BY_NAME = MappingProxyType(
    {**{label: level for level, label in LABELS.items()}, "WARNING": Severity.WARN}
)


def _unknown_name_message(name: str) -> str:
    match = process.extractOne(name.upper(), list(_BY_NAME), score_cutoff=60)
    if match is None:
        return f"Unknown severity: {name!r}"
    return f"Unknown severity: {name!r} (did you mean {match[0].lower()!r}?)"
