"""Config merging helpers."""

from __future__ import annotations

from typing import Any, Dict, List


def merge_dicts(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge overrides into base."""
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def merge_handler_defaults(defaults: Dict[str, Any], handlers: List[Any]) -> List[Dict[str, Any]]:
    """Fill every handler entry with the shared handler defaults.

    Entries that are not mappings are treated as a bare threshold, so
    ``["debug", "error"]`` is shorthand for two default handlers.
    """
    merged: List[Dict[str, Any]] = []
    for entry in handlers:
        if isinstance(entry, dict):
            merged.append(merge_dicts(defaults, entry))
        else:
            merged.append(merge_dicts(defaults, {"threshold": entry}))
    return merged


def merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Merge a user config over the base config.

    ``handler_defaults`` from both sides are combined and applied to each
    handler entry. A handler list in ``overrides`` replaces the base list.
    """
    merged = merge_dicts(base, {k: v for k, v in overrides.items() if k != "handlers"})
    handlers = overrides.get("handlers", base.get("handlers")) or []
    merged["handlers"] = merge_handler_defaults(merged.get("handler_defaults") or {}, list(handlers))
    return merged
