"""Generic structured logging interface on top of a structlog JSON backend."""

from importlib import import_module
from typing import Any, Dict, Tuple

__all__ = [
    "CallDepthLogSink",
    "Level",
    "LogSink",
    "Logger",
    "RuntimeInfo",
    "Settings",
    "StructlogSink",
    "StructuredLogger",
    "Underlier",
    "backend_level",
    "discard",
    "from_settings",
    "load_settings",
    "new",
    "new_log_sink",
    "parse_level",
]

_LAZY_IMPORTS: Dict[str, Tuple[str, str]] = {
    "CallDepthLogSink": ("structlogr.logr", "CallDepthLogSink"),
    "Level": ("structlogr.levels", "Level"),
    "LogSink": ("structlogr.logr", "LogSink"),
    "Logger": ("structlogr.logr", "Logger"),
    "RuntimeInfo": ("structlogr.logr", "RuntimeInfo"),
    "Settings": ("structlogr.config", "Settings"),
    "StructlogSink": ("structlogr.sink", "StructlogSink"),
    "StructuredLogger": ("structlogr.backend", "StructuredLogger"),
    "Underlier": ("structlogr.logr", "Underlier"),
    "backend_level": ("structlogr.levels", "backend_level"),
    "discard": ("structlogr.logr", "discard"),
    "from_settings": ("structlogr.sink", "from_settings"),
    "load_settings": ("structlogr.config", "load_settings"),
    "new": ("structlogr.sink", "new"),
    "new_log_sink": ("structlogr.sink", "new_log_sink"),
    "parse_level": ("structlogr.levels", "parse_level"),
}


def __getattr__(name: str) -> Any:  # pragma: no cover - trivial delegator
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module 'structlogr' has no attribute {name!r}")
    module_name, attr_name = _LAZY_IMPORTS[name]
    module = import_module(module_name)
    attr = getattr(module, attr_name)
    globals()[name] = attr
    return attr
