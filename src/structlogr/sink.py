"""Adapter from the generic :class:`~structlogr.logr.LogSink` to the JSON backend."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Sequence, TextIO

from .backend import StructuredLogger
from .config import Settings, load_settings
from .fields import join_name, pairs_to_fields
from .levels import Level, backend_level
from .logr import CallDepthLogSink, Logger, RuntimeInfo, new_logger


@dataclass(frozen=True)
class StructlogSink(CallDepthLogSink):
    """Forwards records to a :class:`StructuredLogger`.

    Verbosity ``v`` is written at backend level ``info - v``; errors are always
    written at ``error``. Values attached through ``with_values`` are bound on
    a derived backend, so the sink they came from never sees them.
    """

    backend: StructuredLogger
    settings: Settings
    name: str = ""
    depth: int = 0

    def init(self, info: RuntimeInfo) -> "StructlogSink":
        # Two more frames sit between the front end and the backend: the
        # public sink method and _msg.
        return replace(self, depth=info.call_depth + 2)

    def enabled(self, level: int) -> bool:
        return self.backend.enabled(backend_level(level))

    def info(self, level: int, msg: str, *keys_and_values: Any) -> None:
        fields: Dict[str, Any] = {}
        if self.settings.verbosity_field_name:
            fields[self.settings.verbosity_field_name] = level
        self._msg(backend_level(level), msg, fields, keys_and_values)

    def error(self, err: Optional[BaseException], msg: str, *keys_and_values: Any) -> None:
        fields: Dict[str, Any] = {}
        if err is not None:
            fields["error"] = str(err)
        self._msg(Level.ERROR, msg, fields, keys_and_values)

    def _msg(self, level: int, msg: str, fields: Dict[str, Any], keys_and_values: Sequence[Any]) -> None:
        if not self.backend.enabled(level):
            return
        if self.name:
            fields[self.settings.name_field_name] = self.name
        fields.update(pairs_to_fields(keys_and_values))
        self.backend.write(level, msg, fields, skip=self.depth)

    def with_values(self, *keys_and_values: Any) -> "StructlogSink":
        return replace(self, backend=self.backend.with_fields(pairs_to_fields(keys_and_values)))

    def with_name(self, name: str) -> "StructlogSink":
        return replace(self, name=join_name(self.name, name, self.settings.name_separator))

    def with_call_depth(self, depth: int) -> "StructlogSink":
        return replace(self, depth=self.depth + depth)

    def get_underlying(self) -> StructuredLogger:
        return self.backend


def new_log_sink(backend: StructuredLogger, settings: Optional[Settings] = None) -> StructlogSink:
    return StructlogSink(backend=backend, settings=settings or load_settings())


def new(backend: StructuredLogger, settings: Optional[Settings] = None) -> Logger:
    """Wrap ``backend`` in a :class:`Logger`."""

    return new_logger(new_log_sink(backend, settings))


def from_settings(settings: Optional[Settings] = None, writer: Optional[TextIO] = None) -> Logger:
    """Build the backend described by ``settings`` and wrap it in a :class:`Logger`."""

    resolved_settings = settings or load_settings()
    backend = StructuredLogger.new(writer).level(resolved_settings.level)
    if resolved_settings.report_caller:
        backend = backend.with_caller()
    return new(backend, resolved_settings)
