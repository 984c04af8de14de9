"""Generic structured logging interface.

Call sites log through :class:`Logger`, which tracks a verbosity and hands
every record to a :class:`LogSink`. Sinks decide how records are rendered and
where they go; :class:`structlogr.sink.StructlogSink` is the JSON one.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace
from typing import Any, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class RuntimeInfo:
    """Frames the :class:`Logger` front end adds between a caller and its sink."""

    call_depth: int = 1


class LogSink(ABC):
    """Contract a logging backend implements to be driven by :class:`Logger`."""

    @abstractmethod
    def init(self, info: RuntimeInfo) -> "LogSink":
        """Return a sink prepared for use behind a :class:`Logger`."""

    @abstractmethod
    def enabled(self, level: int) -> bool:
        """Report whether an info record at verbosity ``level`` would be written."""

    @abstractmethod
    def info(self, level: int, msg: str, *keys_and_values: Any) -> None:
        ...

    @abstractmethod
    def error(self, err: Optional[BaseException], msg: str, *keys_and_values: Any) -> None:
        ...

    @abstractmethod
    def with_values(self, *keys_and_values: Any) -> "LogSink":
        ...

    @abstractmethod
    def with_name(self, name: str) -> "LogSink":
        ...


class CallDepthLogSink(LogSink):
    """Sink able to attribute records to a caller further up the stack."""

    @abstractmethod
    def with_call_depth(self, depth: int) -> "LogSink":
        ...


@runtime_checkable
class Underlier(Protocol):
    """Sink exposing the logger it writes through."""

    def get_underlying(self) -> Any: ...


@dataclass(frozen=True)
class Logger:
    """Immutable logging handle.

    ``v`` raises the verbosity of the records emitted through the returned
    handle; ``with_name`` and ``with_values`` attach context. None of them
    change the handle they are called on.
    """

    sink: Optional[LogSink] = None
    level: int = 0

    def v(self, level: int) -> "Logger":
        if self.sink is None:
            return self
        return replace(self, level=self.level + max(level, 0))

    def get_v(self) -> int:
        return self.level

    def get_sink(self) -> Optional[LogSink]:
        return self.sink

    def is_zero(self) -> bool:
        return self.sink is None

    def enabled(self) -> bool:
        return self.sink is not None and self.sink.enabled(self.level)

    def info(self, msg: str, *keys_and_values: Any) -> None:
        if self.sink is None:
            return
        if self.sink.enabled(self.level):
            self.sink.info(self.level, msg, *keys_and_values)

    def error(self, err: Optional[BaseException], msg: str, *keys_and_values: Any) -> None:
        if self.sink is None:
            return
        self.sink.error(err, msg, *keys_and_values)

    def with_values(self, *keys_and_values: Any) -> "Logger":
        if self.sink is None:
            return self
        return replace(self, sink=self.sink.with_values(*keys_and_values))

    def with_name(self, name: str) -> "Logger":
        if self.sink is None:
            return self
        return replace(self, sink=self.sink.with_name(name))

    def with_call_depth(self, depth: int) -> "Logger":
        if not isinstance(self.sink, CallDepthLogSink):
            return self
        return replace(self, sink=self.sink.with_call_depth(depth))


def new_logger(sink: LogSink) -> Logger:
    return Logger(sink=sink.init(RuntimeInfo(call_depth=1)))


def discard() -> Logger:
    """Return a logger that drops every record."""

    return Logger()
