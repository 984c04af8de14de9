"""Leveled JSON logger backed by structlog."""

from __future__ import annotations

import sys
from dataclasses import dataclass, replace
from typing import Any, Dict, Mapping, Optional, TextIO, Union

from .levels import Level, level_label, parse_level
from .logging import EventLogger, build_logger


@dataclass(frozen=True)
class StructuredLogger:
    """Writes one JSON record per call when the level passes the threshold.

    Instances are immutable; ``level``, ``with_fields`` and ``with_caller``
    return derived copies sharing the same output stream.
    """

    bound: EventLogger
    threshold: int = Level.TRACE
    report_caller: bool = False

    @classmethod
    def new(cls, writer: Optional[TextIO] = None) -> "StructuredLogger":
        return cls(build_logger(writer))

    def level(self, level: Union[int, str]) -> "StructuredLogger":
        return replace(self, threshold=int(parse_level(level)))

    def get_level(self) -> int:
        return self.threshold

    def with_fields(self, fields: Mapping[str, Any]) -> "StructuredLogger":
        if not fields:
            return self
        return replace(self, bound=self.bound.bind(**fields))

    def with_caller(self) -> "StructuredLogger":
        return replace(self, report_caller=True)

    def enabled(self, level: int) -> bool:
        return self.threshold != Level.DISABLED and level >= self.threshold

    def write(self, level: int, message: str, fields: Mapping[str, Any], skip: int = 0) -> None:
        """Emit ``message`` at ``level``.

        ``skip`` counts frames above the direct caller of this method when
        resolving the ``caller`` field.
        """

        if not self.enabled(level):
            return
        event_kw: Dict[str, Any] = dict(fields)
        event_kw["level"] = level_label(level)
        if self.report_caller:
            location = _caller_location(skip + 1)
            if location is not None:
                event_kw["caller"] = location
        event_kw["message"] = message
        try:
            self.bound.emit(event_kw)
        except Exception as exc:
            print(f"structlogr: could not write event: {exc}", file=sys.stderr)


def _caller_location(skip: int) -> Optional[str]:
    frame = sys._getframe(1)
    for _ in range(skip):
        frame = frame.f_back
        if frame is None:
            return None
    return f"{frame.f_code.co_filename}:{frame.f_lineno}"
