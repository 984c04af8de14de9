"""structlog processor chain used by the JSON backend."""

from typing import Any, Dict, List, Optional, TextIO

import structlog
from structlog.typing import EventDict, Processor, WrappedLogger


def stringify_errors(_: WrappedLogger, __: str, event_dict: EventDict) -> EventDict:
    """Render exception values as their message, the way ``error`` fields are."""

    for key, value in event_dict.items():
        if isinstance(value, BaseException):
            event_dict[key] = str(value)
    return event_dict


def build_processors() -> List[Processor]:
    """Return the processors turning an event dict into one JSON line."""

    return [
        stringify_errors,
        structlog.processors.JSONRenderer(),
    ]


class EventLogger(structlog.BoundLoggerBase):
    """Bound logger that emits a prepared event dict through the processors."""

    def emit(self, event_kw: Dict[str, Any]) -> None:
        args, kw = self._process_event("msg", None, event_kw)
        self._logger.msg(*args, **kw)


def build_logger(writer: Optional[TextIO] = None, **context: Any) -> EventLogger:
    """Create a structlog bound logger writing JSON lines to ``writer``."""

    logger = structlog.wrap_logger(
        structlog.PrintLogger(file=writer),
        processors=build_processors(),
        wrapper_class=EventLogger,
        context_class=dict,
    )
    # Binding resolves the lazy proxy into a concrete EventLogger.
    return logger.bind(**context)
