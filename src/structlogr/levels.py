"""Backend severity levels and verbosity translation.

The backend orders its levels numerically with lower values being more
verbose. Verbosity levels used by call sites grow in the opposite direction,
starting from ``0`` for the most important messages, and map onto the backend
scale with ``info`` as the base.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Union


class Level(IntEnum):
    """Named levels understood by :class:`structlogr.backend.StructuredLogger`."""

    TRACE = -1
    DEBUG = 0
    INFO = 1
    WARN = 2
    ERROR = 3
    FATAL = 4
    PANIC = 5
    DISABLED = 7

    @property
    def label(self) -> str:
        return self.name.lower()


MIN_LEVEL = -128
MAX_LEVEL = 127

_BY_LABEL = {level.label: level for level in Level}


def level_label(level: int) -> str:
    """Return the ``level`` value written into a record.

    Levels without a name are rendered as their decimal value.
    """

    try:
        return Level(level).label
    except ValueError:
        return str(int(level))


def parse_level(value: Union[str, int]) -> int:
    if isinstance(value, bool):
        raise ValueError(f"Unknown log level: {value!r}")
    if isinstance(value, int):
        number = value
    else:
        normalized = value.strip().lower()
        if normalized in _BY_LABEL:
            return _BY_LABEL[normalized]
        try:
            number = int(normalized)
        except ValueError as exc:
            raise ValueError(f"Unknown log level: {value!r}") from exc
    if not MIN_LEVEL <= number <= MAX_LEVEL:
        raise ValueError(f"Log level {number} outside [{MIN_LEVEL}, {MAX_LEVEL}]")
    try:
        return Level(number)
    except ValueError:
        return number


def backend_level(verbosity: int) -> int:
    """Translate a verbosity into a backend level.

    ``0`` is ``info``, ``1`` is ``debug``, ``2`` is ``trace`` and every further
    step goes one below that, saturating at :data:`MIN_LEVEL`.
    """

    level = Level.INFO - max(verbosity, 0)
    if level < MIN_LEVEL:
        level = MIN_LEVEL
    try:
        return Level(level)
    except ValueError:
        return level
