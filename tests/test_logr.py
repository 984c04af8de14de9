"""Unit tests for the generic Logger front end."""

from typing import Any, List, Optional, Tuple

import pytest

from structlogr.logr import LogSink, Logger, RuntimeInfo, discard, new_logger


class RecordingSink(LogSink):
    """Minimal sink capturing the calls the front end makes."""

    def __init__(self, threshold: int = 0, calls: Optional[List[Tuple[Any, ...]]] = None) -> None:
        self.threshold = threshold
        self.calls: List[Tuple[Any, ...]] = calls if calls is not None else []
        self.runtime_info: Optional[RuntimeInfo] = None

    def init(self, info: RuntimeInfo) -> "RecordingSink":
        self.runtime_info = info
        return self

    def enabled(self, level: int) -> bool:
        return level <= self.threshold

    def info(self, level: int, msg: str, *keys_and_values: Any) -> None:
        self.calls.append(("info", level, msg, keys_and_values))

    def error(self, err: Optional[BaseException], msg: str, *keys_and_values: Any) -> None:
        self.calls.append(("error", err, msg, keys_and_values))

    def with_values(self, *keys_and_values: Any) -> "RecordingSink":
        self.calls.append(("with_values", keys_and_values))
        return RecordingSink(self.threshold, self.calls)

    def with_name(self, name: str) -> "RecordingSink":
        self.calls.append(("with_name", name))
        return RecordingSink(self.threshold, self.calls)


@pytest.fixture()
def sink() -> RecordingSink:
    return RecordingSink(threshold=2)


def test_new_logger_passes_runtime_info(sink: RecordingSink) -> None:
    new_logger(sink)

    assert sink.runtime_info == RuntimeInfo(call_depth=1)


def test_v_is_additive_and_ignores_negative_steps(sink: RecordingSink) -> None:
    log = new_logger(sink)

    assert log.v(1).v(2).get_v() == 3
    assert log.v(0).v(1).v(-20).v(1).get_v() == 2
    assert log.v(-5).get_v() == 0


def test_v_does_not_modify_parent(sink: RecordingSink) -> None:
    log = new_logger(sink)
    log.v(3)

    assert log.get_v() == 0


def test_info_only_forwarded_when_enabled(sink: RecordingSink) -> None:
    log = new_logger(sink)

    log.v(2).info("kept", "k", "v")
    log.v(3).info("dropped")

    assert sink.calls == [("info", 2, "kept", ("k", "v"))]
    assert log.v(2).enabled() is True
    assert log.v(3).enabled() is False


def test_error_forwarded_regardless_of_verbosity(sink: RecordingSink) -> None:
    err = RuntimeError("boom")

    new_logger(sink).v(10).error(err, "failed", "k", "v")

    assert sink.calls == [("error", err, "failed", ("k", "v"))]


def test_with_call_depth_is_noop_without_support(sink: RecordingSink) -> None:
    log = new_logger(sink)

    assert log.with_call_depth(2) is log


def test_derivations_forward_to_sink(sink: RecordingSink) -> None:
    log = new_logger(sink).with_name("main").with_values("k", "v")

    assert sink.calls == [("with_name", "main"), ("with_values", ("k", "v"))]
    assert log.get_sink() is not sink


def test_discard_drops_everything() -> None:
    log = discard()

    assert log.is_zero()
    assert log.enabled() is False
    assert log.with_name("main").v(3).with_values("k", "v").with_call_depth(1) == log
    log.info("ignored")
    log.error(RuntimeError("ignored"), "ignored")
