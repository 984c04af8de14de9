"""Shared fixtures for the structlogr tests."""

import io
import json
from typing import Any, Dict, List

import pytest

from structlogr.config import Settings


@pytest.fixture()
def buffer() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def settings() -> Settings:
    return Settings(verbosity_field_name="")


def read_records(buffer: io.StringIO) -> List[Dict[str, Any]]:
    return [json.loads(line) for line in buffer.getvalue().splitlines()]


def read_record(buffer: io.StringIO) -> Dict[str, Any]:
    records = read_records(buffer)
    assert len(records) == 1
    return records[0]
