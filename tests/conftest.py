# tests/conftest.py
from __future__ import annotations

import os

import pytest
from loguru import logger

from timeflow.config.app_config import ENV_OVERRIDES
from timeflow.core import Source, SteppedClock


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


@pytest.fixture(autouse=True)
def _clean_timeflow_env(monkeypatch):
    """
    TIMEFLOW_* overrides must not leak between tests;
    load_dotenv() writes os.environ directly, so pop on teardown too.
    """
    for name in ENV_OVERRIDES:
        monkeypatch.delenv(name, raising=False)
    yield
    for name in ENV_OVERRIDES:
        os.environ.pop(name, None)


@pytest.fixture
def stepped_clock() -> SteppedClock:
    """0, 10, 20, ... one reading per call"""
    return SteppedClock(start_us=0, step_us=10)


@pytest.fixture
def make_source():
    """
    Factory fixture: make_source([(time, value), ...]) -> Source
    Pairs are added in the given order (back-dating allowed).
    """

    def _make(pairs=()) -> Source:
        s = Source()
        for t, v in pairs:
            s.add(v, t)
        return s

    return _make
