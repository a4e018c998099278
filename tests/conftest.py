from __future__ import annotations

import logging

import pytest


def pytest_runtest_setup(item: pytest.Item) -> None:
    """Run before each test."""
    todos = list(item.iter_markers(name="todo"))
    if todos:
        pytest.xfail(f"Test needs to be implemented, {item.location}")


def pytest_configure(config) -> None:
    """Used to register marks."""
    config.addinivalue_line("markers", "todo: Mark test as todo")


@pytest.fixture()
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture the debug logs of enumkit."""
    caplog.set_level(logging.DEBUG, logger="enumkit")
    return caplog
