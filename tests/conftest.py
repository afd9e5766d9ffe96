# tests/conftest.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from collections import deque
from unittest.mock import MagicMock

import pytest

from symfsm.core.machine import Machine


class RecordingHook:
    """Hook that records every notification it receives."""

    def __init__(self):
        self.transitions = []
        self.errors = []

    def on_transition(self, symbol, source, target) -> None:
        self.transitions.append((symbol, source, target))

    def on_error(self, error: Exception) -> None:
        self.errors.append(error)


def pytest_configure(config):
    """Register custom marks."""
    config.addinivalue_line("markers", "property: mark test as a property-based test")


@pytest.fixture
def machine():
    """A payload-less machine starting in INIT."""
    return Machine("INIT")


@pytest.fixture
def stack():
    """An empty list used as a stack payload."""
    return []


@pytest.fixture
def stack_machine(stack):
    """A machine starting in INIT with a list payload."""
    return Machine("INIT", stack)


@pytest.fixture
def queue():
    """An empty deque used as a queue payload."""
    return deque()


@pytest.fixture
def dummy_action():
    """An action mock that returns no state."""
    return MagicMock(return_value=None)


@pytest.fixture
def recording_hook():
    """A fresh RecordingHook."""
    return RecordingHook()


@pytest.fixture
def mock_hook():
    """A hook mock with on_transition and on_error."""
    hook = MagicMock()
    hook.on_transition = MagicMock()
    hook.on_error = MagicMock()
    return hook
