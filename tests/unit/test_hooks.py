# tests/unit/test_hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

import pytest

from symfsm.core.hooks import HookManager, TransitionHook


def test_hook_manager_empty():
    manager = HookManager()
    assert len(manager) == 0
    manager.execute_on_transition("a", "S", "T")
    manager.execute_on_error(RuntimeError("x"))


def test_register_and_execute(mock_hook):
    manager = HookManager()
    manager.register_hook(mock_hook)
    manager.execute_on_transition("a", "S", "T")
    error = RuntimeError("boom")
    manager.execute_on_error(error)

    mock_hook.on_transition.assert_called_once_with("a", "S", "T")
    mock_hook.on_error.assert_called_once_with(error)


def test_hooks_called_in_registration_order():
    calls = []

    class Hook:
        def __init__(self, name):
            self.name = name

        def on_transition(self, symbol, source, target):
            calls.append(self.name)

    manager = HookManager([Hook("first"), Hook("second")])
    manager.register_hook(Hook("third"))
    manager.execute_on_transition("a", "S", "T")
    assert calls == ["first", "second", "third"]


def test_partial_hooks_are_skipped():
    class OnlyErrors:
        def __init__(self):
            self.errors = []

        def on_error(self, error):
            self.errors.append(error)

    hook = OnlyErrors()
    manager = HookManager([hook])
    manager.execute_on_transition("a", "S", "T")
    error = ValueError("bad")
    manager.execute_on_error(error)
    assert hook.errors == [error]


def test_hook_errors_propagate():
    class Broken:
        def on_transition(self, symbol, source, target):
            raise RuntimeError("hook failed")

    manager = HookManager([Broken()])
    with pytest.raises(RuntimeError, match="hook failed"):
        manager.execute_on_transition("a", "S", "T")


def test_hooks_property_is_a_copy(recording_hook):
    manager = HookManager([recording_hook])
    hooks = manager.hooks
    hooks.clear()
    assert len(manager) == 1


def test_recording_hook_satisfies_protocol(recording_hook):
    assert isinstance(recording_hook, TransitionHook)
