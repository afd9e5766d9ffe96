# symfsm/core/hooks.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, List, Optional, Protocol, runtime_checkable

from symfsm.interfaces.types import StateID, Symbol


@runtime_checkable
class TransitionHook(Protocol):
    """
    Hook protocol for observing a machine.

    Methods:
        on_transition(symbol, source, target): Called after a symbol has been
            processed. target is the final state, after any action override.
        on_error(error): Called when processing fails, before the error is
            raised to the caller.

    A hook may implement either method; missing methods are skipped.
    """

    def on_transition(self, symbol: Symbol, source: StateID, target: StateID) -> None:
        ...

    def on_error(self, error: Exception) -> None:
        ...


class HookManager:
    """
    Manages the registration and execution of hooks that listen to machine
    events (on_transition, on_error). Users can attach logging, tracing, or
    custom side effects without altering the engine.
    """

    def __init__(self, hooks: Optional[List[Any]] = None) -> None:
        """
        Initialize with an optional list of hook objects.
        """
        self._hooks: List[Any] = list(hooks) if hooks else []

    @property
    def hooks(self) -> List[Any]:
        return list(self._hooks)

    def register_hook(self, hook: Any) -> None:
        """
        Add a new hook to the manager's list of hooks.

        :param hook: An object implementing some of the TransitionHook methods.
        """
        self._hooks.append(hook)

    def execute_on_transition(self, symbol: Symbol, source: StateID, target: StateID) -> None:
        """
        Run all hooks' on_transition logic after a symbol was processed.
        """
        for hook in self._hooks:
            callback = getattr(hook, "on_transition", None)
            if callback is not None:
                callback(symbol, source, target)

    def execute_on_error(self, error: Exception) -> None:
        """
        Run all hooks' on_error logic when processing fails.
        """
        for hook in self._hooks:
            callback = getattr(hook, "on_error", None)
            if callback is not None:
                callback(error)

    def __len__(self) -> int:
        return len(self._hooks)
