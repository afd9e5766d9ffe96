# symfsm/core/errors.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from typing import Any, Dict, Optional


class FSMError(Exception):
    """
    Base exception class for errors raised by the finite state machine engine.

    :param message: Human readable description of the failure.
    :param details: Optional dictionary of diagnostic values.
    """

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details if details is not None else {}


class InvalidTransitionError(FSMError):
    """
    Raised when the machine cannot resolve an exact, wildcard or default
    transition for the current state and the symbol being processed. The
    machine's current state is left untouched.
    """

    def __init__(self, state: Any, symbol: Any, details: Optional[Dict[str, Any]] = None) -> None:
        merged = {"state": state, "symbol": symbol}
        if details:
            merged.update(details)
        super().__init__(f"No transition for state {state!r} when reading symbol {symbol!r}", merged)
        self.state = state
        self.symbol = symbol


class ConfigurationError(FSMError):
    """
    Raised when a bulk transition entry cannot be unpacked into the arguments
    of ``add_transition``.
    """

    def __init__(self, message: str, entry: Any = None, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message, details)
        self.entry = entry
