# symfsm/core/machine.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from symfsm.core.actions import _ActionInvoker
from symfsm.core.errors import ConfigurationError, InvalidTransitionError
from symfsm.core.hooks import HookManager
from symfsm.core.transitions import Transition, TransitionTable, is_empty_state
from symfsm.interfaces.types import Action, StateID, Symbol

logger = logging.getLogger(__name__)


class Machine:
    """
    A finite state machine with attached memory.

    Besides its current state, the machine holds a user supplied payload that
    is handed to every action, so a parser can use it as a stack or queue.
    The payload is kept by reference: the caller and the actions see the same
    object, and the machine never replaces it.

    A machine is not thread-safe, and an action must not call process() on
    the machine that is invoking it.
    """

    def __init__(
        self,
        initial_state: StateID,
        payload: Any = None,
        hooks: Optional[List[Any]] = None,
    ) -> None:
        """
        :param initial_state: The state in which this machine begins.
        :param payload: Object passed to each action along with the symbol.
        :param hooks: Optional list of hook objects implementing on_transition
            and/or on_error.
        """
        self._initial_state = initial_state
        self._current_state = initial_state
        self._payload = payload
        self._table = TransitionTable()
        self._hook_manager = HookManager(hooks)
        self._invoker = _ActionInvoker()

    @property
    def initial_state(self) -> StateID:
        return self._initial_state

    @property
    def current_state(self) -> StateID:
        """Get the current state."""
        return self._current_state

    @property
    def payload(self) -> Any:
        """Get the payload shared with the actions."""
        return self._payload

    @property
    def table(self) -> TransitionTable:
        return self._table

    def get_current_state(self) -> StateID:
        return self._current_state

    def get_payload(self) -> Any:
        return self._payload

    def reset(self) -> None:
        """
        Set the current state back to the initial state. Transitions and the
        payload are left as they are.
        """
        self._current_state = self._initial_state

    def register_hook(self, hook: Any) -> None:
        self._hook_manager.register_hook(hook)

    # -------------------------------------------------------------------------
    # Configuration
    # -------------------------------------------------------------------------

    def add_transition(
        self, symbol: Symbol, state: StateID, next_state: StateID, action: Optional[Action] = None
    ) -> None:
        """
        Associate (symbol, state) with (next_state, action), replacing any
        existing entry for the pair. A None action just changes state.

        :param symbol: The input symbol.
        :param state: The transition's starting state.
        :param next_state: The transition's ending state.
        :param action: Callable invoked when the transition occurs.
        """
        logger.debug("Adding transition (%r, %r) -> %r", symbol, state, next_state)
        self._table.add(symbol, state, next_state, action)

    def add_transitions(
        self, symbols: Iterable[Symbol], state: StateID, next_state: StateID, action: Optional[Action] = None
    ) -> None:
        """
        Add the same transition for several symbols.
        """
        for symbol in symbols:
            self.add_transition(symbol, state, next_state, action)

    def add_transitions_from_list(self, transitions: Iterable[tuple]) -> None:
        """
        Add transitions from an iterable of (symbol, state, next_state) or
        (symbol, state, next_state, action) tuples.

        :raises ConfigurationError: If an entry has the wrong number of fields.
        """
        for entry in transitions:
            if isinstance(entry, (str, bytes)):
                raise ConfigurationError(f"Transition entry is not a sequence of fields: {entry!r}", entry)
            try:
                fields = tuple(entry)
            except TypeError:
                raise ConfigurationError(f"Transition entry is not a sequence: {entry!r}", entry) from None
            if len(fields) not in (3, 4):
                raise ConfigurationError(
                    f"Transition entry must have 3 or 4 fields, got {len(fields)}",
                    entry,
                    {"fields": len(fields)},
                )
            self.add_transition(*fields)

    def add_transition_any(self, state: StateID, next_state: StateID, action: Optional[Action] = None) -> None:
        """
        Associate state with (next_state, action) for any symbol. Checked only
        when no exact (symbol, state) entry matches.
        """
        logger.debug("Adding wildcard transition %r -> %r", state, next_state)
        self._table.add_any(state, next_state, action)

    def set_default_transition(self, next_state: Optional[StateID], action: Optional[Action] = None) -> None:
        """
        Set the transition used when neither table has a match, which is
        useful for routing unexpected input to an error action. Passing None
        or "" as next_state removes the default.
        """
        if is_empty_state(next_state):
            logger.debug("Clearing default transition")
        else:
            logger.debug("Setting default transition -> %r", next_state)
        self._table.set_default(next_state, action)

    def remove_transition(self, symbol: Symbol, state: StateID) -> bool:
        return self._table.remove(symbol, state)

    def remove_transition_any(self, state: StateID) -> bool:
        return self._table.remove_any(state)

    # -------------------------------------------------------------------------
    # Processing
    # -------------------------------------------------------------------------

    def get_transition(self, symbol: Symbol) -> Optional[Transition]:
        """
        Return the (next_state, action) that process() would apply to symbol
        in the current state, or None. The machine is not modified.
        """
        return self._table.resolve(symbol, self._current_state)

    def process(self, symbol: Symbol) -> None:
        """
        Apply the transition for symbol in the current state.

        The current state is set to the transition's next state, then the
        action, if any, is called. A non-empty string or Enum member returned
        by the action replaces the next state; other return values are ignored.

        :param symbol: The input symbol.
        :raises InvalidTransitionError: If no exact, wildcard or default
            transition applies. The current state is unchanged.
        """
        source = self._current_state
        transition = self._table.resolve(symbol, source)
        if transition is None:
            logger.warning("No transition for state %r when reading symbol %r", source, symbol)
            error = InvalidTransitionError(source, symbol)
            self._hook_manager.execute_on_error(error)
            raise error

        self._current_state = transition.next_state

        if transition.action is not None:
            try:
                override = self._invoker.invoke(transition.action, symbol, self._payload)
            except Exception as e:
                self._hook_manager.execute_on_error(e)
                raise
            if override is not None:
                logger.debug("Action overrode next state %r with %r", transition.next_state, override)
                self._current_state = override

        logger.debug("Processed %r: %r -> %r", symbol, source, self._current_state)
        self._hook_manager.execute_on_transition(symbol, source, self._current_state)

    def process_sequence(self, symbols: Iterable[Symbol]) -> None:
        """
        Process each symbol in order, stopping at the first failure.
        """
        for symbol in symbols:
            self.process(symbol)

    def process_text(self, text: Iterable[Symbol]) -> None:
        """
        Process each element of text, a string or other ordered sequence, as
        one symbol. A string is processed character by character.
        """
        for symbol in text:
            self.process(symbol)

    def __repr__(self) -> str:
        return (
            f"Machine(initial_state={self._initial_state!r}, current_state={self._current_state!r}, "
            f"table={self._table!r})"
        )
