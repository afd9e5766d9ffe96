# symfsm/core/transitions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from __future__ import annotations

from typing import Any, Dict, Iterator, NamedTuple, Optional, Tuple

from symfsm.interfaces.types import Action, StateID, Symbol


def is_empty_state(state: Any) -> bool:
    """True for None and the empty string, which never name a state."""
    return state is None or (isinstance(state, str) and state == "")


class Transition(NamedTuple):
    """
    The outcome of a resolved lookup: the state to move to and the action,
    if any, to invoke with the symbol and payload.
    """

    next_state: StateID
    action: Optional[Action] = None


class TransitionTable:
    """
    Holds the exact, wildcard and default transitions of a machine and resolves
    which one applies to a (symbol, state) pair.

    Exact entries are keyed by the (symbol, state) tuple itself, wildcard
    entries by state alone. Registering an existing key replaces the previous
    entry.
    """

    def __init__(self) -> None:
        self._exact: Dict[Tuple[Symbol, StateID], Transition] = {}
        self._any: Dict[StateID, Transition] = {}
        self._default: Optional[Transition] = None

    def add(self, symbol: Symbol, state: StateID, next_state: StateID, action: Optional[Action] = None) -> None:
        """
        Insert or overwrite the exact entry for (symbol, state).

        :param symbol: The input symbol.
        :param state: The state the transition starts from.
        :param next_state: The state the transition ends in.
        :param action: Optional callable invoked when the transition fires.
        """
        self._exact[(symbol, state)] = Transition(next_state, action)

    def add_any(self, state: StateID, next_state: StateID, action: Optional[Action] = None) -> None:
        """
        Insert or overwrite the wildcard entry for state, matching any symbol.
        """
        self._any[state] = Transition(next_state, action)

    def set_default(self, next_state: Optional[StateID], action: Optional[Action] = None) -> None:
        """
        Set the transition used when neither table matches. A next_state of
        None or "" removes the default altogether.
        """
        if is_empty_state(next_state):
            self._default = None
            return
        self._default = Transition(next_state, action)

    def remove(self, symbol: Symbol, state: StateID) -> bool:
        """
        Remove the exact entry for (symbol, state).

        :return: True if an entry was removed.
        """
        return self._exact.pop((symbol, state), None) is not None

    def remove_any(self, state: StateID) -> bool:
        """
        Remove the wildcard entry for state.

        :return: True if an entry was removed.
        """
        return self._any.pop(state, None) is not None

    @property
    def default(self) -> Optional[Transition]:
        """The default transition, or None if none is set."""
        return self._default

    def resolve(self, symbol: Symbol, state: StateID) -> Optional[Transition]:
        """
        Return the transition that applies to symbol in state, checking the
        exact table, then the wildcard table, then the default. The table is
        not modified.

        :param symbol: The input symbol.
        :param state: The state to resolve from.
        :return: The matching Transition, or None if nothing applies.
        """
        transition = self._exact.get((symbol, state))
        if transition is not None:
            return transition
        transition = self._any.get(state)
        if transition is not None:
            return transition
        return self._default

    def exact_items(self) -> Iterator[Tuple[Tuple[Symbol, StateID], Transition]]:
        return iter(self._exact.items())

    def any_items(self) -> Iterator[Tuple[StateID, Transition]]:
        return iter(self._any.items())

    def __len__(self) -> int:
        return len(self._exact) + len(self._any) + (1 if self._default is not None else 0)

    def __repr__(self) -> str:
        return (
            f"TransitionTable(exact={len(self._exact)}, any={len(self._any)}, "
            f"default={self._default is not None})"
        )
