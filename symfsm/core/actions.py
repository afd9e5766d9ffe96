# symfsm/core/actions.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details

from enum import Enum
from typing import Any, Optional

from symfsm.interfaces.types import Action, StateID, Symbol


class _ActionInvoker:
    """
    Internal helper that calls a transition's action with the symbol and,
    when the machine carries one, the payload, and reports whether the
    action asked for a different next state.
    """

    def invoke(self, action: Action, symbol: Symbol, payload: Any) -> Optional[StateID]:
        """
        Run the action for the given symbol.

        :param action: The callable stored on the transition.
        :param symbol: The symbol being processed.
        :param payload: The machine's payload, or None.
        :return: The state returned by the action, or None if the action
            returned anything that does not name a state.
        """
        if payload is None:
            result = action(symbol)
        else:
            result = action(symbol, payload)
        return result if is_state_override(result) else None


def is_state_override(value: Any) -> bool:
    """
    True if an action's return value names a state that should replace the
    transition's configured next state: a non-empty string or an Enum member.
    Any other return value is ignored.
    """
    if isinstance(value, Enum):
        return True
    return isinstance(value, str) and value != ""
