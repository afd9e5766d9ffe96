"""symfsm: Finite State Machine engine with attached memory

This package provides a small, embeddable state machine that is driven one
input symbol at a time and carries a user supplied payload, making it a push
down automaton suitable for parsers and protocol decoders.

Responsibilities:
    - Transition registration keyed by (symbol, state), by state alone, or
      as a machine wide default
    - Transition resolution with exact > wildcard > default precedence
    - Action dispatch with the symbol and the shared payload
    - State overrides returned by actions

Interactions:
    - Client code through public API
    - Logging system for diagnostics

Cross-cutting Concerns:
    Thread Safety:
        - None; one thread drives one machine at a time

    Error Handling:
        - InvalidTransitionError when no transition applies
        - Action errors propagate unchanged

    Logging:
        - Standard logging under the "symfsm" logger namespace
"""

from symfsm.core.errors import ConfigurationError, FSMError, InvalidTransitionError
from symfsm.core.hooks import HookManager, TransitionHook
from symfsm.core.machine import Machine
from symfsm.core.transitions import Transition, TransitionTable

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "FSMError",
    "HookManager",
    "InvalidTransitionError",
    "Machine",
    "Transition",
    "TransitionHook",
    "TransitionTable",
    "__version__",
]
