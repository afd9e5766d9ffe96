# symfsm/interfaces/types.py
# Copyright (c) 2024 Brad Edwards
# Licensed under the MIT License - see LICENSE file for details
from typing import Callable, Hashable, Optional

StateID = Hashable
Symbol = Hashable

# Callback Types
# Called as action(symbol) or action(symbol, payload); may return a new state.
Action = Callable[..., Optional[StateID]]
