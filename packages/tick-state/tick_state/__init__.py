"""tick-state - Minimal state/state-manager primitives for tick loops."""
from __future__ import annotations

import logging

from tick_state.manager import StateManager
from tick_state.state import State
from tick_state.systems import make_state_system
from tick_state.types import Hook, StateLike, StateManagerLike

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "State",
    "StateManager",
    "make_state_system",
    "Hook",
    "StateLike",
    "StateManagerLike",
]
