"""System factory that steps a StateManager once per tick."""
from __future__ import annotations

from typing import Any, Callable

from tick_state.types import StateLike, StateManagerLike


def make_state_system(
    manager: StateManagerLike,
    on_transition: Callable[[Any, Any, StateLike, StateLike], None] | None = None,
) -> Callable[[Any, Any], None]:
    """Return a ``(world, ctx)`` system that calls ``manager.update()``.

    If an update hook moves the machine (by calling ``next_state`` itself),
    ``on_transition(world, ctx, old, new)`` fires after the update returns.
    """

    def state_system(world: Any, ctx: Any) -> None:
        old = manager.current_state
        manager.update()
        new = manager.current_state
        if on_transition is not None and new is not old:
            on_transition(world, ctx, old, new)

    return state_system
