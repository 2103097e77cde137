"""StateManager - owns the current state and validates transitions."""
from __future__ import annotations

import logging

from tick_state.types import StateLike

logger = logging.getLogger(__name__)


class StateManager:
    """Tracks which state is active and moves between allowed successors.

    The manager does not own its states; several managers may share one
    graph. By default the initial state's entry hook is not called at
    construction. Pass ``enter_initial=True`` to call it once up front.
    """

    def __init__(self, initial: StateLike, *, enter_initial: bool = False) -> None:
        if initial is None:
            raise ValueError("StateManager requires an initial state")
        self._current: StateLike = initial
        if enter_initial:
            initial.on_enter_hook()

    @property
    def current_state(self) -> StateLike:
        return self._current

    def get_current_state(self) -> StateLike:
        return self._current

    def update(self) -> None:
        """Run the current state's update hook."""
        if self._current is not None:
            self._current.update()

    def next_state(self, candidate: StateLike) -> bool:
        """Transition to ``candidate`` if the current state allows it.

        Returns False and changes nothing when ``candidate`` is not (by
        identity) one of the current state's allowed successors. On success
        the order is: outgoing exit hook, swap, ``candidate.previous`` set
        to the outgoing state, incoming entry hook. Hook exceptions
        propagate.
        """
        old = self._current
        if not any(s is candidate for s in old.allowed_next):
            logger.debug("rejected transition %r -> %r", old, candidate)
            return False
        old.on_exit_hook()
        self._current = candidate
        candidate.set_previous(old)
        candidate.on_enter_hook()
        logger.debug("transition %r -> %r", old, candidate)
        return True
