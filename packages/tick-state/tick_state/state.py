"""State node: optional lifecycle hooks, allowed successors, data bag."""
from __future__ import annotations

from typing import Any

from tick_state.types import Hook, StateLike


class State:
    """A node in a state machine.

    Hooks are plain attributes and may be ``None``; a missing hook is a
    no-op. Successors are matched by identity, so two states with the same
    name are still distinct nodes. ``name`` is only used for display.

    Args:
        on_enter: Called after the manager switches into this state.
        on_update: Called on every ``update()`` while this state is current.
        on_exit: Called before the manager switches away from this state.
        name: Optional label for ``repr()`` and log output.
    """

    def __init__(
        self,
        on_enter: Hook | None = None,
        on_update: Hook | None = None,
        on_exit: Hook | None = None,
        *,
        name: str | None = None,
    ) -> None:
        self.on_enter = on_enter
        self.on_update = on_update
        self.on_exit = on_exit
        self.name = name
        self._next: list[StateLike] = []
        self._previous: StateLike | None = None
        self._data: dict[str, Any] = {}

    def __repr__(self) -> str:
        label = self.name if self.name is not None else hex(id(self))
        return f"State({label})"

    # --- Hooks ---

    def update(self) -> None:
        if self.on_update is not None:
            self.on_update()

    def on_enter_hook(self) -> None:
        if self.on_enter is not None:
            self.on_enter()

    def on_exit_hook(self) -> None:
        if self.on_exit is not None:
            self.on_exit()

    # --- Successors ---

    def add_next_state(self, candidate: StateLike) -> None:
        """Allow a transition from this state to ``candidate``.

        Duplicates and self-loops are accepted as-is. Nothing is ever
        removed from the successor list.
        """
        self._next.append(candidate)

    @property
    def allowed_next(self) -> tuple[StateLike, ...]:
        """Snapshot of allowed successors in declaration order."""
        return tuple(self._next)

    def get_allowed_next(self) -> tuple[StateLike, ...]:
        return self.allowed_next

    # --- Previous state ---

    @property
    def previous(self) -> StateLike | None:
        """State this one was last entered from, or None if never entered."""
        return self._previous

    def set_previous(self, state: StateLike | None) -> None:
        # Normally only called by StateManager.next_state.
        self._previous = state

    def get_previous(self) -> StateLike | None:
        return self._previous

    # --- Data bag ---

    @property
    def data(self) -> dict[str, Any]:
        """Per-state scratch storage. Returned by reference, never cleared."""
        return self._data

    def get_data(self) -> dict[str, Any]:
        return self._data
