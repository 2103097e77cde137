"""Hook alias and structural protocols for states and managers."""
from __future__ import annotations

from typing import Any, Callable, Protocol, Sequence, runtime_checkable

Hook = Callable[[], None]


@runtime_checkable
class StateLike(Protocol):
    """Anything a StateManager can drive.

    ``State`` conforms; callers may supply their own node type as long as
    it matches by identity in ``allowed_next``.
    """

    def update(self) -> None: ...

    def on_enter_hook(self) -> None: ...

    def on_exit_hook(self) -> None: ...

    def add_next_state(self, candidate: StateLike) -> None: ...

    @property
    def allowed_next(self) -> Sequence[StateLike]: ...

    def set_previous(self, state: StateLike | None) -> None: ...

    def get_previous(self) -> StateLike | None: ...

    @property
    def data(self) -> dict[str, Any]: ...


@runtime_checkable
class StateManagerLike(Protocol):
    """Stepping and transition surface of a state manager."""

    def update(self) -> None: ...

    def next_state(self, candidate: StateLike) -> bool: ...

    @property
    def current_state(self) -> StateLike: ...
