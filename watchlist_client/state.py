"""Per-symbol watchlist membership state and its reducer.

A symbol is *idle* when ``pending_target`` is None and *pending* while a
toggle request is in flight. The reducer is pure: it never performs I/O and
returns a new state for every event.
"""

from dataclasses import dataclass, replace
from typing import Optional, Union


@dataclass(frozen=True)
class SymbolState:
    """Membership of one symbol as the client believes it."""
    committed: bool = False
    pending_target: Optional[bool] = None

    @property
    def is_pending(self) -> bool:
        return self.pending_target is not None

    @property
    def displayed(self) -> bool:
        """Membership shown to the user, optimistic while pending."""
        if self.pending_target is not None:
            return self.pending_target
        return self.committed


@dataclass(frozen=True)
class Toggle:
    """User flipped the symbol's membership."""


@dataclass(frozen=True)
class Confirm:
    """Server accepted the change to ``target``."""
    target: bool


@dataclass(frozen=True)
class Revert:
    """The change to ``target`` failed; compensate."""
    target: bool


@dataclass(frozen=True)
class Reset:
    """Authoritative membership loaded from the server."""
    member: bool


Event = Union[Toggle, Confirm, Revert, Reset]


def reduce(state: SymbolState, event: Event) -> SymbolState:
    """Apply one event to a symbol's state."""
    if isinstance(event, Toggle):
        return replace(state, pending_target=not state.displayed)

    if isinstance(event, Confirm):
        # A newer toggle in the other direction stays pending
        if state.pending_target is not None and state.pending_target != event.target:
            return replace(state, committed=event.target)
        return SymbolState(committed=event.target)

    if isinstance(event, Revert):
        return SymbolState(committed=not event.target)

    if isinstance(event, Reset):
        return SymbolState(committed=event.member)

    raise TypeError(f"Unknown watchlist event: {event!r}")
