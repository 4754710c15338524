"""A minimal synchronous signal/slot mechanism."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

Slot = Callable[..., Any]


class Signal:
    """A named event that calls its connected slots in connection order."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self._slots: list[Slot] = []

    def __repr__(self) -> str:
        return f"Signal({self.name!r}, slots={len(self._slots)})"

    def __len__(self) -> int:
        return len(self._slots)

    def connect(self, slot: Slot) -> None:
        """Connect a callable; it is called on every emit."""
        if not callable(slot):
            raise TypeError(f"slot must be callable, got {slot!r}")
        self._slots.append(slot)

    def disconnect(self, slot: Slot) -> None:
        """Disconnect one connection of a callable."""
        try:
            self._slots.remove(slot)
        except ValueError:
            raise ValueError(f"slot {slot!r} is not connected to {self.name or 'signal'}") from None

    def emit(self, *args: Any) -> None:
        """Call every connected slot with the given arguments."""
        for slot in list(self._slots):
            slot(*args)