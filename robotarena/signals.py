"""Signals that notify connected slots, with automatic disconnection."""

from __future__ import annotations

import weakref
from typing import Any, Callable


class Slot:
    """A callable that can be connected to any number of signals.

    A slot is disconnected from its signals when it is garbage collected.
    """

    def __init__(self, func: Callable[..., Any]) -> None:
        if not callable(func):
            raise TypeError(f"slot target must be callable, not {func!r}")
        self._func = func
        self._signals: weakref.WeakSet[Signal] = weakref.WeakSet()

    @property
    def target(self) -> Callable[..., Any]:
        """The wrapped callable."""
        return self._func

    def __call__(self, *args: Any) -> Any:
        return self._func(*args)

    def connect(self, signal: Signal) -> None:
        """Connect this slot to ``signal``."""
        signal.connect(self)

    def disconnect(self) -> None:
        """Disconnect this slot from every signal it is connected to."""
        for signal in list(self._signals):
            signal.disconnect(self)


class Signal:
    """Calls every connected slot with the arguments it is emitted with."""

    def __init__(self) -> None:
        self._slots: list[weakref.ref[Slot]] = []
        # Slots created here for plain callables are kept alive by the signal.
        self._owned: list[Slot] = []

    def _live(self) -> list[Slot]:
        alive = [slot for slot in (ref() for ref in self._slots) if slot is not None]
        if len(alive) != len(self._slots):
            self._slots = [weakref.ref(slot) for slot in alive]
        return alive

    def connect(self, slot: Slot | Callable[..., Any]) -> Slot:
        """Connect a slot, or a plain callable wrapped in a new slot."""
        if not isinstance(slot, Slot):
            slot = Slot(slot)
            self._owned.append(slot)
        if not any(existing is slot for existing in self._live()):
            self._slots.append(weakref.ref(slot))
            slot._signals.add(self)
        return slot

    def disconnect(self, slot: Slot | Callable[..., Any]) -> None:
        """Disconnect a slot, or the slot wrapping a plain callable.

        Disconnecting something that is not connected does nothing.
        """
        live = self._live()
        if isinstance(slot, Slot):
            target = slot
        else:
            target = next((s for s in live if s.target == slot), None)
            if target is None:
                return
        self._slots = [weakref.ref(s) for s in live if s is not target]
        self._owned = [s for s in self._owned if s is not target]
        target._signals.discard(self)

    def __call__(self, *args: Any) -> None:
        for slot in self._live():
            # A slot may have been disconnected by an earlier one.
            if self in slot._signals:
                slot(*args)

    def __len__(self) -> int:
        return len(self._live())