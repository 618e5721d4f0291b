"""Symbol table: variable names to dense storage slots.

Kalipso has one flat namespace for the whole program. A name is bound to a
slot the first time it appears anywhere (target or right-hand side), and the
binding never changes.
"""

from __future__ import annotations

from ..errors import TooManyVariables

DEFAULT_MAX_SLOTS = 256


class SymbolTable:
    """Insertion-ordered name -> slot map.

    Invariants:
    - slots are 0..len-1 with no gaps, in first-use order
    - resolving a known name never allocates
    """

    def __init__(self, max_slots: int | None = DEFAULT_MAX_SLOTS) -> None:
        self.max_slots: int | None = max_slots
        self._slots: dict[str, int] = {}

    def resolve(self, name: str, lineno: int = 0, col: int = 0) -> int:
        """Return the slot for name, allocating the next one if unseen."""
        slot = self._slots.get(name)
        if slot is not None:
            return slot
        if self.max_slots is not None and len(self._slots) >= self.max_slots:
            raise TooManyVariables(
                "too many variables (limit " + str(self.max_slots) + ")",
                lineno,
                col,
            )
        slot = len(self._slots)
        self._slots[name] = slot
        return slot

    def lookup(self, name: str) -> int | None:
        return self._slots.get(name)

    def names(self) -> list[str]:
        """Names in slot order."""
        return list(self._slots.keys())

    def __len__(self) -> int:
        return len(self._slots)

    def __contains__(self, name: object) -> bool:
        return name in self._slots

    def __repr__(self) -> str:
        return "SymbolTable(" + repr(self._slots) + ")"
