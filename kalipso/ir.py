"""Kalipso IR - rewritten statements ready for code generation.

Architecture:
    Source -> Frontend (tokenize, resolve, recognize) -> [IR] -> Backend -> Target

There is no expression tree. A statement's operands are the source tokens in
order, with identifiers replaced by slot references and every other token kept
as opaque text.
"""

from __future__ import annotations

from dataclasses import dataclass, field


# ============================================================
# SOURCE LOCATIONS
# ============================================================


@dataclass(frozen=True)
class Loc:
    """Source location for error messages.

    Invariants:
    - line >= 1 for valid locations (0 indicates unknown)
    - col >= 1 for valid locations
    """

    line: int  # 1-indexed, 0 = unknown
    col: int  # 1-indexed, 0 = unknown


# ============================================================
# OPERANDS
# ============================================================


@dataclass(frozen=True)
class Operand:
    """Base for one rewritten token."""


@dataclass(frozen=True)
class SlotRef(Operand):
    """Identifier resolved through the symbol table.

    | Target | Rendering |
    |--------|-----------|
    | C      | v<slot>   |
    """

    slot: int
    name: str


@dataclass(frozen=True)
class Opaque(Operand):
    """Operator, literal or punctuation copied through verbatim."""

    text: str


# ============================================================
# STATEMENTS
# ============================================================


@dataclass(frozen=True)
class Stmt:
    """Base for statements. One statement per compiled source line."""

    loc: Loc


@dataclass(frozen=True)
class Print(Stmt):
    """Print one integer expression followed by a newline.

    Semantics: write the value of args (joined with spaces) to stdout.

    Invariants:
    - len(args) >= 1
    """

    args: tuple[Operand, ...]


@dataclass(frozen=True)
class Input(Stmt):
    """Read one integer from stdin into a slot.

    Semantics: target := read_int()
    """

    target: SlotRef


@dataclass(frozen=True)
class Assign(Stmt):
    """Assignment to a slot.

    Semantics: target := value (joined with spaces, evaluated by the target
    language's own expression grammar)

    Invariants:
    - len(value) >= 1
    """

    target: SlotRef
    value: tuple[Operand, ...]


# ============================================================
# PROGRAM
# ============================================================


@dataclass
class Program:
    """A complete compilation unit.

    Invariants:
    - slots[i] is the name bound to slot i; names are unique
    - statements are in source line order
    - every SlotRef in statements has slot < len(slots)
    """

    slots: list[str] = field(default_factory=list)
    statements: list[Stmt] = field(default_factory=list)
