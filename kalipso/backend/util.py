"""Shared utilities for backend code emitters."""

from __future__ import annotations

from kalipso.ir import Opaque, Operand, SlotRef


class Emitter:
    """Base class for code emitters with indentation tracking."""

    def __init__(self, indent_str: str = "    ") -> None:
        self.indent: int = 0
        self.lines: list[str] = []
        self._indent_str = indent_str

    def line(self, text: str = "") -> None:
        """Emit a line with current indentation."""
        if text:
            self.lines.append(self._indent_str * self.indent + text)
        else:
            self.lines.append("")

    def output(self) -> str:
        """Return the accumulated output as a string."""
        return "\n".join(self.lines)


def slot_name(slot: int) -> str:
    """Storage name for a slot in generated code."""
    return "v" + str(slot)


def render_operand(op: Operand) -> str:
    if isinstance(op, SlotRef):
        return slot_name(op.slot)
    if isinstance(op, Opaque):
        return op.text
    raise TypeError("unknown operand: " + repr(op))


def join_operands(ops: tuple[Operand, ...]) -> str:
    """Render operands separated by single spaces."""
    return " ".join(render_operand(op) for op in ops)
