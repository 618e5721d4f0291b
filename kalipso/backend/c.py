"""C backend: Program -> C source.

Every slot is a zero-initialized `long long` local of main(). Each statement
becomes one line of the body, in source order:

| Statement | C                                 |
|-----------|-----------------------------------|
| Print     | printf("%lld\\n", <operands>);    |
| Input     | scanf("%lld", &v<slot>);          |
| Assign    | v<slot> = <operands>;             |
"""

from __future__ import annotations

from kalipso.backend.util import Emitter, join_operands, slot_name
from kalipso.ir import Assign, Input, Print, Program, Stmt


def emit_statement(stmt: Stmt) -> str:
    """Render one statement without indentation."""
    if isinstance(stmt, Print):
        return 'printf("%lld\\n", ' + join_operands(stmt.args) + ");"
    if isinstance(stmt, Input):
        return 'scanf("%lld", &' + slot_name(stmt.target.slot) + ");"
    if isinstance(stmt, Assign):
        return slot_name(stmt.target.slot) + " = " + join_operands(stmt.value) + ";"
    raise TypeError("unknown statement: " + type(stmt).__name__)


class CBackend(Emitter):
    """Emit C code from a Program."""

    def emit(self, program: Program) -> str:
        self.indent = 0
        self.lines = []
        self.line("#include <stdio.h>")
        self.line()
        self.line("int main() {")
        self.indent += 1
        self._emit_declarations(program.slots)
        for stmt in program.statements:
            self.line(emit_statement(stmt))
        self.line("return 0;")
        self.indent -= 1
        self.line("}")
        return self.output() + "\n"

    def _emit_declarations(self, slots: list[str]) -> None:
        if len(slots) == 0:
            return
        decls = [slot_name(i) + " = 0" for i in range(len(slots))]
        self.line("long long " + ", ".join(decls) + ";")


def emit_c(program: Program) -> str:
    return CBackend().emit(program)
