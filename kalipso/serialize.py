"""Serialization of tokens and Programs to JSON, for --stop-at dumps."""

from __future__ import annotations

from .backend.util import slot_name
from .frontend.tokens import Token
from .ir import Assign, Input, Opaque, Operand, Print, Program, SlotRef, Stmt


def _json_escape(s: str) -> str:
    """Escape a string for JSON output."""
    result: list[str] = []
    for c in s:
        if c == "\\":
            result.append("\\\\")
        elif c == '"':
            result.append('\\"')
        elif c == "\n":
            result.append("\\n")
        elif c == "\r":
            result.append("\\r")
        elif c == "\t":
            result.append("\\t")
        elif ord(c) < 0x20:
            result.append("\\u" + format(ord(c), "04x"))
        else:
            result.append(c)
    return "".join(result)


def _to_json(obj: object, indent: int, level: int) -> str:
    if obj is None:
        return "null"
    if isinstance(obj, bool):
        return "true" if obj else "false"
    if isinstance(obj, int):
        return str(obj)
    if isinstance(obj, str):
        return '"' + _json_escape(obj) + '"'
    pad = " " * (indent * (level + 1))
    pad_close = " " * (indent * level)
    if isinstance(obj, list):
        if len(obj) == 0:
            return "[]"
        parts = [pad + _to_json(item, indent, level + 1) for item in obj]
        return "[\n" + ",\n".join(parts) + "\n" + pad_close + "]"
    if isinstance(obj, dict):
        if len(obj) == 0:
            return "{}"
        parts = []
        for k, v in obj.items():
            parts.append(
                pad + '"' + _json_escape(str(k)) + '": ' + _to_json(v, indent, level + 1)
            )
        return "{\n" + ",\n".join(parts) + "\n" + pad_close + "}"
    raise TypeError("cannot serialize " + type(obj).__name__)


def to_json(obj: object) -> str:
    """Serialize object to pretty-printed JSON."""
    return _to_json(obj, 2, 0)


def token_to_dict(tok: Token) -> dict[str, object]:
    return {
        "value": tok.value,
        "identifier": tok.is_identifier(),
        "line": tok.line,
        "col": tok.col,
    }


def tokens_to_dict(lines: list[list[Token]]) -> list[object]:
    """One entry per compiled line: its line number and tokens."""
    result: list[object] = []
    for toks in lines:
        if len(toks) == 0:
            continue
        result.append(
            {"line": toks[0].line, "tokens": [token_to_dict(t) for t in toks]}
        )
    return result


def operand_to_dict(op: Operand) -> dict[str, object]:
    if isinstance(op, SlotRef):
        return {"kind": "slot", "slot": op.slot, "name": op.name}
    if isinstance(op, Opaque):
        return {"kind": "opaque", "text": op.text}
    raise TypeError("unknown operand: " + repr(op))


def stmt_to_dict(stmt: Stmt) -> dict[str, object]:
    d: dict[str, object] = {}
    if isinstance(stmt, Print):
        d["kind"] = "print"
        d["args"] = [operand_to_dict(op) for op in stmt.args]
    elif isinstance(stmt, Input):
        d["kind"] = "input"
        d["target"] = operand_to_dict(stmt.target)
    elif isinstance(stmt, Assign):
        d["kind"] = "assign"
        d["target"] = operand_to_dict(stmt.target)
        d["value"] = [operand_to_dict(op) for op in stmt.value]
    else:
        raise TypeError("unknown statement: " + type(stmt).__name__)
    d["line"] = stmt.loc.line
    d["col"] = stmt.loc.col
    return d


def program_to_dict(program: Program) -> dict[str, object]:
    slots: dict[str, object] = {}
    for i, name in enumerate(program.slots):
        slots[name] = slot_name(i)
    return {
        "slots": slots,
        "statements": [stmt_to_dict(s) for s in program.statements],
    }
