"""Statement recognition and rewrite.

Recognition is positional, first match wins:

| Shape  | Form                  |
|--------|-----------------------|
| Print  | print <tokens...>     |
| Input  | input <name>          |
| Assign | <name> = <tokens...>  |

Right-hand sides are not parsed. Identifiers become slot references and all
other tokens are copied through, leaving evaluation to the target language.
"""

from __future__ import annotations

from ..errors import InvalidStatement, MissingArgument, NotAnIdentifier
from ..ir import Assign, Input, Loc, Opaque, Operand, Print, SlotRef, Stmt
from .names import SymbolTable
from .tokens import Token, is_identifier

KW_PRINT = "print"
KW_INPUT = "input"
OP_ASSIGN = "="


def _loc(tok: Token) -> Loc:
    return Loc(tok.line, tok.col)


def resolve_token(tok: Token, table: SymbolTable) -> SlotRef:
    slot = table.resolve(tok.value, tok.line, tok.col)
    return SlotRef(slot, tok.value)


def rewrite(tokens: list[Token], table: SymbolTable) -> tuple[Operand, ...]:
    """Rewrite tokens in order, resolving each identifier to its slot."""
    result: list[Operand] = []
    for tok in tokens:
        if is_identifier(tok.value):
            result.append(resolve_token(tok, table))
        else:
            result.append(Opaque(tok.value))
    return tuple(result)


def _compile_print(tokens: list[Token], table: SymbolTable) -> Print:
    if len(tokens) < 2:
        raise MissingArgument("print needs an argument", tokens[0].line, tokens[0].col)
    return Print(loc=_loc(tokens[0]), args=rewrite(tokens[1:], table))


def _compile_input(tokens: list[Token], table: SymbolTable) -> Input:
    if len(tokens) != 2:
        raise MissingArgument(
            "input needs one variable", tokens[0].line, tokens[0].col
        )
    target = tokens[1]
    if not is_identifier(target.value):
        raise NotAnIdentifier(
            "input needs a variable name, got '" + target.value + "'",
            target.line,
            target.col,
        )
    return Input(loc=_loc(tokens[0]), target=resolve_token(target, table))


def _compile_assign(tokens: list[Token], table: SymbolTable) -> Assign:
    target = tokens[0]
    if not is_identifier(target.value):
        raise NotAnIdentifier(
            "left side must be a variable, got '" + target.value + "'",
            target.line,
            target.col,
        )
    # target is resolved before the right-hand side so it gets the lower slot
    slot = resolve_token(target, table)
    return Assign(loc=_loc(target), target=slot, value=rewrite(tokens[2:], table))


def compile_statement(tokens: list[Token], table: SymbolTable) -> Stmt:
    """Recognize one statement and rewrite it against the symbol table.

    tokens must be non-empty; callers drop blank and comment lines first.
    """
    if len(tokens) == 0:
        raise InvalidStatement("empty statement")
    head = tokens[0].value
    if head == KW_PRINT:
        return _compile_print(tokens, table)
    if head == KW_INPUT:
        return _compile_input(tokens, table)
    if len(tokens) >= 3 and tokens[1].value == OP_ASSIGN:
        return _compile_assign(tokens, table)
    raise InvalidStatement("invalid statement", tokens[0].line, tokens[0].col)
