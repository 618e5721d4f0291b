"""Frontend package - converts Kalipso source lines to a Program."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..errors import TooManyLines
from ..ir import Program, Stmt
from .names import DEFAULT_MAX_SLOTS, SymbolTable
from .statements import compile_statement, rewrite
from .tokens import DEFAULT_MAX_TOKENS, WHITESPACE, Token, is_identifier, tokenize

DEFAULT_MAX_LINES = 10000

COMMENT_CHAR = "#"


@dataclass
class CompileLimits:
    """Resource ceilings for one compilation. None disables a limit."""

    max_slots: int | None = DEFAULT_MAX_SLOTS
    max_tokens: int | None = DEFAULT_MAX_TOKENS
    max_lines: int | None = DEFAULT_MAX_LINES


def is_skippable(line: str) -> bool:
    """Blank lines and lines whose first non-space character is # are no-ops."""
    i = 0
    while i < len(line) and line[i] in WHITESPACE:
        i += 1
    return i == len(line) or line[i] == COMMENT_CHAR


class Compiler:
    """One compilation session: owns the symbol table and statement list."""

    def __init__(self, limits: CompileLimits | None = None) -> None:
        self.limits: CompileLimits = limits if limits is not None else CompileLimits()
        self.table: SymbolTable = SymbolTable(self.limits.max_slots)
        self.statements: list[Stmt] = []

    def compile_line(self, line: str, lineno: int) -> Stmt | None:
        """Compile one line. Returns None for blank and comment lines."""
        if is_skippable(line):
            return None
        tokens = tokenize(line, lineno, self.limits.max_tokens)
        if len(tokens) == 0:
            return None
        max_lines = self.limits.max_lines
        if max_lines is not None and len(self.statements) >= max_lines:
            raise TooManyLines(
                "too many lines (limit " + str(max_lines) + ")",
                lineno,
                tokens[0].col,
            )
        stmt = compile_statement(tokens, self.table)
        self.statements.append(stmt)
        return stmt

    def program(self) -> Program:
        """Seal the session into a Program."""
        return Program(slots=self.table.names(), statements=list(self.statements))


def compile_lines(lines: Iterable[str], limits: CompileLimits | None = None) -> Program:
    """Compile an ordered sequence of lines (terminators already stripped)."""
    compiler = Compiler(limits)
    lineno = 0
    for line in lines:
        lineno += 1
        compiler.compile_line(line, lineno)
    return compiler.program()


def compile_source(source: str, limits: CompileLimits | None = None) -> Program:
    """Frontend pipeline: source text -> Program."""
    return compile_lines(source.split("\n"), limits)


__all__ = [
    "CompileLimits",
    "Compiler",
    "SymbolTable",
    "Token",
    "compile_lines",
    "compile_source",
    "compile_statement",
    "is_identifier",
    "is_skippable",
    "rewrite",
    "tokenize",
]
