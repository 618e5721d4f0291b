"""Compilation and build errors."""

from __future__ import annotations


class CompileError(Exception):
    """Fatal error while compiling a Kalipso program."""

    def __init__(self, msg: str, lineno: int = 0, col: int = 0):
        self.msg: str = msg
        self.lineno: int = lineno
        self.col: int = col
        super().__init__(msg + " at line " + str(lineno) + " col " + str(col))


class CapacityExceeded(CompileError):
    """A configured resource limit was exceeded."""


class TooManyVariables(CapacityExceeded):
    """Symbol table is full."""


class TooManyTokens(CapacityExceeded):
    """A single line produced more tokens than allowed."""


class TooManyLines(CapacityExceeded):
    """The program has more statements than allowed."""


class MissingArgument(CompileError):
    """print or input was given the wrong number of operands."""


class NotAnIdentifier(CompileError):
    """An input or assignment target is not a variable name."""


class InvalidStatement(CompileError):
    """Line matches none of the statement shapes."""


class BuildError(Exception):
    """Native compiler invocation failed."""

    def __init__(self, msg: str, output: str = ""):
        self.msg: str = msg
        self.output: str = output
        super().__init__(msg)
