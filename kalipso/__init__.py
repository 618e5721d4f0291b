"""Kalipso compiler - public API."""

from __future__ import annotations

from .backend import emit_c
from .errors import (
    BuildError,
    CapacityExceeded,
    CompileError,
    InvalidStatement,
    MissingArgument,
    NotAnIdentifier,
    TooManyLines,
    TooManyTokens,
    TooManyVariables,
)
from .frontend import CompileLimits, compile_lines, compile_source
from .ir import Program


def translate(source: str, limits: CompileLimits | None = None) -> str:
    """Compile Kalipso source text straight to C source text."""
    return emit_c(compile_source(source, limits))


__all__ = [
    "BuildError",
    "CapacityExceeded",
    "CompileError",
    "CompileLimits",
    "InvalidStatement",
    "MissingArgument",
    "NotAnIdentifier",
    "Program",
    "TooManyLines",
    "TooManyTokens",
    "TooManyVariables",
    "compile_lines",
    "compile_source",
    "emit_c",
    "translate",
]
