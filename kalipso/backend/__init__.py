"""Backend package - code generation from a Program."""

from .c import CBackend, emit_c, emit_statement

__all__ = ["CBackend", "emit_c", "emit_statement"]
