"""Kalipso tokenizer - splits one source line into a flat token list."""

from __future__ import annotations

from ..errors import TooManyTokens

DEFAULT_MAX_TOKENS = 100

WHITESPACE: set[str] = {" ", "\t", "\r", "\n", "\f", "\v"}


class Token:
    """A token with raw text and position."""

    def __init__(self, value: str, line: int, col: int):
        self.value: str = value
        self.line: int = line
        self.col: int = col

    def is_identifier(self) -> bool:
        return is_identifier(self.value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.value == other.value
            and self.line == other.line
            and self.col == other.col
        )

    def __hash__(self) -> int:
        return hash((self.value, self.line, self.col))

    def __repr__(self) -> str:
        return (
            "Token("
            + repr(self.value)
            + ", "
            + str(self.line)
            + ", "
            + str(self.col)
            + ")"
        )


def _is_digit(c: str) -> bool:
    return c >= "0" and c <= "9"


def _is_alpha(c: str) -> bool:
    return (c >= "a" and c <= "z") or (c >= "A" and c <= "Z") or c == "_"


def _is_alnum(c: str) -> bool:
    return _is_alpha(c) or _is_digit(c)


def is_identifier(text: str) -> bool:
    """Variable name: letter or underscore, then letters, digits, underscores."""
    if text == "" or not _is_alpha(text[0]):
        return False
    i = 1
    while i < len(text):
        if not _is_alnum(text[i]):
            return False
        i += 1
    return True


def tokenize(
    line: str, lineno: int = 1, max_tokens: int | None = DEFAULT_MAX_TOKENS
) -> list[Token]:
    """Tokenize a single source line.

    A token is a maximal run of alphanumerics/underscores, or else exactly one
    non-space character. Numeric literals are alphanumeric runs, so `10` stays
    one token and `3x` is one (opaque) token. Raises TooManyTokens when the
    line holds more than max_tokens tokens.
    """
    tokens: list[Token] = []
    pos = 0
    length = len(line)

    while pos < length:
        c = line[pos]

        if c in WHITESPACE:
            pos += 1
            continue

        if max_tokens is not None and len(tokens) >= max_tokens:
            raise TooManyTokens(
                "too many tokens (limit " + str(max_tokens) + ")", lineno, pos + 1
            )

        start = pos
        if _is_alnum(c):
            while pos < length and _is_alnum(line[pos]):
                pos += 1
        else:
            pos += 1
        tokens.append(Token(line[start:pos], lineno, start + 1))

    return tokens
