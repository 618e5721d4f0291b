"""Tokenizer tests."""

import pytest

from kalipso.errors import TooManyTokens
from kalipso.frontend.tokens import Token, is_identifier, tokenize

from conftest import discover_spec_tests


def pytest_generate_tests(metafunc):
    """Parametrize over 02_tokens/*.tests."""
    if "tokens_input" in metafunc.fixturenames:
        params = [
            pytest.param(test_input, expected, id=test_id)
            for test_id, test_input, expected in discover_spec_tests("02_tokens")
        ]
        metafunc.parametrize("tokens_input,tokens_expected", params)


def test_tokens(tokens_input: str, tokens_expected: str):
    """Token values joined by single spaces, or (none)."""
    tokens = tokenize(tokens_input)
    actual = " ".join(t.value for t in tokens) if tokens else "(none)"
    assert actual == tokens_expected


def test_positions_are_one_based():
    tokens = tokenize("  x = 10", lineno=7)
    assert tokens == [Token("x", 7, 3), Token("=", 7, 5), Token("10", 7, 7)]


def test_too_many_tokens_fails_instead_of_truncating():
    line = " ".join(["a"] * 5)
    assert len(tokenize(line, max_tokens=5)) == 5
    with pytest.raises(TooManyTokens) as exc:
        tokenize(line + " b", lineno=3, max_tokens=5)
    assert exc.value.lineno == 3
    assert exc.value.col == 11


def test_unbounded_tokens():
    line = "+" * 500
    assert len(tokenize(line, max_tokens=None)) == 500


def test_default_limit():
    with pytest.raises(TooManyTokens):
        tokenize("x" + " + 1" * 60)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("x", True),
        ("_", True),
        ("_x9", True),
        ("result", True),
        ("X_Y", True),
        ("9x", False),
        ("42", False),
        ("", False),
        ("+", False),
        ("a-b", False),
        ("é", False),
    ],
)
def test_is_identifier(text: str, expected: bool):
    assert is_identifier(text) is expected


def test_non_ascii_letters_are_opaque():
    assert [t.value for t in tokenize("x = é")] == ["x", "=", "é"]
