"""Unit tests for line tokenizing."""

from __future__ import annotations

from ingest.tokenizer import split_line


def test_split_line_trims_tokens() -> None:
    """Tokens should be trimmed of surrounding whitespace."""
    assert split_line("T, F,F,T  ,") == ("T", "F", "F", "T", "")


def test_split_line_keeps_trailing_empty_tokens() -> None:
    """Trailing delimiters should yield empty tokens rather than be dropped."""
    assert split_line("a,,") == ("a", "", "")


def test_split_line_does_not_protect_quoted_delimiters() -> None:
    """Quoting is not interpreted by the tokenizer."""
    assert split_line('"a,b",c') == ('"a', 'b"', "c")
