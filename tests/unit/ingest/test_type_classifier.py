"""Unit tests for whole-column type inference."""

from __future__ import annotations

import pytest

from ingest.type_classifier import (
    build_values,
    classify_column,
    classify_tokens,
    is_null_token,
    parse_float,
    parse_integer,
)


@pytest.mark.parametrize("token", ["", "null"])
def test_is_null_token_accepts_null_literals(token: str) -> None:
    """Empty string and lowercase null are null tokens."""
    assert is_null_token(token)


def test_is_null_token_is_case_sensitive() -> None:
    """Only the lowercase literal is a null token."""
    assert not is_null_token("NULL")


@pytest.mark.parametrize(
    ("tokens", "expected"),
    [
        (["T", "f", "TRUE", "false"], "boolean"),
        (["1", "-2", "+3"], "integer"),
        (["1", "2.5"], "float"),
        (["1e3", "4"], "float"),
        (["1", "x"], "string"),
        (["t", "1"], "string"),
        (["", "null"], "string"),
        ([], "string"),
    ],
)
def test_classify_tokens_follows_precedence(tokens: list[str], expected: str) -> None:
    """Classification should pick the most restrictive type fitting all tokens."""
    assert classify_tokens(tokens) == expected


def test_classify_tokens_ignores_null_tokens() -> None:
    """Null tokens should not affect the inferred type."""
    assert classify_tokens(["", "4", "null"]) == "integer"


def test_integer_overflow_falls_through_to_float() -> None:
    """Tokens beyond signed 64-bit range should classify as float."""
    assert classify_tokens(["1", "9223372036854775808"]) == "float"


def test_float_overflow_falls_through_to_string() -> None:
    """Tokens beyond double range should classify as string."""
    assert classify_tokens(["1.5", "1e400"]) == "string"


@pytest.mark.parametrize("token", ["nan", "inf", "1_000", "0x1A", "1.2.3", "."])
def test_parse_float_rejects_non_decimal_forms(token: str) -> None:
    """Only plain decimal notation counts as a number."""
    with pytest.raises(ValueError):
        parse_float(token)


def test_parse_integer_accepts_int64_bounds() -> None:
    """Integer parsing should accept both ends of the 64-bit range."""
    assert parse_integer("-9223372036854775808") == -(2**63)
    assert parse_integer("9223372036854775807") == 2**63 - 1


def test_build_values_emits_none_for_null_tokens() -> None:
    """Null tokens should become None under any committed type."""
    assert build_values("float", ["1", "", "null", "2.5"]) == (1.0, None, None, 2.5)


def test_classify_column_returns_type_and_values() -> None:
    """Column classification should carry both type and parsed values."""
    result = classify_column(["true", "F", ""])

    assert result.field_type == "boolean"
    assert result.values == (True, False, None)
