"""Whole-column type inference.

This module decides one semantic type per column by trying candidate
parsers from most to least restrictive. The first parser accepting every
non-null token wins; values are built in a second pass under that type.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Iterable, Sequence

from core.constants import (
    FALSE_TOKENS,
    INT64_MAX,
    INT64_MIN,
    NULL_TOKEN_LITERAL,
    TRUE_TOKENS,
)
from core.types import CellValue, ClassificationResult, FieldType

_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def is_null_token(token: str) -> bool:
    """Return whether a trimmed token represents null."""
    return token == "" or token == NULL_TOKEN_LITERAL


def parse_boolean(token: str) -> bool:
    """Parse a case-insensitive boolean literal.

    Raises:
        ValueError: If token is not ``t``, ``f``, ``true`` or ``false``.
    """
    lowered = token.lower()
    if lowered in TRUE_TOKENS:
        return True
    if lowered in FALSE_TOKENS:
        return False
    raise ValueError(f"not a boolean literal: {token!r}")


def parse_integer(token: str) -> int:
    """Parse a base-10 signed 64-bit integer.

    Raises:
        ValueError: If token has a fraction, exponent or is out of range.
    """
    if _INTEGER_PATTERN.fullmatch(token) is None:
        raise ValueError(f"not an integer: {token!r}")
    value = int(token)
    if value < INT64_MIN or value > INT64_MAX:
        raise ValueError(f"integer out of 64-bit range: {token!r}")
    return value


def parse_float(token: str) -> float:
    """Parse a finite signed decimal number.

    Raises:
        ValueError: If token is not decimal notation or overflows a double.
    """
    if _DECIMAL_PATTERN.fullmatch(token) is None:
        raise ValueError(f"not a decimal number: {token!r}")
    value = float(token)
    if math.isinf(value):
        raise ValueError(f"number out of float range: {token!r}")
    return value


def parse_string(token: str) -> str:
    return token


_CANDIDATE_PARSERS: tuple[tuple[FieldType, Callable[[str], CellValue]], ...] = (
    ("boolean", parse_boolean),
    ("integer", parse_integer),
    ("float", parse_float),
)
_PARSERS_BY_TYPE: dict[FieldType, Callable[[str], CellValue]] = {
    **dict(_CANDIDATE_PARSERS),
    "string": parse_string,
}


def classify_tokens(tokens: Iterable[str]) -> FieldType:
    """Infer the column type from every non-null token.

    Args:
        tokens: Trimmed column tokens.

    Returns:
        First candidate type accepting all non-null tokens, else ``"string"``.
    """
    values = [token for token in tokens if not is_null_token(token)]
    if not values:
        return "string"
    for field_type, parser in _CANDIDATE_PARSERS:
        if all(_accepts(parser, token) for token in values):
            return field_type
    return "string"


def build_values(field_type: FieldType, tokens: Iterable[str]) -> tuple[CellValue, ...]:
    """Parse tokens under a committed column type.

    Args:
        field_type: Type returned by ``classify_tokens`` for these tokens.
        tokens: Trimmed column tokens.

    Returns:
        Parsed values with ``None`` for null tokens.
    """
    parser = _PARSERS_BY_TYPE[field_type]
    return tuple(None if is_null_token(token) else parser(token) for token in tokens)


def classify_column(tokens: Sequence[str]) -> ClassificationResult:
    """Classify a column and build its values in two passes."""
    field_type = classify_tokens(tokens)
    return ClassificationResult(field_type=field_type, values=build_values(field_type, tokens))


def _accepts(parser: Callable[[str], CellValue], token: str) -> bool:
    try:
        parser(token)
    except ValueError:
        return False
    return True
