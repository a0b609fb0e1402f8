"""Syntactic type guesses over literal source text."""

from __future__ import annotations

import re
from typing import Literal

TypeTag = Literal["string", "boolean", "number", "array", "object", "expression", "any"]

_NUMERIC_LITERAL = re.compile(
    r"""
    [+-]?
    (?:
        0[xX][0-9a-fA-F]+
      | 0[oO][0-7]+
      | 0[bB][01]+
      | Infinity
      | (?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?
    )
    """,
    re.VERBOSE,
)


def is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"')


def is_numeric_literal(text: str) -> bool:
    stripped = text.strip()
    return bool(stripped) and _NUMERIC_LITERAL.fullmatch(stripped) is not None


def infer_literal_type(text: str) -> TypeTag:
    """Classify a literal by its spelling, never by evaluating it.

    Ambiguous or unrecognised text yields ``any``.
    """
    if not isinstance(text, str):
        return "any"
    if is_quoted(text):
        return "string"
    if text in ("true", "false"):
        return "boolean"
    if is_numeric_literal(text):
        return "number"
    if text.startswith("[") and text.endswith("]"):
        return "array"
    if text.startswith("{") and text.endswith("}"):
        return "object"
    return "any"


__all__ = ["TypeTag", "infer_literal_type", "is_numeric_literal", "is_quoted"]
