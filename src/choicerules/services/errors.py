"""Service-layer exceptions."""
from __future__ import annotations

from enum import Enum


class MalformedRuleKind(Enum):
    """Classification of what failed to parse or resolve in a rule."""

    EMPTY_RULE = "empty rule"
    UNEXPECTED_CHARACTERS = "unexpected characters"
    TOKEN_COUNT = "unexpected token count"
    INVALID_FIRST_OPERAND = "invalid first operand"
    INVALID_OPERATOR = "invalid comparison operator"
    INVALID_SECOND_OPERAND = "invalid second operand"
    ILLEGAL_OPERAND_POSITION = "illegal operand position"
    UNRESOLVED_REFERENCE = "unresolved reference"


class MalformedRuleError(Exception):
    """Raised when a single rule cannot be tokenized, parsed, or resolved."""

    def __init__(self, rule: str, kind: MalformedRuleKind, detail: str) -> None:
        super().__init__(f"Malformed rule '{rule}' ({kind.value}): {detail}")
        self.rule = rule
        self.kind = kind
        self.detail = detail


class RuleEvaluationError(Exception):
    """Raised under the throw policy; aborts analysis of the whole prompt."""


class PromptStateError(Exception):
    """Raised when confirm or cancel arrives without an active prompt."""
