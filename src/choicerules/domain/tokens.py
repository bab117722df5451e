"""Typed tokens produced by the rule lexer."""
from __future__ import annotations

import operator
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict


class TokenKind(Enum):
    """Lexical categories of a rule token."""

    SWITCH = "s"
    VARIABLE = "v"
    ITEM = "i"
    WEAPON = "w"
    ARMOUR = "a"
    ACTOR = "p"
    GOLD = "g"
    LITERAL = "literal"
    OPERATOR = "operator"


class Comparison(Enum):
    """Canonical comparison operators."""

    EQ = "=="
    NE = "!="
    LT = "<"
    LE = "<="
    GT = ">"
    GE = ">="

    def apply(self, left: int, right: int) -> bool:
        return _COMPARATORS[self](left, right)


_COMPARATORS: Dict[Comparison, Callable[[int, int], bool]] = {
    Comparison.EQ: operator.eq,
    Comparison.NE: operator.ne,
    Comparison.LT: operator.lt,
    Comparison.LE: operator.le,
    Comparison.GT: operator.gt,
    Comparison.GE: operator.ge,
}

OPERATOR_ALIASES: Dict[str, Comparison] = {
    "=": Comparison.EQ,
    "==": Comparison.EQ,
    "===": Comparison.EQ,
    "!=": Comparison.NE,
    "!==": Comparison.NE,
    "<": Comparison.LT,
    "<=": Comparison.LE,
    ">": Comparison.GT,
    ">=": Comparison.GE,
}

REFERENCE_KINDS: Dict[str, TokenKind] = {
    kind.value: kind
    for kind in (
        TokenKind.SWITCH,
        TokenKind.VARIABLE,
        TokenKind.ITEM,
        TokenKind.WEAPON,
        TokenKind.ARMOUR,
        TokenKind.ACTOR,
    )
}

INVENTORY_KINDS = frozenset({TokenKind.ITEM, TokenKind.WEAPON, TokenKind.ARMOUR})
CONDITION_KINDS = frozenset({TokenKind.SWITCH, TokenKind.ACTOR}) | INVENTORY_KINDS
NUMERIC_KINDS = frozenset({TokenKind.VARIABLE, TokenKind.GOLD, TokenKind.LITERAL}) | INVENTORY_KINDS


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token. Only the field matching ``kind`` is populated."""

    kind: TokenKind
    text: str
    ref_id: int | None = None
    value: int | None = None
    comparison: Comparison | None = None

    @property
    def is_operator(self) -> bool:
        return self.kind is TokenKind.OPERATOR

    @property
    def is_inventory(self) -> bool:
        return self.kind in INVENTORY_KINDS


@dataclass(frozen=True, slots=True)
class ParsedRule:
    """A structurally valid rule: a lone condition or a comparison."""

    text: str
    negated: bool
    left: Token
    comparison: Comparison | None = None
    right: Token | None = None

    @property
    def is_comparison(self) -> bool:
        return self.comparison is not None
