"""Lexer and parser for single choice rules.

A rule is ``[!]operand[operator operand]`` with no whitespace. Operands are
``s[N]``, ``v[N]``, ``i[N]``, ``w[N]``, ``a[N]``, ``p[N]``, ``g`` or a signed
integer literal. A leading ``!`` negates the whole rule.
"""
from __future__ import annotations

import re
from typing import List

from choicerules.domain.tokens import (
    CONDITION_KINDS,
    NUMERIC_KINDS,
    OPERATOR_ALIASES,
    REFERENCE_KINDS,
    ParsedRule,
    Token,
    TokenKind,
)
from choicerules.services.errors import MalformedRuleError, MalformedRuleKind

NEGATION = "!"

# Alternatives are tried left to right, so longer operators come first.
_TOKEN_PATTERN = re.compile(
    r"(?P<ref>[sviwap])\[(?P<ref_id>\d+)\]"
    r"|(?P<gold>g)"
    r"|(?P<op>===|==|<=|>=|!==|!=|=|<|>)"
    r"|(?P<literal>[-+]?\d+)"
)


def tokenize_rule(rule: str) -> tuple[List[Token], bool]:
    """Split ``rule`` into tokens and report whether it is negated."""
    if not rule:
        raise MalformedRuleError(rule, MalformedRuleKind.EMPTY_RULE, "Rule has no content.")
    negated = rule.startswith(NEGATION)
    position = len(NEGATION) if negated else 0
    tokens: List[Token] = []
    while position < len(rule):
        match = _TOKEN_PATTERN.match(rule, position)
        if match is None:
            raise MalformedRuleError(
                rule,
                MalformedRuleKind.UNEXPECTED_CHARACTERS,
                f"Characters '{rule[position:]}' could not be processed.",
            )
        tokens.append(_build_token(match))
        position = match.end()
    return tokens, negated


def parse_rule(rule: str) -> ParsedRule:
    """Tokenize ``rule`` and check operand/operator placement."""
    tokens, negated = tokenize_rule(rule)
    if len(tokens) == 1:
        return _parse_condition(rule, tokens[0], negated)
    if len(tokens) == 3:
        return _parse_comparison(rule, tokens, negated)
    raise MalformedRuleError(
        rule,
        MalformedRuleKind.TOKEN_COUNT,
        f"Expected 1 or 3 tokens but found {len(tokens)}.",
    )


def _parse_condition(rule: str, token: Token, negated: bool) -> ParsedRule:
    if token.kind not in CONDITION_KINDS:
        raise MalformedRuleError(
            rule,
            MalformedRuleKind.INVALID_FIRST_OPERAND,
            f"'{token.text}' cannot stand alone; only switches, actors and inventory can.",
        )
    return ParsedRule(text=rule, negated=negated, left=token)


def _parse_comparison(rule: str, tokens: List[Token], negated: bool) -> ParsedRule:
    left, middle, right = tokens
    if not middle.is_operator:
        raise MalformedRuleError(
            rule,
            MalformedRuleKind.INVALID_OPERATOR,
            f"Expected a comparison operator but found '{middle.text}'.",
        )
    _require_numeric_operand(rule, left, MalformedRuleKind.INVALID_FIRST_OPERAND)
    _require_numeric_operand(rule, right, MalformedRuleKind.INVALID_SECOND_OPERAND)
    return ParsedRule(
        text=rule,
        negated=negated,
        left=left,
        comparison=middle.comparison,
        right=right,
    )


def _require_numeric_operand(rule: str, token: Token, kind: MalformedRuleKind) -> None:
    if token.kind in NUMERIC_KINDS:
        return
    if token.kind in (TokenKind.SWITCH, TokenKind.ACTOR):
        raise MalformedRuleError(
            rule,
            MalformedRuleKind.ILLEGAL_OPERAND_POSITION,
            f"'{token.text}' cannot be compared; switches and actors are conditions only.",
        )
    raise MalformedRuleError(rule, kind, f"'{token.text}' is not an operand.")


def _build_token(match: re.Match[str]) -> Token:
    text = match.group(0)
    if match.group("ref") is not None:
        return Token(
            kind=REFERENCE_KINDS[match.group("ref")],
            text=text,
            ref_id=int(match.group("ref_id")),
        )
    if match.group("gold") is not None:
        return Token(kind=TokenKind.GOLD, text=text)
    if match.group("op") is not None:
        return Token(kind=TokenKind.OPERATOR, text=text, comparison=OPERATOR_ALIASES[text])
    return Token(kind=TokenKind.LITERAL, text=text, value=int(text))
