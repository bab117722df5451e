"""Resolve rule tokens against the read-only game-state surface."""
from __future__ import annotations

from typing import Callable, Dict

from choicerules.domain.state import GameStateView
from choicerules.domain.tokens import Token, TokenKind
from choicerules.services.errors import MalformedRuleError, MalformedRuleKind


class OperandResolver:
    """Turns tokens into booleans or integers. Never mutates the state."""

    def __init__(self, state: GameStateView) -> None:
        self._state = state
        self._counters: Dict[TokenKind, Callable[[int], int]] = {
            TokenKind.ITEM: state.item_count,
            TokenKind.WEAPON: state.weapon_count,
            TokenKind.ARMOUR: state.armour_count,
        }

    def resolve_condition(self, rule: str, token: Token) -> bool:
        """Resolve a lone operand: switch state, party membership, or inventory presence."""
        if token.kind is TokenKind.SWITCH:
            return bool(self._lookup(rule, token, self._state.switch_value))
        if token.kind is TokenKind.ACTOR:
            return bool(self._lookup(rule, token, self._state.party_has_actor))
        if token.is_inventory:
            return self._lookup(rule, token, self._counters[token.kind]) > 0
        raise MalformedRuleError(
            rule,
            MalformedRuleKind.INVALID_FIRST_OPERAND,
            f"'{token.text}' does not resolve to a condition.",
        )

    def resolve_number(self, rule: str, token: Token) -> int:
        """Resolve a comparison operand to an integer."""
        if token.kind is TokenKind.LITERAL and token.value is not None:
            return token.value
        if token.kind is TokenKind.GOLD:
            return int(self._state.party_gold())
        if token.kind is TokenKind.VARIABLE:
            return int(self._lookup(rule, token, self._state.variable_value))
        if token.is_inventory:
            return int(self._lookup(rule, token, self._counters[token.kind]))
        raise MalformedRuleError(
            rule,
            MalformedRuleKind.ILLEGAL_OPERAND_POSITION,
            f"'{token.text}' does not resolve to a number.",
        )

    @staticmethod
    def _lookup(rule: str, token: Token, query: Callable[[int], object]):
        if token.ref_id is None:
            raise MalformedRuleError(
                rule, MalformedRuleKind.UNRESOLVED_REFERENCE, f"'{token.text}' has no id."
            )
        try:
            return query(token.ref_id)
        except LookupError as exc:
            raise MalformedRuleError(
                rule, MalformedRuleKind.UNRESOLVED_REFERENCE, str(exc)
            ) from exc
