"""Evaluate comma-separated rule lists into a single verdict."""
from __future__ import annotations

import logging
from typing import List, Sequence

from choicerules.domain.config import ErrorPolicy
from choicerules.domain.tokens import ParsedRule
from choicerules.services.errors import MalformedRuleError, RuleEvaluationError
from choicerules.services.operand_resolver import OperandResolver
from choicerules.services.rule_lexer import parse_rule

log = logging.getLogger(__name__)

RULE_SEPARATOR = ","


def split_rule_list(text: str) -> List[str]:
    """Split a rule block body into rules. An empty body is an empty list."""
    if not text:
        return []
    return text.split(RULE_SEPARATOR)


class RuleEvaluator:
    """AND-combines rules, applying the configured error policy."""

    def __init__(self, resolver: OperandResolver, error_policy: ErrorPolicy) -> None:
        self._resolver = resolver
        self._error_policy = error_policy

    def evaluate_rule(self, rule: str) -> bool:
        """Evaluate one rule; raises MalformedRuleError on bad input."""
        parsed = parse_rule(rule)
        return self._evaluate_parsed(parsed)

    def evaluate_rule_list(self, rules: Sequence[str]) -> bool:
        """Return True when every well-formed rule holds.

        Stops at the first false rule. Malformed rules are skipped, force the
        result to False, or raise RuleEvaluationError depending on the policy.
        """
        result = True
        for rule in rules:
            try:
                outcome = self.evaluate_rule(rule)
            except MalformedRuleError as exc:
                if self._error_policy is ErrorPolicy.THROW:
                    raise RuleEvaluationError(str(exc)) from exc
                if self._error_policy is ErrorPolicy.SKIP_WARN_AND_FAIL:
                    log.warning(f"{exc} Treating the rule list as false.")
                    result = False
                else:
                    log.warning(f"{exc} Skipping rule.")
                continue
            if not outcome:
                return False
        return result

    def evaluate_block(self, text: str | None) -> bool:
        """Evaluate a raw block body; an absent block never triggers."""
        if text is None:
            return False
        return self.evaluate_rule_list(split_rule_list(text))

    def _evaluate_parsed(self, parsed: ParsedRule) -> bool:
        if parsed.comparison is None or parsed.right is None:
            value = self._resolver.resolve_condition(parsed.text, parsed.left)
        else:
            left = self._resolver.resolve_number(parsed.text, parsed.left)
            right = self._resolver.resolve_number(parsed.text, parsed.right)
            value = parsed.comparison.apply(left, right)
        return not value if parsed.negated else value
