"""Static choice markup validation utilities."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from choicerules.core.types import Severity
from choicerules.services.errors import MalformedRuleError
from choicerules.services.rule_evaluator import split_rule_list
from choicerules.services.rule_lexer import parse_rule
from choicerules.services.tag_extractor import extract_tags


@dataclass(frozen=True, slots=True)
class Issue:
    severity: Severity
    code: str
    message: str
    context: dict[str, str]


def format_issue(issue: Issue) -> str:
    context = " ".join(f"{key}={value}" for key, value in issue.context.items())
    suffix = f" ({context})" if context else ""
    return f"[{issue.severity}] {issue.code}: {issue.message}{suffix}"


def has_errors(issues: Sequence[Issue]) -> bool:
    return any(issue.severity == "ERROR" for issue in issues)


def validate_choice_markup(choices: Sequence[str], *, prompt_id: str | None = None) -> list[Issue]:
    """Lint option strings without consulting any game state."""
    issues: list[Issue] = []
    for index, raw_text in enumerate(choices):
        base_context = {"choice": str(index)}
        if prompt_id is not None:
            base_context = {"prompt": prompt_id, **base_context}
        extraction = extract_tags(raw_text)
        if extraction.illegal_position:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="ILLEGAL_TAG_POSITION",
                    message="Markup must lead the choice text, blocks adjacent to each other.",
                    context={**base_context, "text": raw_text},
                )
            )
            continue
        for block_name, body in (("disable", extraction.disable_rules), ("hide", extraction.hide_rules)):
            if body is None:
                continue
            issues.extend(_validate_block(body, {**base_context, "block": block_name}))
        if extraction.has_markup and not extraction.label:
            issues.append(
                Issue(
                    severity="WARNING",
                    code="EMPTY_LABEL",
                    message="Choice has markup but no visible text.",
                    context=base_context,
                )
            )
    return issues


def _validate_block(body: str, context: dict[str, str]) -> list[Issue]:
    issues: list[Issue] = []
    for rule in split_rule_list(body):
        try:
            parse_rule(rule)
        except MalformedRuleError as exc:
            issues.append(
                Issue(
                    severity="ERROR",
                    code="MALFORMED_RULE",
                    message=exc.detail,
                    context={**context, "rule": rule, "kind": exc.kind.name},
                )
            )
    return issues
