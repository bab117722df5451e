"""Service layer exports."""

from .errors import MalformedRuleError, MalformedRuleKind, PromptStateError, RuleEvaluationError
from .choice_processor import ChoiceSetProcessor, ProcessorStage, PromptContext
from .choice_service import ConditionalChoiceService
from .markup_validator import Issue, format_issue, validate_choice_markup
from .rule_evaluator import RuleEvaluator
from .selection import SelectionStateMachine

__all__ = [
    "MalformedRuleError",
    "MalformedRuleKind",
    "PromptStateError",
    "RuleEvaluationError",
    "ChoiceSetProcessor",
    "ProcessorStage",
    "PromptContext",
    "ConditionalChoiceService",
    "Issue",
    "format_issue",
    "validate_choice_markup",
    "RuleEvaluator",
    "SelectionStateMachine",
]
