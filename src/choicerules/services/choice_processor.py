"""Analyze, index, and render the options of one choice prompt."""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List

from choicerules.domain.choice_models import ChoiceOption, PromptDescriptor, RuleVerdict
from choicerules.domain.config import EngineConfig
from choicerules.domain.state import GameStateView
from choicerules.services.operand_resolver import OperandResolver
from choicerules.services.rule_evaluator import RuleEvaluator
from choicerules.services.tag_extractor import extract_tags

log = logging.getLogger(__name__)

# Message-window escape that draws the rest of the label in the muted system colour.
DISABLED_TEXT_MARKER = "\\C[7]"


class ProcessorStage(Enum):
    IDLE = "idle"
    ANALYZING = "analyzing"
    INDEXED = "indexed"
    RENDERED = "rendered"


@dataclass(slots=True)
class PromptContext:
    """Working records for the single active prompt."""

    descriptor: PromptDescriptor
    options: List[ChoiceOption] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    stage: ProcessorStage = ProcessorStage.IDLE

    def visible_options(self) -> List[ChoiceOption]:
        return [option for option in self.options if option.visible]

    def find_by_original_index(self, original_index: int) -> ChoiceOption | None:
        for option in self.options:
            if option.original_index == original_index:
                return option
        return None

    def find_by_new_index(self, new_index: int) -> ChoiceOption | None:
        for option in self.options:
            if option.new_index == new_index:
                return option
        return None

    def back_mapping(self) -> List[int]:
        """Original index for every rendered row, in row order."""
        return [option.original_index for option in self.visible_options()]


class ChoiceSetProcessor:
    """Runs tag extraction and rule evaluation over every option of a prompt."""

    def __init__(self, config: EngineConfig, state: GameStateView) -> None:
        self._config = config
        self._evaluator = RuleEvaluator(OperandResolver(state), config.error_policy)

    def process(self, descriptor: PromptDescriptor) -> PromptContext | None:
        """Build a rendered context, or None when the prompt has no options.

        Raises RuleEvaluationError under the throw policy; no partial context
        is returned in that case.
        """
        if not descriptor.choices:
            return None
        context = PromptContext(descriptor=descriptor)
        self._analyze(context)
        self._assign_indices(context)
        self._render(context)
        return context

    def evaluate_option(self, raw_text: str) -> tuple[str, RuleVerdict]:
        """Return the stripped label and verdict for one raw option string."""
        extraction = extract_tags(raw_text)
        verdict = RuleVerdict(
            disabled=self._evaluator.evaluate_block(extraction.disable_rules),
            hidden=self._evaluator.evaluate_block(extraction.hide_rules),
        )
        return extraction.label, verdict

    def _analyze(self, context: PromptContext) -> None:
        context.stage = ProcessorStage.ANALYZING
        for original_index, raw_text in enumerate(context.descriptor.choices):
            label, verdict = self.evaluate_option(raw_text)
            log.debug(
                f"Choice {original_index} '{label}': disabled={verdict.disabled} hidden={verdict.hidden}"
            )
            context.options.append(
                ChoiceOption(
                    original_index=original_index,
                    raw_text=raw_text,
                    label=label,
                    hidden=verdict.hidden,
                    disabled=verdict.disabled,
                )
            )

    @staticmethod
    def _assign_indices(context: PromptContext) -> None:
        next_index = 0
        for option in context.options:
            if option.hidden:
                continue
            option.new_index = next_index
            next_index += 1
        context.stage = ProcessorStage.INDEXED

    def _render(self, context: PromptContext) -> None:
        for option in context.options:
            substitution = self._config.substitution_for(option.label)
            if substitution is not None:
                option.label = substitution.render(option.disabled)
            if option.disabled:
                option.label = DISABLED_TEXT_MARKER + option.label
        context.labels = [option.label for option in context.visible_options()]
        context.stage = ProcessorStage.RENDERED
