"""Default highlighting and confirm/cancel resolution for a processed prompt."""
from __future__ import annotations

import logging
from typing import Iterable

from choicerules.core.types import HOST_CANCEL_TYPES
from choicerules.domain.choice_models import (
    ChoiceCommittedEvent,
    ChoiceOption,
    ChoiceRejectedEvent,
    HostCancelEvent,
    SelectionEvent,
    SelectionIgnoredEvent,
)
from choicerules.domain.config import EngineConfig, HiddenDefaultPolicy
from choicerules.services.choice_processor import PromptContext

log = logging.getLogger(__name__)


class SelectionStateMachine:
    """Maps between rendered rows and original option positions."""

    def __init__(self, config: EngineConfig) -> None:
        self._config = config

    def initial_index(self, context: PromptContext) -> int | None:
        """Return the rendered row to highlight when the prompt opens."""
        default_index = context.descriptor.default_index
        if default_index < 0 or not context.visible_options():
            return None
        target = context.find_by_original_index(default_index)
        if target is None:
            log.warning(f"Default choice {default_index} not found; selecting none.")
            return None
        if not target.hidden:
            return target.new_index
        return self._fallback_index(context, target)

    def confirm(self, context: PromptContext, highlighted_index: int) -> SelectionEvent:
        option = context.find_by_new_index(highlighted_index)
        if option is None:
            log.error(f"No choice matches highlighted row {highlighted_index}.")
            return SelectionIgnoredEvent(reason=f"No choice at row {highlighted_index}.")
        if option.disabled:
            return self._reject()
        return ChoiceCommittedEvent(original_index=option.original_index)

    def cancel(self, context: PromptContext) -> SelectionEvent:
        cancel_index = context.descriptor.cancel_index
        if cancel_index in HOST_CANCEL_TYPES:
            return HostCancelEvent(cancel_type=cancel_index)
        option = context.find_by_original_index(cancel_index)
        if option is None:
            log.error(f"Cancel choice {cancel_index} not found.")
            return self._reject()
        if option.hidden or option.disabled:
            return self._reject()
        return ChoiceCommittedEvent(original_index=option.original_index)

    def _fallback_index(self, context: PromptContext, target: ChoiceOption) -> int | None:
        policy = self._config.hidden_default_policy
        if policy is HiddenDefaultPolicy.FIRST:
            return 0
        if policy is HiddenDefaultPolicy.NEXT_AVAILABLE:
            found = _first_visible(_after(context, target))
            return found if found is not None else _first_visible(_before(context, target))
        if policy is HiddenDefaultPolicy.PREVIOUS_AVAILABLE:
            found = _first_visible(_before(context, target))
            return found if found is not None else _first_visible(_after(context, target))
        return None

    def _reject(self) -> ChoiceRejectedEvent:
        return ChoiceRejectedEvent(sound=self._config.disabled_sound)


def _after(context: PromptContext, target: ChoiceOption) -> list[ChoiceOption]:
    return sorted(
        (option for option in context.options if option.original_index > target.original_index),
        key=lambda option: option.original_index,
    )


def _before(context: PromptContext, target: ChoiceOption) -> list[ChoiceOption]:
    return sorted(
        (option for option in context.options if option.original_index < target.original_index),
        key=lambda option: option.original_index,
        reverse=True,
    )


def _first_visible(options: Iterable[ChoiceOption]) -> int | None:
    for option in options:
        if option.new_index is not None:
            return option.new_index
    return None
