"""Engine facade invoked by the host at prompt-open, confirm, and cancel."""
from __future__ import annotations

from choicerules.domain.choice_models import (
    ChoiceCommittedEvent,
    ChoicePromptView,
    HostCancelEvent,
    PromptDescriptor,
    SelectionEvent,
)
from choicerules.domain.config import EngineConfig
from choicerules.domain.state import GameStateView
from choicerules.services.choice_processor import ChoiceSetProcessor, PromptContext
from choicerules.services.errors import PromptStateError
from choicerules.services.selection import SelectionStateMachine


class ConditionalChoiceService:
    """Owns the context of the one active prompt; nothing survives between prompts."""

    def __init__(self, config: EngineConfig, state: GameStateView) -> None:
        self._processor = ChoiceSetProcessor(config, state)
        self._selection = SelectionStateMachine(config)
        self._context: PromptContext | None = None

    @property
    def active(self) -> bool:
        return self._context is not None

    def open_prompt(self, descriptor: PromptDescriptor) -> ChoicePromptView | None:
        """Process ``descriptor``; None means the host should use its own flow."""
        self._context = None
        context = self._processor.process(descriptor)
        if context is None:
            return None
        self._context = context
        return ChoicePromptView(
            labels=list(context.labels),
            original_indices=context.back_mapping(),
            initial_index=self._selection.initial_index(context),
            disabled_rows=[
                option.new_index
                for option in context.visible_options()
                if option.disabled and option.new_index is not None
            ],
        )

    def confirm(self, highlighted_index: int) -> SelectionEvent:
        event = self._selection.confirm(self._require_context(), highlighted_index)
        if isinstance(event, ChoiceCommittedEvent):
            self.close_prompt()
        return event

    def cancel(self) -> SelectionEvent:
        event = self._selection.cancel(self._require_context())
        if isinstance(event, (ChoiceCommittedEvent, HostCancelEvent)):
            self.close_prompt()
        return event

    def close_prompt(self) -> None:
        self._context = None

    def _require_context(self) -> PromptContext:
        if self._context is None:
            raise PromptStateError("No choice prompt is active.")
        return self._context
