"""Choice prompt records, views, and selection events."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from choicerules.core.types import CANCEL_DISALLOWED, NO_DEFAULT_CHOICE
from choicerules.domain.config import SoundCue


@dataclass(slots=True)
class PromptDescriptor:
    """Prompt as handed over by the host, before any markup is processed."""

    choices: List[str]
    default_index: int = NO_DEFAULT_CHOICE
    cancel_index: int = CANCEL_DISALLOWED


@dataclass(frozen=True, slots=True)
class RuleVerdict:
    disabled: bool = False
    hidden: bool = False


@dataclass(slots=True)
class ChoiceOption:
    """Working record for one option of the active prompt."""

    original_index: int
    raw_text: str
    label: str
    hidden: bool = False
    disabled: bool = False
    new_index: int | None = None

    @property
    def visible(self) -> bool:
        return self.new_index is not None


@dataclass(slots=True)
class ChoicePromptView:
    """Data returned to the host for rendering the processed prompt."""

    labels: List[str]
    original_indices: List[int]
    initial_index: int | None
    disabled_rows: List[int] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.labels)


@dataclass(slots=True)
class SelectionEvent:
    """Base class for confirm/cancel outcomes."""


@dataclass(slots=True)
class ChoiceCommittedEvent(SelectionEvent):
    original_index: int


@dataclass(slots=True)
class ChoiceRejectedEvent(SelectionEvent):
    sound: SoundCue | None = None


@dataclass(slots=True)
class HostCancelEvent(SelectionEvent):
    """No engine cancel target; the host applies its own cancel behaviour."""

    cancel_type: int


@dataclass(slots=True)
class SelectionIgnoredEvent(SelectionEvent):
    reason: str
