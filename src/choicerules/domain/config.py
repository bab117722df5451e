"""Static engine configuration loaded once at start-up."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class HiddenDefaultPolicy(Enum):
    """What to highlight when the default option is hidden."""

    NONE = "none"
    FIRST = "first"
    NEXT_AVAILABLE = "next_available"
    PREVIOUS_AVAILABLE = "previous_available"


class ErrorPolicy(Enum):
    """How malformed rules are handled during analysis."""

    SKIP_WARN = "skip_warn"
    SKIP_WARN_AND_FAIL = "skip_warn_and_fail"
    THROW = "throw"


@dataclass(frozen=True, slots=True)
class SoundCue:
    """Sound effect the host should play; the engine never plays it itself."""

    name: str
    volume: int = 100
    pitch: int = 100
    pan: int = 0


@dataclass(frozen=True, slots=True)
class TextSubstitution:
    code: str
    default_text: str
    disabled_text: str

    def render(self, disabled: bool) -> str:
        return self.disabled_text if disabled else self.default_text


@dataclass(frozen=True, slots=True)
class EngineConfig:
    """Immutable engine settings shared by every prompt."""

    disabled_sound: SoundCue | None = None
    hidden_default_policy: HiddenDefaultPolicy = HiddenDefaultPolicy.NONE
    error_policy: ErrorPolicy = ErrorPolicy.SKIP_WARN
    text_substitutions: tuple[TextSubstitution, ...] = ()

    def substitution_for(self, label: str) -> TextSubstitution | None:
        """Return the first substitution whose code equals ``label`` exactly."""
        for entry in self.text_substitutions:
            if entry.code == label:
                return entry
        return None
