"""Repository for the static engine configuration."""
from __future__ import annotations

import logging
from typing import Dict, List

from choicerules.data.errors import DataLoadError, DataValidationError
from choicerules.data.json_loader import load_json_text
from choicerules.data.repositories.base import RepositoryBase
from choicerules.domain.config import (
    EngineConfig,
    ErrorPolicy,
    HiddenDefaultPolicy,
    SoundCue,
    TextSubstitution,
)

log = logging.getLogger(__name__)

# Parameter values written by the original editor plugin.
_HIDDEN_DEFAULT_ALIASES: Dict[str, HiddenDefaultPolicy] = {
    "hidden1": HiddenDefaultPolicy.NONE,
    "hidden2": HiddenDefaultPolicy.FIRST,
    "hidden3": HiddenDefaultPolicy.NEXT_AVAILABLE,
    "hidden4": HiddenDefaultPolicy.PREVIOUS_AVAILABLE,
}
_ERROR_POLICY_ALIASES: Dict[str, ErrorPolicy] = {
    "error1": ErrorPolicy.SKIP_WARN,
    "error2": ErrorPolicy.SKIP_WARN_AND_FAIL,
    "error3": ErrorPolicy.THROW,
}

_CODE_KEYS = ("text_code", "textCode")
_DEFAULT_TEXT_KEYS = ("default_text", "defaultText")
_DISABLED_TEXT_KEYS = ("disable_text", "disableText", "disabled_text")


class EngineConfigRepository(RepositoryBase[EngineConfig]):
    """Loads choice_rules.json into an immutable EngineConfig."""

    def __init__(self, base_path=None) -> None:
        super().__init__("choice_rules.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EngineConfig]:
        return {"config": self.build_config(raw)}

    def get_config(self) -> EngineConfig:
        self._ensure_loaded()
        assert self._definitions is not None
        return self._definitions["config"]

    @classmethod
    def build_config(cls, raw: dict[str, object]) -> EngineConfig:
        """Build an EngineConfig from an already-decoded mapping."""
        return EngineConfig(
            disabled_sound=cls._parse_sound(raw.get("disabled_se")),
            hidden_default_policy=cls._parse_hidden_default(raw.get("hidden_default")),
            error_policy=cls._parse_error_policy(raw.get("error_handling")),
            text_substitutions=tuple(parse_text_substitutions(raw.get("alternative_text"))),
        )

    @staticmethod
    def _parse_sound(value: object) -> SoundCue | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise DataValidationError("choice_rules.disabled_se must be a string.")
        name = value.strip()
        return SoundCue(name=name) if name else None

    @staticmethod
    def _parse_hidden_default(value: object) -> HiddenDefaultPolicy:
        if value is None:
            return HiddenDefaultPolicy.NONE
        if isinstance(value, str):
            if value in _HIDDEN_DEFAULT_ALIASES:
                return _HIDDEN_DEFAULT_ALIASES[value]
            try:
                return HiddenDefaultPolicy(value)
            except ValueError:
                pass
        raise DataValidationError(f"choice_rules.hidden_default has invalid value '{value}'.")

    @staticmethod
    def _parse_error_policy(value: object) -> ErrorPolicy:
        if value is None:
            return ErrorPolicy.SKIP_WARN
        if isinstance(value, str):
            if value in _ERROR_POLICY_ALIASES:
                return _ERROR_POLICY_ALIASES[value]
            try:
                return ErrorPolicy(value)
            except ValueError:
                pass
        raise DataValidationError(f"choice_rules.error_handling has invalid value '{value}'.")


def parse_text_substitutions(value: object) -> List[TextSubstitution]:
    """Parse the substitution table; anything unusable yields no substitutions.

    Accepts a list of objects, or the editor encoding: a JSON string holding
    a list of JSON-encoded objects.
    """
    if value is None:
        return []
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            value = load_json_text(value, "choice_rules.alternative_text")
        except DataLoadError as exc:
            log.warning(f"{exc}; no text substitutions configured.")
            return []
    if not isinstance(value, list):
        log.warning("choice_rules.alternative_text must be a list; no text substitutions configured.")
        return []
    substitutions: List[TextSubstitution] = []
    for index, entry in enumerate(value):
        substitution = _parse_substitution_entry(entry, f"choice_rules.alternative_text[{index}]")
        if substitution is not None:
            substitutions.append(substitution)
    return substitutions


def _parse_substitution_entry(entry: object, context: str) -> TextSubstitution | None:
    if isinstance(entry, str):
        try:
            entry = load_json_text(entry, context)
        except DataLoadError as exc:
            log.warning(f"{exc}; entry ignored.")
            return None
    if not isinstance(entry, dict):
        log.warning(f"{context} must be an object; entry ignored.")
        return None
    code = _first_str(entry, _CODE_KEYS)
    if not code:
        log.warning(f"{context} has no text code; entry ignored.")
        return None
    return TextSubstitution(
        code=code,
        default_text=_first_str(entry, _DEFAULT_TEXT_KEYS),
        disabled_text=_first_str(entry, _DISABLED_TEXT_KEYS),
    )


def _first_str(entry: dict, keys: tuple[str, ...]) -> str:
    for key in keys:
        value = entry.get(key)
        if isinstance(value, str):
            return value
    return ""
