"""Repository for demo scenarios: a game-state snapshot plus prompts."""
from __future__ import annotations

from typing import Dict, List

from choicerules.core.types import CANCEL_DISALLOWED, NO_DEFAULT_CHOICE
from choicerules.data.errors import DataValidationError
from choicerules.data.repositories.base import RepositoryBase
from choicerules.domain.choice_models import PromptDescriptor
from choicerules.domain.inventory import PartyInventory
from choicerules.domain.state import GameState


class ScenarioRepository(RepositoryBase[PromptDescriptor]):
    """Loads prompts keyed by id and builds fresh GameState snapshots."""

    def __init__(self, filename: str = "demo_scenario.json", base_path=None) -> None:
        super().__init__(filename, base_path)
        self._raw_state: dict[str, object] | None = None

    def _build(self, raw: dict[str, object]) -> Dict[str, PromptDescriptor]:
        self._raw_state = self._require_mapping(raw.get("state", {}), "scenario.state")
        # Parse eagerly so a bad snapshot fails at load time.
        self._build_state(self._raw_state)
        prompts = self._require_mapping(raw.get("prompts"), "scenario.prompts")
        descriptors: Dict[str, PromptDescriptor] = {}
        for prompt_id, payload in prompts.items():
            context = f"scenario.prompts['{prompt_id}']"
            prompt_data = self._require_mapping(payload, context)
            descriptors[prompt_id] = PromptDescriptor(
                choices=self._parse_choices(prompt_data.get("choices"), f"{context}.choices"),
                default_index=self._require_int(
                    prompt_data.get("default", NO_DEFAULT_CHOICE), f"{context}.default"
                ),
                cancel_index=self._require_int(
                    prompt_data.get("cancel", CANCEL_DISALLOWED), f"{context}.cancel"
                ),
            )
        return descriptors

    def get_state(self) -> GameState:
        """Return a new GameState built from the scenario snapshot."""
        self._ensure_loaded()
        assert self._raw_state is not None
        return self._build_state(self._raw_state)

    def prompt_ids(self) -> List[str]:
        self._ensure_loaded()
        assert self._definitions is not None
        return sorted(self._definitions.keys())

    def _build_state(self, raw: dict[str, object]) -> GameState:
        inventory = PartyInventory(
            items=self._parse_id_map(raw.get("items", {}), "scenario.state.items", int),
            weapons=self._parse_id_map(raw.get("weapons", {}), "scenario.state.weapons", int),
            armours=self._parse_id_map(raw.get("armours", {}), "scenario.state.armours", int),
        )
        party_raw = raw.get("party", [])
        if not isinstance(party_raw, list):
            raise DataValidationError("scenario.state.party must be a list.")
        return GameState(
            switches=self._parse_id_map(raw.get("switches", {}), "scenario.state.switches", bool),
            variables=self._parse_id_map(raw.get("variables", {}), "scenario.state.variables", int),
            gold=self._require_int(raw.get("gold", 0), "scenario.state.gold"),
            party_members=[
                self._require_int(actor_id, f"scenario.state.party[{index}]")
                for index, actor_id in enumerate(party_raw)
            ],
            inventory=inventory,
        )

    def _parse_choices(self, value: object, context: str) -> List[str]:
        if not isinstance(value, list):
            raise DataValidationError(f"{context} must be a list.")
        return [self._require_str(entry, f"{context}[{index}]") for index, entry in enumerate(value)]

    def _parse_id_map(self, value: object, context: str, value_type: type) -> dict:
        mapping = self._require_mapping(value, context)
        parsed: dict = {}
        for key, entry in mapping.items():
            if not isinstance(key, str) or not key.isdigit():
                raise DataValidationError(f"{context} keys must be numeric ids.")
            if value_type is bool:
                if not isinstance(entry, bool):
                    raise DataValidationError(f"{context}['{key}'] must be a boolean.")
                parsed[int(key)] = entry
            else:
                parsed[int(key)] = self._require_int(entry, f"{context}['{key}']")
        return parsed
