"""Read-only game-state surface consulted by choice rules."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Protocol

from choicerules.domain.inventory import PartyInventory


class UnknownReferenceError(LookupError):
    """Raised when a rule references an id the game database does not know."""


class GameStateView(Protocol):
    """Query surface the rule engine reads from. Implementations must not mutate."""

    def switch_value(self, switch_id: int) -> bool: ...

    def variable_value(self, variable_id: int) -> int: ...

    def party_gold(self) -> int: ...

    def party_has_actor(self, actor_id: int) -> bool: ...

    def item_count(self, item_id: int) -> int: ...

    def weapon_count(self, weapon_id: int) -> int: ...

    def armour_count(self, armour_id: int) -> int: ...


@dataclass
class GameState:
    """Minimal game state snapshot implementing GameStateView.

    Database ids start at 1. Unset switches read as OFF and unset
    variables read as 0.
    """

    switches: Dict[int, bool] = field(default_factory=dict)
    variables: Dict[int, int] = field(default_factory=dict)
    gold: int = 0
    party_members: List[int] = field(default_factory=list)
    inventory: PartyInventory = field(default_factory=PartyInventory)

    def switch_value(self, switch_id: int) -> bool:
        return self.switches.get(_require_id(switch_id, "switch"), False)

    def variable_value(self, variable_id: int) -> int:
        return self.variables.get(_require_id(variable_id, "variable"), 0)

    def party_gold(self) -> int:
        return self.gold

    def party_has_actor(self, actor_id: int) -> bool:
        return _require_id(actor_id, "actor") in self.party_members

    def item_count(self, item_id: int) -> int:
        return self.inventory.item_count(_require_id(item_id, "item"))

    def weapon_count(self, weapon_id: int) -> int:
        return self.inventory.weapon_count(_require_id(weapon_id, "weapon"))

    def armour_count(self, armour_id: int) -> int:
        return self.inventory.armour_count(_require_id(armour_id, "armour"))


def _require_id(value: int, kind: str) -> int:
    if value < 1:
        raise UnknownReferenceError(f"No {kind} with id {value}.")
    return value
