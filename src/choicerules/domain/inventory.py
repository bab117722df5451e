"""Shared party inventory keyed by database id."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict


@dataclass(slots=True)
class PartyInventory:
    """Read-only counts of the party's items, weapons, and armours."""

    items: Dict[int, int] = field(default_factory=dict)
    weapons: Dict[int, int] = field(default_factory=dict)
    armours: Dict[int, int] = field(default_factory=dict)

    def item_count(self, item_id: int) -> int:
        return self.items.get(item_id, 0)

    def weapon_count(self, weapon_id: int) -> int:
        return self.weapons.get(weapon_id, 0)

    def armour_count(self, armour_id: int) -> int:
        return self.armours.get(armour_id, 0)
