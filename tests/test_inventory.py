from choicerules.domain.inventory import PartyInventory


def test_counts_by_bucket() -> None:
    inventory = PartyInventory(items={1: 2}, weapons={4: 1}, armours={7: 3})

    assert inventory.item_count(1) == 2
    assert inventory.weapon_count(4) == 1
    assert inventory.armour_count(7) == 3


def test_missing_entries_count_as_zero() -> None:
    inventory = PartyInventory(items={1: 2})

    assert inventory.item_count(2) == 0
    assert inventory.weapon_count(1) == 0
    assert inventory.armour_count(1) == 0


def test_buckets_are_independent_per_instance() -> None:
    first = PartyInventory()
    first.items[5] = 1

    assert PartyInventory().item_count(5) == 0
