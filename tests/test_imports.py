def test_import_choicerules_package() -> None:
    import importlib

    module = importlib.import_module("choicerules")
    assert module is not None


def test_import_services_no_side_effects() -> None:
    from choicerules.services import ConditionalChoiceService
    from choicerules.domain.config import EngineConfig
    from choicerules.domain.state import GameState

    service = ConditionalChoiceService(EngineConfig(), GameState())
    assert not service.active


def test_data_package_exports() -> None:
    import choicerules.data as data

    assert sorted(data.__all__) == [
        "DataError",
        "DataLoadError",
        "DataValidationError",
        "get_definitions_path",
    ]


def test_repository_base_surface() -> None:
    from choicerules.data.repositories.base import RepositoryBase

    assert hasattr(RepositoryBase, "get")
    assert not hasattr(RepositoryBase, "all")


def test_party_inventory_is_read_only_lookup() -> None:
    from choicerules.domain.inventory import PartyInventory

    for name in ("add_item", "remove_item", "add_weapon", "remove_weapon", "add_armour", "remove_armour"):
        assert not hasattr(PartyInventory, name)
