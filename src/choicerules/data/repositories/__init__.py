"""Repository exports."""

from .engine_config_repo import EngineConfigRepository, parse_text_substitutions
from .scenario_repo import ScenarioRepository

__all__ = [
    "EngineConfigRepository",
    "ScenarioRepository",
    "parse_text_substitutions",
]
