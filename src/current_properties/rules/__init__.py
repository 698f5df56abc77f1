"""Default rules tables and collaborators for current properties."""

from dataclasses import dataclass
from functools import lru_cache

from current_properties.config import Settings, get_settings

from .armourer import Armourer
from .loader import load_armaments, load_races
from .races_table import RacesTable
from .static import Race, StaticHealth, StaticPropertiesByLevels
from .weight_table import WeightTable, get_weight_bonus


@dataclass(frozen=True)
class RulesTables:
    """Rules tables shared by current properties and races."""

    weight_table: WeightTable
    races_table: RacesTable


def build_tables(settings: Settings) -> RulesTables:
    """Build rules tables from the files and values of ``settings``."""
    return RulesTables(
        weight_table=WeightTable(load_strength_offset=settings.load_strength_offset),
        races_table=RacesTable(load_races(settings.races_file)),
    )


def build_armourer(settings: Settings) -> Armourer:
    """Build armament rules from the files and values of ``settings``."""
    body_armors, helms = load_armaments(settings.armaments_file)
    return Armourer(body_armors, helms, max_missing_strength=settings.max_missing_strength)


@lru_cache
def default_tables() -> RulesTables:
    """Get cached rules tables for the current settings."""
    return build_tables(get_settings())


@lru_cache
def default_armourer() -> Armourer:
    """Get cached armament rules for the current settings."""
    return build_armourer(get_settings())


__all__ = [
    "Armourer",
    "Race",
    "RacesTable",
    "RulesTables",
    "StaticHealth",
    "StaticPropertiesByLevels",
    "WeightTable",
    "build_armourer",
    "build_tables",
    "default_armourer",
    "default_tables",
    "get_weight_bonus",
]
