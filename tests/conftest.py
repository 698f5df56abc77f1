"""Shared fixtures for all tests."""

import pytest

from current_properties.config import Settings, get_settings
from current_properties.properties.codes import RaceCode, SubRaceCode
from current_properties.rules import (
    Armourer,
    Race,
    RulesTables,
    StaticHealth,
    StaticPropertiesByLevels,
    build_armourer,
    build_tables,
    default_armourer,
    default_tables,
)


@pytest.fixture(autouse=True)
def clear_cached_settings(monkeypatch):
    """Isolate every test from the environment and cached settings.

    Settings, default tables and default armourer are cached for the whole
    process, so a test changing the environment would leak into others.
    """
    for name in ("RULES_DIR", "LOAD_STRENGTH_OFFSET", "MAX_MISSING_STRENGTH"):
        monkeypatch.delenv(f"CURRENT_PROPERTIES_{name}", raising=False)

    get_settings.cache_clear()
    default_tables.cache_clear()
    default_armourer.cache_clear()
    yield
    get_settings.cache_clear()
    default_tables.cache_clear()
    default_armourer.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings with bundled rules tables and default values."""
    return Settings(_env_file=None)


@pytest.fixture
def tables(settings: Settings) -> RulesTables:
    """Rules tables loaded from the bundled YAML."""
    return build_tables(settings)


@pytest.fixture
def armourer(settings: Settings) -> Armourer:
    """Armament rules loaded from the bundled YAML."""
    return build_armourer(settings)


@pytest.fixture
def properties_by_levels() -> StaticPropertiesByLevels:
    """An average elven adventurer after a few levels."""
    return StaticPropertiesByLevels(
        strength=10,
        agility=8,
        knack=6,
        will=4,
        intelligence=5,
        charisma=3,
        size=2,
        height=3,
        height_in_cm=175.0,
        weight_in_kg=68.0,
        age=32,
        toughness=1,
        endurance=2,
        wound_boundary=10,
        fatigue_boundary=11,
    )


@pytest.fixture
def health() -> StaticHealth:
    """Slightly ill, not wounded."""
    return StaticHealth(strength_malus=-1, agility_malus=-1)


@pytest.fixture
def elf() -> Race:
    """Common elf, remarkable in sight."""
    return Race(race_code=RaceCode.ELF, subrace_code=SubRaceCode.COMMON)
