"""Read-only collaborators consumed by the current properties snapshot.

The snapshot never owns level progression, health, race data or armament
rules; it only asks these interfaces for values. Default implementations
live in :mod:`current_properties.rules`.
"""

from typing import Protocol

from current_properties.properties.codes import ArmamentCode, RaceCode, SubRaceCode
from current_properties.properties.values import (
    Age,
    Agility,
    BodyWeightInKg,
    Charisma,
    Endurance,
    FatigueBoundary,
    Height,
    HeightInCm,
    Intelligence,
    Knack,
    Size,
    Strength,
    Toughness,
    Will,
    WoundBoundary,
)


class BaseAttributeProvider(Protocol):
    """Properties given by race, gender and levels, without any situational malus."""

    def get_strength(self) -> Strength: ...

    def get_agility(self) -> Agility: ...

    def get_knack(self) -> Knack: ...

    def get_will(self) -> Will: ...

    def get_intelligence(self) -> Intelligence: ...

    def get_charisma(self) -> Charisma: ...

    def get_size(self) -> Size: ...

    def get_height(self) -> Height: ...

    def get_height_in_cm(self) -> HeightInCm: ...

    def get_weight_in_kg(self) -> BodyWeightInKg: ...

    def get_age(self) -> Age: ...

    def get_toughness(self) -> Toughness: ...

    def get_endurance(self) -> Endurance: ...

    def get_wound_boundary(self) -> WoundBoundary: ...

    def get_fatigue_boundary(self) -> FatigueBoundary: ...


class HealthState(Protocol):
    """Maluses caused by afflictions and pains. All maluses are zero or negative."""

    def get_strength_malus_from_afflictions(self) -> int: ...

    def get_agility_malus_from_afflictions(self) -> int: ...

    def get_knack_malus_from_afflictions(self) -> int: ...

    def get_will_malus_from_afflictions(self) -> int: ...

    def get_intelligence_malus_from_afflictions(self) -> int: ...

    def get_charisma_malus_from_afflictions(self) -> int: ...

    def get_significant_malus_from_pains(self, wound_boundary: WoundBoundary) -> int: ...


class LoadMaluses(Protocol):
    """Malus caused by carrying a cargo."""

    def get_malus_from_load(self, strength: Strength, cargo_weight: float) -> int: ...


class RaceSensesTable(Protocol):
    """Race related rules needed for senses."""

    def get_senses_bonus(self, race_code: RaceCode, subrace_code: SubRaceCode) -> int: ...

    def get_remarkable_sense(self, race_code: RaceCode, subrace_code: SubRaceCode) -> object: ...


class Tables(Protocol):
    """Bundle of rules tables shared by the snapshot and the race."""

    @property
    def weight_table(self) -> LoadMaluses: ...

    @property
    def races_table(self) -> RaceSensesTable: ...


class RaceDescriptor(Protocol):
    """Race and subrace of a character."""

    def get_race_code(self) -> RaceCode: ...

    def get_subrace_code(self) -> SubRaceCode: ...

    def get_remarkable_sense(self, tables: Tables) -> object:
        """Return the race's remarkable sense as anything convertible to a string."""
        ...


class EquipmentFeasibilityOracle(Protocol):
    """Armament rules deciding what a bearer of given strength and size can wear."""

    def can_use_armament(self, armament: ArmamentCode, strength: Strength, size: Size) -> bool: ...

    def get_agility_malus_by_strength_with_armor(
        self, armament: ArmamentCode, strength: Strength, size: Size
    ) -> int: ...
