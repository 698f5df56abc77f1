"""Collaborators holding fixed values.

Useful when properties by levels and health are known up front, e.g. loaded
from a character sheet, instead of coming from their own subsystems.
"""

from pydantic import BaseModel, ConfigDict, Field

from current_properties.interfaces import Tables
from current_properties.properties.codes import RaceCode, SubRaceCode
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


class StaticPropertiesByLevels(BaseModel):
    """
    Properties given by race, gender and levels.

    Attributes:
        strength: Strength by levels
        agility: Agility by levels
        knack: Knack by levels
        will: Will by levels
        intelligence: Intelligence by levels
        charisma: Charisma by levels
        size: Size of the body
        height: Bonus of height
        height_in_cm: Height in centimeters
        weight_in_kg: Body weight in kilograms
        age: Age in years
        toughness: Toughness
        endurance: Endurance
        wound_boundary: Wound boundary
        fatigue_boundary: Fatigue boundary
    """

    model_config = ConfigDict(frozen=True)

    strength: int = Field(default=0, description="Strength by levels")
    agility: int = Field(default=0, description="Agility by levels")
    knack: int = Field(default=0, description="Knack by levels")
    will: int = Field(default=0, description="Will by levels")
    intelligence: int = Field(default=0, description="Intelligence by levels")
    charisma: int = Field(default=0, description="Charisma by levels")
    size: int = Field(default=0, description="Size of the body")
    height: int = Field(default=0, description="Bonus of height")
    height_in_cm: float = Field(default=180.0, gt=0, description="Height in centimeters")
    weight_in_kg: float = Field(default=80.0, gt=0, description="Body weight in kilograms")
    age: int = Field(default=20, ge=0, description="Age in years")
    toughness: int = Field(default=0, description="Toughness")
    endurance: int = Field(default=0, description="Endurance")
    wound_boundary: int = Field(default=10, description="Wound boundary")
    fatigue_boundary: int = Field(default=10, description="Fatigue boundary")

    def get_strength(self) -> Strength:
        return Strength(self.strength)

    def get_agility(self) -> Agility:
        return Agility(self.agility)

    def get_knack(self) -> Knack:
        return Knack(self.knack)

    def get_will(self) -> Will:
        return Will(self.will)

    def get_intelligence(self) -> Intelligence:
        return Intelligence(self.intelligence)

    def get_charisma(self) -> Charisma:
        return Charisma(self.charisma)

    def get_size(self) -> Size:
        return Size(self.size)

    def get_height(self) -> Height:
        return Height(self.height)

    def get_height_in_cm(self) -> HeightInCm:
        return HeightInCm(self.height_in_cm)

    def get_weight_in_kg(self) -> BodyWeightInKg:
        return BodyWeightInKg(self.weight_in_kg)

    def get_age(self) -> Age:
        return Age(self.age)

    def get_toughness(self) -> Toughness:
        return Toughness(self.toughness)

    def get_endurance(self) -> Endurance:
        return Endurance(self.endurance)

    def get_wound_boundary(self) -> WoundBoundary:
        return WoundBoundary(self.wound_boundary)

    def get_fatigue_boundary(self) -> FatigueBoundary:
        return FatigueBoundary(self.fatigue_boundary)


class StaticHealth(BaseModel):
    """
    Health with fixed maluses.

    Pains become significant once the suffered wounds reach the wound
    boundary; until then they cause no malus.
    """

    model_config = ConfigDict(frozen=True)

    strength_malus: int = Field(default=0, le=0, description="Strength malus from afflictions")
    agility_malus: int = Field(default=0, le=0, description="Agility malus from afflictions")
    knack_malus: int = Field(default=0, le=0, description="Knack malus from afflictions")
    will_malus: int = Field(default=0, le=0, description="Will malus from afflictions")
    intelligence_malus: int = Field(
        default=0, le=0, description="Intelligence malus from afflictions"
    )
    charisma_malus: int = Field(default=0, le=0, description="Charisma malus from afflictions")
    wounds: int = Field(default=0, ge=0, description="Suffered wounds")
    pains_malus: int = Field(default=0, le=0, description="Malus from pains once significant")

    def get_strength_malus_from_afflictions(self) -> int:
        return self.strength_malus

    def get_agility_malus_from_afflictions(self) -> int:
        return self.agility_malus

    def get_knack_malus_from_afflictions(self) -> int:
        return self.knack_malus

    def get_will_malus_from_afflictions(self) -> int:
        return self.will_malus

    def get_intelligence_malus_from_afflictions(self) -> int:
        return self.intelligence_malus

    def get_charisma_malus_from_afflictions(self) -> int:
        return self.charisma_malus

    def get_significant_malus_from_pains(self, wound_boundary: WoundBoundary) -> int:
        if self.wounds < wound_boundary.value:
            return 0
        return self.pains_malus


class Race(BaseModel):
    """Race and subrace of a character."""

    model_config = ConfigDict(frozen=True)

    race_code: RaceCode = Field(..., description="Race code")
    subrace_code: SubRaceCode = Field(..., description="Subrace code")

    def get_race_code(self) -> RaceCode:
        return self.race_code

    def get_subrace_code(self) -> SubRaceCode:
        return self.subrace_code

    def get_remarkable_sense(self, tables: Tables) -> object:
        return tables.races_table.get_remarkable_sense(self.race_code, self.subrace_code)
