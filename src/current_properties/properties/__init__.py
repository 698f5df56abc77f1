"""Property values, codes and derived property formulas."""

from .codes import (
    ArmamentCode,
    BodyArmorCode,
    HelmCode,
    RaceCode,
    RemarkableSenseCode,
    SubRaceCode,
    normalize_code,
)
from .derived import (
    calculate_beauty,
    calculate_dangerousness,
    calculate_dignity,
    calculate_senses,
    calculate_speed,
    round_half_up,
)
from .values import (
    Age,
    Agility,
    Beauty,
    BodyWeightInKg,
    Charisma,
    Dangerousness,
    Dignity,
    Endurance,
    FatigueBoundary,
    Height,
    HeightInCm,
    Intelligence,
    Knack,
    PropertyCode,
    PropertyValue,
    Senses,
    Size,
    Speed,
    Strength,
    Toughness,
    Will,
    WoundBoundary,
)

__all__ = [
    "Age",
    "Agility",
    "ArmamentCode",
    "Beauty",
    "BodyArmorCode",
    "BodyWeightInKg",
    "Charisma",
    "Dangerousness",
    "Dignity",
    "Endurance",
    "FatigueBoundary",
    "Height",
    "HeightInCm",
    "HelmCode",
    "Intelligence",
    "Knack",
    "PropertyCode",
    "PropertyValue",
    "RaceCode",
    "RemarkableSenseCode",
    "Senses",
    "Size",
    "Speed",
    "Strength",
    "SubRaceCode",
    "Toughness",
    "Will",
    "WoundBoundary",
    "calculate_beauty",
    "calculate_dangerousness",
    "calculate_dignity",
    "calculate_senses",
    "calculate_speed",
    "normalize_code",
    "round_half_up",
]
