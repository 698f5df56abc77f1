"""Typed property values.

Every property of a character is a small immutable value object. Values of
different properties never compare equal, even when their numbers match, so
a ``Strength`` can't silently stand in for an ``Agility``.
"""

from dataclasses import dataclass, replace
from enum import StrEnum
from typing import ClassVar, Self, SupportsInt


class PropertyCode(StrEnum):
    """Codes of all character properties."""

    STRENGTH = "strength"
    AGILITY = "agility"
    KNACK = "knack"
    WILL = "will"
    INTELLIGENCE = "intelligence"
    CHARISMA = "charisma"
    SIZE = "size"
    HEIGHT = "height"
    HEIGHT_IN_CM = "height_in_cm"
    WEIGHT_IN_KG = "weight_in_kg"
    AGE = "age"
    TOUGHNESS = "toughness"
    ENDURANCE = "endurance"
    WOUND_BOUNDARY = "wound_boundary"
    FATIGUE_BOUNDARY = "fatigue_boundary"
    SPEED = "speed"
    SENSES = "senses"
    BEAUTY = "beauty"
    DANGEROUSNESS = "dangerousness"
    DIGNITY = "dignity"


@dataclass(frozen=True)
class PropertyValue:
    """Integer valued property."""

    value: int

    code: ClassVar[PropertyCode]

    def add(self, value: SupportsInt) -> Self:
        """Return a new value of the same property raised by ``value``."""
        return replace(self, value=self.value + int(value))

    def sub(self, value: SupportsInt) -> Self:
        """Return a new value of the same property lowered by ``value``."""
        return replace(self, value=self.value - int(value))

    def __int__(self) -> int:
        return int(self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Strength(PropertyValue):
    code = PropertyCode.STRENGTH


@dataclass(frozen=True)
class Agility(PropertyValue):
    code = PropertyCode.AGILITY


@dataclass(frozen=True)
class Knack(PropertyValue):
    code = PropertyCode.KNACK


@dataclass(frozen=True)
class Will(PropertyValue):
    code = PropertyCode.WILL


@dataclass(frozen=True)
class Intelligence(PropertyValue):
    code = PropertyCode.INTELLIGENCE


@dataclass(frozen=True)
class Charisma(PropertyValue):
    code = PropertyCode.CHARISMA


@dataclass(frozen=True)
class Size(PropertyValue):
    code = PropertyCode.SIZE


@dataclass(frozen=True)
class Height(PropertyValue):
    """Bonus of height, used for speed and fight."""

    code = PropertyCode.HEIGHT


@dataclass(frozen=True)
class Age(PropertyValue):
    code = PropertyCode.AGE


@dataclass(frozen=True)
class Toughness(PropertyValue):
    code = PropertyCode.TOUGHNESS


@dataclass(frozen=True)
class Endurance(PropertyValue):
    code = PropertyCode.ENDURANCE


@dataclass(frozen=True)
class WoundBoundary(PropertyValue):
    code = PropertyCode.WOUND_BOUNDARY


@dataclass(frozen=True)
class FatigueBoundary(PropertyValue):
    code = PropertyCode.FATIGUE_BOUNDARY


@dataclass(frozen=True)
class Speed(PropertyValue):
    code = PropertyCode.SPEED


@dataclass(frozen=True)
class Senses(PropertyValue):
    code = PropertyCode.SENSES


@dataclass(frozen=True)
class Beauty(PropertyValue):
    code = PropertyCode.BEAUTY


@dataclass(frozen=True)
class Dangerousness(PropertyValue):
    code = PropertyCode.DANGEROUSNESS


@dataclass(frozen=True)
class Dignity(PropertyValue):
    code = PropertyCode.DIGNITY


@dataclass(frozen=True)
class Measurement:
    """Float valued body measurement."""

    value: float

    code: ClassVar[PropertyCode]

    def add(self, value: float) -> Self:
        """Return a new measurement raised by ``value``."""
        return replace(self, value=self.value + float(value))

    def sub(self, value: float) -> Self:
        return replace(self, value=self.value - float(value))

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class HeightInCm(Measurement):
    code = PropertyCode.HEIGHT_IN_CM


@dataclass(frozen=True)
class BodyWeightInKg(Measurement):
    code = PropertyCode.WEIGHT_IN_KG
