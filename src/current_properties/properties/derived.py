"""Formulas of derived properties.

Each formula is a pure function of already resolved properties:

- Speed: average of strength and agility, plus a third of height minus 2
- Beauty: average of agility and knack, plus half of charisma
- Dangerousness: average of strength and will, plus half of charisma
- Dignity: average of intelligence and will, plus half of charisma
- Senses: knack plus the senses bonus of race and subrace

Halves are rounded away from zero.
"""

import math
from typing import TYPE_CHECKING

from current_properties.properties.values import (
    Agility,
    Beauty,
    Charisma,
    Dangerousness,
    Dignity,
    Height,
    Intelligence,
    Knack,
    Senses,
    Speed,
    Strength,
    Will,
)

if TYPE_CHECKING:
    from current_properties.interfaces import RaceSensesTable
    from current_properties.properties.codes import RaceCode, SubRaceCode


def round_half_up(number: float) -> int:
    """Round to the nearest integer, halves away from zero.

    Examples:
        >>> round_half_up(2.5)
        3
        >>> round_half_up(-2.5)
        -3
        >>> round_half_up(2.4)
        2
    """
    rounded = math.floor(abs(number) + 0.5)
    return int(rounded) if number >= 0 else -int(rounded)


def calculate_speed(strength: Strength, agility: Agility, height: Height) -> Speed:
    average = (strength.value + agility.value) / 2
    return Speed(round_half_up(average + (height.value / 3 - 2)))


def calculate_beauty(agility: Agility, knack: Knack, charisma: Charisma) -> Beauty:
    average = (agility.value + knack.value) / 2
    return Beauty(round_half_up(average + charisma.value / 2))


def calculate_dangerousness(strength: Strength, will: Will, charisma: Charisma) -> Dangerousness:
    average = (strength.value + will.value) / 2
    return Dangerousness(round_half_up(average + charisma.value / 2))


def calculate_dignity(intelligence: Intelligence, will: Will, charisma: Charisma) -> Dignity:
    average = (intelligence.value + will.value) / 2
    return Dignity(round_half_up(average + charisma.value / 2))


def calculate_senses(
    knack: Knack,
    race_code: "RaceCode",
    subrace_code: "SubRaceCode",
    races_table: "RaceSensesTable",
) -> Senses:
    """
    Calculate senses before any malus from pains.

    Args:
        knack: Current knack
        race_code: Race of the character
        subrace_code: Subrace of the character
        races_table: Table giving the senses bonus of a race

    Returns:
        Senses without any remarkable sense used
    """
    return Senses(knack.value + races_table.get_senses_bonus(race_code, subrace_code))
