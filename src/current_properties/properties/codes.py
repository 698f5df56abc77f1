"""Codes of armaments, races and senses."""

from enum import Enum, StrEnum


class BodyArmorCode(StrEnum):
    """Body armors, from none to the heaviest."""

    WITHOUT_ARMOR = "without_armor"
    PADDED_ARMOR = "padded_armor"
    LEATHER_ARMOR = "leather_armor"
    HOBNAILED_ARMOR = "hobnailed_armor"
    CHAINMAIL_ARMOR = "chainmail_armor"
    SCALE_ARMOR = "scale_armor"
    PLATE_ARMOR = "plate_armor"
    FULL_PLATE_ARMOR = "full_plate_armor"


class HelmCode(StrEnum):
    """Helms, from none to the heaviest."""

    WITHOUT_HELM = "without_helm"
    LEATHER_CAP = "leather_cap"
    CHAINMAIL_HOOD = "chainmail_hood"
    CONICAL_HELM = "conical_helm"
    FULL_HELM = "full_helm"
    BARREL_HELM = "barrel_helm"
    GREAT_HELM = "great_helm"


# Anything that can be worn and checked against strength
ArmamentCode = BodyArmorCode | HelmCode


class RaceCode(StrEnum):
    """Playable races."""

    HUMAN = "human"
    ELF = "elf"
    DWARF = "dwarf"
    HOBBIT = "hobbit"
    KROLL = "kroll"
    ORC = "orc"


class SubRaceCode(StrEnum):
    """Subraces, each belonging to one race."""

    COMMON = "common"
    HIGHLANDER = "highlander"
    GREEN = "green"
    DARK = "dark"
    WOOD = "wood"
    MOUNTAIN = "mountain"
    WILD = "wild"
    SKURUT = "skurut"
    GOBLIN = "goblin"


class RemarkableSenseCode(StrEnum):
    """Senses a race can excel in."""

    HEARING = "hearing"
    SIGHT = "sight"
    SMELL = "smell"
    TASTE = "taste"
    TOUCH = "touch"


def normalize_code(code: object) -> str:
    """
    Convert a code to the canonical form used for comparing codes.

    Codes defined by independent enumerations (or plain strings from a rules
    table) are only comparable through their values.

    Args:
        code: Enum member, string or anything convertible to a string

    Returns:
        Stripped lowercase value; empty string for None

    Examples:
        >>> normalize_code(RemarkableSenseCode.SIGHT)
        'sight'
        >>> normalize_code(" Sight ")
        'sight'
    """
    if code is None:
        return ""
    if isinstance(code, Enum):
        code = code.value
    return str(code).strip().lower()
