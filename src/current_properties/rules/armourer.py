"""Armament rules: who can wear what, and at what cost to agility."""

from current_properties.properties.codes import ArmamentCode, BodyArmorCode, HelmCode
from current_properties.properties.derived import round_half_up
from current_properties.properties.values import Size, Strength
from current_properties.rules.loader import BodyArmorEntry, HelmEntry


def is_without_armament(armament: ArmamentCode) -> bool:
    """Whether the code stands for wearing no body armor or no helm."""
    return armament is BodyArmorCode.WITHOUT_ARMOR or armament is HelmCode.WITHOUT_HELM


class Armourer:
    """
    Armament rules backed by an armaments table.

    The strength a body armor requires grows with the size of its bearer, as a
    bigger body needs a bigger armor; helms are the same for everyone. An
    armament lacking at most ``max_missing_strength`` can still be worn, with
    an agility malus of half the missing strength.
    """

    def __init__(
        self,
        body_armors: dict[BodyArmorCode, BodyArmorEntry],
        helms: dict[HelmCode, HelmEntry],
        max_missing_strength: int = 10,
    ) -> None:
        self.body_armors = body_armors
        self.helms = helms
        self.max_missing_strength = max_missing_strength

    def get_required_strength(self, armament: ArmamentCode, size: Size) -> int:
        """
        Get strength needed to wear an armament without any malus.

        Args:
            armament: Body armor or helm code
            size: Size of the bearer

        Returns:
            Required strength

        Raises:
            KeyError: If the armament is not in the table
        """
        if isinstance(armament, BodyArmorCode):
            required_strength = self.body_armors[armament].required_strength
            if armament is BodyArmorCode.WITHOUT_ARMOR:
                return required_strength
            return required_strength + size.value
        return self.helms[armament].required_strength

    def get_missing_strength(self, armament: ArmamentCode, strength: Strength, size: Size) -> int:
        """Strength lacking to wear the armament without malus, 0 if none is lacking."""
        if is_without_armament(armament):
            return 0
        return max(0, self.get_required_strength(armament, size) - strength.value)

    def can_use_armament(self, armament: ArmamentCode, strength: Strength, size: Size) -> bool:
        if is_without_armament(armament):
            return True
        return self.get_missing_strength(armament, strength, size) <= self.max_missing_strength

    def get_agility_malus_by_strength_with_armor(
        self, armament: ArmamentCode, strength: Strength, size: Size
    ) -> int:
        """
        Get agility malus caused by wearing a too heavy armament.

        Args:
            armament: Body armor or helm code
            strength: Current strength of the bearer
            size: Size of the bearer

        Returns:
            Zero or negative malus
        """
        missing_strength = self.get_missing_strength(armament, strength, size)
        if missing_strength <= 0:
            return 0
        return -round_half_up(missing_strength / 2)
