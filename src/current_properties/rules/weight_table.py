"""Weight bonuses and the malus from carried load."""

import math

from current_properties.properties.derived import round_half_up
from current_properties.properties.values import Strength


def get_weight_bonus(weight_in_kg: float) -> int:
    """
    Convert weight to its bonus; every +20 means ten times heavier.

    Args:
        weight_in_kg: Positive weight in kilograms

    Returns:
        Weight bonus, 0 for 1 kg

    Examples:
        >>> get_weight_bonus(1)
        0
        >>> get_weight_bonus(10)
        20
        >>> get_weight_bonus(100)
        40
    """
    if weight_in_kg <= 0:
        raise ValueError(f"Weight must be positive, got {weight_in_kg}")
    return round_half_up(20 * math.log10(weight_in_kg))


class WeightTable:
    """
    Load rules.

    A bearer carries without malus a cargo whose weight bonus is at most their
    strength plus ``load_strength_offset``. Every two points of weight bonus
    above that cost one point of malus.
    """

    def __init__(self, load_strength_offset: int = 20) -> None:
        self.load_strength_offset = load_strength_offset

    def get_missing_strength_for_load(self, strength: Strength, cargo_weight: float) -> int:
        if cargo_weight <= 0:
            return 0
        required_strength = get_weight_bonus(cargo_weight) - self.load_strength_offset
        return max(0, required_strength - strength.value)

    def get_malus_from_load(self, strength: Strength, cargo_weight: float) -> int:
        """
        Get malus caused by carrying a cargo.

        Args:
            strength: Strength of the bearer, without any malus from load
            cargo_weight: Weight of the cargo in kg, 0 for no cargo

        Returns:
            Zero or negative malus
        """
        missing_strength = self.get_missing_strength_for_load(strength, cargo_weight)
        if missing_strength == 0:
            return 0
        return -round_half_up(missing_strength / 2)
