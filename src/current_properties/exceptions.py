"""Errors raised by Current Properties."""

from current_properties.properties.codes import ArmamentCode
from current_properties.properties.values import Size, Strength


class CurrentPropertiesError(Exception):
    """Base class for all library errors."""

    pass


class ArmamentUnwearable(CurrentPropertiesError):
    """
    Raised when a worn armament is too heavy for the bearer's current strength.

    Attributes:
        armament: Code of the offending armament
        size: Size of the bearer the armament was checked against
        strength: Current (load adjusted) strength of the bearer
    """

    def __init__(self, armament: ArmamentCode, size: Size, strength: Strength) -> None:
        self.armament = armament
        self.size = size
        self.strength = strength
        super().__init__(
            f"'{armament}' with size {size} is too heavy to be used by with strength {strength}"
        )


# Same error under the name used for equipment in general
EquipmentUnwearable = ArmamentUnwearable


class RulesTableLoadError(CurrentPropertiesError):
    """Raised when there's an error loading a rules table."""

    pass


class RulesTableValidationError(CurrentPropertiesError):
    """Raised when rules table validation fails."""

    pass
