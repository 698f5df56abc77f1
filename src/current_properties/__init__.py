"""Current properties of DrD+ characters.

Situational properties of a character, affected by afflictions, worn armor
and helm, and carried cargo.
"""

from .exceptions import (
    ArmamentUnwearable,
    CurrentPropertiesError,
    EquipmentUnwearable,
    RulesTableLoadError,
    RulesTableValidationError,
)
from .logging_config import configure_logging
from .snapshot import WITHOUT_REMARKABLE_SENSE, CurrentProperties, create_current_properties

__all__ = [
    "WITHOUT_REMARKABLE_SENSE",
    "ArmamentUnwearable",
    "CurrentProperties",
    "CurrentPropertiesError",
    "EquipmentUnwearable",
    "RulesTableLoadError",
    "RulesTableValidationError",
    "configure_logging",
    "create_current_properties",
]
