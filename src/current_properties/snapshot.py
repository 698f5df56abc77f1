"""Current properties of a character.

A snapshot of properties as they are in a given situation: affected by
afflictions, worn armor and helm, and the weight of the carried cargo.
Properties are calculated on first access and remembered for the lifetime of
the snapshot. To see numbers for a different equipment or cargo, create a new
snapshot, because a changed load can make previously usable armaments
unusable.
"""

import threading
from collections.abc import Callable
from typing import TypeVar

import structlog

from current_properties.exceptions import ArmamentUnwearable
from current_properties.interfaces import (
    BaseAttributeProvider,
    EquipmentFeasibilityOracle,
    HealthState,
    RaceDescriptor,
    Tables,
)
from current_properties.properties.codes import (
    ArmamentCode,
    BodyArmorCode,
    HelmCode,
    RemarkableSenseCode,
    normalize_code,
)
from current_properties.properties.derived import (
    calculate_beauty,
    calculate_dangerousness,
    calculate_dignity,
    calculate_senses,
    calculate_speed,
)
from current_properties.properties.values import (
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
    PropertyValue,
    Senses,
    Size,
    Speed,
    Strength,
    Toughness,
    Will,
    WoundBoundary,
)

logger = structlog.get_logger(__name__)

# Key of senses when no remarkable sense is used
WITHOUT_REMARKABLE_SENSE = "without_remarkable_sense"

# Offhand is weaker than the main hand
OFFHAND_STRENGTH_MALUS = 2

_STRENGTH = "strength"
_STRENGTH_WITHOUT_MALUS_FROM_LOAD = "strength_without_malus_from_load"
_STRENGTH_OF_OFFHAND = "strength_of_offhand"
_AGILITY = "agility"
_KNACK = "knack"
_WILL = "will"
_INTELLIGENCE = "intelligence"
_CHARISMA = "charisma"
_SPEED = "speed"
_BEAUTY = "beauty"
_DANGEROUSNESS = "dangerousness"
_DIGNITY = "dignity"

V = TypeVar("V", bound=PropertyValue)


class CurrentProperties:
    """
    Situational properties of a character.

    All getters are side effect free; each calculated property is computed at
    most once per snapshot, even on concurrent first access.
    """

    def __init__(
        self,
        properties_by_levels: BaseAttributeProvider,
        health: HealthState,
        race: RaceDescriptor,
        worn_body_armor: BodyArmorCode,
        worn_helm: HelmCode,
        cargo_weight: float,
        tables: Tables,
        armourer: EquipmentFeasibilityOracle,
    ) -> None:
        """
        Create the snapshot and check that worn armaments are usable.

        Args:
            properties_by_levels: Properties given by levels
            health: Current health with its afflictions and pains
            race: Race of the character
            worn_body_armor: Body armor, BodyArmorCode.WITHOUT_ARMOR for none
            worn_helm: Helm, HelmCode.WITHOUT_HELM for none
            cargo_weight: Weight of the carried cargo in kg
            tables: Rules tables with the weight table and races table
            armourer: Armament rules

        Raises:
            ArmamentUnwearable: If the armor or the helm is too heavy for the
                current strength
        """
        self._properties_by_levels = properties_by_levels
        self._health = health
        self._race = race
        self._cargo_weight = cargo_weight
        self._tables = tables
        self._armourer = armourer
        self._lock = threading.RLock()
        self._calculated: dict[str, PropertyValue] = {}
        self._senses: dict[str, Senses] = {}

        self._guard_armament_wearable(worn_body_armor, self.get_strength(), self.get_size())
        self._worn_body_armor = worn_body_armor
        self._guard_armament_wearable(worn_helm, self.get_strength(), self.get_size())
        self._worn_helm = worn_helm

        logger.debug(
            "current_properties_created",
            body_armor=str(worn_body_armor),
            helm=str(worn_helm),
            cargo_weight=cargo_weight,
            strength=self.get_strength().value,
        )

    def _guard_armament_wearable(
        self, armament: ArmamentCode, strength: Strength, size: Size
    ) -> None:
        if not self._armourer.can_use_armament(armament, strength, size):
            logger.warning(
                "armament_unwearable",
                armament=str(armament),
                size=size.value,
                strength=strength.value,
            )
            raise ArmamentUnwearable(armament, size, strength)

    def _remember(self, key: str, calculate: Callable[[], V]) -> V:
        """Return the property stored under ``key``, calculating it on first access."""
        try:
            return self._calculated[key]  # type: ignore[return-value]
        except KeyError:
            pass
        with self._lock:
            if key not in self._calculated:
                self._calculated[key] = calculate()
            return self._calculated[key]  # type: ignore[return-value]

    @property
    def worn_body_armor(self) -> BodyArmorCode:
        return self._worn_body_armor

    @property
    def worn_helm(self) -> HelmCode:
        return self._worn_helm

    @property
    def cargo_weight(self) -> float:
        return self._cargo_weight

    def get_strength(self) -> Strength:
        """
        Current strength, affected by afflictions and by the load.

        This is NOT the stable body strength used for endurance and similar
        body parameters. The malus from load is applied just once, even though
        it lowers the strength the malus is derived from.
        """
        return self._remember(_STRENGTH, self._calculate_strength)

    def _calculate_strength(self) -> Strength:
        strength_without_malus_from_load = self.get_strength_without_malus_from_load()
        return strength_without_malus_from_load.add(
            self._get_malus_from_load(strength_without_malus_from_load)
        )

    def get_strength_without_malus_from_load(self) -> Strength:
        return self._remember(
            _STRENGTH_WITHOUT_MALUS_FROM_LOAD,
            lambda: self._properties_by_levels.get_strength().add(
                self._health.get_strength_malus_from_afflictions()
            ),
        )

    def _get_malus_from_load(self, strength_without_malus_from_load: Strength) -> int:
        return self._tables.weight_table.get_malus_from_load(
            strength_without_malus_from_load, self._cargo_weight
        )

    def get_body_strength(self) -> Strength:
        """Stable strength given by levels only, not by a current weakness or a load."""
        return self._properties_by_levels.get_strength()

    def get_strength_of_main_hand(self) -> Strength:
        return self.get_strength()

    def get_strength_of_offhand(self) -> Strength:
        # try to carry your purchase in the offhand sometimes...
        return self._remember(
            _STRENGTH_OF_OFFHAND, lambda: self.get_strength().sub(OFFHAND_STRENGTH_MALUS)
        )

    def get_agility(self) -> Agility:
        return self._remember(
            _AGILITY,
            lambda: self._properties_by_levels.get_agility().add(self._get_agility_total_malus()),
        )

    def _get_agility_total_malus(self) -> int:
        strength = self.get_strength()
        size = self.get_size()
        agility_malus = 0
        agility_malus += self._armourer.get_agility_malus_by_strength_with_armor(
            self._worn_body_armor, strength, size
        )
        agility_malus += self._armourer.get_agility_malus_by_strength_with_armor(
            self._worn_helm, strength, size
        )
        agility_malus += self._health.get_agility_malus_from_afflictions()
        agility_malus += self._get_malus_from_load(self.get_strength_without_malus_from_load())
        return agility_malus

    def get_knack(self) -> Knack:
        return self._remember(
            _KNACK,
            lambda: self._properties_by_levels.get_knack()
            .add(self._health.get_knack_malus_from_afflictions())
            .add(self._get_malus_from_load(self.get_strength_without_malus_from_load())),
        )

    def get_will(self) -> Will:
        return self._remember(
            _WILL,
            lambda: self._properties_by_levels.get_will().add(
                self._health.get_will_malus_from_afflictions()
            ),
        )

    def get_intelligence(self) -> Intelligence:
        return self._remember(
            _INTELLIGENCE,
            lambda: self._properties_by_levels.get_intelligence().add(
                self._health.get_intelligence_malus_from_afflictions()
            ),
        )

    def get_charisma(self) -> Charisma:
        return self._remember(
            _CHARISMA,
            lambda: self._properties_by_levels.get_charisma().add(
                self._health.get_charisma_malus_from_afflictions()
            ),
        )

    def get_speed(self) -> Speed:
        return self._remember(
            _SPEED,
            lambda: calculate_speed(self.get_strength(), self.get_agility(), self.get_height()),
        )

    def get_senses(self, used_remarkable_sense: RemarkableSenseCode | None = None) -> Senses:
        """
        Senses, optionally with a remarkable sense used.

        A used remarkable sense gives +1 only if it is the remarkable sense of
        the character's race; any other sense gives plain senses.

        Args:
            used_remarkable_sense: Sense the character relies on, if any

        Returns:
            Senses including the malus from pains
        """
        with self._lock:
            if WITHOUT_REMARKABLE_SENSE not in self._senses:
                self._senses[WITHOUT_REMARKABLE_SENSE] = (
                    self._create_senses_without_remarkable_one_used()
                )
            senses_without_remarkable_one = self._senses[WITHOUT_REMARKABLE_SENSE]
            if used_remarkable_sense is None:
                return senses_without_remarkable_one

            key = normalize_code(used_remarkable_sense)
            if key not in self._senses:
                race_sense = normalize_code(self._race.get_remarkable_sense(self._tables))
                if race_sense == key:
                    self._senses[key] = senses_without_remarkable_one.add(1)
                else:
                    self._senses[key] = senses_without_remarkable_one
            return self._senses[key]

    def _create_senses_without_remarkable_one_used(self) -> Senses:
        base_senses = calculate_senses(
            self.get_knack(),
            self._race.get_race_code(),
            self._race.get_subrace_code(),
            self._tables.races_table,
        )
        return base_senses.add(
            self._health.get_significant_malus_from_pains(self.get_wound_boundary())
        )

    def get_beauty(self) -> Beauty:
        return self._remember(
            _BEAUTY,
            lambda: calculate_beauty(self.get_agility(), self.get_knack(), self.get_charisma()),
        )

    def get_dangerousness(self) -> Dangerousness:
        return self._remember(
            _DANGEROUSNESS,
            lambda: calculate_dangerousness(
                self.get_strength(), self.get_will(), self.get_charisma()
            ),
        )

    def get_dignity(self) -> Dignity:
        return self._remember(
            _DIGNITY,
            lambda: calculate_dignity(
                self.get_intelligence(), self.get_will(), self.get_charisma()
            ),
        )

    def get_size(self) -> Size:
        return self._properties_by_levels.get_size()

    def get_height(self) -> Height:
        """Bonus of height, usable for fight and speed."""
        return self._properties_by_levels.get_height()

    def get_height_in_cm(self) -> HeightInCm:
        return self._properties_by_levels.get_height_in_cm()

    def get_weight_in_kg(self) -> BodyWeightInKg:
        return self._properties_by_levels.get_weight_in_kg()

    def get_age(self) -> Age:
        return self._properties_by_levels.get_age()

    def get_toughness(self) -> Toughness:
        return self._properties_by_levels.get_toughness()

    def get_endurance(self) -> Endurance:
        return self._properties_by_levels.get_endurance()

    def get_wound_boundary(self) -> WoundBoundary:
        """Not affected by temporary maluses, same as given by levels."""
        return self._properties_by_levels.get_wound_boundary()

    def get_fatigue_boundary(self) -> FatigueBoundary:
        """Not affected by temporary maluses, same as given by levels."""
        return self._properties_by_levels.get_fatigue_boundary()

    def warm_up(self) -> "CurrentProperties":
        """
        Calculate every property once.

        A warmed up snapshot only reads its caches, so it can be shared between
        threads without any first-access contention.

        Returns:
            This snapshot
        """
        self.get_strength_of_offhand()
        self.get_speed()
        self.get_beauty()
        self.get_dangerousness()
        self.get_dignity()
        for sense in RemarkableSenseCode:
            self.get_senses(sense)
        self.get_senses()
        return self

    def __repr__(self) -> str:
        return (
            f"<CurrentProperties(body_armor='{self._worn_body_armor}', "
            f"helm='{self._worn_helm}', cargo_weight={self._cargo_weight})>"
        )


def create_current_properties(
    properties_by_levels: BaseAttributeProvider,
    health: HealthState,
    race: RaceDescriptor,
    worn_body_armor: BodyArmorCode,
    worn_helm: HelmCode,
    cargo_weight: float,
    tables: Tables,
    armourer: EquipmentFeasibilityOracle,
) -> CurrentProperties:
    """
    Create a validated snapshot of current properties.

    Either a fully usable snapshot is returned or ArmamentUnwearable is raised;
    no partially checked snapshot is ever handed out.

    Raises:
        ArmamentUnwearable: If the armor or the helm is too heavy
    """
    return CurrentProperties(
        properties_by_levels,
        health,
        race,
        worn_body_armor,
        worn_helm,
        cargo_weight,
        tables,
        armourer,
    )
