"""Race rules relevant to senses."""

from current_properties.properties.codes import RaceCode, SubRaceCode
from current_properties.rules.loader import RaceEntry


class RacesTable:
    """Senses bonuses and remarkable senses of races and subraces."""

    def __init__(self, races: dict[tuple[RaceCode, SubRaceCode], RaceEntry]) -> None:
        self.races = races

    def get_race(self, race_code: RaceCode, subrace_code: SubRaceCode) -> RaceEntry:
        """
        Get the table row of a race.

        Raises:
            KeyError: If the race has no such subrace
        """
        try:
            return self.races[(race_code, subrace_code)]
        except KeyError:
            raise KeyError(f"Unknown subrace '{subrace_code}' of race '{race_code}'") from None

    def get_senses_bonus(self, race_code: RaceCode, subrace_code: SubRaceCode) -> int:
        return self.get_race(race_code, subrace_code).senses

    def get_remarkable_sense(self, race_code: RaceCode, subrace_code: SubRaceCode) -> str | None:
        """Remarkable sense as its plain table value, None for races without one."""
        remarkable_sense = self.get_race(race_code, subrace_code).remarkable_sense
        return remarkable_sense.value if remarkable_sense is not None else None
