"""Tests for loading rules tables from YAML."""

from pathlib import Path

import pytest
import yaml

from current_properties.config import BUNDLED_RULES_DIR
from current_properties.exceptions import RulesTableLoadError, RulesTableValidationError
from current_properties.properties.codes import (
    BodyArmorCode,
    HelmCode,
    RaceCode,
    RemarkableSenseCode,
    SubRaceCode,
)
from current_properties.rules.loader import load_armaments, load_races, load_yaml_file


def write_yaml(path: Path, data: object) -> Path:
    """Dump ``data`` as YAML into ``path``."""
    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(data, f)
    return path


class TestLoadYamlFile:
    """Tests for reading table rows."""

    def test_missing_file(self, tmp_path):
        """A missing file is a load error."""
        with pytest.raises(RulesTableLoadError, match="File not found"):
            load_yaml_file(tmp_path / "nope.yaml", "races")

    def test_empty_file(self, tmp_path):
        """An empty file is a load error."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        with pytest.raises(RulesTableLoadError, match="Empty YAML file"):
            load_yaml_file(path, "races")

    def test_missing_key(self, tmp_path):
        """Rows must be under the expected key."""
        path = write_yaml(tmp_path / "races.yaml", {"people": []})

        with pytest.raises(RulesTableLoadError, match="Missing 'races' key"):
            load_yaml_file(path, "races")

    def test_rows_not_a_list(self, tmp_path):
        """Rows must be a list."""
        path = write_yaml(tmp_path / "races.yaml", {"races": {"race": "elf"}})

        with pytest.raises(RulesTableLoadError, match="must be a list"):
            load_yaml_file(path, "races")

    def test_malformed_yaml(self, tmp_path):
        """Unparseable YAML is a load error."""
        path = tmp_path / "broken.yaml"
        path.write_text("races: [unclosed", encoding="utf-8")

        with pytest.raises(RulesTableLoadError, match="YAML parsing error"):
            load_yaml_file(path, "races")


class TestLoadArmaments:
    """Tests for the armaments table."""

    def test_bundled_table_complete(self):
        """The bundled table has every body armor and helm."""
        body_armors, helms = load_armaments(BUNDLED_RULES_DIR / "armaments.yaml")

        assert set(body_armors) == set(BodyArmorCode)
        assert set(helms) == set(HelmCode)
        assert body_armors[BodyArmorCode.WITHOUT_ARMOR].required_strength == 0
        assert helms[HelmCode.GREAT_HELM].required_strength == 6

    def test_unknown_armament(self, tmp_path):
        """Unknown codes fail validation."""
        path = write_yaml(
            tmp_path / "armaments.yaml",
            {
                "body_armors": [{"code": "mithril_shirt", "required_strength": 1}],
                "helms": [],
            },
        )

        with pytest.raises(RulesTableValidationError, match="BodyArmorEntry"):
            load_armaments(path)

    def test_incomplete_table(self, tmp_path):
        """Every armament must be in the table."""
        path = write_yaml(
            tmp_path / "armaments.yaml",
            {
                "body_armors": [{"code": "without_armor", "required_strength": 0}],
                "helms": [{"code": "without_helm", "required_strength": 0}],
            },
        )

        with pytest.raises(RulesTableValidationError, match="padded_armor"):
            load_armaments(path)


class TestLoadRaces:
    """Tests for the races table."""

    def test_bundled_table(self):
        """The bundled table knows every race."""
        races = load_races(BUNDLED_RULES_DIR / "races.yaml")

        assert {race for race, _ in races} == set(RaceCode)
        elf = races[(RaceCode.ELF, SubRaceCode.COMMON)]
        assert elf.remarkable_sense is RemarkableSenseCode.SIGHT
        assert races[(RaceCode.HUMAN, SubRaceCode.COMMON)].remarkable_sense is None

    def test_duplicate_race(self, tmp_path):
        """A race with subrace may be defined only once."""
        row = {"race": "orc", "subrace": "goblin", "senses": 1, "remarkable_sense": "smell"}
        path = write_yaml(tmp_path / "races.yaml", {"races": [row, row]})

        with pytest.raises(RulesTableValidationError, match="Duplicate race 'orc'"):
            load_races(path)

    def test_invalid_senses(self, tmp_path):
        """Senses bonus must be a number."""
        row = {"race": "orc", "subrace": "goblin", "senses": "sharp"}
        path = write_yaml(tmp_path / "races.yaml", {"races": [row]})

        with pytest.raises(RulesTableValidationError, match="Row 0"):
            load_races(path)
