"""
Rules table loader for Current Properties.

Handles loading armament and race tables from YAML files and validating them.
"""

from pathlib import Path
from typing import Any, TypeVar

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from current_properties.exceptions import RulesTableLoadError, RulesTableValidationError
from current_properties.properties.codes import (
    BodyArmorCode,
    HelmCode,
    RaceCode,
    RemarkableSenseCode,
    SubRaceCode,
)

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=BaseModel)


class BodyArmorEntry(BaseModel):
    """
    Body armor row of the armaments table.

    Attributes:
        code: Body armor code (e.g., "chainmail_armor")
        required_strength: Strength needed to wear it without malus, before size
    """

    model_config = ConfigDict(frozen=True)

    code: BodyArmorCode = Field(..., description="Body armor code")
    required_strength: int = Field(..., description="Required strength before size")


class HelmEntry(BaseModel):
    """Helm row of the armaments table."""

    model_config = ConfigDict(frozen=True)

    code: HelmCode = Field(..., description="Helm code")
    required_strength: int = Field(..., description="Required strength")


class RaceEntry(BaseModel):
    """
    Race row of the races table.

    Attributes:
        race: Race code
        subrace: Subrace code
        senses: Bonus (or malus) of the race to senses
        remarkable_sense: Sense the race excels in, None if it has none
    """

    model_config = ConfigDict(frozen=True)

    race: RaceCode = Field(..., description="Race code")
    subrace: SubRaceCode = Field(..., description="Subrace code")
    senses: int = Field(default=0, description="Senses bonus")
    remarkable_sense: RemarkableSenseCode | None = Field(
        default=None, description="Remarkable sense of the race"
    )


def load_yaml_file(file_path: Path, key: str) -> list[dict[str, Any]]:
    """
    Load a list of table rows stored under ``key`` of a YAML file.

    Args:
        file_path: Path to the YAML file
        key: Top level key holding the rows

    Returns:
        List of row dictionaries

    Raises:
        RulesTableLoadError: If the file cannot be loaded or parsed
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise RulesTableLoadError(f"YAML parsing error in {file_path}: {e}") from e
    except FileNotFoundError as e:
        raise RulesTableLoadError(f"File not found: {file_path}") from e
    except OSError as e:
        raise RulesTableLoadError(f"Error loading {file_path}: {e}") from e

    if not data:
        raise RulesTableLoadError(f"Empty YAML file: {file_path}")

    if not isinstance(data, dict) or key not in data:
        raise RulesTableLoadError(f"Missing '{key}' key in {file_path}")

    rows = data[key]
    if not isinstance(rows, list):
        raise RulesTableLoadError(f"'{key}' must be a list in {file_path}")

    return rows


def _parse_rows(model: type[M], rows: list[dict[str, Any]], file_path: Path) -> list[M]:
    entries = []
    for index, row in enumerate(rows):
        try:
            entries.append(model.model_validate(row))
        except ValidationError as e:
            raise RulesTableValidationError(
                f"Row {index} in {file_path} is not a valid {model.__name__}: {e}"
            ) from e
    return entries


def load_armaments(
    file_path: Path,
) -> tuple[dict[BodyArmorCode, BodyArmorEntry], dict[HelmCode, HelmEntry]]:
    """
    Load the armaments table.

    Args:
        file_path: Path to armaments.yaml

    Returns:
        Tuple of (body armors by code, helms by code)

    Raises:
        RulesTableLoadError: If the file cannot be loaded
        RulesTableValidationError: If a row is invalid or an armament is missing
    """
    body_armor_rows = load_yaml_file(file_path, "body_armors")
    body_armors = {
        entry.code: entry for entry in _parse_rows(BodyArmorEntry, body_armor_rows, file_path)
    }
    helms = {
        entry.code: entry
        for entry in _parse_rows(HelmEntry, load_yaml_file(file_path, "helms"), file_path)
    }

    missing = [code.value for code in BodyArmorCode if code not in body_armors]
    missing += [code.value for code in HelmCode if code not in helms]
    if missing:
        raise RulesTableValidationError(
            f"Armaments table {file_path} is missing: {', '.join(missing)}"
        )

    logger.info(
        "rules_table_loaded",
        table="armaments",
        path=str(file_path),
        body_armors=len(body_armors),
        helms=len(helms),
    )
    return body_armors, helms


def load_races(file_path: Path) -> dict[tuple[RaceCode, SubRaceCode], RaceEntry]:
    """
    Load the races table.

    Args:
        file_path: Path to races.yaml

    Returns:
        Race rows keyed by (race, subrace)

    Raises:
        RulesTableLoadError: If the file cannot be loaded
        RulesTableValidationError: If a row is invalid or duplicated
    """
    races: dict[tuple[RaceCode, SubRaceCode], RaceEntry] = {}
    for entry in _parse_rows(RaceEntry, load_yaml_file(file_path, "races"), file_path):
        key = (entry.race, entry.subrace)
        if key in races:
            raise RulesTableValidationError(
                f"Duplicate race '{entry.race}' with subrace '{entry.subrace}' in {file_path}"
            )
        races[key] = entry

    logger.info("rules_table_loaded", table="races", path=str(file_path), races=len(races))
    return races
