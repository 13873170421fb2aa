"""
Roster loader module for Mercdex.

Handles loading and validating the roster and filter-option resources.
Both are JSON files; hand-authored YAML files are accepted as well.
"""

import json
from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import ValidationError

from mercdex.config import Settings, get_settings
from mercdex.engine.filters import FILTER_RESOURCE_KEYS
from mercdex.errors import MercdexError

from .record import CharacterRecord
from .store import RosterStore

logger = structlog.get_logger(__name__)

YAML_SUFFIXES = (".yaml", ".yml")


class RosterLoadError(MercdexError):
    """Raised when there's an error loading a roster resource."""

    pass


class RosterValidationError(MercdexError):
    """Raised when roster or filter-option validation fails."""

    pass


def load_data_file(file_path: Path) -> Any:
    """
    Load and parse a JSON or YAML resource file.

    Args:
        file_path: Path to the resource file

    Returns:
        The parsed document

    Raises:
        RosterLoadError: If the file cannot be read or parsed, or is empty
    """
    try:
        with open(file_path, encoding="utf-8") as f:
            if file_path.suffix.lower() in YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
    except FileNotFoundError:
        raise RosterLoadError(f"File not found: {file_path}") from None
    except json.JSONDecodeError as e:
        raise RosterLoadError(f"JSON parsing error in {file_path}: {e}") from e
    except yaml.YAMLError as e:
        raise RosterLoadError(f"YAML parsing error in {file_path}: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise RosterLoadError(f"Error loading {file_path}: {e}") from e

    if data is None:
        raise RosterLoadError(f"Empty resource file: {file_path}")

    return data


def validate_record_data(record_data: Any, position: int, file_path: Path | None) -> None:
    """
    Validate the identity fields of one raw roster entry.

    Only name and faction are checked here; malformed optional fields fall
    back to their defaults when the record is created.

    Args:
        record_data: Raw entry from the roster resource
        position: Index of the entry (for error messages)
        file_path: Path to the source file (for error messages)

    Raises:
        RosterValidationError: If the entry is not an object or lacks name/faction
    """
    source = file_path or "roster"

    if not isinstance(record_data, dict):
        raise RosterValidationError(f"Entry {position} in {source} is not an object")

    for field in ("name", "faction"):
        value = record_data.get(field)
        if not isinstance(value, str) or not value:
            merc_name = record_data.get("name") or f"#{position}"
            raise RosterValidationError(
                f"Mercenary '{merc_name}' in {source} missing required field: {field}"
            )


def create_record_from_data(record_data: dict[str, Any]) -> CharacterRecord:
    """
    Create a CharacterRecord from raw resource data.

    Raises:
        RosterValidationError: If Pydantic validation fails
    """
    try:
        return CharacterRecord.model_validate(record_data)
    except ValidationError as e:
        raise RosterValidationError(
            f"Failed to create mercenary '{record_data.get('name', 'unknown')}': {e}"
        ) from e


def build_records(raw_records: Any, file_path: Path | None = None) -> list[CharacterRecord]:
    """
    Validate raw roster entries and build records, keeping resource order.

    Args:
        raw_records: Parsed roster resource (must be a list)
        file_path: Path to the source file (for error messages)

    Returns:
        List of CharacterRecord instances

    Raises:
        RosterLoadError: If the resource is not a list
        RosterValidationError: If an entry is invalid or a name repeats
    """
    if not isinstance(raw_records, list):
        raise RosterLoadError(f"Roster in {file_path or 'resource'} must be a list")

    records: list[CharacterRecord] = []
    seen: set[str] = set()

    for position, record_data in enumerate(raw_records):
        validate_record_data(record_data, position, file_path)
        record = create_record_from_data(record_data)

        if record.name in seen:
            raise RosterValidationError(
                f"Duplicate mercenary name '{record.name}' found in {file_path or 'roster'}"
            )

        seen.add(record.name)
        records.append(record)

    return records


def load_roster(file_path: Path) -> list[CharacterRecord]:
    """
    Load all mercenary records from a roster resource file.

    Raises:
        RosterLoadError: If the file cannot be loaded
        RosterValidationError: If validation fails
    """
    records = build_records(load_data_file(file_path), file_path)
    logger.info("roster_loaded", path=str(file_path), count=len(records))
    return records


def parse_filter_options(
    raw_options: Any, file_path: Path | None = None
) -> dict[str, tuple[str, ...]]:
    """
    Translate a filter-option resource into engine filter keys.

    Args:
        raw_options: Parsed resource, e.g. {"AttackType": ["Melee", "Ranged"]}
        file_path: Path to the source file (for error messages)

    Returns:
        Dictionary mapping engine key (e.g., "attackType") to its option values

    Raises:
        RosterLoadError: If the resource is not an object
        RosterValidationError: If a key is unrecognized or its options are not strings
    """
    source = file_path or "filter options"

    if not isinstance(raw_options, dict):
        raise RosterLoadError(f"Filter options in {source} must be an object")

    options: dict[str, tuple[str, ...]] = {}
    for resource_key, values in raw_options.items():
        engine_key = FILTER_RESOURCE_KEYS.get(resource_key)
        if engine_key is None:
            raise RosterValidationError(
                f"Unknown filter key '{resource_key}' in {source} "
                f"(must be one of: {', '.join(FILTER_RESOURCE_KEYS)})"
            )

        if not isinstance(values, list) or not all(isinstance(v, str) for v in values):
            raise RosterValidationError(
                f"Options for '{resource_key}' in {source} must be a list of strings"
            )

        options[engine_key] = tuple(values)

    return options


def load_filter_options(file_path: Path) -> dict[str, tuple[str, ...]]:
    """
    Load the filter-option resource file.

    Raises:
        RosterLoadError: If the file cannot be loaded
        RosterValidationError: If validation fails
    """
    options = parse_filter_options(load_data_file(file_path), file_path)
    logger.info("filter_options_loaded", path=str(file_path), keys=sorted(options))
    return options


def load_roster_store(
    data_dir: Path | None = None, settings: Settings | None = None
) -> RosterStore:
    """
    Load the roster resource from the data directory into a store.

    This is the main entry point for loading mercenaries.

    Args:
        data_dir: Directory holding the roster file. If None, uses settings.
        settings: Settings to read file names from. If None, uses get_settings().

    Returns:
        A RosterStore holding every mercenary
    """
    settings = settings or get_settings()
    path = settings.roster_path if data_dir is None else data_dir / settings.roster_file
    return RosterStore.load(load_roster(path))
