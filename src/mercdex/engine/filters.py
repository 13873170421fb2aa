"""Roster filtering for Mercdex.

A filter state holds one value per recognized attribute. An empty value is
unset and matches everything; a set value must equal the mercenary's
attribute exactly (case-sensitive). Filtering only classifies records, it
never changes the roster.
"""

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from mercdex.errors import MercdexError

if TYPE_CHECKING:
    from mercdex.roster.record import CharacterRecord

# Engine filter key -> CharacterRecord field
FILTER_FIELDS: dict[str, str] = {
    "attackType": "attack_type",
    "faction": "faction",
    "subclass": "subclass",
}

# Filter-option resource key -> engine filter key
FILTER_RESOURCE_KEYS: dict[str, str] = {
    "AttackType": "attackType",
    "Faction": "faction",
    "Subclass": "subclass",
}


class FilterKeyError(MercdexError, KeyError):
    """Raised when a filter key is not one of the recognized keys."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else ""


def filter_field(key: str) -> str:
    """
    Resolve a filter key to the CharacterRecord field it constrains.

    Args:
        key: Engine key ("attackType", "faction" or "subclass")

    Returns:
        The record field name

    Raises:
        FilterKeyError: If key is not recognized
    """
    if key in FILTER_FIELDS:
        return FILTER_FIELDS[key]
    raise FilterKeyError(
        f"Unknown filter key {key!r} (must be one of: {', '.join(FILTER_FIELDS)})"
    )


class FilterState(BaseModel):
    """
    The active attribute constraints of a session.

    Attributes:
        attack_type: Required attack type, or "" for any
        faction: Required faction, or "" for any
        subclass: Required subclass, or "" for any
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    attack_type: str = Field(default="", alias="attackType", description="Attack type filter")
    faction: str = Field(default="", description="Faction filter")
    subclass: str = Field(default="", description="Subclass filter")

    @classmethod
    def from_mapping(cls, values: Mapping[str, str | None]) -> "FilterState":
        """
        Build a filter state from a partial mapping; missing keys are unset.

        Raises:
            FilterKeyError: If the mapping holds an unrecognized key
        """
        return cls(**{filter_field(key): value or "" for key, value in values.items()})

    @classmethod
    def reset(cls) -> "FilterState":
        """Get the all-unset state."""
        return cls()

    def with_value(self, key: str, value: str | None) -> "FilterState":
        """Get a copy with one filter replaced; None or "" unsets it."""
        return self.model_copy(update={filter_field(key): value or ""})

    @property
    def active(self) -> dict[str, str]:
        """Get the set filters, keyed by engine key."""
        return {
            key: getattr(self, field)
            for key, field in FILTER_FIELDS.items()
            if getattr(self, field)
        }

    def is_empty(self) -> bool:
        """Check if no filter is set."""
        return not self.active


EMPTY_FILTERS = FilterState()


def matches(
    character: "CharacterRecord", filters: FilterState | Mapping[str, str | None]
) -> bool:
    """
    Check whether a mercenary satisfies every set filter.

    Args:
        character: The mercenary record
        filters: A FilterState, or a mapping of filter keys to values

    Returns:
        True if each set filter equals the corresponding attribute

    Raises:
        FilterKeyError: If a mapping holds an unrecognized key
    """
    state = filters if isinstance(filters, FilterState) else FilterState.from_mapping(filters)
    return all(
        getattr(character, FILTER_FIELDS[key]) == value for key, value in state.active.items()
    )


def apply_filters(
    roster: Iterable["CharacterRecord"], filters: FilterState | Mapping[str, str | None]
) -> set[str]:
    """
    Classify a roster against a filter state.

    Returns:
        Names of the matching mercenaries
    """
    state = filters if isinstance(filters, FilterState) else FilterState.from_mapping(filters)
    return {character.name for character in roster if matches(character, state)}
