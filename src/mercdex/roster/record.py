"""
Mercenary record module for Mercdex.

Defines the immutable CharacterRecord model and its four skill slots.
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

Number = int | float

# A growth table: index i is the contribution at position i of one progression axis.
# Null entries are tolerated and read back as 0.
GrowthTable = tuple[Number | None, ...]

SKILL_SLOTS = (1, 2, 3, 4)

# Flat resource keys folded into each SkillSlot at load time
SKILL_RESOURCE_FIELDS = {
    "text": "skill_{slot}_text",
    "tooltip": "skill_{slot}_tooltip",
    "growth_level": "skill_{slot}_growth_level",
    "growth_reboot": "skill_{slot}_growth_reboot",
}


def text_or_empty(value: Any) -> Any:
    """Read a missing or non-string text field as empty."""
    return value if isinstance(value, str) else ""


def growth_table_or_empty(value: Any) -> tuple[Number | None, ...]:
    """
    Read a raw growth table, tolerating malformed data.

    A table that is not a list reads as empty; entries that are not numbers
    read as None, which lookups treat as 0.
    """
    if not isinstance(value, (list, tuple)):
        return ()
    return tuple(
        entry if isinstance(entry, (int, float)) and not isinstance(entry, bool) else None
        for entry in value
    )


def growth_map_or_empty(value: Any) -> dict[str, tuple[Number | None, ...]]:
    """Read a raw stat -> growth table mapping; a non-mapping reads as empty."""
    if not isinstance(value, Mapping):
        return {}
    return {str(stat): growth_table_or_empty(table) for stat, table in value.items()}


class SkillSlot(BaseModel):
    """
    One of the four independently optional skill definitions of a mercenary.

    Attributes:
        text: Skill description, may hold one ``{skill_N_value}`` token
        tooltip: Extra hover text, never templated
        growth_level: Skill value contribution per level (index 0 is level 1)
        growth_reboot: Skill value contribution per reboot count (index 0 is reboot 0)
    """

    model_config = ConfigDict(frozen=True)

    text: str = Field(default="", description="Skill description text")
    tooltip: str = Field(default="", description="Tooltip text shown alongside the skill")
    growth_level: GrowthTable = Field(default=(), description="Per-level skill value growth")
    growth_reboot: GrowthTable = Field(default=(), description="Per-reboot skill value growth")

    @field_validator("text", "tooltip", mode="before")
    @classmethod
    def malformed_text_to_empty(cls, value: Any) -> Any:
        return text_or_empty(value)

    @field_validator("growth_level", "growth_reboot", mode="before")
    @classmethod
    def malformed_table_to_empty(cls, value: Any) -> Any:
        return growth_table_or_empty(value)

    @property
    def is_defined(self) -> bool:
        """Check if this slot produces a skill panel."""
        return bool(self.text)


def _empty_slots() -> tuple[SkillSlot, SkillSlot, SkillSlot, SkillSlot]:
    return (SkillSlot(), SkillSlot(), SkillSlot(), SkillSlot())


def _empty_growth() -> Mapping[str, GrowthTable]:
    return MappingProxyType({})


class CharacterRecord(BaseModel):
    """
    A mercenary as loaded from the roster resource.

    Attributes:
        name: Unique identifier and display name (e.g., "Vesper")
        faction: Faction group (e.g., "Peacekeeper", "Freemen", "Syndicate")
        attack_type: Attack type used for filtering (resource key ``attackType``)
        subclass: Subclass used for filtering
        description: Flavor description
        summary: Short role summary
        tips_and_tricks: Play tips
        level_growth: Maps stat name to its per-level contributions
        reboot_growth: Maps stat name to its per-reboot contributions
        skills: Skill slots 1..4, in slot order
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    name: str = Field(..., min_length=1, description="Unique mercenary name")
    faction: str = Field(..., min_length=1, description="Faction the mercenary belongs to")
    attack_type: str = Field(default="", alias="attackType", description="Attack type")
    subclass: str = Field(default="", description="Subclass")
    description: str = Field(default="", description="Flavor description")
    summary: str = Field(default="", description="Short role summary")
    tips_and_tricks: str = Field(default="", description="Play tips")
    level_growth: Mapping[str, GrowthTable] = Field(
        default_factory=_empty_growth, description="Stat growth indexed by level - 1"
    )
    reboot_growth: Mapping[str, GrowthTable] = Field(
        default_factory=_empty_growth, description="Stat growth indexed by reboot count"
    )
    skills: tuple[SkillSlot, SkillSlot, SkillSlot, SkillSlot] = Field(
        default_factory=_empty_slots, description="Skill slots 1..4"
    )

    @model_validator(mode="before")
    @classmethod
    def fold_skill_slots(cls, data: Any) -> Any:
        """Fold flat ``skill_N_*`` resource keys into the four skill slots."""
        if not isinstance(data, dict) or "skills" in data:
            return data

        data = dict(data)
        data["skills"] = [
            {
                attr: data.pop(key.format(slot=slot), None)
                for attr, key in SKILL_RESOURCE_FIELDS.items()
            }
            for slot in SKILL_SLOTS
        ]
        return data

    @field_validator(
        "attack_type", "subclass", "description", "summary", "tips_and_tricks", mode="before"
    )
    @classmethod
    def malformed_text_to_empty(cls, value: Any) -> Any:
        return text_or_empty(value)

    @field_validator("level_growth", "reboot_growth", mode="before")
    @classmethod
    def malformed_growth_to_empty(cls, value: Any) -> Any:
        return growth_map_or_empty(value)

    @field_validator("level_growth", "reboot_growth", mode="after")
    @classmethod
    def read_only_growth(cls, value: Mapping[str, GrowthTable]) -> Mapping[str, GrowthTable]:
        return MappingProxyType(dict(value))

    def skill(self, slot: int) -> SkillSlot:
        """
        Get a skill slot by its 1-based number.

        Args:
            slot: Slot number (1-4)

        Returns:
            The SkillSlot for that number

        Raises:
            ValueError: If slot is outside 1..4
        """
        if slot not in SKILL_SLOTS:
            raise ValueError(f"Skill slot must be one of {SKILL_SLOTS}, got {slot}")
        return self.skills[slot - 1]

    @property
    def stat_names(self) -> list[str]:
        """Get derived stat names: level-table keys, then reboot-only keys."""
        return list(dict.fromkeys([*self.level_growth, *self.reboot_growth]))
