"""Skill text resolution for Mercdex.

Skill text uses a closed micro-format: the text of slot N may contain the
single token ``{skill_N_value}``. Its first occurrence is replaced by the
slot's value at the selected progression, rounded half up. No other tokens
are recognized, and tooltips are never templated.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from mercdex.engine.growth import growth_value, round_half_up
from mercdex.roster.record import SKILL_SLOTS

if TYPE_CHECKING:
    from mercdex.roster.record import CharacterRecord, Number


@dataclass(frozen=True)
class ResolvedSkill:
    """A skill panel ready for display."""

    slot: int
    text: str
    tooltip: str | None = None


def placeholder_token(slot: int) -> str:
    """Get the placeholder token for a skill slot (e.g., "{skill_3_value}")."""
    return f"{{skill_{slot}_value}}"


def skill_value(character: "CharacterRecord", slot: int, reboot: int, level: int) -> "Number":
    """Calculate the unrounded value a skill slot substitutes into its text.

    Args:
        character: The mercenary record
        slot: Skill slot (1-4)
        reboot: Reboot count (0-based)
        level: Level (1-based)

    Returns:
        growth_level[level - 1] + growth_reboot[reboot] of the slot, missing
        entries contributing 0
    """
    skill = character.skill(slot)
    return growth_value(skill.growth_level, level - 1) + growth_value(skill.growth_reboot, reboot)


def resolve_skill_text(
    character: "CharacterRecord", slot: int, reboot: int, level: int
) -> ResolvedSkill | None:
    """Resolve the text of one skill slot at a progression pair.

    Args:
        character: The mercenary record
        slot: Skill slot (1-4)
        reboot: Reboot count (0-based)
        level: Level (1-based)

    Returns:
        ResolvedSkill with the substituted text and the raw tooltip, or None
        if the slot has no text

    Raises:
        ValueError: If slot is outside 1..4
    """
    skill = character.skill(slot)
    if not skill.is_defined:
        return None

    text = skill.text
    token = placeholder_token(slot)
    if token in text:
        value = round_half_up(skill_value(character, slot, reboot, level))
        text = text.replace(token, str(value), 1)

    return ResolvedSkill(slot=slot, text=text, tooltip=skill.tooltip or None)


def resolve_skills(character: "CharacterRecord", reboot: int, level: int) -> list[ResolvedSkill]:
    """Resolve every defined skill slot, in slot order."""
    resolved = []
    for slot in SKILL_SLOTS:
        skill = resolve_skill_text(character, slot, reboot, level)
        if skill is not None:
            resolved.append(skill)
    return resolved
