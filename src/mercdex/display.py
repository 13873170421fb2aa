"""Plain-text rendering for Mercdex.

Provides the terminal presentation of the roster and of a selected mercenary:
- ANSI color helpers
- Roster listing grouped by faction, with non-matching mercenaries dimmed
- Stats line and skill panels for the detail card
"""

import re
from collections.abc import Iterable, Mapping
from typing import Final

from mercdex.engine import ProgressionSelection, ResolvedSkill, round_half_up
from mercdex.roster import CharacterRecord, RosterStore
from mercdex.roster.record import Number

# ANSI color codes
ANSI_COLORS: Final[dict[str, str]] = {
    "RED": "\x1b[31m",
    "GREEN": "\x1b[32m",
    "YELLOW": "\x1b[33m",
    "BLUE": "\x1b[34m",
    "CYAN": "\x1b[36m",
    "RESET": "\x1b[0m",
    "BOLD": "\x1b[1m",
    "DIM": "\x1b[2m",
}

# ANSI regex pattern for stripping
ANSI_ESCAPE_PATTERN: Final[re.Pattern[str]] = re.compile(r"\x1b\[[0-9;]*m")

# Faction heading colors
FACTION_COLORS: Final[dict[str, str]] = {
    "Peacekeeper": "BLUE",
    "Freemen": "GREEN",
    "Syndicate": "RED",
}

HEALTH_ICON = "❤️"
ATTACK_ICON = "⚔️"
NO_NAME = "—"


def colorize(text: str, color: str) -> str:
    """
    Apply ANSI color to text.

    Args:
        text: The text to colorize
        color: Color name from ANSI_COLORS dict (e.g., 'RED', 'DIM')

    Returns:
        Text wrapped with ANSI color codes
    """
    color_code = ANSI_COLORS.get(color.upper(), "")
    if not color_code:
        return text
    return f"{color_code}{text}{ANSI_COLORS['RESET']}"


def strip_ansi(text: str) -> str:
    """Remove ANSI escape codes from text."""
    return ANSI_ESCAPE_PATTERN.sub("", text)


def format_stats_line(stats: Mapping[str, Number]) -> str:
    """
    Format the health and attack summary of a stat map.

    Args:
        stats: Derived stats from compute_stats

    Returns:
        e.g. "❤️ 120 | ⚔️ 35"; a missing stat shows as 0
    """
    health = round_half_up(stats.get("health") or 0)
    attack = round_half_up(stats.get("attack") or 0)
    return f"{HEALTH_ICON} {health} | {ATTACK_ICON} {attack}"


def format_skill_panel(skill: ResolvedSkill, use_color: bool = True) -> str:
    """Format one skill panel: a "Skill N" title, the text, then the tooltip if any."""
    title = f"Skill {skill.slot}"
    lines = [colorize(title, "BOLD") if use_color else title, f"  {skill.text}"]
    if skill.tooltip:
        tooltip = f"({skill.tooltip})"
        lines.append(f"  {colorize(tooltip, 'DIM') if use_color else tooltip}")
    return "\n".join(lines)


def format_character(
    character: CharacterRecord,
    stats: Mapping[str, Number],
    skills: Iterable[ResolvedSkill],
    selection: ProgressionSelection | None = None,
    use_color: bool = True,
) -> str:
    """
    Format the detail card of a mercenary.

    Args:
        character: The selected mercenary
        stats: Its derived stats at the current selection
        skills: Its resolved skills, in slot order
        selection: Current progression, shown above the stats if given
        use_color: Whether to emit ANSI codes

    Returns:
        Multi-line card text
    """
    name = character.name or NO_NAME
    lines = [
        f"\n{colorize(name, 'BOLD') if use_color else name}",
        "-" * len(name),
    ]

    for text in (character.description, character.summary):
        if text:
            lines.append(text.strip())
    if character.tips_and_tricks:
        lines.append(f"Tips: {character.tips_and_tricks.strip()}")

    if selection is not None:
        lines.append(f"\nReboot {selection.reboot} | Level {selection.level}")
    lines.append(format_stats_line(stats))

    for skill in skills:
        lines.append("")
        lines.append(format_skill_panel(skill, use_color))

    return "\n".join(lines)


def format_roster(
    roster: RosterStore, matching: set[str], use_color: bool = True
) -> str:
    """
    Format the roster grouped by faction.

    Mercenaries outside the matching set stay listed but are dimmed
    (or wrapped in parentheses without color).

    Args:
        roster: The loaded roster
        matching: Names matching the current filters
        use_color: Whether to emit ANSI codes

    Returns:
        Multi-line listing text
    """
    lines: list[str] = []
    for faction, records in roster.group_by_faction().items():
        heading = colorize(faction, FACTION_COLORS.get(faction, "CYAN")) if use_color else faction
        lines.append(heading)
        lines.append("-" * len(faction))
        for record in records:
            if record.name in matching:
                lines.append(f"  {record.name}")
            elif use_color:
                lines.append(f"  {colorize(record.name, 'DIM')}")
            else:
                lines.append(f"  ({record.name})")
        lines.append("")

    return "\n".join(lines).rstrip("\n")


def format_filter_options(options: Mapping[str, Iterable[str]]) -> str:
    """Format the selectable values of each filter, "All" first."""
    return "\n".join(
        f"{key}: {', '.join(['All', *values])}" for key, values in options.items()
    )
