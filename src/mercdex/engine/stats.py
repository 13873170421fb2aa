"""Stat derivation for Mercdex.

A mercenary's effective stat at a (level, reboot) pair is the sum of its
level-table entry and its reboot-table entry for that stat.
"""

from typing import TYPE_CHECKING

from mercdex.engine.growth import growth_value

if TYPE_CHECKING:
    from mercdex.roster.record import CharacterRecord, Number


def stat_value(character: "CharacterRecord", stat_name: str, reboot: int, level: int) -> "Number":
    """Calculate a single derived stat.

    Args:
        character: The mercenary record
        stat_name: Stat to derive (e.g., "health")
        reboot: Reboot count (0-based)
        level: Level (1-based)

    Returns:
        level_growth[stat][level - 1] + reboot_growth[stat][reboot], with any
        missing side contributing 0
    """
    level_value = growth_value(character.level_growth.get(stat_name, ()), level - 1)
    reboot_value = growth_value(character.reboot_growth.get(stat_name, ()), reboot)
    return level_value + reboot_value


def compute_stats(character: "CharacterRecord", reboot: int, level: int) -> dict[str, "Number"]:
    """Calculate every derived stat for a mercenary.

    Stat names are the union of the level and reboot growth tables. Levels or
    reboots past the end of a table fall back to 0 for that side, so this never
    raises for out-of-range progression.

    Args:
        character: The mercenary record
        reboot: Reboot count (0-based)
        level: Level (1-based)

    Returns:
        Dictionary mapping stat name to its unrounded derived value

    Examples:
        level_growth.health = [10, 20, 30], reboot_growth.health = [0, 5]
        compute_stats(c, reboot=1, level=2) -> {"health": 25}
    """
    return {
        stat_name: stat_value(character, stat_name, reboot, level)
        for stat_name in character.stat_names
    }
