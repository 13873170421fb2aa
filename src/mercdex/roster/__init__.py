"""Roster management - mercenary records, loading and lookup."""

from .loader import (
    RosterLoadError,
    RosterValidationError,
    build_records,
    load_filter_options,
    load_roster,
    load_roster_store,
    parse_filter_options,
)
from .record import SKILL_SLOTS, CharacterRecord, SkillSlot
from .store import FACTION_ORDER, RosterStore

__all__ = [
    "CharacterRecord",
    "SkillSlot",
    "SKILL_SLOTS",
    "RosterStore",
    "FACTION_ORDER",
    "load_roster",
    "load_roster_store",
    "load_filter_options",
    "build_records",
    "parse_filter_options",
    "RosterLoadError",
    "RosterValidationError",
]
