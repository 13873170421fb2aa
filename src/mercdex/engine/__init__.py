"""Derivation engines - stats, skill text, filtering and progression ranges."""

from .filters import (
    EMPTY_FILTERS,
    FILTER_FIELDS,
    FILTER_RESOURCE_KEYS,
    FilterKeyError,
    FilterState,
    apply_filters,
    matches,
)
from .growth import growth_value, round_half_up
from .progression import (
    DEFAULT_MAX_LEVEL,
    DEFAULT_MAX_REBOOT,
    ProgressionError,
    ProgressionSelection,
    level_range,
    reboot_range,
)
from .skills import ResolvedSkill, placeholder_token, resolve_skill_text, resolve_skills
from .stats import compute_stats, stat_value

__all__ = [
    "compute_stats",
    "stat_value",
    "growth_value",
    "round_half_up",
    "ResolvedSkill",
    "placeholder_token",
    "resolve_skill_text",
    "resolve_skills",
    "FilterState",
    "FilterKeyError",
    "EMPTY_FILTERS",
    "FILTER_FIELDS",
    "FILTER_RESOURCE_KEYS",
    "matches",
    "apply_filters",
    "ProgressionSelection",
    "ProgressionError",
    "DEFAULT_MAX_LEVEL",
    "DEFAULT_MAX_REBOOT",
    "level_range",
    "reboot_range",
]
