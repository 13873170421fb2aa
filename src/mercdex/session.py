"""Browsing session state for Mercdex."""

from pathlib import Path
from uuid import UUID, uuid4

import structlog

from mercdex.config import Settings, get_settings
from mercdex.engine import (
    EMPTY_FILTERS,
    FilterState,
    ProgressionSelection,
    ResolvedSkill,
    apply_filters,
    compute_stats,
    level_range,
    matches,
    reboot_range,
    resolve_skills,
)
from mercdex.errors import MercdexError
from mercdex.roster import CharacterRecord, RosterStore, load_filter_options, load_roster_store
from mercdex.roster.record import Number

logger = structlog.get_logger(__name__)


class CharacterNotFoundError(MercdexError):
    """Raised when selecting a mercenary that is not in the roster."""

    pass


class BrowserSession:
    """
    Represents one user's browsing state over a loaded roster.

    The roster is shared and immutable. The filter state and progression
    selection belong to the session and are replaced, never mutated, on
    each user action.
    """

    def __init__(
        self,
        roster: RosterStore,
        filter_options: dict[str, tuple[str, ...]] | None = None,
        settings: Settings | None = None,
    ) -> None:
        """
        Initialize a new session.

        Args:
            roster: The loaded roster
            filter_options: Selectable values per engine filter key
            settings: Settings providing progression bounds
        """
        self.id: UUID = uuid4()
        self.roster = roster
        self.filter_options = dict(filter_options or {})
        self.settings = settings or get_settings()
        self.filters: FilterState = EMPTY_FILTERS
        self.selection = ProgressionSelection()
        self.selected: CharacterRecord | None = None

        logger.info(
            "session_created",
            session_id=str(self.id),
            roster_size=len(roster),
        )

    @classmethod
    def from_data_dir(
        cls, data_dir: Path | None = None, settings: Settings | None = None
    ) -> "BrowserSession":
        """
        Load the roster and filter options and start a session over them.

        Raises:
            RosterLoadError: If a resource cannot be loaded
            RosterValidationError: If a resource is invalid
        """
        settings = settings or get_settings()
        roster = load_roster_store(data_dir, settings)
        if data_dir is None:
            filters_path = settings.filters_path
        else:
            filters_path = data_dir / settings.filters_file
        filter_options = load_filter_options(filters_path)
        return cls(roster, filter_options, settings)

    @property
    def level_options(self) -> list[int]:
        """Get the selectable levels."""
        return level_range(self.settings.max_level)

    @property
    def reboot_options(self) -> list[int]:
        """Get the selectable reboot counts."""
        return reboot_range(self.settings.max_reboot)

    def set_filter(self, key: str, value: str | None) -> FilterState:
        """
        Replace one filter value; None or "" unsets it.

        Raises:
            FilterKeyError: If key is not a recognized filter key
        """
        self.filters = self.filters.with_value(key, value)
        logger.info(
            "filter_changed",
            session_id=str(self.id),
            key=key,
            value=value or "",
        )
        return self.filters

    def reset_filters(self) -> FilterState:
        """Replace the filter state with the all-unset state."""
        self.filters = FilterState.reset()
        logger.info("filters_reset", session_id=str(self.id))
        return self.filters

    def matching_names(self) -> set[str]:
        """Get the names of mercenaries matching the current filters."""
        return apply_filters(self.roster, self.filters)

    def is_dimmed(self, character: CharacterRecord) -> bool:
        """Check if a mercenary should be de-emphasized under the current filters."""
        return not matches(character, self.filters)

    def select(self, name: str) -> CharacterRecord:
        """
        Select a mercenary and reset progression to level 1, reboot 0.

        Raises:
            CharacterNotFoundError: If no mercenary has that name
        """
        character = self.roster.find_by_name(name)
        if character is None:
            raise CharacterNotFoundError(f"No mercenary named '{name}'")

        self.selected = character
        self.selection = ProgressionSelection()
        logger.info("character_selected", session_id=str(self.id), name=name)
        return character

    def set_progression(
        self, level: int | None = None, reboot: int | None = None
    ) -> ProgressionSelection:
        """
        Replace the progression selection; omitted axes keep their value.

        Raises:
            ProgressionError: If a value is outside the configured domain
        """
        self.selection = ProgressionSelection.bounded(
            level=self.selection.level if level is None else level,
            reboot=self.selection.reboot if reboot is None else reboot,
            max_level=self.settings.max_level,
            max_reboot=self.settings.max_reboot,
        )
        logger.info(
            "progression_changed",
            session_id=str(self.id),
            level=self.selection.level,
            reboot=self.selection.reboot,
        )
        return self.selection

    def stats(self) -> dict[str, Number]:
        """Get the selected mercenary's stats, or {} if none is selected."""
        if self.selected is None:
            return {}
        return compute_stats(self.selected, self.selection.reboot, self.selection.level)

    def skills(self) -> list[ResolvedSkill]:
        """Get the selected mercenary's resolved skills, or [] if none is selected."""
        if self.selected is None:
            return []
        return resolve_skills(self.selected, self.selection.reboot, self.selection.level)

    def __repr__(self) -> str:
        """Detailed representation of session."""
        selected = self.selected.name if self.selected else None
        return (
            f"BrowserSession(id={self.id}, selected={selected}, "
            f"filters={self.filters.active}, level={self.selection.level}, "
            f"reboot={self.selection.reboot})"
        )
