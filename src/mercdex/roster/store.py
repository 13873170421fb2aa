"""
Roster store module for Mercdex.

Holds the loaded mercenary records and provides lookup, listing and grouping.
"""

from collections.abc import Iterable, Iterator

from .record import CharacterRecord

# Faction groups are listed in this order; unknown factions follow alphabetically
FACTION_ORDER = ("Peacekeeper", "Freemen", "Syndicate")


def name_sort_key(record: CharacterRecord) -> tuple[str, str]:
    """
    Sort key for listing mercenaries by name.

    Case-insensitive first, so "bolt" sorts between "Anvil" and "Cinder";
    among names equal ignoring case, lowercase comes first ("bolt", "Bolt").
    """
    return (record.name.casefold(), record.name.swapcase())


class RosterStore:
    """
    Immutable in-memory collection of mercenary records.

    Records keep their load order for iteration. The store is built once per
    session and never mutated afterwards.
    """

    def __init__(self, records: Iterable[CharacterRecord] = ()) -> None:
        self._records: tuple[CharacterRecord, ...] = tuple(records)
        self._by_name: dict[str, CharacterRecord] = {}
        for record in self._records:
            # First record wins if a name repeats
            self._by_name.setdefault(record.name, record)

    @classmethod
    def load(cls, records: Iterable[CharacterRecord]) -> "RosterStore":
        """Build a store from already validated records."""
        return cls(records)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CharacterRecord]:
        return iter(self._records)

    def __contains__(self, name: object) -> bool:
        return name in self._by_name

    def find_by_name(self, name: str) -> CharacterRecord | None:
        """
        Get a mercenary by its name.

        Args:
            name: Exact, case-sensitive name

        Returns:
            The CharacterRecord, or None if not found
        """
        return self._by_name.get(name)

    def all_sorted_by_name(self) -> list[CharacterRecord]:
        """Get every record in alphabetical name order."""
        return sorted(self._records, key=name_sort_key)

    def factions(self) -> list[str]:
        """
        Get the factions present in the roster, in display order.

        Returns:
            Known factions in FACTION_ORDER, then any others alphabetically
        """
        present = {record.faction for record in self._records}
        known = [faction for faction in FACTION_ORDER if faction in present]
        others = sorted(present.difference(FACTION_ORDER))
        return known + others

    def group_by_faction(self) -> dict[str, list[CharacterRecord]]:
        """
        Group records by faction.

        Returns:
            Dictionary mapping faction to its records in alphabetical order,
            keyed in the order given by factions()
        """
        groups: dict[str, list[CharacterRecord]] = {faction: [] for faction in self.factions()}
        for record in self.all_sorted_by_name():
            groups[record.faction].append(record)
        return groups
