"""Tests for the roster store."""

from mercdex.roster import FACTION_ORDER, CharacterRecord, RosterStore


def merc(name: str, faction: str = "Freemen") -> CharacterRecord:
    return CharacterRecord(name=name, faction=faction)


class TestRosterStore:
    """Tests for RosterStore lookup and listing."""

    def test_len_and_iteration_keep_load_order(self, roster):
        assert len(roster) == 3
        assert [record.name for record in roster] == ["Vesper", "Anvil", "bramble"]

    def test_find_by_name(self, roster):
        assert roster.find_by_name("Anvil").faction == "Peacekeeper"
        assert "Anvil" in roster

    def test_find_by_name_is_case_sensitive(self, roster):
        assert roster.find_by_name("anvil") is None
        assert roster.find_by_name("Nobody") is None

    def test_first_duplicate_wins(self):
        store = RosterStore.load([merc("Twin", "Freemen"), merc("Twin", "Syndicate")])
        assert store.find_by_name("Twin").faction == "Freemen"

    def test_sorted_by_name_ignores_case(self, roster):
        """Lowercase names sort among the others, not after them."""
        names = [record.name for record in roster.all_sorted_by_name()]
        assert names == ["Anvil", "bramble", "Vesper"]

    def test_sorted_by_name_lowercase_first_on_ties(self):
        """Names differing only in case list lowercase first."""
        store = RosterStore.load([merc("Bolt"), merc("bolt"), merc("BOLT"), merc("Anvil")])
        names = [record.name for record in store.all_sorted_by_name()]
        assert names == ["Anvil", "bolt", "Bolt", "BOLT"]

    def test_sorted_by_name_does_not_reorder_store(self, roster):
        roster.all_sorted_by_name()
        assert [record.name for record in roster][0] == "Vesper"

    def test_factions_display_order(self):
        """Known factions come first in fixed order, then the rest alphabetically."""
        store = RosterStore.load(
            [
                merc("A", "Syndicate"),
                merc("B", "Wanderers"),
                merc("C", "Freemen"),
                merc("D", "Cult"),
                merc("E", "Peacekeeper"),
            ]
        )
        assert store.factions() == [*FACTION_ORDER, "Cult", "Wanderers"]

    def test_group_by_faction(self):
        """Each group keeps alphabetical order."""
        store = RosterStore.load(
            [
                merc("Zed", "Freemen"),
                merc("Ash", "Syndicate"),
                merc("bolt", "Freemen"),
                merc("Cole", "Freemen"),
            ]
        )
        groups = store.group_by_faction()

        assert list(groups) == ["Freemen", "Syndicate"]
        assert [record.name for record in groups["Freemen"]] == ["bolt", "Cole", "Zed"]
        assert [record.name for record in groups["Syndicate"]] == ["Ash"]

    def test_empty_store(self):
        store = RosterStore.load([])
        assert len(store) == 0
        assert store.all_sorted_by_name() == []
        assert store.group_by_faction() == {}
