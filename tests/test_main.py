"""Tests for the command-line entry point."""

import pytest

from mercdex.main import build_parser, main


@pytest.fixture
def cli_data_dir(data_dir, monkeypatch):
    """Point settings at the sample data directory."""
    monkeypatch.setenv("MERCDEX_DATA_DIR", str(data_dir))
    monkeypatch.setenv("MERCDEX_LOG_LEVEL", "WARNING")
    return data_dir


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.name is None
        assert args.level == 1
        assert args.reboot == 0
        assert args.attack_type == ""


class TestMain:
    """End-to-end CLI runs over the sample data."""

    def test_roster_listing(self, cli_data_dir, capsys):
        assert main(["--no-color"]) == 0
        out = capsys.readouterr().out
        assert "Peacekeeper" in out
        assert "  Vesper" in out

    def test_filtered_listing(self, cli_data_dir, capsys):
        assert main(["--no-color", "--faction", "Freemen"]) == 0
        out = capsys.readouterr().out
        assert "  bramble" in out
        assert "  (Vesper)" in out

    def test_character_card(self, cli_data_dir, capsys):
        assert main(["--no-color", "Vesper", "--level", "2", "--reboot", "1"]) == 0
        out = capsys.readouterr().out
        assert "❤️ 25 | ⚔️ 6" in out
        assert "Deals 10 damage" in out

    def test_filter_options(self, cli_data_dir, capsys):
        assert main(["--options"]) == 0
        assert "faction: All, Peacekeeper, Freemen, Syndicate" in capsys.readouterr().out

    def test_explicit_data_dir(self, data_dir, capsys):
        assert main(["--no-color", "--data-dir", str(data_dir)]) == 0
        assert "Anvil" in capsys.readouterr().out

    def test_unknown_character(self, cli_data_dir, capsys):
        assert main(["Nobody"]) == 1
        assert "No mercenary named 'Nobody'" in capsys.readouterr().err

    def test_level_out_of_range(self, cli_data_dir, capsys):
        assert main(["Vesper", "--level", "40"]) == 1

    def test_missing_data(self, tmp_path, capsys):
        assert main(["--data-dir", str(tmp_path / "missing")]) == 1
        assert "File not found" in capsys.readouterr().err
