"""Tests for the terminal driver and text rendering."""

import pytest
from wordjam.game import GameConfig, LetterGrid, ProgressStore, WordJam
from wordjam.main import HELP_TEXT, load_config, run_command
from wordjam.utils import render_snapshot, render_status
from wordjam.words import Dictionary, StaticWordSource


@pytest.fixture
def game() -> WordJam:
    game = WordJam.create(
        config=GameConfig(seed=3),
        dictionary=Dictionary(fetch_word_list=lambda: "CAT\nBOG\nCOG\nBAT"),
        word_source=StaticWordSource(["CAT", "BOG"]),
        store=ProgressStore(),
    )
    game.start()
    return game


class TestRunCommand:
    """Test cases for command dispatch."""

    def test_quit(self, game):
        assert run_command(game, "quit") is None

    def test_blank_line(self, game):
        assert run_command(game, "   ") == ""

    def test_help(self, game):
        assert run_command(game, "help") == HELP_TEXT

    def test_unknown_command(self, game):
        assert "Unknown command" in run_command(game, "dance")

    def test_select_and_submit(self, game):
        for row, letter in enumerate("CAT"):
            col = game.grid.rows[row].index(letter)
            output = run_command(game, f"select {row} {col}")
        assert "Word: CAT" in output

        output = run_command(game, "submit")
        assert "Found CAT!" in output
        assert "Coins 10" in output

    def test_select_needs_numbers(self, game):
        assert run_command(game, "select a b") == "ROW and position must be numbers"
        assert run_command(game, "move 1").startswith("Usage: move")

    def test_next_refused(self, game):
        assert "Find at least 2 words to progress" in run_command(game, "next")

    def test_buy_usage(self, game):
        assert run_command(game, "buy car") == "Usage: buy word|life"
        assert run_command(game, "buy word").startswith("Not enough coins")


class TestRendering:
    def test_render_snapshot(self):
        grid = LetterGrid(rows=[["A", "B"], ["C", " "]], selection=[1, 0])
        assert render_snapshot(grid.snapshot()) == "0:  A [B]\n1: [C] . \nWord: BC"

    def test_render_empty(self):
        assert render_snapshot(LetterGrid().snapshot()) == "(empty grid)"

    def test_render_status_with_lives(self, game):
        status = game.status().model_copy(update={"lives": 2})
        assert render_status(status).endswith("Lives 2")


class TestLoadConfig:
    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("seed: 42\nlives_enabled: true\ncoins_per_word: 5\n")

        config = load_config(str(path))
        assert config.seed == 42
        assert config.lives_enabled is True
        assert config.coins_per_word == 5
        assert config.add_word_cost == 30

    def test_empty_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))
