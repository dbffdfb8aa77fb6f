"""
Terminal entry point for playing WordJam.

Usage:
    python -m wordjam.main
    python -m wordjam.main config.yaml --verbose
    python -m wordjam.main --words CRANE PLATE GRAPE STONE FLAME
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml

from .game import WordJam, GameConfig
from .utils.grid_visualizer import render_snapshot, render_status
from .words import StaticWordSource


HELP_TEXT = """Commands:
  show                 Show the grid
  select ROW COL       Select a column in a row
  move ROW POSITION    Slide a row to a continuous position (in columns)
  submit               Submit the selected word
  reset                Reshuffle the current level
  next                 Go to the next level
  restart              Start a new game
  buy word|life        Spend coins
  status               Show counters
  quit                 Exit"""


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def run_command(game: WordJam, line: str) -> Optional[str]:
    """
    Execute one command line against the game.

    Returns:
        Text to show the player, or None to quit
    """
    parts = line.split()
    if not parts:
        return ""

    command, args = parts[0].lower(), parts[1:]

    if command in ("quit", "exit", "q"):
        return None

    if command == "help":
        return HELP_TEXT

    if command == "show":
        return render_snapshot(game.snapshot())

    if command == "status":
        return render_status(game.status())

    if command in ("select", "move"):
        if len(args) != 2:
            return f"Usage: {command} ROW {'COL' if command == 'select' else 'POSITION'}"
        try:
            row = int(args[0])
            if command == "select":
                game.select(row, int(args[1]))
            else:
                game.move_selection(row, float(args[1]))
        except ValueError:
            return "ROW and position must be numbers"
        return render_snapshot(game.snapshot())

    if command == "buy":
        if args == ["word"]:
            result = game.add_random_word()
        elif args == ["life"]:
            result = game.add_life()
        else:
            return "Usage: buy word|life"
        return f"{result.message}\n{render_snapshot(game.snapshot())}"

    actions = {
        "submit": game.confirm_word,
        "reset": game.reset_level,
        "next": game.advance_level,
        "restart": game.restart_game,
    }
    if command not in actions:
        return f"Unknown command '{command}'. Type 'help' for commands."

    result = actions[command]()
    lines = [result.message]
    if game.phase == "LEVEL_COMPLETE":
        lines.append(game.completion_summary().share_text)
    lines.append(render_snapshot(game.snapshot()))
    lines.append(render_status(game.status()))
    return "\n".join(lines)


def main():
    parser = argparse.ArgumentParser(
        description="Play WordJam in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  seed: 42
  dictionary_path: dictionary.txt
  daily_words_path: daily_words.yaml
  store_path: progress.json
  lives_enabled: false
        """
    )
    parser.add_argument(
        "config",
        nargs="?",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--words",
        nargs="+",
        help="Play these level words instead of today's list"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log loading and level details"
    )

    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(args.config) if args.config else GameConfig()
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        sys.exit(1)

    word_source = StaticWordSource(args.words) if args.words else None
    game = WordJam.create(config=config, word_source=word_source)
    game.start()

    print(HELP_TEXT)
    print()
    print(render_snapshot(game.snapshot()))
    print(render_status(game.status()))

    while True:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        output = run_command(game, line)
        if output is None:
            break
        if output:
            print(output)

    print()
    print("=== Session Summary ===")
    print(f"Words found: {game.score}")
    print(f"Highscore: {game.highscore}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
