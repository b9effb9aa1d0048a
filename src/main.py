"""
Main entry point for playing a hexword puzzle in the terminal.

Usage:
    python -m src.main config.yaml
    python -m src.main config.yaml --phrase "mina armastan sind" --verbose
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Callable, Optional

import yaml

from .puzzle import CellPosition
from .session import (
    RoundController,
    SessionConfig,
    StaticFormsProvider,
    Translator,
    prepare_phrase,
)
from .utils.board_renderer import render_board, in_bounds


def load_config(config_path: str) -> SessionConfig:
    """Load session configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return SessionConfig(**data)


def parse_move(line: str, options: list) -> Optional[tuple]:
    """
    Parse a move typed as `COL ROW CHOICE`.

    CHOICE is either the option number shown (1-3) or the word itself.
    Returns (CellPosition, word), or None if the line is not a move.
    """
    parts = line.split(maxsplit=2)
    if len(parts) != 3:
        return None
    try:
        position = CellPosition(int(parts[0]), int(parts[1]))
    except ValueError:
        return None

    choice = parts[2].strip()
    if choice.isdecimal() and 1 <= int(choice) <= len(options):
        return position, options[int(choice) - 1]
    return position, choice


def play(
    controller: RoundController,
    config: SessionConfig,
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> bool:
    """
    Run the interactive loop until the phrase is done or the player quits.

    Commands: `COL ROW CHOICE` to place a card, `hint` to mark legal cells,
    `quit` to stop.

    Returns:
        True if every word was placed
    """
    cols, rows = config.board.cols, config.board.rows
    marked = []

    while not controller.is_complete:
        current = controller.current_round
        write("")
        write(render_board(controller.ledger, cols, rows, marked=marked))
        write("")
        write(f"Word {controller.cursor + 1}/{len(controller.entries)}: {current.word}")
        for i, option in enumerate(current.options, start=1):
            write(f"  {i}. {option}")

        try:
            line = read("> ").strip()
        except EOFError:
            return False

        if line.lower() in ("quit", "exit", "q"):
            return False
        if line.lower() == "hint":
            marked = controller.valid_positions()
            if not marked:
                write("Any free cell works for the first card.")
            continue

        move = parse_move(line, current.options)
        if move is None:
            write("Enter a move as: COL ROW CHOICE (e.g. `2 1 3`), `hint` or `quit`.")
            continue

        position, word = move
        if not in_bounds(position, cols, rows):
            write(f"⚠️ ({position.col}, {position.row}) is not on the board")
            continue

        result = controller.submit(position, word)
        if result.outcome == "WRONG_WORD":
            write("✗ Try again!")
        elif result.outcome == "ILLEGAL_PLACEMENT":
            write(f"⚠️ {result.reason}")
        else:
            write("✓ Correct!")
            marked = []

    write("")
    write(render_board(controller.ledger, cols, rows))
    write("")
    write("🎉 All done! Great job completing all words")
    return True


def main():
    parser = argparse.ArgumentParser(
        description="Play a hexword puzzle in the terminal",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  seed: 42
  phrase: mina armastan sind
  board:
    cols: 6
    rows: 4
  translator:            # optional; omit to play the phrase as given
    model: gpt-4o-mini
  lexicon:
    mina: [mina, minu, mulle, minul]
    armastama: [armastan, armastad, armastab]
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--phrase", "-p",
        help="Phrase to play (overrides the config)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Random seed for option order (overrides the config)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Log debug output to stderr"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.phrase:
        config.phrase = args.phrase
    if args.seed is not None:
        config.seed = args.seed

    if not config.phrase:
        print("Error: no phrase given (use --phrase or set `phrase` in the config)", file=sys.stderr)
        return 1

    forms = StaticFormsProvider(config.lexicon)
    translator = Translator.from_config(config.translator) if config.translator else None

    entries = prepare_phrase(config.phrase, forms, translator)
    if not entries:
        print("No words found. Try a different phrase.", file=sys.stderr)
        return 1

    controller = RoundController(seed=config.seed)
    controller.start_phrase(entries)

    try:
        completed = play(controller, config)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        completed = False

    state = controller.get_state()
    print()
    print("=== Session Summary ===")
    print(f"Words placed: {state['total_placements']}/{len(state['words'])}")
    print(f"Completed: {completed}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
