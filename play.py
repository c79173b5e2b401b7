"""
Console driver: play two-player chess by typing board clicks on stdin.
"""
from __future__ import annotations

import argparse
import sys
from typing import Optional, TextIO

from config import get_config, get_ui_settings, load_config_from_file, setup_logging
from chessboard import ClickAction, Color, GameController

HELP = "Commands: '<row> <col>' to click a square, 'undo', 'new', 'quit'"


def parse_args(argv: Optional[list] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Play two-player chess on the console")
    ap.add_argument("--config", default=None, help="JSON configuration file")
    ap.add_argument("--unicode", action="store_true", help="Draw pieces with Unicode glyphs")
    return ap.parse_args(argv)


def _announce(side: Color) -> None:
    print(f"{side.display_name} is CHECKMATED!")


def run(controller: GameController, stream: TextIO, use_unicode: bool = False,
        show_coordinates: bool = True) -> None:
    """Read commands from ``stream`` until EOF or 'quit'."""
    print(controller.board.render(use_unicode, show_coordinates))
    print(controller.status_text())
    for line in stream:
        cmd = line.strip().lower()
        if not cmd:
            continue
        if cmd in ("quit", "exit", "q"):
            break
        if cmd == "undo":
            if not controller.undo():
                print("Nothing to undo")
        elif cmd == "new":
            controller.new_game()
        else:
            parts = cmd.replace(",", " ").split()
            try:
                row, col = (int(p) for p in parts)
            except ValueError:
                print(HELP)
                continue
            if not (0 <= row < 8 and 0 <= col < 8):
                print("Square is off the board")
                continue
            outcome = controller.click(row, col)
            if outcome.action is ClickAction.SELECTED:
                targets = " ".join(f"{r},{c}" for r, c in controller.selected_destinations())
                print(f"Selected {row},{col}; targets: {targets or '(none)'}")
                continue
            if outcome.action is ClickAction.MOVED and outcome.move.king_captured:
                print(f"The {controller.side_to_move.display_name} king has been captured")
        print(controller.board.render(use_unicode, show_coordinates))
        print(controller.status_text())


def main(argv: Optional[list] = None) -> None:
    args = parse_args(argv)
    config = load_config_from_file(args.config) if args.config else get_config()
    ui = get_ui_settings()
    setup_logging()
    controller = GameController(rules=config.rules)
    controller.add_checkmate_listener(_announce)
    print(HELP)
    run(controller, sys.stdin, args.unicode or ui.use_unicode, ui.show_coordinates)


if __name__ == "__main__":
    main()
