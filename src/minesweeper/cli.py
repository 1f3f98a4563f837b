"""
Terminal front end.

Usage:
    python main.py play [--rows R] [--cols C] [--mines M] [--seed S]
    python main.py show [--rows R] [--cols C] [--mines M] [--seed S]

Commands while playing:
    r ROW COL   reveal
    f ROW COL   toggle flag
    c ROW COL   chord
    n [SEED]    new game (same seed unless one is given)
    q           quit
"""
import argparse
import logging
import sys
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .board import BoardConfig, DEFAULT, DEFAULT_SEED
from .controller import GameController
from .generator import generate_from_config
from .transitions import Action

ACTION_KEYS = {
    "r": Action.REVEAL,
    "f": Action.FLAG,
    "c": Action.CHORD,
}


@dataclass
class Command:
    """One parsed line of player input."""

    name: str
    row: int = 0
    col: int = 0
    seed: Optional[int] = None


def parse_command(line: str) -> Command:
    """
    Parse a player command.

    Raises:
        ValueError: If the command is unknown or malformed.
    """
    parts = line.split()
    if not parts:
        raise ValueError("Empty command")
    name = parts[0].lower()
    if name in ACTION_KEYS:
        if len(parts) != 3:
            raise ValueError(f"Usage: {name} ROW COL")
        return Command(name, row=int(parts[1]), col=int(parts[2]))
    if name == "n":
        if len(parts) > 2:
            raise ValueError("Usage: n [SEED]")
        return Command(name, seed=int(parts[1]) if len(parts) == 2 else None)
    if name == "q":
        return Command(name)
    raise ValueError(f"Unknown command: {name}")


def format_status(controller: GameController) -> str:
    state = controller.state
    return (
        f"{state.status.name} | "
        f"Mines left: {state.mines_remaining} | "
        f"Hidden left: {state.hidden_remaining}"
    )


def run_session(controller: GameController, lines: Iterable[str]) -> None:
    """Drive the controller from input lines until 'q' or end of input."""
    print(controller.state.board.render())
    print(format_status(controller))
    for line in lines:
        if not line.strip():
            continue
        try:
            command = parse_command(line)
        except ValueError as exc:
            print(exc)
            continue

        if command.name == "q":
            break
        if command.name == "n":
            controller.reset(command.seed)
            print(f"New game (seed {controller.seed})")
        else:
            controller.apply(ACTION_KEYS[command.name], command.row, command.col)

        print(controller.state.board.render())
        print(format_status(controller))


def play(args: argparse.Namespace) -> None:
    """Play interactively on stdin."""
    controller = GameController(config_from_args(args), args.seed)
    run_session(controller, sys.stdin)


def show(args: argparse.Namespace) -> None:
    """Print a generated layout with every cell uncovered."""
    state = generate_from_config(args.seed, config_from_args(args))
    print(state.board.render(reveal_all=True))


def config_from_args(args: argparse.Namespace) -> BoardConfig:
    return BoardConfig(args.rows, args.cols, args.mines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Seeded Minesweeper")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, func, help_text in (
        ("play", play, "Play in the terminal"),
        ("show", show, "Print a generated board uncovered"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("--rows", type=int, default=DEFAULT.rows, help="Board rows")
        sub.add_argument("--cols", type=int, default=DEFAULT.cols, help="Board columns")
        sub.add_argument("--mines", type=int, default=DEFAULT.num_mines, help="Number of mines")
        sub.add_argument("--seed", type=int, default=DEFAULT_SEED, help="Board seed")
        sub.set_defaults(func=func)

    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config_from_args(args)
    except ValueError as exc:
        parser.error(str(exc))

    args.func(args)
