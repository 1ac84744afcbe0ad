#!/usr/bin/env python3
"""
Minefield - Headless entry point.

Usage:
    python main.py simulate [--games N] [--seed S]
    python main.py click X Y [--flag] [--seed S]
"""
import argparse
import logging
import random

from src.minefield.config import GameConfig
from src.minefield.controller import Action, GameController
from src.minefield.player import RandomPlayer


def build_config(args: argparse.Namespace) -> GameConfig:
    """Create the game configuration from command-line options."""
    return GameConfig(
        width=args.width,
        height=args.height,
        num_mines=args.mines,
        cell_size=args.cell_size,
    )


def simulate(args: argparse.Namespace) -> None:
    """Play games with a random player and report how far each got."""
    config = build_config(args)
    rng = random.Random(args.seed)
    player = RandomPlayer(seed=args.seed)
    controller = GameController(config, rng=rng)

    print(
        f"Simulating {args.games} games on {config.width}x{config.height} "
        f"with {config.effective_mines} mines..."
    )

    total_revealed = 0
    hazards_hit = 0
    for game in range(args.games):
        if game > 0:
            controller.restart()
        moves = player.play(controller)
        revealed = len(controller.board.revealed - controller.board.hazards)
        total_revealed += revealed
        if controller.is_over:
            hazards_hit += 1
            outcome = "hazard"
        else:
            outcome = "cleared"

        print(
            f"Game {game + 1}/{args.games} | "
            f"Clicks: {moves} | "
            f"Safe cells revealed: {revealed} | "
            f"Ended on: {outcome}"
        )

    if args.games > 0:
        print(f"\nHazards hit: {hazards_hit}/{args.games}")
        print(f"Avg safe cells revealed: {total_revealed / args.games:.1f}")


def click(args: argparse.Namespace) -> None:
    """Dispatch a single pointer action on a fresh game and show the board."""
    config = build_config(args)
    controller = GameController(config, rng=random.Random(args.seed))
    action = Action.FLAG if args.flag else Action.REVEAL

    result = controller.handle_pointer((args.x, args.y), action)
    if result is None:
        print(f"Position ({args.x}, {args.y}) is off the board")
        return

    print(f"Cell: {result.cell}")
    print(f"Changed: {result.changed}")
    print(f"Cells revealed: {len(result.revealed)}")
    print(f"State: {result.state.name}")
    print()
    grid = controller.board.visibility(show_hazards=controller.is_over)
    # Row 0 is the bottom of the world frame, print it last
    for row in grid[::-1]:
        print(" ".join(f"{value:>2}" for value in row))


def add_board_options(parser: argparse.ArgumentParser) -> None:
    """Add the board configuration options shared by all commands."""
    defaults = GameConfig()
    parser.add_argument("--width", type=int, default=defaults.width, help="Columns")
    parser.add_argument("--height", type=int, default=defaults.height, help="Rows")
    parser.add_argument(
        "--mines", type=int, default=defaults.num_mines, help="Number of mines"
    )
    parser.add_argument(
        "--cell-size",
        type=float,
        default=defaults.cell_size,
        help="Cell edge length in world units",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument(
        "--verbose", action="store_true", help="Log game events to stderr"
    )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - Drive the game core from the command line"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Simulate command
    simulate_parser = subparsers.add_parser(
        "simulate", help="Play games with a random player"
    )
    simulate_parser.add_argument(
        "--games", type=int, default=10, help="Number of games to play"
    )
    add_board_options(simulate_parser)

    # Click command
    click_parser = subparsers.add_parser(
        "click", help="Click once at a world position"
    )
    click_parser.add_argument("x", type=float, help="World x coordinate")
    click_parser.add_argument("y", type=float, help="World y coordinate")
    click_parser.add_argument(
        "--flag", action="store_true", help="Toggle a flag instead of revealing"
    )
    add_board_options(click_parser)

    args = parser.parse_args()

    if getattr(args, "verbose", False):
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command == "simulate":
        simulate(args)
    elif args.command == "click":
        click(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
