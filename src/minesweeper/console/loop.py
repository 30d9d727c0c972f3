"""
Console game loop.

Usage:
    python main.py [--mines N] [--seed S] [--strict-win] [--verbose]
"""
import argparse
import logging
import random
from typing import Callable, Optional, Sequence

from ..board import Board, BoardConfig, GameState, WinRule
from .parser import Action, prompt_move
from .renderer import render_board


logger = logging.getLogger(__name__)

DEFAULT_FIELD_SIZE = 9
DEFAULT_MINES = 8

MINES_PROMPT = "How many mines do you want on the field"
WIN_MESSAGE = "Congratulations! You found all the mines!"
LOSS_MESSAGE = "You stepped on a mine and failed!"
ABORT_MESSAGE = "Game aborted."


def prompt_mine_count(
    field_size: int = DEFAULT_FIELD_SIZE,
    read_line: Optional[Callable[[], str]] = None,
    write: Callable[[str], None] = print,
) -> int:
    """
    Ask how many mines to place.

    Falls back to DEFAULT_MINES when the answer is not a number or does
    not fit on the board.
    """
    if read_line is None:
        read_line = input
    write(MINES_PROMPT)
    answer = read_line()
    try:
        num_mines = int(answer.strip())
    except ValueError:
        return DEFAULT_MINES
    if not 0 <= num_mines <= field_size * field_size - 1:
        return DEFAULT_MINES
    return num_mines


def play(
    board: Board,
    read_line: Optional[Callable[[], str]] = None,
    write: Callable[[str], None] = print,
) -> GameState:
    """
    Run turns until the game is won or lost.

    Each turn draws the board, checks for an outcome, then reads one move
    and applies it.

    Returns:
        Final game state (WON or LOST).
    """
    while True:
        write(render_board(board))

        if board.is_won:
            write(WIN_MESSAGE)
            logger.info("Game won with %d marks", len(board.marked))
            return GameState.WON
        if board.is_lost:
            write(LOSS_MESSAGE)
            logger.info("Game lost after exploring %d cells", len(board.explored))
            return GameState.LOST

        move = prompt_move(board.config.field_size, read_line, write)
        logger.debug("Move %s at %s", move.action.value, move.cell)
        if move.action == Action.FREE:
            board.reveal(move.cell)
        else:
            board.mark(move.cell)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse arguments and run one console game."""
    parser = argparse.ArgumentParser(description="Play Minesweeper in the terminal")
    parser.add_argument(
        "--mines", type=int, default=None,
        help="Number of mines (prompted for when omitted)",
    )
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed for mine placement"
    )
    parser.add_argument(
        "--strict-win", action="store_true",
        help="Require the marked cells to be exactly the mines",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    win_rule = WinRule.MARK_SET if args.strict_win else WinRule.MARK_COUNT

    try:
        num_mines = args.mines
        if num_mines is None:
            num_mines = prompt_mine_count(DEFAULT_FIELD_SIZE)

        try:
            config = BoardConfig(DEFAULT_FIELD_SIZE, num_mines, win_rule)
        except ValueError as error:
            parser.error(str(error))

        board = Board(config, random.Random(args.seed))
        play(board)
    except (EOFError, KeyboardInterrupt):
        print()
        print(ABORT_MESSAGE)
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
