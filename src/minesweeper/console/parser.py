"""
Move parsing for the console game.

Players type ``column row action`` with 1-indexed column and row, and
``free`` or ``mine`` as the action. Parsed moves carry 0-indexed
(row, col) coordinates.
"""
from enum import Enum
from typing import Callable, NamedTuple, Optional

from ..coordinate import Coordinate


MOVE_PROMPT = "Set/unset mine marks or claim a cell as free:"


class Action(Enum):
    """What the player wants to do with a cell."""

    FREE = "free"
    MINE = "mine"


class Move(NamedTuple):
    """A parsed player move."""

    cell: Coordinate
    action: Action


class InvalidMoveError(ValueError):
    """Raised when an input line is not a valid move."""


def _parse_index(token: str, name: str, field_size: int) -> int:
    try:
        value = int(token)
    except ValueError:
        raise InvalidMoveError(f"{name} must be a number, got {token!r}") from None
    if not 1 <= value <= field_size:
        raise InvalidMoveError(f"{name} must be between 1 and {field_size}")
    return value - 1


def parse_move(line: str, field_size: int) -> Move:
    """
    Parse a ``column row action`` line.

    Args:
        line: Raw player input.
        field_size: Side of the board, bounding column and row.

    Returns:
        Move with a 0-indexed (row, col) cell.

    Raises:
        InvalidMoveError: If the line cannot be parsed.
    """
    tokens = line.split()
    if len(tokens) != 3:
        raise InvalidMoveError("Expected: <column> <row> <free|mine>")

    col = _parse_index(tokens[0], "Column", field_size)
    row = _parse_index(tokens[1], "Row", field_size)
    try:
        action = Action(tokens[2].lower())
    except ValueError:
        raise InvalidMoveError(
            f"Action must be 'free' or 'mine', got {tokens[2]!r}"
        ) from None

    return Move(Coordinate(row, col), action)


def prompt_move(
    field_size: int,
    read_line: Optional[Callable[[], str]] = None,
    write: Callable[[str], None] = print,
) -> Move:
    """
    Ask for a move until the player enters a valid one.

    EOFError from read_line is not caught.
    """
    if read_line is None:
        read_line = input
    write(MOVE_PROMPT)
    while True:
        line = read_line()
        try:
            return parse_move(line, field_size)
        except InvalidMoveError as error:
            write(str(error))
