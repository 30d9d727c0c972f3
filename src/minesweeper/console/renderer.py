"""
Text renderer for the console game.

Draws the board with 1-indexed headers:

     |123456789|
    -|---------|
    1|.../1*...|
    -|---------|
"""
from ..board import Board, OBS_HIDDEN, OBS_MARKED, OBS_MINE


MARKED_GLYPH = "*"
MINE_GLYPH = "X"
EMPTY_GLYPH = "/"
UNKNOWN_GLYPH = "."


def cell_glyph(value: int) -> str:
    """Map an observation value to its display character."""
    if value == OBS_MARKED:
        return MARKED_GLYPH
    if value == OBS_HIDDEN:
        return UNKNOWN_GLYPH
    if value == OBS_MINE:
        return MINE_GLYPH
    if value == 0:
        return EMPTY_GLYPH
    return str(value)


def render_board(board: Board) -> str:
    """
    Render the board as a bordered text grid.

    Args:
        board: Board to draw.

    Returns:
        Multi-line string, without a trailing newline.
    """
    size = board.config.field_size
    obs = board.get_observation()
    border = "-|" + "-" * size + "|"

    header = "".join(str(col + 1) for col in range(size))
    lines = [f" |{header}|", border]
    for row in range(size):
        cells = "".join(cell_glyph(int(value)) for value in obs[row])
        lines.append(f"{row + 1}|{cells}|")
    lines.append(border)
    return "\n".join(lines)
