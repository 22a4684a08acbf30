"""The fifteen sliding-tile puzzle on a 4 x 4 board."""

from __future__ import annotations

from enum import Enum
from typing import Iterable, Optional, Sequence, TextIO, Union

SIZE = 4
BLANK = SIZE * SIZE

START_TILES = (
    (1, 4, 15, 7),
    (8, 10, 2, 11),
    (14, 3, 6, 13),
    (12, 9, 5, 16),
)

SOLVED_TILES = tuple(
    tuple(range(row * SIZE + 1, row * SIZE + SIZE + 1)) for row in range(SIZE)
)


class Direction(Enum):
    """Which way a tile slides; values are the arrow-key scan codes."""

    UP = 72
    DOWN = 80
    LEFT = 75
    RIGHT = 77


# Offset from the blank to the tile that slides into it.
_OFFSETS = {
    Direction.UP: (1, 0),
    Direction.DOWN: (-1, 0),
    Direction.LEFT: (0, 1),
    Direction.RIGHT: (0, -1),
}


class FifteenPuzzle:
    """A board of tiles 1..15 plus the blank, written as 16."""

    def __init__(self, tiles: Sequence[Sequence[int]] = START_TILES) -> None:
        grid = [list(row) for row in tiles]
        if len(grid) != SIZE or any(len(row) != SIZE for row in grid):
            raise ValueError(f"board must be {SIZE} x {SIZE}")
        if sorted(value for row in grid for value in row) != list(range(1, BLANK + 1)):
            raise ValueError(f"board must hold each of 1..{BLANK} once")
        self._grid = grid
        self._blank = next(
            (r, c)
            for r, row in enumerate(grid)
            for c, value in enumerate(row)
            if value == BLANK
        )
        self.moves = 0

    @property
    def tiles(self) -> tuple[tuple[int, ...], ...]:
        return tuple(tuple(row) for row in self._grid)

    @property
    def blank(self) -> tuple[int, int]:
        """Row and column of the blank."""
        return self._blank

    def move(self, direction: Union[Direction, int]) -> bool:
        """Slide a tile into the blank; return whether a tile moved.

        Every call counts as a move, including one blocked by the edge.
        """
        direction = Direction(direction)
        dr, dc = _OFFSETS[direction]
        row, col = self._blank
        new_row, new_col = row + dr, col + dc
        self.moves += 1
        if not (0 <= new_row < SIZE and 0 <= new_col < SIZE):
            return False
        grid = self._grid
        grid[row][col], grid[new_row][new_col] = grid[new_row][new_col], grid[row][col]
        self._blank = (new_row, new_col)
        return True

    def is_solved(self) -> bool:
        return self.tiles == SOLVED_TILES

    def render(self) -> str:
        """Return the board as text, the blank shown as spaces."""
        return "\n".join(
            " ".join("  " if value == BLANK else f"{value:>2}" for value in row)
            for row in self._grid
        )


def play(keys: Iterable[Union[str, int, Direction]], output: TextIO) -> Optional[int]:
    """Play from the starting board, reading moves from ``keys``.

    A key is a Direction, an arrow scan code, or ``"q"`` to quit; other keys
    are ignored. Returns the number of moves on a win, or None when the
    player quits or the keys run out.
    """
    puzzle = FifteenPuzzle()
    output.write(puzzle.render() + "\n\n")
    output.write("Press the arrow keys to arrange.\nPress 'q' to quit.\n")
    for key in keys:
        if isinstance(key, str):
            if key.lower() == "q":
                break
            continue
        try:
            direction = Direction(key)
        except ValueError:
            continue
        puzzle.move(direction)
        output.write("\n" + puzzle.render() + "\n")
        if puzzle.is_solved():
            output.write(
                f"WINNER WINNER CHICKEN DINNER with {puzzle.moves} Moves !!!\n"
            )
            return puzzle.moves
    output.write(">>> GAME OVER <<<\n")
    return None