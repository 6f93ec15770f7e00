"""Actions exchanged between the agents and the board."""

from typing import NamedTuple, Union

from agent2048.board import Board, DIRECTION_NAMES, ILLEGAL


class Slide(NamedTuple):
    """Player move: slide every tile toward `direction`."""
    direction: int

    def apply(self, board: Board) -> int:
        return board.slide(self.direction)

    def __str__(self) -> str:
        return f"#{DIRECTION_NAMES[self.direction]}"


class Place(NamedTuple):
    """Environment move: drop `tile` (an exponent) into cell `position`."""
    position: int
    tile: int

    def apply(self, board: Board) -> int:
        if not 0 <= self.position < Board.CELLS or board[self.position] != 0:
            return ILLEGAL
        board[self.position] = self.tile
        return 0

    def __str__(self) -> str:
        return f"#P{self.position}={1 << self.tile}"


class NoOp(NamedTuple):
    """No legal move was found; applying it always fails."""

    def apply(self, board: Board) -> int:
        return ILLEGAL

    def __str__(self) -> str:
        return "#N"


Action = Union[Slide, Place, NoOp]
