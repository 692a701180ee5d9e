# myrtle/domains/turtle/state.py
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Tuple


class Heading(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def right(self) -> "Heading":
        return Heading((self + 1) % 4)

    def left(self) -> "Heading":
        return Heading((self - 1) % 4)


# (row delta, col delta) for a single forward step.
STEP_DELTAS = {
    Heading.NORTH: (-1, 0),
    Heading.EAST: (0, 1),
    Heading.SOUTH: (1, 0),
    Heading.WEST: (0, -1),
}


def clamp(value: int, upper: int) -> int:
    """Saturates value into [0, upper)."""
    return max(0, min(value, upper - 1))


@dataclass
class PenState:
    down: bool = False
    glyph: str = ' '


@dataclass
class TurtleState:
    """
    Where Myrtle is, which way she faces and what her pen is doing.

    Position is always inside a rows x cols grid; every setter clamps
    instead of rejecting out-of-range values.
    """
    rows: int
    cols: int
    heading: Heading = Heading.EAST
    row: int = 0
    col: int = 0
    pen: PenState = field(default_factory=PenState)
    line: int = 1

    def __post_init__(self):
        self.move_to(self.row, self.col)

    @property
    def position(self) -> Tuple[int, int]:
        return (self.row, self.col)

    def move_to(self, row: int, col: int):
        self.row = clamp(row, self.rows)
        self.col = clamp(col, self.cols)

    def step(self, direction: int = 1):
        """Moves one square along the heading; direction -1 steps backwards."""
        d_row, d_col = STEP_DELTAS[self.heading]
        self.move_to(self.row + direction * d_row, self.col + direction * d_col)

    def turn_left(self):
        self.heading = self.heading.left()

    def turn_right(self):
        self.heading = self.heading.right()
