# myrtle/domains/turtle/canvas.py
from typing import IO, Iterator, List


class Canvas:
    """Myrtle's world: a fixed grid of characters stored row-major in one buffer."""

    BLANK = ' '

    def __init__(self, rows: int, cols: int):
        if rows <= 0 or cols <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {rows}x{cols}.")
        self.rows = rows
        self.cols = cols
        self._cells: List[str] = []
        self.clear()

    def clear(self):
        self._cells = [self.BLANK] * (self.rows * self.cols)

    def _index(self, row: int, col: int) -> int:
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexError(f"Cell ({row}, {col}) is outside the {self.rows}x{self.cols} canvas.")
        return row * self.cols + col

    def char_at(self, row: int, col: int) -> str:
        return self._cells[self._index(row, col)]

    def draw_at(self, row: int, col: int, glyph: str):
        # Pen state is the caller's concern; this always writes.
        self._cells[self._index(row, col)] = glyph

    def render(self) -> Iterator[str]:
        for row in range(self.rows):
            start = row * self.cols
            yield "".join(self._cells[start:start + self.cols]) + "\n"

    def write(self, stream: IO[str]):
        for line in self.render():
            stream.write(line)
        stream.flush()

    def __str__(self):
        return "".join(self.render())
