# annotator/board.py

from typing import List, Optional, Union

import numpy as np

from .errors import InvalidCharacter, InvalidShape
from .symbols import DEFAULT_SYMBOLS, Symbols
from .utils import get_neighbors, to_grid


class MinesweeperBoard:
    """
    A Minesweeper board read from text.

    cells holds one int per position in row-major order:
    -1 = mine, 0-8 = adjacent mine count (all 0 until counted).

    Lifecycle: created empty, populated once, counted once, then read-only.
    A failed populate() leaves cells empty; rows/cols keep whatever the
    shape scan found so the caller can still report them.
    """
    MINE = -1

    def __init__(self, symbols: Optional[Symbols] = None):
        self.symbols = symbols if symbols is not None else DEFAULT_SYMBOLS

        self.rows = 0
        self.cols = 0
        self.cells: List[int] = []

        self.populated = False
        self.counted = False

    @classmethod
    def from_text(cls, data: Union[str, bytes], symbols: Optional[Symbols] = None) -> "MinesweeperBoard":
        """Populate and count a new board in one go."""
        board = cls(symbols)
        board.populate(data)
        board.count_adjacent_mines()
        return board

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def populate(self, data: Union[str, bytes]) -> None:
        """
        Fill the board from raw text or UTF-8 bytes.

        Raises InvalidCharacter for anything that is not a mine, an empty
        cell, a line break or a carriage return, and InvalidShape when a
        row does not have as many cells as the first one.
        """
        if self.populated:
            raise ValueError("board is already populated")

        text = self._decode(data)
        self.cols = self._count_columns(text)
        self.rows = self._count_rows(text)

        # Only assigned on success: a failed parse never exposes partial cells.
        self.cells = self._parse(text, self.cols)
        self.populated = True

    @staticmethod
    def _decode(data: Union[str, bytes]) -> str:
        if isinstance(data, str):
            return data
        raw = bytes(data)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as e:
            line = raw[:e.start].count(b"\n") + 1
            raise InvalidCharacter(raw[e.start:e.end], line) from e

    def _count_columns(self, text: str) -> int:
        columns = 0
        for char in text:
            if char == "\n":
                break
            if self.symbols.is_cell(char):
                columns += 1
        return columns

    def _count_rows(self, text: str) -> int:
        rows = text.count("\n")
        # A trailing line without a line break still counts if it holds cells.
        tail = text[text.rfind("\n") + 1:]
        if any(self.symbols.is_cell(char) for char in tail):
            rows += 1
        return rows

    def _parse(self, text: str, cols: int) -> List[int]:
        mine = self.symbols.mine
        empty = self.symbols.empty

        cells = []
        line = 1
        column = 0
        in_row = 0

        for char in text:
            if char == "\n":
                if in_row != cols:
                    raise InvalidShape(cols, in_row, line)
                line += 1
                column = 0
                in_row = 0
                continue

            column += 1
            if char == "\r":
                continue
            if char == mine:
                cells.append(self.MINE)
            elif char in empty:
                cells.append(0)
            else:
                raise InvalidCharacter(char, line, column)
            in_row += 1

        if in_row and in_row != cols:
            raise InvalidShape(cols, in_row, line)
        return cells

    # ------------------------------------------------------------------
    # Counting
    # ------------------------------------------------------------------

    def count_adjacent_mines(self) -> None:
        """
        Add one to every non-mine neighbour of every mine.
        Does nothing on a board that holds no successful parse, and counts
        are only accumulated the first time it runs after one.
        """
        if self.counted or not self.populated:
            return

        for index, value in enumerate(self.cells):
            if value != self.MINE:
                continue
            row, col = divmod(index, self.cols)
            for nr, nc in get_neighbors(row, col, self.rows, self.cols):
                neighbor = nr * self.cols + nc
                if self.cells[neighbor] != self.MINE:
                    self.cells[neighbor] += 1

        self.counted = True

    # ------------------------------------------------------------------
    # Reading
    # ------------------------------------------------------------------

    def is_mine(self, row: int, col: int) -> bool:
        return self.is_valid_coord(row, col) and self.cells[row * self.cols + col] == self.MINE

    def is_valid_coord(self, row: int, col: int) -> bool:
        return self.populated and 0 <= row < self.rows and 0 <= col < self.cols

    def mine_count(self) -> int:
        return sum(1 for value in self.cells if value == self.MINE)

    def to_array(self) -> np.ndarray:
        if not self.populated:
            return to_grid([], 0, 0)
        return to_grid(self.cells, self.rows, self.cols)

    def _glyph(self, value: int) -> str:
        if value == self.MINE:
            return self.symbols.mine
        if value == 0:
            return self.symbols.empty_display
        return str(value)

    def render(self) -> str:
        # rows/cols outlive a failed parse; there is nothing to draw then.
        if not self.populated:
            return ""
        lines = []
        for r in range(self.rows):
            start = r * self.cols
            row = self.cells[start:start + self.cols]
            lines.append("".join(self._glyph(value) for value in row) + "\n")
        return "".join(lines)

    def __str__(self):
        return self.render()
