from dataclasses import dataclass
from enum import Enum, IntEnum

from .errors import IllegalMove

BOARD_SIZE = 3  # fixed 3x3 grid


class Cell(Enum):
    """
    contents of one board position
    """
    EMPTY = ""
    PLAYER = "X"
    OPPONENT = "O"


class Mover(Enum):
    """
    who placed a mark: the human or the cpu
    """
    PLAYER = "player"
    OPPONENT = "cpu"

    @property
    def mark(self):
        # cell value this mover writes
        return Cell.PLAYER if self is Mover.PLAYER else Cell.OPPONENT


class LineKind(Enum):
    ROW = "row"
    COLUMN = "column"
    DIAGONAL = "diagonal"


class Diagonal(IntEnum):
    MAIN = 0   # (0,0) (1,1) (2,2)
    ANTI = 1   # (0,2) (1,1) (2,0)


@dataclass(frozen=True)
class WinningLine:
    """
    which of the eight lines was completed
    """
    kind: LineKind
    index: int

    @classmethod
    def row(cls, i):
        return cls(LineKind.ROW, i)

    @classmethod
    def column(cls, j):
        return cls(LineKind.COLUMN, j)

    @classmethod
    def diagonal(cls, which):
        return cls(LineKind.DIAGONAL, Diagonal(which))

    def cells(self):
        """
        the three (row, col) positions the line covers
        """
        n = BOARD_SIZE
        if self.kind is LineKind.ROW:
            return [(self.index, c) for c in range(n)]
        if self.kind is LineKind.COLUMN:
            return [(r, self.index) for r in range(n)]
        if self.index == Diagonal.MAIN:
            return [(i, i) for i in range(n)]
        return [(i, n - 1 - i) for i in range(n)]

    def __str__(self):
        if self.kind is LineKind.DIAGONAL:
            return f"{Diagonal(self.index).name.lower()} diagonal"
        return f"{self.kind.value} {self.index}"


# scan order: rows, columns, main diagonal, anti-diagonal
LINES = (
    [WinningLine.row(i) for i in range(BOARD_SIZE)]
    + [WinningLine.column(j) for j in range(BOARD_SIZE)]
    + [WinningLine.diagonal(Diagonal.MAIN), WinningLine.diagonal(Diagonal.ANTI)]
)


class Board:
    """
    3x3 grid of cells and the queries the match needs
    """
    size = BOARD_SIZE

    def __init__(self):
        self._cells = [[Cell.EMPTY for _ in range(self.size)]
                       for _ in range(self.size)]

    def clear(self):
        for row in self._cells:
            for c in range(self.size):
                row[c] = Cell.EMPTY

    def _check_bounds(self, r, c):
        if not (0 <= r < self.size and 0 <= c < self.size):
            raise IllegalMove(f"cell ({r}, {c}) is off the board")

    def __getitem__(self, pos):
        r, c = pos
        self._check_bounds(r, c)
        return self._cells[r][c]

    def is_empty(self, r, c):
        return self[r, c] is Cell.EMPTY

    def place(self, r, c, mover: Mover):
        """
        write mover's mark into an empty cell
        raises IllegalMove when off the board or occupied
        """
        if not self.is_empty(r, c):
            raise IllegalMove(
                f"cell ({r}, {c}) already holds {self._cells[r][c].value}")
        self._cells[r][c] = mover.mark

    def empty_cells(self):
        # row-major
        return [(r, c) for r in range(self.size) for c in range(self.size)
                if self._cells[r][c] is Cell.EMPTY]

    def has_free_cell(self):
        return any(cell is Cell.EMPTY for row in self._cells for cell in row)

    def count(self, cell: Cell):
        return sum(row.count(cell) for row in self._cells)

    def winning_line(self):
        """
        first completed line in scan order, or None
        """
        for line in LINES:
            (r0, c0), (r1, c1), (r2, c2) = line.cells()
            first = self._cells[r0][c0]
            if first is not Cell.EMPTY \
               and first is self._cells[r1][c1] is self._cells[r2][c2]:
                return line
        return None

    def __str__(self):
        return "\n".join("|".join(cell.value or " " for cell in row)
                         for row in self._cells)
