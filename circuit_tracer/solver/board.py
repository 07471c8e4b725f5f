"""
Board Module - Circuit board grid representation for the circuit tracer.
"""

from typing import Iterable, List, Optional, Tuple

import numpy as np


Point = Tuple[int, int]  # (row, col)

# Cell tags
OPEN = "O"
CLOSED = "X"
TRACE = "T"
START = "1"
END = "2"
ALLOWED_CHARS = "OXT12"


class InvalidBoardError(ValueError):
    """Raised when board data has a format or content problem."""


class OccupiedPositionError(RuntimeError):
    """Raised when a trace is placed on a position that is not open."""


class CircuitBoard:
    """
    2D circuit board of cell tags.

    Cells are stored in a numpy character array indexed [row][col].
    Start and end points are located once at construction and never
    change afterwards; duplicate() is the only way search branches
    obtain a board they are allowed to mark.

    Attributes:
        starting_point: (row, col) of the '1' cell
        ending_point: (row, col) of the '2' cell
        num_rows: Number of rows
        num_cols: Number of columns
    """

    def __init__(self, rows: Iterable[Iterable[str]]):
        """
        Build and validate a board from rows of cell tags.

        Args:
            rows: Iterable of rows, each an iterable of single-character tags

        Raises:
            InvalidBoardError: If rows are ragged, contain unknown or trace
                tags, or there is not exactly one start and one end
        """
        grid = [list(row) for row in rows]
        if not grid or not grid[0]:
            raise InvalidBoardError("Board has no cells")

        cols = len(grid[0])
        start: Optional[Point] = None
        end: Optional[Point] = None

        for r, row in enumerate(grid):
            if len(row) != cols:
                raise InvalidBoardError("Inconsistent column size")
            for c, tag in enumerate(row):
                # Exactly one allowed character per cell
                if not isinstance(tag, str) or len(tag) != 1 or tag not in ALLOWED_CHARS:
                    raise InvalidBoardError(f"Unexpected cell {tag!r} at row {r}, col {c}")
                if tag == TRACE:
                    raise InvalidBoardError(f"Unsolved board contains a trace at row {r}, col {c}")
                if tag == START:
                    if start is not None:
                        raise InvalidBoardError("More than 1 starting point found")
                    start = (r, c)
                elif tag == END:
                    if end is not None:
                        raise InvalidBoardError("More than 1 ending point found")
                    end = (r, c)

        if start is None:
            raise InvalidBoardError("No start cell found")
        if end is None:
            raise InvalidBoardError("No end cell found")

        self._cells = np.array(grid, dtype="<U1")
        self._start = start
        self._end = end

    @classmethod
    def from_strings(cls, lines: List[str]) -> 'CircuitBoard':
        """
        Create a board from compact row strings such as "1OX2".

        Whitespace inside a line is ignored.

        Args:
            lines: One string per row

        Returns:
            CircuitBoard instance
        """
        return cls([ch for ch in line if not ch.isspace()] for line in lines)

    @classmethod
    def _from_array(cls, cells: np.ndarray, start: Point, end: Point) -> 'CircuitBoard':
        """Build a board around an existing array without re-validating it."""
        board = cls.__new__(cls)
        board._cells = cells
        board._start = start
        board._end = end
        return board

    def duplicate(self) -> 'CircuitBoard':
        """
        Deep copy of this board, including start and end points.

        Returns:
            New CircuitBoard that shares no cell storage with this one
        """
        return CircuitBoard._from_array(self._cells.copy(), self._start, self._end)

    def in_bounds(self, row: int, col: int) -> bool:
        """Check whether (row, col) lies on the board."""
        return 0 <= row < self.num_rows and 0 <= col < self.num_cols

    def char_at(self, row: int, col: int) -> str:
        """
        Get the tag at a board position.

        Args:
            row: Row index
            col: Column index

        Returns:
            Single-character cell tag

        Raises:
            IndexError: If the position is off the board
        """
        if not self.in_bounds(row, col):
            raise IndexError(f"Position ({row}, {col}) is outside a {self.num_rows}x{self.num_cols} board")
        return str(self._cells[row, col])

    def is_open(self, row: int, col: int) -> bool:
        """
        Check whether a position is open.

        Returns:
            False for positions off the board or not tagged 'O'
        """
        if not self.in_bounds(row, col):
            return False
        return bool(self._cells[row, col] == OPEN)

    def make_trace(self, row: int, col: int) -> None:
        """
        Mark an open position as part of the trace.

        Raises:
            OccupiedPositionError: If the position is not open
        """
        if not self.is_open(row, col):
            found = self.char_at(row, col) if self.in_bounds(row, col) else "off board"
            raise OccupiedPositionError(f"row {row}, col {col} contains '{found}'")
        self._cells[row, col] = TRACE

    @property
    def starting_point(self) -> Point:
        """(row, col) of the start cell."""
        return self._start

    @property
    def ending_point(self) -> Point:
        """(row, col) of the end cell."""
        return self._end

    @property
    def num_rows(self) -> int:
        """Get number of rows in board."""
        return int(self._cells.shape[0])

    @property
    def num_cols(self) -> int:
        """Get number of columns in board."""
        return int(self._cells.shape[1])

    def count(self, tag: str) -> int:
        """Count cells carrying the given tag."""
        return int(np.count_nonzero(self._cells == tag))

    def trace_points(self) -> List[Point]:
        """
        List trace positions in row-major order.

        Returns:
            List of (row, col) tuples tagged 'T'
        """
        rows, cols = np.nonzero(self._cells == TRACE)
        return [(int(r), int(c)) for r, c in zip(rows, cols)]

    def to_rows(self) -> List[str]:
        """
        Convert to compact row strings.

        Returns:
            One string per row, one character per cell
        """
        return ["".join(row) for row in self._cells.tolist()]

    def __eq__(self, other):
        """Boards are equal when their cells and endpoints match."""
        if not isinstance(other, CircuitBoard):
            return NotImplemented
        return (self._start == other._start and self._end == other._end
                and np.array_equal(self._cells, other._cells))

    # Boards are mutable while a trace is laid down
    __hash__ = None

    def __repr__(self):
        return f"CircuitBoard({self.num_rows}x{self.num_cols}, start={self._start}, end={self._end})"

    def __str__(self):
        """Render as the console format: each tag followed by a space, one line per row."""
        return "".join(
            "".join(f"{tag} " for tag in row) + "\n"
            for row in self._cells.tolist()
        )
