"""
Trace State Module - One partial or complete path through a circuit board.
"""

from typing import Tuple

from .board import CircuitBoard, Point


def can_enter(board: CircuitBoard, row: int, col: int) -> bool:
    """True if a trace may step onto (row, col): an open cell or the end cell."""
    return (row, col) == board.ending_point or board.is_open(row, col)


class TraceState:
    """
    Search state for a single candidate trace.

    Each state owns a private duplicate of the board with every visited
    position tagged 'T', so sibling branches never see each other's marks.
    The end cell keeps its '2' tag when the path reaches it.

    Attributes:
        path: Visited (row, col) positions, starting next to the start cell
    """

    def __init__(self, source: 'TraceState', row: int, col: int):
        """
        Extend a parent state by one position.

        Args:
            source: Parent state to branch from
            row: Row of the next position
            col: Column of the next position

        Raises:
            OccupiedPositionError: If the position is neither open nor the end
        """
        self._board, self.path = self._branch(source.get_board(), source.path, row, col)

    @classmethod
    def from_board(cls, board: CircuitBoard, row: int, col: int) -> 'TraceState':
        """
        Create a first-move state from an unsolved board.

        The unsolved board is duplicated, never modified.

        Args:
            board: Unsolved board
            row: Row of a position adjacent to the start
            col: Column of a position adjacent to the start

        Returns:
            TraceState with a one-position path
        """
        state = cls.__new__(cls)
        state._board, state.path = cls._branch(board, (), row, col)
        return state

    @staticmethod
    def _branch(board: CircuitBoard, path: Tuple[Point, ...],
                row: int, col: int) -> Tuple[CircuitBoard, Tuple[Point, ...]]:
        """Duplicate board, mark (row, col) and return it with the extended path."""
        new_board = board.duplicate()
        if (row, col) != new_board.ending_point:
            new_board.make_trace(row, col)
        return new_board, path + ((row, col),)

    def is_open(self, row: int, col: int) -> bool:
        """
        Check whether the path may step onto a position.

        Open cells of the owned board are enterable, and so is the end cell.
        """
        return can_enter(self._board, row, col)

    def is_complete(self) -> bool:
        """True when the last visited position is the end cell."""
        return self.path[-1] == self._board.ending_point

    def path_length(self) -> int:
        """Number of positions visited so far."""
        return len(self.path)

    @property
    def last_point(self) -> Point:
        """Most recently visited position."""
        return self.path[-1]

    def get_path(self) -> Tuple[Point, ...]:
        """Visited positions in order."""
        return self.path

    def get_board(self) -> CircuitBoard:
        """Board owned by this state, with the path traced on it."""
        return self._board

    def __repr__(self):
        return f"TraceState(length={self.path_length()}, last={self.last_point}, complete={self.is_complete()})"
