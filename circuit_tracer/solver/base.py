"""
Base Solver Module - Abstract base class for circuit solvers.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import List, Tuple

from .board import CircuitBoard
from .solution import SolveMetrics, SolveResult
from .storage import Storage
from .trace_state import TraceState, can_enter

logger = logging.getLogger(__name__)

# Branch order: right, left, down, up (row, col deltas)
DIRECTIONS: Tuple[Tuple[int, int], ...] = (
    (0, 1),
    (0, -1),
    (1, 0),
    (-1, 0),
)


class CircuitSolver(ABC):
    """
    Abstract base class for all circuit solvers.

    Subclasses implement _search() and define name and description
    class attributes. Seeding and branching are shared so every solver
    explores neighbours in the same fixed order.

    Attributes:
        name: Short identifier for the solver
        description: Human-readable description for UI and CLI help
    """
    name: str = "base"
    description: str = "Base solver"

    def solve(self, storage: Storage, board: CircuitBoard) -> List[CircuitBoard]:
        """
        Find solved boards for an unsolved board.

        Args:
            storage: Empty storage that fixes exploration order
            board: Unsolved board; it is never modified

        Returns:
            Solved boards with the trace marked, empty if no path exists
        """
        return self.run(storage, board).boards

    def run(self, storage: Storage, board: CircuitBoard) -> SolveResult:
        """
        Solve and report metrics.

        Args:
            storage: Empty storage that fixes exploration order
            board: Unsolved board

        Returns:
            SolveResult with boards and metrics

        Raises:
            ValueError: If storage is not empty
        """
        if storage.size() != 0:
            raise ValueError(f"Storage must be empty before solving, has {storage.size()} items")

        start_time = time.perf_counter()
        metrics = SolveMetrics(
            solver_name=self.name,
            storage_kind=storage.discipline.value,
        )

        self._seed(storage, board)
        states = self._search(storage, metrics)

        metrics.computation_time_ms = (time.perf_counter() - start_time) * 1000
        metrics.peak_frontier = storage.peak_size

        logger.info(
            f"[{self.name}] {len(states)} solution(s) on {board.num_rows}x{board.num_cols} board "
            f"using {metrics.storage_kind}: {metrics.states_explored} states explored, "
            f"{metrics.pruned_branches} pruned, peak frontier {metrics.peak_frontier}, "
            f"{metrics.computation_time_ms:.1f}ms"
        )

        return SolveResult(boards=[state.get_board() for state in states], metrics=metrics)

    @abstractmethod
    def _search(self, storage: Storage, metrics: SolveMetrics) -> List[TraceState]:
        """
        Drain the seeded storage.

        Must only call storage.retrieve() while storage.size() > 0.

        Args:
            storage: Storage holding the first moves
            metrics: Metrics to update while searching

        Returns:
            Accepted complete states in discovery order
        """
        pass

    def _seed(self, storage: Storage, board: CircuitBoard) -> None:
        """Store a first-move state for every enterable neighbour of the start."""
        start_row, start_col = board.starting_point
        for d_row, d_col in DIRECTIONS:
            row, col = start_row + d_row, start_col + d_col
            if can_enter(board, row, col):
                storage.store(TraceState.from_board(board, row, col))

    def _expand(self, storage: Storage, state: TraceState) -> int:
        """
        Store a child state for every enterable neighbour of the path's end.

        Returns:
            Number of children stored
        """
        last_row, last_col = state.last_point
        children = 0
        for d_row, d_col in DIRECTIONS:
            row, col = last_row + d_row, last_col + d_col
            if state.is_open(row, col):
                storage.store(TraceState(state, row, col))
                children += 1
        return children
