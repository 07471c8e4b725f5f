"""
Solution Module - Result of a solver run.
"""

from dataclasses import dataclass, field
from typing import List

from .board import CircuitBoard, TRACE


@dataclass
class SolveMetrics:
    """
    Performance metrics for one solver run.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        states_explored: Number of trace states retrieved from storage
        pruned_branches: Incomplete states dropped without expansion
        peak_frontier: Largest storage size reached
        solver_name: Name of solver that produced the result
        storage_kind: Discipline of the storage used ("stack" or "queue")
    """
    computation_time_ms: float = 0.0
    states_explored: int = 0
    pruned_branches: int = 0
    peak_frontier: int = 0
    solver_name: str = ""
    storage_kind: str = ""


@dataclass
class SolveResult:
    """
    Solved boards with the metrics of the run that found them.

    Attributes:
        boards: Solved boards in discovery order
        metrics: Performance statistics
    """
    boards: List[CircuitBoard] = field(default_factory=list)
    metrics: SolveMetrics = field(default_factory=SolveMetrics)

    @property
    def solution_count(self) -> int:
        """Number of solved boards."""
        return len(self.boards)

    @property
    def has_solutions(self) -> bool:
        """Check if any path was found."""
        return len(self.boards) > 0

    @property
    def path_length(self) -> int:
        """
        Path length of the first solution.

        Counts trace cells plus the end cell, matching TraceState.path_length().
        Returns 0 when there are no solutions.
        """
        if not self.boards:
            return 0
        return self.boards[0].count(TRACE) + 1

    def get_board(self, index: int) -> CircuitBoard:
        """
        Get solved board at index.

        Raises:
            IndexError: If index out of range
        """
        return self.boards[index]
