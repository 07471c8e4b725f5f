"""
Shortest Solver - Finds every shortest trace, pruning longer branches.
"""

import logging
from typing import List

from ..base import CircuitSolver
from ..factory import register_solver
from ..solution import SolveMetrics
from ..storage import Storage
from ..trace_state import TraceState

logger = logging.getLogger(__name__)


@register_solver
class ShortestSolver(CircuitSolver):
    """
    Brute force search for all shortest traces.

    Tries every enterable neighbour from the start and keeps extending
    paths until they reach the end, hit a dead end, or grow as long as
    the best complete trace found so far. Complete traces tied with the
    best length are all kept; a strictly shorter one replaces them.

    An incomplete state is expanded only while its length is strictly
    less than the best complete length.
    """
    name = "shortest"
    description = "Shortest (pruned) - All traces of minimum length"

    def _search(self, storage: Storage, metrics: SolveMetrics) -> List[TraceState]:
        found: List[TraceState] = []

        while storage.size() > 0:
            state = storage.retrieve()
            metrics.states_explored += 1
            length = state.path_length()

            if state.is_complete():
                if not found or length == found[0].path_length():
                    found.append(state)
                    logger.debug(f"[{self.name}] Solution {len(found)} of length {length}")
                elif length < found[0].path_length():
                    logger.debug(
                        f"[{self.name}] Shorter solution of length {length} replaces "
                        f"{len(found)} of length {found[0].path_length()}"
                    )
                    found = [state]
            elif not found or length < found[0].path_length():
                self._expand(storage, state)
            else:
                metrics.pruned_branches += 1

        return found
