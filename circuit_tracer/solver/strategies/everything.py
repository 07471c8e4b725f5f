"""
Everything Solver - Collects every trace regardless of length.
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
class EverythingSolver(CircuitSolver):
    """
    Exhaustive search that keeps every complete trace.

    Same expansion as the shortest solver without the length gate, so
    it visits a superset of its states and is much slower on open
    boards. Useful for checking that the pruned search misses nothing.
    """
    name = "everything"
    description = "Everything (exhaustive) - Every trace of any length"

    def _search(self, storage: Storage, metrics: SolveMetrics) -> List[TraceState]:
        found: List[TraceState] = []

        while storage.size() > 0:
            state = storage.retrieve()
            metrics.states_explored += 1

            if state.is_complete():
                found.append(state)
                logger.debug(f"[{self.name}] Solution {len(found)} of length {state.path_length()}")
            else:
                self._expand(storage, state)

        return found
