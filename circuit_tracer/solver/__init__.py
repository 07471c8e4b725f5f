"""
Solver Package - Path search framework for the circuit tracer.

This package finds traces connecting the start ('1') and end ('2')
cells of a circuit board. Solvers are pluggable and consume a frontier
storage whose discipline (stack or queue) fixes exploration order.

Public API:
    - CircuitBoard: Board of cell tags
    - TraceState: One partial or complete trace
    - Storage, StackStorage, QueueStorage: Frontier containers
    - SolveResult, SolveMetrics: Result of a solver run
    - CircuitSolver: Abstract base for solvers
    - create_solver(), create_storage(): Factory functions
    - get_solver_names(): List available solvers
    - describe_solvers(): Summary of solvers for help text

Usage:
    from circuit_tracer.solver import CircuitBoard, create_solver, create_storage

    board = CircuitBoard.from_strings(["1OO", "XXO", "2OO"])

    solver = create_solver("shortest")
    solved_boards = solver.solve(create_storage("queue"), board)

    for solved in solved_boards:
        print(solved)
"""

# Core data structures
from .board import (
    CircuitBoard,
    InvalidBoardError,
    OccupiedPositionError,
    Point,
    OPEN,
    CLOSED,
    TRACE,
    START,
    END,
)
from .trace_state import TraceState
from .storage import (
    DataStructure,
    EmptyStorageError,
    Storage,
    StackStorage,
    QueueStorage,
    create_storage,
)
from .solution import SolveMetrics, SolveResult

# Solver framework
from .base import CircuitSolver, DIRECTIONS
from .factory import (
    create_solver,
    get_solver_names,
    describe_solvers,
    get_default_solver_name,
    DEFAULT_SOLVER,
    register_solver,
)

# Import strategies to register them
from . import strategies

__all__ = [
    # Data structures
    "CircuitBoard",
    "InvalidBoardError",
    "OccupiedPositionError",
    "Point",
    "OPEN",
    "CLOSED",
    "TRACE",
    "START",
    "END",
    "TraceState",
    # Storage
    "DataStructure",
    "EmptyStorageError",
    "Storage",
    "StackStorage",
    "QueueStorage",
    "create_storage",
    # Results
    "SolveMetrics",
    "SolveResult",
    # Solver framework
    "CircuitSolver",
    "DIRECTIONS",
    "create_solver",
    "get_solver_names",
    "describe_solvers",
    "get_default_solver_name",
    "DEFAULT_SOLVER",
    "register_solver",
]
