"""
Strategies Package - Concrete solver implementations.

Import this module to register all built-in solvers.
"""

from .shortest import ShortestSolver
from .everything import EverythingSolver

__all__ = [
    "ShortestSolver",
    "EverythingSolver",
]
