"""
Solver Factory Module - Registry of circuit solvers, looked up by name.

Solvers register themselves with @register_solver when the strategies
package is imported. Names are what the command line and config.json
use to pick a solver.
"""

from typing import Dict, List, Type

from .base import CircuitSolver


DEFAULT_SOLVER = "shortest"

# Global registry of solvers, in registration order
_SOLVERS: Dict[str, Type[CircuitSolver]] = {}


def register_solver(cls: Type[CircuitSolver]) -> Type[CircuitSolver]:
    """
    Decorator to register a solver class under its name attribute.

    Raises:
        ValueError: If a different class already uses that name
    """
    existing = _SOLVERS.get(cls.name)
    if existing is not None and existing is not cls:
        raise ValueError(f"Solver name '{cls.name}' already registered by {existing.__name__}")
    _SOLVERS[cls.name] = cls
    return cls


def create_solver(name: str) -> CircuitSolver:
    """
    Create a solver by name.

    Solvers keep no state between runs, so a fresh instance is cheap.

    Raises:
        ValueError: If solver name not found
    """
    if name not in _SOLVERS:
        raise ValueError(f"Unknown solver: {name}. Available: {', '.join(_SOLVERS)}")
    return _SOLVERS[name]()


def get_solver_names() -> List[str]:
    """Registered solver names in registration order."""
    return list(_SOLVERS)


def describe_solvers() -> str:
    """
    One-line summary of the registered solvers for command line help.

    Returns:
        Text like "shortest: ...; everything: ..."
    """
    return "; ".join(f"{name}: {cls.description}" for name, cls in _SOLVERS.items())


def get_default_solver_name() -> str:
    """
    Name of the solver used when none is configured.

    Raises:
        LookupError: If the default solver is not registered
    """
    if DEFAULT_SOLVER not in _SOLVERS:
        raise LookupError(f"Default solver '{DEFAULT_SOLVER}' is not registered")
    return DEFAULT_SOLVER
