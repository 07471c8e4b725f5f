"""
Circuit Tracer - Entry Point

Searches for the shortest traces between the start and end components of
a circuit board read from a file, using either a stack or a queue as the
search state storage, and shows the results on the console or in a GUI.

Example:
    python main.py -s -c boards/grid1.dat
    python main.py -q -g boards/grid1.dat
    python main.py -q -c --solver everything boards/grid1.dat
"""

import os
import sys
import logging
import argparse
from typing import List, Optional

from circuit_tracer.board_file import load_board
from circuit_tracer.settings import load_settings
from circuit_tracer.solver import (
    CircuitBoard,
    InvalidBoardError,
    create_solver,
    create_storage,
    describe_solvers,
)


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(debug: bool = False) -> None:
    """
    Configure root logging.

    Args:
        debug: Log at DEBUG level instead of INFO
    """
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
    )


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Circuit Tracer - Find shortest traces between two components on a board"
    )

    storage_group = parser.add_mutually_exclusive_group()
    storage_group.add_argument(
        "-s", dest="storage", action="store_const", const="stack",
        help="Use a stack for storage of states while solving."
    )
    storage_group.add_argument(
        "-q", dest="storage", action="store_const", const="queue",
        help="Use a queue for storage of states while solving."
    )

    output_group = parser.add_mutually_exclusive_group()
    output_group.add_argument(
        "-c", dest="output", action="store_const", const="console",
        help="Output results to the console."
    )
    output_group.add_argument(
        "-g", dest="output", action="store_const", const="gui",
        help="Output results to a GUI."
    )

    parser.add_argument("file", help="Board file to solve")
    parser.add_argument(
        "--solver",
        default=None,
        help=f"Solver to use ({describe_solvers()})"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    return parser.parse_args(argv)


def print_solutions(solved_boards: List[CircuitBoard]) -> None:
    """Print each solved board followed by a blank line."""
    for board in solved_boards:
        print(board)


def show_gui(unsolved_board: CircuitBoard, solved_boards: List[CircuitBoard]) -> int:
    """
    Show results in the solution viewer.

    Returns:
        Exit code of the Qt event loop, or 1 if no display is available
    """
    has_display = (
        os.environ.get("DISPLAY")
        or os.environ.get("WAYLAND_DISPLAY")
        or os.environ.get("QT_QPA_PLATFORM")
        or sys.platform in ("win32", "darwin")
    )
    if not has_display:
        print("Failed to open GUI: No display")
        return 1

    from PyQt5.QtWidgets import QApplication
    from circuit_tracer.viewer import SolutionViewer

    app = QApplication.instance() or QApplication(sys.argv)
    viewer = SolutionViewer(unsolved_board, solved_boards)
    viewer.center_on_screen()
    viewer.show()
    return app.exec_()


def run(args: argparse.Namespace) -> int:
    """
    Load, solve and display a board.

    Options missing from the command line are taken from saved settings.

    Returns:
        Process exit code
    """
    settings = load_settings()
    storage_kind = args.storage or settings["storage"]
    output = args.output or settings["output"]
    solver_name = args.solver or settings["solver_name"]

    try:
        storage = create_storage(storage_kind)
        solver = create_solver(solver_name)
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(e)
        return 2

    try:
        board = load_board(args.file)
    except (OSError, InvalidBoardError) as e:
        logger.error(f"Failed to load board: {e}")
        print(f"{type(e).__name__}: {e}")
        return 1

    logger.info(f"Solving {args.file} with {solver.name} solver, {storage_kind} storage")
    result = solver.run(storage, board)

    if output == "console":
        print_solutions(result.boards)
        return 0
    if output == "gui":
        return show_gui(board, result.boards)

    logger.error(f"Unknown output mode: {output}")
    return 2


def main():
    """Initialize and run the Circuit Tracer."""
    args = parse_args()
    configure_logging(args.debug or load_settings().get("debug_enabled", False))
    sys.exit(run(args))


if __name__ == "__main__":
    main()
