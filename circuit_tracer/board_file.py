"""
Board File Module - Reads circuit boards from text files.

File format:
    The first line holds the number of rows and columns as two integers.
    Each following line is one row of cells. Valid cell characters are:
        'O' an open position
        'X' an occupied, unavailable position
        '1' the start component
        '2' the end component
    Any other character (spaces, tabs) separates cells and is ignored.

Example:
    3 4
    O O 2 X
    O X O O
    1 O O X
"""

import logging
from pathlib import Path
from typing import List, Union

from circuit_tracer.solver.board import ALLOWED_CHARS, CircuitBoard, InvalidBoardError

logger = logging.getLogger(__name__)


def parse_board(text: str) -> CircuitBoard:
    """
    Parse a board from the text of a board file.

    Args:
        text: Full file contents

    Returns:
        Validated CircuitBoard

    Raises:
        InvalidBoardError: For any format or content problem
    """
    lines = text.splitlines()
    # Trailing blank lines are not rows
    while lines and not lines[-1].strip():
        lines.pop()

    if not lines:
        raise InvalidBoardError("Empty board file")

    header = lines[0].split()
    if len(header) != 2:
        raise InvalidBoardError("Wrong number of elements in the header")
    try:
        num_rows = int(header[0])
        num_cols = int(header[1])
    except ValueError:
        raise InvalidBoardError("Failed to parse header") from None
    if num_rows <= 0 or num_cols <= 0:
        raise InvalidBoardError(f"Board dimensions must be positive, got {num_rows}x{num_cols}")

    rows: List[List[str]] = []
    for line in lines[1:]:
        if len(rows) >= num_rows:
            raise InvalidBoardError("Inconsistent row size")
        cells = [ch for ch in line if ch in ALLOWED_CHARS]
        if len(cells) != num_cols:
            raise InvalidBoardError("Inconsistent column size")
        rows.append(cells)

    if len(rows) < num_rows:
        raise InvalidBoardError("Inconsistent row size")

    return CircuitBoard(rows)


def load_board(path: Union[str, Path]) -> CircuitBoard:
    """
    Load a board from a file.

    Args:
        path: Path to the board file

    Returns:
        Validated CircuitBoard

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidBoardError: For any format or content problem
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        text = f.read()

    board = parse_board(text)
    logger.debug(f"Loaded {board.num_rows}x{board.num_cols} board from {path}")
    return board
